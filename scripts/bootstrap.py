"""Locate the repository root so command-line scripts can import ``src``."""
from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

_ROOT_MARKERS = ("pyproject.toml", "src")


def _resolve_project_root() -> Path:
    candidate = Path(__file__).resolve().parents[1]
    if not all((candidate / marker).exists() for marker in _ROOT_MARKERS):
        raise RuntimeError(
            f"Could not locate the project root from {candidate}; expected "
            + " and ".join(_ROOT_MARKERS)
            + " next to scripts/."
        )
    return candidate


@lru_cache(maxsize=1)
def bootstrap_project() -> Path:
    """Put the project root on ``sys.path`` once and return it."""

    project_root = _resolve_project_root()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))
    return project_root
