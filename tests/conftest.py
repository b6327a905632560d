"""Pytest configuration for the project."""
from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for candidate in (ROOT, SRC):
    if str(candidate) not in sys.path:
        sys.path.insert(0, str(candidate))

from src.core.entities import Person  # noqa: E402

REFERENCE_TIME = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture
def sample_people() -> list[Person]:
    return [
        Person(id="1", name="John Doe", age=25, created_at=datetime(2024, 1, 1, tzinfo=timezone.utc), gender="male"),
        Person(id="2", name="Jane Smith", age=30, created_at=datetime(2024, 1, 2, tzinfo=timezone.utc), gender="male"),
        Person(id="3", name="Bob Johnson", age=45, created_at=datetime(2024, 1, 3, tzinfo=timezone.utc), gender="male"),
        Person(id="4", name="Alice Williams", age=None, created_at=datetime(2024, 1, 4, tzinfo=timezone.utc), gender="male"),
    ]
