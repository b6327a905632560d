"""Persist demographics summaries as JSON documents."""
from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from src.core.entities import DemographicsData


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serialisable")


def demographics_to_dict(data: DemographicsData) -> Mapping[str, Any]:
    """Return ``data`` as plain mappings and lists, timestamps as ISO-8601 strings."""

    return json.loads(json.dumps(asdict(data), default=_json_default))


class DemographicsReportRepository:
    """Write demographics summaries to the local filesystem."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = Path(output_path)

    def save(self, data: DemographicsData) -> Path:
        parent = self._output_path.parent
        if not parent.exists():
            raise FileNotFoundError(f"Expected directory to exist: {parent}")

        serialisable = json.dumps(
            demographics_to_dict(data), ensure_ascii=False, indent=2
        )
        self._output_path.write_text(serialisable, encoding="utf-8")
        return self._output_path


__all__ = ["DemographicsReportRepository", "demographics_to_dict"]
