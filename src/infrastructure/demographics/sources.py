"""Population sources feeding the demographics use case."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from src.core.entities import Person
from src.utils.logger import logger

_REQUIRED_COLUMNS = {"id", "name", "age"}
_OPTIONAL_COLUMNS = ("gender", "created_at")


def _matches_segment(person: Person, segment: Optional[str]) -> bool:
    if not segment:
        return True
    return (person.gender or "").strip().lower() == segment.strip().lower()


def newest_first(people: Sequence[Person]) -> list[Person]:
    """Order people by join time, most recent first and unknown last."""

    earliest = datetime.min.replace(tzinfo=timezone.utc)
    known = [person for person in people if person.created_at is not None]
    unknown = [person for person in people if person.created_at is None]
    known.sort(key=lambda person: person.created_at or earliest, reverse=True)
    return known + unknown


class InMemoryPopulationSource:
    """Serve an already materialised population."""

    def __init__(self, people: Sequence[Person]) -> None:
        self._people = tuple(people)

    def fetch(self, segment: Optional[str] = None) -> list[Person]:
        return [person for person in self._people if _matches_segment(person, segment)]


class CSVPopulationSource:
    """Load user exports stored as CSV files."""

    def __init__(self, csv_path: Path) -> None:
        self._csv_path = Path(csv_path)

    def load(self) -> pd.DataFrame:
        if not self._csv_path.exists():
            raise FileNotFoundError(f"Dataset not found: {self._csv_path}")

        data = pd.read_csv(self._csv_path, dtype={"id": str, "name": str})
        missing = _REQUIRED_COLUMNS - set(data.columns)
        if missing:
            raise ValueError(
                "Dataset is missing required columns: " + ", ".join(sorted(missing))
            )
        for column in _OPTIONAL_COLUMNS:
            if column not in data.columns:
                data[column] = None

        ages = pd.to_numeric(data["age"], errors="raise")
        non_whole = ages.notna() & (ages % 1 != 0)
        if non_whole.any():
            raise ValueError(
                "Ages must be whole numbers: "
                + ", ".join(str(age) for age in ages[non_whole].tolist())
            )
        data["age"] = ages.astype("Int64")
        return data

    def fetch(self, segment: Optional[str] = None) -> list[Person]:
        data = self.load()
        records = data[["id", "name", "age", "gender", "created_at"]].astype(object)
        records = records.where(pd.notna(records), None)
        people = [Person.from_mapping(record) for record in records.to_dict(orient="records")]

        selected = [person for person in people if _matches_segment(person, segment)]
        logger.info(
            "Loaded {} people from {} ({} in segment {})",
            len(people),
            self._csv_path,
            len(selected),
            segment or "all",
        )
        return newest_first(selected)


__all__ = ["CSVPopulationSource", "InMemoryPopulationSource", "newest_first"]
