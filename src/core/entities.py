"""Core entities for the demographic analytics domain."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

import pandas as pd


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 value into an aware UTC ``datetime``.

    Naive timestamps are interpreted as UTC. Missing values yield ``None``.
    """

    if _is_missing(value):
        return None
    try:
        parsed = pd.to_datetime(value.strip() if isinstance(value, str) else value, utc=True)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid timestamp: {value!r}") from exc
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime().astimezone(timezone.utc)


def parse_age(value: Any) -> Optional[int]:
    """Return ``value`` as a whole number of years; ``None`` when missing."""

    if _is_missing(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid age: {value!r}") from exc
    if not number.is_integer():
        raise ValueError(f"Age must be a whole number, got {value!r}")
    return int(number)


@dataclass(frozen=True)
class Person:
    """A single member of the population being analysed."""

    id: str
    name: str
    age: Optional[int] = None
    created_at: Optional[datetime] = None
    gender: Optional[str] = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "Person":
        raw_age = record.get("age")
        raw_created = record.get("created_at", record.get("createdAt"))
        raw_gender = record.get("gender")
        return cls(
            id=str(record.get("id", "")),
            name="" if _is_missing(record.get("name")) else str(record["name"]),
            age=parse_age(raw_age),
            created_at=parse_timestamp(raw_created),
            gender=None if _is_missing(raw_gender) else str(raw_gender),
        )


@dataclass(frozen=True)
class AgeStatistics:
    """Aggregate age figures; numeric fields are ``None`` when nobody gave an age."""

    average: Optional[int]
    median: Optional[int]
    min: Optional[int]
    max: Optional[int]
    total_with_age: int
    total_without_age: int


@dataclass(frozen=True)
class AgeGroup:
    """Members of one age bucket together with their share of the population."""

    label: str
    min: Optional[int]
    max: Optional[int]
    count: int
    percentage: int
    people: tuple[Person, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DemographicsInsights:
    largest_group_label: Optional[str]
    largest_group_count: int
    smallest_group_label: Optional[str]
    growth_trend_description: str
    age_specification_rate_percent: int
    dominant_range_description: str


@dataclass(frozen=True)
class DemographicsData:
    """Full demographics summary for one population segment."""

    segment: Optional[str]
    total_count: int
    age_statistics: AgeStatistics
    age_distribution: tuple[AgeGroup, ...]
    most_common_age_group: Optional[str]
    recent_signups: tuple[Person, ...]
    insights: DemographicsInsights


__all__ = [
    "AgeGroup",
    "AgeStatistics",
    "DemographicsData",
    "DemographicsInsights",
    "Person",
    "parse_age",
    "parse_timestamp",
]
