"""Fixed age bucket table and the categorizer that consults it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from src.utils.logger import logger

NOT_SPECIFIED = "Not Specified"


@dataclass(frozen=True)
class AgeBucket:
    """A single inclusive age bucket.

    A bucket without bounds is the catch-all for people who gave no age.
    """

    label: str
    min_age: Optional[int] = None
    max_age: Optional[int] = None

    @property
    def is_unspecified(self) -> bool:
        return self.min_age is None and self.max_age is None

    def contains(self, age: int) -> bool:
        if self.is_unspecified:
            return False
        return self.min_age <= age <= self.max_age


DEFAULT_AGE_BUCKETS: tuple[AgeBucket, ...] = (
    AgeBucket(label="Under 18", min_age=0, max_age=17),
    AgeBucket(label="18-24", min_age=18, max_age=24),
    AgeBucket(label="25-34", min_age=25, max_age=34),
    AgeBucket(label="35-44", min_age=35, max_age=44),
    AgeBucket(label="45-54", min_age=45, max_age=54),
    AgeBucket(label="55+", min_age=55, max_age=999),
    AgeBucket(label=NOT_SPECIFIED),
)


class AgeCategorizer:
    """Map ages onto the first matching bucket of an ordered table."""

    def __init__(self, buckets: Sequence[AgeBucket]) -> None:
        if not buckets:
            raise ValueError("At least one age bucket must be configured.")

        labels = [bucket.label for bucket in buckets]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError("Duplicate age bucket labels: " + ", ".join(duplicates))

        unspecified = [bucket for bucket in buckets if bucket.is_unspecified]
        if len(unspecified) > 1:
            raise ValueError("Only one age bucket may omit both 'min' and 'max'.")

        numeric = [bucket for bucket in buckets if not bucket.is_unspecified]
        self._validate_ranges(numeric)

        ordered = tuple(buckets)
        if not unspecified:
            ordered = ordered + (AgeBucket(label=NOT_SPECIFIED),)
            unspecified = [ordered[-1]]

        self._buckets: tuple[AgeBucket, ...] = ordered
        self._numeric: tuple[AgeBucket, ...] = tuple(numeric)
        self._unspecified_label = unspecified[0].label

    @staticmethod
    def _validate_ranges(buckets: Sequence[AgeBucket]) -> None:
        for bucket in buckets:
            if bucket.min_age is None or bucket.max_age is None:
                raise ValueError(
                    f"Age bucket '{bucket.label}' must define both 'min' and 'max'."
                )
            if bucket.min_age > bucket.max_age:
                raise ValueError(
                    f"Invalid age bucket '{bucket.label}': 'min' ({bucket.min_age}) cannot be greater than 'max' ({bucket.max_age})."
                )

        by_start = sorted(buckets, key=lambda bucket: bucket.min_age)
        for previous, current in zip(by_start, by_start[1:]):
            if current.min_age <= previous.max_age:
                raise ValueError(
                    f"Age buckets '{previous.label}' and '{current.label}' overlap."
                )

    @classmethod
    def default(cls) -> "AgeCategorizer":
        return cls(DEFAULT_AGE_BUCKETS)

    @classmethod
    def from_config(cls, config: Sequence[Mapping[str, Any]]) -> "AgeCategorizer":
        buckets: list[AgeBucket] = []
        for entry in config:
            label = str(entry.get("label")) if entry.get("label") is not None else None
            if not label:
                raise ValueError("Each age bucket must define a non-empty 'label'.")

            min_age = entry.get("min")
            max_age = entry.get("max")
            buckets.append(
                AgeBucket(
                    label=label,
                    min_age=int(min_age) if min_age is not None else None,
                    max_age=int(max_age) if max_age is not None else None,
                )
            )

        return cls(buckets)

    @property
    def buckets(self) -> tuple[AgeBucket, ...]:
        return self._buckets

    @property
    def unspecified_label(self) -> str:
        return self._unspecified_label

    def categorize(self, age: Optional[int]) -> str:
        if age is None:
            return self._unspecified_label

        for bucket in self._numeric:
            if bucket.contains(age):
                return bucket.label

        logger.warning("Age {} is outside every configured bucket", age)
        return self._unspecified_label


_DEFAULT_CATEGORIZER = AgeCategorizer.default()


def categorize(age: Optional[int]) -> str:
    """Categorize ``age`` with the default bucket table."""

    return _DEFAULT_CATEGORIZER.categorize(age)


__all__ = [
    "DEFAULT_AGE_BUCKETS",
    "NOT_SPECIFIED",
    "AgeBucket",
    "AgeCategorizer",
    "categorize",
]
