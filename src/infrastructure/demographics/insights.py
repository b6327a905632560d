"""Narrative insights derived from a demographics snapshot."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from src.core.entities import AgeGroup, AgeStatistics, DemographicsInsights, Person
from src.infrastructure.demographics.buckets import NOT_SPECIFIED
from src.utils.numbers import percentage


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class InsightSynthesizer:
    """Summarise the dominant age segment, growth and age specification rate."""

    def __init__(
        self,
        growth_window_days: int = 30,
        high_growth_threshold: int = 50,
        moderate_growth_threshold: int = 20,
        now_provider: Callable[[], datetime] | None = None,
        unspecified_label: str = NOT_SPECIFIED,
    ) -> None:
        if growth_window_days <= 0:
            raise ValueError("growth_window_days must be positive")
        self._growth_window = timedelta(days=growth_window_days)
        self._growth_window_days = growth_window_days
        self._high_growth_threshold = high_growth_threshold
        self._moderate_growth_threshold = moderate_growth_threshold
        self._now_provider = now_provider or _utc_now
        self._unspecified_label = unspecified_label

    def generate(
        self,
        people: Sequence[Person],
        distribution: Sequence[AgeGroup],
        statistics: AgeStatistics,
        reference_time: Optional[datetime] = None,
    ) -> DemographicsInsights:
        total = len(people)
        candidates = [
            group
            for group in distribution
            if group.label != self._unspecified_label and group.count > 0
        ]
        by_count = sorted(candidates, key=lambda group: group.count, reverse=True)

        largest = by_count[0] if by_count else None
        smallest = by_count[-1] if by_count else None

        if largest is None:
            dominant = "Mixed age distribution"
        elif largest.count > 0.5 * total:
            dominant = f"Primarily {largest.label}"
        else:
            dominant = f"Largest group: {largest.label}"

        return DemographicsInsights(
            largest_group_label=largest.label if largest else None,
            largest_group_count=largest.count if largest else 0,
            smallest_group_label=smallest.label if smallest else None,
            growth_trend_description=self.describe_growth(people, reference_time),
            age_specification_rate_percent=percentage(statistics.total_with_age, total),
            dominant_range_description=dominant,
        )

    def describe_growth(
        self, people: Sequence[Person], reference_time: Optional[datetime] = None
    ) -> str:
        now = _as_utc(reference_time or self._now_provider())
        window_start = now - self._growth_window

        recent = sum(
            1
            for person in people
            if person.created_at is not None and _as_utc(person.created_at) >= window_start
        )
        growth = percentage(recent, len(people))

        if growth > self._high_growth_threshold:
            trend = "High growth"
        elif growth > self._moderate_growth_threshold:
            trend = "Moderate growth"
        else:
            trend = "Stable"
        return f"{growth}% joined in last {self._growth_window_days} days - {trend}"


def generate_insights(
    people: Sequence[Person],
    distribution: Sequence[AgeGroup],
    statistics: AgeStatistics,
    reference_time: Optional[datetime] = None,
) -> DemographicsInsights:
    return InsightSynthesizer().generate(
        people, distribution, statistics, reference_time=reference_time
    )


__all__ = ["InsightSynthesizer", "generate_insights"]
