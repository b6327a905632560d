"""Use case assembling the demographics summary of a population segment."""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from src.core.entities import AgeGroup, DemographicsData, Person
from src.infrastructure.demographics.buckets import AgeCategorizer
from src.infrastructure.demographics.insights import InsightSynthesizer
from src.infrastructure.demographics.sources import newest_first
from src.infrastructure.demographics.statistics import (
    compute_age_distribution,
    compute_age_statistics,
)
from src.utils.logger import logger


class PopulationSource(Protocol):
    def fetch(self, segment: Optional[str] = None) -> list[Person]:
        ...


class BuildDemographicsUseCase:
    """Fetch a population and derive its statistics, distribution and insights."""

    def __init__(
        self,
        source: PopulationSource,
        categorizer: AgeCategorizer | None = None,
        synthesizer: InsightSynthesizer | None = None,
        recent_signups_limit: int = 5,
    ) -> None:
        if recent_signups_limit < 0:
            raise ValueError("recent_signups_limit cannot be negative")
        self._source = source
        self._categorizer = categorizer or AgeCategorizer.default()
        self._synthesizer = synthesizer or InsightSynthesizer(
            unspecified_label=self._categorizer.unspecified_label
        )
        self._recent_signups_limit = recent_signups_limit

    def execute(
        self, segment: Optional[str] = None, reference_time: Optional[datetime] = None
    ) -> DemographicsData:
        logger.info("Building demographics for segment {}", segment or "all")
        people = self._source.fetch(segment)
        logger.info("Fetched {} people", len(people))

        statistics = compute_age_statistics(people)
        distribution = compute_age_distribution(people, self._categorizer)
        insights = self._synthesizer.generate(
            people, distribution, statistics, reference_time=reference_time
        )

        data = DemographicsData(
            segment=segment,
            total_count=len(people),
            age_statistics=statistics,
            age_distribution=tuple(distribution),
            most_common_age_group=self._most_common(distribution),
            recent_signups=tuple(newest_first(people)[: self._recent_signups_limit]),
            insights=insights,
        )
        logger.info(
            "Demographics summary: total={} average_age={} most_common={} groups={}",
            data.total_count,
            statistics.average,
            data.most_common_age_group,
            len(distribution),
        )
        return data

    def _most_common(self, distribution: Sequence[AgeGroup]) -> Optional[str]:
        numeric = [
            group
            for group in distribution
            if group.label != self._categorizer.unspecified_label
        ]
        if not numeric:
            return None
        return max(numeric, key=lambda group: group.count).label


__all__ = ["BuildDemographicsUseCase", "PopulationSource"]
