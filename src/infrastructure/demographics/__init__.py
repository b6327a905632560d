"""Age bucketing, statistics and insights for user populations."""

from .buckets import DEFAULT_AGE_BUCKETS, NOT_SPECIFIED, AgeBucket, AgeCategorizer, categorize
from .insights import InsightSynthesizer, generate_insights
from .sources import CSVPopulationSource, InMemoryPopulationSource
from .statistics import compute_age_distribution, compute_age_statistics

__all__ = [
    "DEFAULT_AGE_BUCKETS",
    "NOT_SPECIFIED",
    "AgeBucket",
    "AgeCategorizer",
    "CSVPopulationSource",
    "InMemoryPopulationSource",
    "InsightSynthesizer",
    "categorize",
    "compute_age_distribution",
    "compute_age_statistics",
    "generate_insights",
]
