"""Age statistics and bucketed distribution for a population snapshot."""
from __future__ import annotations

from typing import Optional, Sequence

from src.core.entities import AgeGroup, AgeStatistics, Person
from src.infrastructure.demographics.buckets import AgeCategorizer
from src.utils.logger import logger
from src.utils.numbers import percentage, round_half_up


def _median(sorted_ages: Sequence[int]) -> int:
    middle = len(sorted_ages) // 2
    if len(sorted_ages) % 2 == 0:
        return round_half_up(sorted_ages[middle - 1] + sorted_ages[middle], 2)
    return sorted_ages[middle]


def compute_age_statistics(people: Sequence[Person]) -> AgeStatistics:
    ages = sorted(person.age for person in people if person.age is not None)
    total_without_age = len(people) - len(ages)

    if not ages:
        return AgeStatistics(
            average=None,
            median=None,
            min=None,
            max=None,
            total_with_age=0,
            total_without_age=total_without_age,
        )

    return AgeStatistics(
        average=round_half_up(sum(ages), len(ages)),
        median=_median(ages),
        min=ages[0],
        max=ages[-1],
        total_with_age=len(ages),
        total_without_age=total_without_age,
    )


def _member_sort_key(person: Person) -> tuple[bool, int, str]:
    # Unknown ages go last; name breaks ties between equal ages.
    if person.age is None:
        return (True, 0, person.name)
    return (False, person.age, person.name)


def compute_age_distribution(
    people: Sequence[Person],
    categorizer: Optional[AgeCategorizer] = None,
) -> list[AgeGroup]:
    """Group ``people`` into the configured buckets.

    Buckets without members are dropped, except the unspecified bucket, which is
    always reported. Groups keep the declared bucket order.
    """

    categorizer = categorizer or AgeCategorizer.default()
    members: dict[str, list[Person]] = {bucket.label: [] for bucket in categorizer.buckets}
    for person in people:
        members[categorizer.categorize(person.age)].append(person)

    total = len(people)
    groups: list[AgeGroup] = []
    for bucket in categorizer.buckets:
        bucket_members = members[bucket.label]
        if not bucket_members and bucket.label != categorizer.unspecified_label:
            continue
        groups.append(
            AgeGroup(
                label=bucket.label,
                min=bucket.min_age,
                max=bucket.max_age,
                count=len(bucket_members),
                percentage=percentage(len(bucket_members), total),
                people=tuple(sorted(bucket_members, key=_member_sort_key)),
            )
        )

    logger.debug("Distributed {} people across {} age groups", total, len(groups))
    return groups


__all__ = ["compute_age_distribution", "compute_age_statistics"]
