"""Unit tests for the rounding helpers."""
from __future__ import annotations

import pytest

from src.utils.numbers import percentage, round_half_up


@pytest.mark.parametrize(
    ("numerator", "denominator", "expected"),
    [
        (100, 3, 33),
        (50, 2, 25),
        (67, 2, 34),
        (5, 2, 3),
        (200, 3, 67),
        (0, 4, 0),
    ],
)
def test_round_half_up(numerator: int, denominator: int, expected: int) -> None:
    assert round_half_up(numerator, denominator) == expected


def test_round_half_up_rejects_non_positive_denominator() -> None:
    with pytest.raises(ValueError):
        round_half_up(1, 0)


def test_percentage_of_empty_whole_is_zero() -> None:
    assert percentage(0, 0) == 0
    assert percentage(1, 8) == 13
    assert percentage(3, 4) == 75
