"""Integer rounding helpers shared by the demographic calculations."""
from __future__ import annotations


def round_half_up(numerator: int, denominator: int) -> int:
    """Return ``numerator / denominator`` rounded to the nearest integer.

    Midpoints round towards positive infinity. The computation stays in integer
    arithmetic so values such as ``(20 + 30) / 2`` or ``67 / 2`` never drift.
    """

    if denominator <= 0:
        raise ValueError("denominator must be positive")
    return (2 * numerator + denominator) // (2 * denominator)


def percentage(part: int, whole: int) -> int:
    """Rounded share of ``part`` in ``whole``; ``0`` for an empty whole."""

    if whole == 0:
        return 0
    return round_half_up(100 * part, whole)


__all__ = ["percentage", "round_half_up"]
