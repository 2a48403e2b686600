"""Validation utilities for AppDate.

Unlike a constructor-level validator these helpers never raise: callers
turn a failed check into the invalid instant.

This module is not part of the public API.
"""

from __future__ import annotations

import calendar
import math
from numbers import Real


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """Check that year, month and day form an existing calendar date.

    Args:
        year: The year (1-9999).
        month: The month.
        day: The day of the month.

    Returns:
        True if the date exists in the Gregorian calendar.

    Examples:
        >>> is_valid_ymd(2024, 2, 29)
        True
        >>> is_valid_ymd(2023, 2, 29)
        False
        >>> is_valid_ymd(2020, 88, 24)
        False
    """
    if year < 1 or year > 9999:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def is_valid_hms(hour: int, minute: int, second: int = 0, millisecond: int = 0) -> bool:
    """Check that the clock components are within a single day."""
    return (
        0 <= hour <= 23
        and 0 <= minute <= 59
        and 0 <= second <= 59
        and 0 <= millisecond <= 999
    )


def as_whole_number(value: object) -> int | None:
    """Return value as an int if it is an integral real number.

    Booleans are rejected even though they are ints.

    Examples:
        >>> as_whole_number(3)
        3
        >>> as_whole_number(2.0)
        2
        >>> as_whole_number(1.5) is None
        True
        >>> as_whole_number(True) is None
        True
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if isinstance(value, int):
        return value
    as_float = float(value)
    if not math.isfinite(as_float) or not as_float.is_integer():
        return None
    return int(as_float)


def is_finite_number(value: object) -> bool:
    """Check that value is a real, finite, non-boolean number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(float(value))


__all__ = [
    "is_valid_ymd",
    "is_valid_hms",
    "as_whole_number",
    "is_finite_number",
]
