"""Comparison operations for instants.

Comparison Rules:
    - Without a unit, instants compare as absolute points in time.
    - With a unit, the receiver is widened to the unit that contains it
      (in the receiver's zone) before comparing:
        * is_same:   other lies within [start_of(unit), end_of(unit)]
        * is_before: end_of(unit) < other
        * is_after:  other < start_of(unit)
    - Any comparison involving INVALID is False.

Supported Operations:
    - is_before, is_after, is_same: ordering predicates
    - compare: Return -1, 0, or 1
    - is_between: range membership with per-bound inclusivity
"""

from __future__ import annotations

from appdate.engine.instant import Instant, Valid
from appdate.engine.ops import end_of, start_of
from appdate.units.timeunit import TimeUnit

_INCLUSIVITY_TOKENS = ("()", "[]", "[)", "(]")


def is_before(left: Instant, right: Instant, unit: TimeUnit | str | None = None, week_start: int = 0) -> bool:
    """Test whether left lies before right.

    Examples:
        >>> from datetime import datetime
        >>> from appdate.units.timezone import UTC
        >>> a = Valid(datetime(2024, 1, 15, 8, tzinfo=UTC))
        >>> b = Valid(datetime(2024, 1, 15, 20, tzinfo=UTC))
        >>> is_before(a, b)
        True
        >>> is_before(a, b, "day")
        False
    """
    if not isinstance(left, Valid) or not isinstance(right, Valid):
        return False
    if unit is None:
        return left.utc < right.utc
    upper = end_of(left, unit, week_start)
    return isinstance(upper, Valid) and upper.utc < right.utc


def is_after(left: Instant, right: Instant, unit: TimeUnit | str | None = None, week_start: int = 0) -> bool:
    """Test whether left lies after right."""
    if not isinstance(left, Valid) or not isinstance(right, Valid):
        return False
    if unit is None:
        return left.utc > right.utc
    lower = start_of(left, unit, week_start)
    return isinstance(lower, Valid) and right.utc < lower.utc


def is_same(left: Instant, right: Instant, unit: TimeUnit | str | None = None, week_start: int = 0) -> bool:
    """Test whether left and right denote the same instant (or unit)."""
    if not isinstance(left, Valid) or not isinstance(right, Valid):
        return False
    if unit is None:
        return left == right
    lower = start_of(left, unit, week_start)
    upper = end_of(left, unit, week_start)
    if not isinstance(lower, Valid) or not isinstance(upper, Valid):
        return False
    return lower.utc <= right.utc <= upper.utc


def compare(left: Valid, right: Valid, unit: TimeUnit | str | None = None, week_start: int = 0) -> int:
    """Compare two valid instants.

    Returns:
        -1 if left is before right, 0 if they are the same (at the given
        granularity), 1 otherwise.
    """
    if is_same(left, right, unit, week_start):
        return 0
    if is_before(left, right, unit, week_start):
        return -1
    return 1


def is_between(
    value: Instant,
    lower: Instant,
    upper: Instant,
    unit: TimeUnit | str | None = None,
    inclusivity: str = "()",
    week_start: int = 0,
) -> bool:
    """Test whether value lies between lower and upper.

    The bounds may be given in either order.

    Args:
        value: The instant to test.
        lower: One bound.
        upper: The other bound.
        unit: Optional granularity.
        inclusivity: Two characters, "[" or "(" then "]" or ")". A square
            bracket includes the bound, a parenthesis excludes it.
        week_start: First day of the week for WEEK, Sunday = 0.

    Raises:
        ValueError: If inclusivity is not one of "()", "[]", "[)", "(]".
    """
    if inclusivity not in _INCLUSIVITY_TOKENS:
        raise ValueError(
            f"inclusivity must be one of {', '.join(_INCLUSIVITY_TOKENS)}, got {inclusivity!r}"
        )
    if not all(isinstance(i, Valid) for i in (value, lower, upper)):
        return False

    exclude_lower = inclusivity[0] == "("
    exclude_upper = inclusivity[1] == ")"

    def after(bound: Instant) -> bool:
        return is_after(value, bound, unit, week_start)

    def before(bound: Instant) -> bool:
        return is_before(value, bound, unit, week_start)

    ascending = (after(lower) if exclude_lower else not before(lower)) and (
        before(upper) if exclude_upper else not after(upper)
    )
    descending = (before(lower) if exclude_lower else not after(lower)) and (
        after(upper) if exclude_upper else not before(upper)
    )
    return ascending or descending


__all__ = [
    "is_before",
    "is_after",
    "is_same",
    "compare",
    "is_between",
]
