"""Working-day traversal.

Working days are Monday to Friday, numbered with the engine's
convention (Sunday = 0). The set is fixed and does not depend on the
locale's first day of the week. Day steps are calendar steps, so the
local time of day survives DST changes.

Examples:
    >>> from datetime import datetime
    >>> from appdate.units.timezone import UTC
    >>> friday = Valid(datetime(2024, 1, 12, 9, 30, tzinfo=UTC))
    >>> next_working_day(friday).moment.strftime("%A %d")
    'Monday 15'
    >>> add_working_days(friday, 6).moment.strftime("%A %d")
    'Monday 22'
"""

from __future__ import annotations

from appdate._internal.constants import DAYS_PER_WEEK, WORKING_DAYS
from appdate._internal.validation import as_whole_number
from appdate.engine.instant import INVALID, Instant, Valid, weekday
from appdate.engine.ops import add
from appdate.units.timeunit import TimeUnit


def is_working_day(instant: Instant) -> bool:
    """Return True if instant falls on Monday to Friday in its own zone."""
    return isinstance(instant, Valid) and weekday(instant) in WORKING_DAYS


def _step_to_working_day(instant: Instant, direction: int) -> Instant:
    candidate = instant
    # A week always contains a working day
    for _ in range(DAYS_PER_WEEK):
        candidate = add(candidate, direction, TimeUnit.DAY)
        if not isinstance(candidate, Valid) or is_working_day(candidate):
            return candidate
    return INVALID


def next_working_day(instant: Instant) -> Instant:
    """Return the first working day strictly after instant."""
    return _step_to_working_day(instant, 1)


def previous_working_day(instant: Instant) -> Instant:
    """Return the last working day strictly before instant."""
    return _step_to_working_day(instant, -1)


def add_working_days(instant: Instant, days: object) -> Instant:
    """Advance instant by a number of working days.

    The result equals applying next_working_day() ``days`` times, so a
    weekend start counts the following Monday as the first working day.

    Args:
        instant: The starting instant.
        days: A whole number of working days. Zero, negative and
            non-integral values (and booleans) leave instant unchanged.

    Returns:
        The advanced instant, instant itself for the identity cases, or
        INVALID if instant is invalid.
    """
    count = as_whole_number(days)
    if count is None or count <= 0:
        return instant

    result = next_working_day(instant)
    # From a working day, seven calendar days are five working days
    weeks, remainder = divmod(count - 1, len(WORKING_DAYS))
    if weeks:
        result = add(result, weeks * DAYS_PER_WEEK, TimeUnit.DAY)
    for _ in range(remainder):
        result = next_working_day(result)
    return result


__all__ = [
    "is_working_day",
    "next_working_day",
    "previous_working_day",
    "add_working_days",
]
