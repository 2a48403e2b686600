"""Arithmetic operations on instants.

This module is the canonical implementation of instant arithmetic. The
AppDate methods delegate to these functions.

Supported operations:
    - add / subtract: shift an instant by a number of units
    - start_of / end_of: snap an instant to the bounds of a unit
    - diff: signed difference between two instants in a unit

Unit semantics:
    - MILLISECOND, SECOND, MINUTE, HOUR: applied to the absolute instant
    - DAY, WEEK: applied to the local wall clock, value rounded half up
    - MONTH, YEAR: applied to the local wall clock through
      ``dateutil.relativedelta``, value truncated; the day of month is
      clamped (Jan 31 + 1 month -> Feb 29 in a leap year)

Every function returns INVALID when given INVALID, so invalidity
propagates through chains of operations.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, tzinfo

from dateutil.relativedelta import relativedelta

from appdate._internal.constants import DAYS_PER_WEEK
from appdate._internal.validation import is_finite_number
from appdate.engine.instant import INVALID, Instant, Valid
from appdate.units.timeunit import TimeUnit
from appdate.units.timezone import UTC

_ONE_MILLISECOND = timedelta(milliseconds=1)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)


def localize(wall: datetime, zone: tzinfo | None) -> datetime:
    """Attach zone to a naive wall-clock datetime.

    Wall times that fall into a DST gap are moved forward by the size of
    the gap; ambiguous wall times resolve to the earlier offset.
    """
    aware = wall.replace(tzinfo=zone, fold=0)
    return aware.astimezone(UTC).astimezone(zone)


def _wall(moment: datetime) -> datetime:
    return moment.replace(tzinfo=None)


def _calendar_delta(value: float, unit: TimeUnit) -> relativedelta:
    if unit is TimeUnit.DAY:
        return relativedelta(days=round_half_up(value))
    if unit is TimeUnit.WEEK:
        return relativedelta(weeks=round_half_up(value))
    if unit is TimeUnit.MONTH:
        return relativedelta(months=math.trunc(value))
    return relativedelta(years=math.trunc(value))


def add(instant: Instant, value: float, unit: TimeUnit | str = TimeUnit.MILLISECOND) -> Instant:
    """Shift instant forward by value units.

    Args:
        instant: The instant to shift.
        value: Number of units; may be negative.
        unit: A TimeUnit or unit alias.

    Returns:
        The shifted instant, or INVALID if instant is invalid, value is not
        a finite number, or the result leaves the representable range.

    Raises:
        ValueError: If unit is not a supported unit.

    Examples:
        >>> start = Valid(datetime(2024, 1, 31, tzinfo=UTC))
        >>> add(start, 1, "month").moment.date().isoformat()
        '2024-02-29'
    """
    unit = TimeUnit.parse(unit)
    if not isinstance(instant, Valid) or not is_finite_number(value):
        return INVALID

    moment = instant.moment
    try:
        if unit.is_calendar:
            shifted = _wall(moment) + _calendar_delta(value, unit)
            return Valid(localize(shifted, moment.tzinfo))
        delta = unit.length * value
        return Valid((moment.astimezone(UTC) + delta).astimezone(moment.tzinfo))
    except (OverflowError, ValueError):
        return INVALID


def subtract(instant: Instant, value: float, unit: TimeUnit | str = TimeUnit.MILLISECOND) -> Instant:
    """Shift instant backward by value units. See add()."""
    if not is_finite_number(value):
        TimeUnit.parse(unit)
        return INVALID
    return add(instant, -value, unit)


def _start_wall(wall: datetime, unit: TimeUnit, week_start: int) -> datetime:
    midnight = wall.replace(hour=0, minute=0, second=0, microsecond=0)
    if unit is TimeUnit.YEAR:
        return midnight.replace(month=1, day=1)
    if unit is TimeUnit.MONTH:
        return midnight.replace(day=1)
    if unit is TimeUnit.WEEK:
        weekday = wall.isoweekday() % 7
        return midnight - timedelta(days=(weekday - week_start) % DAYS_PER_WEEK)
    return midnight


def _start_clock(moment: datetime, unit: TimeUnit) -> datetime:
    if unit is TimeUnit.HOUR:
        return moment.replace(minute=0, second=0, microsecond=0)
    if unit is TimeUnit.MINUTE:
        return moment.replace(second=0, microsecond=0)
    if unit is TimeUnit.SECOND:
        return moment.replace(microsecond=0)
    return moment.replace(microsecond=moment.microsecond - moment.microsecond % 1000)


def start_of(instant: Instant, unit: TimeUnit | str, week_start: int = 0) -> Instant:
    """Return the first instant of the unit containing instant.

    Args:
        instant: The instant to snap.
        unit: A TimeUnit or unit alias.
        week_start: First day of the week for WEEK, Sunday = 0.

    Returns:
        The start of the unit in the instant's own zone, or INVALID.

    Examples:
        >>> moment = Valid(datetime(2024, 1, 10, 15, 45, tzinfo=UTC))  # Wednesday
        >>> start_of(moment, "week", week_start=1).moment.isoformat()
        '2024-01-08T00:00:00+00:00'
    """
    unit = TimeUnit.parse(unit)
    if not isinstance(instant, Valid):
        return INVALID

    moment = instant.moment
    try:
        if unit.is_calendar:
            return Valid(localize(_start_wall(_wall(moment), unit, week_start), moment.tzinfo))
        return Valid(_start_clock(moment, unit))
    except (OverflowError, ValueError):
        return INVALID


def end_of(instant: Instant, unit: TimeUnit | str, week_start: int = 0) -> Instant:
    """Return the last millisecond of the unit containing instant.

    Examples:
        >>> moment = Valid(datetime(2024, 2, 10, 15, 45, tzinfo=UTC))
        >>> end_of(moment, "month").moment.isoformat()
        '2024-02-29T23:59:59.999000+00:00'
    """
    unit = TimeUnit.parse(unit)
    if not isinstance(instant, Valid):
        return INVALID

    moment = instant.moment
    try:
        if unit.is_calendar:
            start = _start_wall(_wall(moment), unit, week_start)
            following = start + _calendar_delta(1, unit)
            return Valid(localize(following - _ONE_MILLISECOND, moment.tzinfo))
        start = _start_clock(moment, unit).astimezone(UTC)
        following = start + unit.length
        return Valid((following - _ONE_MILLISECOND).astimezone(moment.tzinfo))
    except (OverflowError, ValueError):
        return INVALID


def _shift_months(moment: datetime, months: int) -> datetime:
    return localize(_wall(moment) + relativedelta(months=months), moment.tzinfo)


def _month_diff(a: datetime, b: datetime) -> float:
    """Return the number of months from b to a, fractional part included.

    The whole-month part is calendar aware (Jan 15 -> Mar 15 is exactly two
    months); the remainder is the fraction of the surrounding month.
    """
    if a.day < b.day:
        return -_month_diff(b, a)
    whole = (b.year - a.year) * 12 + (b.month - a.month)
    anchor = _shift_months(a, whole)
    b_utc = b.astimezone(UTC)
    behind = b_utc < anchor.astimezone(UTC)
    anchor2 = _shift_months(a, whole + (-1 if behind else 1))
    span = (anchor - anchor2) if behind else (anchor2 - anchor)
    result = -(whole + (b_utc - anchor.astimezone(UTC)) / span)
    return result or 0.0


def diff(a: Valid, b: Valid, unit: TimeUnit | str = TimeUnit.MILLISECOND, *, as_float: bool = False) -> float:
    """Return a - b expressed in unit.

    DAY and WEEK differences compare wall clocks, so a DST change in
    between does not produce fractional days. MONTH and YEAR differences
    are calendar aware.

    Args:
        a: Minuend.
        b: Subtrahend.
        unit: A TimeUnit or unit alias.
        as_float: Return the fractional value instead of truncating
            toward zero.

    Examples:
        >>> a = Valid(datetime(2024, 3, 15, tzinfo=UTC))
        >>> b = Valid(datetime(2024, 1, 15, tzinfo=UTC))
        >>> diff(a, b, "month")
        2
        >>> diff(b, a, "day")
        -60
    """
    unit = TimeUnit.parse(unit)
    if unit is TimeUnit.MONTH:
        result = _month_diff(a.moment, b.moment)
    elif unit is TimeUnit.YEAR:
        result = _month_diff(a.moment, b.moment) / 12
    elif unit in (TimeUnit.DAY, TimeUnit.WEEK):
        delta = _wall(a.moment) - _wall(b.moment)
        result = delta / unit.length
    else:
        delta = a.utc - b.utc
        result = delta / unit.length

    if as_float:
        return result
    return math.trunc(result)


__all__ = [
    "round_half_up",
    "localize",
    "add",
    "subtract",
    "start_of",
    "end_of",
    "diff",
]
