"""TimeUnit enumeration for arithmetic, rounding and comparison units.

This module provides the TimeUnit enum and the alias table that lets
callers name units the short way ("d", "M", "ms") or the long way
("day", "days", "Month").
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum


class TimeUnit(Enum):
    """Standard time units for AppDate operations.

    Units from MILLISECOND to HOUR have a fixed length and are applied to
    the absolute instant. DAY, WEEK, MONTH and YEAR are calendar units and
    are applied to the wall clock of the value's timezone, so adding one
    day across a DST change keeps the local time of day.

    Examples:
        >>> TimeUnit.HOUR.length
        datetime.timedelta(seconds=3600)

        >>> TimeUnit.parse("days")
        <TimeUnit.DAY: 'day'>

        >>> TimeUnit.parse("M")
        <TimeUnit.MONTH: 'month'>
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, unit: TimeUnit | str) -> TimeUnit:
        """Resolve a unit name or alias to a TimeUnit.

        Single-letter aliases are case-sensitive ("M" is month, "m" is
        minute). Longer names are case-insensitive and may be plural.

        Args:
            unit: A TimeUnit, an alias, or a (possibly plural) unit name.

        Returns:
            The matching TimeUnit.

        Raises:
            ValueError: If the name does not denote a supported unit.
        """
        if isinstance(unit, TimeUnit):
            return unit
        if not isinstance(unit, str):
            raise ValueError(f"unit must be a string or TimeUnit, got {type(unit).__name__}")

        if unit in _SHORT_ALIASES:
            return _SHORT_ALIASES[unit]

        name = unit.lower()
        if name.endswith("s") and name != "ms":
            name = name[:-1]
        if name in _LONG_ALIASES:
            return _LONG_ALIASES[name]

        raise ValueError(f"unsupported time unit: {unit!r}")

    @property
    def is_calendar(self) -> bool:
        """Return True for units applied to the local wall clock."""
        return self in (TimeUnit.DAY, TimeUnit.WEEK, TimeUnit.MONTH, TimeUnit.YEAR)

    @property
    def length(self) -> timedelta | None:
        """Return the nominal length of one unit.

        Days and weeks report 24 hours and 7 days even though a local day
        across a DST change is shorter or longer.

        Returns:
            The length, or None for variable-length units (MONTH and YEAR).

        Examples:
            >>> TimeUnit.MINUTE.length
            datetime.timedelta(seconds=60)

            >>> TimeUnit.YEAR.length is None
            True
        """
        return _LENGTHS.get(self)


_LENGTHS: dict[TimeUnit, timedelta] = {
    TimeUnit.MILLISECOND: timedelta(milliseconds=1),
    TimeUnit.SECOND: timedelta(seconds=1),
    TimeUnit.MINUTE: timedelta(minutes=1),
    TimeUnit.HOUR: timedelta(hours=1),
    TimeUnit.DAY: timedelta(days=1),
    TimeUnit.WEEK: timedelta(weeks=1),
}

_SHORT_ALIASES: dict[str, TimeUnit] = {
    "ms": TimeUnit.MILLISECOND,
    "s": TimeUnit.SECOND,
    "m": TimeUnit.MINUTE,
    "h": TimeUnit.HOUR,
    "d": TimeUnit.DAY,
    "D": TimeUnit.DAY,
    "w": TimeUnit.WEEK,
    "M": TimeUnit.MONTH,
    "y": TimeUnit.YEAR,
}

_LONG_ALIASES: dict[str, TimeUnit] = {
    "ms": TimeUnit.MILLISECOND,
    "millisecond": TimeUnit.MILLISECOND,
    "second": TimeUnit.SECOND,
    "minute": TimeUnit.MINUTE,
    "hour": TimeUnit.HOUR,
    "day": TimeUnit.DAY,
    "date": TimeUnit.DAY,
    "week": TimeUnit.WEEK,
    "month": TimeUnit.MONTH,
    "year": TimeUnit.YEAR,
}


__all__ = ["TimeUnit"]
