"""Instant: the engine-level point in time.

An Instant is either ``Valid`` (wrapping an aware ``datetime``) or
``Invalid``. Invalidity is a variant of the type rather than a special
datetime value, and every ``Invalid`` compares equal to every other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Union

from appdate._internal.constants import MILLIS_PER_SECOND, SECONDS_PER_DAY
from appdate.units.timezone import UTC

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True, slots=True, eq=False)
class Valid:
    """A valid instant: an aware datetime carrying its offset.

    Two Valid instants are equal when they denote the same point in time,
    whatever zone they are projected into.
    """

    moment: datetime

    def __post_init__(self) -> None:
        if self.moment.tzinfo is None:
            raise ValueError("Valid instants require an aware datetime")

    @property
    def utc(self) -> datetime:
        """The moment converted to UTC.

        Aware datetimes sharing a tzinfo compare and subtract by wall clock,
        so arithmetic across zone transitions goes through this.
        """
        return self.moment.astimezone(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Valid):
            return NotImplemented
        return self.utc == other.utc

    def __hash__(self) -> int:
        return hash(self.utc)


@dataclass(frozen=True, slots=True)
class Invalid:
    """The invalid instant. Carries no payload so all failures are alike."""


Instant = Union[Valid, Invalid]

INVALID: Invalid = Invalid()


def is_valid(instant: Instant) -> bool:
    return isinstance(instant, Valid)


def now(zone: tzinfo = UTC) -> Valid:
    """Return the current instant projected into zone."""
    return Valid(datetime.now(zone))


def from_epoch_seconds(seconds: float, zone: tzinfo = UTC) -> Instant:
    """Create an instant from Unix seconds, projected into zone.

    Non-finite or unrepresentable timestamps yield the invalid instant.

    Examples:
        >>> from_epoch_seconds(0).moment.isoformat()
        '1970-01-01T00:00:00+00:00'
    """
    try:
        if not math.isfinite(seconds):
            return INVALID
        moment = _EPOCH + timedelta(seconds=seconds)
        return Valid(moment.astimezone(zone))
    except (OverflowError, ValueError):
        return INVALID


def from_epoch_millis(millis: float, zone: tzinfo = UTC) -> Instant:
    """Create an instant from Unix milliseconds, projected into zone."""
    try:
        if not math.isfinite(millis):
            return INVALID
        moment = _EPOCH + timedelta(milliseconds=millis)
        return Valid(moment.astimezone(zone))
    except (OverflowError, ValueError):
        return INVALID


def to_epoch_millis(instant: Valid) -> int:
    """Return the Unix timestamp of instant in whole milliseconds."""
    delta = instant.moment - _EPOCH
    return (delta.days * SECONDS_PER_DAY + delta.seconds) * MILLIS_PER_SECOND + delta.microseconds // 1000


def to_epoch_seconds(instant: Valid) -> int:
    """Return the Unix timestamp of instant in whole seconds (floored)."""
    return to_epoch_millis(instant) // MILLIS_PER_SECOND


def to_timezone(instant: Instant, zone: tzinfo) -> Instant:
    """Project instant into zone without changing the point in time."""
    if not isinstance(instant, Valid):
        return INVALID
    try:
        return Valid(instant.moment.astimezone(zone))
    except (OverflowError, ValueError):
        return INVALID


def to_utc(instant: Instant) -> Instant:
    return to_timezone(instant, UTC)


def weekday(instant: Valid) -> int:
    """Return the day of week in the instant's own zone, Sunday = 0.

    Examples:
        >>> weekday(Valid(datetime(2024, 1, 7, tzinfo=UTC)))  # a Sunday
        0
        >>> weekday(Valid(datetime(2024, 1, 8, tzinfo=UTC)))  # a Monday
        1
    """
    return instant.moment.isoweekday() % 7


__all__ = [
    "Instant",
    "Valid",
    "Invalid",
    "INVALID",
    "is_valid",
    "now",
    "from_epoch_seconds",
    "from_epoch_millis",
    "to_epoch_seconds",
    "to_epoch_millis",
    "to_timezone",
    "to_utc",
    "weekday",
]
