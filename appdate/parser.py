"""Parsing and validation of date inputs.

Each function turns one input format into an engine Instant projected
into the given zone. None of them raise on bad input: anything that
does not match the expected format, or names a date or time that does
not exist, becomes the invalid instant and is logged at DEBUG level.

Formats:
    from_date_string:  YYYY-MM-DD, strict, local midnight
    from_local_time:   HH:mm (hour may have one digit), today
    from_utc_string:   ISO 8601 date or date-time, UTC unless an offset
                       is given
    from_utc_time:     HH:mm:ssZ, today in UTC
    from_epoch_*:      Unix seconds or milliseconds

Examples:
    >>> from appdate.units.timezone import resolve_zone
    >>> zurich = resolve_zone("Europe/Zurich")
    >>> from_date_string("2024-03-15", zurich).moment.isoformat()
    '2024-03-15T00:00:00+01:00'
    >>> from_date_string("2024-13-01", zurich)
    Invalid()
"""

from __future__ import annotations

import logging
import re
from datetime import tzinfo

from dateutil.parser import isoparse

from appdate._internal.constants import DATE_FORMAT, LOCAL_TIME_FORMAT, UTC_TIME_FORMAT
from appdate._internal.validation import is_finite_number, is_valid_ymd
from appdate.engine import instant as _instant
from appdate.engine.instant import INVALID, Instant, Valid
from appdate.engine.patterns import parse
from appdate.units.timezone import UTC

logger = logging.getLogger(__name__)

_DATE_STRING_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})\Z")


def is_date_string(value: object) -> bool:
    """Return True if value is an existing date written as YYYY-MM-DD.

    Examples:
        >>> is_date_string("2024-02-29")
        True
        >>> is_date_string("2023-02-29")
        False
        >>> is_date_string("2024-2-29")
        False
        >>> is_date_string(None)
        False
    """
    if not isinstance(value, str):
        return False
    match = _DATE_STRING_RE.match(value)
    if not match:
        return False
    year, month, day = (int(group) for group in match.groups())
    return is_valid_ymd(year, month, day)


def from_date_string(value: str, zone: tzinfo) -> Instant:
    """Parse a strict YYYY-MM-DD date as local midnight in zone."""
    if not is_date_string(value):
        logger.debug("Rejected date string %r", value)
        return INVALID
    return parse(value, DATE_FORMAT, zone, strict=True)


def from_local_time(value: str, zone: tzinfo) -> Instant:
    """Parse an HH:mm wall-clock time as today in zone.

    The hour may be written with one or two digits ("9:05" and "09:05"
    are the same time). Hours above 23 and minutes above 59 are invalid.
    """
    result = parse(value, LOCAL_TIME_FORMAT, zone)
    if not isinstance(result, Valid):
        logger.debug("Rejected local time %r", value)
    return result


def from_utc_string(value: str | None, zone: tzinfo) -> Instant:
    """Parse an ISO 8601 date or date-time, projected into zone.

    Args:
        value: "2024-06-15", "2024-06-15T14:30:00Z",
            "2024-06-15T16:30:00+02:00" and the other forms accepted by
            dateutil's isoparse. A missing offset means UTC. None means
            the current instant.
        zone: Zone of the resulting instant.

    Examples:
        >>> from_utc_string("2024-06-15T14:30:00", UTC).moment.isoformat()
        '2024-06-15T14:30:00+00:00'
        >>> from_utc_string("not a date", UTC)
        Invalid()
    """
    if value is None:
        return _instant.now(zone)
    if not isinstance(value, str):
        logger.debug("Rejected UTC string of type %s", type(value).__name__)
        return INVALID

    try:
        moment = isoparse(value)
    except (ValueError, OverflowError) as exc:
        logger.debug("Rejected UTC string %r: %s", value, exc)
        return INVALID

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return _instant.to_timezone(Valid(moment), zone)


def from_utc_time(value: str, zone: tzinfo) -> Instant:
    """Parse an HH:mm:ssZ time as today (in UTC), projected into zone.

    The offset may be "Z", "+HH:mm" or "+HHmm".

    Examples:
        >>> from_utc_time("14:30:00+00:00", UTC).moment.strftime("%H:%M:%S")
        '14:30:00'
    """
    result = parse(value, UTC_TIME_FORMAT, UTC)
    if not isinstance(result, Valid):
        logger.debug("Rejected UTC time %r", value)
        return result
    return _instant.to_timezone(result, zone)


def from_epoch_seconds(seconds: float, zone: tzinfo) -> Instant:
    """Create an instant from Unix seconds, projected into zone."""
    if not is_finite_number(seconds):
        logger.debug("Rejected epoch seconds %r", seconds)
        return INVALID
    return _instant.from_epoch_seconds(seconds, zone)


def from_epoch_millis(millis: float, zone: tzinfo) -> Instant:
    """Create an instant from Unix milliseconds, projected into zone."""
    if not is_finite_number(millis):
        logger.debug("Rejected epoch milliseconds %r", millis)
        return INVALID
    return _instant.from_epoch_millis(millis, zone)


__all__ = [
    "is_date_string",
    "from_date_string",
    "from_local_time",
    "from_utc_string",
    "from_utc_time",
    "from_epoch_seconds",
    "from_epoch_millis",
]
