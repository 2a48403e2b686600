"""Timezone resolution against the IANA database.

This module resolves zone identifiers such as "Europe/Zurich" through
``zoneinfo`` and parses the fixed UTC offsets ("Z", "+05:30", "-0500")
that appear inside time strings.
"""

from __future__ import annotations

import functools
import re
from datetime import timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from appdate.errors import InvalidTimezoneError

UTC: tzinfo = timezone.utc

# "Z", "+HH:MM", "-HHMM" or "+HH"
_OFFSET_RE = re.compile(r"^([+-])([0-9]{2})(?::?([0-9]{2}))?\Z")

# Offsets beyond +/-14 hours do not exist in the IANA database
_MAX_OFFSET_SECONDS = 14 * 60 * 60


def resolve_zone(zone_id: str) -> tzinfo:
    """Resolve an IANA zone identifier to a tzinfo.

    "UTC" and "Z" always resolve, even without a timezone database.

    Args:
        zone_id: IANA identifier such as "Europe/Zurich".

    Returns:
        The tzinfo for the zone.

    Raises:
        InvalidTimezoneError: If the identifier cannot be resolved.

    Examples:
        >>> resolve_zone("UTC") is UTC
        True

        >>> resolve_zone("Europe/Zurich")
        zoneinfo.ZoneInfo(key='Europe/Zurich')
    """
    if not isinstance(zone_id, str) or not zone_id.strip():
        raise InvalidTimezoneError(zone_id)
    if zone_id.upper() in ("UTC", "Z"):
        return UTC
    return _load_zone(zone_id)


@functools.lru_cache(maxsize=128)
def _load_zone(zone_id: str) -> tzinfo:
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(zone_id) from exc


def is_valid_timezone(zone_id: object) -> bool:
    """Return True if zone_id names a resolvable timezone."""
    try:
        resolve_zone(zone_id)  # type: ignore[arg-type]
    except InvalidTimezoneError:
        return False
    return True


def parse_offset(s: str) -> tzinfo | None:
    """Parse a UTC offset designator into a fixed-offset tzinfo.

    Supported formats:
        - "Z" or "z": UTC
        - "+HH:MM" or "-HH:MM"
        - "+HHMM" or "-HHMM"
        - "+HH" or "-HH"

    Args:
        s: Offset designator.

    Returns:
        A fixed-offset tzinfo, or None if the designator is malformed or
        out of range.

    Examples:
        >>> parse_offset("Z") is UTC
        True

        >>> parse_offset("+05:30").utcoffset(None)
        datetime.timedelta(seconds=19800)

        >>> parse_offset("+25:00") is None
        True
    """
    if s in ("Z", "z"):
        return UTC

    match = _OFFSET_RE.match(s)
    if not match:
        return None

    sign_str, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0
    if minutes > 59:
        return None

    offset_seconds = hours * 3600 + minutes * 60
    if offset_seconds > _MAX_OFFSET_SECONDS:
        return None
    if offset_seconds == 0:
        return UTC

    sign = 1 if sign_str == "+" else -1
    return timezone(timedelta(seconds=sign * offset_seconds))


def format_offset(offset: timedelta | None, *, colon: bool = True) -> str:
    """Format a UTC offset as "+HH:MM" (or "+HHMM" without colon).

    Examples:
        >>> format_offset(timedelta(hours=1))
        '+01:00'

        >>> format_offset(timedelta(hours=-5, minutes=-30), colon=False)
        '-0530'
    """
    total = int(offset.total_seconds()) if offset is not None else 0
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    hours = total // 3600
    minutes = (total % 3600) // 60
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


__all__ = [
    "UTC",
    "resolve_zone",
    "is_valid_timezone",
    "parse_offset",
    "format_offset",
]
