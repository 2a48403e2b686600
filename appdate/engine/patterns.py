"""Pattern-based parsing of date/time strings.

This module turns a string into an instant according to a token pattern
using the same token vocabulary as rendering, restricted to numeric
fields.

Supported Tokens:
    YYYY, YY, M, MM, D, DD, H, HH, h, hh, m, mm, s, ss, SSS, Z, ZZ, A, a
    and bracketed literals.

Parsing Modes:
    loose:  single and double tokens accept one or two digits
            ("9:05" matches "HH:mm")
    strict: double tokens require exactly two digits and single tokens
            reject leading zeros, so the input must be exactly what
            rendering the result would produce

Missing fields are filled like this: with no year, month or day in the
pattern the date is today in the target zone; otherwise a missing year is
the current year and a missing month or day is 1. Out-of-range fields
never roll over; they produce INVALID.

Examples:
    >>> from appdate.units.timezone import UTC
    >>> parse("2024-01-15", "YYYY-MM-DD", UTC, strict=True).moment.isoformat()
    '2024-01-15T00:00:00+00:00'
    >>> parse("2024-1-15", "YYYY-MM-DD", UTC, strict=True)
    Invalid()
    >>> parse("2024-02-30", "YYYY-MM-DD", UTC)
    Invalid()
"""

from __future__ import annotations

import functools
import re
from datetime import datetime, tzinfo

from appdate._internal.validation import is_valid_hms, is_valid_ymd
from appdate.engine.instant import INVALID, Instant, Valid
from appdate.engine.ops import localize
from appdate.units.timezone import parse_offset

_PATTERN_TOKEN_RE = re.compile(
    r"\[([^\]]+)]|YYYY|YY|M{1,2}|D{1,2}|H{1,2}|h{1,2}|m{1,2}|s{1,2}|SSS|Z{1,2}|A|a"
)

_OFFSET = r"(?P<offset>Z|z|[+-][0-9]{2}:?[0-9]{2})"

# Mapping of tokens to (field, loose regex, strict regex)
_PARSE_PATTERNS: dict[str, tuple[str, str, str]] = {
    "YYYY": ("year", r"[0-9]{4}", r"[0-9]{4}"),
    "YY": ("short_year", r"[0-9]{2}", r"[0-9]{2}"),
    "MM": ("month", r"[0-9]{1,2}", r"[0-9]{2}"),
    "M": ("month", r"[0-9]{1,2}", r"0|[1-9][0-9]?"),
    "DD": ("day", r"[0-9]{1,2}", r"[0-9]{2}"),
    "D": ("day", r"[0-9]{1,2}", r"0|[1-9][0-9]?"),
    "HH": ("hour", r"[0-9]{1,2}", r"[0-9]{2}"),
    "H": ("hour", r"[0-9]{1,2}", r"0|[1-9][0-9]?"),
    "hh": ("hour", r"[0-9]{1,2}", r"[0-9]{2}"),
    "h": ("hour", r"[0-9]{1,2}", r"0|[1-9][0-9]?"),
    "mm": ("minute", r"[0-9]{1,2}", r"[0-9]{2}"),
    "m": ("minute", r"[0-9]{1,2}", r"0|[1-9][0-9]?"),
    "ss": ("second", r"[0-9]{1,2}", r"[0-9]{2}"),
    "s": ("second", r"[0-9]{1,2}", r"0|[1-9][0-9]?"),
    "SSS": ("millisecond", r"[0-9]{1,3}", r"[0-9]{3}"),
    "A": ("meridiem", r"[AaPp][Mm]", r"AM|PM"),
    "a": ("meridiem", r"[AaPp][Mm]", r"am|pm"),
}


@functools.lru_cache(maxsize=128)
def _pattern_to_regex(pattern: str, strict: bool) -> re.Pattern[str]:
    """Convert a token pattern to a compiled, fully anchored regex.

    Raises:
        ValueError: If the pattern uses a field twice.
    """
    result = []
    seen: set[str] = set()
    position = 0
    for match in _PATTERN_TOKEN_RE.finditer(pattern):
        result.append(re.escape(pattern[position : match.start()]))
        position = match.end()

        literal = match.group(1)
        token = match.group(0)
        if literal is not None:
            result.append(re.escape(literal))
            continue

        if token in ("Z", "ZZ"):
            field_name, regex = "offset", _OFFSET
        else:
            field_name, loose, exact = _PARSE_PATTERNS[token]
            regex = f"(?P<{field_name}>{exact if strict else loose})"
        if field_name in seen:
            raise ValueError(f"pattern {pattern!r} uses {field_name} more than once")
        seen.add(field_name)
        result.append(regex)

    result.append(re.escape(pattern[position:]))
    return re.compile("^" + "".join(result) + r"\Z")


def _to_int(groups: dict[str, str | None], name: str) -> int | None:
    value = groups.get(name)
    return int(value) if value is not None else None


def parse(text: str, pattern: str, zone: tzinfo, *, strict: bool = False) -> Instant:
    """Parse text according to pattern.

    Args:
        text: The string to parse.
        pattern: Token pattern, see module docstring.
        zone: Zone used for wall-clock fields without an explicit offset,
            for "today", and for the resulting instant.
        strict: Require exact field widths.

    Returns:
        The parsed instant projected into zone, or INVALID when text does
        not match pattern or names a non-existent date or time.
    """
    if not isinstance(text, str):
        return INVALID

    match = _pattern_to_regex(pattern, strict).match(text)
    if not match:
        return INVALID
    groups = match.groupdict()

    year = _to_int(groups, "year")
    short_year = _to_int(groups, "short_year")
    if year is None and short_year is not None:
        year = short_year + (1900 if short_year > 68 else 2000)
    month = _to_int(groups, "month")
    day = _to_int(groups, "day")

    today = datetime.now(zone)
    if year is None and month is None and day is None:
        year, month, day = today.year, today.month, today.day
    else:
        year = year if year is not None else today.year
        month = month if month is not None else 1
        day = day if day is not None else 1

    hour = _to_int(groups, "hour") or 0
    minute = _to_int(groups, "minute") or 0
    second = _to_int(groups, "second") or 0
    millisecond = 0
    if groups.get("millisecond") is not None:
        millisecond = int(groups["millisecond"].ljust(3, "0"))

    meridiem = groups.get("meridiem")
    if meridiem is not None:
        if not 1 <= hour <= 12:
            return INVALID
        is_pm = meridiem.lower() == "pm"
        if is_pm and hour < 12:
            hour += 12
        elif not is_pm and hour == 12:
            hour = 0

    if not is_valid_ymd(year, month, day) or not is_valid_hms(hour, minute, second, millisecond):
        return INVALID

    wall = datetime(year, month, day, hour, minute, second, millisecond * 1000)
    offset_text = groups.get("offset")
    try:
        if offset_text is None:
            return Valid(localize(wall, zone))
        offset = parse_offset(offset_text)
        if offset is None:
            return INVALID
        return Valid(wall.replace(tzinfo=offset).astimezone(zone))
    except (OverflowError, ValueError):
        return INVALID


__all__ = ["parse"]
