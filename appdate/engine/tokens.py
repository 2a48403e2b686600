"""Pattern rendering for instants.

This module renders an instant through a token pattern, looking names and
localized patterns up in a LocaleTable.

Supported Tokens:
    YYYY - 4-digit year (2024)          YY   - 2-digit year (24)
    M    - month (1-12)                 MM   - 2-digit month (01-12)
    MMM  - short month name (Jan)       MMMM - month name (January)
    D    - day of month (1-31)          DD   - 2-digit day (01-31)
    Do   - ordinal day (1st, 1.)
    d    - weekday number, Sunday = 0   dd   - minimal weekday (Su)
    ddd  - short weekday (Sun)          dddd - weekday name (Sunday)
    H    - hour (0-23)                  HH   - 2-digit hour (00-23)
    h    - hour (1-12)                  hh   - 2-digit hour (01-12)
    m    - minute (0-59)                mm   - 2-digit minute (00-59)
    s    - second (0-59)                ss   - 2-digit second (00-59)
    SSS  - milliseconds (000-999)
    Z    - UTC offset (+01:00)          ZZ   - UTC offset (+0100)
    A    - AM/PM                        a    - am/pm
    [..] - literal text

Localized Tokens (expanded before rendering):
    LT, LTS, L, LL, LLL, LLLL from the locale's formats; l, ll, lll, llll
    are the same patterns with the numeric month/day and the weekday and
    month names shortened.

Examples:
    >>> from datetime import datetime
    >>> from appdate.engine.instant import Valid
    >>> from appdate.locales import EN
    >>> from appdate.units.timezone import UTC
    >>> moment = Valid(datetime(2024, 1, 15, 14, 30, 45, tzinfo=UTC))
    >>> render(moment, "YYYY-MM-DD HH:mm:ss", EN)
    '2024-01-15 14:30:45'
    >>> render(moment, "dddd, [the] Do", EN)
    'Monday, the 15th'
    >>> render(moment, "L LT", EN)
    '01/15/2024 2:30 PM'
"""

from __future__ import annotations

import functools
import re

from appdate.engine.instant import Valid
from appdate.locales.en import EN
from appdate.locales.table import LocaleTable
from appdate.units.timezone import format_offset

_TOKEN_RE = re.compile(
    r"\[([^\]]+)]|Do|Y{1,4}|M{1,4}|D{1,2}|d{1,4}|H{1,2}|h{1,2}|a|A|m{1,2}|s{1,2}|Z{1,2}|SSS"
)
_LOCALIZED_RE = re.compile(r"(\[[^\]]+])|(LTS?|l{1,4}|L{1,4})")
_SHORTEN_RE = re.compile(r"(\[[^\]]+])|(MMMM|MM|DD|dddd)")


def _shorten(pattern: str) -> str:
    return _SHORTEN_RE.sub(lambda m: m.group(1) or m.group(2)[1:], pattern)


def expand_localized(pattern: str, locale: LocaleTable) -> str:
    """Replace localized tokens in pattern with the locale's patterns.

    Bracketed literals are left untouched.

    Examples:
        >>> from appdate.locales import DE_CH
        >>> expand_localized("L, [L] LT", DE_CH)
        'DD.MM.YYYY, [L] HH:mm'
        >>> expand_localized("l", DE_CH)
        'D.M.YYYY'
    """

    def replace(match: re.Match[str]) -> str:
        literal, token = match.groups()
        if literal:
            return literal
        if token in locale.formats:
            return locale.formats[token]
        upper = token.upper()
        if token in EN.formats:
            return EN.formats[token]
        return _shorten(locale.formats.get(upper, EN.formats[upper]))

    return _LOCALIZED_RE.sub(replace, pattern)


@functools.lru_cache(maxsize=256)
def _tokenize(pattern: str) -> tuple[tuple[bool, str], ...]:
    """Split pattern into (is_token, text) pieces."""
    pieces: list[tuple[bool, str]] = []
    position = 0
    for match in _TOKEN_RE.finditer(pattern):
        if match.start() > position:
            pieces.append((False, pattern[position : match.start()]))
        literal = match.group(1)
        if literal is not None:
            pieces.append((False, literal))
        else:
            pieces.append((True, match.group(0)))
        position = match.end()
    if position < len(pattern):
        pieces.append((False, pattern[position:]))
    return tuple(pieces)


def _render_token(token: str, instant: Valid, locale: LocaleTable) -> str:
    moment = instant.moment
    weekday = moment.isoweekday() % 7
    hour12 = moment.hour % 12 or 12

    if token == "YYYY":
        return f"{moment.year:04d}"
    if token == "YY":
        return f"{moment.year:04d}"[-2:]
    if token == "M":
        return str(moment.month)
    if token == "MM":
        return f"{moment.month:02d}"
    if token == "MMM":
        return locale.months_short[moment.month - 1]
    if token == "MMMM":
        return locale.months[moment.month - 1]
    if token == "D":
        return str(moment.day)
    if token == "DD":
        return f"{moment.day:02d}"
    if token == "Do":
        return locale.ordinal(moment.day)
    if token == "d":
        return str(weekday)
    if token == "dd":
        return locale.weekdays_min[weekday]
    if token == "ddd":
        return locale.weekdays_short[weekday]
    if token == "dddd":
        return locale.weekdays[weekday]
    if token == "H":
        return str(moment.hour)
    if token == "HH":
        return f"{moment.hour:02d}"
    if token == "h":
        return str(hour12)
    if token == "hh":
        return f"{hour12:02d}"
    if token == "a":
        return locale.meridiem(moment.hour, moment.minute, True)
    if token == "A":
        return locale.meridiem(moment.hour, moment.minute, False)
    if token == "m":
        return str(moment.minute)
    if token == "mm":
        return f"{moment.minute:02d}"
    if token == "s":
        return str(moment.second)
    if token == "ss":
        return f"{moment.second:02d}"
    if token == "SSS":
        return f"{moment.microsecond // 1000:03d}"
    if token == "Z":
        return format_offset(moment.utcoffset())
    if token == "ZZ":
        return format_offset(moment.utcoffset(), colon=False)
    # Runs without a meaning of their own (Y, YYY) render verbatim
    return token


def render(instant: Valid, pattern: str, locale: LocaleTable) -> str:
    """Render a valid instant through pattern in its own zone.

    Args:
        instant: The instant to render.
        pattern: Token pattern, see module docstring.
        locale: Table providing names and localized patterns.

    Returns:
        The rendered string.
    """
    expanded = expand_localized(pattern, locale)
    return "".join(
        _render_token(text, instant, locale) if is_token else text
        for is_token, text in _tokenize(expanded)
    )


__all__ = [
    "expand_localized",
    "render",
]
