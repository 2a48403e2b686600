"""Rendering instants as strings.

Every function here is total: an invalid instant renders as the
locale's placeholder ("Invalid Date", "Ungültiges Datum", ...) instead
of raising.

Relative time:
    to_relative() describes the distance to "now" in the locale's words
    ("3 days ago", "in 9+ days", "pre 2 dana"). The unit is picked by
    the following thresholds on the rounded distance:

        up to 44 seconds      a few seconds
        up to 89 seconds      a minute
        up to 44 minutes      N minutes
        up to 89 minutes      an hour
        up to 21 hours        N hours
        up to 35 hours        a day
        up to 25 days         N days
        up to 45 days         a month
        up to 10 months       N months
        up to 17 months       a year
        beyond                N years

    A cap replaces counts above it with "<cap>+", and a fallback switches
    to an absolute rendering once the value is more than a given number
    of days away. Singular phrases ("a day", "an hour") carry no count
    and are never capped, even with cap=0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from appdate._internal.constants import (
    DATE_FORMAT,
    DEFAULT_FORMAT,
    LOCAL_TIME_FORMAT,
    SHORT_DATE_FORMAT,
    UTC_STRING_FORMAT,
    UTC_TIME_FORMAT,
    WEEKDAY_PREFIX_FORMAT,
)
from appdate.engine.instant import Instant, Valid, to_timezone, to_utc
from appdate.engine.instant import now as current_instant
from appdate.engine.ops import diff, round_half_up
from appdate.engine.tokens import render
from appdate.locales.table import LocaleTable
from appdate.units.timeunit import TimeUnit


@dataclass(frozen=True)
class FormatOptions:
    """Options shared by the localized and relative renderers.

    Attributes:
        include_day_of_week: Prefix the minimal weekday name ("Mo, ").
        cap: Largest count shown in a relative phrase; larger counts
            render as "<cap>+". Singular phrases are never capped.
        fallback_after_days: Switch from relative to absolute rendering
            when the value is more than this many whole days away.
        fallback: Zero-argument callable producing the absolute
            rendering. Defaults to the localized date string.
    """

    include_day_of_week: bool = False
    cap: int | None = None
    fallback_after_days: int | None = None
    fallback: Callable[[], str] | None = None


# (phrase key, largest rounded count for the key, unit the count is in).
# Keys without a unit count in the unit of the previous row.
_THRESHOLDS: tuple[tuple[str, int | None, TimeUnit | None], ...] = (
    ("s", 44, TimeUnit.SECOND),
    ("m", 89, None),
    ("mm", 44, TimeUnit.MINUTE),
    ("h", 89, None),
    ("hh", 21, TimeUnit.HOUR),
    ("d", 35, None),
    ("dd", 25, TimeUnit.DAY),
    ("M", 45, None),
    ("MM", 10, TimeUnit.MONTH),
    ("y", 17, None),
    ("yy", None, TimeUnit.YEAR),
)

_COUNTED_KEYS = frozenset({"mm", "hh", "dd", "MM", "yy"})


def safe_format(instant: Instant, pattern: str, locale: LocaleTable) -> str:
    """Render instant through pattern, or the locale's invalid placeholder."""
    if not isinstance(instant, Valid):
        return locale.invalid_date
    return render(instant, pattern, locale)


def format(instant: Instant, locale: LocaleTable, pattern: str = DEFAULT_FORMAT) -> str:
    return safe_format(instant, pattern, locale)


def to_local_time(instant: Instant, locale: LocaleTable) -> str:
    """Render the wall-clock time as HH:mm."""
    return safe_format(instant, LOCAL_TIME_FORMAT, locale)


def to_utc_time(instant: Instant, locale: LocaleTable) -> str:
    """Render the UTC time as HH:mm:ssZ, e.g. "14:30:00+00:00"."""
    return safe_format(to_utc(instant), UTC_TIME_FORMAT, locale)


def to_date_string(instant: Instant, locale: LocaleTable) -> str:
    return safe_format(instant, DATE_FORMAT, locale)


def to_utc_date_string(instant: Instant, locale: LocaleTable) -> str:
    return safe_format(to_utc(instant), DATE_FORMAT, locale)


def to_utc_string(instant: Instant, locale: LocaleTable) -> str:
    return safe_format(to_utc(instant), UTC_STRING_FORMAT, locale)


def _with_weekday(pattern: str, include_day_of_week: bool) -> str:
    return WEEKDAY_PREFIX_FORMAT + pattern if include_day_of_week else pattern


def to_localized_date_string(
    instant: Instant, locale: LocaleTable, include_day_of_week: bool = False
) -> str:
    """Render the date in the locale's numeric form.

    Examples:
        de-ch: 10.10.2010, with weekday: So, 10.10.2010
        en:    10/10/2010, with weekday: Su, 10/10/2010
    """
    return safe_format(instant, _with_weekday("L", include_day_of_week), locale)


def format_short(
    instant: Instant, locale: LocaleTable, include_day_of_week: bool = True
) -> str:
    """Render day and month as DD.MM., by default with the weekday ("Sa, 24.10.")."""
    return safe_format(instant, _with_weekday(SHORT_DATE_FORMAT, include_day_of_week), locale)


def format_date_time(
    instant: Instant, locale: LocaleTable, include_day_of_week: bool = True
) -> str:
    """Render "<localized date>, <HH:mm>"."""
    if not isinstance(instant, Valid):
        return locale.invalid_date
    date = to_localized_date_string(instant, locale, include_day_of_week)
    return f"{date}, {to_local_time(instant, locale)}"


def _relative_phrase(instant: Valid, reference: Valid, locale: LocaleTable, cap: int | None) -> str:
    key = "yy"
    count = 0
    distance = 0.0
    unit = TimeUnit.SECOND
    previous_key = key
    for key, limit, row_unit in _THRESHOLDS:
        if row_unit is not None:
            unit = row_unit
            distance = diff(instant, reference, unit, as_float=True)
        count = round_half_up(abs(distance))
        if limit is None or count <= limit:
            if count <= 1 and key != "s":
                key = previous_key
            break
        previous_key = key

    if key in _COUNTED_KEYS and cap is not None and count > cap:
        amount = f"{cap}+"
    else:
        amount = str(count)
    phrase = locale.relative_phrase(key, with_suffix=True).replace("%d", amount)
    wrapper = locale.relative_phrase("future" if distance > 0 else "past")
    return wrapper.replace("%s", phrase)


def to_relative(
    instant: Instant,
    locale: LocaleTable,
    options: FormatOptions | None = None,
    now: Instant | None = None,
) -> str:
    """Describe instant relative to now.

    Args:
        instant: The instant to describe.
        locale: Table providing the phrases.
        options: cap, fallback_after_days and fallback; see FormatOptions.
        now: Reference instant. Defaults to the current instant.

    Returns:
        The relative phrase, the fallback rendering, or the invalid
        placeholder if either instant is invalid.

    Examples:
        >>> from datetime import datetime
        >>> from appdate.locales import EN
        >>> from appdate.units.timezone import UTC
        >>> now = Valid(datetime(2024, 1, 20, 12, tzinfo=UTC))
        >>> then = Valid(datetime(2024, 1, 5, 12, tzinfo=UTC))
        >>> to_relative(then, EN, now=now)
        '15 days ago'
        >>> to_relative(then, EN, FormatOptions(cap=9), now=now)
        '9+ days ago'
    """
    if not isinstance(instant, Valid):
        return locale.invalid_date
    options = options or FormatOptions()
    reference = to_timezone(now if now is not None else current_instant(), instant.moment.tzinfo)
    if not isinstance(reference, Valid):
        return locale.invalid_date

    if options.fallback_after_days is not None:
        days = diff(instant, reference, TimeUnit.DAY)
        if abs(days) > options.fallback_after_days:
            if options.fallback is not None:
                return options.fallback()
            return to_localized_date_string(instant, locale, options.include_day_of_week)

    return _relative_phrase(instant, reference, locale, options.cap)


__all__ = [
    "FormatOptions",
    "safe_format",
    "format",
    "to_local_time",
    "to_utc_time",
    "to_date_string",
    "to_utc_date_string",
    "to_utc_string",
    "to_localized_date_string",
    "format_short",
    "format_date_time",
    "to_relative",
]
