"""English locale."""

from __future__ import annotations

from appdate.locales.table import LocaleTable

_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_SUFFIXES = ("th", "st", "nd", "rd")


def ordinal(n: int) -> str:
    """Render n with its English ordinal suffix.

    Examples:
        >>> [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)]
        ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '22nd', '23rd']
    """
    v = n % 100
    if 11 <= v <= 13:
        return f"{n}th"
    last = v % 10
    return f"{n}{_SUFFIXES[last] if last < 4 else 'th'}"


EN = LocaleTable(
    name="en",
    weekdays=_WEEKDAYS,
    weekdays_short=tuple(day[:3] for day in _WEEKDAYS),
    weekdays_min=tuple(day[:2] for day in _WEEKDAYS),
    months=_MONTHS,
    months_short=tuple(month[:3] for month in _MONTHS),
    week_start=0,
    ordinal=ordinal,
    formats={
        "LT": "h:mm A",
        "LTS": "h:mm:ss A",
        "L": "MM/DD/YYYY",
        "LL": "MMMM D, YYYY",
        "LLL": "MMMM D, YYYY h:mm A",
        "LLLL": "dddd, MMMM D, YYYY h:mm A",
    },
    relative_time={
        "future": "in %s",
        "past": "%s ago",
        "s": "a few seconds",
        "m": "a minute",
        "mm": "%d minutes",
        "h": "an hour",
        "hh": "%d hours",
        "d": "a day",
        "dd": "%d days",
        "M": "a month",
        "MM": "%d months",
        "y": "a year",
        "yy": "%d years",
    },
    invalid_date="Invalid Date",
)
