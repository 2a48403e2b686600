"""German locales: "de" (Germany) and "de-ch" (Switzerland).

German inflects the unit after "in"/"vor" ("2 Tage" but "vor 2 Tagen"),
so most relative phrases are (standalone, with suffix) pairs.
"""

from __future__ import annotations

from appdate.locales.table import LocaleTable

_WEEKDAYS = ("Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag")
_WEEKDAYS_SHORT = ("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.")
_WEEKDAYS_MIN = ("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa")
_MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)

_FORMATS = {
    "LT": "HH:mm",
    "LTS": "HH:mm:ss",
    "L": "DD.MM.YYYY",
    "LL": "D. MMMM YYYY",
    "LLL": "D. MMMM YYYY HH:mm",
    "LLLL": "dddd, D. MMMM YYYY HH:mm",
}

_RELATIVE_TIME = {
    "future": "in %s",
    "past": "vor %s",
    "s": "ein paar Sekunden",
    "m": ("eine Minute", "einer Minute"),
    "mm": "%d Minuten",
    "h": ("eine Stunde", "einer Stunde"),
    "hh": "%d Stunden",
    "d": ("ein Tag", "einem Tag"),
    "dd": ("%d Tage", "%d Tagen"),
    "M": ("ein Monat", "einem Monat"),
    "MM": ("%d Monate", "%d Monaten"),
    "y": ("ein Jahr", "einem Jahr"),
    "yy": ("%d Jahre", "%d Jahren"),
}


def ordinal(n: int) -> str:
    return f"{n}."


DE = LocaleTable(
    name="de",
    weekdays=_WEEKDAYS,
    weekdays_short=_WEEKDAYS_SHORT,
    weekdays_min=_WEEKDAYS_MIN,
    months=_MONTHS,
    months_short=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
    ),
    week_start=1,
    ordinal=ordinal,
    formats=_FORMATS,
    relative_time=_RELATIVE_TIME,
    invalid_date="Ungültiges Datum",
)

DE_CH = LocaleTable(
    name="de-ch",
    weekdays=_WEEKDAYS,
    weekdays_short=_WEEKDAYS_SHORT,
    weekdays_min=_WEEKDAYS_MIN,
    months=_MONTHS,
    months_short=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sep.", "Okt.", "Nov.", "Dez.",
    ),
    week_start=1,
    ordinal=ordinal,
    formats=_FORMATS,
    relative_time=_RELATIVE_TIME,
    invalid_date="Ungültiges Datum",
)
