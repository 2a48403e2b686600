"""Serbian Latin locales: "sr" (Ekavian) and "sr-ije" (Ijekavian).

The two variants share grammar and patterns and differ in the reflex of
the old "jat" vowel: Sreda/Srijeda, mesec/mjesec, pre/prije.
"""

from __future__ import annotations

from appdate.locales.table import LocaleTable

_MONTHS = (
    "Januar", "Februar", "Mart", "April", "Maj", "Jun",
    "Jul", "Avgust", "Septembar", "Oktobar", "Novembar", "Decembar",
)
_MONTHS_SHORT = (
    "Jan.", "Feb.", "Mar.", "Apr.", "Maj", "Jun",
    "Jul", "Avg.", "Sep.", "Okt.", "Nov.", "Dec.",
)
_WEEKDAYS_MIN = ("ne", "po", "ut", "sr", "če", "pe", "su")

_FORMATS = {
    "LT": "H:mm",
    "LTS": "H:mm:ss",
    "L": "DD.MM.YYYY",
    "LL": "D. MMMM YYYY.",
    "LLL": "D. MMMM YYYY. H:mm",
    "LLLL": "dddd, D. MMMM YYYY. H:mm",
}


def ordinal(n: int) -> str:
    return f"{n}."


SR = LocaleTable(
    name="sr",
    weekdays=("Nedelja", "Ponedeljak", "Utorak", "Sreda", "Četvrtak", "Petak", "Subota"),
    weekdays_short=("Ned.", "Pon.", "Uto.", "Sre.", "Čet.", "Pet.", "Sub."),
    weekdays_min=_WEEKDAYS_MIN,
    months=_MONTHS,
    months_short=_MONTHS_SHORT,
    week_start=1,
    ordinal=ordinal,
    formats=_FORMATS,
    relative_time={
        "future": "za %s",
        "past": "pre %s",
        "s": "nekoliko sekundi",
        "m": "jedan minut",
        "mm": "%d minuta",
        "h": "jedan sat",
        "hh": "%d sati",
        "d": "jedan dan",
        "dd": "%d dana",
        "M": "jedan mesec",
        "MM": "%d meseci",
        "y": "jednu godinu",
        "yy": "%d godina",
    },
)

SR_IJE = LocaleTable(
    name="sr-ije",
    weekdays=("Nedjelja", "Ponedjeljak", "Utorak", "Srijeda", "Četvrtak", "Petak", "Subota"),
    weekdays_short=("Ned.", "Pon.", "Uto.", "Sri.", "Čet.", "Pet.", "Sub."),
    weekdays_min=_WEEKDAYS_MIN,
    months=_MONTHS,
    months_short=_MONTHS_SHORT,
    week_start=1,
    ordinal=ordinal,
    formats=_FORMATS,
    relative_time={
        "future": "za %s",
        "past": "prije %s",
        "s": "nekoliko sekundi",
        "m": "jedan minut",
        "mm": "%d minuta",
        "h": "jedan sat",
        "hh": "%d sati",
        "d": "jedan dan",
        "dd": "%d dana",
        "M": "jedan mjesec",
        "MM": "%d mjeseci",
        "y": "jednu godinu",
        "yy": "%d godina",
    },
)
