"""French locales: "fr" (France) and "fr-ch" (Switzerland)."""

from __future__ import annotations

from appdate.locales.table import LocaleTable

_WEEKDAYS = ("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi")
_WEEKDAYS_SHORT = ("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam.")
_WEEKDAYS_MIN = ("di", "lu", "ma", "me", "je", "ve", "sa")
_MONTHS = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)
_MONTHS_SHORT = (
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
)

_RELATIVE_TIME = {
    "future": "dans %s",
    "past": "il y a %s",
    "s": "quelques secondes",
    "m": "une minute",
    "mm": "%d minutes",
    "h": "une heure",
    "hh": "%d heures",
    "d": "un jour",
    "dd": "%d jours",
    "M": "un mois",
    "MM": "%d mois",
    "y": "un an",
    "yy": "%d ans",
}


def ordinal(n: int) -> str:
    """Render n as a French ordinal: "1er", then bare numbers."""
    return f"{n}er" if n == 1 else str(n)


FR = LocaleTable(
    name="fr",
    weekdays=_WEEKDAYS,
    weekdays_short=_WEEKDAYS_SHORT,
    weekdays_min=_WEEKDAYS_MIN,
    months=_MONTHS,
    months_short=_MONTHS_SHORT,
    week_start=1,
    ordinal=ordinal,
    formats={
        "LT": "HH:mm",
        "LTS": "HH:mm:ss",
        "L": "DD/MM/YYYY",
        "LL": "D MMMM YYYY",
        "LLL": "D MMMM YYYY HH:mm",
        "LLLL": "dddd D MMMM YYYY HH:mm",
    },
    relative_time=_RELATIVE_TIME,
    invalid_date="Date invalide",
)

FR_CH = LocaleTable(
    name="fr-ch",
    weekdays=_WEEKDAYS,
    weekdays_short=_WEEKDAYS_SHORT,
    weekdays_min=_WEEKDAYS_MIN,
    months=_MONTHS,
    months_short=_MONTHS_SHORT,
    week_start=1,
    ordinal=ordinal,
    formats={
        "LT": "HH:mm",
        "LTS": "HH:mm:ss",
        "L": "DD.MM.YYYY",
        "LL": "D MMMM YYYY",
        "LLL": "D MMMM YYYY HH:mm",
        "LLLL": "dddd D MMMM YYYY HH:mm",
    },
    relative_time=_RELATIVE_TIME,
    invalid_date="Date invalide",
)
