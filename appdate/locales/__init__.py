"""Locale tables for AppDate.

Built-in locales:
    en       English (default)
    de       German
    de-ch    Swiss German
    fr       French
    fr-ch    Swiss French
    sr       Serbian, Ekavian
    sr-ije   Serbian, Ijekavian

Additional locales are registered with register_locale():

    >>> from appdate.locales import LocaleTable, register_locale
    >>> register_locale(LocaleTable(name="xx", ...))  # doctest: +SKIP
"""

from __future__ import annotations

from appdate.locales.de import DE, DE_CH
from appdate.locales.en import EN
from appdate.locales.fr import FR, FR_CH
from appdate.locales.sr import SR, SR_IJE
from appdate.locales.table import (
    LocaleTable,
    RelativePhrase,
    available_locales,
    default_meridiem,
    get_locale_table,
    is_registered,
    register_locale,
)

for _table in (EN, DE, DE_CH, FR, FR_CH, SR, SR_IJE):
    register_locale(_table)

__all__: list[str] = [
    "LocaleTable",
    "RelativePhrase",
    "available_locales",
    "default_meridiem",
    "get_locale_table",
    "is_registered",
    "register_locale",
    "EN",
    "DE",
    "DE_CH",
    "FR",
    "FR_CH",
    "SR",
    "SR_IJE",
]
