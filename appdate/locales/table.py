"""Locale table definition and registry.

A LocaleTable bundles everything the renderer needs for one language:
names, localized patterns, relative-time phrases and the placeholder
shown for invalid dates. Tables are registered by name and looked up
through get_locale_table().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Union

from appdate.errors import UnknownLocaleError

# A phrase is either a single template or a pair of
# (standalone form, form used inside the future/past wrapper).
RelativePhrase = Union[str, tuple[str, str]]

LOCALIZED_FORMAT_KEYS: tuple[str, ...] = ("LT", "LTS", "L", "LL", "LLL", "LLLL")
RELATIVE_TIME_KEYS: tuple[str, ...] = (
    "future", "past", "s", "m", "mm", "h", "hh", "d", "dd", "M", "MM", "y", "yy",
)


def default_meridiem(hour: int, minute: int, lowercase: bool) -> str:
    label = "AM" if hour < 12 else "PM"
    return label.lower() if lowercase else label


@dataclass(frozen=True)
class LocaleTable:
    """Names, patterns and phrases for one locale.

    Weekday sequences are indexed Sunday = 0 regardless of week_start,
    matching the engine's weekday numbering.

    Attributes:
        name: Registry key, e.g. "de-ch".
        weekdays: Full weekday names, Sunday first.
        weekdays_short: Abbreviated weekday names, Sunday first.
        weekdays_min: Minimal weekday names, Sunday first.
        months: Full month names, January first.
        months_short: Abbreviated month names, January first.
        week_start: First day of the week, Sunday = 0.
        ordinal: Renders a day of month as an ordinal ("1st", "1.").
        formats: Localized patterns for LT, LTS, L, LL, LLL and LLLL.
        relative_time: Relative-time phrases keyed by unit plus the
            "future" and "past" wrappers, each containing "%s".
        invalid_date: Placeholder rendered for invalid dates.
        meridiem: Renders the AM/PM marker.
    """

    name: str
    weekdays: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    weekdays_min: tuple[str, ...]
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    week_start: int
    ordinal: Callable[[int], str]
    formats: Mapping[str, str]
    relative_time: Mapping[str, RelativePhrase]
    invalid_date: str = "Invalid Date"
    meridiem: Callable[[int, int, bool], str] = field(default=default_meridiem)

    def __post_init__(self) -> None:
        for attr, size in (
            ("weekdays", 7),
            ("weekdays_short", 7),
            ("weekdays_min", 7),
            ("months", 12),
            ("months_short", 12),
        ):
            if len(getattr(self, attr)) != size:
                raise ValueError(f"{self.name}: {attr} must have {size} entries")
        if not 0 <= self.week_start <= 6:
            raise ValueError(f"{self.name}: week_start must be 0-6, got {self.week_start}")
        missing = [key for key in LOCALIZED_FORMAT_KEYS if key not in self.formats]
        missing += [key for key in RELATIVE_TIME_KEYS if key not in self.relative_time]
        if missing:
            raise ValueError(f"{self.name}: missing keys {', '.join(missing)}")

    def relative_phrase(self, key: str, *, with_suffix: bool = True) -> str:
        """Return the relative-time template for key."""
        phrase = self.relative_time[key]
        if isinstance(phrase, tuple):
            return phrase[1] if with_suffix else phrase[0]
        return phrase


_REGISTRY: dict[str, LocaleTable] = {}


def register_locale(table: LocaleTable) -> LocaleTable:
    """Register table under its (case-insensitive) name and return it."""
    _REGISTRY[table.name.lower()] = table
    return table


def get_locale_table(name: str) -> LocaleTable:
    """Look up a registered locale table.

    Raises:
        UnknownLocaleError: If no table is registered under name.
    """
    if isinstance(name, str):
        table = _REGISTRY.get(name.lower())
        if table is not None:
            return table
    raise UnknownLocaleError(name)


def is_registered(name: object) -> bool:
    return isinstance(name, str) and name.lower() in _REGISTRY


def available_locales() -> list[str]:
    return sorted(_REGISTRY)


__all__ = [
    "RelativePhrase",
    "LocaleTable",
    "default_meridiem",
    "register_locale",
    "get_locale_table",
    "is_registered",
    "available_locales",
]
