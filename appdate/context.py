"""Timezone and locale context.

Every AppDate carries a DateContext (an IANA timezone plus a locale name)
captured when it was constructed. New values that do not pass an explicit
context pick up the *active* context, which is:

    1. the innermost ``use_context()`` block of the current thread or
       async task, if any, else
    2. the process-wide default.

``set_timezone()`` and ``set_language()`` replace the active context: inside
a ``use_context()`` block only that block is affected, outside of one the
process-wide default is. Existing AppDate values never change.

The process-wide default starts as Europe/Zurich and English and can be
overridden through the APPDATE_TIMEZONE and APPDATE_LANGUAGE environment
variables.

Examples:
    >>> from appdate import AppDate, use_context
    >>> with use_context(timezone="America/New_York", locale="en"):
    ...     AppDate.now().timezone
    'America/New_York'
"""

from __future__ import annotations

import dataclasses
import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import tzinfo
from typing import Iterator

from appdate._internal.constants import (
    DEFAULT_LOCALE,
    DEFAULT_TIMEZONE,
    ENV_LANGUAGE,
    ENV_TIMEZONE,
)
from appdate.errors import AppDateError, InvalidTimezoneError, UnknownLocaleError
from appdate.locales import LocaleTable, get_locale_table, is_registered
from appdate.units.timezone import is_valid_timezone, resolve_zone

logger = logging.getLogger(__name__)

# Application languages and the locale table each one selects
LANGUAGES: dict[str, str] = {
    "de": "de-ch",
    "fr": "fr-ch",
    "en": "en",
    "sr": "sr",
    "sr-ije": "sr-ije",
}


@dataclass(frozen=True)
class DateContext:
    """The timezone and locale an AppDate is interpreted and rendered in.

    Attributes:
        timezone: IANA zone identifier, e.g. "Europe/Zurich".
        locale: Registered locale table name, e.g. "de-ch".

    Raises:
        InvalidTimezoneError: If timezone cannot be resolved.
        UnknownLocaleError: If no locale table is registered as locale.
    """

    timezone: str = DEFAULT_TIMEZONE
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        if not is_valid_timezone(self.timezone):
            raise InvalidTimezoneError(self.timezone)
        # Normalise the spelling to the registered name ("DE-CH" -> "de-ch")
        object.__setattr__(self, "locale", get_locale_table(self.locale).name)

    @property
    def zone(self) -> tzinfo:
        return resolve_zone(self.timezone)

    @property
    def locale_table(self) -> LocaleTable:
        return get_locale_table(self.locale)

    def replace(self, **changes: str) -> DateContext:
        """Return a copy with the given fields replaced (and validated)."""
        return dataclasses.replace(self, **changes)


def resolve_language(lang: str) -> str:
    """Map an application language to a registered locale name.

    "de" and "fr" select the Swiss variants. Any registered locale name is
    accepted as is. Unknown languages fall back to English.

    Examples:
        >>> resolve_language("de")
        'de-ch'
        >>> resolve_language("fr-ch")
        'fr-ch'
        >>> resolve_language("tlh")
        'en'
    """
    if isinstance(lang, str):
        key = lang.lower()
        if key in LANGUAGES:
            return LANGUAGES[key]
        if is_registered(key):
            return get_locale_table(key).name
    logger.warning("Unsupported language %r, falling back to %r", lang, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


def _initial_context() -> DateContext:
    timezone = os.environ.get(ENV_TIMEZONE) or DEFAULT_TIMEZONE
    language = os.environ.get(ENV_LANGUAGE)
    locale = resolve_language(language) if language else DEFAULT_LOCALE
    try:
        return DateContext(timezone=timezone, locale=locale)
    except AppDateError:
        logger.warning(
            "Ignoring %s=%r: not a valid timezone", ENV_TIMEZONE, timezone
        )
        return DateContext(locale=locale)


_default_context: DateContext = _initial_context()
_scoped_context: ContextVar[DateContext | None] = ContextVar("appdate_context", default=None)


def current_context() -> DateContext:
    """Return the active context."""
    scoped = _scoped_context.get()
    return scoped if scoped is not None else _default_context


def _replace_active(context: DateContext) -> None:
    global _default_context
    if _scoped_context.get() is not None:
        _scoped_context.set(context)
    else:
        _default_context = context


def set_timezone(timezone: str) -> None:
    """Set the timezone of the active context.

    Args:
        timezone: IANA zone identifier.

    Raises:
        InvalidTimezoneError: If timezone cannot be resolved. The active
            context is left unchanged.

    Examples:
        >>> set_timezone("America/New_York")
        >>> set_timezone("Invalid/Timezone")
        Traceback (most recent call last):
        ...
        appdate.errors.InvalidTimezoneError: Invalid timezone: 'Invalid/Timezone'
    """
    _replace_active(current_context().replace(timezone=timezone))


def get_timezone() -> str:
    """Return the timezone of the active context."""
    return current_context().timezone


def set_language(lang: str) -> None:
    """Select the locale of the active context by application language.

    Given a language string, formatters, month and weekday names are
    localized accordingly:

        de: 10.10.2010
        en: 10/10/2010

    Args:
        lang: "de", "en", "fr", "sr", "sr-ije" or any registered locale
            name. Unknown values select English.
    """
    _replace_active(current_context().replace(locale=resolve_language(lang)))


def get_language() -> str:
    """Return the locale name of the active context."""
    return current_context().locale


@contextmanager
def use_context(
    timezone: str | None = None,
    locale: str | None = None,
    *,
    context: DateContext | None = None,
) -> Iterator[DateContext]:
    """Bind a context for the current thread or async task.

    Fields left as None are inherited from the active context. The
    previous context is restored on exit.

    Args:
        timezone: IANA zone identifier.
        locale: Locale table name (not an application language).
        context: A complete context; timezone and locale then override
            its fields.

    Yields:
        The bound DateContext.

    Raises:
        InvalidTimezoneError: If timezone cannot be resolved.
        UnknownLocaleError: If locale is not registered.
    """
    base = context if context is not None else current_context()
    changes = {
        name: value
        for name, value in (("timezone", timezone), ("locale", locale))
        if value is not None
    }
    bound = base.replace(**changes) if changes else base
    token = _scoped_context.set(bound)
    try:
        yield bound
    finally:
        _scoped_context.reset(token)


__all__ = [
    "LANGUAGES",
    "DateContext",
    "current_context",
    "get_language",
    "get_timezone",
    "resolve_language",
    "set_language",
    "set_timezone",
    "use_context",
    "InvalidTimezoneError",
    "UnknownLocaleError",
]
