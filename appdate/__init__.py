"""AppDate: an immutable, timezone-aware date value for applications.

AppDate replaces ad-hoc use of ``datetime`` across an application with a
single value type that validates its input, stays usable when input is
bad (an invalid AppDate poisons everything derived from it instead of
raising), does calendar arithmetic in its own timezone, walks working
days and renders itself in the selected locale.

Core Types:
    AppDate: The date value
    DateContext: Timezone and locale a value is bound to
    TimeUnit: Units for arithmetic and comparisons

Context Functions:
    set_timezone, get_timezone: Default IANA timezone
    set_language, get_language: Default locale ("de", "en", "fr", "sr", "sr-ije")
    use_context: Scoped timezone/locale for a block, thread or task

Helpers:
    get_localized_date_string: "2010-10-10" -> "10.10.2010" (de)
    format_local_time: "9:05" -> "09:05"
    is_date_string: YYYY-MM-DD check

Exceptions:
    AppDateError: Base exception
    InvalidTimezoneError: Timezone cannot be resolved
    UnknownLocaleError: No locale table registered under a name

Example:
    >>> from appdate import AppDate
    >>> d = AppDate.from_date_string("2024-01-12")
    >>> d.add_working_days(1).to_date_string()
    '2024-01-15'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Context
from appdate.context import (
    DateContext,
    current_context,
    get_language,
    get_timezone,
    set_language,
    set_timezone,
    use_context,
)

# Core types
from appdate.core.appdate import AppDate, format_local_time, get_localized_date_string

# Units
from appdate.units.timeunit import TimeUnit

# Exceptions
from appdate.errors import AppDateError, InvalidTimezoneError, UnknownLocaleError

# Locales
from appdate.locales import LocaleTable, available_locales, register_locale

from appdate.formatter import FormatOptions
from appdate.parser import is_date_string

__all__: list[str] = [
    "__version__",
    # Core types
    "AppDate",
    "DateContext",
    "FormatOptions",
    "TimeUnit",
    # Context
    "current_context",
    "get_language",
    "get_timezone",
    "set_language",
    "set_timezone",
    "use_context",
    # Helpers
    "format_local_time",
    "get_localized_date_string",
    "is_date_string",
    # Locales
    "LocaleTable",
    "available_locales",
    "register_locale",
    # Exceptions
    "AppDateError",
    "InvalidTimezoneError",
    "UnknownLocaleError",
]
