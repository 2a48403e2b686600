"""Internal constants for AppDate.

These constants define the defaults, canonical patterns and magic numbers
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Context defaults
DEFAULT_TIMEZONE: str = "Europe/Zurich"
DEFAULT_LOCALE: str = "en"

# Environment variables consulted once at import time
ENV_TIMEZONE: str = "APPDATE_TIMEZONE"
ENV_LANGUAGE: str = "APPDATE_LANGUAGE"

# Canonical interchange patterns
DATE_FORMAT: str = "YYYY-MM-DD"
LOCAL_TIME_FORMAT: str = "HH:mm"
UTC_TIME_FORMAT: str = "HH:mm:ssZ"
SHORT_DATE_FORMAT: str = "DD.MM."
WEEKDAY_PREFIX_FORMAT: str = "dd, "
DEFAULT_FORMAT: str = "YYYY-MM-DDTHH:mm:ssZ[Z]"
UTC_STRING_FORMAT: str = "YYYY-MM-DDTHH:mm:ssZ"

# Supported date range
MIN_DATE: str = "1900-01-01"
MAX_DATE: str = "2200-12-31"

# Weekday numbering: Sunday = 0 ... Saturday = 6
MONDAY: int = 1
WORKING_DAYS: frozenset[int] = frozenset({1, 2, 3, 4, 5})
DAYS_PER_WEEK: int = 7

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400


__all__ = [
    "DEFAULT_TIMEZONE",
    "DEFAULT_LOCALE",
    "ENV_TIMEZONE",
    "ENV_LANGUAGE",
    "DATE_FORMAT",
    "LOCAL_TIME_FORMAT",
    "UTC_TIME_FORMAT",
    "SHORT_DATE_FORMAT",
    "WEEKDAY_PREFIX_FORMAT",
    "DEFAULT_FORMAT",
    "UTC_STRING_FORMAT",
    "MIN_DATE",
    "MAX_DATE",
    "MONDAY",
    "WORKING_DAYS",
    "DAYS_PER_WEEK",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
]
