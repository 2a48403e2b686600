"""AppDate exception hierarchy.

All AppDate-specific exceptions inherit from AppDateError.

Parse and validation failures have no exception type: malformed input
never raises, it yields an invalid AppDate instead.
"""

from __future__ import annotations


class AppDateError(Exception):
    """Base exception for all AppDate errors."""

    pass


class InvalidTimezoneError(AppDateError, ValueError):
    """Invalid or unknown timezone.

    Raised when a timezone identifier cannot be resolved against the
    IANA timezone database.

    Examples:
        - set_timezone("Mars/Olympus_Mons")
        - AppDate.now().with_timezone("")
    """

    def __init__(self, timezone: object) -> None:
        super().__init__(f"Invalid timezone: {timezone!r}")
        self.timezone = timezone


class UnknownLocaleError(AppDateError, LookupError):
    """No locale table is registered under the requested name.

    Examples:
        - get_locale_table("tlh")
        - DateContext(locale="xx-yy")
    """

    def __init__(self, locale: object) -> None:
        super().__init__(f"Unknown locale: {locale!r}")
        self.locale = locale


__all__ = [
    "AppDateError",
    "InvalidTimezoneError",
    "UnknownLocaleError",
]
