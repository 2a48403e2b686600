"""AppDate: the immutable, timezone-aware date value.

This module provides the AppDate class and two one-shot helpers built on
it. AppDate wraps an engine Instant together with the DateContext
(timezone and locale) that was active when the value was created.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from appdate import formatter, parser, workdays
from appdate._internal.constants import DEFAULT_FORMAT, MAX_DATE, MIN_DATE, MONDAY
from appdate.context import DateContext, current_context
from appdate.engine import comparisons, instant as _instant, ops
from appdate.engine.instant import INVALID, Instant, Valid
from appdate.formatter import FormatOptions
from appdate.locales import LocaleTable
from appdate.units.timeunit import TimeUnit


class AppDate:
    """An immutable point in time, bound to a timezone and a locale.

    AppDate values are created only through the class methods below.
    A value is either valid or invalid; parsing failures produce an
    invalid value instead of raising, and every operation on an invalid
    value yields another invalid value (or False, or the locale's
    invalid-date placeholder for formatters).

    Calendar operations (days, weeks, months, years, start/end of unit,
    weekday checks) are evaluated in the value's own timezone. Values
    derived from a value keep its timezone and locale, so later calls to
    set_timezone() or set_language() never change an existing value.

    Attributes:
        timezone: IANA zone identifier the value is interpreted in.
        locale: Name of the locale table used for rendering.
        context: The DateContext holding both.

    Examples:
        >>> d = AppDate.from_date_string("2024-01-12")  # a Friday
        >>> d.is_valid()
        True
        >>> d.add(1, "day").to_date_string()
        '2024-01-13'
        >>> d.next_working_day().to_date_string()
        '2024-01-15'

        >>> bad = AppDate.from_date_string("2020-88-24")
        >>> bad.is_valid()
        False
        >>> bad.add(1, "day").is_valid()
        False
        >>> bad.to_date_string()
        'Invalid Date'
    """

    __slots__ = ("_instant", "_context")

    _instant: Instant
    _context: DateContext

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError(
            "AppDate cannot be instantiated directly; use a class method such "
            "as AppDate.now() or AppDate.from_date_string()"
        )

    @classmethod
    def _create(cls, instant: Instant, context: DateContext) -> AppDate:
        """Create an AppDate from an engine instant.

        This is an internal factory method that bypasses the public
        constructors.
        """
        value = object.__new__(cls)
        object.__setattr__(value, "_instant", instant)
        object.__setattr__(value, "_context", context)
        return value

    def _derive(self, instant: Instant) -> AppDate:
        return AppDate._create(instant, self._context)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"AppDate is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"AppDate is immutable; cannot delete {name!r}")

    # Construction

    @classmethod
    def invalid(cls, context: DateContext | None = None) -> AppDate:
        """Return an invalid AppDate.

        Useful as a default value where None would need special handling.
        """
        return cls._create(INVALID, context or current_context())

    @classmethod
    def now(cls, context: DateContext | None = None) -> AppDate:
        """Return the current instant in the active (or given) context."""
        context = context or current_context()
        return cls._create(_instant.now(context.zone), context)

    @classmethod
    def from_date_string(cls, date: str, context: DateContext | None = None) -> AppDate:
        """Create an AppDate at local midnight of a YYYY-MM-DD date.

        Args:
            date: The date, strictly as YYYY-MM-DD.
            context: Context to bind; defaults to the active one.

        Returns:
            The value, or an invalid AppDate if date is malformed or does
            not exist.

        Examples:
            >>> AppDate.from_date_string("2024-02-29").is_valid()
            True
            >>> AppDate.from_date_string("2023-02-29").is_valid()
            False
        """
        context = context or current_context()
        return cls._create(parser.from_date_string(date, context.zone), context)

    @classmethod
    def from_local_time(cls, time: str, context: DateContext | None = None) -> AppDate:
        """Create an AppDate for an HH:mm time today.

        Examples:
            >>> AppDate.from_local_time("9:05").to_local_time()
            '09:05'
        """
        context = context or current_context()
        return cls._create(parser.from_local_time(time, context.zone), context)

    @classmethod
    def from_utc_string(cls, date: str | None = None, context: DateContext | None = None) -> AppDate:
        """Create an AppDate from an ISO 8601 string read as UTC.

        Without an argument this is the current instant.
        """
        context = context or current_context()
        return cls._create(parser.from_utc_string(date, context.zone), context)

    @classmethod
    def from_utc_time(cls, time: str, context: DateContext | None = None) -> AppDate:
        """Create an AppDate for an HH:mm:ssZ time today in UTC."""
        context = context or current_context()
        return cls._create(parser.from_utc_time(time, context.zone), context)

    @classmethod
    def from_epoch_seconds(cls, seconds: float, context: DateContext | None = None) -> AppDate:
        """Create an AppDate from a Unix timestamp in seconds.

        Examples:
            >>> AppDate.from_epoch_seconds(1704067200).to_utc_date_string()
            '2024-01-01'
        """
        context = context or current_context()
        return cls._create(parser.from_epoch_seconds(seconds, context.zone), context)

    @classmethod
    def from_epoch_millis(cls, millis: float, context: DateContext | None = None) -> AppDate:
        """Create an AppDate from a Unix timestamp in milliseconds."""
        context = context or current_context()
        return cls._create(parser.from_epoch_millis(millis, context.zone), context)

    @classmethod
    def min_date(cls, context: DateContext | None = None) -> AppDate:
        """Return the earliest supported date, 1900-01-01."""
        return cls.from_date_string(MIN_DATE, context)

    @classmethod
    def max_date(cls, context: DateContext | None = None) -> AppDate:
        """Return the latest supported date, 2200-12-31."""
        return cls.from_date_string(MAX_DATE, context)

    # Properties

    @property
    def context(self) -> DateContext:
        return self._context

    @property
    def timezone(self) -> str:
        return self._context.timezone

    @property
    def locale(self) -> str:
        return self._context.locale

    def is_valid(self) -> bool:
        return isinstance(self._instant, Valid)

    def to_datetime(self) -> datetime | None:
        """Return the aware datetime in the value's zone, or None if invalid."""
        if isinstance(self._instant, Valid):
            return self._instant.moment
        return None

    def with_timezone(self, timezone: str) -> AppDate:
        """Return the same instant interpreted in another timezone.

        Raises:
            InvalidTimezoneError: If timezone cannot be resolved.
        """
        context = self._context.replace(timezone=timezone)
        return AppDate._create(_instant.to_timezone(self._instant, context.zone), context)

    def with_locale(self, locale: str) -> AppDate:
        """Return the same instant rendered with another locale table.

        Raises:
            UnknownLocaleError: If no table is registered as locale.
        """
        return AppDate._create(self._instant, self._context.replace(locale=locale))

    # Arithmetic

    def add(self, value: float, unit: TimeUnit | str = TimeUnit.MILLISECOND) -> AppDate:
        """Return this value shifted forward by value units.

        Days and weeks are rounded half up, months and years truncated.
        Calendar units keep the local time of day across DST changes.

        Raises:
            ValueError: If unit is not a supported unit.

        Examples:
            >>> d = AppDate.from_date_string("2024-01-31")
            >>> d.add(1, "month").to_date_string()
            '2024-02-29'
            >>> d.add(2, TimeUnit.WEEK).to_date_string()
            '2024-02-14'
        """
        return self._derive(ops.add(self._instant, value, unit))

    def subtract(self, value: float, unit: TimeUnit | str = TimeUnit.MILLISECOND) -> AppDate:
        """Return this value shifted backward by value units. See add()."""
        return self._derive(ops.subtract(self._instant, value, unit))

    def start_of(self, unit: TimeUnit | str) -> AppDate:
        """Return the first moment of the unit containing this value.

        Weeks start on the locale's first day of the week.
        """
        return self._derive(ops.start_of(self._instant, unit, self._week_start))

    def end_of(self, unit: TimeUnit | str) -> AppDate:
        """Return the last millisecond of the unit containing this value."""
        return self._derive(ops.end_of(self._instant, unit, self._week_start))

    def tomorrow(self) -> AppDate:
        return self.add(1, TimeUnit.DAY)

    @property
    def _week_start(self) -> int:
        return self._context.locale_table.week_start

    # Comparison

    def _other_instant(self, other: object) -> Instant:
        if not isinstance(other, AppDate):
            raise TypeError(f"expected AppDate, got {type(other).__name__}")
        return other._instant

    def is_before(self, other: AppDate, unit: TimeUnit | str | None = None) -> bool:
        """Test whether this value lies before other.

        With a unit, the whole unit containing this value must lie before
        other.
        """
        return comparisons.is_before(self._instant, self._other_instant(other), unit, self._week_start)

    def is_after(self, other: AppDate, unit: TimeUnit | str | None = None) -> bool:
        return comparisons.is_after(self._instant, self._other_instant(other), unit, self._week_start)

    def is_same(self, other: AppDate, unit: TimeUnit | str | None = None) -> bool:
        """Test whether other lies in the same unit as this value.

        Examples:
            >>> morning = AppDate.from_local_time("08:00")
            >>> evening = AppDate.from_local_time("20:00")
            >>> morning.is_same(evening)
            False
            >>> morning.is_same(evening, "day")
            True
        """
        return comparisons.is_same(self._instant, self._other_instant(other), unit, self._week_start)

    def is_between(
        self,
        from_: AppDate | None = None,
        to: AppDate | None = None,
        unit: TimeUnit | str | None = None,
        inclusivity: str = "[)",
    ) -> bool:
        """Test whether this value lies between from_ and to.

        Args:
            from_: One bound; defaults to min_date().
            to: The other bound; defaults to max_date().
            unit: Optional granularity.
            inclusivity: "[" includes and "(" excludes the first bound,
                "]" includes and ")" excludes the second. The default
                includes the start and excludes the end.

        Raises:
            ValueError: If inclusivity is not one of "()", "[]", "[)", "(]".
        """
        lower = from_ if from_ is not None else AppDate.min_date(self._context)
        upper = to if to is not None else AppDate.max_date(self._context)
        return comparisons.is_between(
            self._instant,
            self._other_instant(lower),
            self._other_instant(upper),
            unit,
            inclusivity,
            self._week_start,
        )

    def is_today(self) -> bool:
        """Test whether this value falls on today's date in its timezone."""
        today = _instant.now(self._context.zone)
        return comparisons.is_same(self._instant, today, TimeUnit.DAY)

    def is_first_day_of_week(self) -> bool:
        """Test whether this value falls on a Monday."""
        return isinstance(self._instant, Valid) and _instant.weekday(self._instant) == MONDAY

    # Working days

    def is_working_day(self) -> bool:
        """Test whether this value falls on Monday to Friday."""
        return workdays.is_working_day(self._instant)

    def next_working_day(self) -> AppDate:
        return self._derive(workdays.next_working_day(self._instant))

    def previous_working_day(self) -> AppDate:
        return self._derive(workdays.previous_working_day(self._instant))

    def add_working_days(self, days: int) -> AppDate:
        """Advance by a number of working days.

        Zero, negative and non-integral counts return this value.

        Examples:
            >>> friday = AppDate.from_date_string("2024-01-12")
            >>> friday.add_working_days(1).to_date_string()
            '2024-01-15'
            >>> friday.add_working_days(1.5) is friday
            True
        """
        result = workdays.add_working_days(self._instant, days)
        if result is self._instant:
            return self
        return self._derive(result)

    # Formatting

    @property
    def _locale_table(self) -> LocaleTable:
        return self._context.locale_table

    def format(self, pattern: str = DEFAULT_FORMAT) -> str:
        """Render this value through a token pattern.

        Text in square brackets is copied literally.

        Examples:
            >>> AppDate.from_date_string("2024-01-15").format("dddd, MMMM Do")
            'Monday, January 15th'
        """
        return formatter.format(self._instant, self._locale_table, pattern)

    def to_local_time(self) -> str:
        """Return the local time as HH:mm."""
        return formatter.to_local_time(self._instant, self._locale_table)

    def to_utc_time(self) -> str:
        """Return the UTC time as HH:mm:ssZ."""
        return formatter.to_utc_time(self._instant, self._locale_table)

    def to_date_string(self) -> str:
        """Return the local date as YYYY-MM-DD."""
        return formatter.to_date_string(self._instant, self._locale_table)

    def to_utc_date_string(self) -> str:
        return formatter.to_utc_date_string(self._instant, self._locale_table)

    def to_utc_string(self) -> str:
        return formatter.to_utc_string(self._instant, self._locale_table)

    def to_localized_date_string(self, include_day_of_week: bool = False) -> str:
        """Return the date in the locale's numeric form.

        Examples:
            de-ch: 20.10.1985, with weekday: So, 20.10.1985
            en:    10/20/1985, with weekday: Su, 10/20/1985
        """
        return formatter.to_localized_date_string(self._instant, self._locale_table, include_day_of_week)

    def format_short(self, include_day_of_week: bool = True) -> str:
        """Return day and month as DD.MM., by default with the weekday."""
        return formatter.format_short(self._instant, self._locale_table, include_day_of_week)

    def format_date_time(self, include_day_of_week: bool = True) -> str:
        """Return the localized date followed by the local time."""
        return formatter.format_date_time(self._instant, self._locale_table, include_day_of_week)

    def to_relative(
        self,
        cap: int | None = None,
        fallback_after_days: int | None = None,
        fallback: Callable[[AppDate], str] | None = None,
        now: AppDate | None = None,
    ) -> str:
        """Describe this value relative to now ("3 days ago", "in 9+ days").

        Args:
            cap: Largest count to show; larger counts render as
                "<cap>+". Singular phrases such as "a day" are never
                capped.
            fallback_after_days: Beyond this many whole days from now,
                render an absolute date instead.
            fallback: Called with this value to render the absolute
                date; defaults to to_localized_date_string().
            now: Reference value; defaults to the current instant.
        """
        options = FormatOptions(
            cap=cap,
            fallback_after_days=fallback_after_days,
            fallback=(lambda: fallback(self)) if fallback is not None else None,
        )
        reference = self._other_instant(now) if now is not None else None
        return formatter.to_relative(self._instant, self._locale_table, options, reference)

    # Conversion

    def to_epoch_millis(self) -> int | None:
        """Return the Unix timestamp in milliseconds, or None if invalid."""
        if isinstance(self._instant, Valid):
            return _instant.to_epoch_millis(self._instant)
        return None

    def to_epoch_seconds(self) -> int | None:
        """Return the Unix timestamp in whole seconds, or None if invalid."""
        if isinstance(self._instant, Valid):
            return _instant.to_epoch_seconds(self._instant)
        return None

    # Dunder methods

    def __eq__(self, other: object) -> bool:
        """Two values are equal if both are invalid or both denote the same instant."""
        if not isinstance(other, AppDate):
            return NotImplemented
        return self._instant == other._instant

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AppDate):
            return NotImplemented
        return comparisons.is_before(self._instant, other._instant)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AppDate):
            return NotImplemented
        return self.is_valid() and other.is_valid() and not self > other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AppDate):
            return NotImplemented
        return comparisons.is_after(self._instant, other._instant)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AppDate):
            return NotImplemented
        return self.is_valid() and other.is_valid() and not self < other

    def __hash__(self) -> int:
        return hash(self._instant)

    def __repr__(self) -> str:
        if not isinstance(self._instant, Valid):
            return f"AppDate.invalid(timezone={self.timezone!r})"
        return f"AppDate({self._instant.moment.isoformat()!r}, timezone={self.timezone!r})"

    def __str__(self) -> str:
        return self.format()


def get_localized_date_string(date: str, *, include_day_of_week: bool = False) -> str:
    """Render a YYYY-MM-DD string in the active locale's date form.

    Examples:
        >>> get_localized_date_string("2010-10-10")
        '10/10/2010'
    """
    return AppDate.from_date_string(date).to_localized_date_string(include_day_of_week)


def format_local_time(time: str) -> str:
    """Normalise an HH:mm time string ("9:05" -> "09:05")."""
    return AppDate.from_local_time(time).to_local_time()


__all__ = ["AppDate", "get_localized_date_string", "format_local_time"]
