"""Tests for TimeUnit and the timezone helpers.

These tests verify unit alias resolution, IANA zone resolution, and the
parsing and formatting of fixed UTC offsets.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from appdate.errors import AppDateError, InvalidTimezoneError
from appdate.units import UTC, TimeUnit, format_offset, is_valid_timezone, parse_offset, resolve_zone


class TestTimeUnitParse:
    """Tests for TimeUnit.parse()."""

    @pytest.mark.parametrize(
        "alias, expected",
        [
            ("ms", TimeUnit.MILLISECOND),
            ("s", TimeUnit.SECOND),
            ("m", TimeUnit.MINUTE),
            ("h", TimeUnit.HOUR),
            ("d", TimeUnit.DAY),
            ("D", TimeUnit.DAY),
            ("w", TimeUnit.WEEK),
            ("M", TimeUnit.MONTH),
            ("y", TimeUnit.YEAR),
        ],
    )
    def test_short_aliases(self, alias: str, expected: TimeUnit) -> None:
        """Single-letter aliases resolve case-sensitively."""
        assert TimeUnit.parse(alias) is expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("day", TimeUnit.DAY),
            ("days", TimeUnit.DAY),
            ("Days", TimeUnit.DAY),
            ("date", TimeUnit.DAY),
            ("week", TimeUnit.WEEK),
            ("months", TimeUnit.MONTH),
            ("YEAR", TimeUnit.YEAR),
            ("milliseconds", TimeUnit.MILLISECOND),
            ("hours", TimeUnit.HOUR),
        ],
    )
    def test_long_names(self, name: str, expected: TimeUnit) -> None:
        """Long names are case-insensitive and may be plural."""
        assert TimeUnit.parse(name) is expected

    def test_member_passes_through(self) -> None:
        """A TimeUnit member is returned unchanged."""
        assert TimeUnit.parse(TimeUnit.WEEK) is TimeUnit.WEEK

    def test_minute_and_month_are_distinct(self) -> None:
        """'m' is minute while 'M' is month."""
        assert TimeUnit.parse("m") is not TimeUnit.parse("M")

    @pytest.mark.parametrize("bad", ["fortnight", "", "dd", "x"])
    def test_unknown_unit_raises(self, bad: str) -> None:
        """Unknown unit names raise ValueError."""
        with pytest.raises(ValueError, match="unsupported time unit"):
            TimeUnit.parse(bad)

    def test_non_string_raises(self) -> None:
        """Non-string units raise ValueError."""
        with pytest.raises(ValueError):
            TimeUnit.parse(3)  # type: ignore[arg-type]


class TestTimeUnitProperties:
    """Tests for TimeUnit properties and conversions."""

    def test_calendar_units(self) -> None:
        """DAY, WEEK, MONTH and YEAR are calendar units."""
        calendar = {unit for unit in TimeUnit if unit.is_calendar}
        assert calendar == {TimeUnit.DAY, TimeUnit.WEEK, TimeUnit.MONTH, TimeUnit.YEAR}

    def test_length(self) -> None:
        """Fixed-length units report their nominal length."""
        assert TimeUnit.MILLISECOND.length == timedelta(milliseconds=1)
        assert TimeUnit.HOUR.length == timedelta(hours=1)
        assert TimeUnit.WEEK.length == timedelta(days=7)

    def test_variable_units_have_no_length(self) -> None:
        """MONTH and YEAR have no fixed length."""
        assert TimeUnit.MONTH.length is None
        assert TimeUnit.YEAR.length is None


class TestResolveZone:
    """Tests for resolve_zone() and is_valid_timezone()."""

    def test_iana_zone(self) -> None:
        """IANA identifiers resolve to a tzinfo with the right key."""
        zone = resolve_zone("Europe/Zurich")
        assert str(zone) == "Europe/Zurich"

    def test_resolution_is_cached(self) -> None:
        """Resolving the same zone twice returns the same object."""
        assert resolve_zone("America/New_York") is resolve_zone("America/New_York")

    @pytest.mark.parametrize("alias", ["UTC", "utc", "Z"])
    def test_utc_aliases(self, alias: str) -> None:
        """UTC and Z resolve to the UTC singleton."""
        assert resolve_zone(alias) is UTC

    @pytest.mark.parametrize("bad", ["Invalid/Timezone", "", "   ", "../etc/passwd", "Europe/"])
    def test_invalid_zone_raises(self, bad: str) -> None:
        """Unresolvable identifiers raise InvalidTimezoneError."""
        with pytest.raises(InvalidTimezoneError) as info:
            resolve_zone(bad)
        assert info.value.timezone == bad

    def test_non_string_raises(self) -> None:
        """Non-string identifiers raise InvalidTimezoneError."""
        with pytest.raises(InvalidTimezoneError):
            resolve_zone(None)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        """InvalidTimezoneError is both an AppDateError and a ValueError."""
        with pytest.raises(AppDateError):
            resolve_zone("Mars/Olympus_Mons")
        with pytest.raises(ValueError):
            resolve_zone("Mars/Olympus_Mons")

    def test_is_valid_timezone(self) -> None:
        """is_valid_timezone() never raises."""
        assert is_valid_timezone("Asia/Tokyo") is True
        assert is_valid_timezone("Invalid/Timezone") is False
        assert is_valid_timezone(42) is False


class TestParseOffset:
    """Tests for parse_offset()."""

    @pytest.mark.parametrize(
        "text, seconds",
        [
            ("+05:30", 19800),
            ("-05:00", -18000),
            ("+0100", 3600),
            ("-0330", -12600),
            ("+02", 7200),
            ("+14:00", 50400),
        ],
    )
    def test_valid_offsets(self, text: str, seconds: int) -> None:
        """Offsets in all supported forms parse to fixed offsets."""
        offset = parse_offset(text)
        assert offset is not None
        assert offset.utcoffset(None) == timedelta(seconds=seconds)

    @pytest.mark.parametrize("text", ["Z", "z", "+00:00", "-0000"])
    def test_zero_offsets_are_utc(self, text: str) -> None:
        """Zero offsets are the UTC singleton."""
        assert parse_offset(text) is UTC

    @pytest.mark.parametrize(
        "text", ["+25:00", "+14:30", "+05:60", "05:00", "+5:00", "UTC", "", "+02:00\n", "+０２:００"]
    )
    def test_invalid_offsets(self, text: str) -> None:
        """Malformed or out-of-range offsets return None."""
        assert parse_offset(text) is None


class TestFormatOffset:
    """Tests for format_offset()."""

    def test_positive(self) -> None:
        assert format_offset(timedelta(hours=2)) == "+02:00"

    def test_negative_without_colon(self) -> None:
        assert format_offset(timedelta(hours=-9, minutes=-30), colon=False) == "-0930"

    def test_zero_and_none(self) -> None:
        """Zero and missing offsets render as +00:00."""
        assert format_offset(timedelta(0)) == "+00:00"
        assert format_offset(None) == "+00:00"
