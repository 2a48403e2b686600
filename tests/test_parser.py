"""Tests for appdate.parser.

All parse functions degrade to the invalid instant on bad input; none of
them raise.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

import pytest

from appdate.engine import INVALID, Valid
from appdate.parser import (
    from_date_string,
    from_epoch_millis,
    from_epoch_seconds,
    from_local_time,
    from_utc_string,
    from_utc_time,
    is_date_string,
)
from appdate.units import UTC


class TestIsDateString:
    """Tests for is_date_string()."""

    @pytest.mark.parametrize("value", ["2024-01-15", "2024-02-29", "1900-01-01", "2200-12-31"])
    def test_valid(self, value: str) -> None:
        assert is_date_string(value)

    @pytest.mark.parametrize(
        "value",
        [
            "2020-88-24",
            "2020-88-44",
            "2020-88-500",
            "2023-02-29",
            "2024-04-31",
            "2024-1-15",
            "2024/01/15",
            "20240115",
            "2024-01-15T00:00",
            " 2024-01-15",
            "2024-01-15\n",
            "２０２４-０１-１５",
            "",
            None,
            20240115,
        ],
    )
    def test_invalid(self, value: object) -> None:
        assert not is_date_string(value)


class TestFromDateString:
    """Tests for from_date_string()."""

    def test_local_midnight(self, zurich) -> None:
        result = from_date_string("2024-07-01", zurich)
        assert result.moment.isoformat() == "2024-07-01T00:00:00+02:00"

    @pytest.mark.parametrize("value", ["2020-88-24", "2020-88-44", "2020-88-500", "", "2024-01-15\n"])
    def test_invalid(self, zurich, value: str) -> None:
        assert from_date_string(value, zurich) == INVALID

    def test_rejection_is_logged(self, zurich, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="appdate.parser"):
            from_date_string("2020-88-24", zurich)
        assert "Rejected date string '2020-88-24'" in caplog.text


class TestFromLocalTime:
    """Tests for from_local_time()."""

    @pytest.mark.parametrize("value, expected", [("14:30", (14, 30)), ("9:05", (9, 5)), ("00:00", (0, 0))])
    def test_valid(self, zurich, value: str, expected: tuple[int, int]) -> None:
        result = from_local_time(value, zurich)
        assert isinstance(result, Valid)
        assert (result.moment.hour, result.moment.minute) == expected

    def test_anchored_to_today(self, zurich) -> None:
        result = from_local_time("12:00", zurich)
        today = datetime.now(zurich).date()
        assert result.moment.date() in (today, today - timedelta(days=1))

    @pytest.mark.parametrize(
        "value", ["24:00", "12:60", "123:00", "12", "12:30:00", "noon", "", None, "09:00\n", "０９:００"]
    )
    def test_invalid(self, zurich, value: object) -> None:
        assert from_local_time(value, zurich) == INVALID  # type: ignore[arg-type]


class TestFromUtcString:
    """Tests for from_utc_string()."""

    def test_date_only_is_utc_midnight(self, zurich) -> None:
        result = from_utc_string("2024-06-15", zurich)
        assert result.moment.isoformat() == "2024-06-15T02:00:00+02:00"

    def test_with_z(self) -> None:
        result = from_utc_string("2024-06-15T14:30:00Z", UTC)
        assert result == Valid(datetime(2024, 6, 15, 14, 30, tzinfo=UTC))

    def test_with_offset(self) -> None:
        result = from_utc_string("2024-06-15T16:30:00+02:00", UTC)
        assert result.moment == datetime(2024, 6, 15, 14, 30, tzinfo=UTC)

    def test_without_offset_is_utc(self) -> None:
        result = from_utc_string("2024-06-15T14:30:00.250", UTC)
        assert result.moment == datetime(2024, 6, 15, 14, 30, 0, 250000, tzinfo=UTC)

    def test_none_is_now(self, zurich) -> None:
        before = datetime.now(UTC)
        result = from_utc_string(None, zurich)
        after = datetime.now(UTC)
        assert before <= result.moment <= after
        assert str(result.moment.tzinfo) == "Europe/Zurich"

    @pytest.mark.parametrize(
        "value", ["not a date", "2024-13-01", "2024-06-15T25:00:00", "", 1718461800, "２０２４-06-15"]
    )
    def test_invalid(self, value: object) -> None:
        assert from_utc_string(value, UTC) == INVALID  # type: ignore[arg-type]


class TestFromUtcTime:
    """Tests for from_utc_time()."""

    @pytest.mark.parametrize("value", ["14:30:00+00:00", "14:30:00Z", "14:30:00+0000"])
    def test_utc(self, value: str) -> None:
        result = from_utc_time(value, UTC)
        assert isinstance(result, Valid)
        assert result.moment.strftime("%H:%M:%S") == "14:30:00"

    def test_offset_and_projection(self, zurich) -> None:
        result = from_utc_time("14:30:00+02:00", UTC)
        assert result.moment.strftime("%H:%M") == "12:30"
        projected = from_utc_time("14:30:00Z", zurich)
        assert projected.moment.utcoffset() in (timedelta(hours=1), timedelta(hours=2))
        assert projected == Valid(projected.moment.astimezone(UTC))

    @pytest.mark.parametrize(
        "value",
        [
            "14:30",
            "14:30:00",
            "25:00:00Z",
            "14:30:00+15:00",
            "",
            None,
            "09:00:00Z\n",
            "１４:３０:００Z",
            "14:30:00+０２:００",
        ],
    )
    def test_invalid(self, value: object) -> None:
        assert from_utc_time(value, UTC) == INVALID  # type: ignore[arg-type]


class TestFromEpoch:
    """Tests for from_epoch_seconds() and from_epoch_millis()."""

    def test_seconds(self) -> None:
        result = from_epoch_seconds(1704067200, UTC)
        assert result.moment == datetime(2024, 1, 1, tzinfo=UTC)

    def test_millis(self, zurich) -> None:
        result = from_epoch_millis(0, zurich)
        assert result.moment.isoformat() == "1970-01-01T01:00:00+01:00"

    def test_fractional_seconds(self) -> None:
        assert from_epoch_seconds(1.5, UTC).moment.microsecond == 500000

    @pytest.mark.parametrize("value", [math.nan, math.inf, True, "1704067200", None, 1e300])
    def test_invalid(self, value: object) -> None:
        assert from_epoch_seconds(value, UTC) == INVALID  # type: ignore[arg-type]
        assert from_epoch_millis(value, UTC) == INVALID  # type: ignore[arg-type]
