"""Tests for the appdate.engine comparison functions."""

from __future__ import annotations

from datetime import datetime

import pytest

from appdate.engine import INVALID, Valid, compare, is_after, is_before, is_between, is_same
from appdate.units import UTC, resolve_zone


def _utc(*args: int) -> Valid:
    return Valid(datetime(*args, tzinfo=UTC))


MORNING = _utc(2024, 1, 15, 8)
EVENING = _utc(2024, 1, 15, 20)
NEXT_DAY = _utc(2024, 1, 16, 8)


class TestOrdering:
    """Tests for is_before, is_after and is_same."""

    def test_without_unit(self) -> None:
        assert is_before(MORNING, EVENING)
        assert not is_before(EVENING, MORNING)
        assert is_after(EVENING, MORNING)
        assert not is_same(MORNING, EVENING)
        assert is_same(MORNING, _utc(2024, 1, 15, 8))

    def test_with_day_unit(self) -> None:
        """Instants on the same day are neither before nor after by day."""
        assert not is_before(MORNING, EVENING, "day")
        assert not is_after(EVENING, MORNING, "day")
        assert is_same(MORNING, EVENING, "day")
        assert is_before(MORNING, NEXT_DAY, "day")
        assert is_after(NEXT_DAY, EVENING, "d")

    def test_same_instant_in_different_zones(self) -> None:
        tokyo = Valid(MORNING.moment.astimezone(resolve_zone("Asia/Tokyo")))
        assert is_same(MORNING, tokyo)
        assert not is_before(MORNING, tokyo)
        assert not is_after(MORNING, tokyo)

    def test_unit_is_evaluated_in_receiver_zone(self) -> None:
        """Day boundaries come from the receiver's own zone."""
        zurich = resolve_zone("Europe/Zurich")
        late = Valid(datetime(2024, 1, 15, 23, 30, tzinfo=UTC).astimezone(zurich))  # Jan 16 local
        assert is_same(late, NEXT_DAY, "day")
        assert not is_same(_utc(2024, 1, 15, 23, 30), NEXT_DAY, "day")

    def test_week_start(self) -> None:
        """Saturday and the following Sunday share a Monday-started week only."""
        saturday = _utc(2024, 1, 13)
        sunday = _utc(2024, 1, 14)
        assert not is_same(saturday, sunday, "week")
        assert is_same(saturday, sunday, "week", week_start=1)

    @pytest.mark.parametrize("predicate", [is_before, is_after, is_same])
    def test_invalid_is_never_related(self, predicate) -> None:
        assert predicate(INVALID, MORNING) is False
        assert predicate(MORNING, INVALID) is False
        assert predicate(INVALID, INVALID) is False
        assert predicate(INVALID, INVALID, "day") is False

    def test_unknown_unit_raises(self) -> None:
        with pytest.raises(ValueError):
            is_same(MORNING, EVENING, "fortnight")


class TestCompare:
    """Tests for compare()."""

    def test_compare(self) -> None:
        assert compare(MORNING, EVENING) == -1
        assert compare(EVENING, MORNING) == 1
        assert compare(MORNING, _utc(2024, 1, 15, 8)) == 0

    def test_compare_with_unit(self) -> None:
        assert compare(MORNING, EVENING, "day") == 0
        assert compare(MORNING, NEXT_DAY, "day") == -1


class TestIsBetween:
    """Tests for is_between()."""

    START = _utc(2024, 1, 1)
    END = _utc(2024, 1, 31)
    MIDDLE = _utc(2024, 1, 15)

    @pytest.mark.parametrize(
        "inclusivity, at_start, at_end",
        [
            ("()", False, False),
            ("[]", True, True),
            ("[)", True, False),
            ("(]", False, True),
        ],
    )
    def test_inclusivity(self, inclusivity: str, at_start: bool, at_end: bool) -> None:
        """Square brackets include the bound and parentheses exclude it."""
        assert is_between(self.START, self.START, self.END, inclusivity=inclusivity) is at_start
        assert is_between(self.END, self.START, self.END, inclusivity=inclusivity) is at_end
        assert is_between(self.MIDDLE, self.START, self.END, inclusivity=inclusivity)

    def test_outside(self) -> None:
        assert not is_between(_utc(2023, 12, 31), self.START, self.END, inclusivity="[]")
        assert not is_between(_utc(2024, 2, 1), self.START, self.END, inclusivity="[]")

    def test_reversed_bounds(self) -> None:
        """Bounds may be given in descending order."""
        assert is_between(self.MIDDLE, self.END, self.START)
        assert not is_between(_utc(2024, 2, 1), self.END, self.START)

    def test_with_unit(self) -> None:
        """With a day unit, a time on the end date counts as the end date."""
        late_on_end = _utc(2024, 1, 31, 18)
        assert not is_between(late_on_end, self.START, self.END, "day", "()")
        assert is_between(late_on_end, self.START, self.END, "day", "[]")

    def test_invalid(self) -> None:
        assert not is_between(INVALID, self.START, self.END)
        assert not is_between(self.MIDDLE, INVALID, self.END)
        assert not is_between(self.MIDDLE, self.START, INVALID)

    @pytest.mark.parametrize("bad", ["[[", "", "[ )", "<>", "(]]"])
    def test_bad_inclusivity_raises(self, bad: str) -> None:
        with pytest.raises(ValueError, match="inclusivity"):
            is_between(self.MIDDLE, self.START, self.END, inclusivity=bad)
