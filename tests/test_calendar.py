"""Tests for calendar.py and convert.py: leap years, month lengths, ISO weeks, units.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from chronolex.calendar import (
    DAYS_CUMULATIVE_COMMON_LEAP,
    days_in_month,
    days_in_year,
    div_floor,
    is_leap_year,
    weeks_in_year,
)
from chronolex.convert import NANOSECONDS_PER_SECOND, SECONDS_PER_DAY, Unit
from tests.strategies.dates import years

# ============================================================================
# Leap years
# ============================================================================


class TestLeapYear:
    """Gregorian leap-year rule, including negative years."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2000, True),
            (1900, False),
            (2024, True),
            (2023, False),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
            (1600, True),
            (2100, False),
        ],
    )
    def test_known_years(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    @given(year=years)
    def test_days_in_year_matches_leap_status(self, year: int) -> None:
        """days_in_year is 366 exactly for leap years."""
        event(f"leap={is_leap_year(year)}")
        assert days_in_year(year) == (366 if is_leap_year(year) else 365)

    @given(year=years)
    def test_400_year_cycle(self, year: int) -> None:
        """The rule repeats every 400 years."""
        assert is_leap_year(year) == is_leap_year(year + 400)


# ============================================================================
# Month lengths
# ============================================================================


class TestDaysInMonth:
    """Month lengths and the cumulative table."""

    def test_february(self) -> None:
        assert days_in_month(2, 2019) == 28
        assert days_in_month(2, 2020) == 29
        assert days_in_month(2, 1900) == 28

    @pytest.mark.parametrize("month", [1, 3, 5, 7, 8, 10, 12])
    def test_thirty_one_day_months(self, month: int) -> None:
        assert days_in_month(month, 2019) == 31

    @pytest.mark.parametrize("month", [4, 6, 9, 11])
    def test_thirty_day_months(self, month: int) -> None:
        assert days_in_month(month, 2019) == 30

    @given(year=years)
    def test_months_sum_to_year(self, year: int) -> None:
        assert sum(days_in_month(m, year) for m in range(1, 13)) == days_in_year(year)

    def test_cumulative_table_matches_lengths(self) -> None:
        """Each cumulative entry is the sum of the preceding month lengths."""
        for leap, year in ((0, 2019), (1, 2020)):
            running = 0
            for month in range(1, 13):
                assert DAYS_CUMULATIVE_COMMON_LEAP[leap][month - 1] == running
                running += days_in_month(month, year)


# ============================================================================
# ISO weeks
# ============================================================================


class TestWeeksInYear:
    """Number of ISO weeks in a year."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2015, 53), (2019, 52), (2020, 53), (2021, 52), (2026, 53), (2004, 53), (1998, 53)],
    )
    def test_known_years(self, year: int, expected: int) -> None:
        assert weeks_in_year(year) == expected

    @given(year=years)
    def test_is_52_or_53(self, year: int) -> None:
        weeks = weeks_in_year(year)
        event(f"weeks={weeks}")
        assert weeks in (52, 53)


# ============================================================================
# Floor division and units
# ============================================================================


class TestDivFloor:
    """div_floor rounds toward negative infinity."""

    @pytest.mark.parametrize(
        ("dividend", "divisor", "expected"),
        [(7, 4, 1), (-1, 4, -1), (-4, 4, -1), (-5, 4, -2), (0, 7, 0)],
    )
    def test_values(self, dividend: int, divisor: int, expected: int) -> None:
        assert div_floor(dividend, divisor) == expected

    @given(
        dividend=st.integers(min_value=-(10**9), max_value=10**9),
        divisor=st.integers(min_value=1, max_value=1000),
    )
    def test_remainder_is_non_negative(self, dividend: int, divisor: int) -> None:
        quotient = div_floor(dividend, divisor)
        assert 0 <= dividend - quotient * divisor < divisor


class TestUnit:
    """Exact ratios between units."""

    def test_seconds_per_day(self) -> None:
        assert Unit.SECOND.per(Unit.DAY) == SECONDS_PER_DAY

    def test_nanoseconds_per_second(self) -> None:
        assert Unit.NANOSECOND.per(Unit.SECOND) == NANOSECONDS_PER_SECOND

    def test_same_unit_is_one(self) -> None:
        assert Unit.WEEK.per(Unit.WEEK) == 1

    def test_smaller_target_rejected(self) -> None:
        with pytest.raises(ValueError, match="shorter"):
            Unit.DAY.per(Unit.SECOND)

    @pytest.mark.parametrize("unit", list(Unit))
    def test_every_unit_divides_week(self, unit: Unit) -> None:
        assert Unit.WEEK.value % unit.value == 0
        assert unit.per(Unit.WEEK) * unit.value == Unit.WEEK.value
