"""Property tests for Date over the whole supported range.

The standard library's ``datetime.date`` covers years 1 through 9999 and
serves as an independent oracle there; outside that window the properties
are checked against Date's own conversions.

Python 3.13+.
"""

from __future__ import annotations

import datetime as stdlib

from hypothesis import event, given

from chronolex import Date, Duration, Weekday
from chronolex.constants import MAX_YEAR, MIN_YEAR
from tests.strategies.dates import (
    common_era_dates,
    date_by_boundary,
    dates,
    day_durations,
    julian_days,
    weekdays,
)

# Julian day of 0001-01-01 minus its proleptic ordinal in the datetime module.
_STDLIB_ORDINAL_TO_JULIAN = 1_721_425

# Dates whose ISO year and neighbouring weeks stay inside the supported range.
_INNER_YEARS = dates(
    Date.from_ordinal_date(MIN_YEAR + 1, 1), Date.from_ordinal_date(MAX_YEAR - 1, 1)
)


def _stdlib(date: Date) -> stdlib.date:
    return stdlib.date(date.year, date.month.value, date.day)


# ============================================================================
# Conversions are bijections
# ============================================================================


class TestConversionRoundTrips:
    """Every constructor inverts its accessor."""

    @given(julian_day=julian_days)
    def test_julian_day(self, julian_day: int) -> None:
        assert Date.from_julian_day(julian_day).to_julian_day() == julian_day

    @given(date=dates())
    def test_calendar_date(self, date: Date) -> None:
        assert Date.from_calendar_date(*date.to_calendar_date()) == date

    @given(date=dates())
    def test_ordinal_date(self, date: Date) -> None:
        assert Date.from_ordinal_date(*date.to_ordinal_date()) == date

    @given(date=_INNER_YEARS)
    def test_iso_week_date(self, date: Date) -> None:
        """ISO year may differ from the calendar year near January 1st."""
        year, week, weekday = date.to_iso_week_date()
        event(f"iso_year_differs={year != date.year}")
        assert Date.from_iso_week_date(year, week, weekday) == date

    @given(date=date_by_boundary())
    def test_boundaries(self, date: Date) -> None:
        assert Date.from_julian_day(date.to_julian_day()) == date
        assert Date.from_calendar_date(*date.to_calendar_date()) == date


# ============================================================================
# Agreement with datetime.date
# ============================================================================


class TestStdlibAgreement:
    """Years 1-9999 agree with the standard library."""

    @given(date=common_era_dates)
    def test_julian_day(self, date: Date) -> None:
        assert date.to_julian_day() == _stdlib(date).toordinal() + _STDLIB_ORDINAL_TO_JULIAN

    @given(date=common_era_dates)
    def test_weekday(self, date: Date) -> None:
        assert date.weekday().value == _stdlib(date).weekday()

    @given(date=common_era_dates)
    def test_ordinal(self, date: Date) -> None:
        assert date.ordinal == _stdlib(date).timetuple().tm_yday

    @given(date=dates(Date.from_calendar_date(2, 1, 1), Date.from_calendar_date(9998, 12, 31)))
    def test_iso_calendar(self, date: Date) -> None:
        iso = _stdlib(date).isocalendar()
        year, week, weekday = date.to_iso_week_date()
        assert (year, week, weekday.number_from_monday()) == (iso.year, iso.week, iso.weekday)

    @given(date=common_era_dates)
    def test_week_numbers(self, date: Date) -> None:
        reference = _stdlib(date)
        assert date.sunday_based_week == int(reference.strftime("%U"))
        assert date.monday_based_week == int(reference.strftime("%W"))


# ============================================================================
# Arithmetic and stepping
# ============================================================================


class TestArithmeticProperties:
    """Arithmetic is consistent with Julian-day differences."""

    @given(date=dates(), duration=day_durations)
    def test_checked_add_shifts_julian_day(self, date: Date, duration: Duration) -> None:
        result = date.checked_add(duration)
        target = date.to_julian_day() + duration.whole_days
        in_range = Date.MIN.to_julian_day() <= target <= Date.MAX.to_julian_day()
        event(f"in_range={in_range}")
        if in_range:
            assert result is not None
            assert result.to_julian_day() == target
            assert result - date == Duration.days(duration.whole_days)
        else:
            assert result is None

    @given(date=dates(), duration=day_durations)
    def test_saturating_stays_in_range(self, date: Date, duration: Duration) -> None:
        assert Date.MIN <= date.saturating_add(duration) <= Date.MAX
        assert Date.MIN <= date.saturating_sub(duration) <= Date.MAX

    @given(date=dates(max_value=Date.MAX.previous_day() or Date.MAX))
    def test_next_day_is_plus_one(self, date: Date) -> None:
        following = date.next_day()
        assert following is not None
        assert following.to_julian_day() == date.to_julian_day() + 1
        assert following.previous_day() == date

    @given(date=_INNER_YEARS, weekday=weekdays)
    def test_next_occurrence(self, date: Date, weekday: Weekday) -> None:
        result = date.next_occurrence(weekday)
        assert result.weekday() is weekday
        assert 1 <= result.to_julian_day() - date.to_julian_day() <= 7
        assert date.prev_occurrence(weekday).weekday() is weekday

    @given(date=dates())
    def test_week_numbers_in_range(self, date: Date) -> None:
        assert 0 <= date.sunday_based_week <= 53
        assert 0 <= date.monday_based_week <= 53
        assert 1 <= date.iso_week <= 53
