"""Hypothesis strategies for calendar values.

Provides strategies for dates across the whole supported range, dates near
the boundaries that calendar formulas get wrong, times of day, offsets and
durations.

Usage:
    from hypothesis import given
    from tests.strategies.dates import dates, times

    @given(date=dates())
    def test_julian_round_trip(date):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from chronolex import Date, Duration, Month, Time, UtcOffset, Weekday
from chronolex.constants import MAX_YEAR, MIN_YEAR

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# DATES
# ============================================================================

julian_days: SearchStrategy[int] = st.integers(
    min_value=Date.MIN.to_julian_day(), max_value=Date.MAX.to_julian_day()
)

years: SearchStrategy[int] = st.integers(min_value=MIN_YEAR, max_value=MAX_YEAR)

# Four-digit years, representable by every year component without extended range.
four_digit_years: SearchStrategy[int] = st.integers(min_value=-9999, max_value=9999)

weekdays: SearchStrategy[Weekday] = st.sampled_from(list(Weekday))

months: SearchStrategy[Month] = st.sampled_from(list(Month))


def dates(
    min_value: Date = Date.MIN, max_value: Date = Date.MAX
) -> SearchStrategy[Date]:
    """Dates between ``min_value`` and ``max_value`` inclusive."""
    return st.integers(
        min_value=min_value.to_julian_day(), max_value=max_value.to_julian_day()
    ).map(Date.from_julian_day)


# Dates whose year has four digits or fewer.
common_era_dates: SearchStrategy[Date] = dates(
    Date.from_calendar_date(1, Month.JANUARY, 1),
    Date.from_calendar_date(9999, Month.DECEMBER, 31),
)


@composite
def date_by_boundary(draw: st.DrawFn) -> Date:
    """Dates on year, month and leap-day boundaries.

    Events emitted:
    - boundary={year_start|year_end|leap_day|month_end|range_edge}
    """
    kind = draw(
        st.sampled_from(["year_start", "year_end", "leap_day", "month_end", "range_edge"])
    )
    event(f"boundary={kind}")
    year = draw(st.integers(min_value=MIN_YEAR, max_value=MAX_YEAR))
    match kind:
        case "year_start":
            return Date.from_ordinal_date(year, 1)
        case "year_end":
            return Date.from_calendar_date(year, Month.DECEMBER, 31)
        case "leap_day":
            leap_year = draw(st.integers(min_value=-(-MIN_YEAR // 4), max_value=MAX_YEAR // 4)) * 4
            if leap_year % 100 == 0 and leap_year % 400 != 0:
                leap_year += 4
            return Date.from_calendar_date(leap_year, Month.FEBRUARY, 29)
        case "month_end":
            month = draw(months)
            return Date.from_calendar_date(year, month, month.length(year))
        case _:
            return draw(st.sampled_from([Date.MIN, Date.MAX]))


# ============================================================================
# TIMES, OFFSETS, DURATIONS
# ============================================================================

times: SearchStrategy[Time] = st.builds(
    Time,
    hour=st.integers(min_value=0, max_value=23),
    minute=st.integers(min_value=0, max_value=59),
    second=st.integers(min_value=0, max_value=59),
    nanosecond=st.integers(min_value=0, max_value=999_999_999),
)

offsets: SearchStrategy[UtcOffset] = st.integers(
    min_value=-(25 * 3600 + 59 * 60 + 59), max_value=25 * 3600 + 59 * 60 + 59
).map(UtcOffset.from_whole_seconds)

# Offsets with whole minutes, as written by `[offset_hour]:[offset_minute]`.
minute_offsets: SearchStrategy[UtcOffset] = st.integers(
    min_value=-(25 * 60 + 59), max_value=25 * 60 + 59
).map(lambda minutes: UtcOffset.from_whole_seconds(minutes * 60))

day_durations: SearchStrategy[Duration] = st.integers(
    min_value=-1_000_000, max_value=1_000_000
).map(Duration.days)

durations: SearchStrategy[Duration] = st.integers(
    min_value=-(10**20), max_value=10**20
).map(Duration.from_nanoseconds)
