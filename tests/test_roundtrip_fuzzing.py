"""Format-then-parse round trips.

Properties tested:
- Every round-trippable date description recovers the date it rendered
- Time descriptions with a fractional second recover the exact time
- Offset date-times survive strftime rendering at minute precision
- Random descriptions either compile or fail with a located diagnostic

The non-fuzz tests below run in every suite; the fuzz-marked tests widen
the same properties to the whole year range and run with: pytest -m fuzz

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from chronolex import Date, InvalidFormatDescriptionError, OffsetDateTime, Time, UtcOffset
from chronolex.format_description import parse_borrowed, parse_owned, parse_strftime_owned
from chronolex.formatting import format_value
from chronolex.parsing import parse_value
from tests.strategies.dates import dates, minute_offsets, times
from tests.strategies.format_descriptions import (
    date_descriptions,
    description_soup,
    time_descriptions,
)

# Dates whose ISO week-numbering year stays inside 1..9999.
_ISO_SAFE_DATES = dates(Date.from_calendar_date(1, 1, 8), Date.from_calendar_date(9999, 12, 24))

_RECENT_DATES = dates(Date.from_calendar_date(1900, 1, 1), Date.from_calendar_date(2100, 12, 31))


def _date_round_trip(source: str, date: Date) -> None:
    description = parse_owned(source, 1)
    text = format_value(description, date=date)
    assert parse_value(text, description).to_date() == date, text


# =============================================================================
# Dates
# =============================================================================


class TestDateRoundTrip:
    """Rendered dates parse back to themselves."""

    @example(
        source="[year base:iso_week]-W[week_number]-[weekday repr:monday]",
        date=Date.from_calendar_date(2021, 1, 1),
    )
    @example(
        source="[year] [week_number repr:sunday] [weekday repr:sunday one_indexed:false]",
        date=Date.from_calendar_date(2019, 1, 1),
    )
    @given(source=date_descriptions, date=_RECENT_DATES)
    def test_recent_dates(self, source: str, date: Date) -> None:
        event(f"description={source}")
        _date_round_trip(source, date)

    @pytest.mark.fuzz
    @settings(max_examples=2_000)
    @given(source=date_descriptions, date=_ISO_SAFE_DATES)
    def test_common_era(self, source: str, date: Date) -> None:
        _date_round_trip(source, date)


# =============================================================================
# Times and instants
# =============================================================================


class TestTimeRoundTrip:
    """Rendered times parse back exactly."""

    @given(source=time_descriptions, time=times)
    def test_times(self, source: str, time: Time) -> None:
        description = parse_owned(source, 1)
        text = format_value(description, time=time)
        assert parse_value(text, description).to_time() == time, text


class TestInstantRoundTrip:
    """Offset date-times through strftime and bracketed descriptions."""

    _STRFTIME = "%Y-%m-%dT%H:%M:%S%z"

    @given(date=_RECENT_DATES, offset=minute_offsets)
    def test_strftime(self, date: Date, offset: UtcOffset) -> None:
        value = date.with_hms(12, 34, 56).assume_offset(offset)
        description = parse_strftime_owned(self._STRFTIME)
        parsed = OffsetDateTime.parse(value.format(description), description)
        assert parsed == value
        assert parsed.offset == offset

    @given(seconds=st.integers(min_value=-(10**10), max_value=10**10))
    def test_unix_timestamp(self, seconds: int) -> None:
        value = OffsetDateTime.from_unix_timestamp(seconds)
        assert OffsetDateTime.parse(value.format("[unix_timestamp]"), "[unix_timestamp]") == value

    @pytest.mark.fuzz
    @settings(max_examples=2_000)
    @given(date=_ISO_SAFE_DATES, time=times, offset=minute_offsets)
    def test_full_precision(self, date: Date, time: Time, offset: UtcOffset) -> None:
        source = (
            "[year]-[month]-[day]T[hour]:[minute]:[second].[subsecond digits:9]"
            "[offset_hour sign:mandatory]:[offset_minute]"
        )
        value = date.with_time(time).assume_offset(offset)
        assert OffsetDateTime.parse(value.format(source), source) == value


# =============================================================================
# Robustness
# =============================================================================


class TestDescriptionRobustness:
    """The compiler never fails with anything but a located diagnostic."""

    @pytest.mark.fuzz
    @settings(max_examples=5_000)
    @given(source=description_soup)
    def test_soup(self, source: str) -> None:
        try:
            compiled = parse_borrowed(source)
        except InvalidFormatDescriptionError as error:
            event(f"code={error.diagnostic.code.name if error.diagnostic else None}")
            assert error.index is not None
            assert 0 <= error.index <= len(source.encode())
        else:
            event("compiled")
            assert compiled == compiled.to_owned()
