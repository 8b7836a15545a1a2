"""Tests for core/datetime.py: PrimitiveDateTime and OffsetDateTime.

Python 3.13+.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from hypothesis import given

from chronolex import (
    ComponentRangeError,
    Date,
    Duration,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcOffset,
)
from tests.strategies.dates import dates, minute_offsets, times

# Dates whose UTC instant stays in range under any offset.
_SHIFTABLE_DATES = dates(Date.from_calendar_date(2, 1, 1), Date.from_calendar_date(9998, 12, 31))


def dt(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> PrimitiveDateTime:
    return Date.from_calendar_date(year, month, day).with_hms(hour, minute, second)


class TestPrimitiveDateTime:
    """Wall-clock date-times."""

    def test_fields(self) -> None:
        value = Date.from_calendar_date(2020, 1, 2).with_hms_nano(3, 4, 5, 6)
        assert (value.year, value.month, value.day) == (2020, 1, 2)
        assert (value.hour, value.minute, value.second, value.nanosecond) == (3, 4, 5, 6)

    def test_add_crosses_midnight(self) -> None:
        assert dt(2019, 12, 31, 23) + Duration.hours(2) == dt(2020, 1, 1, 1)
        assert dt(2020, 1, 1, 1) - timedelta(hours=2) == dt(2019, 12, 31, 23)

    def test_difference(self) -> None:
        assert dt(2020, 1, 2, 12) - dt(2020, 1, 1) == Duration.hours(36)

    def test_overflow(self) -> None:
        assert PrimitiveDateTime.MAX.checked_add(Duration.from_nanoseconds(1)) is None
        with pytest.raises(OverflowError):
            PrimitiveDateTime.MIN - Duration.from_nanoseconds(1)

    def test_replace(self) -> None:
        value = dt(2020, 1, 2, 3)
        assert value.replace_time(Time.MIDNIGHT) == dt(2020, 1, 2)
        assert value.replace_date(Date.UNIX_EPOCH) == dt(1970, 1, 1, 3)

    def test_str(self) -> None:
        assert str(dt(2020, 1, 2, 3, 4, 5)) == "2020-01-02 3:04:05.0"

    def test_format_and_parse(self) -> None:
        description = "[year]-[month]-[day] [hour]:[minute]:[second]"
        value = dt(2020, 1, 2, 3, 4, 5)
        assert value.format(description) == "2020-01-02 03:04:05"
        assert PrimitiveDateTime.parse("2020-01-02 03:04:05", description) == value


class TestOffsetDateTime:
    """Instants: equality and ordering ignore the offset."""

    def test_unix_epoch(self) -> None:
        assert OffsetDateTime.UNIX_EPOCH.unix_timestamp() == 0
        assert OffsetDateTime.from_unix_timestamp(0) == OffsetDateTime.UNIX_EPOCH

    def test_known_timestamp(self) -> None:
        value = OffsetDateTime.from_unix_timestamp(1_700_000_000)
        assert value.datetime == dt(2023, 11, 14, 22, 13, 20)
        assert value.offset.is_utc()

    def test_negative_timestamp(self) -> None:
        value = OffsetDateTime.from_unix_timestamp_nanos(-1)
        assert value.date == Date.from_calendar_date(1969, 12, 31)
        assert value.time == Time(23, 59, 59, 999_999_999)
        assert value.unix_timestamp() == -1

    def test_timestamp_out_of_range(self) -> None:
        with pytest.raises(ComponentRangeError) as exc_info:
            OffsetDateTime.from_unix_timestamp(10**15)
        assert exc_info.value.name == "timestamp"

    def test_offset_shifts_instant(self) -> None:
        local = dt(1970, 1, 1, 2).assume_offset(UtcOffset.from_hms(2, 0, 0))
        assert local.unix_timestamp() == 0
        assert local == OffsetDateTime.UNIX_EPOCH
        assert hash(local) == hash(OffsetDateTime.UNIX_EPOCH)

    def test_to_offset(self) -> None:
        shifted = OffsetDateTime.UNIX_EPOCH.to_offset(UtcOffset.from_hms(-5, 0, 0))
        assert shifted.datetime == dt(1969, 12, 31, 19)
        assert shifted == OffsetDateTime.UNIX_EPOCH

    def test_to_offset_overflow(self) -> None:
        edge = PrimitiveDateTime.MAX.assume_utc()
        assert edge.checked_to_offset(UtcOffset.from_hms(1, 0, 0)) is None
        with pytest.raises(OverflowError):
            edge.to_offset(UtcOffset.from_hms(1, 0, 0))

    def test_ordering_uses_instant(self) -> None:
        early = dt(2020, 1, 1, 12).assume_offset(UtcOffset.from_hms(5, 0, 0))
        late = dt(2020, 1, 1, 10).assume_utc()
        assert early < late

    def test_difference(self) -> None:
        a = OffsetDateTime.from_unix_timestamp(100)
        b = OffsetDateTime.from_unix_timestamp(40)
        assert a - b == Duration.whole_seconds(60)

    def test_str(self) -> None:
        assert str(OffsetDateTime.UNIX_EPOCH) == "1970-01-01 0:00:00.0 +00:00:00"

    def test_format_and_parse(self) -> None:
        description = (
            "[year]-[month]-[day]T[hour]:[minute]:[second][offset_hour sign:mandatory]:"
            "[offset_minute]"
        )
        value = dt(2020, 1, 2, 3, 4, 5).assume_offset(UtcOffset.from_hms(-5, -30, 0))
        text = value.format(description)
        assert text == "2020-01-02T03:04:05-05:30"
        parsed = OffsetDateTime.parse(text, description)
        assert parsed == value
        assert parsed.offset == value.offset

    @given(date=_SHIFTABLE_DATES, time=times, offset=minute_offsets)
    def test_timestamp_round_trip(self, date: Date, time: Time, offset: UtcOffset) -> None:
        value = PrimitiveDateTime(date, time).assume_offset(offset)
        back = OffsetDateTime.from_unix_timestamp_nanos(value.unix_timestamp_nanos())
        assert back == value
        assert back.offset.is_utc()
