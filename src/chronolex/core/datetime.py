"""Date-times with and without a UTC offset.

PrimitiveDateTime is a wall-clock reading with no offset attached.
OffsetDateTime pairs a wall-clock reading with the offset it was observed
at; equality, ordering and hashing use the instant, not the wall clock.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, ClassVar

from chronolex.convert import NANOSECONDS_PER_SECOND, SECONDS_PER_DAY
from chronolex.core.date import Date
from chronolex.core.duration import Duration
from chronolex.core.offset import UtcOffset
from chronolex.core.time import Time
from chronolex.diagnostics import ComponentRangeError, ErrorTemplate
from chronolex.enums import Month

if TYPE_CHECKING:
    from chronolex.format_description import FormatItem

__all__ = ["OffsetDateTime", "PrimitiveDateTime"]

_NANOSECONDS_PER_DAY = SECONDS_PER_DAY * NANOSECONDS_PER_SECOND


@dataclass(frozen=True, slots=True, order=True)
class PrimitiveDateTime:
    """A date and a time of day, without an offset.

    Example:
        >>> dt = Date.from_calendar_date(2020, 1, 2).with_hms(3, 4, 5)
        >>> str(dt)
        '2020-01-02 3:04:05.0'
        >>> str(dt.assume_utc())
        '2020-01-02 3:04:05.0 +00:00:00'
    """

    date: Date
    time: Time = Time.MIDNIGHT

    MIN: ClassVar[PrimitiveDateTime]
    MAX: ClassVar[PrimitiveDateTime]

    def _nanoseconds_since_epoch(self) -> int:
        days = self.date.to_julian_day() - Date.UNIX_EPOCH.to_julian_day()
        return days * _NANOSECONDS_PER_DAY + self.time.nanoseconds_of_day

    @classmethod
    def _from_nanoseconds_since_epoch(cls, nanoseconds: int) -> PrimitiveDateTime | None:
        days, nanosecond_of_day = divmod(nanoseconds, _NANOSECONDS_PER_DAY)
        julian_day = Date.UNIX_EPOCH.to_julian_day() + days
        if not Date.MIN.to_julian_day() <= julian_day <= Date.MAX.to_julian_day():
            return None
        return cls(
            Date._from_julian_day_unchecked(julian_day),
            Time._from_nanoseconds_of_day(nanosecond_of_day),
        )

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> Month:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hour(self) -> int:
        return self.time.hour

    @property
    def minute(self) -> int:
        return self.time.minute

    @property
    def second(self) -> int:
        return self.time.second

    @property
    def nanosecond(self) -> int:
        return self.time.nanosecond

    def assume_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Treat this wall-clock reading as observed at ``offset``."""
        return OffsetDateTime(self, offset)

    def assume_utc(self) -> OffsetDateTime:
        return OffsetDateTime(self, UtcOffset.UTC)

    def replace_date(self, date: Date) -> PrimitiveDateTime:
        return PrimitiveDateTime(date, self.time)

    def replace_time(self, time: Time) -> PrimitiveDateTime:
        return PrimitiveDateTime(self.date, time)

    def checked_add(self, duration: Duration | timedelta) -> PrimitiveDateTime | None:
        """Add ``duration`` exactly; None if the result is out of range."""
        if isinstance(duration, timedelta):
            duration = Duration.from_timedelta(duration)
        return self._from_nanoseconds_since_epoch(
            self._nanoseconds_since_epoch() + duration.total_nanoseconds
        )

    def checked_sub(self, duration: Duration | timedelta) -> PrimitiveDateTime | None:
        if isinstance(duration, timedelta):
            duration = Duration.from_timedelta(duration)
        return self.checked_add(-duration)

    def __add__(self, other: object) -> PrimitiveDateTime:
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise OverflowError(str(ErrorTemplate.date_overflow("adding duration to datetime")))
        return result

    def __sub__(self, other: object) -> PrimitiveDateTime | Duration:
        if isinstance(other, PrimitiveDateTime):
            return Duration.from_nanoseconds(
                self._nanoseconds_since_epoch() - other._nanoseconds_since_epoch()
            )
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise OverflowError(
                str(ErrorTemplate.date_overflow("subtracting duration from datetime"))
            )
        return result

    def format(self, description: FormatItem | str) -> str:
        """Render with a compiled format description (or version 1 source text)."""
        from chronolex.formatting import format_value  # noqa: PLC0415 - circular

        return format_value(description, date=self.date, time=self.time)

    @classmethod
    def parse(cls, text: str | bytes, description: FormatItem | str) -> PrimitiveDateTime:
        """Parse ``text`` against a format description.

        Raises:
            ParseFailedError: The text does not match, or lacks a date or time
        """
        from chronolex.parsing import parse_value  # noqa: PLC0415 - circular

        return parse_value(text, description).to_primitive_date_time()

    def __str__(self) -> str:
        return f"{self.date} {self.time}"


PrimitiveDateTime.MIN = PrimitiveDateTime(Date.MIN, Time.MIDNIGHT)
PrimitiveDateTime.MAX = PrimitiveDateTime(Date.MAX, Time(23, 59, 59, NANOSECONDS_PER_SECOND - 1))


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class OffsetDateTime:
    """A wall-clock date-time together with its UTC offset.

    Two values are equal when they denote the same instant, even if their
    offsets differ.

    Example:
        >>> a = OffsetDateTime.from_unix_timestamp(0)
        >>> b = a.to_offset(UtcOffset.from_hms(2, 0, 0))
        >>> a == b, str(b)
        (True, '1970-01-01 2:00:00.0 +02:00:00')
    """

    datetime: PrimitiveDateTime
    offset: UtcOffset = UtcOffset.UTC

    UNIX_EPOCH: ClassVar[OffsetDateTime]

    @classmethod
    def new_utc(cls, date: Date, time: Time) -> OffsetDateTime:
        return cls(PrimitiveDateTime(date, time), UtcOffset.UTC)

    @classmethod
    def from_unix_timestamp(cls, timestamp: int) -> OffsetDateTime:
        """UTC date-time ``timestamp`` seconds after 1970-01-01 00:00:00 UTC.

        Raises:
            ComponentRangeError: The instant is outside ``Date.MIN``..``Date.MAX``
        """
        minimum = PrimitiveDateTime.MIN.assume_utc().unix_timestamp()
        maximum = PrimitiveDateTime.MAX.assume_utc().unix_timestamp()
        if not minimum <= timestamp <= maximum:
            raise ComponentRangeError("timestamp", timestamp, minimum, maximum)
        return cls.from_unix_timestamp_nanos(timestamp * NANOSECONDS_PER_SECOND)

    @classmethod
    def from_unix_timestamp_nanos(cls, timestamp: int) -> OffsetDateTime:
        """UTC date-time ``timestamp`` nanoseconds after the Unix epoch.

        Raises:
            ComponentRangeError: The instant is outside ``Date.MIN``..``Date.MAX``
        """
        datetime = PrimitiveDateTime._from_nanoseconds_since_epoch(timestamp)
        if datetime is None:
            raise ComponentRangeError(
                "timestamp",
                timestamp,
                PrimitiveDateTime.MIN.assume_utc().unix_timestamp_nanos(),
                PrimitiveDateTime.MAX.assume_utc().unix_timestamp_nanos(),
            )
        return cls(datetime, UtcOffset.UTC)

    @property
    def date(self) -> Date:
        return self.datetime.date

    @property
    def time(self) -> Time:
        return self.datetime.time

    def unix_timestamp(self) -> int:
        """Whole seconds since the Unix epoch, floored."""
        return self.unix_timestamp_nanos() // NANOSECONDS_PER_SECOND

    def unix_timestamp_nanos(self) -> int:
        return (
            self.datetime._nanoseconds_since_epoch()
            - self.offset.whole_seconds * NANOSECONDS_PER_SECOND
        )

    def checked_to_offset(self, offset: UtcOffset) -> OffsetDateTime | None:
        """Same instant observed at ``offset``; None if the wall clock is out of range."""
        local = PrimitiveDateTime._from_nanoseconds_since_epoch(
            self.unix_timestamp_nanos() + offset.whole_seconds * NANOSECONDS_PER_SECOND
        )
        if local is None:
            return None
        return OffsetDateTime(local, offset)

    def to_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Same instant observed at ``offset``.

        Raises:
            OverflowError: The local date would leave the supported range
        """
        result = self.checked_to_offset(offset)
        if result is None:
            raise OverflowError(str(ErrorTemplate.date_overflow("converting offset")))
        return result

    def checked_add(self, duration: Duration | timedelta) -> OffsetDateTime | None:
        local = self.datetime.checked_add(duration)
        return None if local is None else OffsetDateTime(local, self.offset)

    def __add__(self, other: object) -> OffsetDateTime:
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        return OffsetDateTime(self.datetime + other, self.offset)

    def __sub__(self, other: object) -> OffsetDateTime | Duration:
        if isinstance(other, OffsetDateTime):
            return Duration.from_nanoseconds(
                self.unix_timestamp_nanos() - other.unix_timestamp_nanos()
            )
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        local = self.datetime - other
        assert isinstance(local, PrimitiveDateTime)
        return OffsetDateTime(local, self.offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.unix_timestamp_nanos() == other.unix_timestamp_nanos()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.unix_timestamp_nanos() < other.unix_timestamp_nanos()

    def __hash__(self) -> int:
        return hash(self.unix_timestamp_nanos())

    def format(self, description: FormatItem | str) -> str:
        """Render with a compiled format description (or version 1 source text)."""
        from chronolex.formatting import format_value  # noqa: PLC0415 - circular

        return format_value(description, date=self.date, time=self.time, offset=self.offset)

    @classmethod
    def parse(cls, text: str | bytes, description: FormatItem | str) -> OffsetDateTime:
        """Parse ``text`` against a format description.

        Either a date, time and offset, or a Unix timestamp, must be present.

        Raises:
            ParseFailedError: The text does not match, or lacks information
        """
        from chronolex.parsing import parse_value  # noqa: PLC0415 - circular

        return parse_value(text, description).to_offset_date_time()

    def __str__(self) -> str:
        return f"{self.datetime} {self.offset}"


OffsetDateTime.UNIX_EPOCH = OffsetDateTime(PrimitiveDateTime(Date.UNIX_EPOCH), UtcOffset.UTC)
