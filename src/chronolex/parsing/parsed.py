"""Accumulator for values parsed out of text.

``Parsed`` collects every field a format description can produce, then
assembles the fields into a Date, Time, UtcOffset or date-time once parsing
is complete. Each field is None until a component sets it.

Walking a FormatItem tree is atomic per Compound, Optional and First: a
branch that fails leaves no half-written fields behind.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from chronolex.constants import MAX_YEAR, MIN_YEAR
from chronolex.core import Date, OffsetDateTime, PrimitiveDateTime, Time, UtcOffset
from chronolex.diagnostics import (
    ComponentRangeError,
    ErrorTemplate,
    ParseErrorKind,
    ParseFailedError,
)
from chronolex.enums import Month, Weekday
from chronolex.format_description import component
from chronolex.format_description.component import Component
from chronolex.format_description.format_item import (
    Compound,
    First,
    FormatItem,
    Literal,
    Optional,
)
from chronolex.format_description.modifier import WeekNumberRepr, YearRepr

from . import component as parsers
from .combinator import ParsedItem

__all__ = ["Parsed"]

_MAX_CENTURY = MAX_YEAR // 100


def _check(name: str, value: int, minimum: int, maximum: int) -> int:
    if not minimum <= value <= maximum:
        raise ComponentRangeError(name, value, minimum, maximum)
    return value


def _week_adjustment(year: int, *, sunday_based: bool) -> int:
    """Days of the previous week that January 1st of ``year`` falls after."""
    weekday = Date.from_ordinal_date(year, 1).weekday()
    days = weekday.number_days_from_sunday() if sunday_based else weekday.number_days_from_monday()
    return days or 7


def _insufficient(target: str) -> ParseFailedError:
    return ParseFailedError(
        ErrorTemplate.parse_insufficient_information(target),
        kind=ParseErrorKind.INSUFFICIENT_INFORMATION,
    )


def _component_range(error: ComponentRangeError) -> ParseFailedError:
    diagnostic = error.diagnostic
    assert diagnostic is not None
    return ParseFailedError(
        ErrorTemplate.parse_component_range(diagnostic),
        kind=ParseErrorKind.COMPONENT_RANGE,
        component=error.name,
    )


@dataclass(slots=True)
class Parsed:
    """Fields parsed so far.

    Attributes are plain values; the ``set_*`` methods validate before
    storing and raise ComponentRangeError for out-of-range values.

    Example:
        >>> from chronolex.format_description import parse_owned
        >>> parsed = Parsed()
        >>> parsed.parse_item(b"2020-01-02", parse_owned("[year]-[month]-[day]"))
        10
        >>> str(parsed.to_date())
        '2020-01-02'
    """

    year: int | None = None
    year_century: int | None = None
    year_century_is_negative: bool | None = None
    year_last_two: int | None = None
    iso_year: int | None = None
    iso_year_century: int | None = None
    iso_year_century_is_negative: bool | None = None
    iso_year_last_two: int | None = None
    month: Month | None = None
    sunday_week_number: int | None = None
    monday_week_number: int | None = None
    iso_week_number: int | None = None
    weekday: Weekday | None = None
    ordinal: int | None = None
    day: int | None = None
    hour_24: int | None = None
    hour_12: int | None = None
    hour_12_is_pm: bool | None = None
    minute: int | None = None
    second: int | None = None
    subsecond: int | None = None
    offset_hour: int | None = None
    offset_minute: int | None = None
    offset_second: int | None = None
    offset_is_negative: bool | None = None
    unix_timestamp_nanos: int | None = None

    # ------------------------------------------------------------------
    # Validated setters
    # ------------------------------------------------------------------

    def set_year(self, value: int) -> None:
        self.year = _check("year", value, MIN_YEAR, MAX_YEAR)

    def set_year_century(self, value: int, *, is_negative: bool) -> None:
        self.year_century = _check("year", value, -_MAX_CENTURY, _MAX_CENTURY)
        self.year_century_is_negative = is_negative

    def set_year_last_two(self, value: int) -> None:
        self.year_last_two = _check("year", value, 0, 99)

    def set_iso_year(self, value: int) -> None:
        self.iso_year = _check("year", value, MIN_YEAR, MAX_YEAR)

    def set_iso_year_century(self, value: int, *, is_negative: bool) -> None:
        self.iso_year_century = _check("year", value, -_MAX_CENTURY, _MAX_CENTURY)
        self.iso_year_century_is_negative = is_negative

    def set_iso_year_last_two(self, value: int) -> None:
        self.iso_year_last_two = _check("year", value, 0, 99)

    def set_month(self, value: Month | int) -> None:
        self.month = Month.from_number(value)

    def set_sunday_week_number(self, value: int) -> None:
        self.sunday_week_number = _check("week", value, 0, 53)

    def set_monday_week_number(self, value: int) -> None:
        self.monday_week_number = _check("week", value, 0, 53)

    def set_iso_week_number(self, value: int) -> None:
        self.iso_week_number = _check("week", value, 1, 53)

    def set_weekday(self, value: Weekday) -> None:
        self.weekday = Weekday(value)

    def set_ordinal(self, value: int) -> None:
        self.ordinal = _check("ordinal", value, 1, 366)

    def set_day(self, value: int) -> None:
        self.day = _check("day", value, 1, 31)

    def set_hour_24(self, value: int) -> None:
        self.hour_24 = _check("hour", value, 0, 23)

    def set_hour_12(self, value: int) -> None:
        self.hour_12 = _check("hour", value, 1, 12)

    def set_hour_12_is_pm(self, value: bool) -> None:
        self.hour_12_is_pm = value

    def set_minute(self, value: int) -> None:
        self.minute = _check("minute", value, 0, 59)

    def set_second(self, value: int) -> None:
        self.second = _check("second", value, 0, 59)

    def set_subsecond(self, value: int) -> None:
        self.subsecond = _check("nanosecond", value, 0, 999_999_999)

    def set_offset_hour(self, value: int, *, is_negative: bool = False) -> None:
        self.offset_hour = _check("offset hour", value, -25, 25)
        self.offset_is_negative = is_negative or value < 0

    def set_offset_minute(self, value: int) -> None:
        """Signed offset minute."""
        self.offset_minute = _check("offset minute", value, -59, 59)

    def set_offset_second(self, value: int) -> None:
        """Signed offset second."""
        self.offset_second = _check("offset second", value, -59, 59)

    def set_unix_timestamp_nanos(self, value: int) -> None:
        self.unix_timestamp_nanos = _check(
            "timestamp",
            value,
            PrimitiveDateTime.MIN.assume_utc().unix_timestamp_nanos(),
            PrimitiveDateTime.MAX.assume_utc().unix_timestamp_nanos(),
        )

    # ------------------------------------------------------------------
    # Walking a FormatItem tree
    # ------------------------------------------------------------------

    def parse_item(self, data: bytes | memoryview, item: FormatItem) -> int:
        """Parse ``data`` against ``item``, storing fields on success.

        Returns:
            Number of bytes consumed

        Raises:
            ParseFailedError: ``data`` does not match ``item``; no fields
                are changed
        """
        source = memoryview(data)
        snapshot = self._snapshot()
        try:
            return self._parse(source, 0, item)
        except ParseFailedError:
            self._restore(snapshot)
            raise

    def _snapshot(self) -> Parsed:
        return dataclasses.replace(self)

    def _restore(self, snapshot: Parsed) -> None:
        for field in dataclasses.fields(self):
            setattr(self, field.name, getattr(snapshot, field.name))

    def _parse(self, source: memoryview, pos: int, item: FormatItem) -> int:
        match item:
            case Literal(value=value):
                expected = bytes(value)
                if bytes(source[pos : pos + len(expected)]) != expected:
                    raise ParseFailedError(
                        ErrorTemplate.parse_invalid_literal(pos),
                        kind=ParseErrorKind.INVALID_LITERAL,
                        position=pos,
                        input_value=bytes(source).decode(errors="replace"),
                    )
                return pos + len(expected)
            case Compound(items=items):
                snapshot = self._snapshot()
                try:
                    for inner in items:
                        pos = self._parse(source, pos, inner)
                except ParseFailedError:
                    self._restore(snapshot)
                    raise
                return pos
            case Optional(item=inner):
                snapshot = self._snapshot()
                try:
                    return self._parse(source, pos, inner)
                except ParseFailedError:
                    self._restore(snapshot)
                    return pos
            case First(items=items):
                first_error: ParseFailedError | None = None
                for inner in items:
                    snapshot = self._snapshot()
                    try:
                        return self._parse(source, pos, inner)
                    except ParseFailedError as error:
                        self._restore(snapshot)
                        if first_error is None:
                            first_error = error
                if first_error is not None:
                    raise first_error
                return pos
            case Component():
                return self._parse_component(source, pos, item)
        msg = f"not a format item: {item!r}"
        raise TypeError(msg)

    def _parse_component(self, source: memoryview, pos: int, item: Component) -> int:
        data = source[pos:]
        try:
            parsed = self._store_component(data, item)
        except ComponentRangeError:
            parsed = None
        if parsed is None:
            name = str(item.name)
            raise ParseFailedError(
                ErrorTemplate.parse_invalid_component(name, pos),
                kind=ParseErrorKind.INVALID_COMPONENT,
                component=name,
                position=pos,
                input_value=bytes(source).decode(errors="replace"),
            )
        return len(source) - len(parsed.remaining)

    def _store_component(  # noqa: PLR0911, PLR0912 - one branch per component kind
        self, data: memoryview, item: Component
    ) -> ParsedItem[object] | None:
        """Run the component parser and store its value; None on no match."""
        match item:
            case component.Day():
                parsed = parsers.parse_day(data, item)
                if parsed is not None:
                    self.set_day(parsed.value)
            case component.Month():
                parsed = parsers.parse_month(data, item)
                if parsed is not None:
                    self.set_month(parsed.value)
            case component.Ordinal():
                parsed = parsers.parse_ordinal(data, item)
                if parsed is not None:
                    self.set_ordinal(parsed.value)
            case component.Weekday():
                parsed = parsers.parse_weekday(data, item)
                if parsed is not None:
                    self.set_weekday(parsed.value)
            case component.WeekNumber():
                parsed = parsers.parse_week_number(data, item)
                if parsed is not None:
                    match item.repr:
                        case WeekNumberRepr.ISO:
                            self.set_iso_week_number(parsed.value)
                        case WeekNumberRepr.SUNDAY:
                            self.set_sunday_week_number(parsed.value)
                        case WeekNumberRepr.MONDAY:
                            self.set_monday_week_number(parsed.value)
            case component.Year():
                parsed = parsers.parse_year(data, item)
                if parsed is not None:
                    self._store_year(item, *parsed.value)
            case component.Hour():
                parsed = parsers.parse_hour(data, item)
                if parsed is not None:
                    if item.is_12_hour_clock:
                        self.set_hour_12(parsed.value)
                    else:
                        self.set_hour_24(parsed.value)
            case component.Minute():
                parsed = parsers.parse_minute(data, item)
                if parsed is not None:
                    self.set_minute(parsed.value)
            case component.Period():
                parsed = parsers.parse_period(data, item)
                if parsed is not None:
                    self.set_hour_12_is_pm(parsed.value is parsers.Period.PM)
            case component.Second():
                parsed = parsers.parse_second(data, item)
                if parsed is not None:
                    self.set_second(parsed.value)
            case component.Subsecond():
                parsed = parsers.parse_subsecond(data, item)
                if parsed is not None:
                    self.set_subsecond(parsed.value)
            case component.OffsetHour():
                parsed = parsers.parse_offset_hour(data, item)
                if parsed is not None:
                    hour, is_negative = parsed.value
                    self.set_offset_hour(hour, is_negative=is_negative)
            case component.OffsetMinute():
                parsed = parsers.parse_offset_minute(data, item)
                if parsed is not None:
                    minute = parsed.value
                    self.set_offset_minute(-minute if self.offset_is_negative else minute)
            case component.OffsetSecond():
                parsed = parsers.parse_offset_second(data, item)
                if parsed is not None:
                    second = parsed.value
                    self.set_offset_second(-second if self.offset_is_negative else second)
            case component.Ignore():
                parsed = parsers.parse_ignore(data, item)
            case component.UnixTimestamp():
                parsed = parsers.parse_unix_timestamp(data, item)
                if parsed is not None:
                    self.set_unix_timestamp_nanos(parsed.value)
            case component.End():
                parsed = parsers.parse_end(data, item)
            case _:
                msg = f"unknown component: {item!r}"
                raise TypeError(msg)
        return parsed

    def _store_year(self, item: component.Year, value: int, is_negative: bool) -> None:
        match item.repr, item.iso_week_based:
            case YearRepr.FULL, False:
                self.set_year(value)
            case YearRepr.FULL, True:
                self.set_iso_year(value)
            case YearRepr.CENTURY, False:
                self.set_year_century(value, is_negative=is_negative)
            case YearRepr.CENTURY, True:
                self.set_iso_year_century(value, is_negative=is_negative)
            case YearRepr.LAST_TWO, False:
                self.set_year_last_two(value)
            case _:
                self.set_iso_year_last_two(value)

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    @staticmethod
    def _combine_year(
        full: int | None, century: int | None, is_negative: bool | None, last_two: int | None
    ) -> int | None:
        if full is not None:
            return full
        if century is None or last_two is None:
            return None
        magnitude = abs(century) * 100 + last_two
        return -magnitude if is_negative else magnitude

    def to_date(self) -> Date:
        """Assemble a Date.

        Accepted field sets, in order of preference: year + ordinal;
        year + month + day; ISO year + ISO week + weekday; year + Sunday
        week + weekday; year + Monday week + weekday. A year may be
        rebuilt from its century and last two digits.

        Raises:
            ParseFailedError: INSUFFICIENT_INFORMATION or COMPONENT_RANGE
        """
        year = self._combine_year(
            self.year, self.year_century, self.year_century_is_negative, self.year_last_two
        )
        iso_year = self._combine_year(
            self.iso_year,
            self.iso_year_century,
            self.iso_year_century_is_negative,
            self.iso_year_last_two,
        )
        try:
            if year is not None and self.ordinal is not None:
                return Date.from_ordinal_date(year, self.ordinal)
            if year is not None and self.month is not None and self.day is not None:
                return Date.from_calendar_date(year, self.month, self.day)
            if (
                iso_year is not None
                and self.iso_week_number is not None
                and self.weekday is not None
            ):
                return Date.from_iso_week_date(iso_year, self.iso_week_number, self.weekday)
            if (
                year is not None
                and self.sunday_week_number is not None
                and self.weekday is not None
            ):
                ordinal = (
                    self.sunday_week_number * 7
                    + self.weekday.number_days_from_sunday()
                    - _week_adjustment(year, sunday_based=True)
                    + 1
                )
                return Date.from_ordinal_date(year, ordinal)
            if (
                year is not None
                and self.monday_week_number is not None
                and self.weekday is not None
            ):
                ordinal = (
                    self.monday_week_number * 7
                    + self.weekday.number_days_from_monday()
                    - _week_adjustment(year, sunday_based=False)
                    + 1
                )
                return Date.from_ordinal_date(year, ordinal)
        except ComponentRangeError as error:
            raise _component_range(error) from error
        raise _insufficient("Date")

    def _hour(self) -> int | None:
        if self.hour_24 is not None:
            return self.hour_24
        if self.hour_12 is None or self.hour_12_is_pm is None:
            return None
        return self.hour_12 % 12 + (12 if self.hour_12_is_pm else 0)

    def to_time(self) -> Time:
        """Assemble a Time.

        Needs a 24-hour hour, or a 12-hour hour with a period. Minute,
        second and subsecond are optional but cannot skip a level: a second
        without a minute is insufficient.

        Raises:
            ParseFailedError: INSUFFICIENT_INFORMATION or COMPONENT_RANGE
        """
        hour = self._hour()
        if hour is None:
            raise _insufficient("Time")
        match self.minute, self.second, self.subsecond:
            case (None, None, None):
                parts = (hour, 0, 0, 0)
            case (int() as minute, None, None):
                parts = (hour, minute, 0, 0)
            case (int() as minute, int() as second, None):
                parts = (hour, minute, second, 0)
            case (int() as minute, int() as second, int() as subsecond):
                parts = (hour, minute, second, subsecond)
            case _:
                raise _insufficient("Time")
        try:
            return Time.from_hms_nano(*parts)
        except ComponentRangeError as error:
            raise _component_range(error) from error

    def to_offset(self) -> UtcOffset:
        """Assemble a UtcOffset from the offset hour and optional minute and second.

        Raises:
            ParseFailedError: INSUFFICIENT_INFORMATION or COMPONENT_RANGE
        """
        if self.offset_hour is None:
            raise _insufficient("UtcOffset")
        try:
            return UtcOffset.from_hms(
                self.offset_hour, self.offset_minute or 0, self.offset_second or 0
            )
        except ComponentRangeError as error:
            raise _component_range(error) from error

    def to_primitive_date_time(self) -> PrimitiveDateTime:
        return PrimitiveDateTime(self.to_date(), self.to_time())

    def to_offset_date_time(self) -> OffsetDateTime:
        """Assemble an OffsetDateTime.

        A Unix timestamp, when present, wins over every other field except
        the subsecond, which replaces the timestamp's fraction.

        Raises:
            ParseFailedError: INSUFFICIENT_INFORMATION or COMPONENT_RANGE
        """
        if self.unix_timestamp_nanos is not None:
            try:
                value = OffsetDateTime.from_unix_timestamp_nanos(self.unix_timestamp_nanos)
            except ComponentRangeError as error:
                raise _component_range(error) from error
            if self.subsecond is not None:
                time = dataclasses.replace(value.time, nanosecond=self.subsecond)
                value = OffsetDateTime(value.datetime.replace_time(time), value.offset)
            return value
        return self.to_primitive_date_time().assume_offset(self.to_offset())
