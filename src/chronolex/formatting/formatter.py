"""Render values through a FormatItem tree.

The formatter walks the tree once, appending to a byte buffer. Optional
items are always rendered; First renders its first alternative. A
component whose value was not supplied (for example ``[hour]`` when only a
Date is given) is a FormattingError, as is a year the component cannot
represent.

Python 3.13+.
"""

from __future__ import annotations

from chronolex.constants import LARGE_DATES
from chronolex.convert import Unit
from chronolex.core import Date, OffsetDateTime, PrimitiveDateTime, Time, UtcOffset
from chronolex.diagnostics import ErrorTemplate, FormattingError, FormattingErrorKind
from chronolex.format_description import FormatDescriptionVersion, component, parse_owned
from chronolex.format_description.component import Component
from chronolex.format_description.format_item import (
    Compound,
    First,
    FormatItem,
    Literal,
    Optional,
)
from chronolex.format_description.modifier import (
    MonthRepr,
    Padding,
    UnixTimestampPrecision,
    WeekdayRepr,
    WeekNumberRepr,
    YearRange,
    YearRepr,
)

from .names import month_names, period_names, weekday_names

__all__ = ["format_value"]

_TIMESTAMP_UNITS: dict[UnixTimestampPrecision, Unit] = {
    UnixTimestampPrecision.SECOND: Unit.SECOND,
    UnixTimestampPrecision.MILLISECOND: Unit.MILLISECOND,
    UnixTimestampPrecision.MICROSECOND: Unit.MICROSECOND,
    UnixTimestampPrecision.NANOSECOND: Unit.NANOSECOND,
}


def _number(value: int, width: int, padding: Padding) -> bytes:
    """Non-negative ``value`` padded to ``width``; wider values are not truncated."""
    match padding:
        case Padding.ZERO:
            return str(value).zfill(width).encode()
        case Padding.SPACE:
            return str(value).rjust(width).encode()
        case _:
            return str(value).encode()


def _insufficient(name: str) -> FormattingError:
    return FormattingError(
        ErrorTemplate.formatting_insufficient_type_information(name),
        kind=FormattingErrorKind.INSUFFICIENT_TYPE_INFORMATION,
        component=name,
    )


def _invalid(name: str) -> FormattingError:
    return FormattingError(
        ErrorTemplate.formatting_invalid_component(name),
        kind=FormattingErrorKind.INVALID_COMPONENT,
        component=name,
    )


def _year(item: component.Year, date: Date) -> bytes:
    full_year = date.to_iso_week_date()[0] if item.iso_week_based else date.year
    magnitude = abs(full_year)
    if item.range is YearRange.STANDARD and magnitude >= 10_000:
        raise _invalid(str(item.name))

    extended = LARGE_DATES and item.range is YearRange.EXTENDED
    match item.repr:
        case YearRepr.LAST_TWO:
            return _number(magnitude % 100, 2, item.padding)
        case YearRepr.CENTURY:
            value = magnitude // 100
            width = max(2, len(str(value))) if extended else 2
        case _:
            value = magnitude
            width = max(4, len(str(value))) if extended else 4

    sign = b""
    if full_year < 0:
        sign = b"-"
    elif item.sign_is_mandatory or (LARGE_DATES and full_year >= 10_000):
        sign = b"+"
    return sign + _number(value, width, item.padding)


def _weekday(item: component.Weekday, date: Date) -> bytes:
    weekday = date.weekday()
    offset = 1 if item.one_indexed else 0
    match item.repr:
        case WeekdayRepr.SHORT | WeekdayRepr.LONG:
            names = weekday_names(short=item.repr is WeekdayRepr.SHORT)
            return names[weekday.value][0]
        case WeekdayRepr.SUNDAY:
            return str(weekday.number_days_from_sunday() + offset).encode()
        case _:
            return str(weekday.number_days_from_monday() + offset).encode()


def _subsecond(item: component.Subsecond, time: Time) -> bytes:
    nanosecond = time.nanosecond
    count = item.digits.count
    if count is None:
        digits = str(nanosecond).zfill(9).rstrip("0")
        return (digits or "0").encode()
    return str(nanosecond // 10 ** (9 - count)).zfill(count).encode()


class _Formatter:
    """One formatting call: the values available and the output buffer."""

    __slots__ = ("_date", "_offset", "_out", "_time")

    def __init__(self, date: Date | None, time: Time | None, offset: UtcOffset | None) -> None:
        self._date = date
        self._time = time
        self._offset = offset
        self._out = bytearray()

    def render(self, item: FormatItem) -> str:
        self._item(item)
        return self._out.decode()

    def _item(self, item: FormatItem) -> None:
        match item:
            case Literal(value=value):
                self._out += value
            case Compound(items=items):
                for inner in items:
                    self._item(inner)
            case Optional(item=inner):
                self._item(inner)
            case First(items=items):
                if items:
                    self._item(items[0])
            case Component():
                self._out += self._component(item)
            case _:
                msg = f"not a format item: {item!r}"
                raise TypeError(msg)

    def _need_date(self, item: Component) -> Date:
        if self._date is None:
            raise _insufficient(str(item.name))
        return self._date

    def _need_time(self, item: Component) -> Time:
        if self._time is None:
            raise _insufficient(str(item.name))
        return self._time

    def _need_offset(self, item: Component) -> UtcOffset:
        if self._offset is None:
            raise _insufficient(str(item.name))
        return self._offset

    def _component(self, item: Component) -> bytes:  # noqa: PLR0911 - one branch per kind
        match item:
            case component.Day(padding=padding):
                return _number(self._need_date(item).day, 2, padding)
            case component.Month():
                month = self._need_date(item).month
                if item.repr is MonthRepr.NUMERICAL:
                    return _number(month.value, 2, item.padding)
                return month_names(short=item.repr is MonthRepr.SHORT)[month.value - 1][0]
            case component.Ordinal(padding=padding):
                return _number(self._need_date(item).ordinal, 3, padding)
            case component.Weekday():
                return _weekday(item, self._need_date(item))
            case component.WeekNumber(padding=padding, repr=repr_):
                date = self._need_date(item)
                match repr_:
                    case WeekNumberRepr.ISO:
                        week = date.iso_week
                    case WeekNumberRepr.SUNDAY:
                        week = date.sunday_based_week
                    case _:
                        week = date.monday_based_week
                return _number(week, 2, padding)
            case component.Year():
                return _year(item, self._need_date(item))
            case component.Hour(padding=padding, is_12_hour_clock=is_12_hour_clock):
                hour = self._need_time(item).hour
                if is_12_hour_clock:
                    hour = hour % 12 or 12
                return _number(hour, 2, padding)
            case component.Minute(padding=padding):
                return _number(self._need_time(item).minute, 2, padding)
            case component.Period(is_uppercase=is_uppercase):
                am, pm = period_names(uppercase=is_uppercase)
                return am if self._need_time(item).hour < 12 else pm
            case component.Second(padding=padding):
                return _number(self._need_time(item).second, 2, padding)
            case component.Subsecond():
                return _subsecond(item, self._need_time(item))
            case component.OffsetHour(padding=padding, sign_is_mandatory=mandatory):
                offset = self._need_offset(item)
                hours, _, _ = offset.as_hms()
                sign = b"-" if offset.is_negative() else (b"+" if mandatory else b"")
                return sign + _number(abs(hours), 2, padding)
            case component.OffsetMinute(padding=padding):
                _, minutes, _ = self._need_offset(item).as_hms()
                return _number(abs(minutes), 2, padding)
            case component.OffsetSecond(padding=padding):
                _, _, seconds = self._need_offset(item).as_hms()
                return _number(abs(seconds), 2, padding)
            case component.UnixTimestamp():
                return self._unix_timestamp(item)
            case component.Ignore() | component.End():
                return b""
        msg = f"unknown component: {item!r}"
        raise TypeError(msg)

    def _unix_timestamp(self, item: component.UnixTimestamp) -> bytes:
        date = self._need_date(item)
        time = self._need_time(item)
        offset = self._need_offset(item)
        nanoseconds = OffsetDateTime(PrimitiveDateTime(date, time), offset).unix_timestamp_nanos()
        value = nanoseconds // Unit.NANOSECOND.per(_TIMESTAMP_UNITS[item.precision])
        if value < 0:
            sign = b"-"
        elif item.sign_is_mandatory:
            sign = b"+"
        else:
            sign = b""
        return sign + str(abs(value)).encode()


def format_value(
    description: FormatItem | str,
    *,
    date: Date | None = None,
    time: Time | None = None,
    offset: UtcOffset | None = None,
) -> str:
    """Render the supplied values with a format description.

    Args:
        description: Compiled tree, or version 1 source text
        date: Date fields, if any
        time: Time-of-day fields, if any
        offset: UTC offset fields, if any

    Returns:
        The rendered text

    Raises:
        FormattingError: A component needs a value that was not supplied,
            or cannot represent the value (a five-digit year with
            ``range:standard``)
        InvalidFormatDescriptionError: ``description`` is text that does not compile

    Example:
        >>> format_value("[year]-[month]-[day]", date=Date.from_calendar_date(2020, 1, 2))
        '2020-01-02'
    """
    if isinstance(description, str):
        description = parse_owned(description, FormatDescriptionVersion.V1)
    return _Formatter(date, time, offset).render(description)
