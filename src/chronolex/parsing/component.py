"""Parsers for individual components.

Each function takes the remaining input and the component (its modifiers)
and returns a ParsedItem or None. None always means "did not match"; range
validation of the value happens when it is stored in ``Parsed``.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

from chronolex.constants import LARGE_DATES
from chronolex.convert import Unit
from chronolex.enums import Month, Weekday
from chronolex.format_description import component
from chronolex.format_description.modifier import (
    MonthRepr,
    UnixTimestampPrecision,
    WeekdayRepr,
    YearRange,
    YearRepr,
)
from chronolex.formatting.names import month_names, period_names, weekday_names

from .combinator import (
    ParsedItem,
    any_digit,
    exactly_n_digits,
    exactly_n_digits_padded,
    first_match,
    n_to_m_digits,
    n_to_m_digits_padded,
    opt,
    sign,
)

# ruff: noqa: RUF022 - __all__ follows declaration order
__all__ = [
    "Period",
    "parse_year",
    "parse_month",
    "parse_week_number",
    "parse_weekday",
    "parse_ordinal",
    "parse_day",
    "parse_hour",
    "parse_minute",
    "parse_second",
    "parse_period",
    "parse_subsecond",
    "parse_offset_hour",
    "parse_offset_minute",
    "parse_offset_second",
    "parse_ignore",
    "parse_unix_timestamp",
    "parse_end",
]

_MINUS = ord("-")


class Period(StrEnum):
    """Half of a 12-hour day."""

    AM = "am"
    PM = "pm"


def _signed(parsed_sign: int | None, magnitude: int) -> tuple[int, bool]:
    if parsed_sign == _MINUS:
        return -magnitude, True
    return magnitude, False


def parse_year(
    data: memoryview, modifiers: component.Year
) -> ParsedItem[tuple[int, bool]] | None:
    """Year (or century, or last two digits).

    The value is ``(number, is_negative)``; the flag survives a ``-00``
    century, which is numerically zero.

    An explicit sign allows the wider digit counts of the large-dates mode
    when the component's range is extended.
    """
    extended = LARGE_DATES and modifiers.range is YearRange.EXTENDED
    match modifiers.repr:
        case YearRepr.LAST_TWO:
            item = exactly_n_digits_padded(2, modifiers.padding)(data)
            return None if item is None else item.map(lambda v: (v, False))
        case YearRepr.CENTURY:
            signed_width, unsigned_parser = (2, 4), n_to_m_digits_padded(1, 2, modifiers.padding)
        case _:
            signed_width, unsigned_parser = (4, 6), exactly_n_digits_padded(4, modifiers.padding)

    signed = opt(sign)(data)
    if signed.value is None:
        if modifiers.sign_is_mandatory:
            return None
        item = unsigned_parser(data)
        return None if item is None else item.map(lambda v: (v, False))

    low, high = signed_width
    if extended:
        digits = n_to_m_digits_padded(low, high, modifiers.padding)(signed.remaining)
    else:
        digits = exactly_n_digits_padded(low, modifiers.padding)(signed.remaining)
    if digits is None:
        return None
    return ParsedItem(digits.remaining, _signed(signed.value, digits.value))


def parse_month(data: memoryview, modifiers: component.Month) -> ParsedItem[Month] | None:
    if modifiers.repr is MonthRepr.NUMERICAL:
        item = exactly_n_digits_padded(2, modifiers.padding)(data)
        if item is None or not 1 <= item.value <= 12:
            return None
        return item.map(Month)
    names = month_names(short=modifiers.repr is MonthRepr.SHORT)
    return first_match(names, case_sensitive=modifiers.case_sensitive)(data)


def parse_week_number(data: memoryview, modifiers: component.WeekNumber) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def _numbered_weekdays(repr_: WeekdayRepr, one_indexed: bool) -> tuple[tuple[bytes, Weekday], ...]:
    offset = 1 if one_indexed else 0
    if repr_ is WeekdayRepr.SUNDAY:
        number = Weekday.number_days_from_sunday
    else:
        number = Weekday.number_days_from_monday
    return tuple((str(number(day) + offset).encode(), day) for day in Weekday)


def parse_weekday(data: memoryview, modifiers: component.Weekday) -> ParsedItem[Weekday] | None:
    """Weekday by English name or by one of four numbering conventions."""
    match modifiers.repr:
        case WeekdayRepr.SHORT | WeekdayRepr.LONG:
            options = weekday_names(short=modifiers.repr is WeekdayRepr.SHORT)
        case _:
            options = _numbered_weekdays(modifiers.repr, modifiers.one_indexed)
    return first_match(options, case_sensitive=modifiers.case_sensitive)(data)


def parse_ordinal(data: memoryview, modifiers: component.Ordinal) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(3, modifiers.padding)(data)


def parse_day(data: memoryview, modifiers: component.Day) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def parse_hour(data: memoryview, modifiers: component.Hour) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def parse_minute(data: memoryview, modifiers: component.Minute) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def parse_second(data: memoryview, modifiers: component.Second) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def parse_period(data: memoryview, modifiers: component.Period) -> ParsedItem[Period] | None:
    am, pm = period_names(uppercase=modifiers.is_uppercase)
    options = ((am, Period.AM), (pm, Period.PM))
    return first_match(options, case_sensitive=modifiers.case_sensitive)(data)


def parse_subsecond(data: memoryview, modifiers: component.Subsecond) -> ParsedItem[int] | None:
    """Fraction of a second, scaled to nanoseconds."""
    count = modifiers.digits.count
    if count is not None:
        item = exactly_n_digits(count)(data)
        if item is None:
            return None
        return item.map(lambda v: v * 10 ** (9 - count))

    first = any_digit(data)
    if first is None:
        return None
    value = (first.value - ord("0")) * 100_000_000
    multiplier = 10_000_000
    remaining = first.remaining
    while (digit := any_digit(remaining)) is not None:
        # Digits past the ninth carry no weight.
        value += (digit.value - ord("0")) * multiplier
        multiplier //= 10
        remaining = digit.remaining
    return ParsedItem(remaining, value)


def parse_offset_hour(
    data: memoryview, modifiers: component.OffsetHour
) -> ParsedItem[tuple[int, bool]] | None:
    """Offset hour as ``(hours, is_negative)``; the flag keeps the sign of ``-00``."""
    signed = opt(sign)(data)
    hour = exactly_n_digits_padded(2, modifiers.padding)(signed.remaining)
    if hour is None:
        return None
    if signed.value is None and modifiers.sign_is_mandatory:
        return None
    return ParsedItem(hour.remaining, _signed(signed.value, hour.value))


def parse_offset_minute(
    data: memoryview, modifiers: component.OffsetMinute
) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def parse_offset_second(
    data: memoryview, modifiers: component.OffsetSecond
) -> ParsedItem[int] | None:
    return exactly_n_digits_padded(2, modifiers.padding)(data)


def parse_ignore(data: memoryview, modifiers: component.Ignore) -> ParsedItem[None] | None:
    if len(data) < modifiers.count:
        return None
    return ParsedItem(data[modifiers.count :], None)


# Digit limits keep every precision within the same nanosecond magnitude.
_TIMESTAMP_DIGITS: dict[UnixTimestampPrecision, tuple[int, Unit]] = {
    UnixTimestampPrecision.SECOND: (14, Unit.SECOND),
    UnixTimestampPrecision.MILLISECOND: (17, Unit.MILLISECOND),
    UnixTimestampPrecision.MICROSECOND: (20, Unit.MICROSECOND),
    UnixTimestampPrecision.NANOSECOND: (23, Unit.NANOSECOND),
}


def parse_unix_timestamp(
    data: memoryview, modifiers: component.UnixTimestamp
) -> ParsedItem[int] | None:
    """Signed Unix timestamp, scaled to nanoseconds."""
    max_digits, unit = _TIMESTAMP_DIGITS[modifiers.precision]
    signed = opt(sign)(data)
    digits = n_to_m_digits(1, max_digits)(signed.remaining)
    if digits is None:
        return None
    if signed.value is None and modifiers.sign_is_mandatory:
        return None
    nanoseconds = digits.value * Unit.NANOSECOND.per(unit)
    value, _ = _signed(signed.value, nanoseconds)
    return ParsedItem(digits.remaining, value)


def parse_end(data: memoryview, modifiers: component.End) -> ParsedItem[None] | None:
    """Match only when no input remains."""
    if len(data) > 0:
        return None
    return ParsedItem(data, None)


