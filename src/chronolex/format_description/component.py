"""Components: the parametrized fields of a format description.

One frozen dataclass per component kind. Field defaults are the values a
format description gets when the modifier is omitted, so ``Day()`` is
exactly what ``[day]`` compiles to.

Component classes are also format items: a lone component can be used
anywhere a FormatItem is accepted.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from .modifier import (
    MonthRepr,
    Padding,
    SubsecondDigits,
    UnixTimestampPrecision,
    WeekdayRepr,
    WeekNumberRepr,
    YearRange,
    YearRepr,
)

# ruff: noqa: RUF022 - __all__ follows declaration order
__all__ = [
    "ComponentName",
    "Component",
    "Day",
    "Month",
    "Ordinal",
    "Weekday",
    "WeekNumber",
    "Year",
    "Hour",
    "Minute",
    "Period",
    "Second",
    "Subsecond",
    "OffsetHour",
    "OffsetMinute",
    "OffsetSecond",
    "Ignore",
    "UnixTimestamp",
    "End",
    "MODIFIER_KEYS",
]


class ComponentName(StrEnum):
    """Component names as written between brackets."""

    DAY = "day"
    MONTH = "month"
    ORDINAL = "ordinal"
    WEEKDAY = "weekday"
    WEEK_NUMBER = "week_number"
    YEAR = "year"
    HOUR = "hour"
    MINUTE = "minute"
    PERIOD = "period"
    SECOND = "second"
    SUBSECOND = "subsecond"
    OFFSET_HOUR = "offset_hour"
    OFFSET_MINUTE = "offset_minute"
    OFFSET_SECOND = "offset_second"
    IGNORE = "ignore"
    UNIX_TIMESTAMP = "unix_timestamp"
    END = "end"


@dataclass(frozen=True, slots=True)
class Component:
    """Base class of every component kind."""

    name: ClassVar[ComponentName]

    def to_owned(self) -> Component:
        """Components hold no borrowed data."""
        return self


@dataclass(frozen=True, slots=True)
class Day(Component):
    """Day of the month."""

    name: ClassVar[ComponentName] = ComponentName.DAY
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class Month(Component):
    """Month of the year, as a number or an English name."""

    name: ClassVar[ComponentName] = ComponentName.MONTH
    padding: Padding = Padding.ZERO
    repr: MonthRepr = MonthRepr.NUMERICAL
    case_sensitive: bool = True


@dataclass(frozen=True, slots=True)
class Ordinal(Component):
    """Day of the year."""

    name: ClassVar[ComponentName] = ComponentName.ORDINAL
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class Weekday(Component):
    """Day of the week, as an English name or a number.

    ``one_indexed`` only applies to the numeric representations.
    """

    name: ClassVar[ComponentName] = ComponentName.WEEKDAY
    repr: WeekdayRepr = WeekdayRepr.LONG
    one_indexed: bool = True
    case_sensitive: bool = True


@dataclass(frozen=True, slots=True)
class WeekNumber(Component):
    name: ClassVar[ComponentName] = ComponentName.WEEK_NUMBER
    padding: Padding = Padding.ZERO
    repr: WeekNumberRepr = WeekNumberRepr.ISO


@dataclass(frozen=True, slots=True)
class Year(Component):
    """Calendar or ISO-week-based year.

    ``range`` allows more than four digits; ``sign_is_mandatory`` always
    renders a sign. A two-digit year cannot carry a mandatory sign.
    """

    name: ClassVar[ComponentName] = ComponentName.YEAR
    padding: Padding = Padding.ZERO
    repr: YearRepr = YearRepr.FULL
    range: YearRange = YearRange.EXTENDED
    iso_week_based: bool = False
    sign_is_mandatory: bool = False


@dataclass(frozen=True, slots=True)
class Hour(Component):
    name: ClassVar[ComponentName] = ComponentName.HOUR
    padding: Padding = Padding.ZERO
    is_12_hour_clock: bool = False


@dataclass(frozen=True, slots=True)
class Minute(Component):
    name: ClassVar[ComponentName] = ComponentName.MINUTE
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class Period(Component):
    """AM/PM."""

    name: ClassVar[ComponentName] = ComponentName.PERIOD
    is_uppercase: bool = True
    case_sensitive: bool = True


@dataclass(frozen=True, slots=True)
class Second(Component):
    name: ClassVar[ComponentName] = ComponentName.SECOND
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class Subsecond(Component):
    name: ClassVar[ComponentName] = ComponentName.SUBSECOND
    digits: SubsecondDigits = SubsecondDigits.ONE_OR_MORE


@dataclass(frozen=True, slots=True)
class OffsetHour(Component):
    name: ClassVar[ComponentName] = ComponentName.OFFSET_HOUR
    sign_is_mandatory: bool = False
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class OffsetMinute(Component):
    name: ClassVar[ComponentName] = ComponentName.OFFSET_MINUTE
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class OffsetSecond(Component):
    name: ClassVar[ComponentName] = ComponentName.OFFSET_SECOND
    padding: Padding = Padding.ZERO


@dataclass(frozen=True, slots=True)
class Ignore(Component):
    """Skip ``count`` bytes when parsing; renders nothing."""

    name: ClassVar[ComponentName] = ComponentName.IGNORE
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            msg = "Ignore.count must be at least 1"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class UnixTimestamp(Component):
    name: ClassVar[ComponentName] = ComponentName.UNIX_TIMESTAMP
    precision: UnixTimestampPrecision = UnixTimestampPrecision.SECOND
    sign_is_mandatory: bool = False


@dataclass(frozen=True, slots=True)
class End(Component):
    """Matches only the end of input; renders nothing."""

    name: ClassVar[ComponentName] = ComponentName.END


# Modifier keys accepted by each component, as written in format descriptions.
MODIFIER_KEYS: dict[ComponentName, frozenset[str]] = {
    ComponentName.DAY: frozenset({"padding"}),
    ComponentName.MONTH: frozenset({"padding", "repr", "case_sensitive"}),
    ComponentName.ORDINAL: frozenset({"padding"}),
    ComponentName.WEEKDAY: frozenset({"repr", "one_indexed", "case_sensitive"}),
    ComponentName.WEEK_NUMBER: frozenset({"padding", "repr"}),
    ComponentName.YEAR: frozenset({"padding", "repr", "range", "base", "sign"}),
    ComponentName.HOUR: frozenset({"padding", "repr"}),
    ComponentName.MINUTE: frozenset({"padding"}),
    ComponentName.PERIOD: frozenset({"case", "case_sensitive"}),
    ComponentName.SECOND: frozenset({"padding"}),
    ComponentName.SUBSECOND: frozenset({"digits"}),
    ComponentName.OFFSET_HOUR: frozenset({"sign", "padding"}),
    ComponentName.OFFSET_MINUTE: frozenset({"padding"}),
    ComponentName.OFFSET_SECOND: frozenset({"padding"}),
    ComponentName.IGNORE: frozenset({"count"}),
    ComponentName.UNIX_TIMESTAMP: frozenset({"precision", "sign"}),
    ComponentName.END: frozenset(),
}
