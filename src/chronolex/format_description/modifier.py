"""Modifier values accepted inside bracketed components.

Each enum's values are the exact spellings accepted after ``key:`` in a
format description, so ``Padding("space")`` is how the lowering pass turns
source text into a typed value.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "MonthRepr",
    "Padding",
    "SubsecondDigits",
    "UnixTimestampPrecision",
    "WeekNumberRepr",
    "WeekdayRepr",
    "YearRange",
    "YearRepr",
]


class Padding(StrEnum):
    """How a numeric value narrower than its width is filled."""

    ZERO = "zero"
    """Leading zeros: 07"""

    SPACE = "space"
    """Leading spaces: " 7" """

    NONE = "none"
    """No filling; the value takes as few digits as needed: 7"""


class MonthRepr(StrEnum):
    NUMERICAL = "numerical"
    LONG = "long"
    SHORT = "short"


class WeekdayRepr(StrEnum):
    """Weekday spelling or numbering convention."""

    SHORT = "short"
    LONG = "long"
    SUNDAY = "sunday"
    """Number counted from Sunday"""

    MONDAY = "monday"
    """Number counted from Monday"""


class WeekNumberRepr(StrEnum):
    ISO = "iso"
    SUNDAY = "sunday"
    MONDAY = "monday"


class YearRepr(StrEnum):
    FULL = "full"
    CENTURY = "century"
    LAST_TWO = "last_two"


class YearRange(StrEnum):
    """Whether more than four digits may be used for a full year."""

    STANDARD = "standard"
    EXTENDED = "extended"


class SubsecondDigits(StrEnum):
    """Number of fractional-second digits; ONE_OR_MORE parses any count."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ONE_OR_MORE = "1+"

    @property
    def count(self) -> int | None:
        """Fixed digit count, or None for ONE_OR_MORE."""
        return None if self is SubsecondDigits.ONE_OR_MORE else int(self.value)


class UnixTimestampPrecision(StrEnum):
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"
