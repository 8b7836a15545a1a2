"""Enumerations for chronolex calendar constants.

Month and Weekday are IntEnums so they compare and hash like the plain
integers they stand for, while still carrying names for display.

Python 3.13+.
"""

from __future__ import annotations

from enum import IntEnum

from chronolex.calendar import days_in_month
from chronolex.diagnostics import ComponentRangeError


class Month(IntEnum):
    """Month of the year, numbered 1 (January) through 12 (December).

    Example:
        >>> Month.FEBRUARY.length(2024)
        29
        >>> Month.DECEMBER.next()
        <Month.JANUARY: 1>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Month for ``number``.

        Raises:
            ComponentRangeError: If ``number`` is not in 1..=12
        """
        if not 1 <= number <= 12:
            raise ComponentRangeError("month", number, 1, 12)
        return cls(number)

    def length(self, year: int) -> int:
        """Number of days in this month of ``year``."""
        return days_in_month(self.value, year)

    def next(self) -> Month:
        """Following month, wrapping December to January."""
        return Month(self.value % 12 + 1)

    def previous(self) -> Month:
        """Preceding month, wrapping January to December."""
        return Month((self.value + 10) % 12 + 1)


class Weekday(IntEnum):
    """Day of the week, valued as days since Monday.

    The four numbering conventions used by format descriptions are exposed
    as methods rather than alternative enum values.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def number_from_monday(self) -> int:
        """1 (Monday) through 7 (Sunday)."""
        return self.value + 1

    def number_from_sunday(self) -> int:
        """1 (Sunday) through 7 (Saturday)."""
        return self.number_days_from_sunday() + 1

    def number_days_from_monday(self) -> int:
        """0 (Monday) through 6 (Sunday)."""
        return self.value

    def number_days_from_sunday(self) -> int:
        """0 (Sunday) through 6 (Saturday)."""
        return (self.value + 1) % 7

    def next(self) -> Weekday:
        """Following day, wrapping Sunday to Monday."""
        return Weekday((self.value + 1) % 7)

    def previous(self) -> Weekday:
        """Preceding day, wrapping Monday to Sunday."""
        return Weekday((self.value + 6) % 7)


__all__ = [
    "Month",
    "Weekday",
]
