"""Proleptic Gregorian calendar arithmetic shared by every layer.

All functions are pure integer computations. Python's ``//`` and ``%`` already
floor toward negative infinity, which is exactly what the calendar formulas
require for negative (BCE) years; ``div_floor`` exists so call sites that
depend on flooring say so explicitly.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DAYS_CUMULATIVE_COMMON_LEAP",
    "days_in_month",
    "days_in_year",
    "div_floor",
    "is_leap_year",
    "weeks_in_year",
]

# Cumulative days through the beginning of a month, common years then leap years.
DAYS_CUMULATIVE_COMMON_LEAP: tuple[tuple[int, ...], tuple[int, ...]] = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)

_DAYS_IN_MONTH_COMMON: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def div_floor(dividend: int, divisor: int) -> int:
    """Integer division rounding toward negative infinity.

    Example:
        >>> div_floor(-1, 4)
        -1
        >>> div_floor(7, 4)
        1
    """
    return dividend // divisor


def is_leap_year(year: int) -> bool:
    """Whether ``year`` has 366 days.

    Divisible by 4, except centuries, except every fourth century.

    Example:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024), is_leap_year(-4)
        (True, False, True, True)
    """
    return year % 4 == 0 and (year % 25 != 0 or year % 16 == 0)


def days_in_year(year: int) -> int:
    """365 or 366."""
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, year: int) -> int:
    """Length of ``month`` (1-12) in ``year``."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH_COMMON[month - 1]


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks (52 or 53) in ``year``.

    A year has 53 ISO weeks when January 1st is a Thursday, or a Wednesday
    in a leap year. The weekday of January 1st is taken from the count of
    days since a fixed epoch, reduced modulo 7.

    Example:
        >>> weeks_in_year(2020), weeks_in_year(2019), weeks_in_year(2015)
        (53, 52, 53)
    """
    adj_year = year - 1
    raw = (
        365 * adj_year
        + div_floor(adj_year, 4)
        - div_floor(adj_year, 100)
        + div_floor(adj_year, 400)
    )
    # 0 = Monday ... 6 = Sunday for January 1st of `year`.
    jan_1 = raw % 7
    if jan_1 == 3:
        return 53
    if jan_1 == 2 and is_leap_year(year):
        return 53
    return 52
