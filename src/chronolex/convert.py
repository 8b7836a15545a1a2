"""Exact integer ratios between units of time.

Every unit is expressed as its length in nanoseconds, so the ratio between any
two units is an exact integer division. Both the date engine (whole days in a
duration) and the parsers (scaling Unix timestamps and subseconds) use these.

Example:
    >>> Unit.SECOND.per(Unit.DAY)
    86400
    >>> Unit.NANOSECOND.per(Unit.MILLISECOND)
    1000000

Python 3.13+.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "HOURS_PER_DAY",
    "MICROSECONDS_PER_SECOND",
    "MILLISECONDS_PER_SECOND",
    "MINUTES_PER_HOUR",
    "NANOSECONDS_PER_MICROSECOND",
    "NANOSECONDS_PER_MILLISECOND",
    "NANOSECONDS_PER_SECOND",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_WEEK",
    "Unit",
]


class Unit(IntEnum):
    """A unit of time, valued as its length in nanoseconds."""

    NANOSECOND = 1
    MICROSECOND = 1_000
    MILLISECOND = 1_000_000
    SECOND = 1_000_000_000
    MINUTE = 60 * 1_000_000_000
    HOUR = 3_600 * 1_000_000_000
    DAY = 86_400 * 1_000_000_000
    WEEK = 604_800 * 1_000_000_000

    def per(self, larger: Unit) -> int:
        """Number of ``self`` units in one ``larger`` unit.

        Raises:
            ValueError: If ``larger`` is shorter than ``self`` (the ratio
                would not be an integer)
        """
        if larger < self:
            msg = f"{larger.name} is shorter than {self.name}"
            raise ValueError(msg)
        return larger.value // self.value


SECONDS_PER_MINUTE: int = Unit.SECOND.per(Unit.MINUTE)
MINUTES_PER_HOUR: int = Unit.MINUTE.per(Unit.HOUR)
HOURS_PER_DAY: int = Unit.HOUR.per(Unit.DAY)
SECONDS_PER_HOUR: int = Unit.SECOND.per(Unit.HOUR)
SECONDS_PER_DAY: int = Unit.SECOND.per(Unit.DAY)
SECONDS_PER_WEEK: int = Unit.SECOND.per(Unit.WEEK)
MILLISECONDS_PER_SECOND: int = Unit.MILLISECOND.per(Unit.SECOND)
MICROSECONDS_PER_SECOND: int = Unit.MICROSECOND.per(Unit.SECOND)
NANOSECONDS_PER_SECOND: int = Unit.NANOSECOND.per(Unit.SECOND)
NANOSECONDS_PER_MILLISECOND: int = Unit.NANOSECOND.per(Unit.MILLISECOND)
NANOSECONDS_PER_MICROSECOND: int = Unit.NANOSECOND.per(Unit.MICROSECOND)
