"""Clock time of day with nanosecond precision.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chronolex.convert import (
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronolex.diagnostics import ComponentRangeError

__all__ = ["Time"]


def _ensure_range(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ComponentRangeError(name, value, 0, maximum)


@dataclass(frozen=True, slots=True, order=True)
class Time:
    """Time of day, without date or offset.

    Example:
        >>> str(Time.from_hms_milli(13, 5, 9, 250))
        '13:05:09.25'
        >>> Time.MIDNIGHT < Time.from_hms(0, 0, 1)
        True
    """

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    MIDNIGHT: ClassVar[Time]

    def __post_init__(self) -> None:
        _ensure_range("hour", self.hour, 23)
        _ensure_range("minute", self.minute, 59)
        _ensure_range("second", self.second, 59)
        _ensure_range("nanosecond", self.nanosecond, NANOSECONDS_PER_SECOND - 1)

    @classmethod
    def from_hms(cls, hour: int, minute: int, second: int) -> Time:
        """Raises ComponentRangeError on any field out of range."""
        return cls(hour, minute, second)

    @classmethod
    def from_hms_milli(cls, hour: int, minute: int, second: int, millisecond: int) -> Time:
        _ensure_range("millisecond", millisecond, 999)
        return cls(hour, minute, second, millisecond * NANOSECONDS_PER_MILLISECOND)

    @classmethod
    def from_hms_micro(cls, hour: int, minute: int, second: int, microsecond: int) -> Time:
        _ensure_range("microsecond", microsecond, 999_999)
        return cls(hour, minute, second, microsecond * NANOSECONDS_PER_MICROSECOND)

    @classmethod
    def from_hms_nano(cls, hour: int, minute: int, second: int, nanosecond: int) -> Time:
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def _from_nanoseconds_of_day(cls, nanoseconds: int) -> Time:
        seconds, nanosecond = divmod(nanoseconds, NANOSECONDS_PER_SECOND)
        hour, seconds = divmod(seconds, SECONDS_PER_HOUR)
        minute, second = divmod(seconds, SECONDS_PER_MINUTE)
        return cls(hour, minute, second, nanosecond)

    @property
    def millisecond(self) -> int:
        return self.nanosecond // NANOSECONDS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        return self.nanosecond // NANOSECONDS_PER_MICROSECOND

    def as_hms(self) -> tuple[int, int, int]:
        return self.hour, self.minute, self.second

    def as_hms_nano(self) -> tuple[int, int, int, int]:
        return self.hour, self.minute, self.second, self.nanosecond

    @property
    def seconds_of_day(self) -> int:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    @property
    def nanoseconds_of_day(self) -> int:
        return self.seconds_of_day * NANOSECONDS_PER_SECOND + self.nanosecond

    def __str__(self) -> str:
        subsecond = f"{self.nanosecond:09d}".rstrip("0") or "0"
        return f"{self.hour}:{self.minute:02d}:{self.second:02d}.{subsecond}"


Time.MIDNIGHT = Time()
