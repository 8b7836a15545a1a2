"""Signed span of time with nanosecond precision.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from chronolex.convert import (
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)

__all__ = ["Duration"]


def _split_nanoseconds(total: int) -> tuple[int, int]:
    """Split a nanosecond count into (seconds, nanoseconds) sharing one sign."""
    seconds, nanoseconds = divmod(abs(total), NANOSECONDS_PER_SECOND)
    if total < 0:
        return -seconds, -nanoseconds
    return seconds, nanoseconds


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """A signed duration.

    Stored as whole seconds plus a nanosecond remainder. Both parts always
    share the same sign, so ordering the pair orders the durations.

    Example:
        >>> Duration.days(2).whole_days
        2
        >>> Duration(seconds=-1, nanoseconds=500_000_000)
        Duration(seconds=0, nanoseconds=-500000000)
    """

    seconds: int = 0
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        seconds, nanoseconds = _split_nanoseconds(self.total_nanoseconds)
        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "nanoseconds", nanoseconds)

    # Constructors ------------------------------------------------------

    @classmethod
    def weeks(cls, weeks: int) -> Duration:
        return cls(weeks * SECONDS_PER_WEEK)

    @classmethod
    def days(cls, days: int) -> Duration:
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def hours(cls, hours: int) -> Duration:
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def minutes(cls, minutes: int) -> Duration:
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def whole_seconds(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def milliseconds(cls, milliseconds: int) -> Duration:
        return cls(0, milliseconds * 1_000_000)

    @classmethod
    def microseconds(cls, microseconds: int) -> Duration:
        return cls(0, microseconds * NANOSECONDS_PER_MICROSECOND)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(0, nanoseconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Duration equal to a standard library ``timedelta``."""
        return cls(
            delta.days * SECONDS_PER_DAY + delta.seconds,
            delta.microseconds * NANOSECONDS_PER_MICROSECOND,
        )

    # Accessors ---------------------------------------------------------

    @property
    def total_nanoseconds(self) -> int:
        return self.seconds * NANOSECONDS_PER_SECOND + self.nanoseconds

    @property
    def whole_days(self) -> int:
        """Number of complete days, truncated toward zero."""
        days = abs(self.seconds) // SECONDS_PER_DAY
        return -days if self.seconds < 0 else days

    @property
    def whole_weeks(self) -> int:
        """Number of complete weeks, truncated toward zero."""
        weeks = abs(self.seconds) // SECONDS_PER_WEEK
        return -weeks if self.seconds < 0 else weeks

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.nanoseconds == 0

    def is_negative(self) -> bool:
        return self.seconds < 0 or self.nanoseconds < 0

    def is_positive(self) -> bool:
        return self.seconds > 0 or self.nanoseconds > 0

    def to_timedelta(self) -> timedelta:
        """Nearest ``timedelta``; sub-microsecond precision is truncated toward zero."""
        micros = abs(self.total_nanoseconds) // NANOSECONDS_PER_MICROSECOND
        return timedelta(microseconds=-micros if self.is_negative() else micros)

    # Arithmetic --------------------------------------------------------

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(0, self.total_nanoseconds + other.total_nanoseconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(0, self.total_nanoseconds - other.total_nanoseconds)

    def __neg__(self) -> Duration:
        return Duration(-self.seconds, -self.nanoseconds)

    def __abs__(self) -> Duration:
        return Duration(abs(self.seconds), abs(self.nanoseconds))

    def __mul__(self, factor: object) -> Duration:
        if not isinstance(factor, int):
            return NotImplemented
        return Duration(0, self.total_nanoseconds * factor)

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return not self.is_zero()
