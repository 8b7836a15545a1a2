"""Fixed offset from UTC.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chronolex.convert import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from chronolex.diagnostics import ComponentRangeError

__all__ = ["UtcOffset"]

_MAX_HOURS = 25
_MAX_WHOLE_SECONDS = _MAX_HOURS * SECONDS_PER_HOUR + 59 * SECONDS_PER_MINUTE + 59


def _ensure_signed_range(name: str, value: int, maximum: int) -> None:
    if not -maximum <= value <= maximum:
        raise ComponentRangeError(name, value, -maximum, maximum)


@dataclass(frozen=True, slots=True)
class UtcOffset:
    """Offset from UTC as hours, minutes and seconds sharing one sign.

    Example:
        >>> str(UtcOffset.from_hms(-5, 30, 0))
        '-05:30:00'
        >>> UtcOffset.from_whole_seconds(3_600).hours
        1
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    UTC: ClassVar[UtcOffset]

    def __post_init__(self) -> None:
        _ensure_signed_range("hours", self.hours, _MAX_HOURS)
        _ensure_signed_range("minutes", self.minutes, 59)
        _ensure_signed_range("seconds", self.seconds, 59)
        signs = {(v > 0) - (v < 0) for v in (self.hours, self.minutes, self.seconds)} - {0}
        if len(signs) > 1:
            msg = "offset components must share one sign; use UtcOffset.from_hms"
            raise ValueError(msg)

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> UtcOffset:
        """Offset from hours, minutes and seconds.

        The sign of the most significant non-zero part applies to the
        others, so ``from_hms(-1, 30, 0)`` is an hour and a half behind UTC.

        Raises:
            ComponentRangeError: hours outside -25..=25, minutes or seconds
                outside -59..=59
        """
        _ensure_signed_range("hours", hours, _MAX_HOURS)
        _ensure_signed_range("minutes", minutes, 59)
        _ensure_signed_range("seconds", seconds, 59)
        if hours > 0:
            minutes, seconds = abs(minutes), abs(seconds)
        elif hours < 0:
            minutes, seconds = -abs(minutes), -abs(seconds)
        elif minutes > 0:
            seconds = abs(seconds)
        elif minutes < 0:
            seconds = -abs(seconds)
        return cls(hours, minutes, seconds)

    @classmethod
    def from_whole_seconds(cls, seconds: int) -> UtcOffset:
        """Raises ComponentRangeError outside +-25:59:59."""
        _ensure_signed_range("seconds", seconds, _MAX_WHOLE_SECONDS)
        sign = -1 if seconds < 0 else 1
        hours, rest = divmod(abs(seconds), SECONDS_PER_HOUR)
        minutes, secs = divmod(rest, SECONDS_PER_MINUTE)
        return cls(sign * hours, sign * minutes, sign * secs)

    @property
    def whole_seconds(self) -> int:
        return self.hours * SECONDS_PER_HOUR + self.minutes * SECONDS_PER_MINUTE + self.seconds

    def as_hms(self) -> tuple[int, int, int]:
        return self.hours, self.minutes, self.seconds

    def is_negative(self) -> bool:
        return self.hours < 0 or self.minutes < 0 or self.seconds < 0

    def is_positive(self) -> bool:
        return self.hours > 0 or self.minutes > 0 or self.seconds > 0

    def is_utc(self) -> bool:
        return self.hours == 0 and self.minutes == 0 and self.seconds == 0

    def __neg__(self) -> UtcOffset:
        return UtcOffset(-self.hours, -self.minutes, -self.seconds)

    def __str__(self) -> str:
        sign = "-" if self.is_negative() else "+"
        return f"{sign}{abs(self.hours):02d}:{abs(self.minutes):02d}:{abs(self.seconds):02d}"


UtcOffset.UTC = UtcOffset()
