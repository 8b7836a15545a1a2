"""Calendar date in the proleptic Gregorian calendar.

A Date is a single integer with the layout::

    | year (signed, high bits) | is leap year (1 bit) | ordinal (9 bits) |

so equality, hashing and chronological ordering are plain integer
operations on the packed value. Every public constructor validates its
input, and so does ``Date(packed)``. ``Date._from_parts`` and
``Date._from_packed`` are the trusted constructors used once the invariants
are already known to hold.

Conversions to and from the Julian day number and the calendar/ISO forms
use closed-form integer arithmetic. Python integers are unbounded and
``//``/``%`` floor toward negative infinity, which the formulas rely on for
years before 1 CE.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, ClassVar

from chronolex.calendar import (
    DAYS_CUMULATIVE_COMMON_LEAP,
    days_in_year,
    div_floor,
    is_leap_year,
    weeks_in_year,
)
from chronolex.constants import MAX_YEAR, MIN_YEAR
from chronolex.core.duration import Duration
from chronolex.diagnostics import ComponentRangeError, ErrorTemplate
from chronolex.enums import Month, Weekday

if TYPE_CHECKING:
    from chronolex.core.datetime import PrimitiveDateTime
    from chronolex.core.time import Time
    from chronolex.format_description import FormatItem

__all__ = ["Date"]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_ORDINAL_MASK = 0x1FF
_LEAP_BIT = 1 << 9
_YEAR_SHIFT = 10


def _ensure_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ComponentRangeError("year", year, MIN_YEAR, MAX_YEAR)


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Date:
    """A date in the proleptic Gregorian calendar.

    Construct through ``from_calendar_date``, ``from_ordinal_date``,
    ``from_iso_week_date`` or ``from_julian_day``. The dataclass constructor
    takes the packed representation, is not part of the public API and
    rejects a packed value that no date encodes.

    Example:
        >>> d = Date.from_calendar_date(2019, Month.JANUARY, 1)
        >>> d.weekday()
        <Weekday.TUESDAY: 1>
        >>> str(d.next_occurrence(Weekday.MONDAY))
        '2019-01-07'
    """

    _value: int

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]
    UNIX_EPOCH: ClassVar[Date]

    def __post_init__(self) -> None:
        year = self._value >> _YEAR_SHIFT
        ordinal = self._value & _ORDINAL_MASK
        _ensure_year(year)
        maximum = days_in_year(year)
        if not 1 <= ordinal <= maximum:
            raise ComponentRangeError("ordinal", ordinal, 1, maximum, "for the given year")
        if bool(self._value & _LEAP_BIT) != is_leap_year(year):
            msg = f"packed date {self._value:#x} has a leap flag that disagrees with year {year}"
            raise ValueError(msg)

    @classmethod
    def _from_packed(cls, value: int) -> Date:
        """Build a Date from a packed value known to be valid."""
        date = object.__new__(cls)
        object.__setattr__(date, "_value", value)
        return date

    @classmethod
    def _from_parts(cls, year: int, leap: bool, ordinal: int) -> Date:
        """Build a Date without validation.

        The caller guarantees ``1 <= ordinal <= days_in_year(year)`` and that
        ``leap`` is the leap status of ``year``.
        """
        assert MIN_YEAR <= year <= MAX_YEAR
        assert 1 <= ordinal <= days_in_year(year)
        assert is_leap_year(year) == leap
        return cls._from_packed((year << _YEAR_SHIFT) | (_LEAP_BIT if leap else 0) | ordinal)

    @classmethod
    def _from_ordinal_unchecked(cls, year: int, ordinal: int) -> Date:
        return cls._from_parts(year, is_leap_year(year), ordinal)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_calendar_date(cls, year: int, month: Month | int, day: int) -> Date:
        """Date from year, month and day.

        Raises:
            ComponentRangeError: ``year`` outside the supported range, ``month``
                outside 1..=12 or ``day`` past the end of the month
        """
        _ensure_year(year)
        month = Month.from_number(int(month))
        length = month.length(year)
        if not 1 <= day <= length:
            raise ComponentRangeError("day", day, 1, length, "for the given month and year")
        leap = is_leap_year(year)
        ordinal = DAYS_CUMULATIVE_COMMON_LEAP[leap][month - 1] + day
        return cls._from_parts(year, leap, ordinal)

    @classmethod
    def from_ordinal_date(cls, year: int, ordinal: int) -> Date:
        """Date from year and day of year (1-based).

        Raises:
            ComponentRangeError: ``year`` outside the supported range or
                ``ordinal`` outside 1..=365 (366 in leap years)
        """
        _ensure_year(year)
        maximum = days_in_year(year)
        if not 1 <= ordinal <= maximum:
            raise ComponentRangeError("ordinal", ordinal, 1, maximum, "for the given year")
        return cls._from_ordinal_unchecked(year, ordinal)

    @classmethod
    def from_iso_week_date(cls, year: int, week: int, weekday: Weekday) -> Date:
        """Date from ISO year, ISO week (1..=52 or 53) and weekday.

        The result may fall in the calendar year before or after ``year``.

        Raises:
            ComponentRangeError: ``year`` outside the supported range or
                ``week`` past the number of ISO weeks in ``year``
        """
        _ensure_year(year)
        maximum = weeks_in_year(year)
        if not 1 <= week <= maximum:
            raise ComponentRangeError("week", week, 1, maximum, "for the given year")

        adj_year = year - 1
        raw = (
            365 * adj_year
            + div_floor(adj_year, 4)
            - div_floor(adj_year, 100)
            + div_floor(adj_year, 400)
        )
        match raw % 7:
            case 1:
                jan_4 = 8
            case 2:
                jan_4 = 9
            case 3:
                jan_4 = 10
            case 4:
                jan_4 = 4
            case 5:
                jan_4 = 5
            case 6:
                jan_4 = 6
            case _:
                jan_4 = 7
        ordinal = week * 7 + weekday.number_from_monday() - jan_4

        if ordinal <= 0:
            return cls._from_ordinal_unchecked(year - 1, ordinal + days_in_year(year - 1))
        if ordinal > days_in_year(year):
            return cls._from_ordinal_unchecked(year + 1, ordinal - days_in_year(year))
        return cls._from_ordinal_unchecked(year, ordinal)

    @classmethod
    def from_julian_day(cls, julian_day: int) -> Date:
        """Date from a Julian day number.

        Raises:
            ComponentRangeError: ``julian_day`` outside the days covered by
                ``Date.MIN`` through ``Date.MAX``
        """
        minimum = cls.MIN.to_julian_day()
        maximum = cls.MAX.to_julian_day()
        if not minimum <= julian_day <= maximum:
            raise ComponentRangeError("julian_day", julian_day, minimum, maximum)
        return cls._from_julian_day_unchecked(julian_day)

    @classmethod
    def _from_julian_day_unchecked(cls, julian_day: int) -> Date:
        # Baum's algorithm, shifted by S 400-year cycles so n stays non-negative.
        s = 2_500
        k = 719_468 + 146_097 * s
        shift = 400 * s

        n = julian_day - 2_440_588 + k

        n_1 = 4 * n + 3
        c = n_1 // 146_097
        n_c = n_1 % 146_097 // 4

        n_2 = 4 * n_c + 3
        p_2 = 2_939_745 * n_2
        z = p_2 >> 32
        n_y = (p_2 & 0xFFFF_FFFF) // 2_939_745 // 4
        y = 100 * c + z

        j = n_y >= 306
        year = y - shift + int(j)

        leap = is_leap_year(year)
        ordinal = n_y - 305 if j else n_y + 60 + int(leap)
        return cls._from_parts(year, leap, ordinal)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def _is_in_leap_year(self) -> bool:
        return bool(self._value & _LEAP_BIT)

    @property
    def year(self) -> int:
        return self._value >> _YEAR_SHIFT

    @property
    def ordinal(self) -> int:
        """Day of the year, 1-based."""
        return self._value & _ORDINAL_MASK

    def _month_day(self) -> tuple[int, int]:
        # Fixed-point division by the average month length, with January and
        # February split off so the remaining months follow a regular pattern.
        ordinal = self.ordinal
        jan_feb_len = 59 + int(self._is_in_leap_year())
        if ordinal <= jan_feb_len:
            month_adj, ordinal_adj = 0, 0
        else:
            month_adj, ordinal_adj = 2, jan_feb_len
        ordinal -= ordinal_adj
        month = (ordinal * 268 + 8031) >> 13
        days_in_preceding_months = (month * 3917 - 3866) >> 7
        return month + month_adj, ordinal - days_in_preceding_months

    @property
    def month(self) -> Month:
        return Month(self._month_day()[0])

    @property
    def day(self) -> int:
        """Day of the month, 1-based."""
        return self._month_day()[1]

    def _iso_year_week(self) -> tuple[int, int]:
        year, ordinal = self.year, self.ordinal
        week = (ordinal + 10 - self.weekday().number_from_monday()) // 7
        if week == 0:
            return year - 1, weeks_in_year(year - 1)
        if week == 53 and weeks_in_year(year) == 52:
            return year + 1, 1
        return year, week

    @property
    def iso_week(self) -> int:
        """ISO week number, 1..=53."""
        return self._iso_year_week()[1]

    @property
    def sunday_based_week(self) -> int:
        """Week number where week 1 starts on the first Sunday, 0..=53."""
        return (self.ordinal - self.weekday().number_days_from_sunday() + 6) // 7

    @property
    def monday_based_week(self) -> int:
        """Week number where week 1 starts on the first Monday, 0..=53."""
        return (self.ordinal - self.weekday().number_days_from_monday() + 6) // 7

    def to_calendar_date(self) -> tuple[int, Month, int]:
        month, day = self._month_day()
        return self.year, Month(month), day

    def to_ordinal_date(self) -> tuple[int, int]:
        return self.year, self.ordinal

    def to_iso_week_date(self) -> tuple[int, int, Weekday]:
        year, week = self._iso_year_week()
        return year, week, self.weekday()

    def weekday(self) -> Weekday:
        # Julian day 0 is a Monday.
        return Weekday(self.to_julian_day() % 7)

    def to_julian_day(self) -> int:
        year, ordinal = self.year, self.ordinal
        # Shift to a non-negative year; the constant below undoes it.
        adj_year = year + 999_999
        century = adj_year // 100
        days_before_year = (1461 * adj_year) // 4 - century + century // 4
        return days_before_year + ordinal - 363_521_075

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def next_day(self) -> Date | None:
        """The following day, or None for ``Date.MAX``."""
        ordinal = self.ordinal
        if ordinal == 366 or (ordinal == 365 and not self._is_in_leap_year()):
            if self._value == Date.MAX._value:
                return None
            return Date._from_ordinal_unchecked(self.year + 1, 1)
        return Date._from_packed(self._value + 1)

    def previous_day(self) -> Date | None:
        """The preceding day, or None for ``Date.MIN``."""
        if self.ordinal != 1:
            return Date._from_packed(self._value - 1)
        if self._value == Date.MIN._value:
            return None
        return Date._from_ordinal_unchecked(self.year - 1, days_in_year(self.year - 1))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    @staticmethod
    def _whole_days(duration: Duration | timedelta) -> int:
        if isinstance(duration, timedelta):
            duration = Duration.from_timedelta(duration)
        return duration.whole_days

    def _shift_days(self, days: int) -> Date | None:
        if not _I32_MIN <= days <= _I32_MAX:
            return None
        julian_day = self.to_julian_day() + days
        if not Date.MIN.to_julian_day() <= julian_day <= Date.MAX.to_julian_day():
            return None
        return Date._from_julian_day_unchecked(julian_day)

    def checked_add(self, duration: Duration | timedelta) -> Date | None:
        """Add the whole days of ``duration``; None if the result is out of range.

        Only whole days count: the fractional part is truncated toward zero.
        """
        return self._shift_days(self._whole_days(duration))

    def checked_sub(self, duration: Duration | timedelta) -> Date | None:
        """Subtract the whole days of ``duration``; None if the result is out of range."""
        return self._shift_days(-self._whole_days(duration))

    def saturating_add(self, duration: Duration | timedelta) -> Date:
        """Add ``duration``, clamping to ``Date.MIN`` / ``Date.MAX``."""
        result = self.checked_add(duration)
        if result is not None:
            return result
        return Date.MIN if self._whole_days(duration) < 0 else Date.MAX

    def saturating_sub(self, duration: Duration | timedelta) -> Date:
        """Subtract ``duration``, clamping to ``Date.MIN`` / ``Date.MAX``."""
        result = self.checked_sub(duration)
        if result is not None:
            return result
        return Date.MAX if self._whole_days(duration) < 0 else Date.MIN

    def __add__(self, other: object) -> Date:
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise OverflowError(str(ErrorTemplate.date_overflow("adding duration to date")))
        return result

    __radd__ = __add__

    def __sub__(self, other: object) -> Date | Duration:
        if isinstance(other, Date):
            return Duration.days(self.to_julian_day() - other.to_julian_day())
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise OverflowError(
                str(ErrorTemplate.date_overflow("subtracting duration from date"))
            )
        return result

    # ------------------------------------------------------------------
    # Weekday occurrences
    # ------------------------------------------------------------------

    def checked_next_occurrence(self, weekday: Weekday) -> Date | None:
        """Next date strictly after this one falling on ``weekday``."""
        day_diff = (weekday - self.weekday()) % 7 or 7
        return self._shift_days(day_diff)

    def checked_prev_occurrence(self, weekday: Weekday) -> Date | None:
        """Last date strictly before this one falling on ``weekday``."""
        day_diff = (self.weekday() - weekday) % 7 or 7
        return self._shift_days(-day_diff)

    def checked_nth_next_occurrence(self, weekday: Weekday, n: int) -> Date | None:
        if n == 0:
            return None
        first = self.checked_next_occurrence(weekday)
        if first is None:
            return None
        return first._shift_days(7 * (n - 1))

    def checked_nth_prev_occurrence(self, weekday: Weekday, n: int) -> Date | None:
        if n == 0:
            return None
        first = self.checked_prev_occurrence(weekday)
        if first is None:
            return None
        return first._shift_days(-7 * (n - 1))

    def next_occurrence(self, weekday: Weekday) -> Date:
        """Next date strictly after this one falling on ``weekday``.

        Raises:
            OverflowError: If the result is past ``Date.MAX``
        """
        result = self.checked_next_occurrence(weekday)
        if result is None:
            raise OverflowError(
                str(ErrorTemplate.date_overflow("calculating the next occurrence of a weekday"))
            )
        return result

    def prev_occurrence(self, weekday: Weekday) -> Date:
        """Last date strictly before this one falling on ``weekday``.

        Raises:
            OverflowError: If the result is before ``Date.MIN``
        """
        result = self.checked_prev_occurrence(weekday)
        if result is None:
            raise OverflowError(
                str(
                    ErrorTemplate.date_overflow(
                        "calculating the previous occurrence of a weekday"
                    )
                )
            )
        return result

    def nth_next_occurrence(self, weekday: Weekday, n: int) -> Date:
        """The ``n``-th date after this one falling on ``weekday``.

        Raises:
            ValueError: If ``n`` is zero
            OverflowError: If the result is past ``Date.MAX``
        """
        if n < 1:
            raise ValueError(str(ErrorTemplate.occurrence_count_zero()))
        result = self.checked_nth_next_occurrence(weekday, n)
        if result is None:
            raise OverflowError(
                str(ErrorTemplate.date_overflow("calculating the next occurrence of a weekday"))
            )
        return result

    def nth_prev_occurrence(self, weekday: Weekday, n: int) -> Date:
        """The ``n``-th date before this one falling on ``weekday``.

        Raises:
            ValueError: If ``n`` is zero
            OverflowError: If the result is before ``Date.MIN``
        """
        if n < 1:
            raise ValueError(str(ErrorTemplate.occurrence_count_zero()))
        result = self.checked_nth_prev_occurrence(weekday, n)
        if result is None:
            raise OverflowError(
                str(
                    ErrorTemplate.date_overflow(
                        "calculating the previous occurrence of a weekday"
                    )
                )
            )
        return result

    # ------------------------------------------------------------------
    # Replacement
    # ------------------------------------------------------------------

    def replace_year(self, year: int) -> Date:
        """Same month and day in ``year``.

        Raises:
            ComponentRangeError: ``year`` out of range, or the date is
                February 29th and ``year`` is not a leap year
        """
        _ensure_year(year)
        ordinal = self.ordinal

        # January and February are unaffected by leap years.
        if ordinal <= 59:
            return Date._from_ordinal_unchecked(year, ordinal)

        match (self._is_in_leap_year(), is_leap_year(year)):
            case (False, False) | (True, True):
                return Date._from_ordinal_unchecked(year, ordinal)
            case (True, False) if ordinal == 60:
                raise ComponentRangeError("day", 29, 1, 28, "for the given month and year")
            case (False, True):
                return Date._from_ordinal_unchecked(year, ordinal + 1)
            case _:
                return Date._from_ordinal_unchecked(year, ordinal - 1)

    def replace_month(self, month: Month | int) -> Date:
        """Same year and day in ``month``.

        Raises:
            ComponentRangeError: The day does not exist in ``month``
        """
        year, _, day = self.to_calendar_date()
        return Date.from_calendar_date(year, month, day)

    def replace_day(self, day: int) -> Date:
        """Same year and month on ``day``.

        Raises:
            ComponentRangeError: ``day`` past the end of the month
        """
        length = self.month.length(self.year)
        if not 1 <= day <= length:
            raise ComponentRangeError("day", day, 1, length, "for the given month and year")
        return Date._from_ordinal_unchecked(self.year, self.ordinal - self.day + day)

    def replace_ordinal(self, ordinal: int) -> Date:
        """Same year on day of year ``ordinal``.

        Raises:
            ComponentRangeError: ``ordinal`` outside the year
        """
        maximum = days_in_year(self.year)
        if not 1 <= ordinal <= maximum:
            raise ComponentRangeError("ordinal", ordinal, 1, maximum, "for the given year")
        return Date._from_ordinal_unchecked(self.year, ordinal)

    # ------------------------------------------------------------------
    # Combination with a time of day
    # ------------------------------------------------------------------

    def midnight(self) -> PrimitiveDateTime:
        from chronolex.core.datetime import PrimitiveDateTime  # noqa: PLC0415 - circular
        from chronolex.core.time import Time  # noqa: PLC0415 - circular

        return PrimitiveDateTime(self, Time.MIDNIGHT)

    def with_time(self, time: Time) -> PrimitiveDateTime:
        from chronolex.core.datetime import PrimitiveDateTime  # noqa: PLC0415 - circular

        return PrimitiveDateTime(self, time)

    def with_hms(self, hour: int, minute: int, second: int) -> PrimitiveDateTime:
        """Combine with a time of day.

        Raises:
            ComponentRangeError: Any time field out of range
        """
        from chronolex.core.time import Time  # noqa: PLC0415 - circular

        return self.with_time(Time.from_hms(hour, minute, second))

    def with_hms_milli(
        self, hour: int, minute: int, second: int, millisecond: int
    ) -> PrimitiveDateTime:
        from chronolex.core.time import Time  # noqa: PLC0415 - circular

        return self.with_time(Time.from_hms_milli(hour, minute, second, millisecond))

    def with_hms_micro(
        self, hour: int, minute: int, second: int, microsecond: int
    ) -> PrimitiveDateTime:
        from chronolex.core.time import Time  # noqa: PLC0415 - circular

        return self.with_time(Time.from_hms_micro(hour, minute, second, microsecond))

    def with_hms_nano(
        self, hour: int, minute: int, second: int, nanosecond: int
    ) -> PrimitiveDateTime:
        from chronolex.core.time import Time  # noqa: PLC0415 - circular

        return self.with_time(Time.from_hms_nano(hour, minute, second, nanosecond))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def format(self, description: FormatItem | str) -> str:
        """Render with a compiled format description (or version 1 source text).

        Raises:
            FormattingError: The description needs a time or offset
            InvalidFormatDescriptionError: ``description`` is text that does not compile
        """
        from chronolex.formatting import format_value  # noqa: PLC0415 - circular

        return format_value(description, date=self)

    @classmethod
    def parse(cls, text: str | bytes, description: FormatItem | str) -> Date:
        """Parse ``text`` against a format description.

        Raises:
            ParseFailedError: The text does not match, or does not identify a date
            InvalidFormatDescriptionError: ``description`` is text that does not compile
        """
        from chronolex.parsing import parse_value  # noqa: PLC0415 - circular

        return parse_value(text, description).to_date()

    def __str__(self) -> str:
        year, month, day = self.to_calendar_date()
        width = max(len(str(abs(year))), 4)
        if not 0 <= year < 10_000:
            sign = "-" if year < 0 else "+"
            return f"{sign}{abs(year):0{width}d}-{month.value:02d}-{day:02d}"
        return f"{year:0{width}d}-{month.value:02d}-{day:02d}"

    def __repr__(self) -> str:
        return f"Date({self})"


Date.MIN = Date._from_ordinal_unchecked(MIN_YEAR, 1)
Date.MAX = Date._from_ordinal_unchecked(MAX_YEAR, days_in_year(MAX_YEAR))
Date.UNIX_EPOCH = Date._from_ordinal_unchecked(1970, 1)
