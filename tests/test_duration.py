"""Tests for core/duration.py.

Python 3.13+.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from hypothesis import given

from chronolex import Duration
from tests.strategies.dates import durations


class TestDurationConstruction:
    """Constructors and normalisation."""

    @pytest.mark.parametrize(
        ("duration", "seconds"),
        [
            (Duration.weeks(1), 604_800),
            (Duration.days(1), 86_400),
            (Duration.hours(1), 3_600),
            (Duration.minutes(1), 60),
            (Duration.whole_seconds(7), 7),
        ],
    )
    def test_whole_second_constructors(self, duration: Duration, seconds: int) -> None:
        assert duration.seconds == seconds
        assert duration.nanoseconds == 0

    def test_subsecond_constructors(self) -> None:
        assert Duration.milliseconds(1_500) == Duration(1, 500_000_000)
        assert Duration.microseconds(-1) == Duration(0, -1_000)
        assert Duration.from_nanoseconds(1_000_000_001) == Duration(1, 1)

    def test_mixed_signs_normalised(self) -> None:
        """Seconds and nanoseconds always share a sign."""
        duration = Duration(seconds=-1, nanoseconds=500_000_000)
        assert duration.seconds == 0
        assert duration.nanoseconds == -500_000_000
        assert repr(duration) == "Duration(seconds=0, nanoseconds=-500000000)"

    def test_from_timedelta(self) -> None:
        assert Duration.from_timedelta(timedelta(days=-1, microseconds=1)) == Duration(
            -86_399, -999_999_000
        )


class TestDurationAccessors:
    """Whole-unit accessors truncate toward zero."""

    def test_whole_days(self) -> None:
        assert Duration.hours(47).whole_days == 1
        assert Duration.hours(-47).whole_days == -1
        assert Duration.hours(-48).whole_days == -2

    def test_whole_weeks(self) -> None:
        assert Duration.days(13).whole_weeks == 1
        assert Duration.days(-13).whole_weeks == -1

    def test_sign_predicates(self) -> None:
        assert Duration().is_zero()
        assert not Duration()
        assert Duration.from_nanoseconds(-1).is_negative()
        assert Duration.from_nanoseconds(1).is_positive()

    def test_to_timedelta_truncates(self) -> None:
        assert Duration.from_nanoseconds(1_999).to_timedelta() == timedelta(microseconds=1)
        assert Duration.from_nanoseconds(-1_999).to_timedelta() == timedelta(microseconds=-1)


class TestDurationArithmetic:
    """Operators."""

    def test_add_sub(self) -> None:
        assert Duration.days(1) + Duration.hours(1) == Duration.whole_seconds(90_000)
        assert Duration.days(1) - Duration.days(2) == Duration.days(-1)

    def test_neg_abs(self) -> None:
        assert -Duration.milliseconds(5) == Duration.milliseconds(-5)
        assert abs(Duration.milliseconds(-5)) == Duration.milliseconds(5)

    def test_multiply(self) -> None:
        assert Duration.hours(2) * 3 == Duration.hours(6)
        assert 3 * Duration.hours(2) == Duration.hours(6)

    def test_ordering(self) -> None:
        assert Duration.from_nanoseconds(-5) < Duration() < Duration.from_nanoseconds(5)
        assert Duration.whole_seconds(-1) < Duration.milliseconds(-500)

    @given(a=durations, b=durations)
    def test_order_matches_total_nanoseconds(self, a: Duration, b: Duration) -> None:
        assert (a < b) == (a.total_nanoseconds < b.total_nanoseconds)
        assert (a + b).total_nanoseconds == a.total_nanoseconds + b.total_nanoseconds

    @given(duration=durations)
    def test_parts_share_sign(self, duration: Duration) -> None:
        assert duration.seconds * duration.nanoseconds >= 0
        assert abs(duration.nanoseconds) < 1_000_000_000
