"""Tests for formatting/names.py (English names from Babel's CLDR data).

Python 3.13+.
"""

from __future__ import annotations

from chronolex import Month, Weekday
from chronolex.formatting import month_names, period_names, weekday_names


class TestNames:
    """Name tables."""

    def test_month_names(self) -> None:
        assert month_names(short=False)[0] == (b"January", Month.JANUARY)
        assert month_names(short=True)[8] == (b"Sep", Month.SEPTEMBER)
        assert [month for _, month in month_names(short=False)] == list(Month)

    def test_weekday_names_start_on_monday(self) -> None:
        assert weekday_names(short=False)[0] == (b"Monday", Weekday.MONDAY)
        assert weekday_names(short=True)[6] == (b"Sun", Weekday.SUNDAY)
        assert len(weekday_names(short=True)) == 7

    def test_period_names(self) -> None:
        assert period_names(uppercase=True) == (b"AM", b"PM")
        assert period_names(uppercase=False) == (b"am", b"pm")

    def test_tables_are_cached(self) -> None:
        assert month_names(short=True) is month_names(short=True)
        assert weekday_names(short=False) is weekday_names(short=False)

    def test_names_are_unique(self) -> None:
        for short in (True, False):
            months = [name for name, _ in month_names(short=short)]
            weekdays = [name for name, _ in weekday_names(short=short)]
            assert len(set(months)) == 12
            assert len(set(weekdays)) == 7
