"""Hypothesis strategies for chronolex property-based testing.

Strategies are organized by domain:

- dates: Date, Time, UtcOffset and Duration values
- format_descriptions: format-description sources and arbitrary text

Usage:
    from tests.strategies import dates, times
    from tests.strategies.dates import date_by_boundary
    from tests.strategies.format_descriptions import date_descriptions

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls for coverage statistics:
    - date_by_boundary, padded_component
"""

from .dates import (
    common_era_dates,
    date_by_boundary,
    dates,
    day_durations,
    durations,
    four_digit_years,
    julian_days,
    minute_offsets,
    months,
    offsets,
    times,
    weekdays,
    years,
)
from .format_descriptions import (
    date_descriptions,
    description_soup,
    padded_component,
    strftime_soup,
    time_descriptions,
)

__all__ = [
    "common_era_dates",
    "date_by_boundary",
    "date_descriptions",
    "dates",
    "day_durations",
    "description_soup",
    "durations",
    "four_digit_years",
    "julian_days",
    "minute_offsets",
    "months",
    "offsets",
    "padded_component",
    "strftime_soup",
    "time_descriptions",
    "times",
    "weekdays",
    "years",
]
