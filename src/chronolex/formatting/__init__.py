"""Render dates, times and offsets with format descriptions.

Python 3.13+. Uses Babel for English CLDR names.
"""

from .formatter import format_value
from .names import month_names, period_names, weekday_names

__all__ = ["format_value", "month_names", "period_names", "weekday_names"]
