"""Value types: dates, times, offsets, durations and date-times.

Everything here is immutable and safe to share between threads.

Python 3.13+.
"""

from .date import Date
from .datetime import OffsetDateTime, PrimitiveDateTime
from .depth_guard import DepthGuard, depth_clamp
from .duration import Duration
from .offset import UtcOffset
from .time import Time

__all__ = [
    "Date",
    "DepthGuard",
    "Duration",
    "OffsetDateTime",
    "PrimitiveDateTime",
    "Time",
    "UtcOffset",
    "depth_clamp",
]
