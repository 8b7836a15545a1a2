"""chronolex - proleptic Gregorian dates with a format-description language.

Calendar dates with exact integer conversions between calendar, ordinal,
ISO-week and Julian-day forms, and a small compiler that turns format
descriptions into reusable trees for formatting and parsing.

Public API:
    Date - Calendar date (bit-packed, immutable)
    Time - Time of day with nanosecond precision
    UtcOffset - Fixed offset from UTC
    Duration - Signed span of time
    PrimitiveDateTime - Date and time without an offset
    OffsetDateTime - Date and time at a UTC offset
    Month, Weekday - Calendar enumerations

Exceptions:
    ChronoError - Base exception class
    ComponentRangeError - A field outside its valid range
    InvalidFormatDescriptionError - A format description that does not compile
    ParseFailedError - Text that does not match a format description
    FormattingError - A value that cannot be rendered
    InvalidValueError - An integer timestamp that cannot be decoded

Submodules:
    chronolex.format_description - Component model, FormatItem tree, compilers
    chronolex.parsing - Parsed accumulator and component parsers
    chronolex.formatting - Tree-walking formatter and English names
    chronolex.timestamp - Integer Unix-timestamp encodings
    chronolex.diagnostics - Error codes, templates and formatting
"""

from .core import Date, Duration, OffsetDateTime, PrimitiveDateTime, Time, UtcOffset
from .diagnostics import (
    ChronoError,
    ComponentRangeError,
    FormattingError,
    InvalidFormatDescriptionError,
    InvalidValueError,
    ParseFailedError,
)
from .enums import Month, Weekday

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("chronolex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChronoError",
    "ComponentRangeError",
    "Date",
    "Duration",
    "FormattingError",
    "InvalidFormatDescriptionError",
    "InvalidValueError",
    "Month",
    "OffsetDateTime",
    "ParseFailedError",
    "PrimitiveDateTime",
    "Time",
    "UtcOffset",
    "Weekday",
    "__version__",
]
