"""Diagnostic codes, source spans and the Diagnostic record.

Every chronolex exception carries a Diagnostic so callers and tools can
match on a stable code instead of on message text.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric codes.

    Ranges:
        1000-1099: Component range errors (fallible constructors and replacers)
        1100-1199: Arithmetic errors (overflowing operators)
        2000-2099: Format description errors (bracketed description language)
        2100-2199: Format description errors (strftime descriptions)
        3000-3999: Parse errors (text against a compiled description)
        4000-4999: Formatting errors (value against a compiled description)
        5000-5999: Conversion errors (integer timestamp adapters)
    """

    # Component range errors (1000-1099)
    COMPONENT_OUT_OF_RANGE = 1001
    COMPONENT_OUT_OF_RANGE_CONDITIONAL = 1002

    # Arithmetic errors (1100-1199)
    DATE_OVERFLOW = 1101
    OCCURRENCE_COUNT_ZERO = 1102

    # Format description errors (2000-2099)
    DESCRIPTION_UNCLOSED_BRACKET = 2001
    DESCRIPTION_UNEXPECTED_CLOSING_BRACKET = 2002
    DESCRIPTION_MISSING_COMPONENT_NAME = 2003
    DESCRIPTION_INVALID_COMPONENT_NAME = 2004
    DESCRIPTION_MALFORMED_MODIFIER = 2005
    DESCRIPTION_UNKNOWN_MODIFIER = 2006
    DESCRIPTION_DUPLICATE_MODIFIER = 2007
    DESCRIPTION_INVALID_MODIFIER_VALUE = 2008
    DESCRIPTION_CONFLICTING_MODIFIERS = 2009
    DESCRIPTION_MISSING_MODIFIER = 2010
    DESCRIPTION_INVALID_ESCAPE = 2011
    DESCRIPTION_UNEXPECTED_WHITESPACE = 2012
    DESCRIPTION_NESTING_DEPTH_EXCEEDED = 2013
    DESCRIPTION_SOURCE_TOO_LARGE = 2014
    DESCRIPTION_EXPECTED_NESTED = 2015

    # strftime errors (2100-2199)
    STRFTIME_UNSUPPORTED_DIRECTIVE = 2101
    STRFTIME_INVALID_MODIFIER = 2102
    STRFTIME_INCOMPLETE_DIRECTIVE = 2103

    # Parse errors (3000-3999)
    PARSE_INVALID_LITERAL = 3001
    PARSE_INVALID_COMPONENT = 3002
    PARSE_UNEXPECTED_TRAILING_CHARACTERS = 3003
    PARSE_INSUFFICIENT_INFORMATION = 3004
    PARSE_COMPONENT_RANGE = 3005

    # Formatting errors (4000-4999)
    FORMATTING_INSUFFICIENT_TYPE_INFORMATION = 4001
    FORMATTING_INVALID_COMPONENT = 4002

    # Conversion errors (5000-5999)
    TIMESTAMP_INVALID_VALUE = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Where in a format description a diagnostic points.

    ``start`` and ``end`` are offsets into the UTF-8 bytes of the description;
    ``line`` and ``column`` are derived from the same bytes for display.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        problems = [
            f"start {self.start} is negative" if self.start < 0 else "",
            f"end {self.end} precedes start {self.start}" if self.end < self.start else "",
            f"line {self.line} is not 1-based" if self.line < 1 else "",
            f"column {self.column} is not 1-based" if self.column < 1 else "",
        ]
        if any(problems):
            msg = "invalid SourceSpan: " + "; ".join(filter(None, problems))
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported problem, carried by every chronolex exception.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location inside a format description (None otherwise)
        hint: Suggestion for fixing the error
        component: Component or field name the error is about
        expected: Description of the accepted values
        received: The offending value, rendered as text
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    component: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render in the default (RUST) layout of DiagnosticFormatter.

        Example output:
            error[COMPONENT_OUT_OF_RANGE_CONDITIONAL]: day must be in the range 1..=28 ...
              = component: day
              = expected: 1..=28
              = received: 29

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
