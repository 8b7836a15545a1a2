"""Diagnostic system for chronolex errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ChronoError,
    ComponentRangeError,
    FormattingError,
    FormattingErrorKind,
    InvalidFormatDescriptionError,
    InvalidValueError,
    ParseErrorKind,
    ParseFailedError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ChronoError",
    "ComponentRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "FormattingErrorKind",
    "InvalidFormatDescriptionError",
    "InvalidValueError",
    "OutputFormat",
    "ParseErrorKind",
    "ParseFailedError",
    "SourceSpan",
]
