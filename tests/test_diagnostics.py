"""Tests for the diagnostics package: codes, templates, formatter, exceptions.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from chronolex import (
    ChronoError,
    ComponentRangeError,
    Date,
    FormattingError,
    InvalidFormatDescriptionError,
    InvalidValueError,
    ParseFailedError,
)
from chronolex.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    FormattingErrorKind,
    OutputFormat,
    ParseErrorKind,
    SourceSpan,
)

# ============================================================================
# Codes and spans
# ============================================================================


class TestDiagnosticCode:
    """Code numbering."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.COMPONENT_OUT_OF_RANGE, 1000, 1099),
            (DiagnosticCode.DATE_OVERFLOW, 1100, 1199),
            (DiagnosticCode.DESCRIPTION_UNCLOSED_BRACKET, 2000, 2099),
            (DiagnosticCode.STRFTIME_UNSUPPORTED_DIRECTIVE, 2100, 2199),
            (DiagnosticCode.PARSE_INVALID_LITERAL, 3000, 3999),
            (DiagnosticCode.FORMATTING_INVALID_COMPONENT, 4000, 4999),
            (DiagnosticCode.TIMESTAMP_INVALID_VALUE, 5000, 5999),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestSourceSpan:
    """SourceSpan validation."""

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"start": -1, "end": 0, "line": 1, "column": 1}, "start"),
            ({"start": 5, "end": 4, "line": 1, "column": 1}, "end"),
            ({"start": 0, "end": 0, "line": 0, "column": 1}, "line"),
            ({"start": 0, "end": 0, "line": 1, "column": 0}, "column"),
        ],
    )
    def test_invalid_spans(self, kwargs: dict[str, int], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            SourceSpan(**kwargs)

    def test_empty_span_allowed(self) -> None:
        assert SourceSpan(start=3, end=3, line=1, column=4).start == 3


# ============================================================================
# Templates
# ============================================================================


class TestErrorTemplate:
    """Messages produced by ErrorTemplate."""

    def test_component_out_of_range(self) -> None:
        diagnostic = ErrorTemplate.component_out_of_range("month", 13, 1, 12)
        assert diagnostic.code is DiagnosticCode.COMPONENT_OUT_OF_RANGE
        assert diagnostic.message == "month must be in the range 1..=12"
        assert (diagnostic.component, diagnostic.expected, diagnostic.received) == (
            "month",
            "1..=12",
            "13",
        )

    def test_conditional_range(self) -> None:
        diagnostic = ErrorTemplate.component_out_of_range(
            "day", 29, 1, 28, "for the given month and year"
        )
        assert diagnostic.code is DiagnosticCode.COMPONENT_OUT_OF_RANGE_CONDITIONAL
        assert diagnostic.message.endswith("for the given month and year")

    def test_format_description_message_includes_index(self) -> None:
        span = SourceSpan(start=4, end=6, line=1, column=5)
        diagnostic = ErrorTemplate.invalid_component_name("yaer", span)
        assert diagnostic.message == (
            "invalid format description: invalid component name 'yaer' at byte index 4"
        )
        assert diagnostic.hint is not None

    def test_parse_component_range_copies_inner(self) -> None:
        inner = ErrorTemplate.component_out_of_range("day", 30, 1, 28, "for February")
        outer = ErrorTemplate.parse_component_range(inner)
        assert outer.code is DiagnosticCode.PARSE_COMPONENT_RANGE
        assert outer.message == inner.message
        assert outer.component == "day"

    def test_occurrence_count_zero(self) -> None:
        assert str(ErrorTemplate.occurrence_count_zero()) == "occurrence count must be at least 1"


# ============================================================================
# Formatter
# ============================================================================


class TestDiagnosticFormatter:
    """Rendering diagnostics in each output format."""

    @staticmethod
    def _sample() -> Diagnostic:
        return ErrorTemplate.invalid_component_name(
            "yaer", SourceSpan(start=1, end=4, line=1, column=2)
        )

    def test_rust_format(self) -> None:
        text = DiagnosticFormatter().format(self._sample())
        lines = text.splitlines()
        assert lines[0].startswith("error[DESCRIPTION_INVALID_COMPONENT_NAME]: ")
        assert lines[1] == "  --> line 1, column 2"
        assert lines[-1].startswith("  = help: ")

    def test_rust_format_fields(self) -> None:
        text = ErrorTemplate.component_out_of_range("hour", 24, 0, 23).format_error()
        assert "  = component: hour" in text
        assert "  = expected: 0..=23" in text
        assert "  = received: 24" in text

    def test_color(self) -> None:
        text = DiagnosticFormatter(color=True).format(self._sample())
        assert text.startswith("\033[1;31merror\033[0m")

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.occurrence_count_zero()) == (
            "OCCURRENCE_COUNT_ZERO: occurrence count must be at least 1"
        )

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._sample()))
        assert data["code"] == "DESCRIPTION_INVALID_COMPONENT_NAME"
        assert data["code_value"] == DiagnosticCode.DESCRIPTION_INVALID_COMPONENT_NAME.value
        assert (data["start"], data["end"], data["line"], data["column"]) == (1, 4, 1, 2)
        assert "component" not in data

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.occurrence_count_zero(), ErrorTemplate.date_overflow("x")]
        assert formatter.format_all(diagnostics).count("\n\n") == 1

    @given(text=st.text(min_size=0, max_size=300))
    def test_sanitize_bounds_message(self, text: str) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.DATE_OVERFLOW, message=text)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=20
        )
        rendered = formatter.format(diagnostic)
        body = rendered.removeprefix("DATE_OVERFLOW: ")
        assert len(body) <= 23
        if len(text) <= 20:
            assert body == text


# ============================================================================
# Exceptions
# ============================================================================


class TestExceptions:
    """Exception hierarchy and attributes."""

    def test_plain_message(self) -> None:
        error = ChronoError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_component_range_error(self) -> None:
        with pytest.raises(ComponentRangeError) as exc_info:
            Date.from_calendar_date(2019, 2, 29)
        error = exc_info.value
        assert isinstance(error, ValueError)
        assert (error.name, error.value, error.minimum, error.maximum) == ("day", 29, 1, 28)
        assert error.is_conditional
        assert error.diagnostic is not None
        assert "COMPONENT_OUT_OF_RANGE_CONDITIONAL" in str(error)

    def test_invalid_format_description_index(self) -> None:
        span = SourceSpan(start=9, end=9, line=1, column=10)
        error = InvalidFormatDescriptionError(
            ErrorTemplate.invalid_format_description(
                DiagnosticCode.DESCRIPTION_UNCLOSED_BRACKET, "unclosed opening bracket", span
            )
        )
        assert error.index == 9
        assert InvalidFormatDescriptionError("no span").index is None

    def test_parse_failed_attributes(self) -> None:
        error = ParseFailedError(
            ErrorTemplate.parse_invalid_component("month", 5),
            kind=ParseErrorKind.INVALID_COMPONENT,
            component="month",
            position=5,
            input_value="2020-xx",
        )
        assert (error.kind, error.component, error.position) == (
            ParseErrorKind.INVALID_COMPONENT,
            "month",
            5,
        )
        assert error.input_value == "2020-xx"

    def test_formatting_error_is_not_value_error(self) -> None:
        error = FormattingError(
            ErrorTemplate.formatting_invalid_component("year"),
            kind=FormattingErrorKind.INVALID_COMPONENT,
            component="year",
        )
        assert not isinstance(error, ValueError)
        assert error.component == "year"

    def test_invalid_value_error(self) -> None:
        error = InvalidValueError(
            ErrorTemplate.timestamp_invalid_value(10**20, "second", "out of range"),
            value=10**20,
        )
        assert error.value == 10**20
        assert "expected a Unix timestamp in seconds" in str(error)
