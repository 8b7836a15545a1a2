"""Tests for parsing.parse_value and the parse classmethods built on it.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest

from chronolex import (
    Date,
    InvalidFormatDescriptionError,
    OffsetDateTime,
    ParseFailedError,
    PrimitiveDateTime,
)
from chronolex.diagnostics import DiagnosticCode, ParseErrorKind
from chronolex.format_description import parse_borrowed, parse_strftime_owned
from chronolex.parsing import parse_value


def _failure(text: str, description: str) -> ParseFailedError:
    with pytest.raises(ParseFailedError) as exc_info:
        parse_value(text, description).to_date()
    return exc_info.value


class TestParseValue:
    """Whole-input matching."""

    def test_string_description_is_version_one(self) -> None:
        assert parse_value("[2020", "[[[year]").year == 2020

    def test_compiled_description(self) -> None:
        parsed = parse_value("2020-01-02", parse_borrowed("[year]-[month]-[day]"))
        assert parsed.to_date() == Date.from_calendar_date(2020, 1, 2)

    def test_bytes_input(self) -> None:
        assert parse_value(b"07", "[hour]").hour_24 == 7

    def test_strftime_description(self) -> None:
        parsed = parse_value("Tue Jan  1 03:04:05 2019", parse_strftime_owned("%c"))
        assert parsed.to_primitive_date_time() == Date.from_calendar_date(2019, 1, 1).with_hms(
            3, 4, 5
        )

    def test_ignore_and_end(self) -> None:
        assert parse_value("abc2020", "[ignore count:3][year][end]").year == 2020

    def test_invalid_description_text(self) -> None:
        with pytest.raises(InvalidFormatDescriptionError):
            parse_value("2020", "[yaer]")


class TestParseErrors:
    """Error kinds, components and positions."""

    def test_trailing_characters(self) -> None:
        error = _failure("2020-01-02x", "[year]-[month]-[day]")
        assert error.kind is ParseErrorKind.UNEXPECTED_TRAILING_CHARACTERS
        assert error.position == 10
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.PARSE_UNEXPECTED_TRAILING_CHARACTERS

    def test_trailing_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chronolex.parsing"):
            _failure("07:30", "[hour]")
        assert "Parse stopped at byte 2 of 5" in caplog.text

    def test_invalid_literal(self) -> None:
        error = _failure("2020/01/02", "[year]-[month]-[day]")
        assert error.kind is ParseErrorKind.INVALID_LITERAL
        assert error.position == 4
        assert error.component is None
        assert error.input_value == "2020/01/02"

    @pytest.mark.parametrize(
        ("text", "component", "position"),
        [
            ("x020-01-02", "year", 0),
            ("2019-13-01", "month", 5),
            ("2019-01-32", "day", 8),
            ("2019-01-", "day", 8),
        ],
    )
    def test_invalid_component(self, text: str, component: str, position: int) -> None:
        error = _failure(text, "[year]-[month]-[day]")
        assert error.kind is ParseErrorKind.INVALID_COMPONENT
        assert (error.component, error.position) == (component, position)

    def test_end_component(self) -> None:
        error = _failure("2020x", "[year][end]")
        assert (error.kind, error.component, error.position) == (
            ParseErrorKind.INVALID_COMPONENT,
            "end",
            4,
        )

    def test_missing_mandatory_offset_sign(self) -> None:
        with pytest.raises(ParseFailedError) as exc_info:
            parse_value("05", "[offset_hour sign:mandatory]")
        assert exc_info.value.component == "offset_hour"

    def test_component_range_on_assembly(self) -> None:
        error = _failure("2019-02-29", "[year]-[month]-[day]")
        assert error.kind is ParseErrorKind.COMPONENT_RANGE
        assert error.component == "day"
        assert "for the given month and year" in str(error)

    def test_insufficient_information(self) -> None:
        assert _failure("2020", "[year]").kind is ParseErrorKind.INSUFFICIENT_INFORMATION


class TestParseClassmethods:
    """Date.parse and the date-time parse methods."""

    def test_date_parse(self) -> None:
        assert Date.parse("02/01/2020", "[day]/[month]/[year]") == Date.from_calendar_date(
            2020, 1, 2
        )

    def test_primitive_date_time_needs_time(self) -> None:
        with pytest.raises(ParseFailedError) as exc_info:
            PrimitiveDateTime.parse("2020-01-02", "[year]-[month]-[day]")
        assert exc_info.value.kind is ParseErrorKind.INSUFFICIENT_INFORMATION

    def test_offset_date_time_from_timestamp(self) -> None:
        value = OffsetDateTime.parse("86400", "[unix_timestamp]")
        assert value.date == Date.from_calendar_date(1970, 1, 2)

    def test_offset_date_time_needs_offset(self) -> None:
        with pytest.raises(ParseFailedError) as exc_info:
            OffsetDateTime.parse("2020-01-02 03", "[year]-[month]-[day] [hour]")
        assert exc_info.value.kind is ParseErrorKind.INSUFFICIENT_INFORMATION
