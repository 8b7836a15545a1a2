"""strftime-style format descriptions.

Compiles POSIX ``%``-directives into the same FormatItem tree the bracketed
grammar produces, so one formatter and one parser serve both.

Supported:
    %a %A %b %B %c %C %d %D %e %F %g %G %h %H %I %j %k %l %m %M %n %p %P
    %r %R %s %S %t %T %u %U %V %w %W %x %X %y %Y %z %%

Flags before a numeric directive select padding: ``-`` none, ``_`` space,
``0`` zero. The POSIX ``E`` and ``O`` locale modifiers are accepted and
ignored on the directives POSIX allows them on, and rejected elsewhere.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from chronolex.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    InvalidFormatDescriptionError,
)

from .. import component
from ..format_item import Compound, FormatItem, Literal
from ..modifier import MonthRepr, Padding, WeekdayRepr, WeekNumberRepr, YearRepr
from .lexer import Cursor
from .location import Location, Span, description_error

__all__ = ["parse_strftime"]

_PERCENT = ord("%")

_PADDING_FLAGS: dict[int, Padding] = {
    ord("-"): Padding.NONE,
    ord("_"): Padding.SPACE,
    ord("0"): Padding.ZERO,
}

_E_ALLOWED = frozenset(b"cCxXyY")
_O_ALLOWED = frozenset(b"deHImMSuUVwWy")

# Directives that honour a padding flag.
_PADDABLE = frozenset(b"CdegGHIjklmMSUVWyY")


def _literal(text: bytes) -> Literal:
    return Literal(text)


def _numeric(directive: int, padding: Padding | None) -> FormatItem:
    """Single-component directives; ``padding`` overrides the default."""

    def pad(default: Padding) -> Padding:
        return default if padding is None else padding

    match chr(directive):
        case "C":
            return component.Year(padding=pad(Padding.ZERO), repr=YearRepr.CENTURY)
        case "d":
            return component.Day(padding=pad(Padding.ZERO))
        case "e":
            return component.Day(padding=pad(Padding.SPACE))
        case "g":
            return component.Year(
                padding=pad(Padding.ZERO), repr=YearRepr.LAST_TWO, iso_week_based=True
            )
        case "G":
            return component.Year(padding=pad(Padding.ZERO), iso_week_based=True)
        case "H":
            return component.Hour(padding=pad(Padding.ZERO))
        case "I":
            return component.Hour(padding=pad(Padding.ZERO), is_12_hour_clock=True)
        case "j":
            return component.Ordinal(padding=pad(Padding.ZERO))
        case "k":
            return component.Hour(padding=pad(Padding.SPACE))
        case "l":
            return component.Hour(padding=pad(Padding.SPACE), is_12_hour_clock=True)
        case "m":
            return component.Month(padding=pad(Padding.ZERO))
        case "M":
            return component.Minute(padding=pad(Padding.ZERO))
        case "S":
            return component.Second(padding=pad(Padding.ZERO))
        case "U":
            return component.WeekNumber(padding=pad(Padding.ZERO), repr=WeekNumberRepr.SUNDAY)
        case "V":
            return component.WeekNumber(padding=pad(Padding.ZERO), repr=WeekNumberRepr.ISO)
        case "W":
            return component.WeekNumber(padding=pad(Padding.ZERO), repr=WeekNumberRepr.MONDAY)
        case "y":
            return component.Year(padding=pad(Padding.ZERO), repr=YearRepr.LAST_TWO)
        case _:
            return component.Year(padding=pad(Padding.ZERO))


_HMS = (
    component.Hour(),
    _literal(b":"),
    component.Minute(),
    _literal(b":"),
    component.Second(),
)

_MDY = (
    component.Month(),
    _literal(b"/"),
    component.Day(),
    _literal(b"/"),
    component.Year(repr=YearRepr.LAST_TWO),
)

# Directives that never take a padding flag.
_FIXED: dict[int, FormatItem] = {
    ord("a"): component.Weekday(repr=WeekdayRepr.SHORT),
    ord("A"): component.Weekday(repr=WeekdayRepr.LONG),
    ord("b"): component.Month(repr=MonthRepr.SHORT),
    ord("B"): component.Month(repr=MonthRepr.LONG),
    ord("c"): Compound(
        (
            component.Weekday(repr=WeekdayRepr.SHORT),
            _literal(b" "),
            component.Month(repr=MonthRepr.SHORT),
            _literal(b" "),
            component.Day(padding=Padding.SPACE),
            _literal(b" "),
            *_HMS,
            _literal(b" "),
            component.Year(),
        )
    ),
    ord("D"): Compound(_MDY),
    ord("F"): Compound(
        (
            component.Year(),
            _literal(b"-"),
            component.Month(),
            _literal(b"-"),
            component.Day(),
        )
    ),
    ord("h"): component.Month(repr=MonthRepr.SHORT),
    ord("n"): _literal(b"\n"),
    ord("p"): component.Period(is_uppercase=True),
    ord("P"): component.Period(is_uppercase=False),
    ord("r"): Compound(
        (
            component.Hour(is_12_hour_clock=True),
            _literal(b":"),
            component.Minute(),
            _literal(b":"),
            component.Second(),
            _literal(b" "),
            component.Period(is_uppercase=True),
        )
    ),
    ord("R"): Compound((component.Hour(), _literal(b":"), component.Minute())),
    ord("s"): component.UnixTimestamp(),
    ord("t"): _literal(b"\t"),
    ord("T"): Compound(_HMS),
    ord("u"): component.Weekday(repr=WeekdayRepr.MONDAY, one_indexed=True),
    ord("w"): component.Weekday(repr=WeekdayRepr.SUNDAY, one_indexed=False),
    ord("x"): Compound(_MDY),
    ord("X"): Compound(_HMS),
    ord("z"): Compound(
        (component.OffsetHour(sign_is_mandatory=True), component.OffsetMinute())
    ),
    ord("%"): _literal(b"%"),
}


class _StrftimeCompiler:
    __slots__ = ("_source",)

    def __init__(self, source: memoryview) -> None:
        self._source = source

    def _error(self, code: DiagnosticCode, what: str, span: Span) -> InvalidFormatDescriptionError:
        return description_error(
            ErrorTemplate.invalid_format_description(
                code, what, span.to_source_span(bytes(self._source))
            )
        )

    def compile(self) -> Compound:
        items: list[FormatItem] = []
        cursor = Cursor(self._source, 0)
        while not cursor.is_eof:
            if cursor.current != _PERCENT:
                end = cursor.advance()
                while not end.is_eof and end.current != _PERCENT:
                    end = end.advance()
                items.append(Literal(cursor.slice_to(end.pos)))
                cursor = end
                continue
            item, cursor = self._directive(cursor)
            items.append(item)
        return Compound(tuple(items))

    def _directive(self, cursor: Cursor) -> tuple[FormatItem, Cursor]:
        start = cursor.location
        cursor = cursor.advance()

        padding: Padding | None = None
        if not cursor.is_eof and cursor.current in _PADDING_FLAGS:
            padding = _PADDING_FLAGS[cursor.current]
            cursor = cursor.advance()

        locale_modifier: int | None = None
        if not cursor.is_eof and cursor.current in b"EO":
            locale_modifier = cursor.current
            cursor = cursor.advance()

        if cursor.is_eof:
            raise self._error(
                DiagnosticCode.STRFTIME_INCOMPLETE_DIRECTIVE,
                "unexpected end of input after `%`",
                start.to(Location(cursor.pos - 1)),
            )

        directive = cursor.current
        span = start.to(cursor.location)
        cursor = cursor.advance()

        if locale_modifier is not None:
            allowed = _E_ALLOWED if locale_modifier == ord("E") else _O_ALLOWED
            if directive not in allowed:
                raise self._error(
                    DiagnosticCode.STRFTIME_INVALID_MODIFIER,
                    f"modifier `{chr(locale_modifier)}` is not supported on `{chr(directive)}`",
                    span,
                )

        if directive in _PADDABLE:
            return _numeric(directive, padding), cursor

        fixed = _FIXED.get(directive)
        if fixed is None:
            text = bytes(self._source[start.byte : cursor.pos]).decode(errors="replace")
            raise description_error(
                ErrorTemplate.unsupported_strftime_directive(
                    text, span.to_source_span(bytes(self._source))
                )
            )
        if padding is not None:
            raise self._error(
                DiagnosticCode.STRFTIME_INVALID_MODIFIER,
                f"padding modifier is not supported on `{chr(directive)}`",
                span,
            )
        return fixed, cursor


def parse_strftime(source: memoryview) -> Compound:
    """Compile a strftime description into a Compound (borrowed literals).

    Raises:
        InvalidFormatDescriptionError: Unsupported directive (including
            ``%Z``), misplaced modifier, or trailing lone ``%``
    """
    return _StrftimeCompiler(source).compile()
