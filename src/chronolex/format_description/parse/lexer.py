"""Lexer for bracketed format descriptions.

Turns the UTF-8 bytes of a description into tokens:

    LiteralToken        - text outside any bracket
    BracketToken        - ``[`` or ``]``
    ComponentPartToken  - a run of whitespace or non-whitespace inside brackets

Token values are ``memoryview`` slices of the input, so lexing never copies
literal text. Each token carries its byte span for diagnostics.

Version differences:
    V1: ``[[`` is emitted as two opening brackets without changing depth;
        the AST builder turns the pair into a literal ``[``.
    V2: ``\\[``, ``\\]`` and ``\\\\`` escape the bracket or backslash; any other
        escape is an error.

A ``]`` outside every bracket is literal text in both versions.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chronolex.diagnostics import DiagnosticCode, ErrorTemplate, InvalidFormatDescriptionError

from ..version import FormatDescriptionVersion
from .location import Location, Span, description_error

__all__ = [
    "BracketKind",
    "BracketToken",
    "ComponentPartKind",
    "ComponentPartToken",
    "Cursor",
    "Lexed",
    "LiteralToken",
    "Token",
    "lex",
]

_OPENING = ord("[")
_CLOSING = ord("]")
_BACKSLASH = ord("\\")
_ASCII_WHITESPACE = frozenset(b" \t\n\x0c\r")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position in the description bytes.

    EOF is a state (``is_eof``), not a return value; ``advance`` returns a
    new cursor so a forgotten reassignment cannot loop forever.

    Example:
        >>> cursor = Cursor(memoryview(b"[day]"), 0)
        >>> chr(cursor.current), chr(cursor.advance().current)
        ('[', 'd')
    """

    source: memoryview
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> int:
        """Byte at the current position.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def location(self) -> Location:
        return Location(self.pos)

    def peek(self, offset: int = 0) -> int | None:
        """Byte at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> Cursor:
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> memoryview:
        """Zero-copy slice from the current position to ``end_pos``."""
        return self.source[self.pos : end_pos]


class BracketKind(StrEnum):
    OPENING = "opening"
    CLOSING = "closing"


class ComponentPartKind(StrEnum):
    WHITESPACE = "whitespace"
    NOT_WHITESPACE = "not_whitespace"


@dataclass(frozen=True, slots=True)
class LiteralToken:
    value: memoryview
    span: Span


@dataclass(frozen=True, slots=True)
class BracketToken:
    kind: BracketKind
    location: Location


@dataclass(frozen=True, slots=True)
class ComponentPartToken:
    kind: ComponentPartKind
    value: memoryview
    span: Span


type Token = LiteralToken | BracketToken | ComponentPartToken


class Lexed:
    """Token stream with the lookahead helpers the AST builder needs.

    Attributes:
        source: The description bytes, for diagnostics
        tokens: All tokens, in order
    """

    __slots__ = ("_index", "source", "tokens")

    def __init__(self, source: memoryview, tokens: list[Token]) -> None:
        self.source = source
        self.tokens = tokens
        self._index = 0

    def peek(self) -> Token | None:
        if self._index >= len(self.tokens):
            return None
        return self.tokens[self._index]

    def next(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self._index += 1
        return token

    def next_if_whitespace(self) -> ComponentPartToken | None:
        token = self.peek()
        if isinstance(token, ComponentPartToken) and token.kind is ComponentPartKind.WHITESPACE:
            self._index += 1
            return token
        return None

    def next_if_not_whitespace(self) -> ComponentPartToken | None:
        token = self.peek()
        if (
            isinstance(token, ComponentPartToken)
            and token.kind is ComponentPartKind.NOT_WHITESPACE
        ):
            self._index += 1
            return token
        return None

    def next_if_opening_bracket(self) -> Location | None:
        token = self.peek()
        if isinstance(token, BracketToken) and token.kind is BracketKind.OPENING:
            self._index += 1
            return token.location
        return None

    def peek_closing_bracket(self) -> Location | None:
        token = self.peek()
        if isinstance(token, BracketToken) and token.kind is BracketKind.CLOSING:
            return token.location
        return None

    def next_if_closing_bracket(self) -> Location | None:
        location = self.peek_closing_bracket()
        if location is not None:
            self._index += 1
        return location


def _lex_error(
    source: memoryview, code: DiagnosticCode, what: str, span: Span
) -> InvalidFormatDescriptionError:
    return description_error(
        ErrorTemplate.invalid_format_description(code, what, span.to_source_span(bytes(source)))
    )


def lex(source: memoryview, version: FormatDescriptionVersion) -> Lexed:
    """Tokenize a format description.

    Raises:
        InvalidFormatDescriptionError: Invalid or incomplete escape (V2)
    """
    tokens: list[Token] = []
    depth = 0
    cursor = Cursor(source, 0)

    while not cursor.is_eof:
        byte = cursor.current
        location = cursor.location

        if byte == _BACKSLASH and version >= FormatDescriptionVersion.V2:
            escaped = cursor.peek(1)
            if escaped is None:
                raise _lex_error(
                    source,
                    DiagnosticCode.DESCRIPTION_INVALID_ESCAPE,
                    "unexpected end of input after backslash",
                    location.to_self(),
                )
            if escaped not in (_BACKSLASH, _OPENING, _CLOSING):
                raise _lex_error(
                    source,
                    DiagnosticCode.DESCRIPTION_INVALID_ESCAPE,
                    "invalid escape sequence",
                    location.to(location.offset(1)),
                )
            value = cursor.advance().slice_to(cursor.pos + 2)
            span = location.to(location.offset(1))
            if depth == 0:
                tokens.append(LiteralToken(value, span))
            else:
                tokens.append(ComponentPartToken(ComponentPartKind.NOT_WHITESPACE, value, span))
            cursor = cursor.advance(2)

        elif byte == _OPENING:
            if version <= FormatDescriptionVersion.V1 and cursor.peek(1) == _OPENING:
                # Escaped bracket: two openings, depth unchanged.
                tokens.append(BracketToken(BracketKind.OPENING, location))
                tokens.append(BracketToken(BracketKind.OPENING, location.offset(1)))
                cursor = cursor.advance(2)
            else:
                depth += 1
                tokens.append(BracketToken(BracketKind.OPENING, location))
                cursor = cursor.advance()

        elif byte == _CLOSING and depth > 0:
            depth -= 1
            tokens.append(BracketToken(BracketKind.CLOSING, location))
            cursor = cursor.advance()

        elif depth == 0:
            end = cursor.advance()
            while not end.is_eof and end.current != _OPENING:
                if version >= FormatDescriptionVersion.V2 and end.current == _BACKSLASH:
                    break
                end = end.advance()
            tokens.append(
                LiteralToken(cursor.slice_to(end.pos), location.to(Location(end.pos - 1)))
            )
            cursor = end

        else:
            is_whitespace = byte in _ASCII_WHITESPACE
            end = cursor.advance()
            while (
                not end.is_eof
                and end.current not in (_BACKSLASH, _OPENING, _CLOSING)
                and (end.current in _ASCII_WHITESPACE) == is_whitespace
            ):
                end = end.advance()
            kind = (
                ComponentPartKind.WHITESPACE if is_whitespace else ComponentPartKind.NOT_WHITESPACE
            )
            tokens.append(
                ComponentPartToken(
                    kind, cursor.slice_to(end.pos), location.to(Location(end.pos - 1))
                )
            )
            cursor = end

    return Lexed(source, tokens)
