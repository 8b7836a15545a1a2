"""AST builder for bracketed format descriptions.

Consumes the lexer's token stream and produces a flat list of items:

    LiteralItem     - literal text
    EscapedBracket  - ``[[`` in version 1
    ComponentItem   - ``[name key:value ...]`` with a validated name and keys
    OptionalItem    - ``[optional [...]]``
    FirstItem       - ``[first [...] [...] ...]``

Component names and modifier keys are checked here, against the table in
``component.MODIFIER_KEYS``; modifier values are interpreted later by the
lowering pass, which owns the knowledge of what each value means.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronolex.core.depth_guard import DepthGuard
from chronolex.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    InvalidFormatDescriptionError,
)

from ..component import MODIFIER_KEYS, ComponentName
from ..version import FormatDescriptionVersion
from .lexer import (
    BracketKind,
    BracketToken,
    ComponentPartToken,
    Lexed,
    LiteralToken,
)
from .location import Location, Span, Spanned, description_error

__all__ = [
    "ComponentItem",
    "EscapedBracket",
    "FirstItem",
    "Item",
    "LiteralItem",
    "Modifier",
    "NestedFormatDescription",
    "OptionalItem",
    "parse",
]


@dataclass(frozen=True, slots=True)
class LiteralItem:
    value: memoryview
    span: Span


@dataclass(frozen=True, slots=True)
class EscapedBracket:
    span: Span


@dataclass(frozen=True, slots=True)
class Modifier:
    """``key:value`` with the key lowercased and the value as written."""

    key: Spanned[str]
    value: Spanned[str]


@dataclass(frozen=True, slots=True)
class ComponentItem:
    name: Spanned[ComponentName]
    modifiers: tuple[Modifier, ...]
    span: Span


@dataclass(frozen=True, slots=True)
class NestedFormatDescription:
    items: tuple[Item, ...]
    span: Span


@dataclass(frozen=True, slots=True)
class OptionalItem:
    nested: NestedFormatDescription
    span: Span


@dataclass(frozen=True, slots=True)
class FirstItem:
    nested: tuple[NestedFormatDescription, ...]
    span: Span


type Item = LiteralItem | EscapedBracket | ComponentItem | OptionalItem | FirstItem


class _AstBuilder:
    """Recursive-descent builder over a Lexed token stream."""

    __slots__ = ("_guard", "_source", "_tokens", "_version")

    def __init__(self, tokens: Lexed, version: FormatDescriptionVersion) -> None:
        self._tokens = tokens
        self._version = version
        self._source = bytes(tokens.source)
        self._guard = DepthGuard()

    # Errors -------------------------------------------------------------

    def _error(self, code: DiagnosticCode, what: str, span: Span) -> InvalidFormatDescriptionError:
        return description_error(
            ErrorTemplate.invalid_format_description(
                code, what, span.to_source_span(self._source)
            )
        )

    def _error_from(self, diagnostic: Diagnostic) -> InvalidFormatDescriptionError:
        return description_error(diagnostic)

    def _unclosed(self, opening: Location) -> InvalidFormatDescriptionError:
        return self._error(
            DiagnosticCode.DESCRIPTION_UNCLOSED_BRACKET, "unclosed bracket", opening.to_self()
        )

    # Grammar ------------------------------------------------------------

    def parse_inner(self, *, nested: bool) -> list[Item]:
        items: list[Item] = []
        tokens = self._tokens
        while True:
            if nested and tokens.peek_closing_bracket() is not None:
                return items
            token = tokens.next()
            match token:
                case None:
                    return items
                case LiteralToken(value=value, span=span):
                    items.append(LiteralItem(value, span))
                case BracketToken(kind=BracketKind.OPENING, location=location):
                    second = None
                    if self._version <= FormatDescriptionVersion.V1:
                        second = tokens.next_if_opening_bracket()
                    if second is not None:
                        items.append(EscapedBracket(location.to(second)))
                    else:
                        items.append(self.parse_component(location))
                case BracketToken(location=location):
                    raise self._error(
                        DiagnosticCode.DESCRIPTION_UNEXPECTED_CLOSING_BRACKET,
                        "unexpected closing bracket",
                        location.to_self(),
                    )
                case ComponentPartToken(value=value, span=span):
                    # Text between nested components is literal.
                    items.append(LiteralItem(value, span))

    def parse_component(self, opening: Location) -> Item:
        tokens = self._tokens
        leading_whitespace = tokens.next_if_whitespace()
        if leading_whitespace is not None and self._version >= FormatDescriptionVersion.V2:
            raise self._error(
                DiagnosticCode.DESCRIPTION_UNEXPECTED_WHITESPACE,
                "unexpected whitespace",
                leading_whitespace.span,
            )

        name = tokens.next_if_not_whitespace()
        if name is None:
            span = leading_whitespace.span if leading_whitespace else opening.to_self()
            raise self._error(
                DiagnosticCode.DESCRIPTION_MISSING_COMPONENT_NAME,
                "expected component name",
                span,
            )
        name_bytes = bytes(name.value)

        if name_bytes in (b"optional", b"first"):
            keyword = name_bytes.decode()
            whitespace = tokens.next_if_whitespace()
            if whitespace is None:
                raise self._error(
                    DiagnosticCode.DESCRIPTION_EXPECTED_NESTED,
                    f"expected whitespace after `{keyword}`",
                    name.span.shrink_to_end(),
                )
            with self._guard.at(opening.to_self().to_source_span(self._source)):
                if keyword == "optional":
                    nested = self.parse_nested(whitespace.span.end)
                    closing = tokens.next_if_closing_bracket()
                    if closing is None:
                        raise self._unclosed(opening)
                    return OptionalItem(nested, opening.to(closing))

                alternatives = [self.parse_nested(whitespace.span.end)]
                while (token := tokens.peek()) is not None and (
                    isinstance(token, BracketToken) and token.kind is BracketKind.OPENING
                ):
                    alternatives.append(self.parse_nested(whitespace.span.end))
                closing = tokens.next_if_closing_bracket()
                if closing is None:
                    raise self._unclosed(opening)
                return FirstItem(tuple(alternatives), opening.to(closing))

        try:
            component_name = ComponentName(name_bytes.decode())
        except (UnicodeDecodeError, ValueError):
            raise self._error_from(
                ErrorTemplate.invalid_component_name(
                    name_bytes.decode(errors="replace"),
                    name.span.to_source_span(self._source),
                )
            ) from None

        modifiers = self._parse_modifiers(component_name)

        closing = tokens.next_if_closing_bracket()
        if closing is None:
            raise self._unclosed(opening)
        return ComponentItem(
            Spanned(component_name, name.span), tuple(modifiers), opening.to(closing)
        )

    def _parse_modifiers(self, component_name: ComponentName) -> list[Modifier]:
        tokens = self._tokens
        allowed = MODIFIER_KEYS[component_name]
        modifiers: list[Modifier] = []
        seen: set[str] = set()

        while tokens.next_if_whitespace() is not None:
            location = tokens.next_if_opening_bracket()
            if location is not None:
                raise self._error(
                    DiagnosticCode.DESCRIPTION_MALFORMED_MODIFIER,
                    "modifier must be of the form `key:value`",
                    location.to_self(),
                )

            part = tokens.next_if_not_whitespace()
            if part is None:
                break

            text = bytes(part.value)
            span = part.span
            colon_index = text.find(b":")
            if colon_index < 0:
                raise self._error(
                    DiagnosticCode.DESCRIPTION_MALFORMED_MODIFIER,
                    "modifier must be of the form `key:value`",
                    span,
                )
            key_bytes, value_bytes = text[:colon_index], text[colon_index + 1 :]
            if not key_bytes:
                raise self._error(
                    DiagnosticCode.DESCRIPTION_MALFORMED_MODIFIER,
                    "expected modifier key",
                    span.shrink_to_start(),
                )
            if not value_bytes:
                raise self._error(
                    DiagnosticCode.DESCRIPTION_MALFORMED_MODIFIER,
                    "expected modifier value",
                    span.shrink_to_end(),
                )

            key_span = span.shrink_to_before(colon_index)
            key = key_bytes.decode(errors="replace").lower()
            if key not in allowed:
                raise self._error_from(
                    ErrorTemplate.unknown_modifier(
                        component_name, key, key_span.to_source_span(self._source)
                    )
                )
            if key in seen:
                raise self._error_from(
                    ErrorTemplate.duplicate_modifier(key, key_span.to_source_span(self._source))
                )
            seen.add(key)
            modifiers.append(
                Modifier(
                    Spanned(key, key_span),
                    Spanned(
                        value_bytes.decode(errors="replace"), span.shrink_to_after(colon_index)
                    ),
                )
            )
        return modifiers

    def parse_nested(self, last_location: Location) -> NestedFormatDescription:
        tokens = self._tokens
        opening = tokens.next_if_opening_bracket()
        if opening is None:
            raise self._error(
                DiagnosticCode.DESCRIPTION_EXPECTED_NESTED,
                "expected opening bracket",
                last_location.to_self(),
            )
        items = self.parse_inner(nested=True)
        closing = tokens.next_if_closing_bracket()
        if closing is None:
            raise self._unclosed(opening)
        tokens.next_if_whitespace()
        return NestedFormatDescription(tuple(items), opening.to(closing))


def parse(tokens: Lexed, version: FormatDescriptionVersion) -> list[Item]:
    """Build the AST for a whole description.

    Raises:
        InvalidFormatDescriptionError: Unclosed brackets, unknown component
            names, malformed/unknown/duplicate modifier keys, misplaced
            whitespace (V2), or nesting beyond MAX_DEPTH
    """
    return _AstBuilder(tokens, version).parse_inner(nested=False)
