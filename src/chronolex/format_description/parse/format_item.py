"""Lowering from the AST to the FormatItem tree.

Interprets modifier values, fills in defaults (the component dataclass
defaults), and checks the rules that involve more than one modifier.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from chronolex.diagnostics import DiagnosticCode, ErrorTemplate, InvalidFormatDescriptionError

from .. import component
from ..component import Component, ComponentName
from ..format_item import Compound, First, FormatItem, Literal, Optional
from ..modifier import (
    MonthRepr,
    Padding,
    SubsecondDigits,
    UnixTimestampPrecision,
    WeekdayRepr,
    WeekNumberRepr,
    YearRange,
    YearRepr,
)
from .ast import (
    ComponentItem,
    EscapedBracket,
    FirstItem,
    Item,
    LiteralItem,
    OptionalItem,
)
from .location import Span, description_error

__all__ = ["lower"]

_IGNORE_COUNT_MAX = 65_535


def _boolean(value: str) -> bool:
    match value:
        case "true":
            return True
        case "false":
            return False
    raise ValueError(value)


def _choice(mapping: dict[str, Any]) -> Callable[[str], Any]:
    def convert(value: str) -> Any:
        return mapping[value]

    return convert


def _positive_count(value: str) -> int:
    if not value.isascii() or not value.isdigit():
        raise ValueError(value)
    count = int(value)
    if not 1 <= count <= _IGNORE_COUNT_MAX:
        raise ValueError(value)
    return count


_SIGN = _choice({"automatic": False, "mandatory": True})

# key -> (dataclass field, converter) per component.
_MODIFIERS: dict[ComponentName, dict[str, tuple[str, Callable[[str], Any]]]] = {
    ComponentName.DAY: {"padding": ("padding", Padding)},
    ComponentName.MONTH: {
        "padding": ("padding", Padding),
        "repr": ("repr", MonthRepr),
        "case_sensitive": ("case_sensitive", _boolean),
    },
    ComponentName.ORDINAL: {"padding": ("padding", Padding)},
    ComponentName.WEEKDAY: {
        "repr": ("repr", WeekdayRepr),
        "one_indexed": ("one_indexed", _boolean),
        "case_sensitive": ("case_sensitive", _boolean),
    },
    ComponentName.WEEK_NUMBER: {
        "padding": ("padding", Padding),
        "repr": ("repr", WeekNumberRepr),
    },
    ComponentName.YEAR: {
        "padding": ("padding", Padding),
        "repr": ("repr", YearRepr),
        "range": ("range", YearRange),
        "base": ("iso_week_based", _choice({"calendar": False, "iso_week": True})),
        "sign": ("sign_is_mandatory", _SIGN),
    },
    ComponentName.HOUR: {
        "padding": ("padding", Padding),
        "repr": ("is_12_hour_clock", _choice({"24": False, "12": True})),
    },
    ComponentName.MINUTE: {"padding": ("padding", Padding)},
    ComponentName.PERIOD: {
        "case": ("is_uppercase", _choice({"upper": True, "lower": False})),
        "case_sensitive": ("case_sensitive", _boolean),
    },
    ComponentName.SECOND: {"padding": ("padding", Padding)},
    ComponentName.SUBSECOND: {"digits": ("digits", SubsecondDigits)},
    ComponentName.OFFSET_HOUR: {
        "sign": ("sign_is_mandatory", _SIGN),
        "padding": ("padding", Padding),
    },
    ComponentName.OFFSET_MINUTE: {"padding": ("padding", Padding)},
    ComponentName.OFFSET_SECOND: {"padding": ("padding", Padding)},
    ComponentName.IGNORE: {"count": ("count", _positive_count)},
    ComponentName.UNIX_TIMESTAMP: {
        "precision": ("precision", UnixTimestampPrecision),
        "sign": ("sign_is_mandatory", _SIGN),
    },
    ComponentName.END: {},
}

_CLASSES: dict[ComponentName, type[Component]] = {
    ComponentName.DAY: component.Day,
    ComponentName.MONTH: component.Month,
    ComponentName.ORDINAL: component.Ordinal,
    ComponentName.WEEKDAY: component.Weekday,
    ComponentName.WEEK_NUMBER: component.WeekNumber,
    ComponentName.YEAR: component.Year,
    ComponentName.HOUR: component.Hour,
    ComponentName.MINUTE: component.Minute,
    ComponentName.PERIOD: component.Period,
    ComponentName.SECOND: component.Second,
    ComponentName.SUBSECOND: component.Subsecond,
    ComponentName.OFFSET_HOUR: component.OffsetHour,
    ComponentName.OFFSET_MINUTE: component.OffsetMinute,
    ComponentName.OFFSET_SECOND: component.OffsetSecond,
    ComponentName.IGNORE: component.Ignore,
    ComponentName.UNIX_TIMESTAMP: component.UnixTimestamp,
    ComponentName.END: component.End,
}


class _Lowering:
    __slots__ = ("_source",)

    def __init__(self, source: bytes) -> None:
        self._source = source

    def _error(self, code: DiagnosticCode, what: str, span: Span) -> InvalidFormatDescriptionError:
        return description_error(
            ErrorTemplate.invalid_format_description(
                code, what, span.to_source_span(self._source)
            )
        )

    def items(self, items: Sequence[Item]) -> list[FormatItem]:
        return [self.item(item) for item in items]

    def item(self, item: Item) -> FormatItem:
        match item:
            case LiteralItem(value=value):
                return Literal(value)
            case EscapedBracket():
                return Literal(b"[")
            case ComponentItem():
                return self.lower_component(item)
            case OptionalItem(nested=nested):
                return Optional(Compound(tuple(self.items(nested.items))))
            case FirstItem(nested=nested):
                return First(tuple(Compound(tuple(self.items(n.items))) for n in nested))

    def lower_component(self, item: ComponentItem) -> Component:
        name = item.name.value
        table = _MODIFIERS[name]
        kwargs: dict[str, Any] = {}
        for modifier in item.modifiers:
            field, convert = table[modifier.key.value]
            raw = modifier.value.value
            try:
                kwargs[field] = convert(raw.lower())
            except (KeyError, ValueError):
                raise description_error(
                    ErrorTemplate.invalid_modifier_value(
                        modifier.key.value,
                        raw,
                        modifier.value.span.to_source_span(self._source),
                    )
                ) from None

        match name:
            case ComponentName.IGNORE if "count" not in kwargs:
                raise self._error(
                    DiagnosticCode.DESCRIPTION_MISSING_MODIFIER,
                    "missing required modifier `count` for `ignore`",
                    item.name.span,
                )
            case ComponentName.YEAR if (
                kwargs.get("repr") is YearRepr.LAST_TWO and kwargs.get("sign_is_mandatory")
            ):
                raise self._error(
                    DiagnosticCode.DESCRIPTION_CONFLICTING_MODIFIERS,
                    "`repr:last_two` cannot be combined with `sign:mandatory`",
                    item.span,
                )
        return _CLASSES[name](**kwargs)


def lower(items: Sequence[Item], source: bytes) -> Compound:
    """Lower a top-level AST into one Compound item.

    Raises:
        InvalidFormatDescriptionError: Unknown modifier value, missing
            ``count`` on ``ignore``, or conflicting year modifiers
    """
    return Compound(tuple(_Lowering(source).items(items)))
