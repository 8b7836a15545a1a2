"""Small parser combinators over byte input.

A parser takes the remaining input (a ``memoryview``) and returns either
None (no match) or a ParsedItem holding the value and the input left after
it. Parsers never raise on bad input; callers decide whether a non-match is
fatal.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from chronolex.format_description.modifier import Padding

__all__ = [
    "ParsedItem",
    "Parser",
    "any_digit",
    "ascii_char",
    "exactly_n_digits",
    "exactly_n_digits_padded",
    "first_match",
    "n_to_m_digits",
    "n_to_m_digits_padded",
    "opt",
    "sign",
]

_ZERO = ord("0")
_NINE = ord("9")
_SPACE = ord(" ")
_PLUS = ord("+")
_MINUS = ord("-")


@dataclass(frozen=True, slots=True)
class ParsedItem[T]:
    """A parsed value and the input remaining after it."""

    remaining: memoryview
    value: T

    def map[U](self, f: Callable[[T], U]) -> ParsedItem[U]:
        return ParsedItem(self.remaining, f(self.value))

    def flat_map[U](self, f: Callable[[T], U | None]) -> ParsedItem[U] | None:
        value = f(self.value)
        if value is None:
            return None
        return ParsedItem(self.remaining, value)


type Parser[T] = Callable[[memoryview], ParsedItem[T] | None]


def _is_digit(byte: int) -> bool:
    return _ZERO <= byte <= _NINE


def ascii_char(char: int) -> Parser[None]:
    """Match one exact byte."""

    def parse(data: memoryview) -> ParsedItem[None] | None:
        if len(data) > 0 and data[0] == char:
            return ParsedItem(data[1:], None)
        return None

    return parse


def sign(data: memoryview) -> ParsedItem[int] | None:
    """Match ``+`` or ``-``; the value is the sign byte."""
    if len(data) > 0 and data[0] in (_PLUS, _MINUS):
        return ParsedItem(data[1:], data[0])
    return None


def opt[T](parser: Parser[T]) -> Callable[[memoryview], ParsedItem[T | None]]:
    """Make ``parser`` optional; a non-match yields None and consumes nothing."""

    def parse(data: memoryview) -> ParsedItem[T | None]:
        item = parser(data)
        if item is None:
            return ParsedItem(data, None)
        return ParsedItem(item.remaining, item.value)

    return parse


def any_digit(data: memoryview) -> ParsedItem[int] | None:
    """Match one ASCII digit; the value is the digit byte."""
    if len(data) > 0 and _is_digit(data[0]):
        return ParsedItem(data[1:], data[0])
    return None


def n_to_m_digits(n: int, m: int) -> Parser[int]:
    """Match at least ``n`` and at most ``m`` ASCII digits."""

    def parse(data: memoryview) -> ParsedItem[int] | None:
        count = 0
        limit = min(m, len(data))
        while count < limit and _is_digit(data[count]):
            count += 1
        if count < n:
            return None
        return ParsedItem(data[count:], int(bytes(data[:count])))

    return parse


def exactly_n_digits(n: int) -> Parser[int]:
    return n_to_m_digits(n, n)


def _leading_spaces(data: memoryview, limit: int) -> int:
    count = 0
    while count < limit and count < len(data) and data[count] == _SPACE:
        count += 1
    return count


def n_to_m_digits_padded(n: int, m: int, padding: Padding) -> Parser[int]:
    """Match between ``n`` and ``m`` digits under a padding policy.

    ``Padding.SPACE`` allows up to ``n - 1`` leading spaces, each counting
    toward the width; ``Padding.NONE`` accepts 1 to ``m`` digits.
    """

    def parse(data: memoryview) -> ParsedItem[int] | None:
        match padding:
            case Padding.NONE:
                return n_to_m_digits(1, m)(data)
            case Padding.SPACE:
                pad = _leading_spaces(data, n - 1)
                return n_to_m_digits(n - pad, m - pad)(data[pad:])
            case _:
                return n_to_m_digits(n, m)(data)

    return parse


def exactly_n_digits_padded(n: int, padding: Padding) -> Parser[int]:
    return n_to_m_digits_padded(n, n, padding)


def first_match[T](
    options: Sequence[tuple[bytes, T]], *, case_sensitive: bool
) -> Parser[T]:
    """Match the first ``(expected, value)`` whose bytes prefix the input.

    Case-insensitive comparison folds ASCII letters only.
    """

    def parse(data: memoryview) -> ParsedItem[T] | None:
        for expected, value in options:
            size = len(expected)
            if len(data) < size:
                continue
            candidate = bytes(data[:size])
            if candidate == expected or (
                not case_sensitive and candidate.lower() == expected.lower()
            ):
                return ParsedItem(data[size:], value)
        return None

    return parse
