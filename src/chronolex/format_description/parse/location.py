"""Byte locations and spans inside a format description.

These exist only to point diagnostics at the right place; they are turned
into a public SourceSpan (with line and column) when an error is raised.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronolex.diagnostics import Diagnostic, InvalidFormatDescriptionError, SourceSpan

__all__ = ["Location", "Span", "Spanned", "compute_line_col", "description_error"]


def compute_line_col(source: bytes, pos: int) -> tuple[int, int]:
    """Compute line and column for a byte position.

    Returns:
        (line, column) tuple (1-indexed, like text editors)

    Performance:
        O(n) where n = pos. Only called for error reporting.

    Example:
        >>> compute_line_col(b"line1\\nline2", 8)
        (2, 3)
    """
    pos = min(pos, len(source))
    line = source.count(b"\n", 0, pos) + 1
    last_newline = source.rfind(b"\n", 0, pos)
    col = pos - last_newline if last_newline >= 0 else pos + 1
    return line, col


@dataclass(frozen=True, slots=True)
class Location:
    """Zero-indexed byte offset into the description."""

    byte: int

    def to(self, end: Location) -> Span:
        return Span(self, end)

    def to_self(self) -> Span:
        return Span(self, self)

    def offset(self, amount: int) -> Location:
        return Location(self.byte + amount)


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive range of bytes, ``start`` through ``end``."""

    start: Location
    end: Location

    def shrink_to_start(self) -> Span:
        return Span(self.start, self.start)

    def shrink_to_end(self) -> Span:
        return Span(self.end, self.end)

    def shrink_to_before(self, pos: int) -> Span:
        """Span ending just before byte ``pos`` of this span."""
        return Span(self.start, Location(self.start.byte + pos - 1))

    def shrink_to_after(self, pos: int) -> Span:
        """Span starting just after byte ``pos`` of this span."""
        return Span(Location(self.start.byte + pos + 1), self.end)

    def to_source_span(self, source: bytes) -> SourceSpan:
        line, column = compute_line_col(source, self.start.byte)
        end = max(self.end.byte + 1, self.start.byte)
        return SourceSpan(start=self.start.byte, end=end, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Spanned[T]:
    """A value together with where it appeared in the description."""

    value: T
    span: Span


def description_error(diagnostic: Diagnostic) -> InvalidFormatDescriptionError:
    """Wrap a diagnostic in the exception raised for bad descriptions.

    Returned rather than raised so call sites read ``raise description_error(...)``
    and type checkers see the control flow end.
    """
    return InvalidFormatDescriptionError(diagnostic)
