"""The compiled format-item tree.

A FormatItem is one of:

    Literal   - bytes rendered verbatim, matched exactly when parsing
    Component - one field (see ``component``)
    Compound  - a sequence of items, concatenated
    Optional  - an item that parsing may skip; formatting always renders it
    First     - alternatives; parsing takes the first that matches,
                formatting renders the first

Trees come in two flavours sharing these classes. A borrowed tree holds
Literal values as ``memoryview`` slices of the format description it was
compiled from, so no literal text is copied. An owned tree holds ``bytes``
and is independent of its source; ``to_owned()`` converts. Both flavours
compare equal when their contents match.

Trees are immutable and may be shared between threads.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .component import Component

__all__ = [
    "Compound",
    "First",
    "FormatItem",
    "Literal",
    "Optional",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Bytes rendered verbatim."""

    value: bytes | memoryview

    @property
    def is_owned(self) -> bool:
        return isinstance(self.value, bytes)

    def to_owned(self) -> Literal:
        if isinstance(self.value, bytes):
            return self
        return Literal(self.value.tobytes())

    def __repr__(self) -> str:
        return f"Literal({bytes(self.value)!r})"


@dataclass(frozen=True, slots=True)
class Compound:
    """Items rendered (and parsed) one after another."""

    items: tuple[FormatItem, ...]

    @property
    def is_owned(self) -> bool:
        return all(_is_owned(item) for item in self.items)

    def to_owned(self) -> Compound:
        return Compound(tuple(item.to_owned() for item in self.items))

    def __iter__(self) -> Iterator[FormatItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class Optional:
    """An item that parsing may skip when it does not match."""

    item: FormatItem

    @property
    def is_owned(self) -> bool:
        return _is_owned(self.item)

    def to_owned(self) -> Optional:
        return Optional(self.item.to_owned())


@dataclass(frozen=True, slots=True)
class First:
    """Alternatives tried in order when parsing; the first is used for formatting."""

    items: tuple[FormatItem, ...]

    @property
    def is_owned(self) -> bool:
        return all(_is_owned(item) for item in self.items)

    def to_owned(self) -> First:
        return First(tuple(item.to_owned() for item in self.items))


type FormatItem = Literal | Component | Compound | Optional | First


def _is_owned(item: FormatItem) -> bool:
    if isinstance(item, Component):
        return True
    return item.is_owned
