"""Compile format descriptions into FormatItem trees.

Two source languages are supported:

    Bracketed   - ``[year]-[month]-[day]``, versions 1 and 2
    strftime    - ``%Y-%m-%d``

The borrowed entry points return trees whose literals are ``memoryview``
slices of the source; the owned entry points copy literals into ``bytes``
and memoize the compiled tree by description.

Pipeline (bracketed): lex -> AST -> lowering. Each stage raises
InvalidFormatDescriptionError with a diagnostic pointing at the source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging

from chronolex.constants import FORMAT_DESCRIPTION_CACHE_SIZE, MAX_FORMAT_DESCRIPTION_SIZE
from chronolex.diagnostics import DiagnosticCode, ErrorTemplate

from ..format_item import Compound
from ..version import FormatDescriptionVersion
from .ast import parse as _build_ast
from .format_item import lower
from .lexer import lex
from .location import Location, description_error
from .strftime import parse_strftime

__all__ = [
    "parse",
    "parse_borrowed",
    "parse_owned",
    "parse_strftime_borrowed",
    "parse_strftime_owned",
]

logger = logging.getLogger(__name__)


def _source_bytes(description: str | bytes) -> memoryview:
    source = description.encode() if isinstance(description, str) else description
    if len(source) > MAX_FORMAT_DESCRIPTION_SIZE:
        raise description_error(
            ErrorTemplate.invalid_format_description(
                DiagnosticCode.DESCRIPTION_SOURCE_TOO_LARGE,
                f"format description is {len(source)} bytes, limit is "
                f"{MAX_FORMAT_DESCRIPTION_SIZE}",
                Location(0).to_self().to_source_span(source),
            )
        )
    return memoryview(source)


def parse_borrowed(
    description: str | bytes,
    version: FormatDescriptionVersion | int = FormatDescriptionVersion.V2,
) -> Compound:
    """Compile a bracketed description, borrowing literal text.

    Args:
        description: Format description source
        version: Grammar version (1 or 2)

    Returns:
        Compound whose Literal values are memoryview slices of the source

    Raises:
        InvalidFormatDescriptionError: Malformed description
        ValueError: Unknown version

    Example:
        >>> parse_borrowed("[year]-[month]").items[1]
        Literal(b'-')
    """
    version = FormatDescriptionVersion(version)
    source = _source_bytes(description)
    logger.debug("Compiling format description (v%d, %d bytes)", version, len(source))
    tokens = lex(source, version)
    ast = _build_ast(tokens, version)
    return lower(ast, bytes(source))


def parse(description: str | bytes) -> Compound:
    """Compile a version 1 description (borrowed)."""
    return parse_borrowed(description, FormatDescriptionVersion.V1)


@functools.lru_cache(maxsize=FORMAT_DESCRIPTION_CACHE_SIZE)
def parse_owned(
    description: str | bytes,
    version: FormatDescriptionVersion | int = FormatDescriptionVersion.V2,
) -> Compound:
    """Compile a bracketed description into an owned tree.

    Results are memoized; the returned tree is immutable and safe to share.

    Raises:
        InvalidFormatDescriptionError: Malformed description
        ValueError: Unknown version
    """
    return parse_borrowed(description, version).to_owned()


def parse_strftime_borrowed(description: str | bytes) -> Compound:
    """Compile a strftime description, borrowing literal text.

    Raises:
        InvalidFormatDescriptionError: Unsupported or malformed directive
    """
    source = _source_bytes(description)
    logger.debug("Compiling strftime description (%d bytes)", len(source))
    return parse_strftime(source)


@functools.lru_cache(maxsize=FORMAT_DESCRIPTION_CACHE_SIZE)
def parse_strftime_owned(description: str | bytes) -> Compound:
    """Compile a strftime description into an owned, memoized tree.

    Raises:
        InvalidFormatDescriptionError: Unsupported or malformed directive
    """
    return parse_strftime_borrowed(description).to_owned()
