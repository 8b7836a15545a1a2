"""Parse text against compiled format descriptions.

Public API:
    parse_value - match a whole input against a description, returning Parsed
    Parsed      - accumulated fields and their assembly into values

The component parsers and combinators are importable from their modules for
callers building their own descriptions.

Python 3.13+.
"""

import logging

from chronolex.diagnostics import ErrorTemplate, ParseErrorKind, ParseFailedError
from chronolex.format_description import FormatDescriptionVersion, FormatItem, parse_owned

from .parsed import Parsed

__all__ = ["Parsed", "parse_value"]

logger = logging.getLogger(__name__)


def parse_value(text: str | bytes, description: FormatItem | str) -> Parsed:
    """Parse all of ``text`` against ``description``.

    Args:
        text: Input; ``str`` is encoded as UTF-8
        description: Compiled tree, or version 1 source text

    Returns:
        The fields that were parsed; call ``to_date()`` etc. to assemble

    Raises:
        ParseFailedError: A literal or component did not match, or input
            remains after the description is exhausted
        InvalidFormatDescriptionError: ``description`` is text that does not compile

    Example:
        >>> parse_value("2020-01-02", "[year]-[month]-[day]").to_date()
        Date(2020-01-02)
    """
    if isinstance(description, str):
        description = parse_owned(description, FormatDescriptionVersion.V1)
    data = text.encode() if isinstance(text, str) else text

    parsed = Parsed()
    consumed = parsed.parse_item(data, description)
    if consumed != len(data):
        logger.debug("Parse stopped at byte %d of %d", consumed, len(data))
        raise ParseFailedError(
            ErrorTemplate.parse_unexpected_trailing_characters(consumed),
            kind=ParseErrorKind.UNEXPECTED_TRAILING_CHARACTERS,
            position=consumed,
            input_value=data.decode(errors="replace"),
        )
    return parsed
