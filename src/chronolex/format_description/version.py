"""Format-description language versions.

Python 3.13+.
"""

from enum import IntEnum

__all__ = ["FormatDescriptionVersion"]


class FormatDescriptionVersion(IntEnum):
    """Grammar version of a bracketed format description.

    V1 escapes a literal ``[`` as ``[[`` and tolerates whitespace after an
    opening bracket. V2 uses backslash escapes (``\\[``, ``\\]``, ``\\\\``)
    and rejects whitespace after an opening bracket. New code should use V2.
    """

    V1 = 1
    V2 = 2
