"""Depth limiting for nested format descriptions.

``[optional [...]]`` and ``[first [...] [...]]`` nest arbitrarily in the
source grammar and the AST builder recurses once per level. Bounding that
recursion at compile time also bounds every later walk over the compiled
tree (formatting, parsing, ``to_owned``).

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from chronolex.constants import MAX_DEPTH
from chronolex.diagnostics import ErrorTemplate, InvalidFormatDescriptionError, SourceSpan

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Interpreter frames spent per nesting level (rule call, helper, comprehension).
_FRAMES_PER_LEVEL = 4


@dataclass(slots=True)
class DepthGuard:
    """Counts nested blocks and rejects the one that goes too deep.

    Usage:
        guard = DepthGuard()
        with guard.at(span):
            items = self._parse_nested(...)

    Attributes:
        max_depth: Deepest level accepted, clamped to what the interpreter stack allows
        depth: Number of blocks currently entered
        span: Location of the block being entered, reported on failure
    """

    max_depth: int = MAX_DEPTH
    depth: int = field(default=0, init=False)
    span: SourceSpan | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def at(self, span: SourceSpan | None) -> DepthGuard:
        """Point failures at ``span``; use as ``with guard.at(span):``."""
        self.span = span
        return self

    def __enter__(self) -> DepthGuard:
        # __exit__ does not run when __enter__ raises; check before counting.
        if self.depth >= self.max_depth:
            raise InvalidFormatDescriptionError(
                ErrorTemplate.nesting_depth_exceeded(self.max_depth, self.span)
            )
        self.depth += 1
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.depth -= 1


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower ``requested_depth`` to what the recursion limit can serve.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Frames kept free for the caller's own stack

    Returns:
        ``requested_depth``, or the largest safe depth when that is smaller
    """
    limit = sys.getrecursionlimit()
    safe_depth = (limit - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth <= safe_depth:
        return requested_depth
    logger.warning(
        "Nesting depth %d needs more than the recursion limit %d allows. Clamping to %d.",
        requested_depth,
        limit,
        safe_depth,
    )
    return safe_depth
