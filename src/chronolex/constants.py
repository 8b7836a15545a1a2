"""Shared constants for chronolex.

This module provides centralized configuration constants used across
the date engine and the format-description engine. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Year range: Representable years, optionally widened via the environment
- Depth limits: Recursion protection for nested format descriptions
- Input limits: Size constraints on format-description source text
- Cache limits: Memory bounds for compiled format descriptions

Python 3.13+.
"""

import os

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Year range
    "LARGE_DATES",
    "MIN_YEAR",
    "MAX_YEAR",
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_FORMAT_DESCRIPTION_SIZE",
    # Cache limits
    "FORMAT_DESCRIPTION_CACHE_SIZE",
]

# ============================================================================
# YEAR RANGE
# ============================================================================
#
# By default years between -9999 and 9999 inclusive are representable. Setting
# CHRONOLEX_LARGE_DATES=1 before the first import widens this to +-999,999.
# The wider range changes how signed years are parsed (up to six digits once a
# sign is present) and how full years are formatted (a "+" is shown once the
# year reaches five digits).
#
# The flag is read exactly once, at import time. Flipping it afterwards has no
# effect on Date.MIN / Date.MAX, which are computed from these values.

_LARGE_DATES_ENV: str = "CHRONOLEX_LARGE_DATES"

LARGE_DATES: bool = os.environ.get(_LARGE_DATES_ENV, "").strip().lower() in ("1", "true", "yes")

MIN_YEAR: int = -999_999 if LARGE_DATES else -9999
MAX_YEAR: int = 999_999 if LARGE_DATES else 9999

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of [optional [...]] and [first [...]] blocks.
# Legitimate descriptions nest one or two levels; deeper than 32 is malformed.
MAX_DEPTH: int = 32

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size of a format description in bytes (64 KiB).
# Format descriptions are short by nature; anything larger is rejected early.
MAX_FORMAT_DESCRIPTION_SIZE: int = 64 * 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached owned format descriptions (parse_owned / parse_strftime_owned).
# 256 covers every distinct description a typical application uses.
FORMAT_DESCRIPTION_CACHE_SIZE: int = 256
