"""Shared constants for IntlEngine.

This module provides centralized configuration constants used across
the core, runtime, and parsing packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Defaults: Culture and currency used when callers supply none
- Digit limits: Valid ranges for fraction and significant digit options
- Cache limits: Memory bounds for caching subsystems
- Input limits: Bounded work for untrusted parse input

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_CULTURE",
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_NUMBERING_SYSTEM",
    "DEFAULT_CALENDAR",
    "BASIC_PATTERNS",
    # Digit limits
    "FRACTION_DIGIT_RANGE",
    "SIGNIFICANT_DIGIT_RANGE",
    # Cache limits
    "MAX_CONTEXT_CACHE_SIZE",
    "MAX_COMPILED_CACHE_SIZE",
    # Input limits
    "MAX_PARSE_INPUT_LENGTH",
    # Pattern literals
    "PIVOT_PATTERN",
    "NOT_APPLICABLE_PATTERN",
    "HOUR_ONLY_OFFSET_PATTERN",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# Culture used when the caller does not name one.
DEFAULT_CULTURE: str = "en-US"

# ISO 4217 code used for currency skeletons when no currency is given.
DEFAULT_CURRENCY_CODE: str = "USD"

# Placeholder symbol used inside resolved currency patterns before the real
# symbol is substituted, and the last-resort symbol for unknown currencies.
DEFAULT_CURRENCY_SYMBOL: str = "$"

DEFAULT_NUMBERING_SYSTEM: str = "latn"

DEFAULT_CALENDAR: str = "gregorian"

# Date skeletons resolved through {type}Formats rather than availableFormats.
BASIC_PATTERNS: tuple[str, ...] = ("short", "medium", "long", "full")

# ============================================================================
# DIGIT LIMITS
# ============================================================================

# Inclusive bounds accepted for minimum/maximum fraction digits.
FRACTION_DIGIT_RANGE: tuple[int, int] = (0, 20)

# Inclusive bounds accepted for minimum/maximum significant digits.
SIGNIFICANT_DIGIT_RANGE: tuple[int, int] = (1, 21)

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached IntlContext instances.
MAX_CONTEXT_CACHE_SIZE: int = 128

# Maximum cached compiled format/parse closures per closure kind.
# Keyed by (culture, options, snapshot); 512 covers typical UI grids with
# a handful of column formats across a few cultures.
MAX_COMPILED_CACHE_SIZE: int = 512

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Parse inputs longer than this are rejected without running the regex.
# Localized dates and numbers never approach this length.
MAX_PARSE_INPUT_LENGTH: int = 1000

# ============================================================================
# PATTERN LITERALS
# ============================================================================

# Pivot-table pattern that renders values in rounded millions.
PIVOT_PATTERN: str = "#,###,,;(#,###,,)"

# Custom pattern that always renders as itself.
NOT_APPLICABLE_PATTERN: str = "N/A"

# Offset template used for short (z, zz, zzz) timezone fields.
HOUR_ONLY_OFFSET_PATTERN: str = "+H;-H"
