"""IntlEngine - CLDR-driven date and number formatting and parsing.

Compiles culture-specific date and number patterns into reusable
formatter and parser closures, driven by an immutable CLDR-shaped locale
data snapshot. Supports the Hijri calendar and non-Latin numbering systems.

Public API:
    IntlContext - Culture-bound formatting and parsing with cached closures
    DateFormatOptions / NumberFormatOptions - Explicit option structs
    LocaleData / LocaleDataStore - Immutable locale data snapshots
    load_babel_locale_data - Build locale data from Babel's CLDR tables
    format_date, parse_date, format_number, parse_number - One-shot helpers

Exceptions:
    IntlError - Base exception class
    ConfigurationError - Unresolvable patterns, unknown cultures
    ValidationError - Invalid option values

Submodules:
    intlengine.core - Options, Hijri conversion, pattern resolution
    intlengine.runtime - Formatter compilation and IntlContext
    intlengine.parsing - Parser compilation and result guards
    intlengine.data - Locale data snapshots and Babel loading
    intlengine.diagnostics - Diagnostic codes, templates and formatting
"""

from .core import DateFormatOptions, NumberFormatOptions
from .data import LocaleData, LocaleDataStore, load_babel_locale_data
from .diagnostics import ConfigurationError, IntlError, ValidationError
from .parsing import is_valid_date, is_valid_number
from .runtime import IntlContext
from .runtime.context import (
    format_date,
    format_number,
    get_date_pattern,
    get_number_pattern,
    parse_date,
    parse_number,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intlengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "DateFormatOptions",
    "IntlContext",
    "IntlError",
    "LocaleData",
    "LocaleDataStore",
    "NumberFormatOptions",
    "ValidationError",
    "__version__",
    "format_date",
    "format_number",
    "get_date_pattern",
    "get_number_pattern",
    "is_valid_date",
    "is_valid_number",
    "load_babel_locale_data",
    "parse_date",
    "parse_number",
]
