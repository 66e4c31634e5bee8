"""Babel compatibility layer for lazy Babel imports.

Provides centralized, lazy import infrastructure for Babel so that importing
the engine never pulls in Babel's CLDR data. The formatting and parsing
engine reads only the CLDR-shaped tree it is given; Babel is touched solely
by the locale-data builder in intlengine.data.loading.

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel import Locale

    # At function call site (for runtime use):
    from intlengine.core.babel_compat import get_locale_class

    def build(culture: str) -> None:
        Locale = get_locale_class()  # Raises BabelImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        from intlengine.diagnostics import ErrorTemplate  # noqa: PLC0415 - circular

        self.diagnostic = ErrorTemplate.babel_unavailable(feature)
        super().__init__(self.diagnostic.format_error())
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
