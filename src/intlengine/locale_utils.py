"""Locale utilities for culture-name handling.

Cultures are carried through the engine in their BCP-47 spelling ("en-US"),
which is also the key of the locale data tree. Babel wants POSIX spelling
("en_US"); conversion happens only at the Babel boundary.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_region",
    "is_english_title_case_culture",
    "keeps_designator_case",
    "normalize_culture",
    "normalize_locale",
]

_TITLE_CASE_MONTH_CULTURES = frozenset({"en", "en-GB", "en-US"})
_US_ENGLISH_CULTURES = frozenset({"en-US", "en-MH", "en-MP"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def normalize_culture(culture: str) -> str:
    """Convert a POSIX locale code to the BCP-47 form used as a data-tree key.

    Example:
        >>> normalize_culture("de_CH")
        'de-CH'
    """
    return culture.strip().replace("_", "-")


def get_region(culture: str) -> str:
    """Return the region key used for week-data lookup.

    The "en-" language prefix is stripped, then the first two letters are
    upper-cased so the result matches CLDR territory keys.

    Example:
        >>> get_region("en-GB")
        'GB'
        >>> get_region("de")
        'DE'
    """
    if culture.startswith("en-"):
        culture = culture[3:]
    return culture[:2].upper() + culture[2:]


def is_english_title_case_culture(culture: str) -> bool:
    """Check whether parsed month names are title-cased before lookup."""
    return culture in _TITLE_CASE_MONTH_CULTURES


def keeps_designator_case(culture: str) -> bool:
    """Check whether AM/PM designators are matched as written.

    English cultures other than the US-English variants lower-case the
    parsed designator before lookup; all other cultures keep it as written.
    """
    return "en-" not in culture or culture in _US_ENGLISH_CULTURES


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    from intlengine.core.babel_compat import get_locale_class  # noqa: PLC0415

    return get_locale_class().parse(normalize_locale(locale_code))
