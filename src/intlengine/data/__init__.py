"""Locale data snapshots.

LocaleData is an immutable CLDR-shaped tree; LocaleDataStore holds the
current snapshot and swaps in merged copies on load. load_babel_locale_data
builds trees from Babel's bundled CLDR data.

Python 3.13+. Babel is needed only for load_babel_locale_data.
"""

from .loading import build_culture_tree, load_babel_locale_data
from .store import LocaleData, LocaleDataStore, get_value

__all__ = [
    "LocaleData",
    "LocaleDataStore",
    "build_culture_tree",
    "get_value",
    "load_babel_locale_data",
]
