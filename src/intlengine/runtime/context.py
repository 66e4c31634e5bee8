"""Culture context for formatting and parsing without global state.

IntlContext binds a culture, a LocaleData snapshot and a default currency
code. Every operation takes its options explicitly; nothing is read from
process-wide settings.

Architecture:
    - IntlContext: Immutable context, identity-cached per
      (culture, snapshot, currency)
    - Compiled closures: lru_cache per (culture, options, snapshot), so a
      grid formatting thousands of cells compiles each column format once
    - Module-level functions: one-shot helpers over a cached context

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from threading import RLock
from typing import Any, ClassVar

from intlengine.constants import (
    DEFAULT_CULTURE,
    DEFAULT_CURRENCY_CODE,
    MAX_COMPILED_CACHE_SIZE,
    MAX_CONTEXT_CACHE_SIZE,
)
from intlengine.core.numeric_patterns import get_currency_symbol, get_numeric_object
from intlengine.core.numeric_patterns import get_number_pattern as _get_number_pattern
from intlengine.core.options import DateFormatOptions, NumberFormatOptions
from intlengine.core.patterns import first_day_of_week
from intlengine.core.patterns import get_date_pattern as _get_date_pattern
from intlengine.data.store import LocaleData, get_value
from intlengine.enums import FormatType, NumericType
from intlengine.locale_utils import normalize_culture
from intlengine.parsing.dates import DateParser, compile_date_parser
from intlengine.parsing.numbers import NumberParser, compile_number_parser
from intlengine.runtime.date_formatter import DateFormatter, compile_date_formatter
from intlengine.runtime.number_formatter import NumberFormatter, compile_number_formatter

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "IntlContext",
    # Convenience functions
    "format_date",
    "parse_date",
    "format_number",
    "parse_number",
    "get_date_pattern",
    "get_number_pattern",
]

logger = logging.getLogger(__name__)

DEFAULT_DATE_OPTIONS = DateFormatOptions(skeleton="short", type=FormatType.DATE)
DEFAULT_NUMBER_OPTIONS = NumberFormatOptions(format="N")


# ============================================================================
# COMPILED CLOSURE CACHES
# ============================================================================


@functools.lru_cache(maxsize=MAX_COMPILED_CACHE_SIZE)
def _date_formatter(culture: str, options: DateFormatOptions, locale_data: LocaleData) -> DateFormatter:
    return compile_date_formatter(culture, options, locale_data)


@functools.lru_cache(maxsize=MAX_COMPILED_CACHE_SIZE)
def _date_parser(culture: str, options: DateFormatOptions, locale_data: LocaleData) -> DateParser:
    return compile_date_parser(culture, options, locale_data)


@functools.lru_cache(maxsize=MAX_COMPILED_CACHE_SIZE)
def _number_formatter(culture: str, options: NumberFormatOptions, locale_data: LocaleData) -> NumberFormatter:
    return compile_number_formatter(culture, options, locale_data)


@functools.lru_cache(maxsize=MAX_COMPILED_CACHE_SIZE)
def _number_parser(culture: str, options: NumberFormatOptions, locale_data: LocaleData) -> NumberParser:
    return compile_number_parser(culture, options, locale_data)


_COMPILED_CACHES = {
    "date_formatters": _date_formatter,
    "date_parsers": _date_parser,
    "number_formatters": _number_formatter,
    "number_parsers": _number_parser,
}


# ============================================================================
# CONTEXT
# ============================================================================


@dataclass(frozen=True, slots=True)
class IntlContext:
    """Immutable culture configuration for formatting and parsing.

    Use IntlContext.create() to construct instances; it normalizes the
    culture id and reuses cached instances.

    Cache Management:
        - IntlContext.clear_cache(): Clear cached contexts and compiled closures
        - IntlContext.cache_size(): Number of cached contexts
        - IntlContext.cache_info(): Detailed cache statistics

    Examples:
        >>> ctx = IntlContext.create("en-US")
        >>> ctx.format_number(1234567.5, NumberFormatOptions(format="N2"))
        '1,234,567.50'
        >>> ctx.parse_number("1,234.5")
        1234.5

        >>> # Cultures missing from loaded data use the built-in default object
        >>> ctx = IntlContext.create("xx", LocaleData.empty().merge({"main": {"de": {}}}))
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable. Compiled closures capture only immutable
        tables and may be called from any thread. Cache operations are
        protected by RLock (contexts) and lru_cache (closures).
    """

    _cache: ClassVar[OrderedDict[tuple[str, LocaleData, str], IntlContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    culture: str
    locale_data: LocaleData
    currency_code: str = DEFAULT_CURRENCY_CODE
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear cached contexts and every compiled-closure cache.

        Example:
            >>> IntlContext.clear_cache()
            >>> IntlContext.cache_size()
            0
        """
        with cls._cache_lock:
            cls._cache.clear()
        for compiled in _COMPILED_CACHES.values():
            compiled.cache_clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached IntlContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, Any]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached contexts
            - max_size: Maximum context cache size
            - cultures: Tuple of cached culture ids (LRU order)
            - one entry per compiled-closure cache with its current size
        """
        with cls._cache_lock:
            info: dict[str, Any] = {
                "size": len(cls._cache),
                "max_size": MAX_CONTEXT_CACHE_SIZE,
                "cultures": tuple(key[0] for key in cls._cache),
            }
        for name, compiled in _COMPILED_CACHES.items():
            info[name] = compiled.cache_info().currsize
        return info

    @classmethod
    def create(
        cls,
        culture: str | None = None,
        locale_data: LocaleData | None = None,
        currency_code: str | None = None,
    ) -> IntlContext:
        """Create an IntlContext, reusing a cached instance when possible.

        Never fails for unknown cultures: when the snapshot holds cultures but
        not this one, a warning is logged and formatting uses the built-in
        default locale object.

        Args:
            culture: Culture id ("en-US" or "en_US"); DEFAULT_CULTURE when omitted
            locale_data: Snapshot to read from; the empty snapshot when omitted
            currency_code: Default ISO 4217 code for currency skeletons

        Returns:
            IntlContext instance
        """
        culture = normalize_culture(culture or DEFAULT_CULTURE)
        data = locale_data if locale_data is not None else LocaleData.empty()
        currency = currency_code or DEFAULT_CURRENCY_CODE
        cache_key = (culture, data, currency)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        is_fallback = bool(data.cultures) and data.find_culture(culture) is None
        if is_fallback:
            logger.warning(
                "Unknown culture '%s' (loaded: %s). Falling back to the default locale object",
                culture,
                ", ".join(data.cultures),
            )
        ctx = cls(culture=culture, locale_data=data, currency_code=currency, is_fallback=is_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_CONTEXT_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    # ------------------------------------------------------------------------
    # Compiled closures
    # ------------------------------------------------------------------------

    def get_date_format(self, options: DateFormatOptions | None = None) -> DateFormatter:
        """Compiled date formatter (cached).

        Raises:
            ConfigurationError: If the options resolve to no pattern
        """
        return _date_formatter(self.culture, options or DEFAULT_DATE_OPTIONS, self.locale_data)

    def get_date_parser(self, options: DateFormatOptions | None = None) -> DateParser:
        """Compiled date parser (cached).

        Raises:
            ConfigurationError: If the options resolve to no pattern
        """
        return _date_parser(self.culture, options or DEFAULT_DATE_OPTIONS, self.locale_data)

    def get_number_format(self, options: NumberFormatOptions | None = None) -> NumberFormatter:
        """Compiled number formatter (cached); currency defaults to the context's.

        Raises:
            ValidationError: If digit options are out of range or inconsistent
        """
        resolved = (options or DEFAULT_NUMBER_OPTIONS).with_currency(self.currency_code)
        return _number_formatter(self.culture, resolved, self.locale_data)

    def get_number_parser(self, options: NumberFormatOptions | None = None) -> NumberParser:
        """Compiled number parser (cached)."""
        return _number_parser(self.culture, options or DEFAULT_NUMBER_OPTIONS, self.locale_data)

    # ------------------------------------------------------------------------
    # One-shot operations
    # ------------------------------------------------------------------------

    def format_date(
        self, value: date | datetime | None, options: DateFormatOptions | None = None
    ) -> str | None:
        """Format a date; the short date pattern when no options are given."""
        return self.get_date_format(options)(value)

    def parse_date(self, value: str, options: DateFormatOptions | None = None) -> datetime | None:
        """Parse a date; None when the text does not match."""
        return self.get_date_parser(options)(value)

    def format_number(
        self, value: int | float | Decimal | None, options: NumberFormatOptions | None = None
    ) -> str | None:
        """Format a number; the "N" skeleton when no options are given."""
        return self.get_number_format(options)(value)

    def parse_number(self, value: str, options: NumberFormatOptions | None = None) -> float:
        """Parse a number; NaN when the text is not recognized."""
        return self.get_number_parser(options)(value)

    # ------------------------------------------------------------------------
    # Locale queries
    # ------------------------------------------------------------------------

    def get_date_pattern(self, options: DateFormatOptions | None = None, *, excel: bool = False) -> str:
        """Resolved date pattern, optionally in spreadsheet form."""
        return _get_date_pattern(self.culture, options or DEFAULT_DATE_OPTIONS, self.locale_data, excel=excel)

    def get_number_pattern(self, options: NumberFormatOptions | None = None, *, excel: bool = False) -> str:
        """Effective numeric pattern, optionally in spreadsheet form."""
        resolved = (options or DEFAULT_NUMBER_OPTIONS).with_currency(self.currency_code)
        return _get_number_pattern(self.culture, resolved, self.locale_data, excel=excel)

    def get_first_day_of_week(self) -> int:
        """First day of the week, 0 (Sunday) .. 6 (Saturday)."""
        return first_day_of_week(self.culture, self.locale_data)

    def get_numeric_object(self, numeric_type: str = NumericType.DECIMAL) -> dict[str, Any]:
        """Number symbols with default fraction digits and date separator."""
        return get_numeric_object(self.culture, self.locale_data, numeric_type)

    def get_currency_symbol(self, currency_code: str | None = None) -> str:
        """Locale symbol for a currency; the context's currency when omitted.

        Example:
            >>> IntlContext.create("en-US").get_currency_symbol("EUR")
            '€'
        """
        numeric_object = get_value("numbers", self.locale_data.main_object(self.culture)) or {}
        return get_currency_symbol(numeric_object, currency_code or self.currency_code)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================


def _context(culture: str | None, locale_data: LocaleData | None, currency_code: str | None = None) -> IntlContext:
    return IntlContext.create(culture, locale_data, currency_code)


def format_date(
    value: date | datetime | None,
    options: DateFormatOptions | None = None,
    *,
    culture: str | None = None,
    locale_data: LocaleData | None = None,
) -> str | None:
    """Format a date in one call.

    Example:
        >>> format_date(datetime(2025, 1, 2), DateFormatOptions(skeleton="yMd"))
        '1/2/2025'
    """
    return _context(culture, locale_data).format_date(value, options)


def parse_date(
    value: str,
    options: DateFormatOptions | None = None,
    *,
    culture: str | None = None,
    locale_data: LocaleData | None = None,
) -> datetime | None:
    """Parse a date in one call; None when the text does not match."""
    return _context(culture, locale_data).parse_date(value, options)


def format_number(
    value: int | float | Decimal | None,
    options: NumberFormatOptions | None = None,
    *,
    culture: str | None = None,
    locale_data: LocaleData | None = None,
    currency_code: str | None = None,
) -> str | None:
    """Format a number in one call.

    Falls back to ``str(value)`` when the pattern yields no text.

    Example:
        >>> format_number(0.256, NumberFormatOptions(format="P1"))
        '25.6%'
    """
    result = _context(culture, locale_data, currency_code).format_number(value, options)
    if result is None and value is not None:
        return str(value)
    return result


def parse_number(
    value: str,
    options: NumberFormatOptions | None = None,
    *,
    culture: str | None = None,
    locale_data: LocaleData | None = None,
) -> float:
    """Parse a number in one call; NaN when the text is not recognized."""
    return _context(culture, locale_data).parse_number(value, options)


def get_date_pattern(
    options: DateFormatOptions | None = None,
    *,
    excel: bool = False,
    culture: str | None = None,
    locale_data: LocaleData | None = None,
) -> str:
    """Resolved date pattern for a culture."""
    return _context(culture, locale_data).get_date_pattern(options, excel=excel)


def get_number_pattern(
    options: NumberFormatOptions | None = None,
    *,
    excel: bool = False,
    culture: str | None = None,
    locale_data: LocaleData | None = None,
    currency_code: str | None = None,
) -> str:
    """Effective numeric pattern for a culture."""
    return _context(culture, locale_data, currency_code).get_number_pattern(options, excel=excel)
