"""Tests for IntlContext and the one-shot convenience functions.

Python 3.13+.
"""

import logging
import math
from datetime import date, datetime

import pytest

from intlengine import (
    IntlContext,
    format_date,
    format_number,
    get_date_pattern,
    get_number_pattern,
    parse_date,
    parse_number,
)
from intlengine.constants import MAX_CONTEXT_CACHE_SIZE
from intlengine.core.options import DateFormatOptions, NumberFormatOptions
from intlengine.data import LocaleData
from intlengine.diagnostics import ConfigurationError, ValidationError
from intlengine.enums import FormatType, NumericType

_FALLBACK_DATA = LocaleData.empty().merge({"main": {"de": {}}})


# ============================================================================
# Construction and Caching
# ============================================================================


class TestCreate:
    """IntlContext.create normalizes and caches."""

    def test_defaults(self) -> None:
        ctx = IntlContext.create()
        assert ctx.culture == "en-US"
        assert ctx.currency_code == "USD"
        assert ctx.locale_data is LocaleData.empty()
        assert ctx.is_fallback is False

    def test_posix_culture_normalized(self) -> None:
        assert IntlContext.create("de_DE").culture == "de-DE"

    def test_same_instance(self) -> None:
        """Equivalent spellings share one cached context."""
        assert IntlContext.create("de_DE") is IntlContext.create("de-DE")
        assert IntlContext.cache_size() == 1

    def test_currency_is_part_of_key(self) -> None:
        usd = IntlContext.create("en-US")
        eur = IntlContext.create("en-US", currency_code="EUR")
        assert usd is not eur
        assert eur.currency_code == "EUR"

    def test_snapshot_is_part_of_key(self, arabic_data: LocaleData) -> None:
        assert IntlContext.create("ar-XX") is not IntlContext.create("ar-XX", arabic_data)

    def test_frozen(self) -> None:
        ctx = IntlContext.create()
        with pytest.raises(AttributeError):
            ctx.culture = "fr"  # type: ignore[misc]

    def test_lru_eviction(self) -> None:
        """The oldest context is dropped once the cache is full."""
        first = IntlContext.create("xx-0")
        for index in range(1, MAX_CONTEXT_CACHE_SIZE + 1):
            IntlContext.create(f"xx-{index}")
        assert IntlContext.cache_size() == MAX_CONTEXT_CACHE_SIZE
        assert IntlContext.create("xx-0") is not first


class TestFallback:
    """Unknown cultures never fail."""

    def test_unknown_culture_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="intlengine.runtime.context"):
            ctx = IntlContext.create("xx", _FALLBACK_DATA)
        assert ctx.is_fallback is True
        assert "Unknown culture 'xx'" in caplog.text
        assert "de" in caplog.text

    def test_fallback_formats_with_default_object(self) -> None:
        ctx = IntlContext.create("xx", _FALLBACK_DATA)
        assert ctx.format_number(1234.5, NumberFormatOptions(format="N2")) == "1,234.50"

    def test_loaded_culture_ignores_case(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="intlengine.runtime.context"):
            ctx = IntlContext.create("DE", _FALLBACK_DATA)
        assert ctx.is_fallback is False
        assert caplog.records == []

    def test_empty_snapshot_is_not_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        """With nothing loaded the default object is the data set, not a fallback."""
        with caplog.at_level(logging.WARNING, logger="intlengine.runtime.context"):
            ctx = IntlContext.create("fr-FR")
        assert ctx.is_fallback is False
        assert caplog.records == []


class TestCacheManagement:
    """cache_info and clear_cache cover contexts and compiled closures."""

    def test_cache_info_keys(self) -> None:
        IntlContext.create("en-US")
        info = IntlContext.cache_info()
        assert info["size"] == 1
        assert info["max_size"] == MAX_CONTEXT_CACHE_SIZE
        assert info["cultures"] == ("en-US",)
        for key in ("date_formatters", "date_parsers", "number_formatters", "number_parsers"):
            assert info[key] == 0

    def test_compiled_closures_cached(self) -> None:
        ctx = IntlContext.create()
        options = DateFormatOptions(skeleton="yMd")
        assert ctx.get_date_format(options) is ctx.get_date_format(DateFormatOptions(skeleton="yMd"))
        assert ctx.get_number_format() is ctx.get_number_format()
        info = IntlContext.cache_info()
        assert info["date_formatters"] == 1
        assert info["number_formatters"] == 1

    def test_clear_cache(self) -> None:
        ctx = IntlContext.create()
        ctx.get_date_parser()
        ctx.get_number_parser()
        IntlContext.clear_cache()
        info = IntlContext.cache_info()
        assert info["size"] == 0
        assert info["date_parsers"] == 0
        assert info["number_parsers"] == 0


# ============================================================================
# Operations
# ============================================================================


class TestContextOperations:
    """One-shot formatting and parsing through a context."""

    def test_format_date_default_short(self) -> None:
        assert IntlContext.create().format_date(datetime(2025, 1, 2)) == "1/2/25"

    def test_format_plain_date(self) -> None:
        options = DateFormatOptions(skeleton="long")
        assert IntlContext.create().format_date(date(2025, 1, 2), options) == "January 2, 2025"

    def test_format_date_none(self) -> None:
        assert IntlContext.create().format_date(None) is None

    def test_parse_date(self) -> None:
        options = DateFormatOptions(skeleton="yMd")
        assert IntlContext.create().parse_date("1/2/2025", options) == datetime(2025, 1, 2)

    def test_parse_date_failure(self) -> None:
        assert IntlContext.create().parse_date("garbage") is None

    def test_format_number_default_n(self) -> None:
        assert IntlContext.create().format_number(1234.5) == "1,234.5"

    def test_format_number_none(self) -> None:
        assert IntlContext.create().format_number(None) is None

    def test_parse_number(self) -> None:
        assert IntlContext.create().parse_number("1,234.5") == 1234.5

    def test_parse_number_failure(self) -> None:
        assert math.isnan(IntlContext.create().parse_number("abc"))

    def test_context_currency_default(self) -> None:
        """Currency skeletons use the context currency unless the options name one."""
        ctx = IntlContext.create(currency_code="EUR")
        assert ctx.format_number(5, NumberFormatOptions(format="C")) == "€5.00"
        assert ctx.format_number(5, NumberFormatOptions(format="C", currency="GBP")) == "£5.00"

    def test_arabic_context(self, arabic_data: LocaleData) -> None:
        ctx = IntlContext.create("ar_XX", arabic_data)
        assert ctx.format_number(1234.5, NumberFormatOptions(format="N2")) == "١٬٢٣٤٫٥٠"
        assert ctx.parse_number("١٬٢٣٤٫٥٠", NumberFormatOptions(format="N2")) == 1234.5

    def test_unresolved_pattern_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            IntlContext.create().get_date_format(DateFormatOptions(skeleton="nonexistent"))

    def test_invalid_digits_raise(self) -> None:
        with pytest.raises(ValidationError):
            IntlContext.create().get_number_format(
                NumberFormatOptions(format="N", minimum_fraction_digits=5, maximum_fraction_digits=2)
            )


class TestLocaleQueries:
    """Pattern, week and symbol queries."""

    def test_date_pattern(self) -> None:
        ctx = IntlContext.create()
        assert ctx.get_date_pattern() == "M/d/yy"
        assert ctx.get_date_pattern(excel=True) == "m/d/yy"

    def test_date_time_pattern(self) -> None:
        options = DateFormatOptions(skeleton="short", type=FormatType.DATE_TIME)
        assert IntlContext.create().get_date_pattern(options) == "M/d/yy, h:mm a"

    def test_number_pattern_uses_context_currency(self) -> None:
        ctx = IntlContext.create(currency_code="EUR")
        assert ctx.get_number_pattern(NumberFormatOptions(format="C2")) == "€###0.00"

    def test_first_day_of_week(self, week_data: LocaleData) -> None:
        assert IntlContext.create("en-GB", week_data).get_first_day_of_week() == 1
        assert IntlContext.create("en-US", week_data).get_first_day_of_week() == 0

    def test_numeric_object(self) -> None:
        ctx = IntlContext.create()
        assert ctx.get_numeric_object()["maximumFraction"] == 3
        assert ctx.get_numeric_object(NumericType.CURRENCY)["minimumFraction"] == 2

    def test_currency_symbol(self) -> None:
        ctx = IntlContext.create()
        assert ctx.get_currency_symbol() == "$"
        assert ctx.get_currency_symbol("EUR") == "€"
        assert ctx.get_currency_symbol("GBP") == "£"
        assert ctx.get_currency_symbol("XYZ") == "$"


# ============================================================================
# Convenience Functions
# ============================================================================


class TestConvenienceFunctions:
    """Module-level helpers over a cached context."""

    def test_format_date(self) -> None:
        assert format_date(datetime(2025, 1, 2), DateFormatOptions(skeleton="yMd")) == "1/2/2025"

    def test_parse_date(self) -> None:
        result = parse_date("January 2, 2025", DateFormatOptions(skeleton="long"))
        assert result == datetime(2025, 1, 2)

    def test_format_number(self) -> None:
        assert format_number(0.256, NumberFormatOptions(format="P1")) == "25.6%"

    def test_format_number_currency(self) -> None:
        assert format_number(5, NumberFormatOptions(format="C"), currency_code="EUR") == "€5.00"

    def test_format_number_falls_back_to_str(self) -> None:
        """A pattern that yields no text falls back to the plain value."""
        assert format_number(5, NumberFormatOptions(format="abc")) == "5"

    def test_format_number_none(self) -> None:
        assert format_number(None) is None

    def test_parse_number(self, arabic_data: LocaleData) -> None:
        assert parse_number("1,234.5") == 1234.5
        result = parse_number("٥٠٪", NumberFormatOptions(format="P"), culture="ar-XX", locale_data=arabic_data)
        assert result == pytest.approx(0.5)

    def test_patterns(self) -> None:
        assert get_date_pattern(DateFormatOptions(skeleton="medium")) == "MMM d, y"
        assert get_number_pattern(NumberFormatOptions(format="C2"), currency_code="EUR") == "€###0.00"

    def test_helpers_share_cached_context(self) -> None:
        format_number(1)
        parse_number("1")
        assert IntlContext.cache_size() == 1
