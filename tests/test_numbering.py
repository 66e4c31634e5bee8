"""Tests for numbering-system digit tables and symbol canonicalization.

Python 3.13+.
"""

from hypothesis import given
from hypothesis import strategies as st

from intlengine.core.numbering import (
    LATIN_DIGITS,
    get_current_numeric_options,
    get_number_mapper,
    get_numbering_system_name,
)
from intlengine.data import LocaleData

ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"


class TestNumberingSystemName:
    """Default numbering system lookup."""

    def test_default_is_latn(self) -> None:
        """Cultures without a default use latn."""
        assert get_numbering_system_name({}) == "latn"

    def test_declared_system(self, arabic_data: LocaleData) -> None:
        """The declared default is returned."""
        assert get_numbering_system_name(arabic_data.main_object("ar-XX")) == "arab"


class TestNumberMapper:
    """Formatting direction."""

    def test_latin_is_identity(self, empty_data: LocaleData) -> None:
        """Latin digits pass through unchanged."""
        mapper = get_number_mapper(empty_data.main_object("en-US"), empty_data.numbering_systems)
        assert mapper.digits == LATIN_DIGITS
        assert mapper.localize_digits("1,234.5") == "1,234.5"
        assert mapper.symbol("decimal") == "."

    def test_arabic_digits(self, arabic_data: LocaleData) -> None:
        """ASCII digits map to Arabic-Indic digits."""
        mapper = get_number_mapper(arabic_data.main_object("ar-XX"), arabic_data.numbering_systems)
        assert mapper.numbering_system == "arab"
        assert mapper.localize_digits("2025") == "٢٠٢٥"
        assert mapper.symbol("group") == "٬"
        assert mapper.time_separator == ":"

    def test_symbol_fallback(self) -> None:
        """Missing symbols fall back to the ASCII form."""
        mapper = get_number_mapper({}, LocaleData.empty().numbering_systems)
        assert mapper.symbol("minusSign") == "-"
        assert mapper.symbol("unknown") == ""

    def test_unknown_system_uses_latin_digits(self) -> None:
        """A numbering system without a digit table uses ASCII digits."""
        main = {"numbers": {"defaultNumberingSystem": "hanidec"}}
        mapper = get_number_mapper(main, LocaleData.empty().numbering_systems)
        assert mapper.digits == LATIN_DIGITS


class TestNumericOptions:
    """Parsing direction."""

    def test_digit_class(self, arabic_data: LocaleData) -> None:
        """The digit class matches one localized digit."""
        options = get_current_numeric_options(
            arabic_data.main_object("ar-XX"), arabic_data.numbering_systems
        )
        assert options.digit_class == "[" + ARABIC_DIGITS + "]"
        assert options.symbol_match == {}

    def test_delocalize(self, arabic_data: LocaleData) -> None:
        """Localized digits map back to ASCII."""
        options = get_current_numeric_options(
            arabic_data.main_object("ar-XX"), arabic_data.numbering_systems
        )
        assert options.delocalize_digits("١٤٤٥") == "1445"

    def test_canonicalize_symbols(self, arabic_data: LocaleData) -> None:
        """Localized symbols map to ASCII in one pass."""
        options = get_current_numeric_options(
            arabic_data.main_object("ar-XX"), arabic_data.numbering_systems, need_symbols=True
        )
        text = options.canonicalize_symbols("١٬٢٣٤٫٥٪")
        assert options.delocalize_digits(text) == "1,234.5%"

    def test_multi_character_symbol(self, arabic_data: LocaleData) -> None:
        """Multi-character symbols are matched whole."""
        options = get_current_numeric_options(
            arabic_data.main_object("ar-XX"), arabic_data.numbering_systems, need_symbols=True
        )
        assert options.canonicalize_symbols("١اس٣") == "١E٣"

    def test_without_symbols_is_identity(self, empty_data: LocaleData) -> None:
        """Without a symbol table text passes through."""
        options = get_current_numeric_options(empty_data.main_object(""), empty_data.numbering_systems)
        assert options.canonicalize_symbols("1,234.5") == "1,234.5"

    @given(st.text(alphabet=LATIN_DIGITS, min_size=1, max_size=20))
    def test_digit_round_trip(self, digits: str) -> None:
        """Localizing then delocalizing digits is the identity."""
        data = LocaleData.empty()
        main = {"numbers": {"defaultNumberingSystem": "arab"}}
        mapper = get_number_mapper(main, data.numbering_systems)
        options = get_current_numeric_options(main, data.numbering_systems)
        localized = mapper.localize_digits(digits)
        assert all(ch in ARABIC_DIGITS for ch in localized)
        assert options.delocalize_digits(localized) == digits
