"""Tests for compiled number formatters.

Covers skeletons (N, C, A, P, E), custom patterns, significant digits,
numbering-system substitution and option validation.

Python 3.13+.
"""

import math
from decimal import Decimal

import pytest

from intlengine.core.options import NumberFormatOptions
from intlengine.data import LocaleData
from intlengine.diagnostics import DiagnosticCode, ValidationError
from intlengine.runtime.number_formatter import (
    compile_number_formatter,
    custom_pivot_format,
    group_numbers,
    process_fraction,
    process_minimum_integers,
    process_significant_digits,
)


def _format(value: float | None, data: LocaleData, culture: str = "en-US", **kwargs: object) -> str | None:
    options = NumberFormatOptions(**kwargs)  # type: ignore[arg-type]
    return compile_number_formatter(culture, options, data)(value)


# ============================================================================
# Helpers
# ============================================================================


class TestHelpers:
    """Digit rendering primitives."""

    @pytest.mark.parametrize(
        ("value", "minimum", "maximum", "expected"),
        [
            (1234567.5, 2, 2, "1234567.50"),
            (0.125, 0, 2, "0.13"),
            (7.0, 0, 3, "7"),
            (7.0, 2, 3, "7.00"),
            (1.5, None, None, "1.5"),
        ],
    )
    def test_process_fraction(self, value: float, minimum: int | None, maximum: int | None, expected: str) -> None:
        """Fraction digits are padded or rounded into range."""
        assert process_fraction(value, minimum, maximum) == expected

    def test_process_fraction_drops_leading_zero(self) -> None:
        """The ###.00 pattern drops the leading zero."""
        assert process_fraction(0.25, 2, 2, "###.00") == ".25"

    def test_process_minimum_integers(self) -> None:
        """Integer part is zero-padded."""
        assert process_minimum_integers("42.5", 4) == "0042.5"
        assert process_minimum_integers("12345", 3) == "12345"

    @pytest.mark.parametrize(
        ("value", "minimum", "maximum", "expected"),
        [(123.456, 1, 4, "123.5"), (5.0, 3, 5, "5.00"), (1234.5678, 1, 3, "1230"), (0.000123456, 1, 2, "0.00012")],
    )
    def test_process_significant_digits(self, value: float, minimum: int, maximum: int, expected: str) -> None:
        """Significant digits round and pad."""
        assert process_significant_digits(value, minimum, maximum) == expected

    @pytest.mark.parametrize(
        ("text", "primary", "secondary", "expected"),
        [
            ("1234567.89", 3, None, "1,234,567.89"),
            ("1234567", 3, 2, "12,34,567"),
            ("123", 3, None, "123"),
            ("1234", 3, None, "1,234"),
        ],
    )
    def test_group_numbers(self, text: str, primary: int, secondary: int | None, expected: str) -> None:
        """Primary group first, then secondary groups."""
        assert group_numbers(text, primary, ",", ".", secondary) == expected

    @pytest.mark.parametrize(
        ("value", "expected"), [(2_500_000, "3"), (2_400_000, "2"), (499_999, ""), (500_000, "1")]
    )
    def test_custom_pivot_format(self, value: int, expected: str) -> None:
        """Values render in rounded millions."""
        assert custom_pivot_format(value) == expected


# ============================================================================
# Skeletons
# ============================================================================


class TestSkeletonFormatting:
    """Standard skeletons against the built-in en-US data."""

    @pytest.mark.parametrize(
        ("fmt", "value", "expected"),
        [
            ("N2", 1234567.5, "1,234,567.50"),
            ("N", 1234.5678, "1,234.568"),
            ("N0", 1234.5, "1,235"),
            ("N2", -1234.5, "-1,234.50"),
            ("N2", 0, "0.00"),
            ("C", 1234.5, "$1,234.50"),
            ("C", -1234.5, "-$1,234.50"),
            ("A", -1234.5, "($1,234.50)"),
            ("A", 1234.5, "$1,234.50"),
            ("P", 0.256, "26%"),
            ("P1", 0.256, "25.6%"),
            ("P2", 0.5, "50.00%"),
            ("E2", 12345, "1.23E+4"),
        ],
    )
    def test_skeletons(self, empty_data: LocaleData, fmt: str, value: float, expected: str) -> None:
        """Each skeleton renders with locale literals and grouping."""
        assert _format(value, empty_data, format=fmt) == expected

    def test_default_is_n(self, empty_data: LocaleData) -> None:
        """Omitted format behaves as N."""
        assert _format(1234.5, empty_data) == "1,234.5"

    def test_currency_code(self, empty_data: LocaleData) -> None:
        """The currency option selects the symbol."""
        assert _format(1234.5, empty_data, format="C", currency="EUR") == "€1,234.50"
        assert _format(1234.5, empty_data, format="C", currency="GBP") == "£1,234.50"

    def test_ignore_currency(self, empty_data: LocaleData) -> None:
        """ignore_currency keeps the $ placeholder."""
        assert _format(5, empty_data, format="C", currency="EUR", ignore_currency=True) == "$5.00"

    def test_grouping_disabled(self, empty_data: LocaleData) -> None:
        """use_grouping=False drops separators."""
        assert _format(1234567.5, empty_data, format="N2", use_grouping=False) == "1234567.50"

    def test_minimum_integer_digits(self, empty_data: LocaleData) -> None:
        """Integer part is padded."""
        assert _format(42, empty_data, format="N0", use_grouping=False, minimum_integer_digits=5) == "00042"

    def test_fraction_options(self, empty_data: LocaleData) -> None:
        """Fraction options apply when the skeleton has no digit count."""
        assert _format(1.5, empty_data, format="N", minimum_fraction_digits=3, maximum_fraction_digits=4) == "1.500"

    def test_skeleton_digits_override_options(self, empty_data: LocaleData) -> None:
        """Skeleton digits win over fraction options."""
        assert _format(1.5, empty_data, format="N1", maximum_fraction_digits=4) == "1.5"

    @pytest.mark.parametrize(
        ("minimum", "maximum", "value", "expected"),
        [(1, 3, 1234.5678, "1,230"), (3, 5, 5, "5.00"), (1, 21, 0.1, "0.1")],
    )
    def test_significant_digits(
        self, empty_data: LocaleData, minimum: int, maximum: int, value: float, expected: str
    ) -> None:
        """Significant-digit mode replaces fraction digits."""
        result = _format(
            value, empty_data, minimum_significant_digits=minimum, maximum_significant_digits=maximum
        )
        assert result == expected

    def test_decimal_input(self, empty_data: LocaleData) -> None:
        """Decimal values are accepted."""
        assert _format(Decimal("1234.5"), empty_data, format="N2") == "1,234.50"  # type: ignore[arg-type]


class TestSpecialValues:
    """None, NaN and infinities."""

    def test_none(self, empty_data: LocaleData) -> None:
        """None renders as None."""
        assert _format(None, empty_data, format="N2") is None

    def test_nan(self, empty_data: LocaleData) -> None:
        """NaN renders as the locale NaN symbol."""
        assert _format(math.nan, empty_data, format="N2") == "NaN"

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity(self, empty_data: LocaleData, value: float) -> None:
        """Infinities render as the locale infinity symbol."""
        assert _format(value, empty_data, format="C") == "∞"


# ============================================================================
# Custom Patterns
# ============================================================================


class TestCustomPatternFormatting:
    """Custom ;-separated patterns."""

    @pytest.mark.parametrize(
        ("fmt", "value", "expected"),
        [
            ("#,##0.00;(#,##0.00)", -1234.5, "(1,234.50)"),
            ("#,##0.00;(#,##0.00)", 1234.5, "1,234.50"),
            ("0.00", 3.14159, "3.14"),
            ("#,##0.##", 1234.5, "1,234.5"),
            ("#,##0.##", 1234.0, "1,234"),
            ("#,##0.0#", 2.0, "2.0"),
            ("0.0%", 0.256, "25.6%"),
            ("$#,##0.00", 1234.5, "$1,234.50"),
            ("#,##0 'units'", 1234, "1,234 units"),
            ("#,##0 'units'", 5, "5 units"),
            ("#,##0.00", -5, "-5.00"),
            ("000.00", 1.5, "001.50"),
            ("###.00", 0.25, ".25"),
        ],
    )
    def test_patterns(self, empty_data: LocaleData, fmt: str, value: float, expected: str) -> None:
        """Custom patterns render literals, grouping and fraction bounds."""
        assert _format(value, empty_data, format=fmt) == expected

    def test_custom_currency_code(self, empty_data: LocaleData) -> None:
        """$ in a custom pattern takes the requested currency symbol."""
        assert _format(2, empty_data, format="$0.00", currency="EUR") == "€2.00"

    def test_not_applicable(self, empty_data: LocaleData) -> None:
        """N/A always renders as itself."""
        assert _format(1234.5, empty_data, format="N/A") == "N/A"

    @pytest.mark.parametrize(("value", "expected"), [(2_500_000, "3"), (-2_400_000, "(2)")])
    def test_pivot(self, empty_data: LocaleData, value: int, expected: str) -> None:
        """The pivot pattern renders rounded millions."""
        assert _format(value, empty_data, format="#,###,,;(#,###,,)") == expected

    def test_no_digit_body(self, empty_data: LocaleData) -> None:
        """A pattern without digits yields None."""
        assert _format(5, empty_data, format="abc") is None

    def test_grouping_override(self, empty_data: LocaleData) -> None:
        """use_grouping=False disables pattern grouping."""
        assert _format(1234.5, empty_data, format="#,##0.00", use_grouping=False) == "1234.50"

    def test_significant_digits_ignored(self, empty_data: LocaleData) -> None:
        """Custom patterns keep their fraction digits when significant bounds are given."""
        result = _format(
            1234.5, empty_data, format="#,##0.00", minimum_significant_digits=1, maximum_significant_digits=3
        )
        assert result == "1,234.50"


# ============================================================================
# Numbering Systems
# ============================================================================


class TestArabicFormatting:
    """Arabic-Indic digits and symbols."""

    def test_decimal(self, arabic_data: LocaleData) -> None:
        """Digits, group and decimal separators are localized."""
        assert _format(1234.5, arabic_data, "ar-XX", format="N2") == "١٬٢٣٤٫٥٠"

    def test_percent(self, arabic_data: LocaleData) -> None:
        """Percent uses the localized digits; the literal comes from the pattern."""
        assert _format(0.5, arabic_data, "ar-XX", format="P") == "٥٠%"

    def test_exponent_symbol(self, arabic_data: LocaleData) -> None:
        """Scientific notation uses the localized exponent symbol."""
        assert _format(12345, arabic_data, "ar-XX", format="E2") == "١٫٢٣اس+٤"


# ============================================================================
# Validation
# ============================================================================


class TestCompileValidation:
    """Digit options are validated when compiling."""

    @pytest.mark.parametrize(
        ("kwargs", "code"),
        [
            ({"minimum_significant_digits": 5, "maximum_significant_digits": 3}, DiagnosticCode.DIGIT_ORDER_INVALID),
            ({"maximum_fraction_digits": 21}, DiagnosticCode.DIGIT_RANGE_INVALID),
            ({"minimum_fraction_digits": 3, "maximum_fraction_digits": 1}, DiagnosticCode.DIGIT_ORDER_INVALID),
            ({"minimum_significant_digits": 2}, DiagnosticCode.DIGIT_PAIR_INCOMPLETE),
        ],
    )
    def test_invalid_options(self, empty_data: LocaleData, kwargs: dict, code: DiagnosticCode) -> None:
        """Invalid digit options raise ValidationError at compile time."""
        with pytest.raises(ValidationError) as exc_info:
            compile_number_formatter("en-US", NumberFormatOptions(format="N", **kwargs), empty_data)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == code

    def test_custom_pattern_validated(self, empty_data: LocaleData) -> None:
        """Custom patterns validate digit options too."""
        with pytest.raises(ValidationError):
            compile_number_formatter(
                "en-US", NumberFormatOptions(format="#,##0.00", maximum_fraction_digits=30), empty_data
            )
