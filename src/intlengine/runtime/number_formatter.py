"""Number formatting from compiled numeric specs.

compile_number_formatter() builds a NumberFormatSpec once (skeleton or
custom pattern) and returns a closure. Each call picks the sign branch,
renders digits with ECMAScript Number text semantics, then applies the
decimal symbol, grouping, numeral substitution and branch literals in that
order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING

from intlengine.constants import NOT_APPLICABLE_PATTERN, PIVOT_PATTERN
from intlengine.core.number_text import js_str, to_exponential, to_fixed, to_precision
from intlengine.core.numeric_patterns import NumberBranch, NumberFormatSpec, build_number_format_spec
from intlengine.enums import NumericType

if TYPE_CHECKING:
    from intlengine.core.options import NumberFormatOptions
    from intlengine.data.store import LocaleData

__all__ = [
    "NumberFormatter",
    "compile_number_formatter",
    "custom_pivot_format",
    "format_with_spec",
    "group_numbers",
    "process_fraction",
    "process_minimum_integers",
    "process_significant_digits",
]

logger = logging.getLogger(__name__)

type NumberFormatter = Callable[[int | float | Decimal | None], str | None]

_FRACTION_TEXT_RE = re.compile(r"\d+\.\d+")
_LEADING_DIGITS_RE = re.compile(r"\d+")

# Custom pattern whose leading zero is dropped for values below one.
_NO_LEADING_ZERO_PATTERN = "###.00"


def process_significant_digits(value: float, minimum: int, maximum: int) -> str:
    """Render with significant digits, trimming insignificant trailing zeros.

    Example:
        >>> process_significant_digits(123.456, 1, 4)
        '123.5'
        >>> process_significant_digits(5.0, 3, 5)
        '5.00'
    """
    if len(js_str(value)) < minimum:
        return to_precision(value, minimum)
    return js_str(float(to_precision(value, maximum)))


def process_fraction(value: float, minimum: int | None, maximum: int | None, fmt: str | None = None) -> str:
    """Render with fraction digits between ``minimum`` and ``maximum``.

    Example:
        >>> process_fraction(1234567.5, 2, 2)
        '1234567.50'
        >>> process_fraction(0.125, 0, 2)
        '0.13'
    """
    text = js_str(value)
    fraction = text.split(".")[1] if "." in text else ""
    length = len(fraction)
    if minimum and length < minimum:
        if length == 0:
            return to_fixed(value, minimum)
        return text + "0" * (minimum - length)
    if maximum is not None and (length > maximum or maximum == 0):
        return to_fixed(value, maximum)
    if text[0] == "0" and fmt == _NO_LEADING_ZERO_PATTERN:
        text = text[1:]
    return text


def process_minimum_integers(text: str, minimum: int) -> str:
    """Left-pad the integer part with zeros to ``minimum`` digits."""
    integer, dot, fraction = text.partition(".")
    return integer.rjust(minimum, "0") + dot + fraction


def _trim_fraction_zeros(text: str, minimum: int) -> str:
    integer, _, fraction = text.partition(".")
    keep = len(fraction)
    while keep > minimum and fraction[keep - 1] == "0":
        keep -= 1
    return integer + "." + fraction[:keep] if keep else integer


def custom_pivot_format(value: int) -> str:
    """Render a value in rounded millions; values below 500,000 render empty.

    Example:
        >>> custom_pivot_format(2_500_000)
        '3'
        >>> custom_pivot_format(2_400_000)
        '2'
        >>> custom_pivot_format(499_999)
        ''
    """
    if value < 500_000:
        return ""
    millions = value / 1_000_000
    fraction = js_str(millions).partition(".")[2]
    if fraction and int(fraction[0]) >= 5:
        return str(math.ceil(millions))
    return str(math.floor(millions))


def group_numbers(
    text: str,
    primary: int,
    separator: str,
    decimal_symbol: str,
    secondary: int | None = None,
) -> str:
    """Insert group separators into the integer part.

    The first group from the right has ``primary`` digits; every further
    group has ``secondary`` digits when given.

    Example:
        >>> group_numbers("1234567.89", 3, ",", ".")
        '1,234,567.89'
        >>> group_numbers("1234567", 3, ",", ".", 2)
        '12,34,567'
    """
    use_secondary = secondary is not None and secondary != 0
    parts = text.split(decimal_symbol)
    prefix = parts[0]
    length = len(prefix)
    grouped = ""
    size = primary
    while length > size:
        chunk = prefix[length - size : length]
        grouped = chunk + (separator + grouped if grouped else "")
        length -= size
        if use_secondary:
            size = secondary  # type: ignore[assignment]
            use_secondary = False
    parts[0] = prefix[:length] + (separator if grouped else "") + grouped
    return decimal_symbol.join(parts)


def _digits_text(value: float, branch: NumberBranch, spec: NumberFormatSpec) -> str:
    if branch.group_one:
        text = process_significant_digits(
            value, branch.minimum_significant_digits or 1, branch.maximum_significant_digits or 21
        )
    else:
        text = process_fraction(value, branch.minimum_fraction_digits, branch.maximum_fraction_digits, spec.format)
        if branch.minimum_integer_digits:
            text = process_minimum_integers(text, branch.minimum_integer_digits)
        minimum = branch.minimum_fraction_digits
        maximum = branch.maximum_fraction_digits
        if (
            spec.is_custom
            and minimum is not None
            and maximum is not None
            and minimum < maximum
            and _FRACTION_TEXT_RE.search(text)
        ):
            text = _trim_fraction_zeros(text, minimum)
    if branch.type == NumericType.SCIENTIFIC:
        text = to_exponential(value, branch.maximum_fraction_digits)
        text = text.replace("e", spec.mapper.symbol("exponential"), 1)
    return text


def format_with_spec(value: int | float | Decimal, spec: NumberFormatSpec) -> str | None:
    """Render one number through a compiled spec.

    Returns:
        Formatted text, or None when the spec comes from a custom pattern
        without a digit body
    """
    mapper = spec.mapper
    number = float(value)
    if math.isnan(number):
        return mapper.symbol("nan")
    if math.isinf(number):
        return mapper.symbol("infinity")
    if spec.positive.type is None or spec.negative.type is None:
        return None

    branch = spec.branch_for(number)
    number = abs(number)
    if branch.is_percent:
        number *= 100

    decimal_symbol = mapper.symbol("decimal")
    text = _digits_text(number, branch, spec)
    text = text.replace(".", decimal_symbol, 1)
    if spec.format == PIVOT_PATTERN:
        leading = _LEADING_DIGITS_RE.match(text)
        text = custom_pivot_format(int(leading.group(0)) if leading else 0)
    primary = branch.group_details.primary
    if branch.use_grouping and primary:
        text = group_numbers(
            text,
            primary,
            branch.group_separator or ",",
            decimal_symbol,
            branch.group_details.secondary,
        )
    text = mapper.localize_digits(text)

    if branch.nlead == NOT_APPLICABLE_PATTERN:
        return branch.nlead
    if text == "0" and spec.format == "0":
        return text + branch.nend
    return branch.nlead + text + branch.nend


def compile_number_formatter(
    culture: str,
    options: NumberFormatOptions,
    locale_data: LocaleData,
) -> NumberFormatter:
    """Compile a number formatter for a culture.

    Args:
        culture: Culture id, e.g. "en-US"
        options: Skeleton or custom pattern plus digit options
        locale_data: Snapshot the formatter reads from

    Returns:
        Callable rendering a number; ``None`` renders as ``None``

    Raises:
        ValidationError: If digit options are out of range or inconsistent

    Example:
        >>> from intlengine.core.options import NumberFormatOptions
        >>> from intlengine.data.store import LocaleData
        >>> fmt = compile_number_formatter("en-US", NumberFormatOptions(format="N2"), LocaleData.empty())
        >>> fmt(1234567.5)
        '1,234,567.50'
    """
    spec = build_number_format_spec(culture, options, locale_data)
    logger.debug("Compiled number formatter for %s: %r", culture, options.format or "N")

    def format_number(value: int | float | Decimal | None) -> str | None:
        if value is None:
            return None
        return format_with_spec(value, spec)

    return format_number
