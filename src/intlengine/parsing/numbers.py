"""Number parsing, the inverse of the number formatter.

Localized symbols and digits are first mapped to their ASCII forms, then a
generic numeric shape recovers the lead literal, the digit body, an optional
exponent and the trail literal. The literals decide the sign by comparison
with the negative branch of the format.

Failure to recognize a number yields ``float("nan")``; the parser never
raises on bad input.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from intlengine.constants import DEFAULT_CURRENCY_SYMBOL, MAX_PARSE_INPUT_LENGTH
from intlengine.core.number_text import to_fixed
from intlengine.core.numbering import NumericOptions, get_current_numeric_options
from intlengine.core.numeric_patterns import (
    custom_format,
    get_format_data,
    get_symbol_pattern,
    is_numeric_skeleton,
    resolve_numeric_skeleton,
)
from intlengine.data.store import get_value
from intlengine.enums import NumericType

if TYPE_CHECKING:
    from intlengine.core.options import NumberFormatOptions
    from intlengine.data.store import LocaleData

__all__ = [
    "NumberParseSpec",
    "NumberParser",
    "ParseBranch",
    "compile_number_parser",
    "parse_with_spec",
]

logger = logging.getLogger(__name__)

type NumberParser = Callable[[str], float]

_NUMBER_SHAPE_RE = re.compile(r"^([^0-9]*)(([0-9,]*[0-9]+)(\.[0-9]+)?)([Ee][+-]?[0-9]+)?([^0-9]*)$")

_CURRENCY_SIGN = "¤"


@dataclass(frozen=True, slots=True)
class ParseBranch:
    """Literals and rounding of one sign branch, as seen by the parser."""

    nlead: str = ""
    nend: str = ""
    is_percent: bool = False
    maximum_fraction_digits: int | None = None


@dataclass(frozen=True, slots=True)
class NumberParseSpec:
    """Compiled number parse options.

    Attributes:
        positive: Positive branch literals
        negative: Negative branch literals
        custom: Built from a custom pattern (exact literal comparison)
        type: Skeleton numeric type, None for custom patterns
        fraction_digits: Skeleton fraction digits
        maximum_fraction_digits: Rounding limit from the options
        infinity: Locale infinity symbol
        numeric: Digit and symbol mapping of the culture
    """

    positive: ParseBranch
    negative: ParseBranch
    custom: bool
    type: NumericType | None
    fraction_digits: int | None
    maximum_fraction_digits: int | None
    infinity: str
    numeric: NumericOptions

    def is_negative(self, lead: str, end: str) -> bool:
        if self.custom:
            return lead == self.negative.nlead and end == self.negative.nend
        return self.negative.nlead in lead and self.negative.nend in end


def _build_spec(culture: str, options: NumberFormatOptions, locale_data: LocaleData) -> NumberParseSpec:
    main_object = locale_data.main_object(culture)
    numeric_object = get_value("numbers", main_object) or {}
    numeric = get_current_numeric_options(main_object, locale_data.numbering_systems, need_symbols=True)

    numeric_type: NumericType | None = None
    fraction_digits = maximum_fraction_digits = None
    if is_numeric_skeleton(options.format):
        skeleton = resolve_numeric_skeleton(options.format or "N")
        custom = False
        numeric_type = skeleton.type
        fraction_digits = skeleton.fraction_digits
        if not fraction_digits and options.maximum_fraction_digits:
            maximum_fraction_digits = options.maximum_fraction_digits
        positive = negative = ParseBranch()
        symbol_pattern = get_symbol_pattern(
            numeric_type, numeric.numbering_system, numeric_object, skeleton.is_account
        )
        if symbol_pattern:
            split = symbol_pattern.replace(_CURRENCY_SIGN, DEFAULT_CURRENCY_SYMBOL).split(";")
            negative_data = get_format_data(
                split[1] if len(split) > 1 and split[1] else "-" + split[0], True, ""
            )
            positive_data = get_format_data(split[0], True, "")
            positive = ParseBranch(positive_data.nlead, positive_data.nend)
            negative = ParseBranch(negative_data.nlead, negative_data.nend)
    else:
        custom = True
        positive_branch, negative_branch, _ = custom_format(options.format or "")
        positive = ParseBranch(
            positive_branch.nlead,
            positive_branch.nend,
            positive_branch.is_percent,
            positive_branch.maximum_fraction_digits,
        )
        negative = ParseBranch(
            negative_branch.nlead,
            negative_branch.nend,
            negative_branch.is_percent,
            negative_branch.maximum_fraction_digits,
        )

    return NumberParseSpec(
        positive=positive,
        negative=negative,
        custom=custom,
        type=numeric_type,
        fraction_digits=fraction_digits,
        maximum_fraction_digits=maximum_fraction_digits,
        infinity=numeric.symbols.get("infinity", ""),
        numeric=numeric,
    )


def _round_to(number: float, digits: int | None) -> float:
    if digits is None or not math.isfinite(number):
        return number
    return float(to_fixed(number, digits))


def parse_with_spec(value: str, spec: NumberParseSpec) -> float:
    """Parse one string through a compiled spec.

    Returns:
        The number, ``math.inf`` when the locale infinity symbol appears, or
        NaN when the input is not recognized
    """
    if not isinstance(value, str) or len(value) > MAX_PARSE_INPUT_LENGTH:
        return math.nan
    if spec.infinity and spec.infinity in value:
        return math.inf

    text = spec.numeric.canonicalize_symbols(value)
    text = spec.numeric.delocalize_digits(text)
    if "-" in text:
        text = text.replace("-.", "-0.", 1)
    if text.startswith("."):
        text = "0" + text
    match = _NUMBER_SHAPE_RE.match(text)
    if match is None:
        logger.debug("Number %r not recognized", value)
        return math.nan

    lead, body, exponent, end = match.group(1), match.group(2), match.group(5), match.group(6)
    negative = spec.is_negative(lead, end)
    branch = spec.negative if negative else spec.positive
    body = body.replace(",", "")
    if exponent:
        body += exponent
    number = float(body)
    if spec.type == NumericType.PERCENT or branch.is_percent:
        number /= 100

    if spec.custom:
        number = _round_to(number, branch.maximum_fraction_digits)
    elif spec.fraction_digits:
        number = _round_to(number, spec.fraction_digits)
    if spec.maximum_fraction_digits:
        _, _, fraction = body.partition(".")
        if len(fraction) > spec.maximum_fraction_digits:
            number = _round_to(number, spec.maximum_fraction_digits)
    return -number if negative else number


def compile_number_parser(
    culture: str,
    options: NumberFormatOptions,
    locale_data: LocaleData,
) -> NumberParser:
    """Compile a number parser for a culture.

    Args:
        culture: Culture id, e.g. "en-US"
        options: Skeleton or custom pattern; "N" when omitted
        locale_data: Snapshot the parser reads from

    Returns:
        Callable returning a float (NaN for unrecognized input)

    Example:
        >>> from intlengine.core.options import NumberFormatOptions
        >>> from intlengine.data.store import LocaleData
        >>> parse = compile_number_parser("en-US", NumberFormatOptions(format="N2"), LocaleData.empty())
        >>> parse("-1,234.567")
        -1234.57
    """
    spec = _build_spec(culture, options, locale_data)
    logger.debug("Compiled number parser for %s: %r", culture, options.format or "N")

    def parse_number(value: str) -> float:
        return parse_with_spec(value, spec)

    return parse_number
