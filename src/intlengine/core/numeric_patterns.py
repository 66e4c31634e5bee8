"""Numeric skeletons, custom numeric patterns and pattern export.

Two kinds of format request are accepted:

Skeletons:
    One letter plus optional fraction digits: ``N`` decimal, ``C`` currency,
    ``A`` accounting currency, ``P`` percent, ``E`` scientific. The locale's
    standard (or accounting) pattern supplies lead/trail literals, grouping
    sizes and default fraction digits.

Custom patterns:
    Up to three ``;``-separated branches (positive;negative;zero) such as
    ``#,##0.00;(#,##0.00)``. ``$`` and ``%`` outside quotes mark currency
    and percent. A missing negative branch is the positive branch prefixed
    with the locale minus sign.

Both kinds compile to a NumberFormatSpec of three NumberBranch values that
the formatter and parser consume.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, NamedTuple

from intlengine.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_CURRENCY_SYMBOL,
    FRACTION_DIGIT_RANGE,
    SIGNIFICANT_DIGIT_RANGE,
)
from intlengine.data.store import get_value
from intlengine.diagnostics import ErrorTemplate, ValidationError
from intlengine.enums import NumericType

from .numbering import NumberMapper, get_number_mapper
from .patterns import get_date_object, get_date_separator

if TYPE_CHECKING:
    from intlengine.data.store import LocaleData

    from .options import NumberFormatOptions

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Regexes
    "FORMAT_REGEX",
    "CURRENCY_FORMAT_REGEX",
    "NEGATIVE_DATA_REGEX",
    "CUSTOM_REGEX",
    # Data types
    "GroupDetails",
    "NumberBranch",
    "NumberFormatSpec",
    "NumericSkeleton",
    "PatternData",
    # Skeletons and locale patterns
    "is_numeric_skeleton",
    "resolve_numeric_skeleton",
    "get_symbol_pattern",
    "get_format_data",
    "get_grouping_details",
    "change_currency_symbol",
    "get_currency_symbol",
    # Custom patterns
    "custom_format",
    "custom_number_format",
    "mark_currency_percent",
    # Validation and compilation
    "validate_digit_options",
    "build_number_format_spec",
    # Synthetic patterns and export
    "build_fraction_pattern",
    "build_minimum_integer_pattern",
    "build_grouping_pattern",
    "get_number_pattern",
    "get_numeric_object",
]

FORMAT_REGEX: re.Pattern[str] = re.compile(r"(^[ncpae]{1})([0-1]?[0-9]|20)?$", re.IGNORECASE)
CURRENCY_FORMAT_REGEX: re.Pattern[str] = re.compile(r"(^[ca]{1})([0-1]?[0-9]|20)?$", re.IGNORECASE)

# Groups: 1 lead, 4 number body, 6 integer part, 7 fraction part, 10 trail.
NEGATIVE_DATA_REGEX: re.Pattern[str] = re.compile(
    r"^(('[^']+'|''|[^*#@0,.E])*)(\*.)?((([#,]*[0,]*0+)(\.0*[0-9]*#*)?)|([#,]*@+#*))"
    r"(E\+?0+)?(('[^']+'|''|[^*#@0,.E])*)$"
)
CUSTOM_REGEX: re.Pattern[str] = re.compile(
    r"^(('[^']+'|''|[^*#@0,.])*)(\*.)?((([0#,]*[0,]*[0#]*[0# ]*)(\.[0#]*)?)|([#,]*@+#*))"
    r"(E\+?0+)?(('[^']+'|''|[^*#@0,.E])*)$"
)

_SKELETON_TYPES: dict[str, NumericType] = {
    "N": NumericType.DECIMAL,
    "C": NumericType.CURRENCY,
    "A": NumericType.CURRENCY,
    "P": NumericType.PERCENT,
    "E": NumericType.SCIENTIFIC,
}

_CURRENCY_SIGN = "¤"
_FRACTION_DIGIT_RE = re.compile(r"[0-9]")
_PATTERN_SYMBOL_RE = re.compile(r"[,.]")


class GroupDetails(NamedTuple):
    """Primary and secondary digit-group sizes (None when ungrouped)."""

    primary: int | None = None
    secondary: int | None = None


@dataclass(frozen=True, slots=True)
class NumericSkeleton:
    """A parsed numeric skeleton such as ``C2``.

    Attributes:
        type: Numeric type, None when the letter is not a skeleton letter
        is_account: Skeleton letter was ``A``
        fraction_digits: Fixed fraction digits, None when not given
    """

    type: NumericType | None = None
    is_account: bool = False
    fraction_digits: int | None = None


@dataclass(frozen=True, slots=True)
class PatternData:
    """Literals and fraction defaults read from one locale pattern branch."""

    nlead: str = ""
    nend: str = ""
    group_pattern: str | None = None
    minimum_fraction: int | None = None
    maximum_fraction: int | None = None


@dataclass(frozen=True, slots=True)
class NumberBranch:
    """Everything needed to render one sign branch of a numeric format.

    Attributes:
        nlead: Literal text before the digits
        nend: Literal text after the digits
        type: Numeric type; None marks an uncompilable custom pattern
        is_currency: Branch carries a currency symbol
        is_percent: Value is multiplied by 100
        use_grouping: Insert group separators
        group_separator: Separator inserted between digit groups
        group_details: Primary/secondary group sizes
        minimum_integer_digits: Zero-pad the integer part to this width
        minimum_fraction_digits: Fewest fraction digits shown
        maximum_fraction_digits: Most fraction digits shown
        minimum_significant_digits: Significant-digit mode lower bound
        maximum_significant_digits: Significant-digit mode upper bound
        group_one: Significant-digit mode is active
    """

    nlead: str = ""
    nend: str = ""
    type: NumericType | None = NumericType.DECIMAL
    is_currency: bool = False
    is_percent: bool = False
    use_grouping: bool = False
    group_separator: str = ","
    group_details: GroupDetails = GroupDetails()
    minimum_integer_digits: int | None = None
    minimum_fraction_digits: int | None = None
    maximum_fraction_digits: int | None = None
    minimum_significant_digits: int | None = None
    maximum_significant_digits: int | None = None
    group_one: bool = False


@dataclass(frozen=True, slots=True)
class NumberFormatSpec:
    """Compiled numeric format: three sign branches plus the numeral mapper.

    Attributes:
        positive: Branch for values above zero
        negative: Branch for values below zero (rendered from the magnitude)
        zero: Branch for zero; the positive branch when None
        format: The format string the spec was built from
        is_custom: Built from a custom pattern rather than a skeleton
        mapper: Digit and symbol mapper of the culture
    """

    positive: NumberBranch
    negative: NumberBranch
    zero: NumberBranch | None
    format: str | None
    is_custom: bool
    mapper: NumberMapper

    def branch_for(self, value: float) -> NumberBranch:
        if value < 0:
            return self.negative
        if value == 0:
            return self.zero or self.positive
        return self.positive


# ============================================================================
# SKELETONS AND LOCALE PATTERNS
# ============================================================================


def is_numeric_skeleton(fmt: str | None) -> bool:
    """True when ``fmt`` is empty or a skeleton rather than a custom pattern."""
    return not fmt or FORMAT_REGEX.search(fmt) is not None


def resolve_numeric_skeleton(skeleton: str) -> NumericSkeleton:
    """Split a skeleton into type, accounting flag and fraction digits.

    Example:
        >>> resolve_numeric_skeleton("c2")
        NumericSkeleton(type=<NumericType.CURRENCY: 'currency'>, is_account=False, fraction_digits=2)
    """
    match = FORMAT_REGEX.search(skeleton)
    letter = match.group(1).upper() if match else ""
    fraction_digits = None
    if match and len(skeleton) > 1 and match.group(2):
        fraction_digits = int(match.group(2))
    return NumericSkeleton(
        type=_SKELETON_TYPES.get(letter),
        is_account=letter == "A",
        fraction_digits=fraction_digits,
    )


def get_symbol_pattern(
    numeric_type: str | None,
    numbering_system: str,
    numeric_object: Mapping,
    is_account: bool,
) -> str:
    """Locale pattern for a type, accounting falling back to standard."""
    base = f"{numeric_type}Formats-numberSystem-{numbering_system}"
    pattern = get_value(f"{base}.{'accounting' if is_account else 'standard'}", numeric_object)
    if not pattern and is_account:
        pattern = get_value(f"{base}.standard", numeric_object)
    return pattern or ""


def change_currency_symbol(value: str | None, symbol: str) -> str:
    """Replace the ``$`` placeholder by ``symbol``; trim when the symbol is empty."""
    if not value:
        return ""
    value = value.replace(DEFAULT_CURRENCY_SYMBOL, symbol, 1)
    return value.strip() if symbol == "" else value


def get_format_data(
    pattern: str,
    need_fraction: bool,
    currency_symbol: str,
    *,
    fraction_only: bool = False,
) -> PatternData:
    """Read lead/trail literals and fraction defaults from one pattern branch.

    Example:
        >>> get_format_data("$#,##0.00", True, "€")
        PatternData(nlead='€', nend='', group_pattern='#,##0.00', minimum_fraction=2, maximum_fraction=2)
    """
    match = CUSTOM_REGEX.search(pattern)
    if match is None:
        return PatternData()
    nlead = nend = ""
    group_pattern = None
    if not fraction_only:
        nlead = change_currency_symbol(match.group(1), currency_symbol)
        nend = change_currency_symbol(match.group(10), currency_symbol)
        group_pattern = match.group(4)
    minimum = maximum = None
    fraction = match.group(7)
    if fraction and need_fraction:
        minimum = len(_FRACTION_DIGIT_RE.findall(fraction))
        maximum = len(fraction) - 1
    return PatternData(nlead, nend, group_pattern, minimum, maximum)


def get_grouping_details(pattern: str) -> GroupDetails:
    """Group sizes from the comma positions of a locale pattern.

    Example:
        >>> get_grouping_details("#,##,##0.###")
        GroupDetails(primary=3, secondary=2)
    """
    match = NEGATIVE_DATA_REGEX.search(pattern)
    if not match or not match.group(4):
        return GroupDetails()
    body = match.group(4)
    last = body.rfind(",")
    if last == -1:
        return GroupDetails()
    primary = len(body.split(".")[0]) - last - 1
    previous = body.rfind(",", 0, last)
    secondary = last - 1 - previous if previous != -1 else None
    return GroupDetails(primary, secondary)


def get_currency_symbol(
    numeric_object: Mapping,
    currency_code: str,
    alt_symbol: str | None = None,
    ignore_currency: bool = False,
) -> str:
    """Locale symbol for a currency code.

    Tries ``alt_symbol`` (or ``symbol``), then ``symbol-alt-narrow``, then ``$``.
    """
    if ignore_currency:
        return DEFAULT_CURRENCY_SYMBOL
    return (
        get_value(f"currencies.{currency_code}.{alt_symbol or 'symbol'}", numeric_object)
        or get_value(f"currencies.{currency_code}.symbol-alt-narrow", numeric_object)
        or DEFAULT_CURRENCY_SYMBOL
    )


# ============================================================================
# CUSTOM PATTERNS
# ============================================================================


def mark_currency_percent(nlead: str, nend: str, marker: str, symbol: str) -> tuple[str, str, bool]:
    """Replace the first unquoted ``marker`` in lead, else trail, by ``symbol``.

    Returns:
        (nlead, nend, found)
    """
    parts = [nlead, nend]
    for index, part in enumerate(parts):
        loc = part.find(marker)
        if loc != -1 and (loc < part.find("'") or loc > part.rfind("'")):
            parts[index] = part[:loc] + symbol + part[loc + 1 :]
            return parts[0], parts[1], True
    return nlead, nend, False


def custom_number_format(
    fmt: str,
    *,
    currency_symbol: str | None = None,
    percent_symbol: str = "%",
    numeric_object: Mapping | None = None,
    mapper: NumberMapper | None = None,
) -> NumberBranch:
    """Compile one branch of a custom numeric pattern.

    Args:
        fmt: One ``;``-separated branch, e.g. ``#,##0.00 'units'``
        currency_symbol: Symbol replacing an unquoted ``$``; None skips
            currency detection
        percent_symbol: Symbol replacing an unquoted ``%``
        numeric_object: Culture ``numbers`` subtree; enables locale group sizes
        mapper: Culture mapper; supplies the group separator

    Returns:
        NumberBranch; ``type`` is None when the pattern has no digit body
    """
    match = CUSTOM_REGEX.search(fmt)
    if match is None or (match.group(5) == "" and fmt != "N/A"):
        return NumberBranch(type=None, minimum_fraction_digits=0, maximum_fraction_digits=0)

    nlead = match.group(1) or ""
    nend = match.group(10) or ""
    integer_part = match.group(6) or ""
    space_capture = integer_part.endswith(" ")
    space_grouping = " " in integer_part.removesuffix(" ")
    use_grouping = "," in integer_part or space_grouping
    integer_part = integer_part.replace(",", "").rstrip(" ")

    minimum_integer = None
    if "0" in integer_part:
        minimum_integer = len(integer_part) - integer_part.index("0")

    minimum_fraction = maximum_fraction = 0
    fraction_part = match.group(7)
    if fraction_part is not None:
        minimum_fraction = max(fraction_part.rfind("0"), 0)
        maximum_fraction = fraction_part.rfind("#")
        if maximum_fraction < minimum_fraction:
            maximum_fraction = minimum_fraction

    numeric_type = NumericType.DECIMAL
    is_currency = is_percent = False
    if currency_symbol is not None:
        nlead, nend, is_currency = mark_currency_percent(nlead, nend, "$", currency_symbol)
    if not is_currency:
        nlead, nend, is_percent = mark_currency_percent(nlead, nend, "%", percent_symbol)
    if is_currency:
        numeric_type = NumericType.CURRENCY
    elif is_percent:
        numeric_type = NumericType.PERCENT

    group_separator = ","
    group_details = GroupDetails()
    if use_grouping and numeric_object is not None and mapper is not None:
        group_separator = " " if space_grouping else mapper.symbol("group")
        symbol_pattern = get_symbol_pattern(numeric_type, mapper.numbering_system, numeric_object, False)
        group_details = get_grouping_details(symbol_pattern.split(";")[0])

    nlead = nlead.replace("'", "")
    nend = nend.replace("'", "")
    if space_capture:
        nend = " " + nend

    return NumberBranch(
        nlead=nlead,
        nend=nend,
        type=numeric_type,
        is_currency=is_currency,
        is_percent=is_percent,
        use_grouping=use_grouping,
        group_separator=group_separator,
        group_details=group_details,
        minimum_integer_digits=minimum_integer,
        minimum_fraction_digits=minimum_fraction,
        maximum_fraction_digits=maximum_fraction,
    )


def custom_format(
    fmt: str,
    *,
    minus_symbol: str = "-",
    currency_symbol: str | None = None,
    percent_symbol: str = "%",
    numeric_object: Mapping | None = None,
    mapper: NumberMapper | None = None,
) -> tuple[NumberBranch, NumberBranch, NumberBranch | None]:
    """Compile a full custom pattern into (positive, negative, zero) branches.

    Example:
        >>> positive, negative, zero = custom_format("#,##0.00;(#,##0.00)")
        >>> negative.nlead, negative.nend, zero
        ('(', ')', None)
    """
    segments = fmt.split(";")
    branches = [
        custom_number_format(
            segment,
            currency_symbol=currency_symbol,
            percent_symbol=percent_symbol,
            numeric_object=numeric_object,
            mapper=mapper,
        )
        for segment in segments[:3]
    ]
    positive = branches[0]
    if len(branches) > 1:
        negative = branches[1]
    else:
        negative = replace(positive, nlead=(minus_symbol or "-") + positive.nlead)
    zero = branches[2] if len(branches) > 2 else None
    return positive, negative, zero


# ============================================================================
# VALIDATION AND COMPILATION
# ============================================================================


def _check_range(name: str, value: int, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if value < low or value > high:
        raise ValidationError(ErrorTemplate.digit_range_invalid(name, value, low, high))


def validate_digit_options(options: NumberFormatOptions) -> bool:
    """Validate digit-count options.

    Significant digits must both be present and within 1..21; fraction
    digits within 0..20. A maximum below its minimum is rejected.

    Returns:
        True when significant-digit mode is requested

    Raises:
        ValidationError: On an out-of-range, inverted or incomplete pair
    """
    minimum_sig = options.minimum_significant_digits
    maximum_sig = options.maximum_significant_digits
    if maximum_sig is not None:
        _check_range("maximum_significant_digits", maximum_sig, SIGNIFICANT_DIGIT_RANGE)
    if minimum_sig is not None:
        _check_range("minimum_significant_digits", minimum_sig, SIGNIFICANT_DIGIT_RANGE)

    minimum_frac = options.minimum_fraction_digits
    maximum_frac = options.maximum_fraction_digits
    if maximum_frac is not None:
        _check_range("maximum_fraction_digits", maximum_frac, FRACTION_DIGIT_RANGE)
    if minimum_frac is not None:
        _check_range("minimum_fraction_digits", minimum_frac, FRACTION_DIGIT_RANGE)
    if minimum_frac is not None and maximum_frac is not None and maximum_frac < minimum_frac:
        raise ValidationError(
            ErrorTemplate.digit_order_invalid(
                "minimum_fraction_digits", minimum_frac, "maximum_fraction_digits", maximum_frac
            )
        )

    if minimum_sig is not None and maximum_sig is not None:
        if maximum_sig < minimum_sig:
            raise ValidationError(
                ErrorTemplate.digit_order_invalid(
                    "minimum_significant_digits", minimum_sig, "maximum_significant_digits", maximum_sig
                )
            )
        return True
    if minimum_sig is not None:
        raise ValidationError(
            ErrorTemplate.digit_pair_incomplete("minimum_significant_digits", "maximum_significant_digits")
        )
    if maximum_sig is not None:
        raise ValidationError(
            ErrorTemplate.digit_pair_incomplete("maximum_significant_digits", "minimum_significant_digits")
        )
    return False


def _user_overrides(options: NumberFormatOptions, group_one: bool) -> dict[str, Any]:
    overrides: dict[str, Any] = dict(options.digit_options())
    if group_one:
        overrides["group_one"] = True
    return overrides


def _build_custom_spec(
    options: NumberFormatOptions,
    mapper: NumberMapper,
    numeric_object: Mapping,
    currency_symbol: str,
) -> NumberFormatSpec:
    fmt = options.format or ""
    # custom patterns always format in fraction-digit mode
    validate_digit_options(options)
    positive, negative, zero = custom_format(
        fmt,
        minus_symbol=mapper.symbol("minusSign"),
        currency_symbol=currency_symbol,
        percent_symbol=mapper.symbol("percentSign"),
        numeric_object=numeric_object,
        mapper=mapper,
    )
    overrides = _user_overrides(options, False)
    if options.use_grouping is not None:
        overrides["use_grouping"] = positive.use_grouping if options.use_grouping else False
    return NumberFormatSpec(
        positive=replace(positive, **overrides),
        negative=replace(negative, **overrides),
        zero=zero,
        format=fmt,
        is_custom=True,
        mapper=mapper,
    )


def _build_skeleton_spec(
    options: NumberFormatOptions,
    mapper: NumberMapper,
    numeric_object: Mapping,
    currency_symbol: str,
) -> NumberFormatSpec:
    skeleton = resolve_numeric_skeleton(options.format or "N")
    numeric_type = skeleton.type
    is_currency = numeric_type == NumericType.CURRENCY
    is_percent = numeric_type == NumericType.PERCENT
    symbol_pattern = get_symbol_pattern(
        numeric_type, mapper.numbering_system, numeric_object, skeleton.is_account
    )
    group_one = validate_digit_options(options)

    minimum_fraction = options.minimum_fraction_digits
    maximum_fraction = options.maximum_fraction_digits
    if skeleton.fraction_digits is not None:
        minimum_fraction = maximum_fraction = skeleton.fraction_digits
    use_grouping = True if options.use_grouping is None else options.use_grouping

    if is_currency:
        symbol_pattern = symbol_pattern.replace(_CURRENCY_SIGN, DEFAULT_CURRENCY_SYMBOL)
    split = symbol_pattern.split(";")
    negative_data = get_format_data(
        split[1] if len(split) > 1 and split[1] else "-" + split[0], True, currency_symbol
    )
    positive_data = get_format_data(split[0], False, currency_symbol)

    group_separator = ","
    group_details = GroupDetails()
    if use_grouping:
        group_separator = mapper.symbol("group")
        group_details = get_grouping_details(split[0])

    if minimum_fraction is None:
        minimum_fraction = negative_data.minimum_fraction
    if maximum_fraction is None:
        maximum_fraction = negative_data.maximum_fraction
        if maximum_fraction is None and is_percent:
            maximum_fraction = 0
    if minimum_fraction is not None and maximum_fraction is not None and minimum_fraction > maximum_fraction:
        maximum_fraction = minimum_fraction

    shared = NumberBranch(
        type=numeric_type,
        is_currency=is_currency,
        is_percent=is_percent,
        use_grouping=use_grouping,
        group_separator=group_separator,
        group_details=group_details,
        minimum_integer_digits=options.minimum_integer_digits,
        minimum_fraction_digits=minimum_fraction,
        maximum_fraction_digits=maximum_fraction,
        minimum_significant_digits=options.minimum_significant_digits,
        maximum_significant_digits=options.maximum_significant_digits,
        group_one=group_one,
    )
    return NumberFormatSpec(
        positive=replace(shared, nlead=positive_data.nlead, nend=positive_data.nend),
        negative=replace(shared, nlead=negative_data.nlead, nend=negative_data.nend),
        zero=None,
        format=options.format,
        is_custom=False,
        mapper=mapper,
    )


def build_number_format_spec(
    culture: str,
    options: NumberFormatOptions,
    locale_data: LocaleData,
) -> NumberFormatSpec:
    """Compile number format options against a culture.

    Raises:
        ValidationError: If digit options are out of range or inconsistent
    """
    main_object = locale_data.main_object(culture)
    numeric_object = get_value("numbers", main_object) or {}
    mapper = get_number_mapper(main_object, locale_data.numbering_systems)
    currency_symbol = get_currency_symbol(
        numeric_object,
        options.currency or DEFAULT_CURRENCY_CODE,
        options.alt_symbol,
        options.ignore_currency,
    )
    if is_numeric_skeleton(options.format):
        return _build_skeleton_spec(options, mapper, numeric_object, currency_symbol)
    return _build_custom_spec(options, mapper, numeric_object, currency_symbol)


# ============================================================================
# SYNTHETIC PATTERNS AND EXPORT
# ============================================================================


def build_fraction_pattern(pattern: str, minimum: int, maximum: int | None = None) -> str:
    """Append a fraction run of ``minimum`` zeros then optional ``#`` digits.

    Example:
        >>> build_fraction_pattern("###0", 1, 3)
        '###0.0##'
    """
    pattern += "." + "0" * minimum
    if maximum is not None and minimum < maximum:
        pattern += "#" * (maximum - minimum)
    return pattern


def build_minimum_integer_pattern(pattern: str, digits: int) -> str:
    """Replace the integer run by ``digits`` zeros, keeping the fraction.

    Example:
        >>> build_minimum_integer_pattern("###0.00", 3)
        '000.00'
    """
    parts = pattern.split(".")
    integer = "0" * digits
    return integer + "." + parts[1] if len(parts) > 1 and parts[1] else integer


def build_grouping_pattern(pattern: str) -> str:
    """Insert group commas every three integer positions.

    Example:
        >>> build_grouping_pattern("###0.00")
        '###,##0.00'
    """
    parts = pattern.split(".")
    integer = parts[0]
    padding = 3 - len(integer) % 3
    integer = "#" * padding if padding in (1, 2) else ""
    integer += parts[0]
    groups = [integer[max(i - 3, 0) : i] for i in range(len(integer), 0, -3)]
    grouped = ",".join(reversed(groups))
    return grouped + "." + parts[1] if len(parts) > 1 and parts[1] else grouped


def _localize_pattern_symbols(pattern: str, mapper: NumberMapper) -> str:
    group = mapper.symbol("group")
    decimal = mapper.symbol("decimal")
    seen_decimal = False

    def substitute(match: re.Match[str]) -> str:
        nonlocal seen_decimal
        if match.group(0) == ",":
            return group
        if seen_decimal:
            return "."
        seen_decimal = True
        return decimal

    return _PATTERN_SYMBOL_RE.sub(substitute, pattern)


def get_number_pattern(
    culture: str,
    options: NumberFormatOptions,
    locale_data: LocaleData,
    *,
    excel: bool = False,
) -> str:
    """Effective numeric pattern for a skeleton or custom format.

    Skeletons are rendered as a synthetic pattern built from the digit
    options; currency skeletons are wrapped in the locale currency literals
    and, unless ``excel`` is set, use the locale group and decimal symbols.
    Custom formats come back with single quotes turned into double quotes.

    Example:
        >>> from intlengine.data.store import LocaleData
        >>> from intlengine.core.options import NumberFormatOptions
        >>> get_number_pattern("en-US", NumberFormatOptions(format="N2", use_grouping=True), LocaleData.empty())
        '###,##0.00'
    """
    fmt = options.format
    main_object = locale_data.main_object(culture)
    numeric_object = get_value("numbers", main_object) or {}

    mapper: NumberMapper | None = None
    currency_positive = currency_negative = PatternData()
    has_negative_pattern = False
    minimum_fraction_default: int | None = None
    currency_match = CURRENCY_FORMAT_REGEX.search(fmt) if fmt else None
    if currency_match:
        mapper = get_number_mapper(main_object, locale_data.numbering_systems)
        symbol = get_currency_symbol(
            numeric_object, options.currency or DEFAULT_CURRENCY_CODE, options.alt_symbol
        )
        is_account = "a" in currency_match.group(1).lower()
        symbol_pattern = get_symbol_pattern(
            NumericType.CURRENCY, mapper.numbering_system, numeric_object, is_account
        ).replace(_CURRENCY_SIGN, symbol)
        split = symbol_pattern.split(";")
        has_negative_pattern = len(split) > 1
        currency_negative = get_format_data(
            split[1] if has_negative_pattern and split[1] else "-" + split[0], True, symbol
        )
        currency_positive = get_format_data(split[0], False, symbol)
        if (
            not currency_match.group(2)
            and not options.minimum_fraction_digits
            and not options.maximum_fraction_digits
        ):
            minimum_fraction_default = get_format_data(
                split[0], True, "", fraction_only=True
            ).minimum_fraction

    if is_numeric_skeleton(fmt):
        skeleton = resolve_numeric_skeleton(fmt or "N")
        minimum = options.minimum_fraction_digits
        maximum = options.maximum_fraction_digits
        pattern = "###0"
        if skeleton.fraction_digits or minimum or maximum or minimum_fraction_default:
            if skeleton.fraction_digits:
                minimum = maximum = skeleton.fraction_digits
            pattern = build_fraction_pattern(
                pattern,
                minimum_fraction_default or skeleton.fraction_digits or minimum or 0,
                maximum or 0,
            )
        if options.minimum_integer_digits:
            pattern = build_minimum_integer_pattern(pattern, options.minimum_integer_digits)
        if options.use_grouping:
            pattern = build_grouping_pattern(pattern)
        if skeleton.type == NumericType.CURRENCY:
            body = pattern
            pattern = currency_positive.nlead + body + currency_positive.nend
            if has_negative_pattern:
                pattern += ";" + currency_negative.nlead + body + currency_negative.nend
        elif skeleton.type == NumericType.PERCENT:
            pattern += " %"
    else:
        pattern = (fmt or "").replace("'", '"')

    if mapper is not None and not excel:
        pattern = _localize_pattern_symbols(pattern, mapper)
    return pattern


def get_numeric_object(
    culture: str,
    locale_data: LocaleData,
    numeric_type: str = NumericType.DECIMAL,
) -> dict[str, Any]:
    """Locale number symbols with the type's default fraction digits.

    Returns:
        Symbol table (decimal, group, minusSign, ...) plus
        ``minimumFraction``/``maximumFraction`` when the standard pattern
        has a fraction run, and ``dateSeparator``
    """
    main_object = locale_data.main_object(culture)
    numeric_object = get_value("numbers", main_object) or {}
    mapper = get_number_mapper(main_object, locale_data.numbering_systems)
    result: dict[str, Any] = dict(mapper.symbols)
    pattern = get_symbol_pattern(numeric_type, mapper.numbering_system, numeric_object, False)
    fraction = get_format_data(pattern, True, "", fraction_only=True)
    if fraction.minimum_fraction is not None:
        result["minimumFraction"] = fraction.minimum_fraction
        result["maximumFraction"] = fraction.maximum_fraction
    result["dateSeparator"] = get_date_separator(get_date_object(main_object, "gregorian"))
    return result
