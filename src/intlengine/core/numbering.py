"""Numbering-system digit tables and symbol lookups.

Every formatter and parser works on ASCII digits internally. This module
builds the two translation directions for the culture's default numbering
system:

- NumberMapper: ASCII digit -> localized digit, plus the locale's number
  symbols and time separator (formatting).
- NumericOptions: localized digit -> ASCII digit, a one-digit regex class and,
  on request, localized symbol -> canonical ASCII symbol (parsing).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from intlengine.constants import DEFAULT_NUMBERING_SYSTEM
from intlengine.data.store import get_value

__all__ = [
    "CANONICAL_SYMBOLS",
    "LATIN_DIGITS",
    "NumberMapper",
    "NumericOptions",
    "get_current_numeric_options",
    "get_number_mapper",
    "get_numbering_system_name",
]

LATIN_DIGITS: str = "0123456789"

# Canonical (ASCII) form of each locale number symbol recognized by parsers.
CANONICAL_SYMBOLS: Mapping[str, str] = MappingProxyType({
    "decimal": ".",
    "group": ",",
    "percentSign": "%",
    "plusSign": "+",
    "minusSign": "-",
    "infinity": "∞",
    "nan": "NaN",
    "exponential": "E",
})


def get_numbering_system_name(main_object: Mapping) -> str:
    """Default numbering system of a culture, ``latn`` when unspecified."""
    return get_value("numbers.defaultNumberingSystem", main_object) or DEFAULT_NUMBERING_SYSTEM


def _digits_for(system: str, numbering_systems: Mapping) -> str:
    digits = get_value(f"{system}._digits", numbering_systems)
    if isinstance(digits, str) and len(digits) == 10:
        return digits
    return LATIN_DIGITS


def _alternation(keys: list[str]) -> re.Pattern[str] | None:
    keys = sorted((k for k in keys if k), key=len, reverse=True)
    if not keys:
        return None
    return re.compile("|".join(re.escape(k) for k in keys))


@dataclass(frozen=True, slots=True)
class NumberMapper:
    """Forward (formatting) view of a numbering system.

    Attributes:
        numbering_system: System id, e.g. "latn" or "arab"
        symbols: Locale symbol table (decimal, group, minusSign, ...)
        digits: The ten localized digits in order 0..9
    """

    numbering_system: str
    symbols: Mapping[str, str]
    digits: str = LATIN_DIGITS

    @property
    def time_separator(self) -> str:
        return self.symbols.get("timeSeparator", ":")

    def symbol(self, name: str) -> str:
        """Locale symbol by CLDR name, falling back to the ASCII form."""
        return self.symbols.get(name) or CANONICAL_SYMBOLS.get(name, "")

    def localize_digits(self, text: str) -> str:
        """Replace ASCII digits by the localized digits."""
        if self.digits == LATIN_DIGITS:
            return text
        return text.translate(str.maketrans(LATIN_DIGITS, self.digits))


@dataclass(frozen=True, slots=True)
class NumericOptions:
    """Reverse (parsing) view of a numbering system.

    Attributes:
        numbering_system: System id
        digits: The ten localized digits in order 0..9
        digit_class: Regex matching one localized digit
        symbols: Locale symbol table (empty unless symbols were requested)
        symbol_match: Localized symbol -> canonical ASCII symbol
    """

    numbering_system: str
    digits: str
    digit_class: str
    symbols: Mapping[str, str] = MappingProxyType({})
    symbol_match: Mapping[str, str] = MappingProxyType({})
    _symbol_regex: re.Pattern[str] | None = None

    def delocalize_digits(self, text: str) -> str:
        """Replace localized digits by ASCII digits."""
        if self.digits == LATIN_DIGITS:
            return text
        return text.translate(str.maketrans(self.digits, LATIN_DIGITS))

    def canonicalize_symbols(self, text: str) -> str:
        """Replace every localized number symbol by its ASCII form in one pass."""
        if self._symbol_regex is None:
            return text
        return self._symbol_regex.sub(lambda m: self.symbol_match[m.group(0)], text)


def get_number_mapper(main_object: Mapping, numbering_systems: Mapping) -> NumberMapper:
    """Build the formatting view for a culture's default numbering system."""
    system = get_numbering_system_name(main_object)
    symbols = get_value(f"numbers.symbols-numberSystem-{system}", main_object) or {}
    return NumberMapper(
        numbering_system=system,
        symbols=MappingProxyType(dict(symbols)),
        digits=_digits_for(system, numbering_systems),
    )


def get_current_numeric_options(
    main_object: Mapping,
    numbering_systems: Mapping,
    *,
    need_symbols: bool = False,
) -> NumericOptions:
    """Build the parsing view for a culture's default numbering system.

    Args:
        main_object: Culture subtree (``main.<culture>``)
        numbering_systems: ``supplemental.numberingSystems`` table
        need_symbols: Also build the localized-symbol lookup

    Returns:
        NumericOptions for the culture
    """
    system = get_numbering_system_name(main_object)
    digits = _digits_for(system, numbering_systems)
    digit_class = "[" + "".join(re.escape(d) for d in digits) + "]"
    if not need_symbols:
        return NumericOptions(numbering_system=system, digits=digits, digit_class=digit_class)

    symbols = dict(get_value(f"numbers.symbols-numberSystem-{system}", main_object) or {})
    symbol_match: dict[str, str] = {}
    for name, canonical in CANONICAL_SYMBOLS.items():
        localized = symbols.get(name)
        if localized:
            symbol_match[localized] = canonical
    return NumericOptions(
        numbering_system=system,
        digits=digits,
        digit_class=digit_class,
        symbols=MappingProxyType(symbols),
        symbol_match=MappingProxyType(symbol_match),
        _symbol_regex=_alternation(list(symbol_match)),
    )
