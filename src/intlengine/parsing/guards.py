"""Type guard functions for parse result narrowing.

Compiled parsers never raise on bad input: date parsers return None and
number parsers return NaN. These TypeIs guards turn that convention into
a check mypy can narrow on.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False.

Example:
    >>> from intlengine.core.options import NumberFormatOptions
    >>> from intlengine.data.store import LocaleData
    >>> from intlengine.parsing.numbers import compile_number_parser
    >>> parse = compile_number_parser("en-US", NumberFormatOptions(), LocaleData.empty())
    >>> is_valid_number(parse("1,234.5"))
    True
    >>> is_valid_number(parse("abc"))
    False
"""

import math
from datetime import datetime
from typing import TypeIs

__all__ = [
    "is_valid_date",
    "is_valid_number",
]


def is_valid_date(value: datetime | None) -> TypeIs[datetime]:
    """Type guard: Check if a parsed date is present.

    Args:
        value: Result of a compiled date parser (None on failure)

    Returns:
        True if value is a datetime, False otherwise
    """
    return isinstance(value, datetime)


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Type guard: Check if a parsed number was recognized (not None/NaN).

    Infinity counts as recognized: parsers return it when the input holds
    the locale infinity symbol.

    Args:
        value: Result of a compiled number parser (NaN on failure)

    Returns:
        True if value is a float other than NaN, False otherwise

    Example:
        >>> is_valid_number(float("inf"))
        True
        >>> is_valid_number(float("nan"))
        False
    """
    return value is not None and not math.isnan(value)
