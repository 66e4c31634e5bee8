"""Parsing: locale-aware display strings back to Python values.

- Compiled parsers NEVER raise on bad input
- Date parsers return None, number parsers return NaN

Public API:
    Compilers:
        compile_date_parser - Callable[[str], datetime | None]
        compile_number_parser - Callable[[str], float]

    Type Guards:
        is_valid_date - TypeIs guard for datetime (not None)
        is_valid_number - TypeIs guard for float (not NaN)

Python 3.13+. Zero external dependencies.
"""

from .dates import DateParser, compile_date_parser
from .guards import is_valid_date, is_valid_number
from .numbers import NumberParser, compile_number_parser

__all__ = [
    # Type guards
    "is_valid_date",
    "is_valid_number",
    # Compilers
    "DateParser",
    "NumberParser",
    "compile_date_parser",
    "compile_number_parser",
]
