"""Formatting runtime: compiled formatters and the IntlContext facade.

Python 3.13+.
"""

from .context import IntlContext, format_date, format_number, get_date_pattern, get_number_pattern
from .date_formatter import DateFormatter, compile_date_formatter
from .number_formatter import NumberFormatter, compile_number_formatter

__all__ = [
    "DateFormatter",
    "IntlContext",
    "NumberFormatter",
    "compile_date_formatter",
    "compile_number_formatter",
    "format_date",
    "format_number",
    "get_date_pattern",
    "get_number_pattern",
]
