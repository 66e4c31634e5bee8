"""Core building blocks shared by the formatters and parsers.

Exports:
    DateFormatOptions: Date pattern selection
    NumberFormatOptions: Numeric skeleton or custom pattern plus digit options
    HijriDate: Islamic calendar date
    to_hijri / to_gregorian: Calendar conversion

Pattern resolution lives in ``core.patterns`` (dates) and
``core.numeric_patterns`` (numbers); numeral systems in ``core.numbering``.

Python 3.13+.
"""

from .hijri import HijriDate, to_gregorian, to_hijri
from .options import DateFormatOptions, NumberFormatOptions

__all__ = [
    "DateFormatOptions",
    "HijriDate",
    "NumberFormatOptions",
    "to_gregorian",
    "to_hijri",
]
