"""Enumerations for IntlEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
option strings callers pass ("date", "currency", "islamic").

Python 3.13+.
"""

from enum import StrEnum


class FormatType(StrEnum):
    """Kind of date pattern requested by DateFormatOptions.type.

    StrEnum provides automatic string conversion: str(FormatType.DATE) == "date"
    """

    DATE = "date"
    """Resolved through dateFormats.{skeleton}"""

    TIME = "time"
    """Resolved through timeFormats.{skeleton}"""

    DATE_TIME = "dateTime"
    """Splices dateFormats and timeFormats into dateTimeFormats.{skeleton}"""


class CalendarType(StrEnum):
    """Calendar systems with locale tables in the data tree."""

    GREGORIAN = "gregorian"
    """Default proleptic Gregorian calendar"""

    ISLAMIC = "islamic"
    """Tabular Islamic (Hijri) calendar, converted through core.hijri"""


class NumericType(StrEnum):
    """Numeric pattern family, keyed the way CLDR names its format tables.

    The value is the prefix of the numbers table name:
    NumericType.CURRENCY -> "currencyFormats-numberSystem-latn".
    """

    DECIMAL = "decimal"
    CURRENCY = "currency"
    PERCENT = "percent"
    SCIENTIFIC = "scientific"


class DateField(StrEnum):
    """Closed set of date pattern field kinds.

    Every token produced by the pattern tokenizer maps to exactly one member.
    Formatter and parser dispatch on these with match statements.
    """

    ERA = "era"
    """G..GGGGG: era name (abbreviated, wide, narrow)"""

    YEAR = "year"
    """y, yy, yyyy: calendar year"""

    MONTH = "month"
    """M/L: numeric (1-2 letters) or name (3-5 letters)"""

    DAY = "day"
    """d: day of month"""

    WEEKDAY = "weekday"
    """E/c: weekday name"""

    WEEK_OF_YEAR = "weekOfYear"
    """W: Monday-based week of year"""

    HOUR12 = "hour12"
    """h/K: hour on a 12-hour clock"""

    HOUR24 = "hour24"
    """H: hour on a 24-hour clock"""

    MINUTE = "minute"
    SECOND = "second"

    MILLISECONDS = "milliseconds"
    """f: fractional seconds, up to three digits"""

    DESIGNATOR = "designator"
    """a: AM/PM day period"""

    TIME_ZONE = "timeZone"
    """z: localized GMT offset"""

    QUOTED = "quoted"
    """'literal' text, '' escapes a quote"""

    TIME_SEPARATOR = "timeSeparator"
    """':' replaced by the numbering system's time separator"""

    DATE_SEPARATOR = "dateSeparator"
    """'/' replaced by the locale's short-date separator"""

    TEXT = "text"
    """Any other character, emitted verbatim"""


__all__ = [
    "CalendarType",
    "DateField",
    "FormatType",
    "NumericType",
]
