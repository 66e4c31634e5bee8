"""Built-in default locale object (en-US) and numbering-system table.

Used whenever a requested culture is absent from the loaded locale data, and
as the complete data set when nothing has been loaded at all.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DEFAULT_LOCALE_OBJECT",
    "DEFAULT_NUMBERING_SYSTEMS",
    "ISLAMIC_ERAS",
    "ISLAMIC_MONTHS",
]

_MONTH_KEYS = tuple(str(n) for n in range(1, 13))


def _months(names: str) -> dict[str, str]:
    return dict(zip(_MONTH_KEYS, names.split("|"), strict=True))


def _weekdays(names: str) -> dict[str, str]:
    return dict(zip(("sun", "mon", "tue", "wed", "thu", "fri", "sat"), names.split("|"), strict=True))


_GREGORIAN_MONTHS: dict[str, Any] = {
    "stand-alone": {
        "abbreviated": _months("Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec"),
        "narrow": _months("J|F|M|A|M|J|J|A|S|O|N|D"),
        "wide": _months(
            "January|February|March|April|May|June|July|August|September|October|November|December"
        ),
    },
}

ISLAMIC_MONTHS: dict[str, Any] = {
    "stand-alone": {
        "abbreviated": _months(
            "Muh.|Saf.|Rab. I|Rab. II|Jum. I|Jum. II|Raj.|Sha.|Ram.|Shaw.|Dhuʻl-Q.|Dhuʻl-H."
        ),
        "narrow": _months("1|2|3|4|5|6|7|8|9|10|11|12"),
        "wide": _months(
            "Muharram|Safar|Rabiʻ I|Rabiʻ II|Jumada I|Jumada II|Rajab|Shaʻban|Ramadan|"
            "Shawwal|Dhuʻl-Qiʻdah|Dhuʻl-Hijjah"
        ),
    },
}

ISLAMIC_ERAS: dict[str, Any] = {
    "eraNames": {"0": "AH"},
    "eraAbbr": {"0": "AH"},
    "eraNarrow": {"0": "AH"},
}

_DAYS: dict[str, Any] = {
    "stand-alone": {
        "abbreviated": _weekdays("Sun|Mon|Tue|Wed|Thu|Fri|Sat"),
        "narrow": _weekdays("S|M|T|W|T|F|S"),
        "short": _weekdays("Su|Mo|Tu|We|Th|Fr|Sa"),
        "wide": _weekdays("Sunday|Monday|Tuesday|Wednesday|Thursday|Friday|Saturday"),
    },
}

_DAY_PERIODS: dict[str, Any] = {"format": {"wide": {"am": "AM", "pm": "PM"}}}

_TIME_FORMATS: dict[str, str] = {
    "full": "h:mm:ss a zzzz",
    "long": "h:mm:ss a z",
    "medium": "h:mm:ss a",
    "short": "h:mm a",
}

_SHARED_AVAILABLE_FORMATS: dict[str, str] = {
    "d": "d",
    "E": "ccc",
    "Ed": "d E",
    "Ehm": "E h:mm a",
    "EHm": "E HH:mm",
    "Ehms": "E h:mm:ss a",
    "EHms": "E HH:mm:ss",
    "Gy": "y G",
    "GyMMM": "MMM y G",
    "GyMMMd": "MMM d, y G",
    "GyMMMEd": "E, MMM d, y G",
    "h": "h a",
    "H": "HH",
    "hm": "h:mm a",
    "Hm": "HH:mm",
    "hms": "h:mm:ss a",
    "Hms": "HH:mm:ss",
    "M": "L",
    "Md": "M/d",
    "MEd": "E, M/d",
    "MMM": "LLL",
    "MMMd": "MMM d",
    "MMMEd": "E, MMM d",
    "MMMMd": "MMMM d",
    "ms": "mm:ss",
}

_GREGORIAN: dict[str, Any] = {
    "months": _GREGORIAN_MONTHS,
    "days": _DAYS,
    "dayPeriods": _DAY_PERIODS,
    "eras": {
        "eraNames": {
            "0": "Before Christ",
            "0-alt-variant": "Before Common Era",
            "1": "Anno Domini",
            "1-alt-variant": "Common Era",
        },
        "eraAbbr": {"0": "BC", "0-alt-variant": "BCE", "1": "AD", "1-alt-variant": "CE"},
        "eraNarrow": {"0": "B", "0-alt-variant": "BCE", "1": "A", "1-alt-variant": "CE"},
    },
    "dateFormats": {
        "full": "EEEE, MMMM d, y",
        "long": "MMMM d, y",
        "medium": "MMM d, y",
        "short": "M/d/yy",
    },
    "timeFormats": _TIME_FORMATS,
    "dateTimeFormats": {
        "full": "{1} 'at' {0}",
        "long": "{1} 'at' {0}",
        "medium": "{1}, {0}",
        "short": "{1}, {0}",
        "availableFormats": {
            **_SHARED_AVAILABLE_FORMATS,
            "hmsv": "h:mm:ss a v",
            "Hmsv": "HH:mm:ss v",
            "hmv": "h:mm a v",
            "Hmv": "HH:mm v",
            "y": "y",
            "yM": "M/y",
            "yMd": "M/d/y",
            "yMEd": "E, M/d/y",
            "yMMM": "MMM y",
            "yMMMd": "MMM d, y",
            "yMMMEd": "E, MMM d, y",
            "yMMMM": "MMMM y",
        },
    },
}

_ISLAMIC: dict[str, Any] = {
    "months": ISLAMIC_MONTHS,
    "days": _DAYS,
    "dayPeriods": _DAY_PERIODS,
    "eras": ISLAMIC_ERAS,
    "dateFormats": {
        "full": "EEEE, MMMM d, y G",
        "long": "MMMM d, y G",
        "medium": "MMM d, y G",
        "short": "M/d/y GGGGG",
    },
    "timeFormats": _TIME_FORMATS,
    "dateTimeFormats": {
        "full": "{1} 'at' {0}",
        "long": "{1} 'at' {0}",
        "medium": "{1}, {0}",
        "short": "{1}, {0}",
        "availableFormats": {
            **_SHARED_AVAILABLE_FORMATS,
            "y": "y G",
            "yyyy": "y G",
            "yyyyM": "M/y GGGGG",
            "yyyyMd": "M/d/y GGGGG",
            "yyyyMEd": "E, M/d/y GGGGG",
            "yyyyMMM": "MMM y G",
            "yyyyMMMd": "MMM d, y G",
            "yyyyMMMEd": "E, MMM d, y G",
            "yyyyMMMM": "MMMM y G",
            "yyyyQQQ": "QQQ y G",
            "yyyyQQQQ": "QQQQ y G",
        },
    },
}

DEFAULT_LOCALE_OBJECT: dict[str, Any] = {
    "dates": {
        "calendars": {"gregorian": _GREGORIAN, "islamic": _ISLAMIC},
        "timeZoneNames": {
            "hourFormat": "+HH:mm;-HH:mm",
            "gmtFormat": "GMT{0}",
            "gmtZeroFormat": "GMT",
        },
    },
    "numbers": {
        "currencies": {
            "USD": {"displayName": "US Dollar", "symbol": "$", "symbol-alt-narrow": "$"},
            "EUR": {"displayName": "Euro", "symbol": "€", "symbol-alt-narrow": "€"},
            "GBP": {"displayName": "British Pound", "symbol-alt-narrow": "£"},
        },
        "defaultNumberingSystem": "latn",
        "minimumGroupingDigits": "1",
        "symbols-numberSystem-latn": {
            "decimal": ".",
            "group": ",",
            "list": ";",
            "percentSign": "%",
            "plusSign": "+",
            "minusSign": "-",
            "exponential": "E",
            "superscriptingExponent": "×",
            "perMille": "‰",
            "infinity": "∞",
            "nan": "NaN",
            "timeSeparator": ":",
        },
        "decimalFormats-numberSystem-latn": {"standard": "#,##0.###"},
        "percentFormats-numberSystem-latn": {"standard": "#,##0%"},
        "currencyFormats-numberSystem-latn": {
            "standard": "¤#,##0.00",
            "accounting": "¤#,##0.00;(¤#,##0.00)",
        },
        "scientificFormats-numberSystem-latn": {"standard": "#E0"},
    },
}

DEFAULT_NUMBERING_SYSTEMS: dict[str, Any] = {
    "latn": {"_digits": "0123456789", "_type": "numeric"},
    "arab": {"_digits": "٠١٢٣٤٥٦٧٨٩", "_type": "numeric"},
    "arabext": {"_digits": "۰۱۲۳۴۵۶۷۸۹", "_type": "numeric"},
    "beng": {"_digits": "০১২৩৪৫৬৭৮৯", "_type": "numeric"},
    "deva": {"_digits": "०१२३४५६७८९", "_type": "numeric"},
    "fullwide": {"_digits": "０１２３４５６７８９", "_type": "numeric"},
    "thai": {"_digits": "๐๑๒๓๔๕๖๗๘๙", "_type": "numeric"},
}
