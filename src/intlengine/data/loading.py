"""Build CLDR-shaped locale trees from the CLDR data bundled with Babel.

The engine never reads Babel directly: it consumes the tree produced here
(or any tree an application supplies in the same shape). Babel is imported
lazily through intlengine.core.babel_compat.

Example:
    >>> from intlengine.data.loading import load_babel_locale_data
    >>> data = load_babel_locale_data("de-DE", "ar-EG")
    >>> data.cultures
    ('de-DE', 'ar-EG')

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from intlengine.core.babel_compat import get_unknown_locale_error, require_babel
from intlengine.diagnostics import ConfigurationError, ErrorTemplate
from intlengine.locale_utils import get_babel_locale, get_region, normalize_culture

from .defaults import DEFAULT_LOCALE_OBJECT, DEFAULT_NUMBERING_SYSTEMS, ISLAMIC_ERAS, ISLAMIC_MONTHS
from .store import LocaleData

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "build_culture_tree",
    "load_babel_locale_data",
]

logger = logging.getLogger(__name__)

# Babel numbers weekdays from Monday (0) to Sunday (6).
_BABEL_WEEKDAY_KEYS: tuple[str, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

_ERA_WIDTHS: dict[str, str] = {
    "eraNames": "wide",
    "eraAbbr": "abbreviated",
    "eraNarrow": "narrow",
}

_STYLES: tuple[str, ...] = ("short", "medium", "long", "full")


def _pattern_text(value: object) -> str:
    """Pattern string of a Babel DateTimePattern/NumberPattern or plain str."""
    return str(getattr(value, "pattern", value))


def _month_table(babel_months: Mapping) -> dict[str, Any]:
    tables: dict[str, Any] = {}
    for context in ("format", "stand-alone"):
        widths = babel_months.get(context, {})
        tables[context] = {
            width: {str(number): name for number, name in names.items()}
            for width, names in widths.items()
        }
    return tables


def _day_table(babel_days: Mapping) -> dict[str, Any]:
    tables: dict[str, Any] = {}
    for context in ("format", "stand-alone"):
        widths = babel_days.get(context, {})
        tables[context] = {
            width: {_BABEL_WEEKDAY_KEYS[index]: name for index, name in names.items()}
            for width, names in widths.items()
        }
    return tables


def _day_periods(locale: Locale) -> dict[str, Any]:
    wide = locale.day_periods.get("format", {}).get("wide", {})
    return {
        "format": {
            "wide": {
                "am": wide.get("am", "AM"),
                "pm": wide.get("pm", "PM"),
            }
        }
    }


def _eras(locale: Locale) -> dict[str, Any]:
    return {
        cldr_key: {str(index): name for index, name in locale.eras.get(width, {}).items()}
        for cldr_key, width in _ERA_WIDTHS.items()
    }


def _formats(locale: Locale) -> dict[str, Any]:
    date_formats = {s: _pattern_text(locale.date_formats[s]) for s in _STYLES if s in locale.date_formats}
    time_formats = {s: _pattern_text(locale.time_formats[s]) for s in _STYLES if s in locale.time_formats}
    datetime_formats: dict[str, Any] = {
        s: _pattern_text(locale.datetime_formats[s]) for s in _STYLES if s in locale.datetime_formats
    }
    datetime_formats["availableFormats"] = {
        skeleton: _pattern_text(pattern) for skeleton, pattern in locale.datetime_skeletons.items()
    }
    return {
        "dateFormats": date_formats,
        "timeFormats": time_formats,
        "dateTimeFormats": datetime_formats,
    }


def _time_zone_names(locale: Locale) -> dict[str, str]:
    zone_formats = locale.zone_formats
    gmt_format = str(zone_formats.get("gmt", "GMT%s")).replace("%s", "{0}")
    hour = zone_formats.get("hour", ("+HH:mm", "-HH:mm"))
    hour_format = ";".join(hour) if isinstance(hour, tuple | list) else str(hour)
    default_zone = DEFAULT_LOCALE_OBJECT["dates"]["timeZoneNames"]
    return {
        "hourFormat": hour_format or default_zone["hourFormat"],
        "gmtFormat": gmt_format,
        "gmtZeroFormat": str(zone_formats.get("gmt_zero") or gmt_format.replace("{0}", "")),
    }


def _number_symbols(locale: Locale, system: str) -> dict[str, str]:
    symbols = locale.number_symbols
    # Babel >= 2.14 keys symbols by numbering system
    if "decimal" not in symbols:
        symbols = symbols.get(system) or symbols.get("latn") or {}
    table = dict(DEFAULT_LOCALE_OBJECT["numbers"]["symbols-numberSystem-latn"])
    table.update({str(k): str(v) for k, v in symbols.items()})
    return table


def _numbers(locale: Locale) -> dict[str, Any]:
    system = getattr(locale, "default_numbering_system", None) or "latn"
    if system not in DEFAULT_NUMBERING_SYSTEMS:
        logger.debug("Numbering system %r has no digit table; using latn", system)
        system = "latn"

    currencies: dict[str, dict[str, str]] = {}
    for code, name in locale.currencies.items():
        currencies.setdefault(code, {})["displayName"] = name
    for code, symbol in locale.currency_symbols.items():
        currencies.setdefault(code, {})["symbol"] = symbol

    numbers: dict[str, Any] = {
        "currencies": currencies,
        "defaultNumberingSystem": system,
        f"symbols-numberSystem-{system}": _number_symbols(locale, system),
    }
    decimal = locale.decimal_formats.get(None)
    percent = locale.percent_formats.get(None)
    scientific = locale.scientific_formats.get(None)
    if decimal is not None:
        numbers[f"decimalFormats-numberSystem-{system}"] = {"standard": _pattern_text(decimal)}
    if percent is not None:
        numbers[f"percentFormats-numberSystem-{system}"] = {"standard": _pattern_text(percent)}
    if scientific is not None:
        numbers[f"scientificFormats-numberSystem-{system}"] = {"standard": _pattern_text(scientific)}
    currency_table = {
        kind: _pattern_text(locale.currency_formats[kind])
        for kind in ("standard", "accounting")
        if locale.currency_formats.get(kind) is not None
    }
    if currency_table:
        numbers[f"currencyFormats-numberSystem-{system}"] = currency_table
    return numbers


def build_culture_tree(culture: str) -> dict[str, Any]:
    """Build the ``main`` and ``supplemental`` entries for one culture.

    Args:
        culture: BCP-47 or POSIX culture id

    Returns:
        CLDR-shaped tree with a single culture

    Raises:
        ConfigurationError: If Babel does not know the culture
        BabelImportError: If Babel is not installed
    """
    require_babel("build_culture_tree")
    culture = normalize_culture(culture)
    try:
        locale = get_babel_locale(culture)
    except (get_unknown_locale_error(), ValueError) as e:
        raise ConfigurationError(ErrorTemplate.locale_unknown(culture, str(e))) from e

    gregorian: dict[str, Any] = {
        "months": _month_table(locale.months),
        "days": _day_table(locale.days),
        "dayPeriods": _day_periods(locale),
        "eras": _eras(locale),
        **_formats(locale),
    }
    islamic: dict[str, Any] = {
        **gregorian,
        "months": ISLAMIC_MONTHS,
        "eras": ISLAMIC_ERAS,
    }
    first_day = _BABEL_WEEKDAY_KEYS[locale.first_week_day]
    logger.debug("Built locale tree for %s from Babel %s", culture, locale)
    return {
        "main": {
            culture: {
                "dates": {
                    "calendars": {"gregorian": gregorian, "islamic": islamic},
                    "timeZoneNames": _time_zone_names(locale),
                },
                "numbers": _numbers(locale),
            }
        },
        "supplemental": {
            "weekData": {"firstDay": {get_region(culture): first_day}},
            "numberingSystems": DEFAULT_NUMBERING_SYSTEMS,
        },
    }


def load_babel_locale_data(*cultures: str, base: LocaleData | None = None) -> LocaleData:
    """Build a LocaleData snapshot holding the given cultures.

    Args:
        *cultures: Culture ids to load
        base: Snapshot to merge into (empty when omitted)

    Returns:
        New snapshot; ``base`` is unchanged

    Raises:
        ConfigurationError: If a culture is unknown
    """
    trees = [build_culture_tree(culture) for culture in cultures]
    return (base or LocaleData.empty()).merge(*trees)
