"""Date formatting against CLDR-shaped calendar tables.

compile_date_formatter() resolves the pattern and binds every name table
the pattern needs (months, weekdays, eras, day periods, GMT templates, the
numeral mapper) once. The returned closure renders values with no further
lookups beyond indexing those tables.

Field rendering:
    - Numeric fields pad to two digits only for a two-letter run
    - ``yy`` keeps the last two digits of the year; other runs print it whole
    - ``MMM`` and longer print month names, shorter runs the month number
    - ``f`` prints fractional seconds (up to three letters)
    - ``z`` prints GMT offsets; ``z``..``zzz`` use hours only
    - Digits are localized last, so literals are never touched

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from intlengine.constants import HOUR_ONLY_OFFSET_PATTERN
from intlengine.core.hijri import to_hijri
from intlengine.core.numbering import NumberMapper, get_number_mapper
from intlengine.core.patterns import (
    PatternToken,
    get_date_object,
    get_date_separator,
    get_era_table,
    get_name_table,
    get_time_zone_value,
    get_week_of_year,
    resolve_date_pattern,
    time_zone_offset,
    tokenize_pattern,
)
from intlengine.data.store import get_value
from intlengine.enums import DateField

if TYPE_CHECKING:
    from intlengine.core.options import DateFormatOptions
    from intlengine.data.store import LocaleData

__all__ = [
    "DateFormatter",
    "ResolvedDatePattern",
    "compile_date_formatter",
]

logger = logging.getLogger(__name__)

type DateFormatter = Callable[[date | datetime | None], str | None]

# Python weekday() numbers Monday as 0.
_WEEKDAY_KEYS: tuple[str, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ResolvedDatePattern:
    """A date pattern with the name tables its fields need.

    Attributes:
        pattern: Resolved pattern string
        tokens: Tokenized pattern
        tables: Name table per token index (months, weekdays, eras, designators)
        time_zone: ``dates.timeZoneNames`` of the culture
        date_separator: Separator rendered for ``/``
        mapper: Numeral mapper of the culture
        is_islamic: Year, month and day are rendered in the Hijri calendar
    """

    pattern: str
    tokens: tuple[PatternToken, ...]
    tables: Mapping[int, Mapping[str, Any]]
    time_zone: Mapping[str, Any]
    date_separator: str
    mapper: NumberMapper
    is_islamic: bool

    @classmethod
    def resolve(
        cls,
        culture: str,
        options: DateFormatOptions,
        locale_data: LocaleData,
    ) -> ResolvedDatePattern:
        """Resolve and bind a date pattern for a culture.

        Raises:
            ConfigurationError: If no pattern can be resolved
        """
        main_object = locale_data.main_object(culture)
        date_object = get_date_object(main_object, options.calendar_key)
        pattern = resolve_date_pattern(culture, options, date_object)
        tokens = tokenize_pattern(pattern)

        tables: dict[int, Mapping[str, Any]] = {}
        for index, token in enumerate(tokens):
            match token.field:
                case DateField.MONTH if token.length > 2:
                    tables[index] = get_name_table(date_object, "months", token.length)
                case DateField.WEEKDAY:
                    tables[index] = get_name_table(date_object, "days", token.length)
                case DateField.ERA:
                    tables[index] = get_era_table(date_object, token.length)
                case DateField.DESIGNATOR:
                    tables[index] = get_value("dayPeriods.format.wide", date_object) or _EMPTY

        return cls(
            pattern=pattern,
            tokens=tokens,
            tables=MappingProxyType(tables),
            time_zone=get_value("dates.timeZoneNames", main_object) or _EMPTY,
            date_separator=get_date_separator(date_object),
            mapper=get_number_mapper(main_object, locale_data.numbering_systems),
            is_islamic=options.is_islamic,
        )


def _two_digit(value: int, length: int) -> str:
    text = str(value)
    if length == 2 and len(text) != 2:
        return "0" + text
    return text


def _era_text(table: Mapping[str, Any], year: int) -> str:
    key, other = ("1", "0") if year >= 1 else ("0", "1")
    text = table.get(key)
    if text is None:
        text = table.get(other)
    return text or ""


def _time_zone_text(value: datetime, length: int, resolved: ResolvedDatePattern) -> str:
    zone = resolved.time_zone
    offset = time_zone_offset(value)
    if offset == 0:
        return zone.get("gmtZeroFormat", "GMT")
    hour_pattern = HOUR_ONLY_OFFSET_PATTERN if length < 4 else zone.get("hourFormat", "+HH:mm;-HH:mm")
    hour_pattern = hour_pattern.replace(":", resolved.mapper.time_separator)
    text = get_time_zone_value(offset, hour_pattern)
    return resolved.mapper.localize_digits(zone.get("gmtFormat", "GMT{0}").replace("{0}", text, 1))


def _render(value: datetime, resolved: ResolvedDatePattern) -> str:
    if resolved.is_islamic:
        year, month, day = to_hijri(value)
    else:
        year, month, day = value.year, value.month, value.day

    localize = resolved.mapper.localize_digits
    parts: list[str] = []
    for index, token in enumerate(resolved.tokens):
        length = token.length
        match token.field:
            case DateField.MONTH:
                if length > 2:
                    parts.append(str(resolved.tables[index].get(str(month), "")))
                else:
                    parts.append(localize(_two_digit(month, length)))
            case DateField.WEEKDAY:
                parts.append(str(resolved.tables[index].get(_WEEKDAY_KEYS[value.weekday()], "")))
            case DateField.DAY:
                parts.append(localize(_two_digit(day, length)))
            case DateField.HOUR24:
                parts.append(localize(_two_digit(value.hour, length)))
            case DateField.HOUR12:
                parts.append(localize(_two_digit(value.hour % 12 or 12, length)))
            case DateField.MINUTE:
                parts.append(localize(_two_digit(value.minute, length)))
            case DateField.SECOND:
                parts.append(localize(_two_digit(value.second, length)))
            case DateField.MILLISECONDS:
                if length <= 3:
                    parts.append(localize(f"{value.microsecond // 1000:03d}"[:length]))
            case DateField.YEAR:
                text = str(year)
                parts.append(localize(text[-2:] if length == 2 else text))
            case DateField.DESIGNATOR:
                period = "am" if value.hour < 12 else "pm"
                parts.append(str(resolved.tables[index].get(period, "")))
            case DateField.ERA:
                parts.append(_era_text(resolved.tables[index], year))
            case DateField.QUOTED:
                parts.append(token.literal)
            case DateField.TIME_ZONE:
                parts.append(_time_zone_text(value, length, resolved))
            case DateField.TIME_SEPARATOR:
                parts.append(resolved.mapper.time_separator)
            case DateField.DATE_SEPARATOR:
                parts.append(resolved.date_separator)
            case DateField.WEEK_OF_YEAR:
                parts.append(localize(_two_digit(get_week_of_year(value), length)))
            case DateField.TEXT:
                parts.append(token.text)
    return "".join(parts)


def compile_date_formatter(
    culture: str,
    options: DateFormatOptions,
    locale_data: LocaleData,
) -> DateFormatter:
    """Compile a date formatter for a culture.

    Args:
        culture: Culture id, e.g. "en-US"
        options: Pattern selection
        locale_data: Snapshot the formatter reads from

    Returns:
        Callable rendering a date or datetime; ``None`` renders as ``None``.
        Plain dates are rendered as midnight local time.

    Raises:
        ConfigurationError: If no pattern can be resolved

    Example:
        >>> from intlengine.core.options import DateFormatOptions
        >>> from intlengine.data.store import LocaleData
        >>> fmt = compile_date_formatter("en-US", DateFormatOptions(skeleton="yMd"), LocaleData.empty())
        >>> fmt(datetime(2025, 1, 2))
        '1/2/2025'
    """
    resolved = ResolvedDatePattern.resolve(culture, options, locale_data)
    logger.debug("Compiled date formatter for %s: %r", culture, resolved.pattern)

    def format_date(value: date | datetime | None) -> str | None:
        if value is None:
            return None
        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        return _render(value, resolved)

    return format_date
