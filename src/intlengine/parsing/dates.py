"""Date parsing against CLDR-shaped calendar tables.

compile_date_parser() turns a resolved date pattern into one anchored,
case-insensitive regular expression with a named group per tracked field,
and a FieldPosition map describing how each group converts back to a date
part. The returned closure never raises on bad input: anything that does
not match, or that names an impossible date, yields None.

Field regexes (D is one digit of the culture's numbering system):
    - ``d``, ``h``, ``H``, ``m``, ``s``, numeric ``M``: two digits for a
      two-letter run, otherwise one digit plus an optional second
    - ``MMM`` and longer, ``E``, ``a``, ``G``: alternation of localized names
    - ``y``: two digits for ``yy``, otherwise at least as many digits as letters
    - ``f``: one to three digits of fractional seconds
    - ``z``: GMT offset in either sign branch, or the GMT-zero text; optional
    - Quoted literals: optional; any other character: one non-digit

Two-digit years take the century of the base date (today by default).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from calendar import monthrange
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from intlengine.constants import HOUR_ONLY_OFFSET_PATTERN, MAX_PARSE_INPUT_LENGTH
from intlengine.core.hijri import to_gregorian, to_hijri
from intlengine.core.numbering import NumericOptions, get_current_numeric_options, get_number_mapper
from intlengine.core.patterns import (
    get_date_object,
    get_era_table,
    get_name_table,
    resolve_date_pattern,
    time_zone_offset,
    tokenize_pattern,
)
from intlengine.data.store import get_value
from intlengine.enums import DateField
from intlengine.locale_utils import is_english_title_case_culture, keeps_designator_case

if TYPE_CHECKING:
    from intlengine.core.options import DateFormatOptions
    from intlengine.data.store import LocaleData

__all__ = [
    "CompiledDatePattern",
    "DateParser",
    "DateParts",
    "FieldPosition",
    "assemble_date",
    "compile_date_parser",
    "parse_date_parts",
]

logger = logging.getLogger(__name__)

type DateParser = Callable[[str], datetime | None]

_ASCII_DIGITS_RE = re.compile(r"[0-9]*")
_OFFSET_TOKEN_RE = re.compile(r"HH?|mm?")

_PART_NAMES: dict[DateField, str] = {
    DateField.ERA: "era",
    DateField.YEAR: "year",
    DateField.MONTH: "month",
    DateField.DAY: "day",
    DateField.HOUR12: "hour",
    DateField.HOUR24: "hour",
    DateField.MINUTE: "minute",
    DateField.SECOND: "second",
    DateField.MILLISECONDS: "milliseconds",
    DateField.DESIGNATOR: "designator",
    DateField.TIME_ZONE: "time_zone",
}

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DateParts:
    """Date fields recovered from a parsed string.

    Attributes:
        year: Year as written (two-digit years are not yet expanded)
        month: Month 1..12 (unchecked)
        day: Day of month (unchecked)
        hour: Hour as written; 12-hour values are shifted by ``designator``
        minute: Minutes
        second: Seconds
        milliseconds: Milliseconds
        designator: "am" or "pm"
        time_zone: Parsed offset in minutes, positive west of UTC
        era: Era key, recognized but not applied
        hour12: Pattern used a 12-hour field
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int = 0
    minute: int = 0
    second: int = 0
    milliseconds: int | None = None
    designator: str | None = None
    time_zone: int | None = None
    era: str | None = None
    hour12: bool = False


@dataclass(frozen=True, slots=True)
class FieldPosition:
    """How one named regex group maps back to a date part.

    Attributes:
        field: Field kind
        group: Regex group name
        is_number: Group holds digits; otherwise it is a lookup-table key
        table: Reverse lookup table (localized name -> key) for lexical fields
        hour_only: Timezone field renders hours only (``z``..``zzz``)
    """

    field: DateField
    group: str
    is_number: bool = False
    table: Mapping[str, str] = _EMPTY
    hour_only: bool = False


@dataclass(frozen=True, slots=True)
class CompiledDatePattern:
    """A date pattern compiled for parsing.

    Attributes:
        pattern: Resolved pattern string
        regex: Anchored, case-insensitive regex over the whole input
        positions: Tracked fields in pattern order
        culture: Culture id (drives English case normalization)
        is_islamic: Parsed year, month and day are Hijri
        numeric: Digit mapping of the culture
    """

    pattern: str
    regex: re.Pattern[str]
    positions: tuple[FieldPosition, ...]
    culture: str
    is_islamic: bool
    numeric: NumericOptions


def _reverse(table: Mapping[str, Any]) -> dict[str, str]:
    return {str(value): str(key) for key, value in table.items() if value}


def _alternation(names: Mapping[str, str]) -> str:
    ordered = sorted(names, key=len, reverse=True)
    return "|".join(re.escape(name) for name in ordered)


def _offset_branch_regex(branch: str, digit: str, group_prefix: str) -> str:
    pieces: list[str] = []
    position = 0
    for match in _OFFSET_TOKEN_RE.finditer(branch):
        pieces.append(re.escape(branch[position : match.start()]))
        token = match.group(0)
        name = f"{group_prefix}_{'h' if token[0] == 'H' else 'm'}"
        body = digit + digit if len(token) == 2 else digit + digit + "?"
        pieces.append(f"(?P<{name}>{body})")
        position = match.end()
    pieces.append(re.escape(branch[position:]))
    return "".join(pieces)


def _time_zone_regex(hour_pattern: str, zone: Mapping[str, Any], digit: str, group: str) -> str:
    gmt_format = zone.get("gmtFormat", "GMT{0}")
    before, _, after = gmt_format.partition("{0}")
    branches = []
    for index, branch in enumerate(hour_pattern.split(";")[:2]):
        body = _offset_branch_regex(branch, digit, f"{group}_{index}")
        branches.append(re.escape(before) + body + re.escape(after))
    branches.append(re.escape(zone.get("gmtZeroFormat", "GMT")))
    return f"(?P<{group}>{'|'.join(branches)})?"


def _compile(culture: str, options: DateFormatOptions, locale_data: LocaleData) -> CompiledDatePattern:
    main_object = locale_data.main_object(culture)
    date_object = get_date_object(main_object, options.calendar_key)
    pattern = resolve_date_pattern(culture, options, date_object)
    numeric = get_current_numeric_options(main_object, locale_data.numbering_systems)
    mapper = get_number_mapper(main_object, locale_data.numbering_systems)
    digit = numeric.digit_class

    pieces: list[str] = []
    positions: list[FieldPosition] = []
    for index, token in enumerate(tokenize_pattern(pattern)):
        group = f"f{index}"
        length = token.length
        match token.field:
            case DateField.WEEKDAY:
                names = _reverse(get_name_table(date_object, "days", length))
                pieces.append(f"(?:{_alternation(names)})")
            case DateField.MONTH if length > 2:
                names = _reverse(get_name_table(date_object, "months", length))
                pieces.append(f"(?P<{group}>{_alternation(names)})")
                positions.append(FieldPosition(token.field, group, table=MappingProxyType(names)))
            case (
                DateField.MONTH
                | DateField.DAY
                | DateField.MINUTE
                | DateField.SECOND
                | DateField.HOUR12
                | DateField.HOUR24
            ):
                optional = "" if length == 2 else "?"
                pieces.append(f"(?P<{group}>{digit}{digit}{optional})")
                positions.append(FieldPosition(token.field, group, is_number=True))
            case DateField.MILLISECONDS:
                if length > 3:
                    continue
                pieces.append(f"(?P<{group}>{digit}{digit}?{digit}?)")
                positions.append(FieldPosition(token.field, group, is_number=True))
            case DateField.WEEK_OF_YEAR:
                pieces.append(f"(?:{digit}?{digit})" if length == 1 else f"(?:{digit}{digit})")
            case DateField.YEAR:
                body = f"{digit}{digit}" if length == 2 else f"{digit}{{{length},}}"
                pieces.append(f"(?P<{group}>{body})")
                positions.append(FieldPosition(token.field, group, is_number=True))
            case DateField.DESIGNATOR:
                names = _reverse(get_value("dayPeriods.format.wide", date_object) or _EMPTY)
                pieces.append(f"(?P<{group}>{_alternation(names)})")
                positions.append(FieldPosition(token.field, group, table=MappingProxyType(names)))
            case DateField.ERA:
                names = _reverse(get_era_table(date_object, length))
                pieces.append(f"(?P<{group}>{_alternation(names)})?")
                positions.append(FieldPosition(token.field, group, table=MappingProxyType(names)))
            case DateField.TIME_ZONE:
                zone = get_value("dates.timeZoneNames", main_object) or _EMPTY
                hour_only = length < 4
                hour_pattern = HOUR_ONLY_OFFSET_PATTERN if hour_only else zone.get("hourFormat", "+HH:mm;-HH:mm")
                hour_pattern = hour_pattern.replace(":", mapper.time_separator)
                pieces.append(_time_zone_regex(hour_pattern, zone, digit, group))
                positions.append(FieldPosition(token.field, group, hour_only=hour_only))
            case DateField.QUOTED:
                pieces.append(f"(?:{re.escape(token.literal)})?")
            case _:
                pieces.append(r"\D")

    regex = re.compile("".join(pieces), re.IGNORECASE)
    return CompiledDatePattern(
        pattern=pattern,
        regex=regex,
        positions=tuple(positions),
        culture=culture,
        is_islamic=options.is_islamic,
        numeric=numeric,
    )


def _to_int(text: str | None, numeric: NumericOptions) -> int | None:
    if text is None:
        return None
    ascii_text = numeric.delocalize_digits(text)
    if not ascii_text or _ASCII_DIGITS_RE.fullmatch(ascii_text) is None:
        return None
    return int(ascii_text)


def _zone_minutes(match: re.Match[str], group: str, numeric: NumericOptions) -> int | None:
    if match.group(group) is None:
        return None
    for branch, sign in ((0, -1), (1, 1)):
        hours = _to_int(match.groupdict().get(f"{group}_{branch}_h"), numeric)
        if hours is not None:
            minutes = _to_int(match.groupdict().get(f"{group}_{branch}_m"), numeric) or 0
            return sign * (hours * 60 + minutes)
    return 0


def _lookup(table: Mapping[str, str], text: str) -> str | None:
    found = table.get(text)
    if found is not None:
        return found
    wanted = text.casefold()
    for name, key in table.items():
        if name.casefold() == wanted:
            return key
    return None


def parse_date_parts(value: str, compiled: CompiledDatePattern) -> DateParts | None:
    """Match a string against a compiled pattern and extract its fields.

    Returns:
        DateParts, or None when the input does not match
    """
    if not isinstance(value, str) or len(value) > MAX_PARSE_INPUT_LENGTH:
        return None
    match = compiled.regex.fullmatch(value)
    if match is None:
        return None

    fields: dict[str, Any] = {}
    for position in compiled.positions:
        name = _PART_NAMES[position.field]
        if position.field == DateField.HOUR12:
            fields["hour12"] = True
        if position.field == DateField.TIME_ZONE:
            minutes = _zone_minutes(match, position.group, compiled.numeric)
            if minutes is not None:
                fields[name] = minutes
            continue
        text = match.group(position.group)
        if text is None:
            continue
        if position.is_number:
            if position.field == DateField.MILLISECONDS:
                text = text.ljust(3, compiled.numeric.digits[0])
            fields[name] = _to_int(text, compiled.numeric)
            continue
        if position.field == DateField.MONTH and not compiled.is_islamic:
            if is_english_title_case_culture(compiled.culture):
                text = text[0].upper() + text[1:].lower()
        elif position.field == DateField.DESIGNATOR and not keeps_designator_case(compiled.culture):
            text = text.lower()
        key = _lookup(position.table, text)
        if position.field == DateField.MONTH:
            fields[name] = int(key) if key is not None and key.isdigit() else None
        else:
            fields[name] = key
    return DateParts(**fields)


def _with_gregorian(parts: DateParts, today: datetime | None = None) -> DateParts | None:
    year, month, day = parts.year, parts.month, parts.day
    year_text = str(year) if year else ""
    two_digit = len(year_text) == 2
    anchor = None
    if not year or not month or not day or two_digit:
        anchor = to_hijri(today or datetime.now())
    if two_digit and anchor is not None:
        year = int(str(anchor.year)[:2] + year_text)
    try:
        gregorian = to_gregorian(
            year or anchor.year,  # type: ignore[union-attr]
            month or anchor.month,  # type: ignore[union-attr]
            day or anchor.day,  # type: ignore[union-attr]
        )
    except ValueError:
        return None
    return replace(parts, year=gregorian.year, month=gregorian.month, day=gregorian.day)


def assemble_date(parts: DateParts, base: datetime | None = None) -> datetime | None:
    """Build a naive local datetime from parsed parts.

    Missing year and month come from ``base`` (now by default); a missing
    day is 1. Two-digit years take the century of ``base``. A parsed
    timezone converts the result to local time.

    Returns:
        datetime, or None when the parts name an impossible date

    Example:
        >>> assemble_date(DateParts(year=25, month=1, day=2), datetime(2031, 6, 1))
        datetime.datetime(2025, 1, 2, 0, 0)
        >>> assemble_date(DateParts(year=2025, month=2, day=30)) is None
        True
    """
    base = base or datetime.now()
    year = base.year
    if parts.year is not None:
        year = parts.year
        if len(str(year)) <= 2:
            year += (base.year // 100) * 100

    month = base.month
    if parts.month is not None:
        if not 1 <= parts.month <= 12:
            return None
        month = parts.month

    try:
        day = 1 if parts.day is None else parts.day
        if not 1 <= day <= monthrange(year, month)[1]:
            return None
        result = datetime(year, month, day) + timedelta(
            hours=parts.hour or 0,
            minutes=parts.minute or 0,
            seconds=parts.second or 0,
            milliseconds=parts.milliseconds or 0,
        )
        if parts.designator == "pm":
            if result.hour != 12:
                result += timedelta(hours=12)
        elif parts.designator is not None and result.hour == 12:
            result -= timedelta(hours=12)
        if parts.time_zone is not None:
            result += timedelta(minutes=parts.time_zone - time_zone_offset(result))
    except (ValueError, OverflowError, OSError):
        return None
    return result


def compile_date_parser(
    culture: str,
    options: DateFormatOptions,
    locale_data: LocaleData,
) -> DateParser:
    """Compile a date parser for a culture.

    Args:
        culture: Culture id, e.g. "en-US"
        options: Pattern selection
        locale_data: Snapshot the parser reads from

    Returns:
        Callable returning a naive local datetime, or None for input that
        does not match or names an impossible date

    Raises:
        ConfigurationError: If no pattern can be resolved

    Example:
        >>> from intlengine.core.options import DateFormatOptions
        >>> from intlengine.data.store import LocaleData
        >>> parse = compile_date_parser("en-US", DateFormatOptions(skeleton="yMd"), LocaleData.empty())
        >>> parse("1/2/2025")
        datetime.datetime(2025, 1, 2, 0, 0)
        >>> parse("not a date") is None
        True
    """
    compiled = _compile(culture, options, locale_data)
    logger.debug("Compiled date parser for %s: %r -> %s", culture, compiled.pattern, compiled.regex.pattern)

    def parse_date(value: str) -> datetime | None:
        parts = parse_date_parts(value, compiled)
        if parts is None:
            logger.debug("Date %r does not match %r", value, compiled.pattern)
            return None
        if compiled.is_islamic:
            parts = _with_gregorian(parts)
            if parts is None:
                return None
        return assemble_date(parts)

    return parse_date
