"""Date pattern resolution, tokenization and export.

Resolution:
    Built-in skeletons (short, medium, long, full) read
    ``{type}Formats.{skeleton}``; "dateTime" splices the date and time
    patterns into the ``{1} ... {0}`` template. Any other skeleton reads
    ``dateTimeFormats.availableFormats.{skeleton}``. ``yMd`` falls back to
    ``M/d/y`` when the locale has no entry.

Tokenization:
    A pattern is split into runs of one repeated letter, quoted literals,
    the ``''`` escape and single other characters. Each token carries a
    DateField so formatters and parsers dispatch with match statements.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import MAXYEAR, date, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from intlengine.constants import BASIC_PATTERNS, HOUR_ONLY_OFFSET_PATTERN
from intlengine.data.store import LocaleData, get_value
from intlengine.diagnostics import ConfigurationError, ErrorTemplate
from intlengine.enums import DateField, FormatType
from intlengine.locale_utils import get_region

from .numbering import NumberMapper, get_number_mapper

if TYPE_CHECKING:
    from .options import DateFormatOptions

__all__ = [
    "PatternToken",
    "first_day_of_week",
    "get_date_object",
    "get_date_pattern",
    "get_date_separator",
    "get_default_date_object",
    "get_era_table",
    "get_name_table",
    "get_time_zone_value",
    "get_week_of_year",
    "name_width",
    "resolve_date_pattern",
    "resolve_pattern",
    "time_zone_offset",
    "to_excel_date_pattern",
    "tokenize_pattern",
]

_TOKEN_RE = re.compile(r"([a-zA-Z])\1*|'(?:[^']|'')+'|''|.", re.DOTALL)
_DATE_SEPARATOR_RE = re.compile(r"[dM]([^dM])[dM]", re.IGNORECASE)
_EXCEL_RE = re.compile(r"G|M|L|H|c|'| a|yy|y|EEEE|E")
_OFFSET_FIELD_RE = re.compile(r"HH?|mm")

_EXCEL_MAP: dict[str, str] = {
    "G": "",
    "M": "m",
    "L": "m",
    "H": "h",
    "c": "d",
    "'": '"',
    " a": " AM/PM",
    "yy": "yy",
    "y": "yyyy",
    "EEEE": "dddd",
    "E": "ddd",
}

_LETTER_FIELDS: dict[str, DateField] = {
    "G": DateField.ERA,
    "y": DateField.YEAR,
    "M": DateField.MONTH,
    "L": DateField.MONTH,
    "d": DateField.DAY,
    "E": DateField.WEEKDAY,
    "c": DateField.WEEKDAY,
    "W": DateField.WEEK_OF_YEAR,
    "h": DateField.HOUR12,
    "K": DateField.HOUR12,
    "H": DateField.HOUR24,
    "m": DateField.MINUTE,
    "s": DateField.SECOND,
    "f": DateField.MILLISECONDS,
    "a": DateField.DESIGNATOR,
    "z": DateField.TIME_ZONE,
    ":": DateField.TIME_SEPARATOR,
    "/": DateField.DATE_SEPARATOR,
}

# Name-table width by letter count; 2 and 7+ fall back to abbreviated.
_WIDTHS: dict[int, str] = {
    1: "abbreviated",
    3: "abbreviated",
    4: "wide",
    5: "narrow",
    6: "short",
}

_FIRST_DAY_INDEX: dict[str, int] = {
    "sun": 0,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
}


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One token of a date pattern.

    Attributes:
        field: Field kind
        text: Token text as it appears in the pattern
    """

    field: DateField
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def literal(self) -> str:
        """Emitted text of a quoted literal (``''`` yields one quote)."""
        if self.text == "''":
            return "'"
        return self.text[1:-1].replace("''", "'")


@lru_cache(maxsize=256)
def tokenize_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split a date pattern into typed tokens.

    Example:
        >>> [t.text for t in tokenize_pattern("h:mm a")]
        ['h', ':', 'mm', ' ', 'a']
    """
    tokens: list[PatternToken] = []
    for match in _TOKEN_RE.finditer(pattern):
        text = match.group(0)
        if text[0] == "'":
            field = DateField.QUOTED
        else:
            field = _LETTER_FIELDS.get(text[0], DateField.TEXT)
        tokens.append(PatternToken(field, text))
    return tuple(tokens)


def name_width(length: int) -> str:
    """Name-table width selected by a letter run of ``length``."""
    return _WIDTHS.get(length, "abbreviated")


def get_date_object(main_object: Mapping, calendar: str) -> Mapping[str, Any]:
    """Calendar subtree ``dates.calendars.<calendar>`` (empty when absent)."""
    return get_value(f"dates.calendars.{calendar}", main_object) or {}


def get_era_table(date_object: Mapping, length: int) -> Mapping[str, Any]:
    """Era names for a ``G`` run: 1-3 abbreviated, 4 wide, 5+ narrow."""
    if length <= 3:
        key = "eraAbbr"
    elif length == 4:
        key = "eraNames"
    else:
        key = "eraNarrow"
    return get_value(f"eras.{key}", date_object) or {}


def get_name_table(date_object: Mapping, section: str, length: int) -> Mapping[str, Any]:
    """Stand-alone month or weekday names at the width a run of ``length`` selects."""
    widths = get_value(f"{section}.stand-alone", date_object) or {}
    return widths.get(name_width(length)) or widths.get("abbreviated") or {}


def resolve_pattern(skeleton: str | None, date_object: Mapping, format_type: str | None) -> str | None:
    """Resolve a skeleton against a calendar table.

    Args:
        skeleton: Built-in style or availableFormats skeleton
        date_object: Calendar subtree
        format_type: "date", "time" or "dateTime" (default "date")

    Returns:
        Pattern string, or None when nothing matches
    """
    kind = format_type or FormatType.DATE
    pattern: str | None
    if skeleton in BASIC_PATTERNS:
        pattern = get_value(f"{kind}Formats.{skeleton}", date_object)
        if kind == FormatType.DATE_TIME and pattern is not None:
            date_pattern = get_value(f"dateFormats.{skeleton}", date_object) or ""
            time_pattern = get_value(f"timeFormats.{skeleton}", date_object) or ""
            pattern = pattern.replace("{1}", date_pattern).replace("{0}", time_pattern)
    elif skeleton:
        pattern = get_value(f"dateTimeFormats.availableFormats.{skeleton}", date_object)
    else:
        pattern = None
    if pattern is None and skeleton == "yMd":
        pattern = "M/d/y"
    return pattern


def resolve_date_pattern(culture: str, options: DateFormatOptions, date_object: Mapping) -> str:
    """Explicit format, else the resolved skeleton.

    Raises:
        ConfigurationError: If neither yields a pattern
    """
    pattern = options.format or resolve_pattern(options.skeleton, date_object, options.format_type)
    if not pattern:
        raise ConfigurationError(
            ErrorTemplate.pattern_unresolved(options.skeleton, options.format_type, culture)
        )
    return pattern


def get_date_separator(date_object: Mapping) -> str:
    """Separator between day and month in the short date pattern ("/" default)."""
    short = get_value("dateFormats.short", date_object) or ""
    match = _DATE_SEPARATOR_RE.search(short)
    return match.group(1) if match else "/"


def time_zone_offset(value: datetime) -> int:
    """UTC offset in minutes, positive west of UTC.

    Naive datetimes are interpreted as local time.

    Example:
        >>> from datetime import timezone, timedelta
        >>> time_zone_offset(datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=2))))
        -120
    """
    aware = value if value.tzinfo is not None else value.astimezone()
    offset = aware.utcoffset()
    if offset is None:
        return 0
    return -int(offset.total_seconds() // 60)


def get_time_zone_value(offset: int, pattern: str) -> str:
    """Render an offset through an hour pattern such as ``+HH:mm;-HH:mm``.

    The second branch is used for positive offsets (west of UTC).

    Example:
        >>> get_time_zone_value(-330, "+HH:mm;-HH:mm")
        '+05:30'
        >>> get_time_zone_value(300, "+H;-H")
        '-5'
    """
    branches = pattern.split(";")
    branch = branches[1] if offset > 0 and len(branches) > 1 else branches[0]
    minutes = abs(offset)

    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        number = minutes // 60 if "H" in token else minutes % 60
        text = str(number)
        if len(token) == 2 and len(text) != 2:
            text = "0" + text
        return text

    return _OFFSET_FIELD_RE.sub(substitute, branch)


def _first_week_start(year: int) -> date:
    """Monday that starts week 1 of ``year``."""
    new_year = date(year, 1, 1)
    weekday = new_year.weekday()
    if weekday <= 3:
        return new_year - timedelta(days=weekday)
    return new_year + timedelta(days=7 - weekday)


def get_week_of_year(value: date) -> int:
    """Week number with Monday-based weeks.

    Week 1 holds January 1 when that day falls Monday to Thursday; otherwise
    it starts the following Monday and the days before it are week 0. Days
    at the end of December that belong to next year's week 1 return 1.

    Example:
        >>> get_week_of_year(date(2021, 1, 1))
        0
        >>> get_week_of_year(date(2024, 12, 30))
        1
    """
    if isinstance(value, datetime):
        value = value.date()
    week = (value - _first_week_start(value.year)).days // 7 + 1
    if week > 52 and value.year < MAXYEAR and value >= _first_week_start(value.year + 1):
        return 1
    return week


def first_day_of_week(culture: str, locale_data: LocaleData) -> int:
    """First day of the week for a culture, 0 (Sunday) .. 6 (Saturday).

    Reads ``supplemental.weekData.firstDay`` keyed by region, then by the
    two-letter prefix; Sunday when nothing matches.
    """
    table = locale_data.get("supplemental.weekData.firstDay")
    first_day = "sun"
    if isinstance(table, Mapping):
        region = get_region(culture)
        first_day = table.get(region) or table.get(region[:2]) or "sun"
    return _FIRST_DAY_INDEX.get(first_day, 0)


def to_excel_date_pattern(pattern: str) -> str:
    """Convert a CLDR date pattern to spreadsheet number-format letters.

    Example:
        >>> to_excel_date_pattern("M/d/y h:mm a")
        'm/d/yyyy h:mm AM/PM'
    """
    return _EXCEL_RE.sub(lambda m: _EXCEL_MAP[m.group(0)], pattern)


def _current_gmt_text(main_object: Mapping, mapper: NumberMapper, run_length: int) -> str:
    zone = get_value("dates.timeZoneNames", main_object) or {}
    offset = time_zone_offset(datetime.now())
    hour_pattern = HOUR_ONLY_OFFSET_PATTERN if run_length < 4 else zone.get("hourFormat", "+HH:mm;-HH:mm")
    hour_pattern = hour_pattern.replace(":", mapper.time_separator)
    if offset == 0:
        return zone.get("gmtZeroFormat", "GMT")
    return zone.get("gmtFormat", "GMT{0}").replace("{0}", get_time_zone_value(offset, hour_pattern), 1)


def get_date_pattern(
    culture: str,
    options: DateFormatOptions,
    locale_data: LocaleData,
    *,
    excel: bool = False,
) -> str:
    """Resolved date pattern, optionally converted for spreadsheets.

    In spreadsheet form the first run of ``z`` is replaced by the quoted
    current GMT offset and a trailing space is dropped.

    Raises:
        ConfigurationError: If the pattern cannot be resolved
    """
    main_object = locale_data.main_object(culture)
    date_object = get_date_object(main_object, options.calendar_key)
    pattern = resolve_date_pattern(culture, options, date_object)
    if not excel:
        return pattern
    pattern = to_excel_date_pattern(pattern)
    zone_run = re.search(r"z+", pattern)
    if zone_run is not None:
        mapper = get_number_mapper(main_object, locale_data.numbering_systems)
        gmt = _current_gmt_text(main_object, mapper, len(zone_run.group(0)))
        pattern = pattern[: zone_run.start()] + f'"{gmt}"' + pattern[zone_run.end() :]
    return pattern.removesuffix(" ")


def get_default_date_object(calendar: str | None = None) -> Mapping[str, Any]:
    """Calendar table of the built-in default locale object."""
    return get_date_object(LocaleData.empty().main_object(""), calendar or "gregorian")
