"""Tests for date pattern resolution, tokenization and export.

Python 3.13+.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from intlengine.core.options import DateFormatOptions
from intlengine.core.patterns import (
    first_day_of_week,
    get_date_pattern,
    get_date_separator,
    get_default_date_object,
    get_era_table,
    get_name_table,
    get_time_zone_value,
    get_week_of_year,
    name_width,
    resolve_date_pattern,
    resolve_pattern,
    time_zone_offset,
    to_excel_date_pattern,
    tokenize_pattern,
)
from intlengine.data import LocaleData
from intlengine.diagnostics import ConfigurationError, DiagnosticCode
from intlengine.enums import DateField, FormatType

# ============================================================================
# Resolution
# ============================================================================


class TestResolvePattern:
    """Skeleton -> pattern resolution against the default calendar table."""

    @pytest.fixture
    def gregorian(self) -> dict:
        return get_default_date_object()

    @pytest.mark.parametrize(
        ("skeleton", "format_type", "expected"),
        [
            ("short", "date", "M/d/yy"),
            ("medium", None, "MMM d, y"),
            ("long", "date", "MMMM d, y"),
            ("full", "date", "EEEE, MMMM d, y"),
            ("short", "time", "h:mm a"),
            ("full", "time", "h:mm:ss a zzzz"),
            ("short", "dateTime", "M/d/yy, h:mm a"),
            ("full", "dateTime", "EEEE, MMMM d, y 'at' h:mm:ss a zzzz"),
            ("yMd", None, "M/d/y"),
            ("Hms", None, "HH:mm:ss"),
            ("Gy", None, "y G"),
        ],
    )
    def test_resolution(self, gregorian: dict, skeleton: str, format_type: str | None, expected: str) -> None:
        """Built-in styles read {type}Formats; others read availableFormats."""
        assert resolve_pattern(skeleton, gregorian, format_type) == expected

    def test_unknown_skeleton(self, gregorian: dict) -> None:
        """Unknown skeletons resolve to None."""
        assert resolve_pattern("nonsense", gregorian, None) is None
        assert resolve_pattern(None, gregorian, None) is None

    def test_ymd_fallback(self) -> None:
        """yMd falls back to M/d/y when the table has no entry."""
        assert resolve_pattern("yMd", {}, None) == "M/d/y"

    def test_format_overrides_skeleton(self, gregorian: dict) -> None:
        """An explicit format wins."""
        options = DateFormatOptions(skeleton="short", format="yyyy")
        assert resolve_date_pattern("en-US", options, gregorian) == "yyyy"

    def test_unresolved_raises(self, gregorian: dict) -> None:
        """Nothing to resolve raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_date_pattern("en-US", DateFormatOptions(skeleton="nonsense"), gregorian)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PATTERN_UNRESOLVED
        assert "Format options or type given must be invalid" in str(exc_info.value)

    def test_islamic_table(self) -> None:
        """The islamic calendar has its own patterns."""
        assert resolve_pattern("short", get_default_date_object("islamic"), FormatType.DATE) == "M/d/y GGGGG"


class TestNameTables:
    """Width selection for names and eras."""

    @pytest.mark.parametrize(
        ("length", "width"),
        [(1, "abbreviated"), (2, "abbreviated"), (3, "abbreviated"), (4, "wide"), (5, "narrow"), (6, "short")],
    )
    def test_name_width(self, length: int, width: str) -> None:
        """Letter count selects the width."""
        assert name_width(length) == width

    def test_month_names(self) -> None:
        """Month tables are keyed by month number."""
        table = get_name_table(get_default_date_object(), "months", 4)
        assert table["1"] == "January"

    def test_short_width_falls_back(self) -> None:
        """Months have no short width; abbreviated is used."""
        assert get_name_table(get_default_date_object(), "months", 6)["1"] == "Jan"

    @pytest.mark.parametrize(("length", "expected"), [(1, "AD"), (3, "AD"), (4, "Anno Domini"), (5, "A")])
    def test_era_table(self, length: int, expected: str) -> None:
        """Era width follows the G run."""
        assert get_era_table(get_default_date_object(), length)["1"] == expected

    def test_missing_tables(self) -> None:
        """Missing tables are empty."""
        assert get_era_table({}, 1) == {}
        assert get_name_table({}, "days", 3) == {}


# ============================================================================
# Tokenization
# ============================================================================


class TestTokenizer:
    """Pattern tokenization."""

    def test_runs_and_literals(self) -> None:
        """Letter runs, quoted literals and single characters."""
        tokens = tokenize_pattern("EEEE, MMMM d 'at' h:mm a")
        assert [t.text for t in tokens] == [
            "EEEE", ",", " ", "MMMM", " ", "d", " ", "'at'", " ", "h", ":", "mm", " ", "a",
        ]
        assert tokens[0].field == DateField.WEEKDAY
        assert tokens[7].field == DateField.QUOTED
        assert tokens[7].literal == "at"
        assert tokens[10].field == DateField.TIME_SEPARATOR

    def test_escaped_quote(self) -> None:
        """'' is a literal quote, inside or outside quoted text."""
        tokens = tokenize_pattern("h 'o''clock' ''")
        assert tokens[2].literal == "o'clock"
        assert tokens[4].literal == "'"

    @pytest.mark.parametrize(
        ("letter", "field"),
        [
            ("G", DateField.ERA),
            ("L", DateField.MONTH),
            ("c", DateField.WEEKDAY),
            ("K", DateField.HOUR12),
            ("H", DateField.HOUR24),
            ("W", DateField.WEEK_OF_YEAR),
            ("f", DateField.MILLISECONDS),
            ("z", DateField.TIME_ZONE),
            ("/", DateField.DATE_SEPARATOR),
            ("x", DateField.TEXT),
        ],
    )
    def test_fields(self, letter: str, field: DateField) -> None:
        """Every letter maps to one field kind."""
        assert tokenize_pattern(letter)[0].field == field


# ============================================================================
# Helpers
# ============================================================================


class TestHelpers:
    """Separators, offsets and week numbers."""

    def test_date_separator(self) -> None:
        """The separator between month and day in the short pattern."""
        assert get_date_separator({"dateFormats": {"short": "dd.MM.yy"}}) == "."
        assert get_date_separator({}) == "/"

    @pytest.mark.parametrize(
        ("hours", "expected"), [(2, -120), (-5, 300), (0, 0), (5.5, -330)]
    )
    def test_time_zone_offset(self, hours: float, expected: int) -> None:
        """Offsets are minutes, positive west of UTC."""
        value = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=hours)))
        assert time_zone_offset(value) == expected

    @pytest.mark.parametrize(
        ("offset", "pattern", "expected"),
        [
            (-330, "+HH:mm;-HH:mm", "+05:30"),
            (300, "+HH:mm;-HH:mm", "-05:00"),
            (-120, "+H;-H", "+2"),
            (300, "+H;-H", "-5"),
            (-120, "+H", "+2"),
        ],
    )
    def test_time_zone_value(self, offset: int, pattern: str, expected: str) -> None:
        """Positive offsets use the second branch."""
        assert get_time_zone_value(offset, pattern) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (date(2021, 1, 1), 0),
            (date(2021, 1, 3), 0),
            (date(2021, 1, 4), 1),
            (date(2025, 1, 2), 1),
            (date(2024, 1, 1), 1),
            (date(2020, 12, 31), 53),
            (date(2024, 12, 30), 1),
            (datetime(2021, 1, 1, 23, 59), 0),
        ],
    )
    def test_week_of_year(self, value: date, expected: int) -> None:
        """Monday-based weeks; days before week 1 are week 0."""
        assert get_week_of_year(value) == expected


class TestFirstDayOfWeek:
    """Week-data lookup."""

    @pytest.mark.parametrize(
        ("culture", "expected"), [("en-GB", 1), ("de-DE", 1), ("de", 1), ("en-US", 0), ("fr-FR", 0), ("en-EG", 6)]
    )
    def test_lookup(self, week_data: LocaleData, culture: str, expected: int) -> None:
        """Region first, then two-letter prefix; Sunday otherwise."""
        assert first_day_of_week(culture, week_data) == expected

    def test_no_week_data(self, empty_data: LocaleData) -> None:
        """Without week data every culture starts on Sunday."""
        assert first_day_of_week("en-GB", empty_data) == 0


# ============================================================================
# Export
# ============================================================================


class TestExcelExport:
    """Spreadsheet date patterns."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("M/d/y h:mm a", "m/d/yyyy h:mm AM/PM"),
            ("EEEE, MMMM d, y", "dddd, mmmm d, yyyy"),
            ("M/d/yy", "m/d/yy"),
            ("HH:mm", "hh:mm"),
            ("E, MMM d", "ddd, mmm d"),
            ("MMM d, y G", "mmm d, yyyy "),
        ],
    )
    def test_to_excel(self, pattern: str, expected: str) -> None:
        """CLDR letters map to spreadsheet letters."""
        assert to_excel_date_pattern(pattern) == expected

    def test_get_date_pattern(self, empty_data: LocaleData) -> None:
        """Plain export returns the resolved pattern."""
        options = DateFormatOptions(skeleton="short")
        assert get_date_pattern("en-US", options, empty_data) == "M/d/yy"

    def test_excel_islamic_trims_era(self, empty_data: LocaleData) -> None:
        """The dropped era leaves no trailing space."""
        options = DateFormatOptions(skeleton="short", calendar="islamic")
        assert get_date_pattern("en-US", options, empty_data, excel=True) == "m/d/yyyy"

    def test_excel_quotes_time_zone(self, empty_data: LocaleData) -> None:
        """The zone run is replaced by the quoted current GMT text."""
        options = DateFormatOptions(skeleton="full", type=FormatType.TIME)
        pattern = get_date_pattern("en-US", options, empty_data, excel=True)
        assert pattern.startswith('h:mm:ss AM/PM "GMT')
        assert pattern.endswith('"')

    def test_unresolved(self, empty_data: LocaleData) -> None:
        """Unresolvable options raise."""
        with pytest.raises(ConfigurationError):
            get_date_pattern("en-US", DateFormatOptions(skeleton="nonsense"), empty_data)
