"""Tests for culture-name utilities.

Python 3.13+.
"""

import pytest

from intlengine.locale_utils import (
    get_region,
    is_english_title_case_culture,
    keeps_designator_case,
    normalize_culture,
    normalize_locale,
)


class TestNormalization:
    """BCP-47 <-> POSIX spelling."""

    @pytest.mark.parametrize(
        ("code", "expected"), [("en-US", "en_US"), ("en", "en"), ("zh-Hant-TW", "zh_Hant_TW")]
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        """Hyphens become underscores for Babel."""
        assert normalize_locale(code) == expected

    @pytest.mark.parametrize(("code", "expected"), [("de_CH", "de-CH"), (" en-US ", "en-US"), ("fr", "fr")])
    def test_normalize_culture(self, code: str, expected: str) -> None:
        """Underscores become hyphens and whitespace is stripped."""
        assert normalize_culture(code) == expected


class TestGetRegion:
    """Region keys for week-data lookup."""

    @pytest.mark.parametrize(
        ("culture", "expected"),
        [("en-GB", "GB"), ("en-US", "US"), ("de", "DE"), ("de-DE", "DE-DE"), ("ar-EG", "AR-EG")],
    )
    def test_region(self, culture: str, expected: str) -> None:
        """English prefix is dropped and the first two letters upper-cased."""
        assert get_region(culture) == expected


class TestCasePolicies:
    """Case handling of parsed month names and designators."""

    @pytest.mark.parametrize("culture", ["en", "en-GB", "en-US"])
    def test_title_case_cultures(self, culture: str) -> None:
        """English cultures title-case month names."""
        assert is_english_title_case_culture(culture)

    @pytest.mark.parametrize("culture", ["en-AU", "de-DE", "fr"])
    def test_other_cultures_not_title_cased(self, culture: str) -> None:
        """Other cultures keep month names as written."""
        assert not is_english_title_case_culture(culture)

    @pytest.mark.parametrize("culture", ["en-US", "en-MH", "en-MP", "de-DE", "fr", "en"])
    def test_designator_case_kept(self, culture: str) -> None:
        """US English and non-English cultures keep designators as written."""
        assert keeps_designator_case(culture)

    @pytest.mark.parametrize("culture", ["en-GB", "en-AU"])
    def test_designator_case_lowered(self, culture: str) -> None:
        """Other English cultures lower-case designators."""
        assert not keeps_designator_case(culture)
