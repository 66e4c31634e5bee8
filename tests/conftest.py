"""Pytest configuration for IntlEngine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Shared Fixtures:
- empty_data: the shared empty LocaleData (every culture uses the default object)
- arabic_data: one "ar-XX" culture using Arabic-Indic digits and symbols
- week_data: supplemental week data for first-day-of-week lookups
"""

import copy
import os
from collections.abc import Iterator
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from intlengine.data.defaults import DEFAULT_LOCALE_OBJECT
from intlengine.data.store import LocaleData
from intlengine.runtime.context import IntlContext

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# LOCALE DATA FIXTURES
# =============================================================================

ARABIC_SYMBOLS: dict[str, str] = {
    "decimal": "٫",
    "group": "٬",
    "percentSign": "٪",
    "plusSign": "+",
    "minusSign": "-",
    "exponential": "اس",
    "infinity": "∞",
    "nan": "ليس رقمًا",
    "timeSeparator": ":",
}


def build_arabic_tree() -> dict[str, Any]:
    """Default locale object re-keyed to the ``arab`` numbering system."""
    culture: dict[str, Any] = copy.deepcopy(DEFAULT_LOCALE_OBJECT)
    numbers = culture["numbers"]
    numbers["defaultNumberingSystem"] = "arab"
    numbers["symbols-numberSystem-arab"] = dict(ARABIC_SYMBOLS)
    for kind in ("decimal", "percent", "currency", "scientific"):
        numbers[f"{kind}Formats-numberSystem-arab"] = numbers.pop(f"{kind}Formats-numberSystem-latn")
    del numbers["symbols-numberSystem-latn"]
    return {"main": {"ar-XX": culture}}


@pytest.fixture
def empty_data() -> LocaleData:
    """Shared empty snapshot."""
    return LocaleData.empty()


@pytest.fixture(scope="session")
def arabic_data() -> LocaleData:
    """Snapshot with one culture, "ar-XX", using Arabic-Indic digits."""
    return LocaleData(build_arabic_tree())


@pytest.fixture(scope="session")
def week_data() -> LocaleData:
    """Snapshot holding only supplemental week data."""
    return LocaleData(
        {
            "supplemental": {
                "weekData": {"firstDay": {"GB": "mon", "DE": "mon", "US": "sun", "EG": "sat"}},
            }
        }
    )


@pytest.fixture(autouse=True)
def _clear_context_cache() -> Iterator[None]:
    """Isolate IntlContext caches between tests."""
    IntlContext.clear_cache()
    yield
    IntlContext.clear_cache()
