"""Gregorian <-> Hijri conversion using the tabular Islamic calendar.

Arithmetic (civil) variant: 30-year cycle with leap years 2, 5, 7, 10, 13,
16, 18, 21, 24, 26, 29; odd months have 30 days, even months 29, and the
twelfth month gains a day in leap years. Epoch 1 Muharram 1 AH is Friday
16 July 622 (Julian), proleptic Gregorian 19 July 622.

All arithmetic is done on proleptic Gregorian ordinals (date.toordinal), so
conversions are exact integer inverses.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import NamedTuple

__all__ = [
    "HIJRI_EPOCH_ORDINAL",
    "HijriDate",
    "is_leap_year",
    "month_length",
    "to_gregorian",
    "to_hijri",
]

HIJRI_EPOCH_ORDINAL: int = date(622, 7, 19).toordinal()


class HijriDate(NamedTuple):
    """Hijri calendar date (month is 1-based)."""

    year: int
    month: int
    day: int


def is_leap_year(year: int) -> bool:
    """Check whether a Hijri year has 355 days."""
    return (14 + 11 * year) % 30 < 11


def month_length(year: int, month: int) -> int:
    """Number of days in a Hijri month."""
    if month % 2 == 1 or (month == 12 and is_leap_year(year)):
        return 30
    return 29


def _to_ordinal(year: int, month: int, day: int) -> int:
    return (
        day
        + (59 * (month - 1) + 1) // 2
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + HIJRI_EPOCH_ORDINAL
        - 1
    )


def to_hijri(value: date | datetime) -> HijriDate:
    """Convert a Gregorian date to its Hijri equivalent.

    The time of day of a datetime is ignored.

    Example:
        >>> to_hijri(date(2024, 3, 11))
        HijriDate(year=1445, month=9, day=1)
    """
    if isinstance(value, datetime):
        value = value.date()
    ordinal = value.toordinal()
    year = (30 * (ordinal - HIJRI_EPOCH_ORDINAL) + 10646) // 10631
    elapsed = ordinal - (29 + _to_ordinal(year, 1, 1))
    month = min(12, -((-2 * elapsed) // 59) + 1)
    day = ordinal - _to_ordinal(year, month, 1) + 1
    return HijriDate(year, month, day)


def to_gregorian(year: int, month: int, day: int) -> date:
    """Convert a Hijri date to a Gregorian date.

    Args:
        year: Hijri year (1 AH or later)
        month: Hijri month, 1..12
        day: Day of month, 1..29 or 1..30

    Returns:
        Proleptic Gregorian date

    Raises:
        ValueError: If the Hijri date does not exist or falls outside the
            range representable by datetime.date.
    """
    if year < 1:
        msg = f"Hijri year must be >= 1, got {year}"
        raise ValueError(msg)
    if not 1 <= month <= 12:
        msg = f"Hijri month must be in 1..12, got {month}"
        raise ValueError(msg)
    if not 1 <= day <= month_length(year, month):
        msg = f"Hijri day must be in 1..{month_length(year, month)}, got {day}"
        raise ValueError(msg)
    return date.fromordinal(_to_ordinal(year, month, day))
