"""Explicit configuration structs for formatting and parsing.

Both option types are frozen and hashable so a compiled formatter or parser
can be cached per (culture, options, locale data) triple.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Self

from intlengine.diagnostics import ErrorTemplate, ValidationError
from intlengine.enums import CalendarType, FormatType

__all__ = ["DateFormatOptions", "NumberFormatOptions"]

_DIGIT_FIELDS: tuple[str, ...] = (
    "minimum_fraction_digits",
    "maximum_fraction_digits",
    "minimum_significant_digits",
    "maximum_significant_digits",
    "minimum_integer_digits",
)


def _check_optional_str(name: str, value: object) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(ErrorTemplate.option_type_invalid(name, "a string", value))


@dataclass(frozen=True, slots=True)
class DateFormatOptions:
    """Options selecting a date pattern.

    Attributes:
        skeleton: Built-in style ("short", "medium", "long", "full") or an
            availableFormats skeleton such as "yMd"
        type: Pattern family; "date" when omitted
        format: Explicit pattern overriding skeleton resolution
        calendar: Calendar table key; values starting with "islamic" select
            Hijri conversion
        is_server_rendered: Carried for callers that render on a server;
            the engine does not act on it

    Example:
        >>> DateFormatOptions(skeleton="full", type="dateTime").type
        <FormatType.DATE_TIME: 'dateTime'>
    """

    skeleton: str | None = None
    type: FormatType | None = None
    format: str | None = None
    calendar: str | None = None
    is_server_rendered: bool = False

    def __post_init__(self) -> None:
        """Validate option types and coerce ``type`` to FormatType.

        Raises:
            ValidationError: If a field has the wrong type or ``type`` is not
                one of "date", "time", "dateTime".
        """
        _check_optional_str("skeleton", self.skeleton)
        _check_optional_str("format", self.format)
        _check_optional_str("calendar", self.calendar)
        if self.type is not None:
            try:
                object.__setattr__(self, "type", FormatType(self.type))
            except ValueError:
                raise ValidationError(
                    ErrorTemplate.option_type_invalid(
                        "type", "one of 'date', 'time', 'dateTime'", self.type
                    )
                ) from None
        if not isinstance(self.is_server_rendered, bool):
            raise ValidationError(
                ErrorTemplate.option_type_invalid("is_server_rendered", "a bool", self.is_server_rendered)
            )

    @property
    def format_type(self) -> FormatType:
        """Effective pattern family (``FormatType.DATE`` when unset)."""
        return self.type or FormatType.DATE

    @property
    def calendar_key(self) -> str:
        """Key of the calendar table under ``dates.calendars``."""
        return self.calendar or CalendarType.GREGORIAN

    @property
    def is_islamic(self) -> bool:
        """True when the calendar selects Hijri conversion."""
        return self.calendar is not None and self.calendar.startswith(CalendarType.ISLAMIC)


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """Options selecting a numeric skeleton or custom pattern.

    ``format`` holds either a skeleton (``N``, ``C2``, ``P``, ``A``, ``E3``)
    or a custom pattern such as ``#,##0.00;(#,##0.00)``.

    Attributes:
        format: Skeleton or custom pattern; "N" when omitted
        currency: ISO 4217 code used to look up the currency symbol
        alt_symbol: Alternate symbol key, e.g. "symbol-alt-narrow"
        ignore_currency: Keep the bare "$" placeholder instead of a symbol
        use_grouping: Enable digit grouping; skeletons default to True
        minimum_fraction_digits: 0..20
        maximum_fraction_digits: 0..20
        minimum_significant_digits: 1..21, requires the maximum too
        maximum_significant_digits: 1..21, requires the minimum too
        minimum_integer_digits: Zero-pad the integer part to this width
    """

    format: str | None = None
    currency: str | None = None
    alt_symbol: str | None = None
    ignore_currency: bool = False
    use_grouping: bool | None = None
    minimum_fraction_digits: int | None = field(default=None, kw_only=True)
    maximum_fraction_digits: int | None = field(default=None, kw_only=True)
    minimum_significant_digits: int | None = field(default=None, kw_only=True)
    maximum_significant_digits: int | None = field(default=None, kw_only=True)
    minimum_integer_digits: int | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        """Validate option types.

        Digit ranges are checked when a formatter is compiled, after pattern
        defaults are known.

        Raises:
            ValidationError: If a field has the wrong type.
        """
        _check_optional_str("format", self.format)
        _check_optional_str("currency", self.currency)
        _check_optional_str("alt_symbol", self.alt_symbol)
        if not isinstance(self.ignore_currency, bool):
            raise ValidationError(
                ErrorTemplate.option_type_invalid("ignore_currency", "a bool", self.ignore_currency)
            )
        if self.use_grouping is not None and not isinstance(self.use_grouping, bool):
            raise ValidationError(
                ErrorTemplate.option_type_invalid("use_grouping", "a bool", self.use_grouping)
            )
        for name in _DIGIT_FIELDS:
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValidationError(ErrorTemplate.option_type_invalid(name, "an int", value))

    @classmethod
    def from_skeleton(cls, skeleton: str, **kwargs: object) -> Self:
        """Build options from a numeric skeleton such as "N2" or "C"."""
        return cls(format=skeleton, **kwargs)  # type: ignore[arg-type]

    def with_currency(self, currency_code: str) -> NumberFormatOptions:
        """Return a copy whose currency defaults to ``currency_code``."""
        if self.currency:
            return self
        return replace(self, currency=currency_code)

    def digit_options(self) -> dict[str, int]:
        """Digit-count options that were explicitly given."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name in _DIGIT_FIELDS and getattr(self, f.name) is not None
        }
