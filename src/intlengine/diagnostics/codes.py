"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
IntlError.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for IntlError subclasses.

    Categories:
        CONFIGURATION: Options or locale data cannot produce a pattern
        VALIDATION: Digit-count or option values are inconsistent
    """

    CONFIGURATION = "configuration"
    VALIDATION = "validation"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (pattern resolution, locale data, Babel)
        2000-2999: Validation errors (digit-count and option checks)
    """

    # Configuration errors (1000-1999)
    PATTERN_UNRESOLVED = 1001
    LOCALE_UNKNOWN = 1002
    BABEL_UNAVAILABLE = 1003

    # Validation errors (2000-2999)
    DIGIT_RANGE_INVALID = 2001
    DIGIT_ORDER_INVALID = 2002
    DIGIT_PAIR_INCOMPLETE = 2003
    OPTION_TYPE_INVALID = 2004

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.CONFIGURATION
        return ErrorCategory.VALIDATION


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        culture: Culture in effect when the error was raised
        option_name: Option that caused the error (validation errors)
        received_value: repr() of the offending value (validation errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    culture: str | None = None
    option_name: str | None = None
    received_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[DIGIT_ORDER_INVALID]: minimumSignificantDigits (5) exceeds ...
              = option: minimumSignificantDigits
              = received: 5
              = help: Use a minimum that does not exceed the maximum

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
