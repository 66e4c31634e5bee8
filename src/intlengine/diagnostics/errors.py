"""Exception hierarchy with structured diagnostics.

Only configuration and option-validation problems raise. Unparseable input
is a soft failure reported through return values (None for dates, NaN for
numbers), never through these exceptions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "IntlError",
    "ValidationError",
]


class IntlError(Exception):
    """Base exception for all engine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(IntlError):
    """Options and locale data cannot produce a usable pattern.

    Raised when compiling a formatter or parser, never at call time:
    - date skeleton/type combination unresolved and no explicit format
    - unknown culture requested from the Babel loader
    """


class ValidationError(IntlError, ValueError):
    """Inconsistent or out-of-range option values.

    Examples:
    - minimumFractionDigits outside [0, 20]
    - minimumSignificantDigits greater than maximumSignificantDigits
    - only one of a significant-digit pair given

    Subclasses ValueError so callers validating user input can catch either.
    """
