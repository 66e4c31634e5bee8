"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def pattern_unresolved(skeleton: str | None, format_type: str, culture: str) -> Diagnostic:
        """Date skeleton resolved to no pattern and no format override was given.

        Args:
            skeleton: Requested skeleton (None when omitted)
            format_type: Requested pattern type ("date", "time", "dateTime")
            culture: Culture whose calendar tables were searched

        Returns:
            Diagnostic for PATTERN_UNRESOLVED
        """
        msg = (
            f"Format options or type given must be invalid: skeleton {skeleton!r} "
            f"with type {format_type!r} has no pattern in culture {culture!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNRESOLVED,
            message=msg,
            hint="Use a built-in skeleton (short, medium, long, full), an availableFormats "
            "skeleton, or pass an explicit format",
            culture=culture,
        )

    @staticmethod
    def locale_unknown(culture: str, reason: str) -> Diagnostic:
        """Culture not present in the CLDR data bundled with Babel.

        Args:
            culture: Requested culture id
            reason: Underlying error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown culture {culture!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 culture id such as 'en-US' or 'de-DE'",
            culture=culture,
        )

    @staticmethod
    def babel_unavailable(feature: str) -> Diagnostic:
        """Babel-backed loader requested without Babel installed.

        Args:
            feature: Name of the feature requiring Babel

        Returns:
            Diagnostic for BABEL_UNAVAILABLE
        """
        msg = f"{feature} requires Babel for CLDR locale data"
        return Diagnostic(
            code=DiagnosticCode.BABEL_UNAVAILABLE,
            message=msg,
            hint="Install with: pip install babel",
        )

    @staticmethod
    def digit_range_invalid(option_name: str, value: int, low: int, high: int) -> Diagnostic:
        """Digit-count option outside its permitted range.

        Args:
            option_name: Option name in camelCase form
            value: Received value
            low: Inclusive lower bound
            high: Inclusive upper bound

        Returns:
            Diagnostic for DIGIT_RANGE_INVALID
        """
        msg = f"{option_name} value is out of range: {value} not in [{low}, {high}]"
        return Diagnostic(
            code=DiagnosticCode.DIGIT_RANGE_INVALID,
            message=msg,
            hint=f"Use a value between {low} and {high}",
            option_name=option_name,
            received_value=repr(value),
        )

    @staticmethod
    def digit_order_invalid(
        minimum_name: str, minimum: int, maximum_name: str, maximum: int
    ) -> Diagnostic:
        """Minimum digit count greater than the matching maximum.

        Args:
            minimum_name: Name of the minimum option
            minimum: Minimum value
            maximum_name: Name of the maximum option
            maximum: Maximum value

        Returns:
            Diagnostic for DIGIT_ORDER_INVALID
        """
        msg = f"{minimum_name} ({minimum}) exceeds {maximum_name} ({maximum})"
        return Diagnostic(
            code=DiagnosticCode.DIGIT_ORDER_INVALID,
            message=msg,
            hint="Use a minimum that does not exceed the maximum",
            option_name=minimum_name,
            received_value=repr(minimum),
        )

    @staticmethod
    def digit_pair_incomplete(given_name: str, missing_name: str) -> Diagnostic:
        """Only one option of a required min/max pair was given.

        Args:
            given_name: Option that was supplied
            missing_name: Option that is missing

        Returns:
            Diagnostic for DIGIT_PAIR_INCOMPLETE
        """
        msg = f"{given_name} requires {missing_name}"
        return Diagnostic(
            code=DiagnosticCode.DIGIT_PAIR_INCOMPLETE,
            message=msg,
            hint=f"Pass both {given_name} and {missing_name}",
            option_name=missing_name,
        )

    @staticmethod
    def option_type_invalid(option_name: str, expected: str, value: object) -> Diagnostic:
        """Option value of the wrong type.

        Args:
            option_name: Option name
            expected: Human-readable expected type or value set
            value: Received value

        Returns:
            Diagnostic for OPTION_TYPE_INVALID
        """
        msg = f"{option_name} must be {expected}, got {type(value).__name__} {value!r}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_TYPE_INVALID,
            message=msg,
            option_name=option_name,
            received_value=repr(value),
        )
