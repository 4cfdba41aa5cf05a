"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def invalid_digits_info(digits_info: str) -> Diagnostic:
        """Digits info string does not match the digits mini-language.

        Args:
            digits_info: The rejected digits info string

        Returns:
            Diagnostic for INVALID_DIGITS_INFO
        """
        msg = f"{digits_info} is not a valid digit info"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGITS_INFO,
            message=msg,
            hint=(
                "Use {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}, "
                "e.g. '1.2-2'"
            ),
            input_value=digits_info,
        )

    @staticmethod
    def invalid_fraction_bounds(min_frac: int, max_frac: int) -> Diagnostic:
        """Minimum fraction digits exceed the maximum.

        Args:
            min_frac: Requested minimum fraction digits
            max_frac: Requested maximum fraction digits

        Returns:
            Diagnostic for INVALID_FRACTION_BOUNDS
        """
        msg = (
            f"The minimum number of digits after fraction ({min_frac}) "
            f"is higher than the maximum ({max_frac})."
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_FRACTION_BOUNDS,
            message=msg,
            hint="Give a maximum at least as large as the minimum, e.g. '1.3-3'",
            input_value=f"{min_frac}-{max_frac}",
        )

    @staticmethod
    def invalid_pattern(pattern: str) -> Diagnostic:
        """Number pattern without any digit placeholder.

        Args:
            pattern: The rejected number pattern

        Returns:
            Diagnostic for INVALID_PATTERN
        """
        msg = f"Number pattern '{pattern}' has no digit placeholder"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PATTERN,
            message=msg,
            hint="Patterns need at least one '0' or '#', e.g. '\xa4#,##0.00'",
            input_value=pattern,
        )

    @staticmethod
    def not_a_number(value: object) -> Diagnostic:
        """Value cannot be coerced to an arbitrary-precision decimal.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = f"{value} is not a number"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            hint="Pass a str, int, float, Decimal or Fraction",
            input_value=repr(value),
        )

    @staticmethod
    def invalid_argument(transform_name: str, reason: str) -> Diagnostic:
        """Transform rejected its input.

        Args:
            transform_name: Name of the rejecting transform
            reason: Message of the underlying error

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = f"InvalidArgument: '{reason}' for '{transform_name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            input_value=reason,
        )
