"""Currency formatting exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "CurrencyError",
    "FormatError",
    "InvalidArgumentError",
]


class CurrencyError(Exception):
    """Base exception for all bigcurrency errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, or None when raised with a plain message."""
        return self.diagnostic.code if self.diagnostic is not None else None


class FormatError(CurrencyError):
    """Malformed formatting configuration.

    Raised by the formatting core for:
    - INVALID_DIGITS_INFO: digits info does not match the mini-language
    - INVALID_FRACTION_BOUNDS: minimum fraction digits exceed the maximum
    - INVALID_PATTERN: locale pattern has no digit placeholder

    Never recovered internally: configuration errors fail loudly.
    """


class InvalidArgumentError(CurrencyError):
    """Value rejected by the currency transform.

    Wraps the root cause (a FormatError or a coercion failure) with the
    name of the transform that received it.

    Attributes:
        cause: The underlying exception
        transform_name: Name of the transform that rejected the value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        cause: BaseException | None = None,
        transform_name: str = "",
    ) -> None:
        """Initialize InvalidArgumentError.

        Args:
            message: Error message string OR Diagnostic object
            cause: The underlying exception
            transform_name: Name of the transform that rejected the value
        """
        super().__init__(message)
        self.cause = cause
        self.transform_name = transform_name
