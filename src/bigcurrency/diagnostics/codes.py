"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Format errors (malformed patterns and precision settings)
        2000-2999: Argument errors (values the transform cannot coerce)
    """

    # Format errors (1000-1999)
    INVALID_DIGITS_INFO = 1001
    INVALID_FRACTION_BOUNDS = 1002
    INVALID_PATTERN = 1003

    # Argument errors (2000-2999)
    INVALID_ARGUMENT = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: The offending input (digits info, pattern, raw value)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[INVALID_DIGITS_INFO]: 'abc' is not a valid digit info
              = input: abc
              = help: Use {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
