"""Precision rounding for currency amounts.

Rounds a DecimalLike value to a fraction-digit count chosen between a minimum
and a maximum, using round-half-up (ties away from zero, never banker's
rounding), and returns the exact digit sequence to render.

Python 3.13+.
"""

from dataclasses import dataclass

from bigcurrency.constants import ZERO_CHAR
from bigcurrency.diagnostics import ErrorTemplate, FormatError

from .values import DecimalLike

__all__ = ["RoundedDigits", "round_number"]


@dataclass(frozen=True, slots=True)
class RoundedDigits:
    """Digit sequence of a rounded value.

    Attributes:
        digits: Single-character digits, most significant first
        integer_length: How many leading digits belong to the integer part.
            Zero or negative when the value is below one; the renderer
            synthesizes the missing leading zeros.
        fraction_size: Number of fraction digits the sequence was rounded to
    """

    digits: tuple[str, ...]
    integer_length: int
    fraction_size: int

    @property
    def is_zero(self) -> bool:
        """True if every digit is zero (the rounded value is exactly zero)."""
        return all(d == ZERO_CHAR for d in self.digits)


def round_number(value: DecimalLike, min_frac: int, max_frac: int) -> RoundedDigits:
    """Round a value to between ``min_frac`` and ``max_frac`` fraction digits.

    The target size is the value's natural fraction length clamped to
    [min_frac, max_frac]. Values with a non-terminating expansion use max_frac.

    Args:
        value: Value to round (left untouched)
        min_frac: Minimum fraction digits in the result
        max_frac: Maximum fraction digits in the result

    Returns:
        RoundedDigits with exactly the target number of fraction digits

    Raises:
        FormatError: If min_frac > max_frac

    Examples:
        >>> from decimal import Decimal
        >>> round_number(DecimalValue(Decimal("9.995")), 2, 2)
        RoundedDigits(digits=('1', '0', '0', '0'), integer_length=2, fraction_size=2)
        >>> round_number(DecimalValue(Decimal("5.005")), 2, 2).digits
        ('5', '0', '1')
    """
    if min_frac > max_frac:
        raise FormatError(ErrorTemplate.invalid_fraction_bounds(min_frac, max_frac))

    natural = value.fraction_digit_count()
    if natural is None:
        fraction_size = max_frac
    else:
        fraction_size = min(max(min_frac, natural), max_frac)

    rounded = value.round_half_up(fraction_size)
    digits = rounded.significant_digits()
    # Taken after rounding: a carry (9.995 -> 10.00) adds an integer digit.
    integer_length = rounded.integer_digit_count()

    # Trailing zeros are not significant; restore them up to the target size.
    # This also covers integer zeros dropped from values like 120 -> ("1", "2").
    zeros_to_add = fraction_size - (len(digits) - integer_length)
    if zeros_to_add > 0:
        digits = digits + (ZERO_CHAR,) * zeros_to_add

    return RoundedDigits(
        digits=digits,
        integer_length=integer_length,
        fraction_size=fraction_size,
    )
