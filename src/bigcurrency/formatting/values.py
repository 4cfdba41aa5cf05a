"""Arbitrary-precision value adapters for the formatting core.

The pattern parser, rounder and renderer are written once against the
DecimalLike protocol. Each concrete arbitrary-precision type gets a small,
immutable adapter:

    - DecimalValue: decimal.Decimal (finite values only)
    - FractionValue: fractions.Fraction (exact rationals; values without a
      terminating decimal expansion round to the maximum fraction digits)

Adapters never mutate the wrapped value. Every operation returns a new
adapter, so callers may format the same object repeatedly.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from fractions import Fraction
from typing import ClassVar, Protocol, Self, runtime_checkable

from bigcurrency.constants import EXPONENTIAL_AT
from bigcurrency.enums import Sign

__all__ = [
    "DecimalLike",
    "DecimalValue",
    "FractionValue",
    "as_decimal_value",
]


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class DecimalLike(Protocol):
    """Capabilities the formatting core needs from an arbitrary-precision value."""

    exponential_at: ClassVar[int]

    def sign(self) -> Sign:
        """Sign of the value. Negative zero reports Sign.ZERO."""
        ...

    def integer_digit_count(self) -> int:
        """Digits before the decimal point of the leading significant digit.

        Zero or negative for magnitudes below one (0.05 -> -1); 1 for zero.
        """
        ...

    def significant_digits(self) -> tuple[str, ...]:
        """Digits without leading or trailing zeros; ("0",) for zero."""
        ...

    def fraction_digit_count(self) -> int | None:
        """Natural number of fraction digits, None if the expansion never ends."""
        ...

    def round_half_up(self, fraction_digits: int) -> Self:
        """Round to ``fraction_digits`` places, ties away from zero."""
        ...

    def scale_by_power_of_ten(self, exponent: int) -> Self:
        """Return value * 10**exponent, exactly."""
        ...
# pylint: enable=unnecessary-ellipsis


@dataclass(frozen=True, slots=True)
class DecimalValue:
    """DecimalLike adapter for decimal.Decimal.

    Rounding runs in a private Context sized to the value, so results never
    depend on (or alter) the thread's current decimal context.
    """

    exponential_at: ClassVar[int] = EXPONENTIAL_AT

    value: Decimal

    def __post_init__(self) -> None:
        if not self.value.is_finite():
            msg = f"{self.value} is not a finite decimal"
            raise ValueError(msg)

    def sign(self) -> Sign:
        if self.value.is_zero():
            return Sign.ZERO
        return Sign.NEGATIVE if self.value.is_signed() else Sign.POSITIVE

    def integer_digit_count(self) -> int:
        if self.value.is_zero():
            return 1
        return self.value.adjusted() + 1

    def significant_digits(self) -> tuple[str, ...]:
        text = "".join(str(d) for d in self.value.as_tuple().digits).strip("0")
        return tuple(text) if text else ("0",)

    def fraction_digit_count(self) -> int:
        return max(0, len(self.significant_digits()) - self.integer_digit_count())

    def round_half_up(self, fraction_digits: int) -> DecimalValue:
        quantum = Decimal((0, (1,), -fraction_digits))
        # Room for every integer digit, the kept fraction digits and a carry.
        precision = max(1, self.value.adjusted() + fraction_digits + 2)
        context = Context(prec=precision, rounding=ROUND_HALF_UP)
        return DecimalValue(self.value.quantize(quantum, context=context))

    def scale_by_power_of_ten(self, exponent: int) -> DecimalValue:
        sign, digits, current = self.value.as_tuple()
        # as_tuple() exponent is always an int for finite values
        return DecimalValue(Decimal((sign, digits, int(current) + exponent)))


def _power_of_ten_scale(denominator: int) -> int | None:
    """Smallest k with denominator dividing 10**k, None if no such k exists."""
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


@dataclass(frozen=True, slots=True)
class FractionValue:
    """DecimalLike adapter for fractions.Fraction.

    Rationals such as 1/3 have no terminating decimal expansion; for those
    fraction_digit_count() is None and the rounder uses the maximum fraction
    digits. Rounded values always terminate.
    """

    exponential_at: ClassVar[int] = EXPONENTIAL_AT

    value: Fraction

    def sign(self) -> Sign:
        if self.value == 0:
            return Sign.ZERO
        return Sign.NEGATIVE if self.value < 0 else Sign.POSITIVE

    def integer_digit_count(self) -> int:
        magnitude = abs(self.value)
        if magnitude == 0:
            return 1
        if magnitude >= 1:
            return len(str(magnitude.numerator // magnitude.denominator))
        # Leading zeros after the point: smallest k with magnitude * 10**k >= 1
        k = len(str(magnitude.denominator // magnitude.numerator)) - 1
        if 10**k * magnitude.numerator < magnitude.denominator:
            k += 1
        return 1 - k

    def _coefficient(self) -> tuple[str, int]:
        """Decimal coefficient digits and exponent of a terminating value."""
        magnitude = abs(self.value)
        scale = _power_of_ten_scale(magnitude.denominator)
        if scale is None:
            msg = f"{self.value} has no terminating decimal expansion"
            raise ValueError(msg)
        coefficient = magnitude.numerator * (10**scale // magnitude.denominator)
        return str(coefficient), -scale

    def significant_digits(self) -> tuple[str, ...]:
        digits, _ = self._coefficient()
        text = digits.strip("0")
        return tuple(text) if text else ("0",)

    def fraction_digit_count(self) -> int | None:
        if _power_of_ten_scale(self.value.denominator) is None:
            return None
        return max(0, len(self.significant_digits()) - self.integer_digit_count())

    def round_half_up(self, fraction_digits: int) -> FractionValue:
        scaled = abs(self.value) * 10**fraction_digits
        # floor(scaled + 1/2) without leaving integer arithmetic
        rounded = (2 * scaled.numerator + scaled.denominator) // (2 * scaled.denominator)
        if self.value < 0:
            rounded = -rounded
        return FractionValue(Fraction(rounded, 10**fraction_digits))

    def scale_by_power_of_ten(self, exponent: int) -> FractionValue:
        return FractionValue(self.value * Fraction(10) ** exponent)


def as_decimal_value(value: DecimalLike | Decimal | Fraction | int) -> DecimalLike:
    """Wrap a native arbitrary-precision value in its DecimalLike adapter.

    Args:
        value: Decimal, Fraction, int, or an object already implementing
            DecimalLike (returned unchanged)

    Returns:
        DecimalLike adapter around the value

    Raises:
        TypeError: For any other type (bool and float included; floats must
            be converted by the caller so their decimal text is explicit)
        ValueError: For non-finite Decimals (NaN, Infinity)
    """
    match value:
        case bool():
            msg = f"{value!r} is not a number"
            raise TypeError(msg)
        case Decimal():
            return DecimalValue(value)
        case Fraction():
            return FractionValue(value)
        case int():
            return DecimalValue(Decimal(value))
        case DecimalValue() | FractionValue():
            return value
        case _ if isinstance(value, DecimalLike):
            return value
        case _:
            msg = f"{value!r} is not a number"
            raise TypeError(msg)
