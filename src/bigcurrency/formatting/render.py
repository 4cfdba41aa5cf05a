"""Number rendering: digits info, exponent rescaling, grouping and signs.

Turns a DecimalLike value and a NumberFormat into the final digit string:

    1. Apply a digits-info override to the descriptor's digit bounds
    2. Rescale values too large for plain notation (mantissa + exponent)
    3. Round via round_number()
    4. Zero-pad, split integer and fraction digits, group the integer digits
    5. Wrap with the positive or negative prefix and suffix

All steps build new sequences; neither the value nor the rounded digits are
modified in place.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace

from bigcurrency.constants import DIGITS_INFO_REGEXP, ZERO_CHAR
from bigcurrency.diagnostics import ErrorTemplate, FormatError
from bigcurrency.enums import Sign

from .pattern import NumberFormat
from .rounding import round_number
from .values import DecimalLike

__all__ = [
    "DigitsInfo",
    "format_number_to_locale_string",
    "group_integer_digits",
    "parse_digits_info",
]


@dataclass(frozen=True, slots=True)
class DigitsInfo:
    """Parsed ``{minInt}.{minFrac}-{maxFrac}`` override. None means "keep"."""

    min_int: int | None = None
    min_frac: int | None = None
    max_frac: int | None = None

    def apply(self, number_format: NumberFormat) -> NumberFormat:
        """Return number_format with these digit bounds applied.

        A minimum fraction size above the current maximum raises the maximum
        too, unless an explicit maximum was given.
        """
        min_int = number_format.min_int if self.min_int is None else self.min_int
        min_frac = number_format.min_frac if self.min_frac is None else self.min_frac
        if self.max_frac is not None:
            max_frac = self.max_frac
        elif self.min_frac is not None and min_frac > number_format.max_frac:
            max_frac = min_frac
        else:
            max_frac = number_format.max_frac
        return replace(number_format, min_int=min_int, min_frac=min_frac, max_frac=max_frac)


def parse_digits_info(digits_info: str) -> DigitsInfo:
    """Parse a digits-info string.

    Format: ``{minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}``;
    every number is optional, the dot is not.

    Args:
        digits_info: e.g. "1.2-2", ".0-3", "5.", ".1"

    Returns:
        DigitsInfo with the given parts set

    Raises:
        FormatError: If digits_info does not match the format

    Examples:
        >>> parse_digits_info("4.2-2")
        DigitsInfo(min_int=4, min_frac=2, max_frac=2)
        >>> parse_digits_info(".1")
        DigitsInfo(min_int=None, min_frac=1, max_frac=None)
    """
    match = DIGITS_INFO_REGEXP.match(digits_info)
    if match is None:
        raise FormatError(ErrorTemplate.invalid_digits_info(digits_info))

    min_int, min_frac, max_frac = match.group(1, 3, 5)
    return DigitsInfo(
        min_int=int(min_int) if min_int is not None else None,
        min_frac=int(min_frac) if min_frac is not None else None,
        max_frac=int(max_frac) if max_frac is not None else None,
    )


def group_integer_digits(
    digits: tuple[str, ...], group_size: int, last_group_size: int
) -> list[str]:
    """Split integer digits into groups, most significant group first.

    The group next to the decimal point has last_group_size digits, the
    others group_size digits; the leading group takes what is left. A zero
    size disables that level of grouping.

    Examples:
        >>> group_integer_digits(tuple("1234567"), 3, 3)
        ['1', '234', '567']
        >>> group_integer_digits(tuple("12345678"), 2, 3)
        ['1', '23', '45', '678']
    """
    groups: list[str] = []
    rest = digits
    if last_group_size and len(rest) >= last_group_size:
        groups.append("".join(rest[-last_group_size:]))
        rest = rest[:-last_group_size]
        if group_size:
            while len(rest) > group_size:
                groups.append("".join(rest[-group_size:]))
                rest = rest[:-group_size]
    if rest:
        groups.append("".join(rest))
    groups.reverse()
    return groups


def format_number_to_locale_string(
    value: DecimalLike,
    number_format: NumberFormat,
    *,
    group_symbol: str,
    decimal_symbol: str,
    exponential_symbol: str = "E",
    digits_info: str | None = None,
) -> str:
    """Render a value through a NumberFormat with the given locale symbols.

    Args:
        value: Value to render (left untouched)
        number_format: Parsed pattern supplying bounds, grouping and affixes
        group_symbol: Locale grouping separator
        decimal_symbol: Locale decimal separator
        exponential_symbol: Locale exponent marker
        digits_info: Optional ``{minInt}.{minFrac}-{maxFrac}`` override

    Returns:
        Rendered number with prefix and suffix (currency sign left in place)

    Raises:
        FormatError: Malformed digits_info, or min fraction > max fraction
    """
    if digits_info:
        number_format = parse_digits_info(digits_info).apply(number_format)

    scaled = value
    exponent = 0
    leading_power = value.integer_digit_count() - 1
    if leading_power >= value.exponential_at:
        exponent = leading_power
        scaled = value.scale_by_power_of_ten(-exponent)

    rounded = round_number(scaled, number_format.min_frac, number_format.max_frac)

    digits = rounded.digits
    integer_length = rounded.integer_length
    padding = max(0, number_format.min_int - integer_length, -integer_length)
    digits = (ZERO_CHAR,) * padding + digits
    integer_length += padding

    if integer_length > 0:
        integer_digits = digits[:integer_length]
        fraction_digits = digits[integer_length:]
    else:
        integer_digits = (ZERO_CHAR,)
        fraction_digits = digits

    groups = group_integer_digits(
        integer_digits, number_format.group_size, number_format.last_group_size
    )
    text = group_symbol.join(groups)

    if fraction_digits:
        text += decimal_symbol + "".join(fraction_digits)

    if exponent:
        text += f"{exponential_symbol}+{exponent}"

    if value.sign() is Sign.NEGATIVE and not rounded.is_zero:
        return number_format.neg_prefix + text + number_format.neg_suffix
    return number_format.pos_prefix + text + number_format.pos_suffix
