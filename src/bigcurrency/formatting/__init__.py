"""Currency formatting core.

Pattern parser, precision rounder and renderer, written once against the
DecimalLike protocol, plus the format_currency() entry point.

Public API:
    format_currency - Format an amount with a locale's currency pattern
    parse_number_format - Parse a CLDR number pattern into a NumberFormat
    parse_digits_info - Parse a ``{minInt}.{minFrac}-{maxFrac}`` string
    round_number - Round half-up to a fraction digit range
    format_number_to_locale_string - Render a value through a NumberFormat

Python 3.13+.
"""

from .currency import format_currency
from .pattern import NumberFormat, parse_number_format
from .render import DigitsInfo, format_number_to_locale_string, parse_digits_info
from .rounding import RoundedDigits, round_number
from .values import DecimalLike, DecimalValue, FractionValue, as_decimal_value

__all__ = [
    "DecimalLike",
    "DecimalValue",
    "DigitsInfo",
    "FractionValue",
    "NumberFormat",
    "RoundedDigits",
    "as_decimal_value",
    "format_currency",
    "format_number_to_locale_string",
    "parse_digits_info",
    "parse_number_format",
    "round_number",
]
