"""Enumerations for bigcurrency type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NumberSymbol(StrEnum):
    """Role of a locale number symbol.

    Values are the CLDR symbol keys, so members index Babel's
    ``Locale.number_symbols`` tables directly.
    """

    GROUP = "group"
    """Grouping separator: 1,234"""

    DECIMAL = "decimal"
    """Decimal separator: 1.5"""

    MINUS_SIGN = "minusSign"
    """Minus sign prepended to negative numbers without a negative pattern"""

    EXPONENTIAL = "exponential"
    """Exponent marker: 1.2E+25"""

    CURRENCY_GROUP = "currencyGroup"
    """Grouping separator for monetary amounts (falls back to GROUP)"""

    CURRENCY_DECIMAL = "currencyDecimal"
    """Decimal separator for monetary amounts (falls back to DECIMAL)"""


class SymbolWidth(StrEnum):
    """Width of a currency symbol.

    StrEnum provides automatic string conversion: str(SymbolWidth.WIDE) == "wide"
    """

    WIDE = "wide"
    """Standard symbol, disambiguated where needed: CA$"""

    NARROW = "narrow"
    """Shortest symbol, possibly ambiguous: $"""


class CurrencyDisplay(StrEnum):
    """Named display modes for the currency designator.

    Any other string passed as a display mode is used verbatim.
    """

    CODE = "code"
    """ISO 4217 code: USD"""

    SYMBOL = "symbol"
    """Wide symbol: CA$"""

    SYMBOL_NARROW = "symbol-narrow"
    """Narrow symbol: $"""


class Sign(StrEnum):
    """Sign of a numeric value. Zero is unsigned, including negative zero."""

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"


__all__ = [
    "CurrencyDisplay",
    "NumberSymbol",
    "Sign",
    "SymbolWidth",
]
