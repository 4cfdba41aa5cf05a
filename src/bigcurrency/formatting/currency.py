"""Currency formatting entry point.

Combines the locale's CLDR currency pattern, the currency's standard fraction
digits and the renderer, then substitutes the currency sign placeholder with
the display text chosen by the caller (symbol, code, or any literal string).

Python 3.13+. Uses Babel for locale data.
"""

from dataclasses import replace
from decimal import Decimal
from fractions import Fraction
from typing import Literal

from bigcurrency.constants import CURRENCY_CHAR
from bigcurrency.currencies import get_number_of_currency_digits
from bigcurrency.enums import NumberSymbol
from bigcurrency.locale_context import LocaleContext

from .pattern import parse_number_format
from .render import format_number_to_locale_string
from .values import DecimalLike, as_decimal_value

__all__ = ["format_currency"]


def format_currency(
    value: DecimalLike | Decimal | Fraction | int,
    locale: str | LocaleContext,
    currency: str,
    currency_code: str | None = None,
    digits_info: str | None = None,
    *,
    format_type: Literal["standard", "accounting"] = "standard",
) -> str:
    """Format a value as currency using locale rules.

    Fraction digits default to the ISO 4217 standard for currency_code; a
    digits_info string overrides them on top of that baseline.

    Args:
        value: Amount (Decimal, Fraction, int, or a DecimalLike). Never modified.
        locale: BCP 47 locale identifier or LocaleContext
        currency: Text that replaces the currency sign ('$', 'USD', 'dollars', '')
        currency_code: ISO 4217 code used for the fraction digit count
        digits_info: ``{minInt}.{minFrac}-{maxFrac}`` override, e.g. "1.0-3"
        format_type: CLDR currency pattern to use ("standard" or "accounting")

    Returns:
        Formatted currency string

    Raises:
        FormatError: Malformed digits_info or pattern, or min > max fraction digits
        TypeError: If value is not a supported numeric type

    Examples:
        >>> from decimal import Decimal
        >>> format_currency(Decimal("123"), "en-US", "$", "USD")
        '$123.00'
        >>> format_currency(Decimal("12"), "en-US", "EUR", "EUR", "1.1-1")
        'EUR12.0'
        >>> format_currency(Decimal("1234.5"), "de-DE", "€", "EUR")
        '1.234,50\xa0€'
        >>> format_currency(Decimal("-1234.5"), "en-US", "$", "USD", format_type="accounting")
        '($1,234.50)'
    """
    ctx = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)

    number_format = parse_number_format(
        ctx.currency_pattern(format_type), ctx.symbol(NumberSymbol.MINUS_SIGN)
    )
    currency_digits = get_number_of_currency_digits(currency_code)
    number_format = replace(number_format, min_frac=currency_digits, max_frac=currency_digits)

    text = format_number_to_locale_string(
        as_decimal_value(value),
        number_format,
        group_symbol=ctx.symbol(NumberSymbol.CURRENCY_GROUP),
        decimal_symbol=ctx.symbol(NumberSymbol.CURRENCY_DECIMAL),
        exponential_symbol=ctx.symbol(NumberSymbol.EXPONENTIAL),
        digits_info=digits_info,
    )
    # A pattern carries at most one currency sign; a second one is dropped.
    return text.replace(CURRENCY_CHAR, currency, 1).replace(CURRENCY_CHAR, "", 1)
