"""Currency symbol and fraction-digit lookup.

Symbol data sourced from Unicode CLDR via Babel. Babel imports only the
standard ("wide") symbol of each currency and drops CLDR's narrow variants,
so narrow symbols come from a bundled table and fall back to the wide symbol.

Thread-safe. Results are cached.

Python 3.13+.
"""

import functools
import logging

from babel.numbers import get_currency_precision as get_currency_fraction_digits
from babel.numbers import get_currency_symbol as babel_currency_symbol

from bigcurrency.constants import DEFAULT_CURRENCY_DIGITS, MAX_LOCALE_CACHE_SIZE
from bigcurrency.enums import SymbolWidth
from bigcurrency.locale_context import LocaleContext

__all__ = ["get_currency_symbol", "get_number_of_currency_digits"]

logger = logging.getLogger(__name__)

# =============================================================================
# NARROW SYMBOLS
# =============================================================================
# CLDR "symbol-alt-narrow" values. Locale-independent: a narrow symbol drops
# the disambiguating prefix ("CA$" -> "$") and reads the same everywhere.
_NARROW_SYMBOLS: dict[str, str] = {
    # Dollars and pesos
    "ARS": "$", "AUD": "$", "BBD": "$", "BMD": "$", "BND": "$", "BSD": "$",
    "BZD": "$", "CAD": "$", "CLP": "$", "COP": "$", "CUC": "$", "CUP": "$",
    "DOP": "$", "FJD": "$", "GYD": "$", "HKD": "$", "JMD": "$", "KYD": "$",
    "LRD": "$", "MXN": "$", "NAD": "$", "NZD": "$", "SBD": "$", "SGD": "$",
    "SRD": "$", "TTD": "$", "TWD": "$", "USD": "$", "UYU": "$", "XCD": "$",
    "NIO": "C$", "TOP": "T$", "BRL": "R$",
    # Pounds
    "EGP": "E\xa3", "FKP": "\xa3", "GBP": "\xa3", "GIP": "\xa3", "LBP": "L\xa3",
    "SHP": "\xa3", "SSP": "\xa3", "SYP": "\xa3",
    # Yen, yuan, won
    "CNY": "\xa5", "JPY": "\xa5", "KPW": "₩", "KRW": "₩",
    # Crowns
    "CZK": "Kč", "DKK": "kr", "ISK": "kr", "NOK": "kr", "SEK": "kr",
    # Rupees
    "INR": "₹", "LKR": "Rs", "MUR": "Rs", "NPR": "Rs", "PKR": "Rs",
    # Dedicated currency signs
    "CRC": "₡", "EUR": "€", "GEL": "₾", "ILS": "₪",
    "KHR": "៛", "KZT": "₸", "LAK": "₭", "MNT": "₮",
    "NGN": "₦", "PHP": "₱", "PYG": "₲", "RUB": "₽",
    "THB": "฿", "TRY": "₺", "UAH": "₴", "VND": "₫",
    "BDT": "৳",
    # Text symbols
    "BOB": "Bs", "BWP": "P", "BYN": "р.", "GNF": "FG", "GTQ": "Q",
    "HNL": "L", "HRK": "kn", "HUF": "Ft", "IDR": "Rp", "KMF": "CF",
    "MGA": "Ar", "MMK": "K", "MYR": "RM", "PLN": "zł", "RON": "lei",
    "RWF": "RF", "STN": "Db", "ZAR": "R",
}


def get_number_of_currency_digits(currency_code: str | None) -> int:
    """Standard number of fraction digits for a currency.

    Args:
        currency_code: ISO 4217 code; None or unknown codes get the default (2)

    Returns:
        Fraction digits per CLDR (JPY: 0, USD: 2, BHD: 3)

    Examples:
        >>> get_number_of_currency_digits("JPY")
        0
        >>> get_number_of_currency_digits("BHD")
        3
        >>> get_number_of_currency_digits(None)
        2
    """
    if not currency_code:
        return DEFAULT_CURRENCY_DIGITS
    return _currency_digits(currency_code.upper())


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _currency_digits(code_upper: str) -> int:
    return int(get_currency_fraction_digits(code_upper))


def get_currency_symbol(
    currency_code: str,
    width: SymbolWidth | str = SymbolWidth.WIDE,
    locale: str | LocaleContext = "en-US",
) -> str:
    """Currency symbol for display in a locale.

    Args:
        currency_code: ISO 4217 code (e.g., 'CAD'). Unknown codes are
            returned unchanged.
        width: SymbolWidth.WIDE ('CA$') or SymbolWidth.NARROW ('$')
        locale: Locale code or LocaleContext used for the wide symbol

    Returns:
        Symbol text

    Examples:
        >>> get_currency_symbol("CAD", SymbolWidth.WIDE, "en-US")
        'CA$'
        >>> get_currency_symbol("CAD", SymbolWidth.NARROW, "en-US")
        '$'
        >>> get_currency_symbol("unexisting_ISO_code", SymbolWidth.WIDE, "en-US")
        'unexisting_ISO_code'
    """
    ctx = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)
    if SymbolWidth(width) is SymbolWidth.NARROW:
        narrow = _NARROW_SYMBOLS.get(currency_code.upper())
        if narrow is not None:
            return narrow
        logger.debug("No narrow symbol for %s, using wide symbol", currency_code)
    return str(babel_currency_symbol(currency_code, locale=ctx.babel_locale))
