"""Currency transform: raw values in, display strings out.

Accepts loosely typed input (numeric strings, ints, floats, Decimals,
Fractions), resolves the locale and the currency display mode, and delegates
to format_currency(). Every failure surfaces as InvalidArgumentError wrapping
the root cause.

Example:
    >>> transform = CurrencyTransform("en-US")
    >>> transform.transform(5.1234, "CAD", "symbol")
    'CA$5.12'
    >>> transform.transform(5.1234, "CAD", "symbol-narrow", "5.2-2")
    '$00,005.12'
    >>> transform.transform("123456789012345678.90")
    '$123,456,789,012,345,678.90'
    >>> transform.transform(None) is None
    True

Python 3.13+.
"""

import logging
import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from bigcurrency.constants import DEFAULT_CURRENCY_CODE, DEFAULT_LOCALE
from bigcurrency.currencies import get_currency_symbol
from bigcurrency.deprecation import warn_deprecated
from bigcurrency.diagnostics import CurrencyError, ErrorTemplate, InvalidArgumentError
from bigcurrency.enums import CurrencyDisplay, SymbolWidth
from bigcurrency.formatting import DecimalLike, DecimalValue, as_decimal_value, format_currency
from bigcurrency.locale_utils import get_system_locale

__all__ = ["CurrencyTransform", "RawValue", "transform_currency"]

logger = logging.getLogger(__name__)

type RawValue = str | int | float | Decimal | Fraction | DecimalLike | None
"""Values accepted by CurrencyTransform.transform()."""


def _is_empty(value: object) -> bool:
    """None, empty string and NaN render as nothing."""
    if value is None or (isinstance(value, str) and value == ""):
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def str_to_number(value: object) -> DecimalLike:
    """Coerce a raw value to a DecimalLike.

    Strings are parsed as Decimal literals. Floats go through their shortest
    repr, so 5.005 becomes Decimal('5.005') rather than its binary expansion.

    Raises:
        InvalidArgumentError: If value is not numeric or not finite
    """
    match value:
        case str():
            try:
                number = Decimal(value.strip())
            except InvalidOperation as e:
                raise InvalidArgumentError(ErrorTemplate.not_a_number(value)) from e
        case bool():
            raise InvalidArgumentError(ErrorTemplate.not_a_number(value))
        case float():
            number = Decimal(repr(value))
        case _:
            try:
                return as_decimal_value(value)  # type: ignore[arg-type]
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(ErrorTemplate.not_a_number(value)) from e

    if not number.is_finite():
        raise InvalidArgumentError(ErrorTemplate.not_a_number(value))
    return DecimalValue(number)


class CurrencyTransform:
    """Formats raw values as currency for a default locale.

    Attributes:
        locale: Locale used when transform() is called without one
    """

    name = "CurrencyTransform"

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self.locale = locale

    @classmethod
    def from_system_locale(cls) -> "CurrencyTransform":
        """Create a transform defaulting to the operating system's locale."""
        return cls(get_system_locale())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r})"

    def transform(
        self,
        value: RawValue,
        currency_code: str | None = None,
        display: CurrencyDisplay | str | bool = CurrencyDisplay.SYMBOL,
        digits_info: str | None = None,
        locale: str | None = None,
    ) -> str | None:
        """Format value as currency.

        Args:
            value: Amount as a numeric string, int, float, Decimal, Fraction
                or DecimalLike. The object itself is never modified.
            currency_code: ISO 4217 code (default: USD for display, 2 digits)
            display: Currency designator:
                - "code": Show the code (USD)
                - "symbol" (default): Show the wide symbol (CA$)
                - "symbol-narrow": Show the narrow symbol ($)
                - any other string: Shown verbatim; "" suppresses the designator
                - bool (deprecated): True for "symbol", False for "code"
            digits_info: ``{minInt}.{minFrac}-{maxFrac}`` override, e.g. "1.0-3"
            locale: Locale for this call (default: the transform's locale)

        Returns:
            Formatted string, or None for None, "" and NaN

        Raises:
            InvalidArgumentError: For non-numeric input or a formatting error
        """
        if _is_empty(value):
            return None

        locale = locale or self.locale

        if isinstance(display, bool):
            warn_deprecated(
                "Boolean currency display",
                removal_version="1.0.0",
                alternative="'symbol', 'symbol-narrow' or 'code'",
                stacklevel=3,
            )
            display = CurrencyDisplay.SYMBOL if display else CurrencyDisplay.CODE

        currency = currency_code or DEFAULT_CURRENCY_CODE
        match display:
            case CurrencyDisplay.CODE:
                pass
            case CurrencyDisplay.SYMBOL:
                currency = get_currency_symbol(currency, SymbolWidth.WIDE, locale)
            case CurrencyDisplay.SYMBOL_NARROW:
                currency = get_currency_symbol(currency, SymbolWidth.NARROW, locale)
            case _:
                currency = display
        logger.debug("Currency display %r resolved to %r", display, currency)

        try:
            number = str_to_number(value)
            return format_currency(number, locale, currency, currency_code, digits_info)
        except CurrencyError as e:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_argument(self.name, str(e)),
                cause=e,
                transform_name=self.name,
            ) from e


def transform_currency(
    value: RawValue,
    currency_code: str | None = None,
    display: CurrencyDisplay | str | bool = CurrencyDisplay.SYMBOL,
    digits_info: str | None = None,
    locale: str = DEFAULT_LOCALE,
) -> str | None:
    """Functional shortcut for ``CurrencyTransform(locale).transform(...)``."""
    return CurrencyTransform(locale).transform(value, currency_code, display, digits_info)
