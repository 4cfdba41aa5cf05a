"""bigcurrency - Locale-aware currency formatting for arbitrary-precision decimals.

Formats Decimal and Fraction amounts (values beyond float precision included)
with CLDR currency patterns: grouping, decimal separator, sign placement and
currency symbol, with exact round-half-up rounding.

Public API:
    format_currency - Core entry point (value, locale, currency display text)
    CurrencyTransform - Accepts raw strings/numbers, resolves symbol/code display
    transform_currency - Functional shortcut for CurrencyTransform
    parse_number_format - Parse a CLDR number pattern into a NumberFormat
    LocaleContext - Cached, immutable CLDR locale data (via Babel)

Exceptions:
    CurrencyError - Base exception class
    FormatError - Malformed digits info, pattern or fraction bounds
    InvalidArgumentError - Value rejected by CurrencyTransform

Submodules:
    bigcurrency.formatting - Pattern parser, rounder, renderer, value adapters
    bigcurrency.currencies - Currency symbols and fraction digits
    bigcurrency.diagnostics - Error types, codes and formatting
"""

from .diagnostics import CurrencyError, FormatError, InvalidArgumentError
from .enums import CurrencyDisplay, NumberSymbol, SymbolWidth
from .formatting import NumberFormat, format_currency, parse_number_format
from .locale_context import LocaleContext
from .transform import CurrencyTransform, transform_currency

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("bigcurrency")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDisplay",
    "CurrencyError",
    "CurrencyTransform",
    "FormatError",
    "InvalidArgumentError",
    "LocaleContext",
    "NumberFormat",
    "NumberSymbol",
    "SymbolWidth",
    "__version__",
    "format_currency",
    "parse_number_format",
    "transform_currency",
]
