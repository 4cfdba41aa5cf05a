"""Shared constants for bigcurrency.

This module provides centralized configuration constants used across
the formatting core, the locale layer and the transform adapter. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Defaults: Locale and currency used when the caller supplies none
- Pattern syntax: Reserved characters of CLDR number patterns
- Exponent limits: Magnitude at which values are shown in exponent form
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CURRENCY_DIGITS",
    "DEFAULT_MIN_INTEGER_DIGITS",
    # Pattern syntax
    "CURRENCY_CHAR",
    "DECIMAL_SEP",
    "DIGIT_CHAR",
    "GROUP_SEP",
    "PATTERN_SEP",
    "QUOTE_CHAR",
    "ZERO_CHAR",
    "DIGITS_INFO_REGEXP",
    # Exponent limits
    "EXPONENTIAL_AT",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# Locale used by CurrencyTransform when no locale is configured.
DEFAULT_LOCALE: str = "en-US"

# Currency shown when the caller gives no ISO 4217 code.
DEFAULT_CURRENCY_CODE: str = "USD"

# Fraction digits for currencies CLDR has no explicit entry for.
DEFAULT_CURRENCY_DIGITS: int = 2

# Every CLDR currency pattern requires at least one integer digit.
DEFAULT_MIN_INTEGER_DIGITS: int = 1

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

PATTERN_SEP: str = ";"
DECIMAL_SEP: str = "."
GROUP_SEP: str = ","
ZERO_CHAR: str = "0"
DIGIT_CHAR: str = "#"
QUOTE_CHAR: str = "'"

# U+00A4 CURRENCY SIGN, replaced by the resolved currency display text.
CURRENCY_CHAR: str = "\xa4"

# {minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}, e.g. "1.2-2".
# Group 1: min integer, group 3: min fraction, group 5: max fraction.
DIGITS_INFO_REGEXP: re.Pattern[str] = re.compile(r"^(\d+)?\.((\d+)(-(\d+))?)?$")

# ============================================================================
# EXPONENT LIMITS
# ============================================================================

# Decimal exponent (power of ten of the leading digit) at which a value is
# rendered as mantissa + exponent marker instead of a full digit string.
# 1e21 is where arbitrary-precision decimal libraries switch to exponential
# notation by default.
EXPONENTIAL_AT: int = 21

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# Prevents unbounded memory growth in multi-locale applications.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
