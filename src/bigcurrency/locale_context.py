"""Locale context for thread-safe currency pattern and symbol lookup.

This module provides locale data without global state mutation.
Uses Babel for CLDR-compliant currency patterns and number symbols.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Lookups use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per normalized locale code

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state outside the guarded cache)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError

from bigcurrency.constants import MAX_LOCALE_CACHE_SIZE
from bigcurrency.enums import NumberSymbol
from bigcurrency.locale_utils import normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# Numbering system whose symbols are used for rendering.
_NUMBERING_SYSTEM: str = "latn"

# Roles CLDR may leave undefined, mapped to the role they default to.
_SYMBOL_FALLBACK_ROLES: dict[NumberSymbol, NumberSymbol] = {
    NumberSymbol.CURRENCY_GROUP: NumberSymbol.GROUP,
    NumberSymbol.CURRENCY_DECIMAL: NumberSymbol.DECIMAL,
}

# Last-resort symbols when the locale data has no entry at all.
_DEFAULT_SYMBOLS: dict[NumberSymbol, str] = {
    NumberSymbol.GROUP: ",",
    NumberSymbol.DECIMAL: ".",
    NumberSymbol.MINUS_SIGN: "-",
    NumberSymbol.EXPONENTIAL: "E",
}


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale data for currency formatting.

    Answers the two locale questions the formatting core asks: the raw
    currency pattern, and the literal symbol for a NumberSymbol role.

    Use LocaleContext.create() factory to construct instances with proper validation.
    Direct construction via __init__ is not recommended (bypasses validation).

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse. Use class
        methods for cache management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.currency_pattern()
        '\xa4#,##0.00'
        >>> ctx.symbol(NumberSymbol.GROUP)
        ','

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.symbol(NumberSymbol.CURRENCY_DECIMAL)
        ','

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.locale_code  # Original code preserved
        'invalid-locale'
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Multiple threads can
        share the same instance without synchronization. Cache operations
        are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        Thread-safe via RLock.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds - use create_or_raise() if you need strict validation.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US fallback
            while preserving the original locale_code for debugging.
        """
        # "en-US", "en_US" map to the same cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to en_US", locale_code, e)
            babel_locale = Locale.parse("en_US")
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to en_US", locale_code, e
            )
            babel_locale = Locale.parse("en_US")
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have created the entry meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
            return cls(locale_code=locale_code, _babel_locale=babel_locale)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None

    @property
    def babel_locale(self) -> Locale:
        """Get pre-validated Babel Locale object for this context."""
        return self._babel_locale

    def currency_pattern(
        self, format_type: Literal["standard", "accounting"] = "standard"
    ) -> str:
        """Raw CLDR currency pattern, e.g. '\xa4#,##0.00' for en_US.

        Args:
            format_type: "standard" (default) or "accounting" (negative
                amounts in parentheses for many locales)

        Raises:
            KeyError: If the locale defines no pattern of that type
        """
        return str(self._babel_locale.currency_formats[format_type].pattern)

    def symbol(self, role: NumberSymbol) -> str:
        """Literal locale symbol for a NumberSymbol role.

        Currency group/decimal roles fall back to the plain group/decimal
        symbols where CLDR does not define a currency-specific variant.
        """
        symbols = self._babel_locale.number_symbols.get(_NUMBERING_SYSTEM, {})
        if role in symbols:
            return str(symbols[role])
        fallback = _SYMBOL_FALLBACK_ROLES.get(role)
        if fallback is not None:
            return self.symbol(fallback)
        return _DEFAULT_SYMBOLS[role]
