"""Tests for LocaleContext - cached CLDR locale data without global state.

Tests cache management, fallback for unknown locales, strict creation,
currency pattern lookup and number symbol resolution with fallbacks.

Python 3.13+.
"""

import logging
import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bigcurrency.constants import MAX_LOCALE_CACHE_SIZE
from bigcurrency.enums import NumberSymbol
from bigcurrency.locale_context import LocaleContext

# ============================================================================
# Cache Management Tests
# ============================================================================


@pytest.mark.usefixtures("fresh_locale_cache")
class TestLocaleContextCacheManagement:
    """Test LocaleContext cache operations (clear_cache, cache_size, cache_info)."""

    def test_clear_cache_empties_cache(self) -> None:
        LocaleContext.create("en-US")
        LocaleContext.create("de-DE")
        assert LocaleContext.cache_size() > 0

        LocaleContext.clear_cache()
        assert LocaleContext.cache_size() == 0

    def test_cache_size_returns_count(self) -> None:
        assert LocaleContext.cache_size() == 0

        LocaleContext.create("en-US")
        assert LocaleContext.cache_size() == 1

        LocaleContext.create("de-DE")
        assert LocaleContext.cache_size() == 2

    def test_cache_info(self) -> None:
        LocaleContext.create("en-US")

        info = LocaleContext.cache_info()

        assert info["size"] == 1
        assert info["max_size"] == MAX_LOCALE_CACHE_SIZE
        assert info["locales"] == ("en_US",)

    def test_bcp47_and_posix_share_entry(self) -> None:
        first = LocaleContext.create("en-US")
        second = LocaleContext.create("en_US")

        assert first is second
        assert LocaleContext.cache_size() == 1

    def test_lru_eviction(self) -> None:
        codes = [f"en_{i:03d}" for i in range(MAX_LOCALE_CACHE_SIZE + 1)]
        for code in codes:
            LocaleContext.create(code)

        info = LocaleContext.cache_info()
        assert info["size"] == MAX_LOCALE_CACHE_SIZE
        assert codes[0] not in info["locales"]
        assert codes[-1] in info["locales"]

    def test_concurrent_create_returns_consistent_instances(self) -> None:
        results: list[LocaleContext] = []

        def worker() -> None:
            results.append(LocaleContext.create("fr-FR"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert LocaleContext.cache_size() == 1
        assert all(r.babel_locale == results[0].babel_locale for r in results)


# ============================================================================
# Creation Tests
# ============================================================================


@pytest.mark.usefixtures("fresh_locale_cache")
class TestLocaleContextCreate:
    """create() falls back, create_or_raise() is strict."""

    def test_valid_locale(self) -> None:
        ctx = LocaleContext.create("de-DE")

        assert ctx.locale_code == "de-DE"
        assert not ctx.is_fallback
        assert str(ctx.babel_locale) == "de_DE"

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="bigcurrency.locale_context"):
            ctx = LocaleContext.create("xx-XX")

        assert ctx.is_fallback
        assert ctx.locale_code == "xx-XX"
        assert str(ctx.babel_locale) == "en_US"
        assert "Falling back to en_US" in caplog.text

    def test_malformed_locale_falls_back(self) -> None:
        ctx = LocaleContext.create("not a locale!")

        assert ctx.is_fallback

    def test_create_or_raise_valid(self) -> None:
        ctx = LocaleContext.create_or_raise("ja-JP")

        assert str(ctx.babel_locale) == "ja_JP"

    def test_create_or_raise_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale identifier 'xx-XX'"):
            LocaleContext.create_or_raise("xx-XX")

    def test_immutable(self) -> None:
        ctx = LocaleContext.create("en-US")

        with pytest.raises(AttributeError):
            ctx.locale_code = "de-DE"  # type: ignore[misc]


# ============================================================================
# Locale Data Tests
# ============================================================================


class TestCurrencyPattern:
    """Raw CLDR currency patterns."""

    def test_en_us_standard(self) -> None:
        assert LocaleContext.create("en-US").currency_pattern() == "\xa4#,##0.00"

    def test_en_us_accounting(self) -> None:
        pattern = LocaleContext.create("en-US").currency_pattern("accounting")

        assert pattern == "\xa4#,##0.00;(\xa4#,##0.00)"

    def test_de_de_suffix(self) -> None:
        assert LocaleContext.create("de-DE").currency_pattern() == "#,##0.00\xa0\xa4"

    @given(code=st.sampled_from(["en_US", "de_DE", "fr_FR", "ja_JP", "lv_LV", "hi_IN", "pt_BR"]))
    def test_every_pattern_has_placeholder(self, code: str) -> None:
        pattern = LocaleContext.create(code).currency_pattern()

        assert "\xa4" in pattern
        assert "0" in pattern


class TestSymbol:
    """Number symbols with currency-specific fallbacks."""

    def test_en_us(self) -> None:
        ctx = LocaleContext.create("en-US")

        assert ctx.symbol(NumberSymbol.GROUP) == ","
        assert ctx.symbol(NumberSymbol.DECIMAL) == "."
        assert ctx.symbol(NumberSymbol.MINUS_SIGN) == "-"
        assert ctx.symbol(NumberSymbol.EXPONENTIAL) == "E"

    def test_de_de(self) -> None:
        ctx = LocaleContext.create("de-DE")

        assert ctx.symbol(NumberSymbol.GROUP) == "."
        assert ctx.symbol(NumberSymbol.DECIMAL) == ","

    def test_currency_roles_fall_back(self) -> None:
        ctx = LocaleContext.create("de-DE")

        assert ctx.symbol(NumberSymbol.CURRENCY_GROUP) == ctx.symbol(NumberSymbol.GROUP)
        assert ctx.symbol(NumberSymbol.CURRENCY_DECIMAL) == ctx.symbol(NumberSymbol.DECIMAL)
