"""Tests for currency symbol and fraction-digit lookup.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bigcurrency.currencies import get_currency_symbol, get_number_of_currency_digits
from bigcurrency.enums import SymbolWidth
from bigcurrency.locale_context import LocaleContext


class TestNumberOfCurrencyDigits:
    """ISO 4217 minor units via CLDR."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("USD", 2), ("EUR", 2), ("JPY", 0), ("KRW", 0), ("BHD", 3), ("KWD", 3)],
    )
    def test_known(self, code: str, expected: int) -> None:
        assert get_number_of_currency_digits(code) == expected

    def test_case_insensitive(self) -> None:
        assert get_number_of_currency_digits("jpy") == 0

    @pytest.mark.parametrize("code", [None, "", "unexisting_ISO_code", "XYZ"])
    def test_default(self, code: str | None) -> None:
        assert get_number_of_currency_digits(code) == 2

    @given(code=st.text(alphabet=st.characters(categories=["Lu"]), min_size=3, max_size=3))
    def test_never_negative(self, code: str) -> None:
        assert get_number_of_currency_digits(code) >= 0


class TestCurrencySymbol:
    """Wide symbols from Babel, narrow symbols from the bundled table."""

    def test_wide_cad(self) -> None:
        assert get_currency_symbol("CAD", SymbolWidth.WIDE, "en-US") == "CA$"

    def test_narrow_cad(self) -> None:
        assert get_currency_symbol("CAD", SymbolWidth.NARROW, "en-US") == "$"

    def test_wide_usd(self) -> None:
        assert get_currency_symbol("USD") == "$"

    def test_wide_eur(self) -> None:
        assert get_currency_symbol("EUR", SymbolWidth.WIDE, "de-DE") == "€"

    def test_wide_symbol_is_locale_specific(self) -> None:
        assert get_currency_symbol("USD", SymbolWidth.WIDE, "en-CA") == "US$"

    def test_string_width(self) -> None:
        assert get_currency_symbol("GBP", "narrow") == "£"

    def test_locale_context_accepted(self) -> None:
        ctx = LocaleContext.create("en-US")

        assert get_currency_symbol("CAD", SymbolWidth.WIDE, ctx) == "CA$"

    def test_unknown_code_returned_as_is(self) -> None:
        assert get_currency_symbol("unexisting_ISO_code") == "unexisting_ISO_code"

    def test_unknown_code_narrow_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="bigcurrency.currencies"):
            result = get_currency_symbol("unexisting_ISO_code", SymbolWidth.NARROW)

        assert result == "unexisting_ISO_code"
        assert "No narrow symbol" in caplog.text

    def test_narrow_without_table_entry_uses_wide(self) -> None:
        assert get_currency_symbol("CHF", SymbolWidth.NARROW, "en-US") == "CHF"

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError):
            get_currency_symbol("USD", "tiny")
