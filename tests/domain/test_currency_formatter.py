"""Unit tests for currency display formatting."""

from decimal import Decimal

import pytest

from qpos.domain.exceptions import InvalidInput, NotFound
from qpos.domain.model.value_objects import Currency, currency_for, to_amount
from qpos.domain.service.currency_formatter import CurrencyFormatter


class TestCurrencyFormatter:

    def test_default_is_us_dollar(self):
        assert CurrencyFormatter().format(Decimal("12.5")) == "$12.50"

    def test_rounds_half_up_for_display(self):
        money = CurrencyFormatter()
        assert money(Decimal("29.8375")) == "$29.84"
        assert money(Decimal("2.345")) == "$2.35"
        assert money(Decimal("2.3375")) == "$2.34"

    def test_symbol_after_amount(self):
        assert CurrencyFormatter(currency_for("CHF")).format(Decimal("12.5")) == "12.50 CHF"

    def test_zero_decimal_currency(self):
        assert CurrencyFormatter(currency_for("JPY")).format(Decimal("1234.5")) == "¥1235"

    def test_no_negative_zero(self):
        assert CurrencyFormatter().format(Decimal("-0.001")) == "$0.00"

    def test_accepts_strings_and_ints(self):
        money = CurrencyFormatter(currency_for("EUR"))
        assert money("3.5") == "€3.50"
        assert money(7) == "€7.00"

    def test_rejects_non_numeric_amount(self):
        with pytest.raises(InvalidInput, match="Invalid amount"):
            CurrencyFormatter().format("abc")


class TestCurrencyLookup:

    def test_lookup_is_case_insensitive(self):
        assert currency_for("gbp").symbol == "£"

    def test_unknown_currency(self):
        with pytest.raises(NotFound, match="Unsupported currency"):
            currency_for("XYZ")

    def test_invalid_symbol_position(self):
        with pytest.raises(InvalidInput, match="before' or 'after"):
            Currency("XXX", "x", "Test", position="middle")

    def test_to_amount_keeps_precision(self):
        assert to_amount("0.1") + to_amount("0.2") == Decimal("0.3")
