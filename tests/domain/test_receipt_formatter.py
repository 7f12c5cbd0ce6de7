"""Unit tests for the thermal receipt layout."""

from datetime import datetime
from decimal import Decimal

import pytest

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.menu import MenuItem
from qpos.domain.model.order import OrderLine, OrderTotals
from qpos.domain.model.settings import RestaurantSettings
from qpos.domain.service.currency_formatter import CurrencyFormatter
from qpos.domain.service.receipt_formatter import (
    ESC_POS_CUT,
    ESC_POS_INIT,
    ReceiptLayout,
    columns_for_paper,
    format_receipt,
    strip_control_codes,
)
from tests.fakes import FRIES, PIZZA, SALMON

PRINTED_AT = datetime(2026, 10, 19, 14, 5, 9)


def _receipt(width=48, totals=None, lines=None, **kwargs) -> str:
    lines = lines or [OrderLine("a", PIZZA, 2), OrderLine("b", FRIES, 1)]
    totals = totals or OrderTotals(
        subtotal=Decimal("27.50"),
        tax=Decimal("2.3375"),
        total=Decimal("29.8375"),
    )
    params = dict(
        order_id="ORD-20261019-001",
        customer_name="Alice",
        restaurant=RestaurantSettings(),
        width=width,
        formatter=CurrencyFormatter(),
        printed_at=PRINTED_AT,
    )
    params.update(kwargs)
    return format_receipt(lines, totals, **params)


def _rows(receipt: str) -> list[str]:
    return strip_control_codes(receipt).split("\n")


# ── Layout helpers ───────────────────────────────────────────────────────────


class TestPaperWidth:

    def test_columns_for_supported_widths(self):
        assert columns_for_paper(58) == 32
        assert columns_for_paper(80) == 48

    def test_unsupported_paper(self):
        with pytest.raises(InvalidInput, match="Unsupported paper width"):
            columns_for_paper(70)

    def test_unsupported_column_count(self):
        with pytest.raises(InvalidInput, match="32 or 48"):
            ReceiptLayout(40)


class TestReceiptLayout:

    def test_center_text_pads_to_width(self):
        row = ReceiptLayout(32).center_text("ABC")
        assert len(row) == 32
        assert row.startswith(" " * 14 + "ABC")

    def test_center_text_never_truncates(self):
        text = "x" * 40
        assert ReceiptLayout(32).center_text(text) == text

    def test_right_align(self):
        row = ReceiptLayout(32).right_align("$5.00")
        assert len(row) == 32
        assert row.endswith("$5.00")

    def test_format_line_fills_width(self):
        row = ReceiptLayout(48).format_line("Subtotal:", "$27.50")
        assert len(row) == 48
        assert row.startswith("Subtotal:")
        assert row.endswith("$27.50")

    def test_format_line_truncates_left_with_ellipsis(self):
        row = ReceiptLayout(32).format_line("2x " + "N" * 25, "$24.00")
        assert len(row) == 32
        assert row.endswith("$24.00")
        assert "..." in row

    def test_format_line_cuts_overlong_right_value(self):
        row = ReceiptLayout(32).format_line("Customer:", "Alexandria Catherine Montgomery")
        assert row == "Customer: Alexandria Catherin..."

    def test_format_line_right_only_never_overflows(self):
        row = ReceiptLayout(32).format_line("", "X" * 40)
        assert len(row) == 32
        assert row.endswith("...")

    def test_divider(self):
        assert ReceiptLayout(48).divider("=") == "=" * 48

    def test_divider_requires_single_character(self):
        with pytest.raises(InvalidInput, match="single character"):
            ReceiptLayout(48).divider("--")


# ── Full receipt ─────────────────────────────────────────────────────────────


class TestFormatReceipt:

    def test_framed_by_control_sequences(self):
        receipt = _receipt()
        assert receipt.startswith(ESC_POS_INIT)
        assert receipt.endswith(ESC_POS_CUT)

    def test_stripped_receipt_has_no_control_bytes(self):
        text = strip_control_codes(_receipt())
        assert "\x1b" not in text
        assert "\x1d" not in text

    @pytest.mark.parametrize("width", [32, 48])
    def test_every_printed_row_is_exactly_width(self, width):
        lines = [OrderLine("a", SALMON, 1), OrderLine("b", PIZZA, 12)]
        for row in _rows(_receipt(width=width, lines=lines)):
            assert row == "" or len(row) == width

    def test_twenty_five_character_name_takes_two_rows(self):
        platter = MenuItem.create("9", "Grilled Vegetable Platter", "9.50", "food")
        rows = _rows(_receipt(width=32, lines=[OrderLine("a", platter, 1)]))
        index = next(i for i, row in enumerate(rows) if row.startswith("1x Grilled"))
        assert rows[index].endswith("$9.50")
        assert rows[index + 1].rstrip() == "   @ $9.50 each"

    def test_long_customer_name_stays_within_width(self):
        rows = _rows(_receipt(width=32, customer_name="Alexandria Catherine Montgomery"))
        assert [row for row in rows if len(row) > 32] == []
        assert "Customer: Alexandria Catherin..." in rows

    def test_header_and_order_info(self):
        rows = _rows(_receipt())
        assert any(row.strip() == "DONERG" for row in rows)
        assert any(row.startswith("Order:") and row.endswith("ORD-20261019-001") for row in rows)
        assert any(row.startswith("Customer:") and row.endswith("Alice") for row in rows)
        assert any(row.startswith("Date:") and row.endswith("2026-10-19") for row in rows)
        assert any(row.startswith("Time:") and row.endswith("14:05:09") for row in rows)

    def test_item_rows_use_line_totals(self):
        rows = _rows(_receipt())
        assert any(row.startswith("2x Pizza") and row.endswith("$24.00") for row in rows)
        assert any(row.startswith("1x Fries") and row.endswith("$3.50") for row in rows)

    def test_long_name_gets_unit_price_row(self):
        rows = _rows(_receipt(width=32, lines=[OrderLine("a", SALMON, 2)]))
        assert "   @ $21.00 each" in [row.rstrip() for row in rows]

    def test_short_name_has_no_unit_price_row(self):
        assert "each" not in strip_control_codes(_receipt())

    def test_totals_rows(self):
        rows = _rows(_receipt())
        assert any(row.startswith("Subtotal:") and row.endswith("$27.50") for row in rows)
        assert any(row.startswith("Tax:") and row.endswith("$2.34") for row in rows)
        assert any(row.startswith("TOTAL:") and row.endswith("$29.84") for row in rows)

    def test_zero_rows_omitted(self):
        text = strip_control_codes(
            _receipt(totals=OrderTotals(subtotal=Decimal("12"), total=Decimal("12")))
        )
        assert "Tax:" not in text
        assert "Service Charge:" not in text
        assert "Discount:" not in text

    def test_discount_and_service_charge_rows(self):
        totals = OrderTotals(
            subtotal=Decimal("20"),
            service_charge=Decimal("2"),
            discount=Decimal("1"),
            total=Decimal("21"),
        )
        rows = _rows(_receipt(totals=totals))
        assert any(row.startswith("Discount:") and row.endswith("-$1.00") for row in rows)
        assert any(row.startswith("Service Charge:") and row.endswith("$2.00") for row in rows)

    def test_order_and_customer_rows_optional(self):
        text = strip_control_codes(_receipt(order_id="", customer_name=""))
        assert "Order:" not in text
        assert "Customer:" not in text

    def test_footer(self):
        text = strip_control_codes(_receipt())
        assert "Thank you for your visit!" in text
        assert "Powered by QPOS" in text

    def test_currency_comes_from_formatter(self):
        from qpos.domain.model.value_objects import currency_for

        text = strip_control_codes(_receipt(formatter=CurrencyFormatter(currency_for("CHF"))))
        assert "29.84 CHF" in text

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidInput, match="cannot be negative"):
            _receipt(lines=[OrderLine("a", PIZZA, -1)])
