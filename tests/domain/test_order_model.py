"""Unit tests for the Order aggregate and order status."""

from datetime import date, datetime, timezone

import pytest

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.order import Order, OrderLine, OrderStatus, OrderTotals, order_number
from tests.fakes import FRIES, PIZZA

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _create(lines, name="Alice") -> Order:
    return Order.create("ORD-20261019-001", name, lines, OrderTotals(), NOW)


class TestOrderStatus:

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse("Ready") is OrderStatus.READY

    def test_parse_passes_members_through(self):
        assert OrderStatus.parse(OrderStatus.PENDING) is OrderStatus.PENDING

    def test_parse_unknown(self):
        with pytest.raises(InvalidInput, match="Unknown order status"):
            OrderStatus.parse("cooking")

    def test_next_status_chain(self):
        assert OrderStatus.PENDING.next_status() is OrderStatus.PREPARING
        assert OrderStatus.PREPARING.next_status() is OrderStatus.READY
        assert OrderStatus.READY.next_status() is OrderStatus.COMPLETED

    def test_completed_has_no_next_status(self):
        with pytest.raises(InvalidInput, match="already completed"):
            OrderStatus.COMPLETED.next_status()


class TestOrderCreate:

    def test_new_order_is_pending(self):
        order = _create([OrderLine("a", PIZZA, 1)])
        assert order.status is OrderStatus.PENDING
        assert order.item_count == 1

    def test_zero_quantity_lines_dropped(self):
        order = _create([OrderLine("a", PIZZA, 2), OrderLine("b", FRIES, 0)])
        assert [line.menu_item for line in order.lines] == [PIZZA]

    def test_all_zero_lines_rejected(self):
        with pytest.raises(InvalidInput, match="at least one item"):
            _create([OrderLine("a", PIZZA, 0)])

    def test_blank_customer_name_rejected(self):
        with pytest.raises(InvalidInput, match="Customer name is required"):
            _create([OrderLine("a", PIZZA, 1)], name="   ")

    def test_with_status_leaves_original_unchanged(self):
        order = _create([OrderLine("a", PIZZA, 1)])
        ready = order.with_status(OrderStatus.READY)
        assert ready.status is OrderStatus.READY
        assert order.status is OrderStatus.PENDING
        assert ready.totals == order.totals


class TestOrderNumber:

    def test_zero_padded_sequence(self):
        assert order_number(date(2024, 3, 5), 7) == "ORD-20240305-007"

    def test_sequence_beyond_three_digits(self):
        assert order_number(date(2024, 3, 5), 1000) == "ORD-20240305-1000"
