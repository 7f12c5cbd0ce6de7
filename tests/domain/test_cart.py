"""Unit tests for the Cart."""

import pytest

from qpos.domain.exceptions import InvalidInput, NotFound
from qpos.domain.model.cart import Cart
from tests.fakes import FRIES, PIZZA


class TestAddItem:

    def test_new_cart_is_empty(self):
        assert Cart().is_empty

    def test_adding_new_item_creates_line(self):
        cart = Cart()
        line = cart.add_item(PIZZA, 2, note="no olives")
        assert cart.lines == (line,)
        assert line.quantity == 2
        assert line.note == "no olives"

    def test_adding_same_item_merges_quantity(self):
        cart = Cart()
        first = cart.add_item(PIZZA)
        merged = cart.add_item(PIZZA, 2)
        assert len(cart.lines) == 1
        assert merged.id == first.id
        assert merged.quantity == 3

    def test_different_items_get_distinct_line_ids(self):
        cart = Cart()
        a = cart.add_item(PIZZA)
        b = cart.add_item(FRIES)
        assert a.id != b.id

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(InvalidInput, match="must be positive"):
            Cart().add_item(PIZZA, 0)


class TestUpdateAndRemove:

    def test_update_quantity(self):
        cart = Cart()
        line = cart.add_item(PIZZA)
        cart.update_quantity(line.id, 5)
        assert cart.lines[0].quantity == 5

    def test_zero_quantity_removes_line(self):
        cart = Cart()
        line = cart.add_item(PIZZA)
        cart.add_item(FRIES)
        cart.update_quantity(line.id, 0)
        assert [l.menu_item for l in cart.lines] == [FRIES]

    def test_negative_quantity_rejected(self):
        cart = Cart()
        line = cart.add_item(PIZZA)
        with pytest.raises(InvalidInput, match="cannot be negative"):
            cart.update_quantity(line.id, -1)

    def test_unknown_line(self):
        with pytest.raises(NotFound, match="not found"):
            Cart().update_quantity("missing", 1)

    def test_remove_item(self):
        cart = Cart()
        line = cart.add_item(PIZZA)
        cart.remove_item(line.id)
        assert cart.is_empty

    def test_clear(self):
        cart = Cart()
        cart.add_item(PIZZA)
        cart.add_item(FRIES)
        cart.clear()
        assert cart.lines == ()
