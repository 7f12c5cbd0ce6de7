"""Resolve cashier input (menu item id or name + quantity) into a Cart."""

from __future__ import annotations

from qpos.application.dto import CartItemSpec
from qpos.domain.exceptions import NotFound
from qpos.domain.model.cart import Cart
from qpos.domain.repository.menu_repository import MenuRepository


def build_cart(menu_repo: MenuRepository, specs: list[CartItemSpec]) -> Cart:
    """Look up every item (by id first, then by name) and add it to a new cart.

    Zero-quantity entries are dropped, the same as a cart line set to 0.
    """
    cart = Cart()
    for spec in specs:
        item = menu_repo.get_by_id(spec.menu_item) or menu_repo.get_by_name(spec.menu_item)
        if item is None:
            raise NotFound(f"Menu item not found: '{spec.menu_item}'")
        if spec.quantity == 0:
            continue
        cart.add_item(item, quantity=spec.quantity, note=spec.note)
    return cart
