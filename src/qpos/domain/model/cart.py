"""Cart — the in-progress order a cashier builds before firing or charging.

Lines are keyed by their own id; adding a menu item that is already in
the cart bumps that line's quantity instead of adding a second line.
"""

from __future__ import annotations

from dataclasses import replace
from uuid import uuid4

from qpos.domain.exceptions import InvalidInput, NotFound
from qpos.domain.model.menu import MenuItem
from qpos.domain.model.order import OrderLine


class Cart:

    def __init__(self, lines: list[OrderLine] | None = None) -> None:
        self._lines: list[OrderLine] = list(lines or [])

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def add_item(self, menu_item: MenuItem, quantity: int = 1, note: str | None = None) -> OrderLine:
        """Add *quantity* of *menu_item*, merging with an existing line."""
        if quantity <= 0:
            raise InvalidInput("Quantity to add must be positive")

        for index, line in enumerate(self._lines):
            if line.menu_item.id == menu_item.id:
                merged = replace(line, quantity=line.quantity + quantity)
                self._lines[index] = merged
                return merged

        line = OrderLine(id=uuid4().hex, menu_item=menu_item, quantity=quantity, note=note)
        self._lines.append(line)
        return line

    def update_quantity(self, line_id: str, quantity: int) -> None:
        """Set a line's quantity; zero removes the line."""
        if quantity < 0:
            raise InvalidInput("Quantity cannot be negative")
        index = self._index_of(line_id)
        if quantity == 0:
            del self._lines[index]
        else:
            self._lines[index] = replace(self._lines[index], quantity=quantity)

    def remove_item(self, line_id: str) -> None:
        del self._lines[self._index_of(line_id)]

    def clear(self) -> None:
        self._lines.clear()

    def _index_of(self, line_id: str) -> int:
        for index, line in enumerate(self._lines):
            if line.id == line_id:
                return index
        raise NotFound(f"Cart line '{line_id}' not found")
