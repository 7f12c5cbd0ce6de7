"""Menu items and categories.

Menu items live independently of orders. An order line embeds a copy of
the item (price, name) so later menu edits never touch placed orders.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.value_objects import ZERO, to_amount


@dataclass(frozen=True)
class MenuItem:
    """A sellable item.

    ``__init__`` does no validation so persisted items can be
    reconstituted as-is; use ``MenuItem.create()`` for new items.
    """

    id: str
    name: str
    price: Decimal
    category: str
    description: str | None = None
    image: str | None = None

    @staticmethod
    def create(
        id: str,
        name: str,
        price: str | float | int | Decimal,
        category: str,
        description: str | None = None,
        image: str | None = None,
    ) -> MenuItem:
        if not name or not name.strip():
            raise InvalidInput("Menu item name is required")
        amount = to_amount(price)
        if amount < ZERO:
            raise InvalidInput(f"Menu item price cannot be negative, got {amount}")
        return MenuItem(
            id=id,
            name=name.strip(),
            price=amount,
            category=category,
            description=description,
            image=image,
        )


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str = ""
