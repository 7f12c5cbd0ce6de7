"""Order aggregate — the core of the domain.

An Order is immutable once placed: its lines carry a snapshot of the
menu items and its totals are frozen at creation time.  The only thing
that ever changes is the status, and that happens by building a new
Order through ``with_status()`` inside the lifecycle store.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.menu import MenuItem
from qpos.domain.model.value_objects import ZERO


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"

    @staticmethod
    def parse(value: str | OrderStatus) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise InvalidInput(
                f"Unknown order status {value!r} (expected one of: {allowed})"
            ) from exc

    def next_status(self) -> OrderStatus:
        """The status a kitchen "advance" action moves to."""
        members = list(OrderStatus)
        index = members.index(self)
        if index == len(members) - 1:
            raise InvalidInput("Order is already completed")
        return members[index + 1]


@dataclass(frozen=True)
class OrderLine:
    """One cart/order row: a menu item snapshot and how many of it."""

    id: str
    menu_item: MenuItem
    quantity: int
    note: str | None = None

    @property
    def unit_price(self) -> Decimal:
        return self.menu_item.price

    @property
    def line_total(self) -> Decimal:
        return self.menu_item.price * self.quantity


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    service_charge: Decimal = ZERO
    discount: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class Order:
    """Aggregate root for restaurant orders.

    Use ``Order.create()`` for new orders — it enforces the business
    rules.  ``__init__`` stays simple so the repository can reconstitute
    persisted orders without re-validating.
    """

    id: str
    customer_name: str
    lines: tuple[OrderLine, ...]
    totals: OrderTotals
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_name: str,
        lines: list[OrderLine] | tuple[OrderLine, ...],
        totals: OrderTotals,
        created_at: datetime,
    ) -> Order:
        if not customer_name or not customer_name.strip():
            raise InvalidInput("Customer name is required")

        # Zero-quantity lines are dropped, never stored.
        kept = tuple(line for line in lines if line.quantity != 0)
        if not kept:
            raise InvalidInput("Order must contain at least one item")

        return Order(
            id=order_id,
            customer_name=customer_name.strip(),
            lines=kept,
            totals=totals,
            created_at=created_at,
            status=OrderStatus.PENDING,
        )

    # --- State transitions ----------------------------------------------------

    def with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Decimal:
        return self.totals.total

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)


def order_number(day: date, sequence: int) -> str:
    """Build ``ORD-YYYYMMDD-NNN`` for the *sequence*-th order of *day*."""
    return f"ORD-{day:%Y%m%d}-{sequence:03d}"

