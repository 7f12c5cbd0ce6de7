"""Order Lifecycle Store — owns the order collection.

The store is the only writer of order status and the only assigner of
order ids (``ORD-YYYYMMDD-NNN``).  Mutations are serialised by a lock so
sequence numbers never collide; reads work on the last committed
snapshot (an immutable tuple) and never block.

Purging the history view moves completed orders into an append-only
archive.  Daily statistics and day sequence numbers read the live
orders *and* the archive, so a purge changes neither.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Iterable, NoReturn

from qpos.domain.exceptions import NotFound, TransientIO, Unsupported
from qpos.domain.model.order import Order, OrderLine, OrderStatus, order_number
from qpos.domain.model.settings import TaxConfiguration
from qpos.domain.model.value_objects import ZERO
from qpos.domain.repository.order_repository import OrderRepository
from qpos.domain.service.pricing import compute_totals

logger = logging.getLogger(__name__)

TOP_ITEMS_LIMIT = 5


def local_now() -> datetime:
    """Timezone-aware wall-clock time in the machine's local zone."""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class TopItem:
    name: str
    quantity: int
    revenue: Decimal


@dataclass(frozen=True)
class DailyStats:
    day: date
    total_revenue: Decimal = ZERO
    total_orders: int = 0
    average_order: Decimal = ZERO
    top_items: list[TopItem] = field(default_factory=list)


class OrderLifecycleStore:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock
        self._lock = threading.Lock()
        self._revision = 0
        self._orders, self._archive = self._load()

    # --- Staleness marker -----------------------------------------------------

    @property
    def revision(self) -> int:
        """Monotonically increasing marker, bumped on every change."""
        return self._revision

    def refresh(self) -> int:
        """Bump the revision without changing data (forces pollers to reload)."""
        with self._lock:
            self._revision += 1
            return self._revision

    # --- Mutations ------------------------------------------------------------

    def create_order(
        self,
        customer_name: str,
        lines: Iterable[OrderLine],
        tax_config: TaxConfiguration,
    ) -> Order:
        """Price the lines and place a new pending order.

        Raises InvalidInput for an empty order, a blank customer name, or
        negative quantities/prices.
        """
        lines = list(lines)
        totals = compute_totals(lines, tax_config)

        with self._lock:
            created_at = self._clock()
            day = created_at.date()
            sequence = self._count_created_on(day) + 1
            order = Order.create(
                order_id=order_number(day, sequence),
                customer_name=customer_name,
                lines=lines,
                totals=totals,
                created_at=created_at,
            )
            self._orders = self._orders + (order,)
            self._revision += 1
            self._persist_orders()

        logger.info("Order %s created for %s (total %s)", order.id, order.customer_name, order.total)
        return order

    def set_status(self, order_id: str, status: OrderStatus | str) -> Order:
        """Overwrite an order's status.

        Adjacency is not enforced; asking for the current status again is
        a no-op apart from the revision bump.
        """
        new_status = OrderStatus.parse(status)

        with self._lock:
            index = self._index_of(order_id)
            previous = self._orders[index]
            updated = previous.with_status(new_status)
            self._orders = self._orders[:index] + (updated,) + self._orders[index + 1:]
            self._revision += 1
            self._persist_orders()

        logger.info(
            "Order %s status %s -> %s", order_id, previous.status.value, new_status.value
        )
        return updated

    def purge_completed_from_active_view(self) -> int:
        """Move completed orders out of the live collection into the archive.

        Returns the number of orders moved.
        """
        with self._lock:
            completed = [o for o in self._orders if o.is_completed]
            if not completed:
                return 0
            self._archive = self._archive + tuple(completed)
            self._orders = tuple(o for o in self._orders if not o.is_completed)
            self._revision += 1
            try:
                self._order_repo.append_to_archive(completed)
            except TransientIO as exc:
                logger.warning("Could not write order archive: %s", exc)
            self._persist_orders()

        logger.info("Purged %d completed order(s) from history view", len(completed))
        return len(completed)

    def delete_order(self, order_id: str) -> NoReturn:
        raise Unsupported(f"Deleting orders is not supported (order {order_id})")

    # --- Queries --------------------------------------------------------------

    def get_active_orders(self) -> list[Order]:
        """Orders not yet completed, oldest first (kitchen queue)."""
        return sorted(
            (o for o in self._orders if not o.is_completed),
            key=lambda o: o.created_at,
        )

    def get_completed_orders(self) -> list[Order]:
        """Completed orders, most recent first."""
        return sorted(
            (o for o in self._orders if o.is_completed),
            key=lambda o: o.created_at,
            reverse=True,
        )

    def get_all_orders(self, newest_first: bool = True) -> list[Order]:
        return sorted(self._orders, key=lambda o: o.created_at, reverse=newest_first)

    def get_order_by_id(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def get_daily_stats(self, day: date | None = None) -> DailyStats:
        """Revenue, order count, average and top five items for one day."""
        if day is None:
            day = self._clock().date()

        day_orders = [o for o in self._orders + self._archive if o.created_at.date() == day]
        if not day_orders:
            return DailyStats(day=day)

        total_revenue = sum((o.total for o in day_orders), ZERO)
        total_orders = len(day_orders)

        # Keyed by menu item id, first-seen order kept for equal quantities.
        per_item: dict[str, list] = {}
        for order in day_orders:
            for line in order.lines:
                entry = per_item.setdefault(line.menu_item.id, [line.menu_item.name, 0, ZERO])
                entry[1] += line.quantity
                entry[2] += line.line_total

        ranked = sorted(per_item.values(), key=lambda entry: entry[1], reverse=True)
        top_items = [
            TopItem(name=name, quantity=quantity, revenue=revenue)
            for name, quantity, revenue in ranked[:TOP_ITEMS_LIMIT]
        ]

        return DailyStats(
            day=day,
            total_revenue=total_revenue,
            total_orders=total_orders,
            average_order=total_revenue / total_orders,
            top_items=top_items,
        )

    @property
    def archived_orders(self) -> list[Order]:
        return list(self._archive)

    # --- Internal helpers -----------------------------------------------------

    def _load(self) -> tuple[tuple[Order, ...], tuple[Order, ...]]:
        try:
            return tuple(self._order_repo.load_orders()), tuple(self._order_repo.load_archive())
        except TransientIO as exc:
            logger.warning("Order storage unavailable, starting with no orders: %s", exc)
            return (), ()

    def _count_created_on(self, day: date) -> int:
        return sum(1 for o in self._orders + self._archive if o.created_at.date() == day)

    def _index_of(self, order_id: str) -> int:
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                return index
        raise NotFound(f"Order {order_id} not found")

    def _persist_orders(self) -> None:
        # The in-memory state is already committed; a lost write is logged only.
        try:
            self._order_repo.save_orders(list(self._orders))
        except TransientIO as exc:
            logger.warning("Could not persist orders: %s", exc)
