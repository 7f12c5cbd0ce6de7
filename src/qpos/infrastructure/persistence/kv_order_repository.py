"""Key-value-store-backed implementation of OrderRepository."""

from __future__ import annotations

from qpos.domain.exceptions import TransientIO
from qpos.domain.model.order import Order
from qpos.domain.repository.key_value_store import ORDER_ARCHIVE_KEY, ORDERS_KEY, KeyValueStore
from qpos.domain.repository.order_repository import OrderRepository
from qpos.infrastructure.persistence.serialization import order_from_raw, order_to_raw


class KeyValueOrderRepository(OrderRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def load_orders(self) -> list[Order]:
        return self._load(ORDERS_KEY)

    def save_orders(self, orders: list[Order]) -> None:
        self._store.set(ORDERS_KEY, [order_to_raw(o) for o in orders])

    def load_archive(self) -> list[Order]:
        return self._load(ORDER_ARCHIVE_KEY)

    def append_to_archive(self, orders: list[Order]) -> None:
        archived = self._store.get(ORDER_ARCHIVE_KEY) or []
        archived.extend(order_to_raw(o) for o in orders)
        self._store.set(ORDER_ARCHIVE_KEY, archived)

    # --- Serialization --------------------------------------------------------

    def _load(self, key: str) -> list[Order]:
        raw_orders = self._store.get(key) or []
        try:
            return [order_from_raw(raw) for raw in raw_orders]
        except (KeyError, TypeError, ValueError) as exc:
            raise TransientIO(f"Stored '{key}' is malformed: {exc}") from exc
