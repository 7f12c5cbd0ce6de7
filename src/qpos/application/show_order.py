"""Application service: order queries (single order, kitchen queue, history)."""

from __future__ import annotations

from qpos.application.dto import OrderDTO, current_formatter, to_order_dto
from qpos.application.order_store import OrderLifecycleStore
from qpos.domain.exceptions import NotFound
from qpos.domain.repository.settings_repository import SettingsRepository


class ShowOrderHandler:

    def __init__(self, store: OrderLifecycleStore, settings_repo: SettingsRepository) -> None:
        self._store = store
        self._settings_repo = settings_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._store.get_order_by_id(order_id)
        if order is None:
            raise NotFound(f"Order {order_id} not found")
        return to_order_dto(order, current_formatter(self._settings_repo))


class ListOrdersHandler:

    def __init__(self, store: OrderLifecycleStore, settings_repo: SettingsRepository) -> None:
        self._store = store
        self._settings_repo = settings_repo

    def kitchen_queue(self) -> list[OrderDTO]:
        """Orders still in progress, oldest first."""
        return self._map(self._store.get_active_orders())

    def history(self) -> list[OrderDTO]:
        """Completed orders, newest first."""
        return self._map(self._store.get_completed_orders())

    def all(self, newest_first: bool = True) -> list[OrderDTO]:
        return self._map(self._store.get_all_orders(newest_first=newest_first))

    def _map(self, orders) -> list[OrderDTO]:
        money = current_formatter(self._settings_repo)
        return [to_order_dto(order, money) for order in orders]
