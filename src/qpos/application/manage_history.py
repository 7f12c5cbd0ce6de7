"""Application services: clearing the history view and (unsupported) deletion."""

from __future__ import annotations

from typing import NoReturn

from qpos.application.access import FRONT_OF_HOUSE, ensure_role
from qpos.application.order_store import OrderLifecycleStore
from qpos.domain.model.user import Principal


class PurgeHistoryHandler:
    """Remove completed orders from the history view.

    They move to the order archive, so daily reports stay the same.
    """

    def __init__(self, store: OrderLifecycleStore) -> None:
        self._store = store

    def handle(self, principal: Principal) -> int:
        ensure_role(principal, FRONT_OF_HOUSE, "clear order history")
        return self._store.purge_completed_from_active_view()


class DeleteOrderHandler:

    def __init__(self, store: OrderLifecycleStore) -> None:
        self._store = store

    def handle(self, principal: Principal, order_id: str) -> NoReturn:
        ensure_role(principal, FRONT_OF_HOUSE, "delete orders")
        self._store.delete_order(order_id)
