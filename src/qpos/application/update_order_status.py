"""Application service: Update Order Status use case.

``handle`` sets any status the caller asks for; ``advance`` is what the
kitchen screen does and moves one step forward along
pending -> preparing -> ready -> completed.
"""

from __future__ import annotations

from qpos.application.access import ALL_ROLES, ensure_role
from qpos.application.dto import OrderDTO, current_formatter, to_order_dto
from qpos.application.order_store import OrderLifecycleStore
from qpos.domain.exceptions import NotFound
from qpos.domain.model.order import OrderStatus
from qpos.domain.model.user import Principal
from qpos.domain.repository.settings_repository import SettingsRepository


class UpdateOrderStatusHandler:

    def __init__(self, store: OrderLifecycleStore, settings_repo: SettingsRepository) -> None:
        self._store = store
        self._settings_repo = settings_repo

    def handle(self, principal: Principal, order_id: str, status: str | OrderStatus) -> OrderDTO:
        ensure_role(principal, ALL_ROLES, "update order status")
        order = self._store.set_status(order_id, status)
        return to_order_dto(order, current_formatter(self._settings_repo))

    def advance(self, principal: Principal, order_id: str) -> OrderDTO:
        current = self._store.get_order_by_id(order_id)
        if current is None:
            raise NotFound(f"Order {order_id} not found")
        return self.handle(principal, order_id, current.status.next_status())
