"""Application service: Print Receipt use case (reprint an existing order)."""

from __future__ import annotations

from datetime import datetime

from qpos.application.access import ALL_ROLES, ensure_role
from qpos.application.dto import current_formatter
from qpos.application.order_store import OrderLifecycleStore
from qpos.application.printer_dispatch import DispatchResult, PrinterDispatch
from qpos.domain.exceptions import NotFound
from qpos.domain.model.order import Order
from qpos.domain.model.user import Principal
from qpos.domain.repository.settings_repository import SettingsRepository
from qpos.domain.service.receipt_formatter import format_receipt


def render_receipt(
    order: Order,
    settings_repo: SettingsRepository,
    columns: int,
    printed_at: datetime | None = None,
) -> str:
    """Format *order* with its frozen totals and the current restaurant identity."""
    return format_receipt(
        lines=order.lines,
        totals=order.totals,
        order_id=order.id,
        customer_name=order.customer_name,
        restaurant=settings_repo.get_restaurant_settings(),
        width=columns,
        formatter=current_formatter(settings_repo),
        printed_at=printed_at,
    )


class PrintReceiptHandler:

    def __init__(
        self,
        store: OrderLifecycleStore,
        settings_repo: SettingsRepository,
        dispatch: PrinterDispatch,
        columns: int,
    ) -> None:
        self._store = store
        self._settings_repo = settings_repo
        self._dispatch = dispatch
        self._columns = columns

    def handle(self, principal: Principal, order_id: str) -> DispatchResult:
        ensure_role(principal, ALL_ROLES, "print receipts")
        order = self._store.get_order_by_id(order_id)
        if order is None:
            raise NotFound(f"Order {order_id} not found")
        receipt = render_receipt(order, self._settings_repo, self._columns)
        return self._dispatch.dispatch(receipt, title=f"Receipt - {order.id}")
