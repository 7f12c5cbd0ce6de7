"""Application service: Charge Order use case.

Takes (simulated) payment for the cart, places the order and, unless
told otherwise, prints the receipt.  A receipt that ends up in the
fallback print view still counts as a successful charge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from qpos.application.access import FRONT_OF_HOUSE, ensure_role
from qpos.application.dto import OrderDTO, current_formatter, to_order_dto
from qpos.application.fire_order import place_order
from qpos.application.order_store import OrderLifecycleStore, local_now
from qpos.application.print_receipt import render_receipt
from qpos.application.printer_dispatch import PrinterDispatch
from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.cart import Cart
from qpos.domain.model.user import Principal
from qpos.domain.repository.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChargeResult:
    order: OrderDTO
    receipt_delivered: bool | None = None  # None when printing was skipped


class ChargeOrderHandler:

    def __init__(
        self,
        store: OrderLifecycleStore,
        settings_repo: SettingsRepository,
        dispatch: PrinterDispatch,
        columns: int,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._store = store
        self._settings_repo = settings_repo
        self._dispatch = dispatch
        self._columns = columns
        self._clock = clock

    def handle(
        self,
        principal: Principal,
        cart: Cart,
        customer_name: str | None = None,
        print_receipt: bool = True,
    ) -> ChargeResult:
        ensure_role(principal, FRONT_OF_HOUSE, "charge orders")
        if cart.is_empty:
            raise InvalidInput("Order must contain at least one item")

        order = place_order(self._store, self._settings_repo, cart, customer_name, self._clock)
        logger.info("Payment of %s for %s approved (simulated)", order.total, order.id)
        dto = to_order_dto(order, current_formatter(self._settings_repo))

        if not print_receipt:
            return ChargeResult(order=dto)

        receipt = render_receipt(order, self._settings_repo, self._columns, printed_at=self._clock())
        result = self._dispatch.dispatch(receipt, title=f"Receipt - {order.id}")
        return ChargeResult(order=dto, receipt_delivered=result.delivered)
