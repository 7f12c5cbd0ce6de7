"""Application service: Fire Order use case.

Sends the cashier's cart to the kitchen as a new pending order, priced
with the tax configuration current at the moment of firing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from qpos.application.access import FRONT_OF_HOUSE, ensure_role
from qpos.application.dto import OrderDTO, current_formatter, to_order_dto
from qpos.application.order_store import OrderLifecycleStore, local_now
from qpos.domain.model.cart import Cart
from qpos.domain.model.order import Order
from qpos.domain.model.user import Principal
from qpos.domain.repository.settings_repository import SettingsRepository


def default_customer_name(now: datetime) -> str:
    """Walk-in label from the last four digits of the millisecond clock."""
    return f"Customer #{int(now.timestamp() * 1000) % 10000:04d}"


def place_order(
    store: OrderLifecycleStore,
    settings_repo: SettingsRepository,
    cart: Cart,
    customer_name: str | None,
    clock: Callable[[], datetime],
) -> Order:
    """Create the order from the cart and empty the cart."""
    name = customer_name if customer_name and customer_name.strip() else default_customer_name(clock())
    order = store.create_order(
        customer_name=name,
        lines=cart.lines,
        tax_config=settings_repo.get_tax_configuration(),
    )
    cart.clear()
    return order


class FireOrderHandler:

    def __init__(
        self,
        store: OrderLifecycleStore,
        settings_repo: SettingsRepository,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._store = store
        self._settings_repo = settings_repo
        self._clock = clock

    def handle(self, principal: Principal, cart: Cart, customer_name: str | None = None) -> OrderDTO:
        ensure_role(principal, FRONT_OF_HOUSE, "send orders to the kitchen")
        order = place_order(self._store, self._settings_repo, cart, customer_name, self._clock)
        return to_order_dto(order, current_formatter(self._settings_repo))
