"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON-file store,
the ESC/POS serial port and the HTML print view, but keep everything in
memory. No file I/O, no devices, no browser.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone
from typing import Any

from qpos.domain.exceptions import TransientIO
from qpos.domain.model.menu import MenuItem
from qpos.domain.model.order import Order
from qpos.domain.model.settings import (
    DiscountType,
    GeneralSettings,
    RestaurantSettings,
    TaxConfiguration,
)
from qpos.domain.model.user import Principal, Role
from qpos.domain.port.printer import PrintSurface, SerialPrinterPort
from qpos.domain.repository.key_value_store import KeyValueStore
from qpos.domain.repository.menu_repository import MenuRepository
from qpos.domain.repository.order_repository import OrderRepository
from qpos.domain.repository.settings_repository import SettingsRepository

ADMIN = Principal(id="1", display_name="John Doe", role=Role.ADMIN)
CASHIER = Principal(id="2", display_name="Jane Smith", role=Role.CASHIER)
KITCHEN = Principal(id="3", display_name="Mike Wilson", role=Role.KITCHEN)

PIZZA = MenuItem.create("1", "Pizza", "12.00", "pizzas")
FRIES = MenuItem.create("2", "Fries", "3.50", "food")
SALMON = MenuItem.create("3", "Almond Crusted Salmon", "21.00", "food")


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryKeyValueStore(KeyValueStore):

    def __init__(self, fail_reads: bool = False, fail_writes: bool = False) -> None:
        self.data: dict[str, Any] = {}
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get(self, key: str) -> Any | None:
        if self.fail_reads:
            raise TransientIO(f"read of {key} failed")
        return copy.deepcopy(self.data.get(key))

    def set(self, key: str, value: Any) -> None:
        if self.fail_writes:
            raise TransientIO(f"write of {key} failed")
        self.data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None, fail_writes: bool = False) -> None:
        self.orders: list[Order] = list(orders or [])
        self.archive: list[Order] = []
        self.fail_writes = fail_writes
        self.saves = 0

    def load_orders(self) -> list[Order]:
        return list(self.orders)

    def save_orders(self, orders: list[Order]) -> None:
        if self.fail_writes:
            raise TransientIO("disk full")
        self.orders = list(orders)
        self.saves += 1

    def load_archive(self) -> list[Order]:
        return list(self.archive)

    def append_to_archive(self, orders: list[Order]) -> None:
        if self.fail_writes:
            raise TransientIO("disk full")
        self.archive.extend(orders)


class FakeMenuRepository(MenuRepository):

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self._store: dict[str, MenuItem] = {}
        for item in items if items is not None else [PIZZA, FRIES, SALMON]:
            self._store[item.id] = item

    def list_items(self) -> list[MenuItem]:
        return list(self._store.values())

    def get_by_id(self, item_id: str) -> MenuItem | None:
        return self._store.get(item_id)

    def get_by_name(self, name: str) -> MenuItem | None:
        for item in self._store.values():
            if item.name.lower() == name.lower():
                return item
        return None

    def list_categories(self):
        return []


class FakeSettingsRepository(SettingsRepository):

    def __init__(
        self,
        tax: TaxConfiguration | None = None,
        restaurant: RestaurantSettings | None = None,
        general: GeneralSettings | None = None,
    ) -> None:
        self.tax = tax or TaxConfiguration()
        self.restaurant = restaurant or RestaurantSettings()
        self.general = general or GeneralSettings()

    def get_tax_configuration(self) -> TaxConfiguration:
        return self.tax

    def save_tax_configuration(self, config: TaxConfiguration) -> None:
        self.tax = config

    def list_discount_types(self) -> list[DiscountType]:
        return []

    def get_restaurant_settings(self) -> RestaurantSettings:
        return self.restaurant

    def save_restaurant_settings(self, settings: RestaurantSettings) -> None:
        self.restaurant = settings

    def get_general_settings(self) -> GeneralSettings:
        return self.general

    def save_general_settings(self, settings: GeneralSettings) -> None:
        self.general = settings


class FakeSerialPort(SerialPrinterPort):
    """Records every call; ``fail_on`` names the step that should fail."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[str] = []
        self.written = b""

    def _step(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise TransientIO(f"{name} failed")

    def request_device(self) -> None:
        self._step("request_device")

    def open(self, baud_rate: int, timeout: float) -> None:
        self.baud_rate = baud_rate
        self.timeout = timeout
        self._step("open")

    def write(self, data: bytes) -> None:
        self._step("write")
        self.written += data

    def close(self) -> None:
        self.calls.append("close")


class RecordingPrintSurface(PrintSurface):

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.shown: list[tuple[str, str]] = []

    def show(self, text: str, title: str) -> None:
        if self.fail:
            raise TransientIO("print view unavailable")
        self.shown.append((text, title))
