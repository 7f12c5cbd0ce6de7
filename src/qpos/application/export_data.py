"""Application services: system backup export (and the unsupported import).

The export document is assembled from the raw stored blobs, exactly as
they sit in the key-value store.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, NoReturn

from qpos.application.access import BACK_OFFICE, ensure_role
from qpos.application.order_store import local_now
from qpos.domain.exceptions import Unsupported
from qpos.domain.model.user import Principal
from qpos.domain.repository.key_value_store import (
    CATEGORIES_KEY,
    DISCOUNT_TYPES_KEY,
    GENERAL_SETTINGS_KEY,
    MENU_ITEMS_KEY,
    ORDER_ARCHIVE_KEY,
    ORDERS_KEY,
    RESTAURANT_SETTINGS_KEY,
    TAX_SETTINGS_KEY,
    USERS_KEY,
    KeyValueStore,
)

EXPORT_VERSION = "1.0"


class ExportDataHandler:

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._store = store
        self._clock = clock

    def handle(self, principal: Principal) -> dict[str, Any]:
        ensure_role(principal, BACK_OFFICE, "export system data")
        return {
            "orders": self._blob(ORDERS_KEY, []),
            "archivedOrders": self._blob(ORDER_ARCHIVE_KEY, []),
            "menuItems": self._blob(MENU_ITEMS_KEY, []),
            "categories": self._blob(CATEGORIES_KEY, []),
            "users": self._blob(USERS_KEY, []),
            "taxSettings": self._blob(TAX_SETTINGS_KEY, {}),
            "discountTypes": self._blob(DISCOUNT_TYPES_KEY, []),
            "restaurantSettings": self._blob(RESTAURANT_SETTINGS_KEY, {}),
            "generalSettings": self._blob(GENERAL_SETTINGS_KEY, {}),
            "exportDate": self._clock().isoformat(),
            "version": EXPORT_VERSION,
        }

    def _blob(self, key: str, empty: Any) -> Any:
        value = self._store.get(key)
        return empty if value is None else value


class ImportDataHandler:

    def handle(self, principal: Principal, source: str) -> NoReturn:
        ensure_role(principal, BACK_OFFICE, "import system data")
        raise Unsupported(f"Importing system data is not supported ({source})")
