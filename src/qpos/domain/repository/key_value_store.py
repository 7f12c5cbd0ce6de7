"""Abstract key-value store — the persistence boundary.

Values are JSON-serialisable blobs (dicts, lists, strings, numbers).
Typed repositories sit on top and own the (de)serialisation of domain
objects, dates included.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# Named blobs used by the repositories.
ORDERS_KEY = "orders"
ORDER_ARCHIVE_KEY = "order-archive"
MENU_ITEMS_KEY = "menu-items"
CATEGORIES_KEY = "categories"
TAX_SETTINGS_KEY = "tax-settings"
DISCOUNT_TYPES_KEY = "discount-types"
RESTAURANT_SETTINGS_KEY = "restaurant-settings"
GENERAL_SETTINGS_KEY = "general-settings"
USERS_KEY = "users"


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if the key is absent.

        Raises TransientIO if the store cannot be read.
        """

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*. Raises TransientIO on write failure."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*; absent keys are ignored."""
