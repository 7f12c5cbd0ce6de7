"""First-start data and the load-or-seed helper.

When a key is missing (first start) or the store cannot be read, the
repositories fall back to these defaults; missing keys are also written
back so exports and later runs see them.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from qpos.domain.exceptions import TransientIO
from qpos.domain.model.menu import Category, MenuItem
from qpos.domain.model.settings import (
    DiscountType,
    GeneralSettings,
    RestaurantSettings,
    TaxConfiguration,
)
from qpos.domain.model.user import Role, User
from qpos.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_MENU_ITEMS = [
    MenuItem.create("1", "Super Delicious Pizza", "12.00", "pizzas", "Delicious pizza with fresh ingredients"),
    MenuItem.create("2", "Super Delicious Chicken", "15.00", "food", "Grilled chicken with herbs"),
    MenuItem.create("3", "Super Delicious Burger", "10.00", "food", "Juicy beef burger with fries"),
    MenuItem.create("4", "Super Delicious Chips", "6.00", "food", "Crispy golden fries"),
    MenuItem.create("5", "Cheese Selection", "12.00", "food", "Artisan cheese platter"),
    MenuItem.create("6", "Meat Balls", "12.00", "food", "Homemade meatballs in sauce"),
    MenuItem.create("7", "Almond Crusted Salmon", "21.00", "food", "Fresh salmon with almond crust"),
]

DEFAULT_CATEGORIES = [
    Category("bar", "Bar", "🍺"),
    Category("food", "Food", "🍽️"),
    Category("wine", "Wine", "🍷"),
    Category("coffee", "Coffee", "☕"),
    Category("pizzas", "Pizzas", "🍕"),
    Category("ice", "Ice", "🧊"),
]

DEFAULT_USERS = [
    User("1", "John Doe", "admin@donerg.com", Role.ADMIN),
    User("2", "Jane Smith", "cashier@donerg.com", Role.CASHIER),
    User("3", "Mike Wilson", "kitchen@donerg.com", Role.KITCHEN),
]

DEFAULT_DISCOUNT_TYPES = [
    DiscountType("1", "Senior Discount", Decimal("10")),
    DiscountType("2", "Student Discount", Decimal("5")),
    DiscountType("3", "Staff Discount", Decimal("15")),
]

DEFAULT_TAX_CONFIGURATION = TaxConfiguration()
DEFAULT_RESTAURANT_SETTINGS = RestaurantSettings()
DEFAULT_GENERAL_SETTINGS = GeneralSettings()


def load_or_seed(store: KeyValueStore, key: str, default_raw: Any) -> Any:
    """Return the stored blob for *key*, seeding it with *default_raw* if absent."""
    try:
        value = store.get(key)
    except TransientIO as exc:
        logger.warning("Storage unavailable for %s, using defaults: %s", key, exc)
        return default_raw

    if value is not None:
        return value

    logger.info("Initialising %s with defaults", key)
    try:
        store.set(key, default_raw)
    except TransientIO as exc:
        logger.warning("Could not store defaults for %s: %s", key, exc)
    return default_raw
