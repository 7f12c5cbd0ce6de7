"""Key-value-store-backed implementation of MenuRepository."""

from __future__ import annotations

from qpos.domain.model.menu import Category, MenuItem
from qpos.domain.repository.key_value_store import CATEGORIES_KEY, MENU_ITEMS_KEY, KeyValueStore
from qpos.domain.repository.menu_repository import MenuRepository
from qpos.infrastructure.persistence.defaults import (
    DEFAULT_CATEGORIES,
    DEFAULT_MENU_ITEMS,
    load_or_seed,
)
from qpos.infrastructure.persistence.serialization import (
    category_from_raw,
    category_to_raw,
    menu_item_from_raw,
    menu_item_to_raw,
)


class KeyValueMenuRepository(MenuRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def list_items(self) -> list[MenuItem]:
        raw = load_or_seed(
            self._store, MENU_ITEMS_KEY, [menu_item_to_raw(i) for i in DEFAULT_MENU_ITEMS]
        )
        return [menu_item_from_raw(item) for item in raw]

    def get_by_id(self, item_id: str) -> MenuItem | None:
        for item in self.list_items():
            if item.id == item_id:
                return item
        return None

    def get_by_name(self, name: str) -> MenuItem | None:
        for item in self.list_items():
            if item.name.lower() == name.strip().lower():
                return item
        return None

    def list_categories(self) -> list[Category]:
        raw = load_or_seed(
            self._store, CATEGORIES_KEY, [category_to_raw(c) for c in DEFAULT_CATEGORIES]
        )
        return [category_from_raw(c) for c in raw]
