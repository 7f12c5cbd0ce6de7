"""Abstract repository for menu items and categories."""

from __future__ import annotations

from abc import ABC, abstractmethod

from qpos.domain.model.menu import Category, MenuItem


class MenuRepository(ABC):

    @abstractmethod
    def list_items(self) -> list[MenuItem]:
        """Return every menu item."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> MenuItem | None:
        """Return a menu item by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> MenuItem | None:
        """Return a menu item by name (case-insensitive), or None."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return every category in display order."""
