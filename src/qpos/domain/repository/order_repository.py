"""Abstract repository for the Order collection.

Two lists are kept: the live orders the lifecycle store works on, and an
append-only archive of completed orders purged from the history view.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from qpos.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def load_orders(self) -> list[Order]:
        """Return every live order (empty if nothing was stored)."""

    @abstractmethod
    def save_orders(self, orders: list[Order]) -> None:
        """Replace the stored live orders."""

    @abstractmethod
    def load_archive(self) -> list[Order]:
        """Return every archived order."""

    @abstractmethod
    def append_to_archive(self, orders: list[Order]) -> None:
        """Append orders to the archive; existing entries are never rewritten."""
