"""Abstract repository for back-office settings."""

from __future__ import annotations

from abc import ABC, abstractmethod

from qpos.domain.model.settings import (
    DiscountType,
    GeneralSettings,
    RestaurantSettings,
    TaxConfiguration,
)


class SettingsRepository(ABC):

    @abstractmethod
    def get_tax_configuration(self) -> TaxConfiguration:
        """Return the current tax configuration (defaults if unset)."""

    @abstractmethod
    def save_tax_configuration(self, config: TaxConfiguration) -> None:
        """Persist a new tax configuration."""

    @abstractmethod
    def list_discount_types(self) -> list[DiscountType]:
        """Return every declared discount type."""

    @abstractmethod
    def get_restaurant_settings(self) -> RestaurantSettings:
        """Return the restaurant identity printed on receipts."""

    @abstractmethod
    def save_restaurant_settings(self, settings: RestaurantSettings) -> None:
        """Persist the restaurant identity."""

    @abstractmethod
    def get_general_settings(self) -> GeneralSettings:
        """Return general settings (currency)."""

    @abstractmethod
    def save_general_settings(self, settings: GeneralSettings) -> None:
        """Persist general settings."""
