"""Key-value-store-backed implementation of SettingsRepository.

Every getter reads the store again, so callers always see the settings
current at call time.
"""

from __future__ import annotations

from qpos.domain.model.settings import (
    DiscountType,
    GeneralSettings,
    RestaurantSettings,
    TaxConfiguration,
)
from qpos.domain.repository.key_value_store import (
    DISCOUNT_TYPES_KEY,
    GENERAL_SETTINGS_KEY,
    RESTAURANT_SETTINGS_KEY,
    TAX_SETTINGS_KEY,
    KeyValueStore,
)
from qpos.domain.repository.settings_repository import SettingsRepository
from qpos.infrastructure.persistence.defaults import (
    DEFAULT_DISCOUNT_TYPES,
    DEFAULT_GENERAL_SETTINGS,
    DEFAULT_RESTAURANT_SETTINGS,
    DEFAULT_TAX_CONFIGURATION,
    load_or_seed,
)
from qpos.infrastructure.persistence.serialization import (
    discount_from_raw,
    discount_to_raw,
    general_from_raw,
    general_to_raw,
    restaurant_from_raw,
    restaurant_to_raw,
    tax_from_raw,
    tax_to_raw,
)


class KeyValueSettingsRepository(SettingsRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_tax_configuration(self) -> TaxConfiguration:
        raw = load_or_seed(self._store, TAX_SETTINGS_KEY, tax_to_raw(DEFAULT_TAX_CONFIGURATION))
        return tax_from_raw(raw)

    def save_tax_configuration(self, config: TaxConfiguration) -> None:
        self._store.set(TAX_SETTINGS_KEY, tax_to_raw(config))

    def list_discount_types(self) -> list[DiscountType]:
        raw = load_or_seed(
            self._store, DISCOUNT_TYPES_KEY, [discount_to_raw(d) for d in DEFAULT_DISCOUNT_TYPES]
        )
        return [discount_from_raw(d) for d in raw]

    def get_restaurant_settings(self) -> RestaurantSettings:
        raw = load_or_seed(
            self._store, RESTAURANT_SETTINGS_KEY, restaurant_to_raw(DEFAULT_RESTAURANT_SETTINGS)
        )
        return restaurant_from_raw(raw)

    def save_restaurant_settings(self, settings: RestaurantSettings) -> None:
        self._store.set(RESTAURANT_SETTINGS_KEY, restaurant_to_raw(settings))

    def get_general_settings(self) -> GeneralSettings:
        raw = load_or_seed(
            self._store, GENERAL_SETTINGS_KEY, general_to_raw(DEFAULT_GENERAL_SETTINGS)
        )
        return general_from_raw(raw)

    def save_general_settings(self, settings: GeneralSettings) -> None:
        self._store.set(GENERAL_SETTINGS_KEY, general_to_raw(settings))
