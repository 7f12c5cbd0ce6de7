"""Application services: back-office settings updates.

Tax changes only affect orders placed afterwards; placed orders keep the
totals frozen at creation time.
"""

from __future__ import annotations

from decimal import Decimal

from qpos.application.access import BACK_OFFICE, ensure_role
from qpos.domain.model.settings import GeneralSettings, RestaurantSettings, TaxConfiguration
from qpos.domain.model.user import Principal
from qpos.domain.model.value_objects import currency_for
from qpos.domain.repository.settings_repository import SettingsRepository


class UpdateTaxSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(
        self,
        principal: Principal,
        tax_rate: str | Decimal | None = None,
        service_charge_rate: str | Decimal | None = None,
        auto_apply_tax: bool | None = None,
        auto_apply_service_charge: bool | None = None,
    ) -> TaxConfiguration:
        ensure_role(principal, BACK_OFFICE, "change tax settings")
        config = self._settings_repo.get_tax_configuration().updated(
            tax_rate=tax_rate,
            service_charge_rate=service_charge_rate,
            auto_apply_tax=auto_apply_tax,
            auto_apply_service_charge=auto_apply_service_charge,
        )
        self._settings_repo.save_tax_configuration(config)
        return config


class UpdateRestaurantSettingsHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self, principal: Principal, **changes: str | None) -> RestaurantSettings:
        """Change any of name, address, phone, email, website."""
        ensure_role(principal, BACK_OFFICE, "change restaurant settings")
        settings = self._settings_repo.get_restaurant_settings().updated(**changes)
        self._settings_repo.save_restaurant_settings(settings)
        return settings


class SetCurrencyHandler:

    def __init__(self, settings_repo: SettingsRepository) -> None:
        self._settings_repo = settings_repo

    def handle(self, principal: Principal, currency_code: str) -> GeneralSettings:
        ensure_role(principal, BACK_OFFICE, "change the currency")
        currency = currency_for(currency_code)
        settings = GeneralSettings(currency_code=currency.code)
        self._settings_repo.save_general_settings(settings)
        return settings
