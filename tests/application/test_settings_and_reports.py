"""Tests for back-office use cases: settings, reports and backup export."""

from datetime import date
from decimal import Decimal

import pytest

from qpos.application.access import BACK_OFFICE, FRONT_OF_HOUSE, ensure_role
from qpos.application.daily_report import DailyReportHandler
from qpos.application.export_data import ExportDataHandler, ImportDataHandler
from qpos.application.order_store import OrderLifecycleStore
from qpos.application.update_settings import (
    SetCurrencyHandler,
    UpdateRestaurantSettingsHandler,
    UpdateTaxSettingsHandler,
)
from qpos.domain.exceptions import AccessDenied, InvalidInput, NotFound, Unsupported
from qpos.domain.model.order import OrderLine
from qpos.infrastructure.persistence.kv_order_repository import KeyValueOrderRepository
from qpos.infrastructure.persistence.kv_settings_repository import KeyValueSettingsRepository
from tests.fakes import (
    ADMIN,
    CASHIER,
    KITCHEN,
    PIZZA,
    FakeClock,
    FakeOrderRepository,
    FakeSettingsRepository,
    InMemoryKeyValueStore,
)


class TestAccess:

    def test_allowed_role_passes(self):
        ensure_role(CASHIER, FRONT_OF_HOUSE, "charge orders")

    def test_denied_role_names_the_action(self):
        with pytest.raises(AccessDenied, match=r"Jane Smith \(cashier\) may not change the currency"):
            ensure_role(CASHIER, BACK_OFFICE, "change the currency")


class TestTaxSettings:

    def test_partial_update(self):
        repo = FakeSettingsRepository()
        config = UpdateTaxSettingsHandler(repo).handle(ADMIN, service_charge_rate="10", auto_apply_service_charge=True)
        assert config.tax_rate == Decimal("8.5")
        assert config.service_charge_rate == Decimal("10")
        assert repo.tax.auto_apply_service_charge is True

    def test_negative_rate_rejected(self):
        repo = FakeSettingsRepository()
        with pytest.raises(InvalidInput, match="cannot be negative"):
            UpdateTaxSettingsHandler(repo).handle(ADMIN, tax_rate="-2")
        assert repo.tax.tax_rate == Decimal("8.5")

    def test_cashier_denied(self):
        with pytest.raises(AccessDenied):
            UpdateTaxSettingsHandler(FakeSettingsRepository()).handle(CASHIER, tax_rate="5")

    def test_placed_orders_keep_their_totals(self):
        repo = FakeSettingsRepository()
        store = OrderLifecycleStore(FakeOrderRepository(), clock=FakeClock())
        order = store.create_order("Alice", [OrderLine("a", PIZZA, 1)], repo.get_tax_configuration())
        UpdateTaxSettingsHandler(repo).handle(ADMIN, tax_rate="20")
        assert store.get_order_by_id(order.id).totals.tax == Decimal("1.02")


class TestRestaurantAndCurrency:

    def test_restaurant_update_keeps_other_fields(self):
        repo = FakeSettingsRepository()
        settings = UpdateRestaurantSettingsHandler(repo).handle(ADMIN, name="Chez Nous", phone=None)
        assert settings.name == "Chez Nous"
        assert settings.phone == "+1 (555) 123-4567"

    def test_set_currency(self):
        repo = FakeSettingsRepository()
        assert SetCurrencyHandler(repo).handle(ADMIN, "eur").currency_code == "EUR"
        assert repo.general.currency_code == "EUR"

    def test_unknown_currency(self):
        with pytest.raises(NotFound, match="Unsupported currency"):
            SetCurrencyHandler(FakeSettingsRepository()).handle(ADMIN, "XYZ")


class TestDailyReport:

    def _store(self) -> OrderLifecycleStore:
        store = OrderLifecycleStore(FakeOrderRepository(), clock=FakeClock())
        store.create_order("A", [OrderLine("a", PIZZA, 2)], FakeSettingsRepository().tax)
        return store

    def test_report_is_formatted_in_current_currency(self):
        repo = FakeSettingsRepository()
        SetCurrencyHandler(repo).handle(ADMIN, "CHF")
        report = DailyReportHandler(self._store(), repo).handle(ADMIN)
        assert report.day == "2026-10-19"
        assert report.total_orders == 1
        assert report.total_revenue == "26.04 CHF"
        assert report.top_items[0].name == "Pizza"
        assert report.top_items[0].quantity == 2

    def test_report_for_quiet_day(self):
        report = DailyReportHandler(self._store(), FakeSettingsRepository()).handle(
            ADMIN, date(2026, 10, 1)
        )
        assert report.total_orders == 0
        assert report.total_revenue == "$0.00"
        assert report.top_items == []

    @pytest.mark.parametrize("principal", [CASHIER, KITCHEN])
    def test_reports_are_back_office_only(self, principal):
        with pytest.raises(AccessDenied, match="view sales reports"):
            DailyReportHandler(self._store(), FakeSettingsRepository()).handle(principal)


class TestExport:

    def test_export_contains_every_blob(self):
        kv = InMemoryKeyValueStore()
        settings = KeyValueSettingsRepository(kv)
        store = OrderLifecycleStore(KeyValueOrderRepository(kv), clock=FakeClock())
        store.create_order("Alice", [OrderLine("a", PIZZA, 1)], settings.get_tax_configuration())

        document = ExportDataHandler(kv, clock=FakeClock()).handle(ADMIN)

        assert document["version"] == "1.0"
        assert document["exportDate"] == "2026-10-19T12:00:00+00:00"
        assert [o["id"] for o in document["orders"]] == ["ORD-20261019-001"]
        assert document["archivedOrders"] == []
        assert document["taxSettings"]["tax_rate"] == "8.5"
        assert document["menuItems"] == []  # never read, so never seeded

    def test_export_is_back_office_only(self):
        with pytest.raises(AccessDenied):
            ExportDataHandler(InMemoryKeyValueStore()).handle(CASHIER)

    def test_import_is_unsupported(self):
        with pytest.raises(Unsupported, match="not supported"):
            ImportDataHandler().handle(ADMIN, "backup.json")
