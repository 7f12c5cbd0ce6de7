"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from qpos.application.order_store import OrderLifecycleStore
from qpos.application.printer_dispatch import PrinterDispatch
from qpos.domain.exceptions import NotFound
from qpos.domain.model.user import Principal
from qpos.domain.port.printer import PrintSurface
from qpos.domain.repository.key_value_store import KeyValueStore
from qpos.domain.repository.menu_repository import MenuRepository
from qpos.domain.repository.settings_repository import SettingsRepository
from qpos.domain.repository.user_repository import UserRepository
from qpos.infrastructure.config import AppConfig
from qpos.infrastructure.persistence.json_key_value_store import JsonFileKeyValueStore
from qpos.infrastructure.persistence.kv_menu_repository import KeyValueMenuRepository
from qpos.infrastructure.persistence.kv_order_repository import KeyValueOrderRepository
from qpos.infrastructure.persistence.kv_settings_repository import KeyValueSettingsRepository
from qpos.infrastructure.persistence.kv_user_repository import KeyValueUserRepository
from qpos.infrastructure.printing.print_surface import ConsolePrintSurface, HtmlPrintSurface
from qpos.infrastructure.printing.serial_printer import EscposSerialPrinterPort


@dataclass
class Services:
    """Everything one CLI invocation needs, built once per process."""

    config: AppConfig
    store: KeyValueStore
    orders: OrderLifecycleStore
    menu_repo: MenuRepository
    settings_repo: SettingsRepository
    user_repo: UserRepository
    printer: PrinterDispatch

    @property
    def columns(self) -> int:
        return self.config.receipt_columns

    def principal(self, user_id: str | None = None) -> Principal:
        """Resolve the signed-in user into a Principal."""
        user_id = user_id or self.config.user_id
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFound(f"User '{user_id}' not found")
        return Principal.of(user)


def print_surface(config: AppConfig) -> PrintSurface:
    if config.print_surface == "console":
        return ConsolePrintSurface()
    return HtmlPrintSurface(config.receipt_dir, paper_width_mm=config.paper_width_mm)


def build_services(config: AppConfig) -> Services:
    store = JsonFileKeyValueStore(config.data_dir)
    printer = PrinterDispatch(
        port=EscposSerialPrinterPort(config.printer_port),
        surface=print_surface(config),
        baud_rate=config.printer_baud,
        timeout=config.printer_timeout,
    )
    return Services(
        config=config,
        store=store,
        orders=OrderLifecycleStore(KeyValueOrderRepository(store)),
        menu_repo=KeyValueMenuRepository(store),
        settings_repo=KeyValueSettingsRepository(store),
        user_repo=KeyValueUserRepository(store),
        printer=printer,
    )
