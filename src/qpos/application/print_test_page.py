"""Application service: print a sample receipt to check the printer setup."""

from __future__ import annotations

from datetime import datetime

from qpos.application.access import BACK_OFFICE, ensure_role
from qpos.application.dto import current_formatter
from qpos.application.printer_dispatch import DispatchResult, PrinterDispatch
from qpos.domain.model.menu import MenuItem
from qpos.domain.model.order import OrderLine
from qpos.domain.model.user import Principal
from qpos.domain.repository.settings_repository import SettingsRepository
from qpos.domain.service.pricing import compute_totals
from qpos.domain.service.receipt_formatter import format_receipt

TEST_ORDER_ID = "TEST-001"
TEST_CUSTOMER = "Test Customer"


def sample_lines() -> list[OrderLine]:
    return [
        OrderLine("test1", MenuItem.create("1", "Test Pizza", "12.99", "food"), 2),
        OrderLine("test2", MenuItem.create("2", "Test Drink", "3.50", "beverages"), 1),
    ]


class PrintTestPageHandler:
    """Formats a two-item sample receipt and sends it through the normal dispatch."""

    def __init__(
        self,
        settings_repo: SettingsRepository,
        dispatch: PrinterDispatch,
        columns: int,
    ) -> None:
        self._settings_repo = settings_repo
        self._dispatch = dispatch
        self._columns = columns

    def handle(self, principal: Principal, printed_at: datetime | None = None) -> DispatchResult:
        ensure_role(principal, BACK_OFFICE, "print a test receipt")
        lines = sample_lines()
        receipt = format_receipt(
            lines=lines,
            totals=compute_totals(lines, self._settings_repo.get_tax_configuration()),
            order_id=TEST_ORDER_ID,
            customer_name=TEST_CUSTOMER,
            restaurant=self._settings_repo.get_restaurant_settings(),
            width=self._columns,
            formatter=current_formatter(self._settings_repo),
            printed_at=printed_at,
        )
        return self._dispatch.dispatch(receipt, title="Test Receipt")
