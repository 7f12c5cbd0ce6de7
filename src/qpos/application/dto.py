"""Data Transfer Objects — plain containers that cross layer boundaries.

Money fields are already formatted for the configured currency so the
CLI never touches Decimal or currency rules.
"""

from __future__ import annotations

from dataclasses import dataclass

from qpos.application.order_store import DailyStats
from qpos.domain.model.order import Order
from qpos.domain.model.value_objects import currency_for
from qpos.domain.repository.settings_repository import SettingsRepository
from qpos.domain.service.currency_formatter import CurrencyFormatter


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a menu item reference (id or name) and a quantity."""

    menu_item: str
    quantity: int
    note: str | None = None


@dataclass(frozen=True)
class OrderLineDTO:
    item_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$12.00"
    line_total: str
    note: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    id: str
    customer_name: str
    status: str
    items: list[OrderLineDTO]
    subtotal: str
    tax: str
    service_charge: str
    discount: str
    total: str
    created_at: str


@dataclass(frozen=True)
class TopItemDTO:
    name: str
    quantity: int
    revenue: str


@dataclass(frozen=True)
class DailyReportDTO:
    day: str
    total_revenue: str
    total_orders: int
    average_order: str
    top_items: list[TopItemDTO]


# --- Mapping ------------------------------------------------------------------


def to_order_dto(order: Order, money: CurrencyFormatter) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        status=order.status.value,
        items=[
            OrderLineDTO(
                item_name=line.menu_item.name,
                quantity=line.quantity,
                unit_price=money.format(line.unit_price),
                line_total=money.format(line.line_total),
                note=line.note,
            )
            for line in order.lines
        ],
        subtotal=money.format(order.totals.subtotal),
        tax=money.format(order.totals.tax),
        service_charge=money.format(order.totals.service_charge),
        discount=money.format(order.totals.discount),
        total=money.format(order.totals.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M"),
    )


def to_daily_report_dto(stats: DailyStats, money: CurrencyFormatter) -> DailyReportDTO:
    return DailyReportDTO(
        day=stats.day.isoformat(),
        total_revenue=money.format(stats.total_revenue),
        total_orders=stats.total_orders,
        average_order=money.format(stats.average_order),
        top_items=[
            TopItemDTO(name=item.name, quantity=item.quantity, revenue=money.format(item.revenue))
            for item in stats.top_items
        ],
    )


def current_formatter(settings_repo: SettingsRepository) -> CurrencyFormatter:
    """Formatter for the currency configured right now."""
    code = settings_repo.get_general_settings().currency_code
    return CurrencyFormatter(currency_for(code))
