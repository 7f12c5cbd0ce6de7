"""CLI commands for taking and tracking orders."""

from __future__ import annotations

import click

from qpos.application.cart_builder import build_cart
from qpos.application.charge_order import ChargeOrderHandler
from qpos.application.dto import CartItemSpec, OrderDTO
from qpos.application.fire_order import FireOrderHandler
from qpos.application.manage_history import DeleteOrderHandler, PurgeHistoryHandler
from qpos.application.print_receipt import PrintReceiptHandler
from qpos.application.show_order import ListOrdersHandler, ShowOrderHandler
from qpos.application.update_order_status import UpdateOrderStatusHandler
from qpos.domain.exceptions import PosError
from qpos.domain.model.order import OrderStatus
from qpos.infrastructure.bootstrap import Services


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:2,Meat Balls:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'MenuItem:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for menu item '{name}'."
            )
        specs.append(CartItemSpec(menu_item=name.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Item':<24} {'Qty':>4} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.item_name:<24} {item.quantity:>4} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<29} {dto.subtotal:>21}")
    click.echo(f"  {'Service Charge':<29} {dto.service_charge:>21}")
    click.echo(f"  {'Tax':<29} {dto.tax:>21}")
    click.echo(f"  {'Order Total':<29} {dto.total:>21}")


def _display_summary(orders: list[OrderDTO], empty: str) -> None:
    if not orders:
        click.echo(empty)
        return
    click.echo(f"{'Order':<18} {'Status':<10} {'Customer':<16} {'Items':>5} {'Total':>10}  Created")
    click.echo("-" * 80)
    for dto in orders:
        count = sum(item.quantity for item in dto.items)
        click.echo(
            f"{dto.id:<18} {dto.status:<10} {dto.customer_name:<16} {count:>5} {dto.total:>10}  {dto.created_at}"
        )


@click.command("fire")
@click.option("--items", required=True, help="Items as 'MenuItem:Qty,MenuItem:Qty' (id or name).")
@click.option("--customer", default=None, help="Customer name (default: walk-in label).")
@click.pass_obj
def order_fire(services: Services, items: str, customer: str | None) -> None:
    """Send a new order to the kitchen."""
    specs = _parse_items(items)
    handler = FireOrderHandler(services.orders, services.settings_repo)

    try:
        cart = build_cart(services.menu_repo, specs)
        dto = handler.handle(services.principal(), cart, customer_name=customer)
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} sent to kitchen  (total={dto.total})")


@click.command("charge")
@click.option("--items", required=True, help="Items as 'MenuItem:Qty,MenuItem:Qty' (id or name).")
@click.option("--customer", default=None, help="Customer name (default: walk-in label).")
@click.option("--print/--no-print", "print_receipt", default=True, help="Print the receipt (default: yes).")
@click.pass_obj
def order_charge(services: Services, items: str, customer: str | None, print_receipt: bool) -> None:
    """Take payment for a new order and print its receipt."""
    specs = _parse_items(items)
    handler = ChargeOrderHandler(
        services.orders, services.settings_repo, services.printer, services.columns
    )

    try:
        cart = build_cart(services.menu_repo, specs)
        result = handler.handle(
            services.principal(), cart, customer_name=customer, print_receipt=print_receipt
        )
    except PosError as exc:
        raise click.ClickException(str(exc))

    _display_order(result.order)
    click.echo()
    click.echo(f"Payment of {result.order.total} received.")
    if result.receipt_delivered is True:
        click.echo("Receipt sent to thermal printer.")
    elif result.receipt_delivered is False:
        click.echo("Thermal printer not available; receipt opened in print view.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(services: Services, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(services.orders, services.settings_repo)

    try:
        dto = handler.handle(order_id)
    except PosError as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("kitchen")
@click.pass_obj
def order_kitchen(services: Services) -> None:
    """Orders in progress, oldest first."""
    handler = ListOrdersHandler(services.orders, services.settings_repo)
    _display_summary(handler.kitchen_queue(), "No active orders.")


@click.command("history")
@click.pass_obj
def order_history(services: Services) -> None:
    """Completed orders, newest first."""
    handler = ListOrdersHandler(services.orders, services.settings_repo)
    _display_summary(handler.history(), "No completed orders.")


@click.command("list")
@click.option("--oldest-first", is_flag=True, default=False, help="Sort oldest first.")
@click.pass_obj
def order_list(services: Services, oldest_first: bool) -> None:
    """All orders."""
    handler = ListOrdersHandler(services.orders, services.settings_repo)
    _display_summary(handler.all(newest_first=not oldest_first), "No orders found.")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--to",
    "status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
@click.pass_obj
def order_status(services: Services, order_id: str, status: str) -> None:
    """Set an order's status."""
    handler = UpdateOrderStatusHandler(services.orders, services.settings_repo)

    try:
        dto = handler.handle(services.principal(), order_id, status)
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} is now {dto.status}.")


@click.command("advance")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_advance(services: Services, order_id: str) -> None:
    """Move an order to its next status (pending > preparing > ready > completed)."""
    handler = UpdateOrderStatusHandler(services.orders, services.settings_repo)

    try:
        dto = handler.advance(services.principal(), order_id)
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} is now {dto.status}.")


@click.command("print")
@click.option("--id", "order_id", required=True, help="Order ID to print.")
@click.pass_obj
def order_print(services: Services, order_id: str) -> None:
    """Reprint the receipt for an order."""
    handler = PrintReceiptHandler(
        services.orders, services.settings_repo, services.printer, services.columns
    )

    try:
        result = handler.handle(services.principal(), order_id)
    except PosError as exc:
        raise click.ClickException(str(exc))

    if result.delivered:
        click.echo(f"Receipt for {order_id} sent to thermal printer.")
    else:
        click.echo(f"Thermal printer not available; receipt for {order_id} opened in print view.")


@click.command("purge-history")
@click.confirmation_option(prompt="Remove completed orders from the history view?")
@click.pass_obj
def order_purge_history(services: Services) -> None:
    """Clear completed orders from the history view (reports are kept)."""
    handler = PurgeHistoryHandler(services.orders)

    try:
        count = handler.handle(services.principal())
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cleared {count} completed order(s) from history.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
@click.pass_obj
def order_delete(services: Services, order_id: str) -> None:
    """Delete an order (not supported)."""
    handler = DeleteOrderHandler(services.orders)

    try:
        handler.handle(services.principal(), order_id)
    except PosError as exc:
        raise click.ClickException(str(exc))
