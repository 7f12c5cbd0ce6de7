"""CLI commands for the menu."""

from __future__ import annotations

import click

from qpos.application.dto import current_formatter
from qpos.infrastructure.bootstrap import Services


@click.command("list")
@click.option("--category", default=None, help="Only show items in this category id.")
@click.pass_obj
def menu_list(services: Services, category: str | None) -> None:
    """List menu items with their prices."""
    items = services.menu_repo.list_items()
    if category:
        items = [item for item in items if item.category == category]

    if not items:
        click.echo("No menu items found.")
        return

    money = current_formatter(services.settings_repo)
    click.echo(f"{'ID':<6} {'Name':<28} {'Category':<14} {'Price':>10}")
    click.echo("-" * 61)
    for item in items:
        click.echo(f"{item.id:<6} {item.name:<28} {item.category:<14} {money(item.price):>10}")
