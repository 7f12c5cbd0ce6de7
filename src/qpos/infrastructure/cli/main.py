from dataclasses import replace

import click

from qpos.domain.exceptions import PosError
from qpos.infrastructure.bootstrap import build_services
from qpos.infrastructure.cli.menu_commands import menu_list
from qpos.infrastructure.cli.order_commands import (
    order_advance,
    order_charge,
    order_delete,
    order_fire,
    order_history,
    order_kitchen,
    order_list,
    order_print,
    order_purge_history,
    order_show,
    order_status,
)
from qpos.infrastructure.cli.printer_commands import printer_test
from qpos.infrastructure.cli.report_commands import report_today
from qpos.infrastructure.cli.settings_commands import (
    settings_currency,
    settings_restaurant,
    settings_show,
    settings_tax,
)
from qpos.infrastructure.cli.system_commands import system_export, system_import
from qpos.infrastructure.config import load_config
from qpos.infrastructure.log_setup import setup_logging


@click.group()
@click.option("--user", "user_id", default=None, help="ID of the signed-in user (default: QPOS_USER or 1).")
@click.option("--log-level", default=None, help="Logging level (default: QPOS_LOG_LEVEL or WARNING).")
@click.pass_context
def cli(ctx: click.Context, user_id: str | None, log_level: str | None) -> None:
    """QPOS — Restaurant Point of Sale"""
    if ctx.obj is None:
        try:
            config = load_config()
        except PosError as exc:
            raise click.ClickException(str(exc))
        setup_logging(log_level or config.log_level, json_format=config.log_format == "json")
        ctx.obj = build_services(config)

    if user_id:
        ctx.obj.config = replace(ctx.obj.config, user_id=user_id)


@cli.group()
def order() -> None:
    """Take, track and print orders."""


@cli.group()
def report() -> None:
    """Sales reports."""


@cli.group()
def menu() -> None:
    """Browse the menu."""


@cli.group()
def printer() -> None:
    """Receipt printer tools."""


@cli.group()
def settings() -> None:
    """Back-office settings."""


@cli.group()
def system() -> None:
    """Backup and restore."""


# Register subcommands
order.add_command(order_advance)
order.add_command(order_charge)
order.add_command(order_delete)
order.add_command(order_fire)
order.add_command(order_history)
order.add_command(order_kitchen)
order.add_command(order_list)
order.add_command(order_print)
order.add_command(order_purge_history)
order.add_command(order_show)
order.add_command(order_status)
printer.add_command(printer_test)
report.add_command(report_today)
menu.add_command(menu_list)
settings.add_command(settings_currency)
settings.add_command(settings_restaurant)
settings.add_command(settings_show)
settings.add_command(settings_tax)
system.add_command(system_export)
system.add_command(system_import)
