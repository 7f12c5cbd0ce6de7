"""CLI commands for the receipt printer."""

from __future__ import annotations

import click

from qpos.application.print_test_page import PrintTestPageHandler
from qpos.domain.exceptions import PosError
from qpos.infrastructure.bootstrap import Services


@click.command("test")
@click.pass_obj
def printer_test(services: Services) -> None:
    """Print a sample receipt to check the printer and paper width."""
    handler = PrintTestPageHandler(services.settings_repo, services.printer, services.columns)

    try:
        result = handler.handle(services.principal())
    except PosError as exc:
        raise click.ClickException(str(exc))

    if result.delivered:
        click.echo("Test receipt sent to thermal printer.")
    else:
        click.echo("Thermal printer not available; test receipt opened in print view.")
        click.echo("Check that the layout looks correct.")
