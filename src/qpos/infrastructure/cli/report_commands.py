"""CLI commands for sales reports."""

from __future__ import annotations

from datetime import datetime

import click

from qpos.application.daily_report import DailyReportHandler
from qpos.domain.exceptions import PosError
from qpos.infrastructure.bootstrap import Services


@click.command("today")
@click.option(
    "--day",
    default=None,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Report another calendar day (YYYY-MM-DD).",
)
@click.pass_obj
def report_today(services: Services, day: datetime | None) -> None:
    """Revenue, order count, average order and top sellers for a day."""
    handler = DailyReportHandler(services.orders, services.settings_repo)

    try:
        report = handler.handle(services.principal(), day.date() if day else None)
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sales report for {report.day}")
    click.echo("-" * 40)
    click.echo(f"{'Revenue':<24} {report.total_revenue:>15}")
    click.echo(f"{'Orders':<24} {report.total_orders:>15}")
    click.echo(f"{'Average order':<24} {report.average_order:>15}")
    click.echo()

    if not report.top_items:
        click.echo("No sales recorded.")
        return

    click.echo("Top items")
    for rank, item in enumerate(report.top_items, start=1):
        click.echo(f"  {rank}. {item.name:<24} x{item.quantity:<4} {item.revenue:>10}")
