"""CLI commands for system backup."""

from __future__ import annotations

import json

import click

from qpos.application.export_data import ExportDataHandler, ImportDataHandler
from qpos.domain.exceptions import PosError
from qpos.infrastructure.bootstrap import Services


@click.command("export")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write to file instead of stdout.")
@click.pass_obj
def system_export(services: Services, output: str | None) -> None:
    """Export all stored data as a JSON backup."""
    handler = ExportDataHandler(services.store)

    try:
        document = handler.handle(services.principal())
    except PosError as exc:
        raise click.ClickException(str(exc))

    text = json.dumps(document, indent=2, ensure_ascii=False)
    if output is None:
        click.echo(text)
        return
    try:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise click.ClickException(f"Cannot write backup to {output}: {exc.strerror or exc}")
    click.echo(f"Backup written to {output}")


@click.command("import")
@click.argument("source")
@click.pass_obj
def system_import(services: Services, source: str) -> None:
    """Restore from a JSON backup (not supported)."""
    handler = ImportDataHandler()

    try:
        handler.handle(services.principal(), source)
    except PosError as exc:
        raise click.ClickException(str(exc))
