"""CLI commands for back-office settings."""

from __future__ import annotations

import click

from qpos.application.update_settings import (
    SetCurrencyHandler,
    UpdateRestaurantSettingsHandler,
    UpdateTaxSettingsHandler,
)
from qpos.domain.exceptions import PosError
from qpos.domain.model.value_objects import SUPPORTED_CURRENCIES
from qpos.infrastructure.bootstrap import Services


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


@click.command("show")
@click.pass_obj
def settings_show(services: Services) -> None:
    """Show restaurant, tax and currency settings."""
    repo = services.settings_repo
    restaurant = repo.get_restaurant_settings()
    tax = repo.get_tax_configuration()
    general = repo.get_general_settings()

    click.echo(f"Restaurant:      {restaurant.name}")
    click.echo(f"Address:         {restaurant.address}")
    click.echo(f"Phone:           {restaurant.phone}")
    click.echo(f"Email:           {restaurant.email}")
    click.echo(f"Website:         {restaurant.website}")
    click.echo()
    click.echo(f"Tax rate:        {tax.tax_rate}%  (auto-apply: {_yes_no(tax.auto_apply_tax)})")
    click.echo(
        f"Service charge:  {tax.service_charge_rate}%  "
        f"(auto-apply: {_yes_no(tax.auto_apply_service_charge)})"
    )
    click.echo(f"Currency:        {general.currency_code}")


@click.command("tax")
@click.option("--rate", default=None, help="Tax rate in percent (e.g. 8.5).")
@click.option("--service-rate", default=None, help="Service charge rate in percent.")
@click.option("--auto-tax/--no-auto-tax", default=None, help="Apply tax automatically.")
@click.option("--auto-service/--no-auto-service", default=None, help="Apply service charge automatically.")
@click.pass_obj
def settings_tax(
    services: Services,
    rate: str | None,
    service_rate: str | None,
    auto_tax: bool | None,
    auto_service: bool | None,
) -> None:
    """Update the tax configuration used for new orders."""
    handler = UpdateTaxSettingsHandler(services.settings_repo)

    try:
        config = handler.handle(
            services.principal(),
            tax_rate=rate,
            service_charge_rate=service_rate,
            auto_apply_tax=auto_tax,
            auto_apply_service_charge=auto_service,
        )
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Tax {config.tax_rate}% ({_yes_no(config.auto_apply_tax)}), "
        f"service charge {config.service_charge_rate}% ({_yes_no(config.auto_apply_service_charge)})"
    )


@click.command("restaurant")
@click.option("--name", default=None)
@click.option("--address", default=None)
@click.option("--phone", default=None)
@click.option("--email", default=None)
@click.option("--website", default=None)
@click.pass_obj
def settings_restaurant(services: Services, **changes: str | None) -> None:
    """Update the restaurant details printed on receipts."""
    handler = UpdateRestaurantSettingsHandler(services.settings_repo)

    try:
        settings = handler.handle(services.principal(), **changes)
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Restaurant details updated for {settings.name}")


@click.command("currency")
@click.argument("code", type=click.Choice([c.code for c in SUPPORTED_CURRENCIES], case_sensitive=False))
@click.pass_obj
def settings_currency(services: Services, code: str) -> None:
    """Set the display currency (e.g. EUR)."""
    handler = SetCurrencyHandler(services.settings_repo)

    try:
        settings = handler.handle(services.principal(), code.upper())
    except PosError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Currency set to {settings.currency_code}")
