"""Back-office configuration read by the core at call time."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.value_objects import DEFAULT_CURRENCY, ZERO, currency_for, to_amount


@dataclass(frozen=True)
class TaxConfiguration:
    """Tax and service-charge rates, in percent.

    Invariants:
    - both rates are >= 0
    """

    tax_rate: Decimal = Decimal("8.5")
    service_charge_rate: Decimal = ZERO
    auto_apply_tax: bool = True
    auto_apply_service_charge: bool = False

    def __post_init__(self) -> None:
        if self.tax_rate < ZERO:
            raise InvalidInput(f"Tax rate cannot be negative, got {self.tax_rate}")
        if self.service_charge_rate < ZERO:
            raise InvalidInput(
                f"Service charge rate cannot be negative, got {self.service_charge_rate}"
            )

    def updated(
        self,
        tax_rate: str | Decimal | None = None,
        service_charge_rate: str | Decimal | None = None,
        auto_apply_tax: bool | None = None,
        auto_apply_service_charge: bool | None = None,
    ) -> TaxConfiguration:
        """Return a copy with only the given fields changed."""
        changes: dict = {}
        if tax_rate is not None:
            changes["tax_rate"] = to_amount(tax_rate)
        if service_charge_rate is not None:
            changes["service_charge_rate"] = to_amount(service_charge_rate)
        if auto_apply_tax is not None:
            changes["auto_apply_tax"] = auto_apply_tax
        if auto_apply_service_charge is not None:
            changes["auto_apply_service_charge"] = auto_apply_service_charge
        return replace(self, **changes)


@dataclass(frozen=True)
class DiscountType:
    """A named percentage discount.

    Declared for the back office but not applied to order totals.
    """

    id: str
    name: str
    percentage: Decimal
    active: bool = True


@dataclass(frozen=True)
class RestaurantSettings:
    name: str = "DonerG"
    address: str = "123 Main Street, City, State"
    phone: str = "+1 (555) 123-4567"
    email: str = "info@donerg.com"
    website: str = "www.donerg.com"

    def updated(self, **changes: str | None) -> RestaurantSettings:
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@dataclass(frozen=True)
class GeneralSettings:
    currency_code: str = DEFAULT_CURRENCY.code

    def __post_init__(self) -> None:
        # Reject unknown codes early; raises NotFound.
        currency_for(self.currency_code)
