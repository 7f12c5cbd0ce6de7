"""Domain service: order pricing.

Pure function of the order lines and the tax configuration snapshot the
caller passes in.  No rounding happens here; amounts stay at full
Decimal precision until they are formatted for display.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.order import OrderLine, OrderTotals
from qpos.domain.model.settings import TaxConfiguration
from qpos.domain.model.value_objects import ZERO

_HUNDRED = Decimal("100")


def compute_totals(lines: Iterable[OrderLine], config: TaxConfiguration) -> OrderTotals:
    """Compute subtotal, tax, service charge, discount and total.

    Raises InvalidInput if any line has a negative quantity or a
    negative unit price.
    """
    subtotal = ZERO
    for line in lines:
        if line.quantity < 0:
            raise InvalidInput(
                f"Quantity cannot be negative ({line.menu_item.name}: {line.quantity})"
            )
        if line.unit_price < ZERO:
            raise InvalidInput(
                f"Unit price cannot be negative ({line.menu_item.name}: {line.unit_price})"
            )
        subtotal += line.line_total

    tax = subtotal * (config.tax_rate / _HUNDRED) if config.auto_apply_tax else ZERO
    service_charge = (
        subtotal * (config.service_charge_rate / _HUNDRED)
        if config.auto_apply_service_charge
        else ZERO
    )
    # Discount types are not wired into pricing; the discount is always zero.
    discount = ZERO
    total = max(ZERO, subtotal + tax + service_charge - discount)

    return OrderTotals(
        subtotal=subtotal,
        tax=tax,
        service_charge=service_charge,
        discount=discount,
        total=total,
    )
