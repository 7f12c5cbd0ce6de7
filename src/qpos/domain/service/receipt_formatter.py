"""Domain service: thermal receipt layout.

Renders an order and its precomputed totals into a fixed-width text
grid (32 columns on 58mm paper, 48 on 80mm) framed by ESC/POS
initialise and paper-cut sequences.  Every money value goes through the
injected CurrencyFormatter; nothing here knows about currency symbols.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable

from qpos.domain.exceptions import InvalidInput
from qpos.domain.model.order import OrderLine, OrderTotals
from qpos.domain.model.settings import RestaurantSettings
from qpos.domain.model.value_objects import ZERO
from qpos.domain.service.currency_formatter import CurrencyFormatter

# ---------------------------------------------------------------------------
# Printer constants
# ---------------------------------------------------------------------------
ESC_POS_INIT = "\x1b\x40"
ESC_POS_CUT = "\x1d\x56\x00"
PAPER_COLUMNS = {58: 32, 80: 48}
LONG_NAME_THRESHOLD = 20
ELLIPSIS = "..."
FOOTER_LINES = ("Thank you for your visit!", "Please come again", "", "Powered by QPOS")

_CONTROL_CODES = re.compile("|".join(re.escape(code) for code in (ESC_POS_INIT, ESC_POS_CUT)))


def columns_for_paper(width_mm: int) -> int:
    """Characters per line for a paper width in millimetres."""
    try:
        return PAPER_COLUMNS[width_mm]
    except KeyError:
        raise InvalidInput(
            f"Unsupported paper width {width_mm}mm (expected 58 or 80)"
        ) from None


def strip_control_codes(receipt: str) -> str:
    """Remove the init/cut sequences, leaving human-readable text."""
    return _CONTROL_CODES.sub("", receipt)


class ReceiptLayout:
    """Fixed-width text grid helpers for one paper width."""

    def __init__(self, width: int) -> None:
        if width not in PAPER_COLUMNS.values():
            raise InvalidInput(f"Receipt width must be 32 or 48 columns, got {width}")
        self.width = width

    def center_text(self, text: str) -> str:
        """Centre *text*, padding both sides; never truncates."""
        padding = max(0, (self.width - len(text)) // 2)
        return (" " * padding + text).ljust(self.width)

    def right_align(self, text: str) -> str:
        return " " * max(0, self.width - len(text)) + text

    def format_line(self, left: str, right: str = "") -> str:
        """Left text and right text on one row, exactly ``width`` wide.

        The right column keeps its full length; the left column is cut
        short with an ellipsis when the two do not fit together.  A right
        value too long to leave room for the label is itself cut, so the
        label (or at least an ellipsis) always survives.
        """
        keep = max(len(ELLIPSIS), min(len(left) + 1, self.width // 2))
        if len(right) > self.width - keep:
            right = right[: self.width - keep - len(ELLIPSIS)] + ELLIPSIS
        available = self.width - len(right)
        if len(left) > available:
            left = left[: max(0, available - len(ELLIPSIS))] + ELLIPSIS
        padding = max(0, self.width - len(left) - len(right))
        return left + " " * padding + right

    def divider(self, char: str = "-") -> str:
        if len(char) != 1:
            raise InvalidInput(f"Divider must be a single character, got {char!r}")
        return char * self.width


def format_receipt(
    lines: Iterable[OrderLine],
    totals: OrderTotals,
    order_id: str,
    customer_name: str,
    restaurant: RestaurantSettings,
    width: int,
    formatter: CurrencyFormatter,
    printed_at: datetime | None = None,
) -> str:
    """Render a complete receipt, control sequences included."""
    layout = ReceiptLayout(width)
    money = formatter.format
    printed_at = printed_at or datetime.now()

    # Header
    rows: list[str] = ["", layout.center_text(restaurant.name.upper())]
    if restaurant.address:
        rows.append(layout.center_text(restaurant.address))
    if restaurant.phone:
        rows.append(layout.center_text(restaurant.phone))
    rows.append("")

    # Order info
    rows.append(layout.divider())
    if order_id:
        rows.append(layout.format_line("Order:", order_id))
    if customer_name:
        rows.append(layout.format_line("Customer:", customer_name))
    rows.append(layout.format_line("Date:", f"{printed_at:%Y-%m-%d}"))
    rows.append(layout.format_line("Time:", f"{printed_at:%H:%M:%S}"))
    rows.append(layout.divider())

    # Items
    rows.append("")
    for line in lines:
        if line.quantity < 0:
            raise InvalidInput(f"Quantity cannot be negative ({line.menu_item.name})")
        name = line.menu_item.name
        rows.append(layout.format_line(f"{line.quantity}x {name}", money(line.line_total)))
        # Long names get cut on the first row, so show the unit price below.
        if len(name) > LONG_NAME_THRESHOLD:
            rows.append(layout.format_line(f"   @ {money(line.unit_price)} each"))
    rows.append("")
    rows.append(layout.divider())

    # Totals
    rows.append(layout.format_line("Subtotal:", money(totals.subtotal)))
    if totals.discount > ZERO:
        rows.append(layout.format_line("Discount:", f"-{money(totals.discount)}"))
    if totals.service_charge > ZERO:
        rows.append(layout.format_line("Service Charge:", money(totals.service_charge)))
    if totals.tax > ZERO:
        rows.append(layout.format_line("Tax:", money(totals.tax)))
    rows.append(layout.divider())
    rows.append(layout.format_line("TOTAL:", money(totals.total)))
    rows.append(layout.divider())

    # Footer
    rows.append("")
    rows.extend(layout.center_text(text) if text else "" for text in FOOTER_LINES)
    rows.extend(["", "", ""])

    return ESC_POS_INIT + "\n".join(rows) + "\n" + ESC_POS_CUT
