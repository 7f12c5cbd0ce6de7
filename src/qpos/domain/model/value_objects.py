"""Value Objects shared across the domain.

Amounts are plain ``Decimal`` values kept at full precision; only the
currency formatter rounds, and only for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from qpos.domain.exceptions import InvalidInput, NotFound

ZERO = Decimal("0")


def to_amount(value: str | float | int | Decimal) -> Decimal:
    """Coerce a user or storage value to Decimal safely."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidInput(f"Invalid amount: {value!r}") from exc


@dataclass(frozen=True)
class Currency:
    """Display rules for one currency."""

    code: str
    symbol: str
    name: str
    position: str = "before"  # "before" | "after"
    decimals: int = 2

    def __post_init__(self) -> None:
        if self.position not in ("before", "after"):
            raise InvalidInput(
                f"Currency symbol position must be 'before' or 'after', got {self.position!r}"
            )
        if self.decimals < 0:
            raise InvalidInput("Currency decimals cannot be negative")


SUPPORTED_CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "$", "US Dollar"),
    Currency("EUR", "€", "Euro"),
    Currency("GBP", "£", "British Pound"),
    Currency("INR", "₹", "Indian Rupee"),
    Currency("JPY", "¥", "Japanese Yen", decimals=0),
    Currency("CNY", "¥", "Chinese Yuan"),
    Currency("AUD", "A$", "Australian Dollar"),
    Currency("CAD", "C$", "Canadian Dollar"),
    Currency("CHF", "CHF", "Swiss Franc", position="after"),
    Currency("SEK", "kr", "Swedish Krona", position="after"),
)

DEFAULT_CURRENCY = SUPPORTED_CURRENCIES[0]


def currency_for(code: str) -> Currency:
    """Look up a supported currency by its ISO code (case-insensitive)."""
    for currency in SUPPORTED_CURRENCIES:
        if currency.code == code.upper():
            return currency
    raise NotFound(f"Unsupported currency: '{code}'")
