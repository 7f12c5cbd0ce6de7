"""Currency display formatting, shared by receipts and reports."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from qpos.domain.model.value_objects import DEFAULT_CURRENCY, Currency, to_amount


class CurrencyFormatter:
    """Formats amounts for one configured currency.

    Rounds half-up to the currency's decimal count and places the
    symbol before the amount (``$12.50``) or after it (``12.50 CHF``).
    """

    def __init__(self, currency: Currency = DEFAULT_CURRENCY) -> None:
        self._currency = currency
        self._quantum = Decimal(1).scaleb(-currency.decimals)

    @property
    def currency(self) -> Currency:
        return self._currency

    def format(self, amount: Decimal | int | float | str) -> str:
        value = to_amount(amount).quantize(self._quantum, rounding=ROUND_HALF_UP)
        if value == 0:
            value = abs(value)  # no "-0.00"
        text = f"{value:.{self._currency.decimals}f}"
        if self._currency.position == "before":
            return f"{self._currency.symbol}{text}"
        return f"{text} {self._currency.symbol}"

    __call__ = format
