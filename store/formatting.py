"""Price display in the store's single currency."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

NBSP = "\u00a0"
CURRENCY_SIGN = "₽"


def format_price(amount: float) -> str:
    """Render amount as ru-RU roubles with up to two fraction digits.

    Matches Intl.NumberFormat('ru-RU', {style: 'currency', currency: 'RUB',
    minimumFractionDigits: 0}): 1234 -> '1 234 ₽', 1234.5 -> '1 234,5 ₽'.
    Groups and the currency sign are separated by no-break spaces.

    Raises:
        ValueError: If amount is NaN or infinite.
    """
    if not math.isfinite(amount):
        raise ValueError(f"Cannot format non-finite price: {amount!r}")
    value = Decimal(repr(float(amount))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):.2f}".partition(".")
    fraction = fraction.rstrip("0")

    text = f"{int(whole):,}".replace(",", NBSP)
    if fraction:
        text += "," + fraction
    return f"{sign}{text}{NBSP}{CURRENCY_SIGN}"
