from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

CENT = Decimal("0.01")


def quantize_amount(value: Decimal | int | float | str) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return quantize_amount(Decimal(unit_price) * quantity)


def purchase_total(lines: Iterable[Tuple[Decimal, int]]) -> Decimal:
    """
    Sum (unit_price, quantity) pairs into a purchase total rounded to cents.
    """
    total = Decimal("0")
    for unit_price, quantity in lines:
        total += line_total(unit_price, quantity)
    return quantize_amount(total)


def to_minor_units(amount: Decimal | int | float | str) -> int:
    """Convert a display amount (e.g. 59.98) into integer cents (5998)."""
    return int(quantize_amount(amount) * 100)
