"""Monetary Arithmetic

Pure helpers shared by the client-side editor and the server-side use cases,
so both sides always derive amounts and totals with the same formula.
All results are Decimals with 2-digit precision (ROUND_HALF_UP).
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Tuple, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Largest value a Numeric(18, 2) column holds
MAX_AMOUNT = Decimal("9999999999999999.99")
MAX_QUANTITY = 1_000_000

Number = Union[Decimal, int, float, str]


def to_money(value: Number) -> Decimal:
    """
    Convert a number to a 2-place Decimal

    Floats go through str() so 29.99 stays 29.99.

    Raises:
        ValueError: If the value is not numeric or too large to quantize
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary value: {value!r}")
    try:
        if isinstance(value, float):
            value = str(value)
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Not a monetary value: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a monetary value: {value!r}")
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Monetary value out of range: {value!r}") from e


def line_amount(quantity: int, price: Number) -> Decimal:
    """
    Amount of a single line item (quantity * price)

    Raises:
        ValueError: If quantity is negative
    """
    if quantity < 0:
        raise ValueError(f"Quantity must not be negative, got {quantity}")
    return to_money(Decimal(quantity) * to_money(price))


def recompute_subtotal(items: Iterable) -> Decimal:
    """Sum of item.amount over items; 0.00 for an empty sequence"""
    return to_money(sum((to_money(item.amount) for item in items), ZERO))


def apply_discount(subtotal: Number, discount: Number) -> Tuple[Decimal, Decimal]:
    """
    Clamp a discount into [0, subtotal] and compute the net total

    Returns:
        Tuple of (clamped_discount, total)
    """
    subtotal = to_money(subtotal)
    discount = to_money(discount)
    if discount < ZERO:
        discount = ZERO
    if discount > subtotal:
        discount = subtotal
    return discount, to_money(subtotal - discount)
