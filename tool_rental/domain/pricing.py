"""Rental charge computation with fixed-point decimal arithmetic"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")
HUNDRED = Decimal(100)


def round_currency(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, ties away from zero"""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(amount: Union[Decimal, int, float, str]) -> Decimal:
    """
    Convert a currency amount to Decimal.

    Floats go through their shortest string form so 1.99 becomes
    Decimal("1.99") rather than its binary expansion.
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(repr(amount))
    return Decimal(amount)


def calculate_pre_discount_charge(daily_charge: Decimal, charge_days: int) -> Decimal:
    """daily charge x chargeable days"""
    return round_currency(to_decimal(daily_charge) * charge_days)


def calculate_discount_amount(pre_discount_charge: Decimal, discount_percent: int) -> Decimal:
    """
    Discount taken off the pre-discount charge.

    Rounded half-up on its own, before the final charge is derived:
    $4.47 at 25% -> 1.1175 -> $1.12
    """
    return round_currency(pre_discount_charge * discount_percent / HUNDRED)


def calculate_final_charge(pre_discount_charge: Decimal, discount_amount: Decimal) -> Decimal:
    return round_currency(pre_discount_charge - discount_amount)
