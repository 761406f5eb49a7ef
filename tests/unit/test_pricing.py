"""Unit tests for decimal charge computation"""

from decimal import Decimal
from tool_rental.domain.pricing import (
    calculate_discount_amount,
    calculate_final_charge,
    calculate_pre_discount_charge,
    round_currency,
    to_decimal,
)


def test_round_currency_half_up():
    """Test ties round away from zero"""
    assert round_currency(Decimal("1.005")) == Decimal("1.01")
    assert round_currency(Decimal("0.125")) == Decimal("0.13")
    assert round_currency(Decimal("0.124")) == Decimal("0.12")
    assert round_currency(Decimal("-0.125")) == Decimal("-0.13")


def test_to_decimal_from_float_keeps_short_form():
    assert to_decimal(1.99) == Decimal("1.99")
    assert to_decimal("2.99") == Decimal("2.99")
    assert to_decimal(3) == Decimal("3")


def test_pre_discount_charge():
    assert calculate_pre_discount_charge(Decimal("1.99"), 2) == Decimal("3.98")
    assert calculate_pre_discount_charge(Decimal("1.49"), 3) == Decimal("4.47")
    assert calculate_pre_discount_charge(Decimal("2.99"), 0) == Decimal("0.00")


def test_discount_amount_rounds_each_step():
    """Test $4.47 at 25% -> 1.1175 -> $1.12"""
    assert calculate_discount_amount(Decimal("4.47"), 25) == Decimal("1.12")
    assert calculate_discount_amount(Decimal("3.98"), 10) == Decimal("0.40")
    assert calculate_discount_amount(Decimal("5.98"), 50) == Decimal("2.99")
    assert calculate_discount_amount(Decimal("14.95"), 0) == Decimal("0.00")
    assert calculate_discount_amount(Decimal("14.95"), 100) == Decimal("14.95")


def test_final_charge():
    assert calculate_final_charge(Decimal("4.47"), Decimal("1.12")) == Decimal("3.35")
    assert calculate_final_charge(Decimal("3.98"), Decimal("0.40")) == Decimal("3.58")


def test_amounts_have_two_decimal_places():
    amount = calculate_discount_amount(Decimal("10.00"), 10)
    assert amount.as_tuple().exponent == -2
