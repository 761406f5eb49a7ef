"""Printed rental agreement rendering"""

from decimal import Decimal
from typing import List

from tool_rental.domain.models import RentalAgreement
from tool_rental.utils.date_utils import format_date


def format_currency(amount: Decimal) -> str:
    """$1,234.56 style; negative amounts as -$1.00"""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent(percent: int) -> str:
    return f"{percent}%"


def render_rental_agreement(agreement: RentalAgreement, date_format: str = "%m/%d/%y") -> str:
    """
    Render the agreement as printable text, one "Label: value" line per field.

    Example:
        Tool code: LADW
        Tool type: Ladder
        ...
        Final charge: $3.58
    """
    lines: List[str] = [
        f"Tool code: {agreement.tool_code}",
        f"Tool type: {agreement.tool_type}",
        f"Tool brand: {agreement.tool_brand}",
        f"Rental days: {agreement.rental_days}",
        f"Checkout date: {format_date(agreement.checkout_date, date_format)}",
        f"Due date: {format_date(agreement.due_date, date_format)}",
        f"Daily rental charge: {format_currency(agreement.daily_charge)}",
        f"Charge days: {agreement.charge_days}",
        f"Pre-discount charge: {format_currency(agreement.pre_discount_charge)}",
        f"Discount percent: {format_percent(agreement.discount_percent)}",
        f"Discount amount: {format_currency(agreement.discount_amount)}",
        f"Final charge: {format_currency(agreement.final_charge)}",
    ]
    return "\n".join(lines)


def print_rental_agreement(agreement: RentalAgreement, date_format: str = "%m/%d/%y") -> None:
    """Write the rendered agreement to stdout"""
    print(render_rental_agreement(agreement, date_format))
