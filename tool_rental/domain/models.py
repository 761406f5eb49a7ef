"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Tool:
    """Rentable tool from the catalog"""

    tool_code: str
    tool_type: str
    tool_brand: str
    daily_charge: Decimal
    # Informational only; chargeable days are computed without them
    charges_on_weekday: bool
    charges_on_weekend: bool
    charges_on_holiday: bool


@dataclass(frozen=True)
class RentalAgreement:
    """Output of a checkout"""

    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    checkout_date: date
    due_date: date
    daily_charge: Decimal
    charge_days: int
    pre_discount_charge: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_charge: Decimal
