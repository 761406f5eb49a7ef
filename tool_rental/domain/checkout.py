"""Checkout orchestration - validate, price and assemble a rental agreement"""

import logging
from datetime import date
from typing import Optional

from tool_rental.domain.calendar import count_chargeable_days
from tool_rental.domain.exceptions import InvalidArgumentError
from tool_rental.domain.models import RentalAgreement, Tool
from tool_rental.domain.pricing import (
    calculate_discount_amount,
    calculate_final_charge,
    calculate_pre_discount_charge,
    to_decimal,
)
from tool_rental.infrastructure.catalog import ToolCatalog, default_catalog
from tool_rental.utils.date_utils import DEFAULT_YEAR_PIVOT, add_calendar_days, parse_checkout_date


def validate_rental_days(rental_days: int) -> None:
    if rental_days < 1:
        raise InvalidArgumentError("Rental days must be 1 or greater.")


def validate_discount_percent(discount_percent: int) -> None:
    if discount_percent < 0 or discount_percent > 100:
        raise InvalidArgumentError("Discount percent must be between 0 and 100 inclusive.")


class RentalCalculator:
    """Computes rental agreements against a tool catalog"""

    def __init__(
        self,
        catalog: ToolCatalog,
        observe_weekend_holidays: bool = False,
        year_pivot: int = DEFAULT_YEAR_PIVOT,
    ):
        self.catalog = catalog
        self.observe_weekend_holidays = observe_weekend_holidays
        self.year_pivot = year_pivot

    def resolve_tool(self, tool_code: str) -> Tool:
        tool = self.catalog.find_by_code(tool_code)
        if tool is None:
            raise InvalidArgumentError(f"Tool with code {tool_code} does not exist.")
        return tool

    def checkout(
        self,
        tool_code: str,
        rental_days: int,
        discount_percent: int,
        checkout_date: str,
    ) -> RentalAgreement:
        """
        Check out a tool and produce its rental agreement.

        Flow:
        1. Validate rental days, then discount percent
        2. Resolve the tool from the catalog
        3. Parse the MM/DD/YY checkout date
        4. Compute the due date, then count chargeable days over [checkout, checkout + rental_days)
        5. Price: pre-discount charge, discount amount, final charge

        Raises:
            InvalidArgumentError: Bad rental days, discount, unknown tool, or a
                rental period running past date.max
            DateParseError: Malformed checkout date
        """
        logging.info(
            "Checking out tool",
            extra={
                "tool_code": tool_code,
                "rental_days": rental_days,
                "discount_percent": discount_percent,
                "checkout_date": checkout_date,
            },
        )

        try:
            validate_rental_days(rental_days)
            validate_discount_percent(discount_percent)
            tool = self.resolve_tool(tool_code)
        except InvalidArgumentError as e:
            logging.warning(f"Checkout rejected: {e}", extra={"tool_code": tool_code})
            raise

        start = parse_checkout_date(checkout_date, self.year_pivot)

        # Every counted day precedes the due date, so a valid due date bounds the period
        try:
            due_date = add_calendar_days(start, rental_days)
        except OverflowError as e:
            logging.warning(
                f"Checkout rejected: rental period past {date.max.isoformat()}",
                extra={"tool_code": tool_code},
            )
            raise InvalidArgumentError(
                f"Rental period of {rental_days} days from {start.isoformat()} ends after the last supported date."
            ) from e

        charge_days = count_chargeable_days(start, rental_days, self.observe_weekend_holidays)
        logging.debug(f"Charge days: {charge_days}, due date: {due_date.isoformat()}")

        daily_charge = to_decimal(tool.daily_charge)
        pre_discount_charge = calculate_pre_discount_charge(daily_charge, charge_days)
        discount_amount = calculate_discount_amount(pre_discount_charge, discount_percent)
        final_charge = calculate_final_charge(pre_discount_charge, discount_amount)
        logging.debug(
            f"Pre-discount {pre_discount_charge}, discount {discount_amount}, final {final_charge}"
        )

        return RentalAgreement(
            tool_code=tool.tool_code,
            tool_type=tool.tool_type,
            tool_brand=tool.tool_brand,
            rental_days=rental_days,
            checkout_date=start,
            due_date=due_date,
            daily_charge=daily_charge,
            charge_days=charge_days,
            pre_discount_charge=pre_discount_charge,
            discount_percent=discount_percent,
            discount_amount=discount_amount,
            final_charge=final_charge,
        )


def checkout(
    tool_code: str,
    rental_days: int,
    discount_percent: int,
    checkout_date: str,
    catalog: Optional[ToolCatalog] = None,
) -> RentalAgreement:
    """
    Main entry point: check out a tool against the given catalog.

    Falls back to the seeded default catalog when none is passed.
    """
    calculator = RentalCalculator(catalog if catalog is not None else default_catalog())
    return calculator.checkout(tool_code, rental_days, discount_percent, checkout_date)
