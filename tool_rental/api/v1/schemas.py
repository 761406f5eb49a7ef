"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


class CheckoutRequest(BaseModel):
    """Request body for POST /v1/checkout"""

    tool_code: str = Field(..., min_length=1, description="Catalog tool code, e.g. LADW")
    rental_days: int = Field(..., description="Number of calendar days rented")
    discount_percent: int = Field(0, description="Whole-number discount, 0-100")
    checkout_date: str = Field(..., description="Checkout date as MM/DD/YY")


class CheckoutResponse(BaseModel):
    """Response for POST /v1/checkout"""

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
    rendered: str


class ToolSchema(BaseModel):
    """Single catalog tool"""

    tool_code: str
    tool_type: str
    tool_brand: str
    daily_charge: Decimal
    charges_on_weekday: bool
    charges_on_weekend: bool
    charges_on_holiday: bool


class ToolListResponse(BaseModel):
    """Response for GET /v1/tools"""

    tools: List[ToolSchema]
