"""POST /v1/checkout - tool rental checkout endpoint"""

import logging
import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request

from tool_rental.api.dependencies import get_calculator, get_request_id
from tool_rental.api.v1.schemas import CheckoutRequest, CheckoutResponse
from tool_rental.config import settings
from tool_rental.domain.checkout import RentalCalculator
from tool_rental.domain.exceptions import DateParseError, InvalidArgumentError
from tool_rental.infrastructure.observability.logging import log_checkout
from tool_rental.infrastructure.observability.metrics import record_checkout, record_rejection
from tool_rental.presentation import render_rental_agreement

router = APIRouter()


@router.post("/checkout", response_model=CheckoutResponse)
def create_checkout(
    request_body: CheckoutRequest,
    request: Request,
    calculator: RentalCalculator = Depends(get_calculator),
):
    """
    Check out a tool and return the rental agreement.

    Flow:
    1. Validate input and resolve the tool
    2. Compute chargeable days, due date and charges
    3. Render the printable agreement
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        agreement = calculator.checkout(
            request_body.tool_code,
            request_body.rental_days,
            request_body.discount_percent,
            request_body.checkout_date,
        )

    except InvalidArgumentError as e:
        record_rejection("invalid_argument")
        logging.warning(f"Invalid checkout: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except DateParseError as e:
        record_rejection("date_parse")
        logging.warning(f"Bad checkout date: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_checkout(agreement.tool_code, agreement.charge_days)
    log_checkout(
        request_id,
        agreement.tool_code,
        agreement.rental_days,
        agreement.charge_days,
        agreement.final_charge,
        duration_ms,
    )

    return CheckoutResponse(
        **asdict(agreement),
        rendered=render_rental_agreement(agreement, settings.date_format),
    )
