"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Depends, Request

from tool_rental.config import settings
from tool_rental.domain.checkout import RentalCalculator
from tool_rental.infrastructure.catalog import ToolCatalog, default_catalog


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_catalog() -> ToolCatalog:
    """Provide the process-wide tool catalog, built once on first use"""
    if settings.catalog_path:
        return ToolCatalog.from_json(settings.catalog_path)
    return default_catalog()


def get_calculator(catalog: ToolCatalog = Depends(get_catalog)) -> RentalCalculator:
    """Provide a rental calculator bound to the shared catalog"""
    return RentalCalculator(
        catalog,
        observe_weekend_holidays=settings.observe_weekend_holidays,
        year_pivot=settings.two_digit_year_pivot,
    )
