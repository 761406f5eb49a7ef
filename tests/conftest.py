"""Pytest fixtures for testing"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from tool_rental.api.dependencies import get_catalog
from tool_rental.api.main import create_app
from tool_rental.domain.checkout import RentalCalculator
from tool_rental.domain.models import Tool
from tool_rental.infrastructure.catalog import ToolCatalog, default_catalog


@pytest.fixture
def catalog() -> ToolCatalog:
    """Seeded catalog with the standard four tools"""
    return default_catalog()


@pytest.fixture
def calculator(catalog: ToolCatalog) -> RentalCalculator:
    return RentalCalculator(catalog)


@pytest.fixture
def scenario_catalog() -> ToolCatalog:
    """Catalog whose prices differ from the defaults, as in the pricing scenarios"""
    return ToolCatalog(
        [
            Tool("LADW", "Ladder", "Werner", Decimal("1.99"), True, True, False),
            Tool("CHNS", "Chainsaw", "Stihl", Decimal("1.49"), True, False, True),
            Tool("JAKD", "Jackhammer", "DeWalt", Decimal("2.99"), True, False, False),
            Tool("JAKR", "Jackhammer", "Ridgid", Decimal("1.99"), True, False, False),
            Tool("JAKX", "Jackhammer", "Rigid", Decimal("2.99"), True, False, False),
        ]
    )


@pytest.fixture
def client(catalog: ToolCatalog) -> TestClient:
    """Create FastAPI test client bound to the seeded catalog"""
    app = create_app()
    app.dependency_overrides[get_catalog] = lambda: catalog
    return TestClient(app)
