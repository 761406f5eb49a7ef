"""Integration tests for API endpoints"""

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/checkout",
        json={"tool_code": "LADW", "rental_days": 3, "discount_percent": 10, "checkout_date": "07/02/20"},
    )
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "tool_rental_checkout" in response.text


def test_checkout_endpoint(client: TestClient):
    """Test POST /v1/checkout returns the full agreement"""
    response = client.post(
        "/v1/checkout",
        json={"tool_code": "CHNS", "rental_days": 5, "discount_percent": 25, "checkout_date": "07/02/15"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["tool_type"] == "Chainsaw"
    assert data["checkout_date"] == "2015-07-02"
    assert data["due_date"] == "2015-07-07"
    assert data["charge_days"] == 3
    assert data["pre_discount_charge"] == "4.47"
    assert data["discount_amount"] == "1.12"
    assert data["final_charge"] == "3.35"
    assert "Final charge: $3.35" in data["rendered"]
    assert "X-Request-ID" in response.headers


def test_checkout_endpoint_invalid_discount(client: TestClient):
    response = client.post(
        "/v1/checkout",
        json={"tool_code": "JAKR", "rental_days": 5, "discount_percent": 101, "checkout_date": "09/03/15"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Discount percent must be between 0 and 100 inclusive."


def test_checkout_endpoint_unknown_tool(client: TestClient):
    response = client.post(
        "/v1/checkout",
        json={"tool_code": "NOPE", "rental_days": 5, "discount_percent": 0, "checkout_date": "09/03/15"},
    )

    assert response.status_code == 400
    assert "NOPE" in response.json()["detail"]


def test_checkout_endpoint_bad_date(client: TestClient):
    response = client.post(
        "/v1/checkout",
        json={"tool_code": "JAKR", "rental_days": 5, "discount_percent": 0, "checkout_date": "not a date"},
    )

    assert response.status_code == 400


def test_checkout_endpoint_missing_field(client: TestClient):
    """Test request schema validation rejects incomplete bodies"""
    response = client.post("/v1/checkout", json={"tool_code": "JAKR"})

    assert response.status_code == 422


def test_request_id_passthrough(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


def test_list_tools(client: TestClient):
    response = client.get("/v1/tools")

    assert response.status_code == 200
    codes = [tool["tool_code"] for tool in response.json()["tools"]]
    assert codes == ["CHNS", "JAKD", "JAKR", "LADW"]


def test_get_tool(client: TestClient):
    response = client.get("/v1/tools/JAKD")

    assert response.status_code == 200
    data = response.json()
    assert data["tool_brand"] == "DeWalt"
    assert data["daily_charge"] == "2.99"


def test_get_tool_not_found(client: TestClient):
    response = client.get("/v1/tools/NOPE")

    assert response.status_code == 404


def test_checkout_endpoint_period_past_max_date(client: TestClient):
    """Test a rental running past the last representable date is a 400, not a 500"""
    response = client.post(
        "/v1/checkout",
        json={"tool_code": "LADW", "rental_days": 3000000, "discount_percent": 0, "checkout_date": "07/02/20"},
    )

    assert response.status_code == 400
    assert "last supported date" in response.json()["detail"]
