"""
Test suite for POST /v1/quotes and POST /v1/quotes/purchasing-power.

Routes are exercised through TestClient with the use case dependencies
overridden, either by mocks or by use cases over in-memory repositories.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tienda_motos.adapters.in_memory_pricing_config_repository import (
    InMemoryPricingConfigRepository,
)
from tienda_motos.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from tienda_motos.domain.pricing import PaymentMethod
from tienda_motos.domain.vehicle import Vehicle
from tienda_motos.entrypoints.http.dependencies import (
    get_calculate_quote_use_case,
    get_estimate_purchasing_power_use_case,
)
from tienda_motos.entrypoints.http.exception_handlers import register_exception_handlers
from tienda_motos.entrypoints.http.routes.quotes import router
from tienda_motos.use_cases.calculate_quote import CalculateQuote
from tienda_motos.use_cases.estimate_purchasing_power import EstimatePurchasingPower


VEHICLE = Vehicle(
    id="v-160",
    brand="TVS",
    reference="Apache RTR 160",
    price=Decimal("8000000"),
    displacement=160,
)


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")

    use_case = CalculateQuote(
        vehicle_repository=InMemoryVehicleRepository([VEHICLE]),
        pricing_config_repository=InMemoryPricingConfigRepository(),
        today=lambda: date(2026, 1, 10),
    )
    test_app.dependency_overrides[get_calculate_quote_use_case] = lambda: use_case
    test_app.dependency_overrides[get_estimate_purchasing_power_use_case] = (
        lambda: EstimatePurchasingPower(
            vehicle_repository=InMemoryVehicleRepository([VEHICLE]),
            pricing_config_repository=InMemoryPricingConfigRepository(),
        )
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# Happy Path
# ==============================================================================


def test_cash_quote(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={
            "vehicle_id": "v-160",
            "scenario_id": "cash-santa-marta",
            "payment_method": "cash",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["registration_price"] == "1005000"
    assert data["subtotal"] == "9005000"
    assert data["total"] == "9005000"
    assert data["soat_price"] == "678400"
    assert data["monthly_payment"] == "0"
    assert data["term_months"] == 0
    assert data["is_credit"] is False


def test_credit_quote_with_entity(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={
            "vehicle_id": "v-160",
            "scenario_id": "credit-general",
            "payment_method": "credit",
            "financial_entity_id": "brilla",
            "term_months": 36,
            "down_payment": "1000000",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["is_credit"] is True
    assert data["financial_entity"] == "Brilla"
    assert data["term_months"] == 36
    assert data["down_payment"] == "1000000"
    assert Decimal(data["coverage_fee"]) > 0
    assert Decimal(data["monthly_payment_after_coverage"]) == Decimal(
        data["monthly_payment"]
    ) - Decimal(data["coverage_monthly_component"])


def test_route_delegates_to_use_case(app: FastAPI, client: TestClient) -> None:
    real_use_case = CalculateQuote(
        vehicle_repository=InMemoryVehicleRepository([VEHICLE]),
        pricing_config_repository=InMemoryPricingConfigRepository(),
    )
    mock_use_case = Mock()
    mock_use_case.execute.side_effect = real_use_case.execute
    app.dependency_overrides[get_calculate_quote_use_case] = lambda: mock_use_case

    client.post(
        "/v1/quotes",
        json={
            "vehicle_id": "v-160",
            "scenario_id": "credit-general",
            "payment_method": "credit",
            "down_payment": "250000.50",
        },
    )

    request = mock_use_case.execute.call_args.args[0]
    assert request.payment_method is PaymentMethod.CREDIT
    assert request.down_payment == Decimal("250000.50")
    assert request.term_months == 48
    assert request.financial_entity_id is None


def test_purchasing_power(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes/purchasing-power",
        json={"daily_budget": "10000", "initial_payment": "800000", "term_months": 36},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_budget"] == "300000"
    assert Decimal(data["max_vehicle_price"]) == Decimal(data["max_loan_amount"]) + Decimal(
        "800000"
    )
    assert data["financial_entity"] is None
    assert Decimal(data["guarantee_fund_cost"]) > 0


def test_purchasing_power_with_lender(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes/purchasing-power",
        json={"daily_budget": "10000", "financial_entity_id": "brilla"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["financial_entity"] == "Brilla"
    assert data["guarantee_fund_cost"] == "0"


def test_purchasing_power_lists_affordable_vehicles(client: TestClient) -> None:
    response = client.post("/v1/quotes/purchasing-power", json={"daily_budget": "15000"})

    assert response.status_code == 200
    assert response.json()["vehicles"] == [
        {
            "id": "v-160",
            "brand": "TVS",
            "reference": "Apache RTR 160",
            "price": "8000000",
            "registration_cost": "820000",
            "required_initial_payment": "1620000",
        }
    ]


def test_purchasing_power_small_budget_lists_no_vehicles(client: TestClient) -> None:
    response = client.post("/v1/quotes/purchasing-power", json={"daily_budget": "1000"})

    assert response.status_code == 200
    assert response.json()["vehicles"] == []


# ==============================================================================
# Errors
# ==============================================================================


def test_unknown_vehicle_returns_404(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={"vehicle_id": "nope", "scenario_id": "credit-general", "payment_method": "credit"},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_unknown_scenario_returns_404(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={"vehicle_id": "v-160", "scenario_id": "bogota", "payment_method": "cash"},
    )

    assert response.status_code == 404


@pytest.mark.parametrize(
    "overrides",
    [
        {"payment_method": "wire"},
        {"term_months": -1},
        {"down_payment": "abc"},
        {"down_payment": "-5"},
    ],
)
def test_invalid_payload_returns_422(client: TestClient, overrides: dict) -> None:
    payload = {"vehicle_id": "v-160", "scenario_id": "credit-general", "payment_method": "credit"}
    payload.update(overrides)

    response = client.post("/v1/quotes", json=payload)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_credit_with_zero_term_returns_422(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={
            "vehicle_id": "v-160",
            "scenario_id": "credit-general",
            "payment_method": "credit",
            "term_months": 0,
        },
    )

    assert response.status_code == 422
    assert response.json()["detail"] == "term_months must be > 0 for credit"


def test_down_payment_above_price_returns_422(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={
            "vehicle_id": "v-160",
            "scenario_id": "credit-general",
            "payment_method": "credit",
            "down_payment": "9000000",
        },
    )

    assert response.status_code == 422


def test_cash_quote_ignores_down_payment_above_price(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes",
        json={
            "vehicle_id": "v-160",
            "scenario_id": "cash-envigado",
            "payment_method": "cash",
            "down_payment": "9000000",
        },
    )

    assert response.status_code == 200
    assert response.json()["down_payment"] == "0"


def test_purchasing_power_rejects_zero_budget(client: TestClient) -> None:
    response = client.post("/v1/quotes/purchasing-power", json={"daily_budget": "0"})

    assert response.status_code == 422
    assert response.json()["detail"] == "daily_budget must be > 0"


def test_purchasing_power_unknown_lender_returns_404(client: TestClient) -> None:
    response = client.post(
        "/v1/quotes/purchasing-power",
        json={"daily_budget": "10000", "financial_entity_id": "nope"},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
