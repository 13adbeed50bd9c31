"""
Test suite for POST /api/v1/loan-simulator/simulate.

- Route delegates to the use case via dependency injection
- Route uses the mapper to convert between DTOs and domain models
- Validation errors (schema and business rules) map to 400
- Computation failures map to 500 with an opaque message
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, localcontext
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from loan_simulator.adapters.clock import FixedClock
from loan_simulator.domain.errors import ComputationError, ValidationError
from loan_simulator.domain.loan import LoanRequest, LoanResult
from loan_simulator.entrypoints.http.dependencies import get_clock, get_simulate_loan_use_case
from loan_simulator.entrypoints.http.exception_handlers import register_exception_handlers
from loan_simulator.entrypoints.http.routes.loan_simulator import router

URL = "/api/v1/loan-simulator/simulate"
TODAY = date(2024, 6, 15)


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with the loan simulator router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/api/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case(app: FastAPI) -> Mock:
    """Mock use case wired into the app."""
    use_case = Mock()
    app.dependency_overrides[get_simulate_loan_use_case] = lambda: use_case
    return use_case


@pytest.fixture
def fixed_clock(app: FastAPI) -> FixedClock:
    """Real use case, frozen evaluation date."""
    clock = FixedClock(TODAY)
    app.dependency_overrides[get_clock] = lambda: clock
    return clock


@pytest.fixture
def sample_result() -> LoanResult:
    return LoanResult(
        monthly_payment=Decimal("846.94"),
        total_amount=Decimal("10163.24"),
        total_interest=Decimal("163.24"),
        annual_interest_rate_percent=Decimal("3.00"),
    )


def payload(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "loan_amount": "10000.00",
        "birth_date": "1994-06-15",
        "payment_term_in_months": 12,
    }
    body.update(overrides)
    return body


# ==============================================================================
# Happy Path
# ==============================================================================


def test_simulate_success(
    client: TestClient, mock_use_case: Mock, sample_result: LoanResult
) -> None:
    """Route returns the mapped result with decimal strings."""
    mock_use_case.execute.return_value = sample_result

    response = client.post(URL, json=payload())

    assert response.status_code == 200
    assert response.json() == {
        "monthly_payment": "846.94",
        "total_amount": "10163.24",
        "total_interest": "163.24",
        "annual_interest_rate": "3.00",
    }


def test_simulate_passes_domain_request_to_use_case(
    client: TestClient, mock_use_case: Mock, sample_result: LoanResult
) -> None:
    mock_use_case.execute.return_value = sample_result

    client.post(URL, json=payload())

    mock_use_case.execute.assert_called_once_with(
        LoanRequest(
            principal=Decimal("10000.00"),
            birth_date=date(1994, 6, 15),
            term_months=12,
        )
    )


def test_simulate_end_to_end(client: TestClient, fixed_clock: FixedClock) -> None:
    """Real use case: 10,000 over 12 months for a 30 year old."""
    response = client.post(URL, json=payload())

    assert response.status_code == 200
    assert response.json() == {
        "monthly_payment": "846.94",
        "total_amount": "10163.24",
        "total_interest": "163.24",
        "annual_interest_rate": "3.00",
    }


@pytest.mark.parametrize("zeros", [26, 40])
def test_simulate_very_large_amount(
    client: TestClient, fixed_clock: FixedClock, zeros: int
) -> None:
    """Amounts wider than 28 digits are simulated, not reported as a server error."""
    loan_amount = "1" + "0" * zeros

    response = client.post(URL, json=payload(loan_amount=loan_amount))

    assert response.status_code == 200
    data = response.json()
    # 10,000 at 3% over 12 months pays 846.93698758...; scale by 10^(zeros - 4)
    assert data["monthly_payment"].startswith("84693698758")
    assert len(data["monthly_payment"].split(".")[0]) == zeros - 1
    with localcontext() as ctx:
        ctx.prec = 100
        expected_interest = Decimal(data["total_amount"]) - Decimal(loan_amount)
    assert Decimal(data["total_interest"]) == expected_interest
    assert data["annual_interest_rate"] == "3.00"


# ==============================================================================
# Business Rule Errors (engine messages, 400)
# ==============================================================================


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"loan_amount": "0"}, "Loan amount must be greater than zero"),
        ({"loan_amount": "-100"}, "Loan amount must be greater than zero"),
        ({"payment_term_in_months": 0}, "Payment term must be greater than zero"),
        ({"birth_date": "2024-06-16"}, "Birth date cannot be in the future"),
    ],
)
def test_business_rule_violation_returns_400(
    client: TestClient, fixed_clock: FixedClock, overrides: dict[str, object], message: str
) -> None:
    response = client.post(URL, json=payload(**overrides))

    assert response.status_code == 400
    assert response.json() == {"detail": message, "code": "VALIDATION_ERROR"}


def test_domain_validation_error_from_use_case(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = ValidationError("Payment term must be greater than zero")

    response = client.post(URL, json=payload())

    assert response.status_code == 400
    assert response.json()["detail"] == "Payment term must be greater than zero"


# ==============================================================================
# Request Schema Errors (400)
# ==============================================================================


@pytest.mark.parametrize(
    "overrides",
    [
        {"loan_amount": "abc"},
        {"loan_amount": "10000.123"},
        {"loan_amount": "$10,000.00"},
        {"loan_amount": ""},
        {"loan_amount": "١٠٠٠"},  # Arabic-Indic digits
        {"loan_amount": "１０００"},  # fullwidth digits
        {"birth_date": "15/06/1994"},
        {"payment_term_in_months": "twelve"},
        {"payment_term_in_months": 1201},
    ],
)
def test_malformed_request_returns_400(
    client: TestClient, mock_use_case: Mock, overrides: dict[str, object]
) -> None:
    response = client.post(URL, json=payload(**overrides))

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["detail"] == "Invalid request parameters"
    mock_use_case.execute.assert_not_called()


def test_missing_fields_are_listed(client: TestClient, mock_use_case: Mock) -> None:
    response = client.post(URL, json={"loan_amount": "10000.00"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"birth_date", "payment_term_in_months"}


# ==============================================================================
# Server Errors (500)
# ==============================================================================


def test_computation_error_returns_opaque_500(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = ComputationError()

    response = client.post(URL, json=payload())

    assert response.status_code == 500
    assert response.json() == {
        "detail": "Error calculating loan simulation",
        "code": "COMPUTATION_ERROR",
    }


def test_unexpected_error_returns_generic_500(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = RuntimeError("secret internals")

    response = client.post(URL, json=payload())

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }
