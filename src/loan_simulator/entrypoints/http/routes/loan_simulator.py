from fastapi import APIRouter, Depends

from loan_simulator.entrypoints.http.dependencies import get_simulate_loan_use_case
from loan_simulator.entrypoints.http.dtos.loan_simulation import (
    LoanSimulationRequestDTO,
    LoanSimulationResponseDTO,
)
from loan_simulator.entrypoints.http.error_responses import ErrorResponse
from loan_simulator.entrypoints.http.mappers.loan_simulation_mapper import LoanSimulationMapper
from loan_simulator.use_cases.simulate_loan import SimulateLoan


router = APIRouter(tags=["Loan Simulator"])


@router.post(
    "/loan-simulator/simulate",
    response_model=LoanSimulationResponseDTO,
    summary="Simulate a loan",
    description="""
    Simulate the repayment terms of a fixed-rate amortizing loan.

    ## Monetary Values
    - All monetary values are strings (e.g., "10000.00")
    - Up to 2 decimal places; exact decimal arithmetic, no floating point

    ## Interest Rate
    Annual rate depends on the borrower's age on the day of the request:
    - up to 25 years: 5%
    - 26 to 40 years: 3%
    - 41 to 60 years: 2%
    - over 60 years: 4%

    ## Calculation
    - Monthly payment from the standard annuity formula
    - Total amount = monthly payment × term (before rounding the payment)
    - Total interest = total amount - loan amount
    - All values rounded half-to-even to 2 decimals

    ## Example
    ```
    POST /api/v1/loan-simulator/simulate
    {
        "loan_amount": "10000.00",
        "birth_date": "1990-05-15",
        "payment_term_in_months": 12
    }
    ```
    """,
    responses={
        200: {
            "description": "Successful simulation",
            "content": {
                "application/json": {
                    "example": {
                        "monthly_payment": "846.94",
                        "total_amount": "10163.24",
                        "total_interest": "163.24",
                        "annual_interest_rate": "3.00",
                    }
                }
            },
        },
        400: {
            "description": "Validation error",
            "model": ErrorResponse,
            "content": {
                "application/json": {
                    "examples": {
                        "non_positive_amount": {
                            "summary": "Loan amount <= 0",
                            "value": {
                                "detail": "Loan amount must be greater than zero",
                                "code": "VALIDATION_ERROR",
                            },
                        },
                        "future_birth_date": {
                            "summary": "Birth date in the future",
                            "value": {
                                "detail": "Birth date cannot be in the future",
                                "code": "VALIDATION_ERROR",
                            },
                        },
                    }
                }
            },
        },
        500: {
            "description": "Computation failure",
            "model": ErrorResponse,
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Error calculating loan simulation",
                        "code": "COMPUTATION_ERROR",
                    }
                }
            },
        },
    },
)
def simulate_loan(
    payload: LoanSimulationRequestDTO,
    use_case: SimulateLoan = Depends(get_simulate_loan_use_case),
) -> LoanSimulationResponseDTO:
    """
    Simulate loan endpoint.

    Follows the parse → map → execute → map → return pattern.
    """
    # 1. Map to domain request (string → Decimal)
    request = LoanSimulationMapper.to_domain_request(payload)

    # 2. Execute use case (validates and calculates)
    result = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return LoanSimulationMapper.to_response(result)
