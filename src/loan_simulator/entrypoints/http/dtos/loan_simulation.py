from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class LoanSimulationRequestDTO(BaseModel):
    """Request payload for simulating a loan."""

    loan_amount: str = Field(
        description="Loan amount as decimal string",
        examples=["10000.00"],
        pattern=r"^-?[0-9]+(\.[0-9]{1,2})?$",
    )
    birth_date: date = Field(
        description="Borrower birth date (ISO 8601)",
        examples=["1990-05-15"],
    )
    payment_term_in_months: int = Field(
        description="Number of monthly installments",
        examples=[12],
        le=1200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "loan_amount": "10000.00",
                "birth_date": "1990-05-15",
                "payment_term_in_months": 12,
            }
        }
    )


class LoanSimulationResponseDTO(BaseModel):
    """Response with the simulated loan terms."""

    monthly_payment: str = Field(
        description="Monthly payment as decimal string",
        examples=["846.94"],
    )
    total_amount: str = Field(
        description="Total repaid over the loan term as decimal string",
        examples=["10163.24"],
    )
    total_interest: str = Field(
        description="Total interest paid as decimal string",
        examples=["163.24"],
    )
    annual_interest_rate: str = Field(
        description="Annual interest rate as a percentage (e.g., '3.00' = 3%)",
        examples=["3.00"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "monthly_payment": "846.94",
                "total_amount": "10163.24",
                "total_interest": "163.24",
                "annual_interest_rate": "3.00",
            }
        }
    )
