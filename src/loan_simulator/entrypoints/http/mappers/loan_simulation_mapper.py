from __future__ import annotations

from decimal import Decimal, InvalidOperation

from loan_simulator.domain.errors import ValidationError
from loan_simulator.domain.loan import LoanRequest, LoanResult
from loan_simulator.entrypoints.http.dtos.loan_simulation import (
    LoanSimulationRequestDTO,
    LoanSimulationResponseDTO,
)


class LoanSimulationMapper:
    """Maps between REST DTOs and domain models for loan simulation."""

    @staticmethod
    def to_domain_request(dto: LoanSimulationRequestDTO) -> LoanRequest:
        """
        Converts request DTO to domain LoanRequest.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If loan_amount cannot be converted to a valid Decimal
        """
        try:
            principal = Decimal(dto.loan_amount)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "loan_amount",
                        "message": f"Must be a valid decimal: {dto.loan_amount}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )

        return LoanRequest(
            principal=principal,
            birth_date=dto.birth_date,
            term_months=dto.payment_term_in_months,
        )

    @staticmethod
    def to_response(result: LoanResult) -> LoanSimulationResponseDTO:
        """Converts domain LoanResult to response DTO (Decimal → string)."""
        return LoanSimulationResponseDTO(
            monthly_payment=str(result.monthly_payment),
            total_amount=str(result.total_amount),
            total_interest=str(result.total_interest),
            annual_interest_rate=str(result.annual_interest_rate_percent),
        )
