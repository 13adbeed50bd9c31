from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from loan_simulator.domain.errors import ValidationError


LOAN_AMOUNT_NOT_POSITIVE = "Loan amount must be greater than zero"
PAYMENT_TERM_NOT_POSITIVE = "Payment term must be greater than zero"
BIRTH_DATE_IN_FUTURE = "Birth date cannot be in the future"


@dataclass(frozen=True, slots=True)
class LoanRequest:
    principal: Decimal
    birth_date: date
    term_months: int

    def validate(self, today: date) -> None:
        """
        Validate the request against the evaluation date.

        Rules are checked in order and the first failure wins.

        Args:
            today: Evaluation date the birth date is compared against

        Raises:
            ValidationError: With one of the fixed messages above
        """
        if self.principal <= 0:
            raise ValidationError(LOAN_AMOUNT_NOT_POSITIVE)
        if self.term_months <= 0:
            raise ValidationError(PAYMENT_TERM_NOT_POSITIVE)
        if self.birth_date > today:
            raise ValidationError(BIRTH_DATE_IN_FUTURE)


@dataclass(frozen=True, slots=True)
class LoanResult:
    monthly_payment: Decimal
    total_amount: Decimal
    total_interest: Decimal
    annual_interest_rate_percent: Decimal
