from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, localcontext

from loan_simulator.domain.annuity import (
    monthly_payment,
    monthly_rate_from_annual,
    round_money,
    working_precision,
)
from loan_simulator.domain.errors import ComputationError
from loan_simulator.domain.interest_rate import annual_interest_rate
from loan_simulator.domain.loan import LoanRequest, LoanResult
from loan_simulator.ports.clock import Clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimulateLoan:
    """
    Simulate a loan using exact decimal arithmetic.

    Steps (strict data dependency, run in order):
    1. Validate the request against today's date
    2. Annual rate from the borrower's age tier
    3. Monthly rate = annual / 12, kept at 10 fractional digits
    4. Monthly payment from the annuity formula (full precision)
    5. Totals derived from the payment

    Rounding policy:
    - Everything is ROUND_HALF_EVEN
    - Only reported values are rounded to cents
    - The working precision grows with the principal, so large amounts
      are carried in full rather than rounded to 28 significant digits
    - total_amount is computed from the UNROUNDED monthly payment, so
      total_amount == round2(payment * term) holds exactly, while
      round2(payment) * term may differ from it by a few cents
    - total_interest = round2(total_amount - principal)
    """

    clock: Clock

    def execute(self, req: LoanRequest) -> LoanResult:
        today = self.clock.today()
        req.validate(today)

        try:
            # Wide enough that no principal size overflows the context
            with localcontext() as ctx:
                ctx.prec = working_precision(req.principal)
                return self._calculate(req, today)
        except Exception as exc:
            logger.exception(
                "Error during loan simulation calculation",
                extra={"term_months": req.term_months},
            )
            raise ComputationError() from exc

    def _calculate(self, req: LoanRequest, today: date) -> LoanResult:
        annual_rate = annual_interest_rate(req.birth_date, today)
        monthly_rate = monthly_rate_from_annual(annual_rate)

        payment_precise = monthly_payment(req.principal, monthly_rate, req.term_months)
        if payment_precise <= 0:
            raise ValueError("Computed monthly payment is invalid")

        total_amount = round_money(payment_precise * Decimal(req.term_months))
        total_interest = round_money(total_amount - req.principal)

        logger.debug(
            "Loan simulated",
            extra={
                "annual_rate": str(annual_rate),
                "monthly_rate": str(monthly_rate),
                "term_months": req.term_months,
            },
        )

        return LoanResult(
            monthly_payment=round_money(payment_precise),
            total_amount=total_amount,
            total_interest=total_interest,
            annual_interest_rate_percent=round_money(annual_rate * 100),
        )
