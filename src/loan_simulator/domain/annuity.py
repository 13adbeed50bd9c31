from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext


MONTHS_PER_YEAR = Decimal("12")
MONTHLY_RATE_QUANTUM = Decimal("0.0000000001")  # 10 fractional digits
MONEY_QUANTUM = Decimal("0.01")


PRECISION_MARGIN = 30


def working_precision(principal: Decimal) -> int:
    """
    Significant digits needed to carry a payment for this principal.

    Covers every integer digit of the principal plus enough fractional
    digits that totals derived from the unrounded payment are exact to the cent.
    """
    sign, digits, exponent = principal.as_tuple()
    return len(digits) + max(exponent, 0) + PRECISION_MARGIN


def round_money(value: Decimal) -> Decimal:
    """Round to cents using round-half-to-even."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_EVEN)


def monthly_rate_from_annual(annual_rate: Decimal) -> Decimal:
    return (annual_rate / MONTHS_PER_YEAR).quantize(MONTHLY_RATE_QUANTUM, rounding=ROUND_HALF_EVEN)


def compound_factor(monthly_rate: Decimal, term_months: int) -> Decimal:
    """
    Exact (1 + r)^n.

    The working precision is widened to hold every digit of the result, so
    no rounding happens inside the exponentiation.
    """
    base = Decimal(1) + monthly_rate
    digits = len(base.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits * max(term_months, 1) + 1)
        return base**term_months


def monthly_payment(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    """
    Fixed payment that fully amortizes principal over term_months.

    Standard annuity formula:
        payment = P * (r * (1+r)^n) / ((1+r)^n - 1)

    With r == 0 the formula divides by zero, so the payment is P / n instead.

    The returned value is NOT rounded: callers round it for display and feed
    the full-precision value into totals.
    """
    if monthly_rate == 0:
        return principal / Decimal(term_months)

    factor = compound_factor(monthly_rate, term_months)
    return principal * (monthly_rate * factor) / (factor - Decimal(1))
