"""Age-tiered annual interest rate policy."""

from __future__ import annotations

from datetime import date
from decimal import Decimal


# (max age inclusive, annual rate), checked in order
RATE_TIERS: tuple[tuple[int, Decimal], ...] = (
    (25, Decimal("0.05")),
    (40, Decimal("0.03")),
    (60, Decimal("0.02")),
)
SENIOR_RATE = Decimal("0.04")


def age_on(birth_date: date, today: date) -> int:
    """
    Number of complete years between birth_date and today.

    A birthday not yet reached this year does not count. Someone born on
    29 February turns a year older on 1 March in non-leap years.
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def annual_rate_for_age(age: int) -> Decimal:
    for max_age, rate in RATE_TIERS:
        if age <= max_age:
            return rate
    return SENIOR_RATE


def annual_interest_rate(birth_date: date, today: date) -> Decimal:
    """Annual rate for a borrower born on birth_date, evaluated on today."""
    return annual_rate_for_age(age_on(birth_date, today))
