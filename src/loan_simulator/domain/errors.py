"""Loan simulation failures.

Two outcomes leave the engine besides a result: the request broke a business
rule, or the arithmetic failed. The HTTP layer picks the status code from
``error_code``.
"""

from typing import Any


class DomainError(Exception):
    """Base for loan simulation failures. Extra keyword context rides along in ``to_dict``."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """Loan request rejected before any calculation.

    The engine raises it with one of the fixed messages in
    ``loan_simulator.domain.loan``. The HTTP mapper raises it with a list of
    field errors when ``loan_amount`` is not a decimal. Maps to 400.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        # Field errors such as [{"field": "loan_amount", "code": "INVALID_DECIMAL", ...}]
        self.errors: list[dict[str, str]] | None = errors or None
        if message is None:
            message = "Validation failed" if self.errors else "Validation error"
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class ComputationError(DomainError):
    """Payment derivation failed for a request that passed validation.

    The cause is chained on ``__cause__`` and logged by the use case. The
    message stays fixed so arithmetic details never reach the caller. Maps to 500.
    """

    error_code: str = "COMPUTATION_ERROR"

    def __init__(self, message: str = "Error calculating loan simulation", **context: Any) -> None:
        super().__init__(message, **context)
