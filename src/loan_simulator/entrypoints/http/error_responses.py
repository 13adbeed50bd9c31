"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "loan_amount",
                "message": "String should match pattern '^-?[0-9]+(\\.[0-9]{1,2})?$'",
                "code": "string_pattern_mismatch",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Business rule error:
            {
                "detail": "Payment term must be greater than zero",
                "code": "VALIDATION_ERROR"
            }

        Malformed request:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "birth_date",
                        "message": "Field required",
                        "code": "missing"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Birth date cannot be in the future", "code": "VALIDATION_ERROR"},
                {"detail": "Error calculating loan simulation", "code": "COMPUTATION_ERROR"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "birth_date",
                            "message": "Field required",
                            "code": "missing",
                        }
                    ],
                },
            ]
        }
    )
