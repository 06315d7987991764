"""REST API error response models.

Every error body shares one shape: ``detail``, ``code`` and, for
validation failures, a list of field errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation failure."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "down_payment",
                "message": "Must be a valid decimal: abc",
                "code": "INVALID_DECIMAL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Vehicle with identifier 'abc' not found",
                "code": "NOT_FOUND"
            }

        Validation error:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "term_months",
                        "message": "Input should be greater than or equal to 0",
                        "code": "greater_than_equal"
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
                {"detail": "Scenario with identifier 'bogota' not found", "code": "NOT_FOUND"},
                {
                    "detail": "down_payment must be <= vehicle price",
                    "code": "VALIDATION_ERROR",
                },
            ]
        }
    )
