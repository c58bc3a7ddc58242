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
                "field": "page_size",
                "message": "page_size must be >= 1",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Data source failure:
            {
                "detail": "Catalog file not found: data/items.json",
                "code": "CATALOG_UNAVAILABLE"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "page_size", "message": "page_size must be >= 1"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Catalog file not found: data/items.json",
                    "code": "CATALOG_UNAVAILABLE",
                },
                {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
            ]
        }
    )
