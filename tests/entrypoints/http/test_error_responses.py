"""Tests for REST error response models."""

from product_view.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_creates_error_detail_with_all_fields(self) -> None:
        detail = ErrorDetail(field="page_size", message="Must be >= 1", code="INVALID_RANGE")

        assert detail.model_dump() == {
            "field": "page_size",
            "message": "Must be >= 1",
            "code": "INVALID_RANGE",
        }

    def test_code_is_optional(self) -> None:
        assert ErrorDetail(field="page_index", message="Must be >= 1").code is None


class TestErrorResponse:
    def test_simple_error(self) -> None:
        response = ErrorResponse(detail="Catalog file not found", code="CATALOG_UNAVAILABLE")

        assert response.model_dump(exclude_none=True) == {
            "detail": "Catalog file not found",
            "code": "CATALOG_UNAVAILABLE",
        }

    def test_error_with_field_errors(self) -> None:
        response = ErrorResponse(
            detail="Validation failed",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="page_size", message="Must be >= 1")],
        )

        assert response.errors is not None
        assert response.errors[0].field == "page_size"

    def test_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert "examples" in schema
