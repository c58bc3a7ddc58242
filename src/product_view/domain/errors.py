"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the exception handlers
and to session state by the client-side controllers.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated to
    an HTTP response or a presentation-layer error state.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Typed request violates a domain invariant.

    Raw query input never produces this error: the criteria normalizer
    degrades malformed values to defaults. It is raised only when a caller
    hands the query service an already-typed request that is invalid.

    Examples:
        - page_size < 1
        - float price bounds instead of Decimal

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "page_size", "message": "Must be >= 1"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class CatalogUnavailableError(DomainError):
    """The catalog data source could not be read.

    Fatal to the query that triggered the load. Distinct from an empty
    result, which is a normal outcome.

    Examples:
        - Catalog file missing or not valid JSON
        - A record without a price
        - Database unreachable

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "CATALOG_UNAVAILABLE"

    def __init__(self, message: str = "Product catalog is unavailable", **context: Any) -> None:
        super().__init__(message, **context)
