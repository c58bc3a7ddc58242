from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from product_view.domain.errors import ValidationError


DEFAULT_PRICE_MIN = Decimal("0")
DEFAULT_PRICE_MAX = Decimal("99999")
DEFAULT_PAGE_SIZE = 20


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category: str
    price: Decimal
    in_stock: bool


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Fully-populated filter and sort specification.

    Empty keyword/category mean "no constraint". Price bounds are inclusive.
    Inverted bounds are allowed and simply match nothing.
    """

    keyword: str = ""
    category: str = ""
    price_min: Decimal = DEFAULT_PRICE_MIN
    price_max: Decimal = DEFAULT_PRICE_MAX
    in_stock_only: bool = False
    sort_direction: SortDirection = SortDirection.ASC

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal (no floats past the boundary)"
            )
        if not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal (no floats past the boundary)"
            )
        if not isinstance(self.sort_direction, SortDirection):
            raise FilterValidationError("sort_direction must be a SortDirection")


@dataclass(frozen=True, slots=True)
class PageSpec:
    page_size: int = DEFAULT_PAGE_SIZE
    page_index: int = 1

    @property
    def offset(self) -> int:
        return (self.page_index - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page_size < 1:
            raise PagingValidationError("page_size must be >= 1")
        if self.page_index < 1:
            raise PagingValidationError("page_index must be >= 1")


@dataclass(frozen=True, slots=True)
class PageResult:
    """One discrete page plus the metadata of the whole filtered set."""

    items: tuple[Product, ...]
    total_count: int
    page_count: int
    page_index: int


@dataclass(frozen=True, slots=True)
class WindowResult:
    """The visible prefix of the filtered set in incremental mode."""

    items: tuple[Product, ...]
    total_count: int
    page_count: int
    window_size: int
    has_more: bool
