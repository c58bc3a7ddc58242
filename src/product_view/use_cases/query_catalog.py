from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from product_view.domain.criteria import normalize_query
from product_view.domain.filtering import filter_and_sort
from product_view.domain.pagination import paginate
from product_view.domain.product import DEFAULT_PAGE_SIZE, FilterCriteria, PageResult, PageSpec
from product_view.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryCatalogRequest:
    criteria: FilterCriteria
    page: PageSpec


class QueryCatalog:
    """
    Discrete-mode catalog query: normalize → filter → sort → paginate.

    Filtering, sorting and slicing all happen here against the full
    catalog, so total_count and page_count always describe the
    post-filter set. An empty match is a normal result, never an error.
    The catalog itself is never mutated.
    """

    def __init__(
        self,
        catalog_source: CatalogSource,
        *,
        in_stock_default: bool = False,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._catalog_source = catalog_source
        self._in_stock_default = in_stock_default
        self._default_page_size = default_page_size

    def query(self, raw_query: Mapping[str, Any]) -> PageResult:
        """
        Run a query from loosely-typed input (e.g. URL query parameters).

        Malformed values fall back to their defaults.

        Raises:
            CatalogUnavailableError: If the catalog cannot be read
        """
        normalized = normalize_query(
            raw_query,
            in_stock_default=self._in_stock_default,
            default_page_size=self._default_page_size,
        )
        return self.execute(
            QueryCatalogRequest(criteria=normalized.criteria, page=normalized.page)
        )

    def execute(self, request: QueryCatalogRequest) -> PageResult:
        """
        Run a query from an already-typed request.

        Raises:
            FilterValidationError: If criteria were built with invalid types
            PagingValidationError: If page size or index is below 1
            CatalogUnavailableError: If the catalog cannot be read
        """
        # Validate inputs (UseCase responsibility per contract)
        request.criteria.validate()
        request.page.validate()

        products = self._catalog_source.load()
        matching = filter_and_sort(products, request.criteria)
        result = paginate(matching, request.page)

        logger.debug(
            "Catalog query executed",
            extra={
                "catalog_size": len(products),
                "product_count": result.total_count,
                "page_index": result.page_index,
                "page_count": result.page_count,
            },
        )
        return result
