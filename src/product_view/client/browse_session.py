"""Browse session: the owned context behind an infinite-scroll product view.

One session per user session. It holds the loaded catalog, the current
filter criteria and the incremental load controller, and is the only
thing a presentation layer talks to.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any

from product_view.client.incremental_loader import IncrementalLoadController
from product_view.domain.errors import CatalogUnavailableError
from product_view.domain.product import DEFAULT_PAGE_SIZE, FilterCriteria, Product
from product_view.ports.catalog_source import CatalogSource
from product_view.use_cases.list_categories import distinct_categories

logger = logging.getLogger(__name__)

FILTER_FIELDS = frozenset(field.name for field in dataclasses.fields(FilterCriteria))


class CatalogStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class BrowseSession:
    def __init__(
        self,
        catalog_source: CatalogSource,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        in_stock_default: bool = True,
    ) -> None:
        self._catalog_source = catalog_source
        self._in_stock_default = in_stock_default
        self._controller = IncrementalLoadController(page_size=page_size)
        self._criteria = self.default_criteria()
        self._products: tuple[Product, ...] = ()
        self._status = CatalogStatus.IDLE
        self._error: str | None = None

    def default_criteria(self) -> FilterCriteria:
        return FilterCriteria(in_stock_only=self._in_stock_default)

    # ------------------------------------------------------------------
    # Catalog lifecycle
    # ------------------------------------------------------------------

    def load(self) -> CatalogStatus:
        """
        Fetch the catalog and apply the current criteria.

        A source failure is recorded as an ERROR status with its message
        instead of propagating, so the presentation layer can tell
        "catalog unavailable" apart from "nothing matches".
        """
        self._status = CatalogStatus.LOADING
        self._error = None

        try:
            products = self._catalog_source.load()
        except CatalogUnavailableError as exc:
            logger.warning("Catalog load failed", extra={"error": exc.message})
            self._status = CatalogStatus.ERROR
            self._error = exc.message
            return self._status

        self._products = tuple(products)
        self._status = CatalogStatus.READY
        self._controller.apply(self._products, self._criteria)
        return self._status

    def ensure_loaded(self) -> CatalogStatus:
        """Load unless a catalog is already loaded."""
        if self._status is not CatalogStatus.READY:
            return self.load()
        return self._status

    def refresh(self) -> CatalogStatus:
        return self.load()

    # ------------------------------------------------------------------
    # Filter events
    # ------------------------------------------------------------------

    def update_filter(self, **changes: Any) -> FilterCriteria:
        """
        Replace one or more criteria fields and reset the window.

        Raises:
            ValueError: If a field name is not a FilterCriteria field
            FilterValidationError: If a value has the wrong type
        """
        unknown = set(changes) - FILTER_FIELDS
        if unknown:
            raise ValueError(f"Unknown filter field(s): {', '.join(sorted(unknown))}")

        criteria = dataclasses.replace(self._criteria, **changes)
        criteria.validate()
        self._set_criteria(criteria)
        return criteria

    def clear_filters(self) -> FilterCriteria:
        self._set_criteria(self.default_criteria())
        return self._criteria

    def _set_criteria(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria
        # Resetting the controller before any later trigger is honored
        # invalidates expands begun under the old criteria.
        self._controller.apply(self._products, criteria)

    # ------------------------------------------------------------------
    # Scroll events
    # ------------------------------------------------------------------

    def request_more(self) -> bool:
        if self._status is not CatalogStatus.READY:
            return False
        return self._controller.request_more()

    # ------------------------------------------------------------------
    # Presentation boundary
    # ------------------------------------------------------------------

    @property
    def status(self) -> CatalogStatus:
        return self._status

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def categories(self) -> list[str]:
        return distinct_categories(self._products)

    @property
    def controller(self) -> IncrementalLoadController:
        return self._controller

    @property
    def visible_items(self) -> tuple[Product, ...]:
        return self._controller.visible_items

    @property
    def has_more(self) -> bool:
        return self._controller.has_more

    @property
    def loading(self) -> bool:
        return self._controller.loading

    @property
    def total_count(self) -> int:
        return self._controller.total_count

    @property
    def is_empty(self) -> bool:
        """True only when the catalog loaded and nothing matches the criteria."""
        return self._status is CatalogStatus.READY and self._controller.total_count == 0
