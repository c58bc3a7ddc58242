from __future__ import annotations

from product_view.domain.product import Product
from product_view.ports.catalog_source import CatalogSource


class ListProducts:
    """Return the whole catalog in source order, unfiltered."""

    def __init__(self, catalog_source: CatalogSource) -> None:
        self._catalog_source = catalog_source

    def execute(self) -> list[Product]:
        return self._catalog_source.load()
