from __future__ import annotations

from product_view.domain.product import Product
from product_view.ports.catalog_source import CatalogSource


class InMemoryCatalogSource(CatalogSource):
    """
    Canonical contract implementation for tests.

    - Stores products in insertion order
    - Returns a copy so callers cannot mutate the backing list
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = list(products)

    def load(self) -> list[Product]:
        return list(self._products)
