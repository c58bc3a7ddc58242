from __future__ import annotations

from typing import Iterable

from product_view.domain.product import Product
from product_view.ports.catalog_source import CatalogSource


def distinct_categories(products: Iterable[Product]) -> list[str]:
    """Categories in order of first appearance, without duplicates."""
    return list(dict.fromkeys(product.category for product in products if product.category))


class ListCategories:
    """Category labels available for the category filter."""

    def __init__(self, catalog_source: CatalogSource) -> None:
        self._catalog_source = catalog_source

    def execute(self) -> list[str]:
        return distinct_categories(self._catalog_source.load())
