from __future__ import annotations

from typing import Iterable

from product_view.domain.product import FilterCriteria, Product, SortDirection


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """
    Decide whether a product passes every filter (AND semantics).

    - keyword: case-insensitive substring of the name
    - category: exact, case-sensitive match
    - price: inclusive range
    - in_stock_only: product must be in stock
    """
    if criteria.keyword and criteria.keyword.lower() not in product.name.lower():
        return False
    if criteria.category and product.category != criteria.category:
        return False
    if product.price < criteria.price_min:
        return False
    if product.price > criteria.price_max:
        return False
    if criteria.in_stock_only and not product.in_stock:
        return False
    return True


def filter_products(products: Iterable[Product], criteria: FilterCriteria) -> list[Product]:
    """Return the matching products, preserving input order."""
    return [product for product in products if matches(product, criteria)]


def sort_products(products: Iterable[Product], direction: SortDirection) -> list[Product]:
    """
    Order products by price.

    Price is the only honored sort key. sorted() is stable and keeps
    stability with reverse=True, so equal prices retain input order
    in both directions.
    """
    return sorted(
        products,
        key=lambda product: product.price,
        reverse=direction == SortDirection.DESC,
    )


def filter_and_sort(products: Iterable[Product], criteria: FilterCriteria) -> list[Product]:
    return sort_products(filter_products(products, criteria), criteria.sort_direction)
