"""
Dependency injection for FastAPI routes.

Key principle: the catalog is read once per process and shared, so the
catalog source is a cached singleton. Use cases are cheap and built
per request on top of it.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from product_view.adapters.cached_catalog_source import CachedCatalogSource
from product_view.adapters.json_file_catalog_source import JsonFileCatalogSource
from product_view.adapters.postgres_catalog_source import PostgresCatalogSource
from product_view.infra.config import Settings, get_settings
from product_view.ports.catalog_source import CatalogSource
from product_view.use_cases.list_categories import ListCategories
from product_view.use_cases.list_products import ListProducts
from product_view.use_cases.query_catalog import QueryCatalog


def build_catalog_source(settings: Settings) -> CatalogSource:
    """
    Select the backing catalog source from settings.

    Args:
        settings: Application settings (catalog_backend, catalog_path)

    Returns:
        CatalogSource: Uncached source for the configured backend
    """
    if settings.catalog_backend == "postgres":
        return PostgresCatalogSource()
    return JsonFileCatalogSource(settings.catalog_path)


@lru_cache
def get_catalog_source() -> CachedCatalogSource:
    """
    Process-wide catalog, read lazily on first use.

    The first request that needs products triggers the load; later
    requests share the same immutable snapshot.
    """
    return CachedCatalogSource(build_catalog_source(get_settings()))


def get_query_catalog_use_case(
    catalog: CatalogSource = Depends(get_catalog_source),
    settings: Settings = Depends(get_settings),
) -> QueryCatalog:
    """
    Factory function that returns a configured QueryCatalog use case.

    Args:
        catalog: Shared catalog source (injected by FastAPI)
        settings: Application settings (injected by FastAPI)

    Returns:
        QueryCatalog: Use case with the discrete-mode stock default
    """
    return QueryCatalog(
        catalog,
        in_stock_default=settings.query_in_stock_default,
        default_page_size=settings.default_page_size,
    )


def get_list_products_use_case(
    catalog: CatalogSource = Depends(get_catalog_source),
) -> ListProducts:
    return ListProducts(catalog)


def get_list_categories_use_case(
    catalog: CatalogSource = Depends(get_catalog_source),
) -> ListCategories:
    return ListCategories(catalog)
