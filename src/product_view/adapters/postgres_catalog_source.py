"""PostgreSQL implementation of CatalogSource."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_view.domain.errors import CatalogUnavailableError
from product_view.domain.product import Product
from product_view.infra.db.models.product import ProductRow
from product_view.infra.db.session import get_session
from product_view.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class PostgresCatalogSource(CatalogSource):
    """
    PostgreSQL implementation of CatalogSource.

    - Reads the whole products table in one SELECT ordered by position
    - Opens a fresh session per load (loads are rare: startup and refresh)
    - Converts ProductRow (infrastructure) to Product (domain)
    - Any SQLAlchemy failure surfaces as CatalogUnavailableError
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractContextManager[Session]] = get_session,
    ) -> None:
        """
        Initialize the source.

        Args:
            session_factory: Callable returning a session context manager
        """
        self._session_factory = session_factory

    def load(self) -> list[Product]:
        query = select(ProductRow).order_by(ProductRow.position)

        try:
            with self._session_factory() as session:
                rows = session.execute(query).scalars().all()
                products = [self._to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            raise CatalogUnavailableError(
                "Product database is unavailable", reason=type(exc).__name__
            ) from exc

        logger.info("Catalog loaded from database", extra={"product_count": len(products)})
        return products

    def _to_domain(self, row: ProductRow) -> Product:
        """
        Convert database model (ProductRow) to domain entity (Product).

        Args:
            row: SQLAlchemy ProductRow model

        Returns:
            Product domain entity
        """
        return Product(
            id=row.id,
            name=row.name,
            category=row.category,
            price=row.price,  # Already Decimal from NUMERIC column
            in_stock=row.in_stock,
        )
