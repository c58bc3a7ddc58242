"""JSON file implementation of CatalogSource."""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from product_view.domain.errors import CatalogUnavailableError
from product_view.domain.product import Product
from product_view.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class JsonFileCatalogSource(CatalogSource):
    """
    Reads the catalog from a JSON array of product records.

    Record format (extra keys such as "image" are ignored):
        {"id": 1, "name": "...", "price": 120, "category": "...", "inStock": true}

    - Ids are stored as strings regardless of their JSON type
    - Prices are parsed through str() so floats never reach the domain
    - Any unreadable file or malformed record fails the whole load
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> list[Product]:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as exc:
            raise CatalogUnavailableError(
                f"Catalog file not found: {self._path}", path=str(self._path)
            ) from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogUnavailableError(
                f"Catalog file could not be read: {exc}", path=str(self._path)
            ) from exc

        if not isinstance(raw, list):
            raise CatalogUnavailableError(
                "Catalog file must contain a JSON array of products", path=str(self._path)
            )

        products = []
        for index, record in enumerate(raw):
            try:
                products.append(self._to_domain(record))
            except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
                raise CatalogUnavailableError(
                    f"Malformed product record at index {index}",
                    path=str(self._path),
                    index=index,
                ) from exc

        logger.info(
            "Catalog loaded from file",
            extra={"path": str(self._path), "product_count": len(products)},
        )
        return products

    def _to_domain(self, record: dict[str, Any]) -> Product:
        price = Decimal(str(record["price"]))
        if not price.is_finite() or price < 0:
            raise ValueError(f"invalid price: {record['price']!r}")

        in_stock = record.get("inStock", False)
        if not isinstance(in_stock, bool):
            raise TypeError(f"inStock must be a boolean: {in_stock!r}")

        return Product(
            id=str(record["id"]),
            name=str(record["name"]),
            category=str(record.get("category") or ""),
            price=price,
            in_stock=in_stock,
        )
