from __future__ import annotations

import logging
import threading

from product_view.domain.product import Product
from product_view.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class CachedCatalogSource(CatalogSource):
    """
    Reads the wrapped source once per process and serves the same snapshot.

    - The first successful load is kept until refresh()
    - A failed load is not cached; the next call retries the source
    - The lock only serializes loads; reads of a loaded snapshot do not block
    """

    def __init__(self, source: CatalogSource) -> None:
        self._source = source
        self._snapshot: tuple[Product, ...] | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def load(self) -> list[Product]:
        return list(self.snapshot())

    def snapshot(self) -> tuple[Product, ...]:
        """The immutable, shared catalog record set."""
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._lock:
            if self._snapshot is None:
                self._snapshot = tuple(self._source.load())
            return self._snapshot

    def refresh(self) -> tuple[Product, ...]:
        """Discard the snapshot and read the source again."""
        with self._lock:
            products = tuple(self._source.load())
            self._snapshot = products

        logger.info("Catalog refreshed", extra={"product_count": len(products)})
        return products
