from __future__ import annotations

from abc import ABC, abstractmethod

from product_view.domain.product import Product


class CatalogSource(ABC):
    """
    Port for reading the product catalog.

    The catalog is an ordered, read-only record set. The engine never
    writes through this port, so implementations may share the returned
    products between callers.

    Contract:
        - Products are returned in a stable source order
        - Failure to read the backing store raises CatalogUnavailableError
    """

    @abstractmethod
    def load(self) -> list[Product]:
        """
        Read every product in the catalog.

        Returns:
            Products in source order

        Raises:
            CatalogUnavailableError: If the backing store cannot be read
        """
        ...
