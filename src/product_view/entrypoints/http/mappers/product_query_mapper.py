from __future__ import annotations

from typing import Any

from product_view.domain.product import PageResult, Product
from product_view.entrypoints.http.dtos.product_query import (
    ProductPageResponseDTO,
    ProductQueryDTO,
    ProductResponseDTO,
)


class ProductQueryMapper:
    """Maps between REST DTOs and domain models for product queries."""

    @staticmethod
    def to_raw_query(dto: ProductQueryDTO) -> dict[str, Any]:
        """
        Converts query params to the raw mapping the criteria normalizer expects.

        Absent parameters are left out so the normalizer applies its defaults.

        Args:
            dto: The data transfer object containing query parameters

        Returns:
            dict keyed by wire names (keyword, minPrice, pageNow, ...)
        """
        return dto.model_dump(exclude_none=True)

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),  # Decimal → str at boundary
            in_stock=product.in_stock,
        )

    @staticmethod
    def to_page_response(result: PageResult) -> ProductPageResponseDTO:
        """
        Converts a domain page to the discrete query response.

        Args:
            result: Domain page with post-filter counts

        Returns:
            ProductPageResponseDTO: items plus pageCount/productCount/pageNow
        """
        return ProductPageResponseDTO(
            items=[ProductQueryMapper.to_product_response(product) for product in result.items],
            page_count=result.page_count,
            product_count=result.total_count,
            page_now=result.page_index,
        )
