"""
Test suite for ProductQueryMapper.

- Query DTO → raw mapping for the normalizer (absent params left out)
- Domain Product/PageResult → response DTOs (Decimal → str, camelCase wire names)
"""

from __future__ import annotations

from decimal import Decimal

from product_view.domain.product import PageResult, Product
from product_view.entrypoints.http.dtos.product_query import ProductQueryDTO
from product_view.entrypoints.http.mappers.product_query_mapper import ProductQueryMapper


def test_to_raw_query_keeps_wire_names() -> None:
    dto = ProductQueryDTO(keyword="mug", minPrice="10", inStock="1", pageNow="2")

    assert ProductQueryMapper.to_raw_query(dto) == {
        "keyword": "mug",
        "minPrice": "10",
        "inStock": "1",
        "pageNow": "2",
    }


def test_to_raw_query_empty() -> None:
    assert ProductQueryMapper.to_raw_query(ProductQueryDTO()) == {}


def test_to_product_response_converts_price_to_string() -> None:
    product = Product(id="7", name="Lamp", category="Home", price=Decimal("990.50"), in_stock=False)

    dto = ProductQueryMapper.to_product_response(product)

    assert dto.price == "990.50"
    assert dto.model_dump(by_alias=True) == {
        "id": "7",
        "name": "Lamp",
        "category": "Home",
        "price": "990.50",
        "inStock": False,
    }


def test_to_page_response() -> None:
    product = Product(id="1", name="Mug", category="Home", price=Decimal("250"), in_stock=True)
    result = PageResult(items=(product,), total_count=41, page_count=3, page_index=2)

    dto = ProductQueryMapper.to_page_response(result)

    assert dto.model_dump(by_alias=True) == {
        "items": [{"id": "1", "name": "Mug", "category": "Home", "price": "250", "inStock": True}],
        "pageCount": 3,
        "productCount": 41,
        "pageNow": 2,
    }
