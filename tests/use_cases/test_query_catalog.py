"""
Test suite for the QueryCatalog use case (discrete mode).

- normalize → filter → sort → paginate, server-side
- counts describe the post-filter set
- empty results are normal; unreadable catalogs raise
"""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from unittest.mock import Mock

import pytest

from product_view.adapters.in_memory_catalog_source import InMemoryCatalogSource
from product_view.client.browse_session import BrowseSession
from product_view.domain.errors import CatalogUnavailableError, ValidationError
from product_view.domain.filtering import filter_products
from product_view.domain.product import FilterCriteria, PageSpec, Product, SortDirection
from product_view.ports.catalog_source import CatalogSource
from product_view.use_cases.query_catalog import QueryCatalog, QueryCatalogRequest


@pytest.fixture()
def catalog() -> list[Product]:
    """45 products: the first 10 are category A and in stock, the rest are not both."""
    products = [
        Product(id=f"a{i}", name=f"Alpha {i}", category="A", price=Decimal(100 + i), in_stock=True)
        for i in range(10)
    ]
    products += [
        Product(id=f"a-out{i}", name=f"Alpha out {i}", category="A", price=Decimal(50 + i), in_stock=False)
        for i in range(5)
    ]
    products += [
        Product(id=f"b{i}", name=f"Beta {i}", category="B", price=Decimal(i * 10), in_stock=i % 2 == 0)
        for i in range(30)
    ]
    return products


@pytest.fixture()
def use_case(catalog: list[Product]) -> QueryCatalog:
    return QueryCatalog(InMemoryCatalogSource(catalog))


# ==============================================================================
# Happy Path
# ==============================================================================


def test_category_and_stock_query_first_page(use_case: QueryCatalog) -> None:
    result = use_case.query({"category": "A", "inStock": "1", "productNum": "20"})

    assert [product.id for product in result.items] == [f"a{i}" for i in range(10)]
    assert result.total_count == 10
    assert result.page_count == 1
    assert result.page_index == 1


def test_page_past_the_end_keeps_metadata(use_case: QueryCatalog) -> None:
    result = use_case.query({"category": "A", "inStock": "1", "productNum": "20", "pageNow": "2"})

    assert result.items == ()
    assert result.total_count == 10
    assert result.page_count == 1
    assert result.page_index == 2


def test_no_params_returns_first_page_of_everything(use_case: QueryCatalog, catalog: list[Product]) -> None:
    result = use_case.query({})

    assert len(result.items) == 20
    assert result.total_count == len(catalog)
    assert result.page_count == 3


def test_discrete_mode_does_not_filter_stock_by_default(use_case: QueryCatalog) -> None:
    result = use_case.query({"category": "A"})

    assert result.total_count == 15


def test_stock_default_can_be_enabled(catalog: list[Product]) -> None:
    use_case = QueryCatalog(InMemoryCatalogSource(catalog), in_stock_default=True)

    assert use_case.query({"category": "A"}).total_count == 10


def test_default_page_size_is_configurable(catalog: list[Product]) -> None:
    use_case = QueryCatalog(InMemoryCatalogSource(catalog), default_page_size=7)

    result = use_case.query({})

    assert len(result.items) == 7
    assert result.page_count == 7  # ceil(45 / 7)


def test_sorted_descending_across_pages(use_case: QueryCatalog) -> None:
    first = use_case.query({"sortBy": "desc", "productNum": "5", "pageNow": "1"})
    second = use_case.query({"sortBy": "desc", "productNum": "5", "pageNow": "2"})

    prices = [product.price for product in first.items + second.items]
    assert prices == sorted(prices, reverse=True)
    assert first.items[-1].price >= second.items[0].price


def test_union_of_pages_equals_predicate_set(use_case: QueryCatalog, catalog: list[Product]) -> None:
    raw = {"keyword": "a", "maxPrice": "200", "productNum": "4"}
    first = use_case.query(raw)

    seen: list[str] = []
    for index in range(1, first.page_count + 1):
        seen += [product.id for product in use_case.query({**raw, "pageNow": index}).items]

    expected = {
        product.id
        for product in filter_products(catalog, FilterCriteria(keyword="a", price_max=Decimal("200")))
    }
    assert len(seen) == len(set(seen))
    assert set(seen) == expected


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(),
        FilterCriteria(in_stock_only=True, sort_direction=SortDirection.DESC),
        FilterCriteria(keyword="ALPHA", category="A", price_min=Decimal("55")),
        FilterCriteria(category="B", price_max=Decimal("150"), sort_direction=SortDirection.DESC),
        FilterCriteria(keyword="nothing"),
    ],
)
def test_pages_and_window_agree_on_same_criteria(
    catalog: list[Product], criteria: FilterCriteria
) -> None:
    use_case = QueryCatalog(InMemoryCatalogSource(catalog))
    first = use_case.execute(QueryCatalogRequest(criteria=criteria, page=PageSpec(page_size=7)))

    paged: list[str] = []
    for index in range(1, first.page_count + 1):
        page = PageSpec(page_size=7, page_index=index)
        paged += [p.id for p in use_case.execute(QueryCatalogRequest(criteria=criteria, page=page)).items]

    session = BrowseSession(InMemoryCatalogSource(catalog), page_size=7)
    session.load()
    session.update_filter(**dataclasses.asdict(criteria))
    while session.request_more():
        pass

    assert session.has_more is False
    assert first.total_count == session.total_count
    assert paged == [p.id for p in session.visible_items]


# ==============================================================================
# Edge Cases
# ==============================================================================


def test_inverted_price_bounds_return_empty_result(use_case: QueryCatalog) -> None:
    result = use_case.query({"minPrice": "100", "maxPrice": "50"})

    assert result.items == ()
    assert result.total_count == 0
    assert result.page_count == 1


def test_malformed_input_degrades_to_defaults(use_case: QueryCatalog, catalog: list[Product]) -> None:
    result = use_case.query(
        {"minPrice": "abc", "maxPrice": "", "pageNow": "-3", "productNum": "zero", "sortBy": "up"}
    )

    assert result.total_count == len(catalog)
    assert result.page_index == 1
    assert len(result.items) == 20


def test_query_does_not_mutate_catalog(catalog: list[Product]) -> None:
    before = list(catalog)
    use_case = QueryCatalog(InMemoryCatalogSource(catalog))

    use_case.query({"sortBy": "desc"})

    assert catalog == before


def test_catalog_failure_propagates() -> None:
    source = Mock(spec=CatalogSource)
    source.load.side_effect = CatalogUnavailableError("Catalog file not found")

    with pytest.raises(CatalogUnavailableError, match="not found"):
        QueryCatalog(source).query({})


# ==============================================================================
# execute() with typed requests
# ==============================================================================


def test_execute_with_typed_request(use_case: QueryCatalog) -> None:
    result = use_case.execute(
        QueryCatalogRequest(criteria=FilterCriteria(category="B"), page=PageSpec(page_size=10, page_index=3))
    )

    assert result.total_count == 30
    assert result.page_count == 3
    assert len(result.items) == 10


def test_execute_rejects_invalid_page_without_loading() -> None:
    source = Mock(spec=CatalogSource)

    with pytest.raises(ValidationError):
        QueryCatalog(source).execute(
            QueryCatalogRequest(criteria=FilterCriteria(), page=PageSpec(page_size=0))
        )

    source.load.assert_not_called()


def test_execute_rejects_float_bounds() -> None:
    source = Mock(spec=CatalogSource)

    with pytest.raises(ValidationError):
        QueryCatalog(source).execute(
            QueryCatalogRequest(criteria=FilterCriteria(price_min=1.5), page=PageSpec())  # type: ignore[arg-type]
        )

    source.load.assert_not_called()
