from fastapi import APIRouter, Depends

from product_view.entrypoints.http.dependencies import (
    get_list_categories_use_case,
    get_list_products_use_case,
    get_query_catalog_use_case,
)
from product_view.entrypoints.http.dtos.product_query import (
    CategoriesResponseDTO,
    ProductPageResponseDTO,
    ProductQueryDTO,
    ProductResponseDTO,
)
from product_view.entrypoints.http.error_responses import ErrorResponse
from product_view.entrypoints.http.mappers.product_query_mapper import ProductQueryMapper
from product_view.use_cases.list_categories import ListCategories
from product_view.use_cases.list_products import ListProducts
from product_view.use_cases.query_catalog import QueryCatalog


router = APIRouter(tags=["Products"])

CATALOG_UNAVAILABLE_RESPONSE = {
    503: {
        "model": ErrorResponse,
        "description": "Catalog data source unavailable",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Catalog file not found: data/items.json",
                    "code": "CATALOG_UNAVAILABLE",
                }
            }
        },
    },
}


@router.get(
    "/products",
    response_model=list[ProductResponseDTO],
    summary="List the whole catalog",
    description="Every product in catalog order, unfiltered. Used by incremental (infinite scroll) clients.",
    responses=CATALOG_UNAVAILABLE_RESPONSE,
)
def list_products(
    use_case: ListProducts = Depends(get_list_products_use_case),
) -> list[ProductResponseDTO]:
    return [ProductQueryMapper.to_product_response(product) for product in use_case.execute()]


@router.get(
    "/products-filter",
    response_model=ProductPageResponseDTO,
    summary="Query one page of products",
    description="""
    Filter, sort and paginate the catalog server-side and return one page.

    ## Filters
    - All filters use AND semantics
    - keyword: case-insensitive substring of the name
    - category: exact match
    - minPrice/maxPrice: inclusive range (defaults 0 / 99999)
    - inStock=1: in-stock products only

    ## Sorting
    - sortBy=asc|desc, by price; ties keep catalog order

    ## Pagination
    - pageNow is 1-based, productNum is the page size (default 20)
    - A page past the last one returns an empty item list

    Malformed parameters fall back to their defaults; this endpoint does not return 422.

    ## Example
    ```
    GET /v1/products-filter?category=Electronics&inStock=1&sortBy=desc&pageNow=2
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "items": [
                            {
                                "id": "7",
                                "name": "Wireless Headphones",
                                "category": "Electronics",
                                "price": "1290",
                                "inStock": True,
                            }
                        ],
                        "pageCount": 3,
                        "productCount": 42,
                        "pageNow": 2,
                    }
                }
            },
        },
        **CATALOG_UNAVAILABLE_RESPONSE,
    },
)
def query_products(
    query: ProductQueryDTO = Depends(),
    use_case: QueryCatalog = Depends(get_query_catalog_use_case),
) -> ProductPageResponseDTO:
    """Query endpoint following parse → execute → map → return pattern."""
    # 1. Map to raw domain query
    raw_query = ProductQueryMapper.to_raw_query(query)

    # 2. Execute use case (normalizes internally)
    result = use_case.query(raw_query)

    # 3. Map to response
    return ProductQueryMapper.to_page_response(result)


@router.get(
    "/categories",
    response_model=CategoriesResponseDTO,
    summary="List category labels",
    responses=CATALOG_UNAVAILABLE_RESPONSE,
)
def list_categories(
    use_case: ListCategories = Depends(get_list_categories_use_case),
) -> CategoriesResponseDTO:
    return CategoriesResponseDTO(categories=use_case.execute())
