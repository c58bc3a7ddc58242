from pydantic import BaseModel, ConfigDict, Field


class ProductResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    category: str
    price: str
    in_stock: bool = Field(alias="inStock")


class ProductQueryDTO(BaseModel):
    """
    Query parameters for the discrete product query.

    Every field is an optional string: malformed values are normalized to
    defaults by the domain, so the HTTP layer never rejects a query.
    Field names are the wire names.
    """

    keyword: str | None = Field(
        default=None,
        description="Case-insensitive substring of the product name",
        examples=["phone"],
    )
    category: str | None = Field(
        default=None,
        description="Exact category label",
        examples=["Electronics"],
    )
    minPrice: str | None = Field(
        default=None,
        description="Minimum price (inclusive, default 0)",
        examples=["100"],
    )
    maxPrice: str | None = Field(
        default=None,
        description="Maximum price (inclusive, default 99999)",
        examples=["500"],
    )
    inStock: str | None = Field(
        default=None,
        description="1 to return in-stock products only",
        examples=["1"],
    )
    sortBy: str | None = Field(
        default=None,
        description="Price order: asc (default) or desc",
        examples=["asc"],
    )
    pageNow: str | None = Field(
        default=None,
        description="1-based page index (default 1)",
        examples=["1"],
    )
    productNum: str | None = Field(
        default=None,
        description="Products per page (default 20)",
        examples=["20"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "keyword": "phone",
                "category": "Electronics",
                "minPrice": "100",
                "maxPrice": "500",
                "inStock": "1",
                "sortBy": "desc",
                "pageNow": "1",
                "productNum": "20",
            }
        }
    )


class ProductPageResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: list[ProductResponseDTO]
    page_count: int = Field(alias="pageCount")
    product_count: int = Field(alias="productCount")
    page_now: int = Field(alias="pageNow")


class CategoriesResponseDTO(BaseModel):
    categories: list[str]
