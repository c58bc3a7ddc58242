"""Criteria normalization.

Turns loosely-typed query input (URL query strings, form state) into a
fully-populated FilterCriteria and PageSpec. Malformed values degrade to
their defaults, nothing in here raises on bad input.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from product_view.domain.product import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_PRICE_MAX,
    DEFAULT_PRICE_MIN,
    FilterCriteria,
    PageSpec,
    SortDirection,
)


TRUE_FLAGS = frozenset({"1", "true", "on", "yes", "checked"})
FALSE_FLAGS = frozenset({"0", "false", "off", "no", ""})

# Page numbers and sizes wider than this many digits fall back to the default.
MAX_INT_DIGITS = 15


@dataclass(frozen=True, slots=True)
class CatalogQuery:
    criteria: FilterCriteria
    page: PageSpec


def normalize_query(
    raw: Mapping[str, Any],
    *,
    in_stock_default: bool = False,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> CatalogQuery:
    """
    Normalize a raw query mapping.

    Recognised keys: keyword, category, minPrice, maxPrice, inStock,
    sortBy, pageNow, productNum. Unknown keys are ignored.

    Args:
        raw: String-keyed mapping, any value may be absent or malformed
        in_stock_default: Stock-only value used when inStock is absent
        default_page_size: Page size used when productNum is absent

    Returns:
        CatalogQuery with criteria and page spec fully populated
    """
    return CatalogQuery(
        criteria=normalize_criteria(raw, in_stock_default=in_stock_default),
        page=normalize_page(raw, default_page_size=default_page_size),
    )


def normalize_criteria(raw: Mapping[str, Any], *, in_stock_default: bool = False) -> FilterCriteria:
    return FilterCriteria(
        keyword=_to_text(raw.get("keyword")),
        category=_to_text(raw.get("category")),
        price_min=_to_decimal(raw.get("minPrice"), DEFAULT_PRICE_MIN),
        price_max=_to_decimal(raw.get("maxPrice"), DEFAULT_PRICE_MAX),
        in_stock_only=_to_flag(raw.get("inStock"), in_stock_default),
        sort_direction=_to_direction(raw.get("sortBy")),
    )


def normalize_page(raw: Mapping[str, Any], *, default_page_size: int = DEFAULT_PAGE_SIZE) -> PageSpec:
    # Lower clamp only; there is no maximum page size.
    return PageSpec(
        page_size=max(1, _to_int(raw.get("productNum"), default_page_size)),
        page_index=max(1, _to_int(raw.get("pageNow"), 1)),
    )


def _first(value: Any) -> Any:
    # Repeated query params arrive as lists; the first occurrence wins.
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _to_text(value: Any) -> str:
    value = _first(value)
    if value is None:
        return ""
    return str(value)


def _to_decimal(value: Any, default: Decimal) -> Decimal:
    value = _first(value)
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, (float, str)):
        text = str(value).strip()
        if not text:
            return default
        try:
            number = Decimal(text)
        except InvalidOperation:
            return default
    else:
        return default

    if not number.is_finite():
        return default
    return number


def _to_int(value: Any, default: int) -> int:
    number = _to_decimal(value, Decimal(default))
    # Bound the exponent before int() so "1e2000000" cannot expand into
    # millions of digits.
    if number.adjusted() >= MAX_INT_DIGITS:
        return default
    return int(number)


def _to_flag(value: Any, default: bool) -> bool:
    value = _first(value)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value == 1

    text = str(value).strip().lower()
    if text in TRUE_FLAGS:
        return True
    if text in FALSE_FLAGS:
        return False

    # Numeric text ("1.0", "01") follows the same rule as numbers.
    try:
        number = Decimal(text)
    except InvalidOperation:
        return default
    if not number.is_finite():
        return default
    return number == 1


def _to_direction(value: Any) -> SortDirection:
    value = _first(value)
    if value == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC
