from __future__ import annotations

from typing import Sequence

from product_view.domain.product import PageResult, PageSpec, Product, WindowResult


def page_count(total: int, page_size: int) -> int:
    """ceil(total / page_size), never less than 1 (an empty set still has one page)."""
    return max(1, -(-total // page_size))


def paginate(items: Sequence[Product], page: PageSpec) -> PageResult:
    """
    Discrete mode: slice one page out of the filtered+sorted sequence.

    A page index past the last page yields an empty slice, not an error.
    """
    start = page.offset
    end = start + page.page_size

    return PageResult(
        items=tuple(items[start:end]),
        total_count=len(items),
        page_count=page_count(len(items), page.page_size),
        page_index=page.page_index,
    )


def window(items: Sequence[Product], window_size: int, page_size: int) -> WindowResult:
    """
    Incremental mode: the visible prefix of the filtered+sorted sequence.

    The window always starts at 0. It grows; it never pages through
    disjoint ranges.
    """
    total = len(items)

    return WindowResult(
        items=tuple(items[:window_size]),
        total_count=total,
        page_count=page_count(total, page_size),
        window_size=window_size,
        has_more=window_size < total,
    )
