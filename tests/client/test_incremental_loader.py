"""
Test suite for IncrementalLoadController.

Verifies the window state machine:
- reset to one page on every filter change
- one page of growth per accepted trigger, clamped to the total
- triggers ignored while expanding or exhausted
- stale expansions discarded after a reset
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from product_view.client.incremental_loader import IncrementalLoadController, LoadPhase
from product_view.domain.filtering import filter_and_sort
from product_view.domain.product import FilterCriteria, Product, SortDirection


def make_products(count: int, prefix: str = "p") -> list[Product]:
    return [
        Product(
            id=f"{prefix}{i}",
            name=f"Item {i}",
            category="A" if i % 2 == 0 else "B",
            price=Decimal(i % 9),
            in_stock=True,
        )
        for i in range(count)
    ]


@pytest.fixture()
def controller() -> IncrementalLoadController:
    return IncrementalLoadController(page_size=20)


# ==============================================================================
# Window growth
# ==============================================================================


def test_window_grows_and_clamps_to_total(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(45))

    assert controller.window_size == 20
    assert controller.has_more is True
    assert controller.state is LoadPhase.IDLE

    assert controller.request_more() is True
    assert controller.window_size == 40
    assert controller.has_more is True

    assert controller.request_more() is True
    assert controller.window_size == 45
    assert controller.has_more is False
    assert controller.state is LoadPhase.EXHAUSTED

    assert controller.request_more() is False
    assert controller.window_size == 45


def test_visible_items_are_prefix(controller: IncrementalLoadController) -> None:
    items = make_products(45)
    controller.reset(items)
    controller.request_more()

    assert controller.visible_items == tuple(items[:40])


def test_repeated_requests_converge_to_full_set(controller: IncrementalLoadController) -> None:
    catalog = make_products(133)
    criteria = FilterCriteria(category="A", sort_direction=SortDirection.DESC)
    controller.apply(catalog, criteria)

    sizes = [controller.window_size]
    while controller.request_more():
        sizes.append(controller.window_size)

    assert sizes == sorted(sizes)
    assert controller.has_more is False
    assert controller.visible_items == tuple(filter_and_sort(catalog, criteria))


def test_small_set_starts_exhausted(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(5))

    assert controller.window_size == 5
    assert controller.has_more is False
    assert controller.request_more() is False


def test_empty_set(controller: IncrementalLoadController) -> None:
    snapshot = controller.reset([])

    assert snapshot.items == ()
    assert snapshot.has_more is False
    assert snapshot.page_count == 1
    assert controller.request_more() is False


def test_exact_multiple_of_page_size(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(40))

    assert controller.request_more() is True
    assert controller.window_size == 40
    assert controller.has_more is False


def test_snapshot_reports_window(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(45))

    snapshot = controller.snapshot()

    assert snapshot.window_size == 20
    assert snapshot.total_count == 45
    assert snapshot.page_count == 3
    assert snapshot.has_more is True


def test_page_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        IncrementalLoadController(page_size=0)


# ==============================================================================
# Guard flag
# ==============================================================================


def test_trigger_ignored_while_expanding(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(100))

    ticket = controller.begin_expand()

    assert ticket is not None
    assert controller.loading is True
    assert controller.state is LoadPhase.EXPANDING
    assert controller.begin_expand() is None
    assert controller.request_more() is False

    assert controller.complete_expand(ticket) is True
    assert controller.window_size == 40
    assert controller.loading is False


def test_abort_returns_to_idle_without_growth(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(100))

    ticket = controller.begin_expand()
    assert ticket is not None
    controller.abort_expand(ticket)

    assert controller.loading is False
    assert controller.window_size == 20
    assert controller.request_more() is True


# ==============================================================================
# Filter changes
# ==============================================================================


def test_filter_change_resets_window(controller: IncrementalLoadController) -> None:
    catalog = make_products(100)
    controller.apply(catalog, FilterCriteria())
    controller.request_more()
    controller.request_more()
    assert controller.window_size == 60

    controller.apply(catalog, FilterCriteria(category="A"))

    assert controller.window_size == 20
    assert controller.total_count == 50
    assert controller.has_more is True


def test_stale_expand_cannot_overwrite_reset_window(controller: IncrementalLoadController) -> None:
    catalog = make_products(100)
    controller.apply(catalog, FilterCriteria())
    ticket = controller.begin_expand()
    assert ticket is not None

    controller.apply(catalog, FilterCriteria(category="B"))

    assert controller.complete_expand(ticket) is False
    assert controller.window_size == 20
    assert controller.loading is False
    assert controller.request_more() is True
    assert controller.window_size == 40


def test_reset_clears_loading_flag(controller: IncrementalLoadController) -> None:
    controller.reset(make_products(100))
    controller.begin_expand()

    controller.reset(make_products(100, prefix="q"))

    assert controller.loading is False
    assert controller.state is LoadPhase.IDLE
