"""Incremental (infinite scroll) load controller.

Holds a growing window over the filtered+sorted product list. The window
grows one page per proximity trigger and is reset to one page whenever
the filter criteria change.

Transitions:
    reset / apply           -> IDLE (or EXHAUSTED), window = one page
    request_more from IDLE  -> EXPANDING -> IDLE/EXHAUSTED, window += one page
    request_more otherwise  -> ignored

The expand step is split into begin_expand()/complete_expand() so the
window can also be grown from a remote page fetch. Every reset bumps a
generation counter; an expand that began before the reset is stale and
its completion is discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from product_view.domain.filtering import filter_and_sort
from product_view.domain.pagination import window
from product_view.domain.product import DEFAULT_PAGE_SIZE, FilterCriteria, Product, WindowResult

logger = logging.getLogger(__name__)


class LoadPhase(str, Enum):
    IDLE = "idle"
    EXPANDING = "expanding"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class ExpandTicket:
    generation: int
    window_size: int


class IncrementalLoadController:
    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._page_size = page_size
        self._items: tuple[Product, ...] = ()
        self._window_size = 0
        self._loading = False
        self._generation = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def total_count(self) -> int:
        return len(self._items)

    @property
    def has_more(self) -> bool:
        return self._window_size < len(self._items)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def state(self) -> LoadPhase:
        if self._loading:
            return LoadPhase.EXPANDING
        if not self.has_more:
            return LoadPhase.EXHAUSTED
        return LoadPhase.IDLE

    @property
    def visible_items(self) -> tuple[Product, ...]:
        return self._items[: self._window_size]

    def snapshot(self) -> WindowResult:
        return window(self._items, self._window_size, self._page_size)

    def apply(self, products: Iterable[Product], criteria: FilterCriteria) -> WindowResult:
        """Filter and sort the catalog for new criteria, then reset the window."""
        return self.reset(filter_and_sort(products, criteria))

    def reset(self, items: Sequence[Product]) -> WindowResult:
        """
        Replace the filtered+sorted sequence and shrink the window to one page.

        Any expand still in flight becomes stale.
        """
        self._items = tuple(items)
        self._window_size = min(self._page_size, len(self._items))
        self._loading = False
        self._generation += 1
        return self.snapshot()

    def request_more(self) -> bool:
        """
        Proximity trigger: grow the window by one page.

        Returns:
            True if the window grew, False if the trigger was ignored
        """
        ticket = self.begin_expand()
        if ticket is None:
            return False
        return self.complete_expand(ticket)

    def begin_expand(self) -> ExpandTicket | None:
        if self._loading or not self.has_more:
            logger.debug(
                "Load-more trigger ignored",
                extra={"loading": self._loading, "has_more": self.has_more},
            )
            return None

        self._loading = True
        target = min(self._window_size + self._page_size, len(self._items))
        return ExpandTicket(generation=self._generation, window_size=target)

    def complete_expand(self, ticket: ExpandTicket) -> bool:
        if ticket.generation != self._generation:
            logger.debug("Discarding stale window expansion", extra={"window_size": ticket.window_size})
            return False

        self._window_size = ticket.window_size
        self._loading = False
        return True

    def abort_expand(self, ticket: ExpandTicket) -> None:
        """Return to IDLE without growing, e.g. after a failed remote fetch."""
        if ticket.generation == self._generation:
            self._loading = False
