"""Discrete-mode page loader with last-request-wins sequencing.

Rapid filter changes can issue several page requests before the first
one answers. Each request gets a sequence number and only the response
to the newest request is applied; older responses are dropped whether
they succeed or fail.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping

from product_view.domain.errors import DomainError
from product_view.domain.product import PageResult

logger = logging.getLogger(__name__)

PageFetcher = Callable[[Mapping[str, Any]], Awaitable[PageResult]]


class DiscretePageLoader:
    def __init__(self, fetch: PageFetcher) -> None:
        self._fetch = fetch
        self._sequence = 0
        self._result: PageResult | None = None
        self._error: str | None = None
        self._loading = False

    @property
    def result(self) -> PageResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def loading(self) -> bool:
        return self._loading

    async def load(self, raw_query: Mapping[str, Any]) -> bool:
        """
        Fetch one page and apply it if no newer request was issued meanwhile.

        Domain errors (e.g. catalog unavailable) are recorded in `error`
        rather than raised. Anything else propagates.

        Returns:
            True if this request's outcome was applied, False if it was superseded
        """
        self._sequence += 1
        sequence = self._sequence
        self._loading = True

        try:
            result = await self._fetch(raw_query)
        except DomainError as exc:
            if sequence != self._sequence:
                logger.debug("Dropping superseded page error", extra={"sequence": sequence})
                return False
            self._result = None
            self._error = exc.message
            self._loading = False
            return True
        except BaseException:
            if sequence == self._sequence:
                self._loading = False
            raise

        if sequence != self._sequence:
            logger.debug("Dropping superseded page response", extra={"sequence": sequence})
            return False

        self._result = result
        self._error = None
        self._loading = False
        return True
