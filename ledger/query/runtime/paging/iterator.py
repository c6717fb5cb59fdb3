"""Cursor iterator: lazy, page-by-page walk over a collection.

Architecture:
    The iterator is an explicit state machine::

        READY --fetch ok, records--> BUFFERED --queue drained, full page--> READY
        READY --fetch ok, empty----> EXHAUSTED
        BUFFERED --queue drained, short page--> EXHAUSTED
        READY --fetch failed-------> FAILED

    A pull in READY awaits exactly one page fetch. Records are then handed
    out one at a time from the buffer. A short page (fewer records than
    requested) is the end-of-data signal, so no trailing empty fetch is
    issued.

Design Decisions:
    - Finite and not restartable: the iterator owns a private descriptor
      whose cursor only moves forward; build a new one to start over
    - The failing pull raises the fetch error once, every later pull just
      ends iteration
    - No prefetch: the next page is requested only when the consumer pulls
      past the end of the buffer
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from time import perf_counter
from typing import Generic, TypeVar

from ...core.endpoint import Endpoint
from ...core.query import QueryCapability
from ..rest.runner import PageFetcher
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete

T = TypeVar("T")


class IteratorState(str, Enum):
    """Lifecycle state of a CursorIterator."""

    READY = "ready"
    BUFFERED = "buffered"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (IteratorState.EXHAUSTED, IteratorState.FAILED)


class CursorIterator(Generic[T]):
    """Async iterator over every record of a paginated collection.

    Example:
        >>> iterator = CursorIterator(fetcher, account_transactions("GA...").with_limit(50))
        >>> async for txn in iterator:
        ...     print(txn.id)
    """

    def __init__(self, fetcher: PageFetcher[T], endpoint: Endpoint) -> None:
        """Initialize cursor iterator.

        Args:
            fetcher: Fetches one page per call
            endpoint: Descriptor of the first page; copied, never shared

        Raises:
            ValueError: If the endpoint cannot be paged by cursor
        """
        if not endpoint.supports(QueryCapability.CURSOR):
            raise ValueError(f"Endpoint {endpoint.spec.id!r} is not cursor-paginated")
        self._fetcher = fetcher
        self._endpoint = endpoint
        self._state = IteratorState.READY
        self._buffer: deque[T] = deque()
        self._last_page = False
        self._pages = 0
        self._yielded = 0

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def endpoint(self) -> Endpoint:
        """Descriptor of the next page to fetch (cursor already advanced)."""
        return self._endpoint

    @property
    def pages_fetched(self) -> int:
        return self._pages

    @property
    def started(self) -> bool:
        return self._pages > 0 or self._state is not IteratorState.READY

    def cap_page_size(self, ceiling: int) -> None:
        """Clamp the per-request limit to ``ceiling`` before the first fetch.

        An unset limit becomes ``ceiling``. Endpoints without a limit
        capability are left alone.

        Raises:
            RuntimeError: If iteration has already started
        """
        if self.started:
            raise RuntimeError("Cannot change the page size of a started iterator")
        if ceiling < 1:
            raise ValueError(f"Page size ceiling must be positive, got {ceiling}")
        if not self._endpoint.supports(QueryCapability.LIMIT):
            return
        current = self._endpoint.query.limit
        if current is None or current > ceiling:
            self._endpoint = self._endpoint.with_limit(ceiling)

    def __aiter__(self) -> CursorIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._state is IteratorState.READY:
            await self._fetch_next_page()

        if self._state is IteratorState.BUFFERED:
            record = self._buffer.popleft()
            self._yielded += 1
            if not self._buffer:
                if self._last_page:
                    self._finish(IteratorState.EXHAUSTED)
                else:
                    self._state = IteratorState.READY
            return record

        raise StopAsyncIteration

    async def collect(self) -> list[T]:
        """Drain the iterator into a list, raising the first fetch error."""
        return [record async for record in self]

    async def _fetch_next_page(self) -> None:
        page_index = self._pages
        start = perf_counter()
        try:
            page = await self._fetcher.fetch(self._endpoint)
        except Exception as e:
            log_page_error(
                endpoint_id=self._endpoint.spec.id,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            self._finish(IteratorState.FAILED)
            raise

        self._pages += 1
        log_page_fetched(
            endpoint_id=self._endpoint.spec.id,
            page_index=page_index,
            records=len(page.records),
            next_cursor=page.next_cursor,
            latency_ms=(perf_counter() - start) * 1000.0,
        )

        if not page.records:
            self._finish(IteratorState.EXHAUSTED)
            return

        self._buffer.extend(page.records)
        if page.next_cursor is None:
            self._last_page = True
        else:
            self._endpoint = self._endpoint.with_cursor(page.next_cursor)
        self._state = IteratorState.BUFFERED

    def _finish(self, state: IteratorState) -> None:
        self._state = state
        self._buffer.clear()
        log_pagination_complete(
            endpoint_id=self._endpoint.spec.id,
            pages=self._pages,
            records=self._yielded,
            state=state.value,
        )
