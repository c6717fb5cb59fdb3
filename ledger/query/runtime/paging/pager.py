"""Pager: page-size policy and consumer loop on top of a CursorIterator."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from ...core.endpoint import Endpoint
from ...core.query import QueryCapability
from .iterator import CursorIterator

T = TypeVar("T")

# Largest page the query service hands out per request
HORIZON_PAGE_LIMIT = 200

Consumer = Callable[[T], Any]
ErrorHandler = Callable[[BaseException], Any]


async def _call(fn: Callable[..., Any], *args: Any) -> Any:
    result = fn(*args)
    if inspect.isawaitable(result):
        return await result
    return result


class Pager:
    """Drives a consumer over a CursorIterator with bounded page sizes.

    Attributes:
        limit: Total number of records to hand to the consumer (None = all)
        page_limit: Per-request page size ceiling
    """

    def __init__(self, limit: int | None = None, page_limit: int = HORIZON_PAGE_LIMIT) -> None:
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be None or a positive integer, got {limit}")
        if page_limit < 1:
            raise ValueError(f"page_limit must be a positive integer, got {page_limit}")
        self.limit = limit
        self.page_limit = page_limit

    @classmethod
    def from_args(cls, args: Any) -> Pager:
        """Build a pager from parsed CLI arguments (``--limit``)."""
        return cls(limit=getattr(args, "limit", None))

    @property
    def horizon_page_limit(self) -> int:
        """Page size to request: the total limit, capped at the ceiling."""
        if self.limit is None:
            return self.page_limit
        return min(self.limit, self.page_limit)

    def bound(self, endpoint: Endpoint) -> Endpoint:
        """Return ``endpoint`` requesting ``horizon_page_limit`` records per page."""
        if not endpoint.supports(QueryCapability.LIMIT):
            return endpoint
        return endpoint.with_limit(self.horizon_page_limit)

    async def paginate(
        self,
        iterator: CursorIterator[T],
        consumer: Consumer[T],
        on_error: ErrorHandler | None = None,
    ) -> int:
        """Feed every record of ``iterator`` to ``consumer``.

        ``consumer`` and ``on_error`` may be plain functions or coroutine
        functions.

        Args:
            iterator: Fresh iterator to drain
            consumer: Called once per record, in server order
            on_error: Called once with the fetch error before it is re-raised

        Returns:
            Number of records handed to the consumer

        Raises:
            LedgerQueryError: The first page-fetch error; the consumer is
                never called after it
        """
        if not iterator.started:
            iterator.cap_page_size(self.page_limit)

        consumed = 0
        while self.limit is None or consumed < self.limit:
            try:
                record = await iterator.__anext__()
            except StopAsyncIteration:
                break
            except Exception as e:
                if on_error is not None:
                    await _call(on_error, e)
                raise
            await _call(consumer, record)
            consumed += 1
        return consumed
