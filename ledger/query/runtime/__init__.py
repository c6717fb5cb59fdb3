"""Runtime: wire codec, transport, page fetching and pagination."""

from .paging import HORIZON_PAGE_LIMIT, CursorIterator, IteratorState, Pager
from .rest import (
    EndpointCodec,
    HTTPTransport,
    ModelAdapter,
    Page,
    PageFetcher,
    RawResponse,
    RecordsAdapter,
    ResponseAdapter,
    RestRunner,
    Transport,
    WireRequest,
)

__all__ = [
    "CursorIterator",
    "EndpointCodec",
    "HORIZON_PAGE_LIMIT",
    "HTTPTransport",
    "IteratorState",
    "ModelAdapter",
    "Page",
    "PageFetcher",
    "Pager",
    "RawResponse",
    "RecordsAdapter",
    "ResponseAdapter",
    "RestRunner",
    "Transport",
    "WireRequest",
]
