"""REST runtime abstractions."""

from .codec import EndpointCodec, build_query_string, normalize_host
from .http_client import HTTPTransport
from .runner import (
    ModelAdapter,
    Page,
    PageFetcher,
    RecordsAdapter,
    ResponseAdapter,
    RestRunner,
    decode_body,
)
from .transport import RawResponse, Transport, WireRequest

__all__ = [
    "EndpointCodec",
    "HTTPTransport",
    "ModelAdapter",
    "Page",
    "PageFetcher",
    "RawResponse",
    "RecordsAdapter",
    "ResponseAdapter",
    "RestRunner",
    "Transport",
    "WireRequest",
    "build_query_string",
    "decode_body",
    "normalize_host",
]
