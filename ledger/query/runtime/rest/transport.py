"""Request/response envelopes and the transport interface.

The pagination engine never opens connections itself. It hands a
``WireRequest`` to a ``Transport`` and receives a ``RawResponse`` back;
``HTTPTransport`` is the aiohttp-backed implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

DEFAULT_HEADERS: dict[str, str] = {"Accept": "application/hal+json"}


@dataclass(frozen=True)
class WireRequest:
    """Read-only request handed to a transport.

    Attributes:
        uri: Absolute request URI, query string included
        method: HTTP method, always GET
        headers: Request headers
        body: Request body, always empty
    """

    uri: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS), compare=False)
    body: bytes = b""


@dataclass(frozen=True)
class RawResponse:
    """Undecoded response returned by a transport."""

    status: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status < 400


@runtime_checkable
class Transport(Protocol):
    """Executes wire requests.

    Implementations raise TransportError for network-level failures and
    return non-2xx responses as RawResponse values.
    """

    async def execute(self, request: WireRequest) -> RawResponse: ...
