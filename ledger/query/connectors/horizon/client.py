"""Horizon client facade.

Wires one transport, the endpoint codec and the page fetcher together for a
single service host.
"""

from __future__ import annotations

from typing import Any

from ledger.query.core import Endpoint, Network
from ledger.query.runtime.paging import CursorIterator, Pager
from ledger.query.runtime.paging.pager import Consumer, ErrorHandler
from ledger.query.runtime.rest import (
    EndpointCodec,
    HTTPTransport,
    Page,
    PageFetcher,
    RestRunner,
    Transport,
    WireRequest,
    normalize_host,
)

from .config import DEFAULT_TIMEOUT, get_base_url
from .endpoints import ENDPOINT_SPECS


class HorizonClient:
    """Async client for a Horizon-style ledger query service.

    Example:
        >>> async with HorizonClient.testnet() as client:
        ...     endpoint = account_transactions("GA...").with_order(Order.DESC)
        ...     async for txn in client.iterate(endpoint):
        ...         print(txn.id)
    """

    def __init__(
        self,
        *,
        network: Network = Network.PUBLIC,
        base_url: str | None = None,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize client.

        Args:
            network: Network whose public host to use when base_url is None
            base_url: Explicit service host, overrides network
            transport: Custom transport; an HTTPTransport is created otherwise
            timeout: Request timeout for the default transport
        """
        self.base_url = normalize_host(base_url or get_base_url(network))
        self._owns_transport = transport is None
        self._transport: Transport = transport or HTTPTransport(timeout=timeout)
        self.codec = EndpointCodec(ENDPOINT_SPECS)
        self._runner = RestRunner(self._transport, self.codec, self.base_url)
        self._fetcher: PageFetcher[Any] = PageFetcher(self._transport, self.codec, self.base_url)

    @classmethod
    def public(cls, **kwargs: Any) -> HorizonClient:
        return cls(network=Network.PUBLIC, **kwargs)

    @classmethod
    def testnet(cls, **kwargs: Any) -> HorizonClient:
        return cls(network=Network.TESTNET, **kwargs)

    @property
    def transport(self) -> Transport:
        return self._transport

    def encode(self, endpoint: Endpoint) -> WireRequest:
        """Build the wire request for ``endpoint`` against this host."""
        return self.codec.encode(endpoint, self.base_url)

    def decode(self, uri: str) -> Endpoint:
        """Parse a URI (e.g. a HAL ``next`` link) back into a descriptor."""
        return self.codec.decode(uri)

    async def request(self, endpoint: Endpoint) -> Any:
        """Fetch a single resource, or the first page of a collection."""
        if endpoint.spec.paginated:
            return await self.fetch_page(endpoint)
        return await self._runner.run(endpoint)

    async def fetch_page(self, endpoint: Endpoint) -> Page[Any]:
        """Fetch exactly one page of a collection."""
        return await self._fetcher.fetch(endpoint)

    def iterate(self, endpoint: Endpoint) -> CursorIterator[Any]:
        """Lazily walk every record of a collection, starting at ``endpoint``."""
        return CursorIterator(self._fetcher, endpoint)

    async def paginate(
        self,
        endpoint: Endpoint,
        consumer: Consumer[Any],
        *,
        pager: Pager | None = None,
        on_error: ErrorHandler | None = None,
    ) -> int:
        """Drive ``consumer`` over a collection under a Pager policy.

        Returns:
            Number of records handed to the consumer
        """
        pager = pager or Pager()
        return await pager.paginate(self.iterate(endpoint), consumer, on_error=on_error)

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HTTPTransport):
            await self._transport.close()

    async def __aenter__(self) -> HorizonClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
