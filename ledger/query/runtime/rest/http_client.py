"""aiohttp-backed transport."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from ...core.exceptions import TransportError
from .transport import RawResponse, WireRequest

logger = logging.getLogger(__name__)


class HTTPTransport:
    """Async HTTP transport wrapper.

    Owns one lazily created ``aiohttp.ClientSession``. Timeouts are enforced
    here; the pagination engine itself never times out.
    """

    def __init__(self, timeout: float = 30.0, headers: dict[str, str] | None = None) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def execute(self, request: WireRequest) -> RawResponse:
        """Send a request and return the undecoded response.

        Non-2xx statuses are returned, not raised.

        Raises:
            TransportError: On connection failures and timeouts
        """
        logger.debug("http_request", extra={"method": request.method, "uri": request.uri})
        try:
            async with self.session.request(
                request.method,
                request.uri,
                headers=request.headers,
                data=request.body or None,
            ) as response:
                body = await response.read()
                return RawResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers),
                )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {request.uri} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {request.uri} failed: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
