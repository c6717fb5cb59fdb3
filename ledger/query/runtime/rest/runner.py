"""REST request runner and single-page fetcher.

Architecture:
    ``RestRunner`` executes one request for a single-resource endpoint and
    returns the adapter's decoded object. ``PageFetcher`` does the same for
    a paginated collection and wraps the decoded records in a ``Page``
    together with the cursor of the following page.

Design Decisions:
    - No retries here, they belong to the transport
    - HTTP error statuses become TransportError, schema mismatches become
      DecodeError
    - The next cursor is read from the raw records so models do not need
      to carry the paging token
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.endpoint import Endpoint
from ...core.exceptions import DecodeError, TransportError
from .codec import EndpointCodec
from .transport import RawResponse, Transport

T = TypeVar("T")


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ModelAdapter(ResponseAdapter):
    """Decodes a single resource body into a pydantic model."""

    model: type[BaseModel]

    def __init__(self, model: type[BaseModel] | None = None) -> None:
        if model is not None:
            self.model = model

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        try:
            return self.model.model_validate(response)
        except PydanticValidationError as e:
            raise DecodeError(f"Invalid {self.model.__name__} payload: {e}") from e


class RecordsAdapter(ResponseAdapter):
    """Decodes a HAL record page into a list of pydantic models.

    Horizon-style pages look like ``{"_embedded": {"records": [...]}}`` and
    every record carries a ``paging_token``.
    """

    model: type[BaseModel]
    paging_token_field: str = "paging_token"

    def __init__(self, model: type[BaseModel] | None = None) -> None:
        if model is not None:
            self.model = model

    def extract_records(self, response: Any) -> list[dict[str, Any]]:
        """Pull the raw record list out of a page body.

        Raises:
            DecodeError: If the body has no ``_embedded.records`` list
        """
        try:
            records = response["_embedded"]["records"]
        except (KeyError, TypeError) as e:
            raise DecodeError("Page body has no _embedded.records") from e
        if not isinstance(records, list):
            raise DecodeError("_embedded.records is not a list")
        return records

    def parse(self, response: Any, params: dict[str, Any]) -> list[Any]:
        out: list[Any] = []
        for row in self.extract_records(response):
            try:
                out.append(self.model.model_validate(row))
            except PydanticValidationError as e:
                raise DecodeError(f"Invalid {self.model.__name__} record: {e}") from e
        return out

    def paging_token(self, record: dict[str, Any]) -> str:
        """Read the paging token of one raw record.

        Raises:
            DecodeError: If the record carries no token
        """
        token = record.get(self.paging_token_field) if isinstance(record, dict) else None
        if token is None or token == "":
            raise DecodeError(f"Record has no {self.paging_token_field}")
        return str(token)


@dataclass
class Page(Generic[T]):
    """One fetched page of decoded records.

    Attributes:
        records: Records in server order
        next_cursor: Cursor of the following page, None when this page is
            short or empty (end of data)
    """

    records: list[T] = field(default_factory=list)
    next_cursor: str | None = None

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None

    def __len__(self) -> int:
        return len(self.records)


def decode_body(response: RawResponse) -> Any:
    """Check the status of a raw response and parse its JSON body.

    Raises:
        TransportError: On HTTP error statuses
        DecodeError: If the body is not valid JSON
    """
    if not response.ok:
        message = f"HTTP {response.status}"
        try:
            problem = json.loads(response.body)
        except ValueError:
            problem = None
        if isinstance(problem, dict):
            title = problem.get("title")
            detail = problem.get("detail")
            if title:
                message = f"{message}: {title}"
            if detail:
                message = f"{message} ({detail})"
        raise TransportError(message, status_code=response.status)
    try:
        return json.loads(response.body)
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e


class RestRunner:
    """Executes single-resource endpoints."""

    def __init__(self, transport: Transport, codec: EndpointCodec, host: str) -> None:
        self._t = transport
        self._codec = codec
        self._host = host

    async def run(self, endpoint: Endpoint, adapter: ResponseAdapter | None = None) -> Any:
        adapter = adapter or endpoint.spec.adapter or ResponseAdapter()
        request = self._codec.encode(endpoint, self._host)
        response = await self._t.execute(request)
        return adapter.parse(decode_body(response), endpoint.params)


class PageFetcher(Generic[T]):
    """Fetches and decodes one page of a paginated collection."""

    def __init__(
        self,
        transport: Transport,
        codec: EndpointCodec,
        host: str,
        adapter: RecordsAdapter | None = None,
    ) -> None:
        """Initialize page fetcher.

        Args:
            transport: Executes the wire request
            codec: Encodes descriptors into requests
            host: Service base URL
            adapter: Record decoder, defaults to the endpoint spec's adapter
        """
        self._t = transport
        self._codec = codec
        self._host = host
        self._adapter = adapter

    def adapter_for(self, endpoint: Endpoint) -> RecordsAdapter:
        adapter = self._adapter or endpoint.spec.adapter
        if not isinstance(adapter, RecordsAdapter):
            raise TypeError(f"Endpoint {endpoint.spec.id!r} has no record adapter")
        return adapter

    async def fetch(self, endpoint: Endpoint) -> Page[T]:
        """Fetch the page described by ``endpoint``.

        Raises:
            InvalidUriError: If the request cannot be encoded
            TransportError: On network or HTTP failures
            DecodeError: If the body does not match the record schema
        """
        adapter = self.adapter_for(endpoint)
        request = self._codec.encode(endpoint, self._host)
        response = await self._t.execute(request)
        payload = decode_body(response)
        raw_records = adapter.extract_records(payload)
        records = adapter.parse(payload, endpoint.params)
        return Page(records=records, next_cursor=self._next_cursor(adapter, raw_records, endpoint))

    @staticmethod
    def _next_cursor(
        adapter: RecordsAdapter, raw_records: Sequence[dict[str, Any]], endpoint: Endpoint
    ) -> str | None:
        # a short page ends the walk without another round trip
        if not raw_records or len(raw_records) < endpoint.requested_limit:
            return None
        return adapter.paging_token(raw_records[-1])
