"""Shared fixtures for pagination tests."""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel
from yarl import URL

from ledger.query.core import ALL_CAPABILITIES, RestEndpointSpec, TransportError
from ledger.query.runtime.rest import EndpointCodec, PageFetcher, RawResponse, RecordsAdapter

HOST = "https://horizon.example.org"


class Record(BaseModel):
    id: int
    paging_token: str


class RecordAdapter(RecordsAdapter):
    model = Record


RECORDS = RestEndpointSpec(
    id="records",
    path="records",
    capabilities=ALL_CAPABILITIES,
    default_limit=10,
    adapter=RecordAdapter(),
)


class DatasetTransport:
    """In-memory service holding ``total`` records, paged by cursor.

    Record ``i`` has paging token ``str(i)``; a cursor resumes after it.
    ``fail_on`` makes the n-th request (1-based) raise TransportError.
    """

    def __init__(self, total: int, fail_on: int | None = None) -> None:
        self.total = total
        self.fail_on = fail_on
        self.uris: list[str] = []
        self.page_sizes: list[int] = []

    async def execute(self, request):
        self.uris.append(request.uri)
        if self.fail_on is not None and len(self.uris) == self.fail_on:
            raise TransportError("connection reset", status_code=None)
        query = URL(request.uri).query
        limit = int(query.get("limit", RECORDS.default_limit))
        start = int(query["cursor"]) + 1 if "cursor" in query else 0
        rows = [
            {"id": i, "paging_token": str(i)}
            for i in range(start, min(start + limit, self.total))
        ]
        self.page_sizes.append(len(rows))
        body = json.dumps({"_embedded": {"records": rows}}).encode()
        return RawResponse(status=200, body=body)


@pytest.fixture
def make_fetcher():
    """Build a PageFetcher over an in-memory dataset."""

    def _make(total: int, fail_on: int | None = None):
        transport = DatasetTransport(total, fail_on=fail_on)
        fetcher = PageFetcher(transport, EndpointCodec([RECORDS]), HOST)
        return fetcher, transport

    return _make


@pytest.fixture
def records_endpoint():
    return RECORDS.bind()
