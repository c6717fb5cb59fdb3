"""Endpoint codec: descriptors to wire requests and URIs back to descriptors.

Architecture:
    ``encode`` fills a collection template with path parameters, appends the
    query string and validates the result against the URI grammar.
    ``decode`` is its inverse: it splits a URI into raw path segments, finds
    the first registered template with the same shape and reads the
    ``cursor``, ``order`` and ``limit`` parameters.

Design Decisions:
    - Fixed query order ``cursor``, ``order``, ``limit``, only present
      fields emitted, no ``?`` at all when none is set
    - Path parameters and cursors are emitted verbatim and read back raw
      (no percent-decoding), which keeps ``decode(encode(e)) == e``
    - Unparseable query parameters decode as absent rather than failing,
      unless the codec is built with ``strict=True``
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any

from yarl import URL

from ...core.endpoint import Endpoint, RestEndpointSpec
from ...core.enums import Order
from ...core.exceptions import InvalidPathError, InvalidUriError, ParamParseError
from ...core.query import QueryCapability, QuerySpec
from .transport import WireRequest

logger = logging.getLogger(__name__)

# RFC 3986 pchar
_SEGMENT = re.compile(r"^(?:[A-Za-z0-9\-._~!$&'()*+,;=:@]|%[0-9A-Fa-f]{2})+$")
# query chars minus the pair delimiters "&" and "="
_QUERY_VALUE = re.compile(r"^(?:[A-Za-z0-9\-._~!$'()*+,;:@/?]|%[0-9A-Fa-f]{2})*$")
_LIMIT = re.compile(r"^[0-9]+$")


def parse_cursor(value: str) -> str:
    return value


def parse_order(value: str) -> Order:
    order = Order.from_str(value)
    if order is None:
        raise ParamParseError("order", value)
    return order


def parse_limit(value: str) -> int:
    if not _LIMIT.match(value):
        raise ParamParseError("limit", value)
    return int(value)


_PARAM_PARSERS: dict[QueryCapability, Callable[[str], Any]] = {
    QueryCapability.CURSOR: parse_cursor,
    QueryCapability.ORDER: parse_order,
    QueryCapability.LIMIT: parse_limit,
}


def build_query_string(query: QuerySpec) -> str:
    """Render present query fields in the fixed wire order."""
    parts: list[str] = []
    if query.cursor is not None:
        parts.append(f"cursor={query.cursor}")
    if query.order is not None:
        parts.append(f"order={query.order.value}")
    if query.limit is not None:
        parts.append(f"limit={query.limit}")
    return "&".join(parts)


def normalize_host(host: str) -> str:
    """Validate a service host and strip its trailing slash.

    Raises:
        InvalidUriError: If host is not an absolute http(s) URL
    """
    try:
        url = URL(host)
    except (TypeError, ValueError) as e:
        raise InvalidUriError(f"Invalid host: {host!r}", uri=host) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidUriError(f"Host must be an absolute http(s) URL: {host!r}", uri=host)
    if url.raw_query_string or url.raw_fragment:
        raise InvalidUriError(f"Host must not carry a query or fragment: {host!r}", uri=host)
    return host.rstrip("/")


class EndpointCodec:
    """Bidirectional mapping between endpoint descriptors and URIs."""

    def __init__(self, specs: Iterable[RestEndpointSpec], *, strict: bool = False) -> None:
        """Initialize codec.

        Args:
            specs: Known collection templates, matched in order by ``decode``
            strict: Raise ParamParseError from ``decode`` instead of treating
                unparseable query parameters as absent
        """
        self._specs = tuple(specs)
        self._strict = strict

    @property
    def specs(self) -> tuple[RestEndpointSpec, ...]:
        return self._specs

    def build_uri(self, endpoint: Endpoint, host: str) -> str:
        """Build the absolute request URI for a descriptor.

        Raises:
            InvalidUriError: If the host, a path parameter or the cursor
                cannot form a valid URI
        """
        base = normalize_host(host)
        for name, value in endpoint.path_params:
            if value in (".", "..") or not _SEGMENT.match(value):
                raise InvalidUriError(
                    f"Path parameter {name}={value!r} is not a valid URI segment",
                    uri=f"{base}/{endpoint.spec.path}",
                )
        uri = f"{base}/{endpoint.path()}"
        if endpoint.has_query():
            cursor = endpoint.query.cursor
            if cursor is not None and not _QUERY_VALUE.match(cursor):
                raise InvalidUriError(f"Cursor {cursor!r} is not a valid query value", uri=uri)
            uri = f"{uri}?{build_query_string(endpoint.query)}"
        try:
            URL(uri, encoded=True)
        except (TypeError, ValueError) as e:
            raise InvalidUriError(f"Cannot parse request URI {uri!r}", uri=uri) from e
        return uri

    def encode(self, endpoint: Endpoint, host: str) -> WireRequest:
        """Turn a descriptor into a GET request against ``host``."""
        return WireRequest(uri=self.build_uri(endpoint, host), method=endpoint.spec.method)

    def decode(self, uri: str) -> Endpoint:
        """Parse an absolute URI or bare path back into a descriptor.

        Raises:
            InvalidPathError: If the path matches no known collection
        """
        try:
            url = URL(uri, encoded=True)
        except (TypeError, ValueError) as e:
            raise InvalidPathError(f"Cannot parse URI {uri!r}", path=uri) from e

        raw_path = url.raw_path.strip("/")
        segments = raw_path.split("/") if raw_path else []
        for spec in self._specs:
            params = spec.match(segments)
            if params is not None:
                break
        else:
            raise InvalidPathError(f"No collection matches path {url.raw_path!r}", path=url.raw_path)

        query = self._decode_query(spec, url.raw_query_string)
        return Endpoint(
            spec=spec,
            path_params=tuple((name, params[name]) for name in spec.param_names),
            query=query,
        )

    def _decode_query(self, spec: RestEndpointSpec, raw_query: str) -> QuerySpec:
        raw: dict[str, str] = {}
        for pair in raw_query.split("&") if raw_query else ():
            key, _, value = pair.partition("=")
            raw.setdefault(key, value)

        values: dict[str, Any] = {}
        for capability, parser in _PARAM_PARSERS.items():
            if capability.value not in raw or capability not in spec.capabilities:
                continue
            try:
                values[capability.value] = parser(raw[capability.value])
            except ParamParseError as e:
                if self._strict:
                    raise
                logger.debug(
                    "query_param_ignored",
                    extra={"endpoint_id": spec.id, "param": e.name, "value": e.value},
                )
        return QuerySpec(**values)
