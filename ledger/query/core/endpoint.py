"""Endpoint specifications and descriptors.

Architecture:
    A ``RestEndpointSpec`` describes one collection of the query service:
    its path template (``"accounts/{account_id}/transactions"``), which query
    refinements it accepts, its default page size and the adapter that
    decodes its records. An ``Endpoint`` binds a spec to concrete path
    parameters and a ``QuerySpec``; it is the typed descriptor that the codec
    turns into a wire request and back.

Design Decisions:
    - Frozen dataclasses: path identity never changes after binding
    - Path parameters kept as an ordered tuple of pairs so descriptors are
      hashable and compare equal regardless of how they were built
    - The adapter is excluded from equality, two descriptors of the same
      collection are equal even if built from different adapter instances
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .query import QueryCapabilities, QueryCapability, QuerySpec

if TYPE_CHECKING:
    from ..runtime.rest.runner import ResponseAdapter

_PLACEHOLDER = re.compile(r"^\{([A-Za-z_][A-Za-z0-9_]*)\}$")

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class RestEndpointSpec:
    """Declarative description of one queryable collection.

    Attributes:
        id: Stable endpoint identifier (e.g. "account_transactions")
        path: Collection path template, placeholders are whole segments
        capabilities: Query refinements the collection accepts
        default_limit: Page size the server uses when no limit is sent
        adapter: Decoder for the response body
        method: HTTP method, always GET for this engine
    """

    id: str
    path: str
    capabilities: frozenset[QueryCapability] = frozenset()
    default_limit: int = DEFAULT_LIMIT
    adapter: ResponseAdapter | None = field(default=None, compare=False, repr=False)
    method: str = "GET"

    def __post_init__(self) -> None:
        if not self.path.strip("/"):
            raise ValueError(f"Endpoint {self.id!r} has an empty path template")
        for segment in self.segments:
            if "{" in segment or "}" in segment:
                if not _PLACEHOLDER.match(segment):
                    raise ValueError(
                        f"Endpoint {self.id!r} has a malformed placeholder {segment!r}"
                    )

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.path.strip("/").split("/"))

    @property
    def param_names(self) -> tuple[str, ...]:
        names = []
        for segment in self.segments:
            m = _PLACEHOLDER.match(segment)
            if m:
                names.append(m.group(1))
        return tuple(names)

    @property
    def paginated(self) -> bool:
        return bool(self.capabilities)

    def build_path(self, params: Mapping[str, str]) -> str:
        """Fill the template with path parameter values.

        Args:
            params: Values keyed by placeholder name

        Returns:
            Path without leading slash
        """
        out: list[str] = []
        for segment in self.segments:
            m = _PLACEHOLDER.match(segment)
            out.append(params[m.group(1)] if m else segment)
        return "/".join(out)

    def match(self, segments: Sequence[str]) -> dict[str, str] | None:
        """Match URI path segments against the template.

        Args:
            segments: Raw path segments, without empty leading/trailing parts

        Returns:
            Path parameters keyed by name, or None when the shape differs
        """
        template = self.segments
        if len(segments) != len(template):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(template, segments):
            m = _PLACEHOLDER.match(expected)
            if m:
                params[m.group(1)] = actual
            elif expected != actual:
                return None
        return params

    def bind(self, *args: str, **kwargs: str) -> Endpoint:
        """Create a descriptor for this collection.

        Path parameters may be given positionally (template order) or by name.

        Raises:
            TypeError: If parameters are missing, duplicated or unknown
        """
        names = self.param_names
        if len(args) > len(names):
            raise TypeError(f"{self.id} takes {len(names)} path parameters, got {len(args)}")
        values: dict[str, Any] = dict(zip(names, args))
        for key, value in kwargs.items():
            if key not in names:
                raise TypeError(f"{self.id} has no path parameter {key!r}")
            if key in values:
                raise TypeError(f"{self.id} got multiple values for {key!r}")
            values[key] = value
        missing = [n for n in names if n not in values]
        if missing:
            raise TypeError(f"{self.id} missing path parameters: {', '.join(missing)}")
        return Endpoint(spec=self, path_params=tuple((n, str(values[n])) for n in names))


@dataclass(frozen=True)
class Endpoint(QueryCapabilities):
    """Typed descriptor of one logical query against a collection."""

    spec: RestEndpointSpec
    path_params: tuple[tuple[str, str], ...] = ()
    query: QuerySpec = field(default_factory=QuerySpec)

    def __post_init__(self) -> None:
        names = tuple(name for name, _ in self.path_params)
        if names != self.spec.param_names:
            raise ValueError(
                f"Endpoint {self.spec.id!r} expects path parameters "
                f"{self.spec.param_names}, got {names}"
            )

    @property
    def supported_capabilities(self) -> frozenset[QueryCapability]:
        return self.spec.capabilities

    @property
    def endpoint_id(self) -> str:
        return self.spec.id

    @property
    def params(self) -> dict[str, str]:
        return dict(self.path_params)

    @property
    def requested_limit(self) -> int:
        """Page size a fetch of this descriptor is expected to return."""
        if self.query.limit is not None:
            return self.query.limit
        return self.spec.default_limit

    def path(self) -> str:
        return self.spec.build_path(self.params)
