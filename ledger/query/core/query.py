"""Composable query parameters for paginated collections.

Architecture:
    Every paginated collection accepts the same three optional refinements
    (``cursor``, ``order``, ``limit``). They live in one immutable
    ``QuerySpec`` value, and the ``QueryCapabilities`` mixin gives any
    descriptor carrying a ``QuerySpec`` the chainable builder calls.

Design Decisions:
    - Value semantics: builder calls return a new descriptor, the original
      is never modified
    - No bounds validation on ``limit``: out-of-range values are the
      server's concern, the Pager applies its own ceiling
    - Capability gating: a descriptor may declare which refinements it
      supports, unsupported calls raise CapabilityError
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeVar

from .enums import Order
from .exceptions import CapabilityError


class QueryCapability(str, Enum):
    """Optional refinement a collection can accept."""

    CURSOR = "cursor"
    ORDER = "order"
    LIMIT = "limit"


ALL_CAPABILITIES: frozenset[QueryCapability] = frozenset(QueryCapability)


@dataclass(frozen=True)
class QuerySpec:
    """Optional cursor, order and limit attached to an endpoint.

    Attributes:
        cursor: Opaque position token returned by the server
        order: Walk direction
        limit: Requested page size
    """

    cursor: str | None = None
    order: Order | None = None
    limit: int | None = None

    def has_query(self) -> bool:
        """True iff any of cursor, order or limit is set."""
        return self.cursor is not None or self.order is not None or self.limit is not None

    def with_cursor(self, token: str) -> QuerySpec:
        return replace(self, cursor=str(token))

    def with_order(self, direction: Order | str) -> QuerySpec:
        if isinstance(direction, Order):
            return replace(self, order=direction)
        order = Order.from_str(str(direction))
        if order is None:
            raise ValueError(f"Invalid order: {direction!r}")
        return replace(self, order=order)

    def with_limit(self, limit: int) -> QuerySpec:
        # bool is an int subclass, reject it explicitly
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"limit must be an integer, got {limit!r}")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        return replace(self, limit=limit)


_Q = TypeVar("_Q", bound="QueryCapabilities")


class QueryCapabilities:
    """Mixin providing the cursor/order/limit builder calls.

    Hosts must be dataclasses with a ``query: QuerySpec`` field. They may
    override ``supported_capabilities`` and ``endpoint_id`` to restrict which
    calls are allowed and to name themselves in errors.
    """

    query: QuerySpec

    @property
    def supported_capabilities(self) -> frozenset[QueryCapability]:
        return ALL_CAPABILITIES

    @property
    def endpoint_id(self) -> str:
        return type(self).__name__

    def supports(self, capability: QueryCapability) -> bool:
        """Check whether this descriptor accepts a refinement."""
        return capability in self.supported_capabilities

    def has_query(self) -> bool:
        """True iff any of cursor, order or limit is set."""
        return self.query.has_query()

    def with_cursor(self: _Q, token: str) -> _Q:
        """Return a copy that resumes from the given cursor."""
        self._require(QueryCapability.CURSOR)
        return replace(self, query=self.query.with_cursor(token))  # type: ignore[type-var]

    def with_order(self: _Q, direction: Order | str) -> _Q:
        """Return a copy walking the collection in the given direction."""
        self._require(QueryCapability.ORDER)
        return replace(self, query=self.query.with_order(direction))  # type: ignore[type-var]

    def with_limit(self: _Q, limit: int) -> _Q:
        """Return a copy requesting the given page size."""
        self._require(QueryCapability.LIMIT)
        return replace(self, query=self.query.with_limit(limit))  # type: ignore[type-var]

    def _require(self, capability: QueryCapability) -> None:
        if not self.supports(capability):
            raise CapabilityError(
                f"Endpoint {self.endpoint_id!r} does not support {capability.value!r}",
                endpoint_id=self.endpoint_id,
                capability=capability,
            )
