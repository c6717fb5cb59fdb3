"""Unit tests for QuerySpec and the QueryCapabilities builder mixin."""

from __future__ import annotations

import pytest

from ledger.query.core import (
    ALL_CAPABILITIES,
    CapabilityError,
    Order,
    QueryCapability,
    QuerySpec,
    RestEndpointSpec,
)


@pytest.fixture
def collection():
    return RestEndpointSpec(
        id="account_transactions",
        path="accounts/{account_id}/transactions",
        capabilities=ALL_CAPABILITIES,
    )


class TestQuerySpec:
    """Test the immutable query value."""

    def test_empty(self):
        """Test a fresh spec has no query."""
        q = QuerySpec()
        assert q.cursor is None
        assert q.order is None
        assert q.limit is None
        assert not q.has_query()

    def test_each_field_sets_has_query(self):
        """Test any single field counts as a query."""
        assert QuerySpec().with_cursor("c").has_query()
        assert QuerySpec().with_order(Order.ASC).has_query()
        assert QuerySpec().with_limit(5).has_query()

    def test_builders_return_new_values(self):
        """Test builder calls never modify the original."""
        q = QuerySpec()
        q2 = q.with_limit(5)
        assert q.limit is None
        assert q2.limit == 5
        assert q2 is not q

    def test_order_from_wire_token(self):
        """Test order accepts its wire token."""
        assert QuerySpec().with_order("desc").order is Order.DESC

    def test_order_rejects_unknown_token(self):
        """Test an unknown order token is rejected."""
        with pytest.raises(ValueError, match="Invalid order"):
            QuerySpec().with_order("sideways")

    @pytest.mark.parametrize("bad", [-1, True, 1.5, "10"])
    def test_limit_rejects_non_natural(self, bad):
        """Test limit must be a non-negative int."""
        with pytest.raises(ValueError):
            QuerySpec().with_limit(bad)

    def test_limit_zero_allowed(self):
        """Test limit 0 is left to the server."""
        assert QuerySpec().with_limit(0).limit == 0

    def test_later_call_wins(self):
        """Test repeated builder calls overwrite the field."""
        q = QuerySpec().with_cursor("a").with_cursor("b")
        assert q.cursor == "b"


class TestQueryCapabilities:
    """Test the builder calls on an endpoint descriptor."""

    def test_chain_builds_all_fields(self, collection):
        """Test chaining cursor, order and limit."""
        e = collection.bind("GA").with_cursor("CURSOR").with_order(Order.DESC).with_limit(123)
        assert e.query == QuerySpec(cursor="CURSOR", order=Order.DESC, limit=123)
        assert e.has_query()

    def test_builder_keeps_path(self, collection):
        """Test refinements do not touch the path identity."""
        base = collection.bind("GA")
        refined = base.with_limit(3)
        assert refined.params == {"account_id": "GA"}
        assert refined.spec is base.spec
        assert not base.has_query()

    def test_supports(self, collection):
        """Test capability lookup."""
        e = collection.bind("GA")
        for capability in QueryCapability:
            assert e.supports(capability)

    def test_unsupported_capability_raises(self):
        """Test builder calls are gated by the spec's capabilities."""
        spec = RestEndpointSpec(id="account_details", path="accounts/{account_id}")
        e = spec.bind("GA")
        with pytest.raises(CapabilityError) as exc_info:
            e.with_cursor("c")
        assert exc_info.value.endpoint_id == "account_details"
        assert exc_info.value.capability is QueryCapability.CURSOR

    def test_partial_capabilities(self):
        """Test a spec that only accepts a limit."""
        spec = RestEndpointSpec(
            id="limited", path="limited", capabilities=frozenset({QueryCapability.LIMIT})
        )
        e = spec.bind().with_limit(2)
        assert e.query.limit == 2
        with pytest.raises(CapabilityError):
            e.with_order("asc")
