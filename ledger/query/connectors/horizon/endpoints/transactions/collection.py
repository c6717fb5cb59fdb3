"""All transactions endpoint definition and adapter.

Pages through every transaction on the ledger.
"""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Transaction
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    """Adapter for parsing transaction pages into Transaction list."""

    model = Transaction


SPEC = RestEndpointSpec(
    id="all_transactions",
    path="transactions",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint() -> Endpoint:
    """Create a descriptor for the ledger-wide transaction collection."""
    return SPEC.bind()
