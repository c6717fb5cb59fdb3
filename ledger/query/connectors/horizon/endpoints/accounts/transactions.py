"""Account transactions endpoint definition and adapter.

Returns every transaction that affected a given account, oldest first unless
``order=desc`` is requested.
"""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Transaction
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    """Adapter for parsing account transaction pages into Transaction list."""

    model = Transaction


# Endpoint specification
SPEC = RestEndpointSpec(
    id="account_transactions",
    path="accounts/{account_id}/transactions",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint(account_id: str) -> Endpoint:
    """Create a descriptor for the transactions of ``account_id``.

    Example:
        >>> endpoint("GABC").with_order("desc").with_limit(50)
    """
    return SPEC.bind(account_id=account_id)
