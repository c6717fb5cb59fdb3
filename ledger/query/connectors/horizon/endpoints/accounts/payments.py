"""Account payments endpoint definition and adapter.

Payments are the payment-like subset of operations: payments, path payments
and account creations.
"""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Payment
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    """Adapter for parsing account payment pages into Payment list."""

    model = Payment


SPEC = RestEndpointSpec(
    id="account_payments",
    path="accounts/{account_id}/payments",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint(account_id: str) -> Endpoint:
    """Create a descriptor for the payments sent or received by ``account_id``."""
    return SPEC.bind(account_id=account_id)
