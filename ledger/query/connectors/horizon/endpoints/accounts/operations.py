"""Account operations endpoint definition and adapter."""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Operation
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    model = Operation


SPEC = RestEndpointSpec(
    id="account_operations",
    path="accounts/{account_id}/operations",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint(account_id: str) -> Endpoint:
    """Create a descriptor for the operations of ``account_id``."""
    return SPEC.bind(account_id=account_id)
