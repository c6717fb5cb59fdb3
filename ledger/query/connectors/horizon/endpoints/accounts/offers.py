"""Account offers endpoint definition and adapter."""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Offer
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    """Adapter for parsing account offer pages into Offer list."""

    model = Offer


SPEC = RestEndpointSpec(
    id="account_offers",
    path="accounts/{account_id}/offers",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint(account_id: str) -> Endpoint:
    """Create a descriptor for the open offers of ``account_id``."""
    return SPEC.bind(account_id=account_id)
