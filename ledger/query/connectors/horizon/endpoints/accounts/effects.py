"""Account effects endpoint definition and adapter."""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Effect
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    """Adapter for parsing account effect pages into Effect list.

    Type-specific effect fields are kept on each Effect as extras.
    """

    model = Effect


SPEC = RestEndpointSpec(
    id="account_effects",
    path="accounts/{account_id}/effects",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint(account_id: str) -> Endpoint:
    """Create a descriptor for the effects that changed ``account_id``."""
    return SPEC.bind(account_id=account_id)
