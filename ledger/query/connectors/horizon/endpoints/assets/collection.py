"""All assets endpoint definition and adapter.

Each record inlines its identifier (``asset_type``, ``asset_code``,
``asset_issuer``) next to the statistics; the Asset model nests it.
"""

from __future__ import annotations

from ledger.query.connectors.horizon.config import DEFAULT_PAGE_LIMIT
from ledger.query.core import ALL_CAPABILITIES, Endpoint, RestEndpointSpec
from ledger.query.models import Asset
from ledger.query.runtime.rest import RecordsAdapter


class Adapter(RecordsAdapter):
    """Adapter for parsing asset pages into Asset list."""

    model = Asset


SPEC = RestEndpointSpec(
    id="all_assets",
    path="assets",
    capabilities=ALL_CAPABILITIES,
    default_limit=DEFAULT_PAGE_LIMIT,
    adapter=Adapter(),
)


def endpoint() -> Endpoint:
    """Create a descriptor for every asset issued on the ledger."""
    return SPEC.bind()
