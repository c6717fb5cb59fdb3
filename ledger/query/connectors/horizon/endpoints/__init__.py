"""Horizon endpoint registry.

``ENDPOINT_SPECS`` lists every collection the connector knows, in the order
the codec tries them when decoding a URI. The module-level constructors are
the public way to build descriptors.
"""

from __future__ import annotations

from ledger.query.core import RestEndpointSpec

from . import accounts, assets, transactions

ENDPOINT_SPECS: tuple[RestEndpointSpec, ...] = (
    accounts.details.SPEC,
    accounts.data.SPEC,
    accounts.transactions.SPEC,
    accounts.effects.SPEC,
    accounts.operations.SPEC,
    accounts.payments.SPEC,
    accounts.offers.SPEC,
    transactions.collection.SPEC,
    transactions.details.SPEC,
    assets.collection.SPEC,
)

SPECS_BY_ID: dict[str, RestEndpointSpec] = {spec.id: spec for spec in ENDPOINT_SPECS}

account_details = accounts.details.endpoint
account_data = accounts.data.endpoint
account_transactions = accounts.transactions.endpoint
account_effects = accounts.effects.endpoint
account_operations = accounts.operations.endpoint
account_payments = accounts.payments.endpoint
account_offers = accounts.offers.endpoint
all_transactions = transactions.collection.endpoint
transaction_details = transactions.details.endpoint
all_assets = assets.collection.endpoint


def get_spec(endpoint_id: str) -> RestEndpointSpec:
    """Look up a registered spec by id.

    Raises:
        KeyError: If no endpoint has that id
    """
    try:
        return SPECS_BY_ID[endpoint_id]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {endpoint_id}") from None


__all__ = [
    "ENDPOINT_SPECS",
    "SPECS_BY_ID",
    "account_data",
    "account_details",
    "account_effects",
    "account_offers",
    "account_operations",
    "account_payments",
    "account_transactions",
    "all_assets",
    "all_transactions",
    "get_spec",
    "transaction_details",
]
