"""Transaction details endpoint definition and adapter."""

from __future__ import annotations

from ledger.query.core import Endpoint, RestEndpointSpec
from ledger.query.models import Transaction
from ledger.query.runtime.rest import ModelAdapter


class Adapter(ModelAdapter):
    model = Transaction


SPEC = RestEndpointSpec(
    id="transaction_details",
    path="transactions/{transaction_hash}",
    adapter=Adapter(),
)


def endpoint(transaction_hash: str) -> Endpoint:
    """Create a descriptor for one transaction, looked up by hash."""
    return SPEC.bind(transaction_hash=transaction_hash)
