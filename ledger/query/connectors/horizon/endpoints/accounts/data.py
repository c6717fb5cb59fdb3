"""Account data endpoint definition and adapter.

Returns one value of an account's key/value store.
"""

from __future__ import annotations

from ledger.query.core import Endpoint, RestEndpointSpec
from ledger.query.models import Datum
from ledger.query.runtime.rest import ModelAdapter


class Adapter(ModelAdapter):
    """Adapter for parsing a data body into Datum (value base64 decoded)."""

    model = Datum


SPEC = RestEndpointSpec(
    id="account_data",
    path="accounts/{account_id}/data/{key}",
    adapter=Adapter(),
)


def endpoint(account_id: str, key: str) -> Endpoint:
    """Create a descriptor for the value stored under ``key`` on ``account_id``."""
    return SPEC.bind(account_id=account_id, key=key)
