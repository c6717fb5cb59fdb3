"""Account details endpoint definition and adapter.

Single resource, no query refinements.
"""

from __future__ import annotations

from ledger.query.core import Endpoint, RestEndpointSpec
from ledger.query.models import Account
from ledger.query.runtime.rest import ModelAdapter


class Adapter(ModelAdapter):
    """Adapter for parsing an account body into Account."""

    model = Account


SPEC = RestEndpointSpec(
    id="account_details",
    path="accounts/{account_id}",
    adapter=Adapter(),
)


def endpoint(account_id: str) -> Endpoint:
    """Create a descriptor for the details of ``account_id``."""
    return SPEC.bind(account_id=account_id)
