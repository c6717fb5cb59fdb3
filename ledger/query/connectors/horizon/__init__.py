"""Horizon connector: endpoint definitions, configuration and client."""

from .client import HorizonClient
from .config import (
    BASE_URLS,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_TIMEOUT,
    HORIZON_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    get_base_url,
)
from .endpoints import (
    ENDPOINT_SPECS,
    account_data,
    account_details,
    account_effects,
    account_offers,
    account_operations,
    account_payments,
    account_transactions,
    all_assets,
    all_transactions,
    get_spec,
    transaction_details,
)

__all__ = [
    "BASE_URLS",
    "DEFAULT_PAGE_LIMIT",
    "DEFAULT_TIMEOUT",
    "ENDPOINT_SPECS",
    "HORIZON_PAGE_LIMIT",
    "HorizonClient",
    "MAX_PAGE_LIMIT",
    "account_data",
    "account_details",
    "account_effects",
    "account_offers",
    "account_operations",
    "account_payments",
    "account_transactions",
    "all_assets",
    "all_transactions",
    "get_base_url",
    "get_spec",
    "transaction_details",
]
