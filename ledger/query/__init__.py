"""Ledger Query - typed client for a cursor-paginated ledger query service."""

from .core import (
    CapabilityError,
    DecodeError,
    Endpoint,
    InvalidPathError,
    InvalidUriError,
    LedgerQueryError,
    Network,
    Order,
    ParamParseError,
    QueryCapability,
    QuerySpec,
    RestEndpointSpec,
    TransportError,
)
from .models import (
    Account,
    Asset,
    AssetIdentifier,
    Datum,
    Effect,
    Offer,
    Operation,
    Payment,
    Transaction,
    TrustlineAuthorized,
)
from .runtime import (
    CursorIterator,
    EndpointCodec,
    HTTPTransport,
    IteratorState,
    Page,
    PageFetcher,
    Pager,
    RawResponse,
    Transport,
    WireRequest,
)
from .connectors.horizon import (
    HorizonClient,
    account_data,
    account_details,
    account_effects,
    account_offers,
    account_operations,
    account_payments,
    account_transactions,
    all_assets,
    all_transactions,
    transaction_details,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Asset",
    "AssetIdentifier",
    "CapabilityError",
    "CursorIterator",
    "Datum",
    "DecodeError",
    "Effect",
    "Endpoint",
    "EndpointCodec",
    "HTTPTransport",
    "HorizonClient",
    "InvalidPathError",
    "InvalidUriError",
    "IteratorState",
    "LedgerQueryError",
    "Network",
    "Offer",
    "Operation",
    "Order",
    "Page",
    "PageFetcher",
    "Pager",
    "ParamParseError",
    "Payment",
    "QueryCapability",
    "QuerySpec",
    "RawResponse",
    "RestEndpointSpec",
    "Transaction",
    "Transport",
    "TransportError",
    "TrustlineAuthorized",
    "WireRequest",
    "account_data",
    "account_details",
    "account_effects",
    "account_offers",
    "account_operations",
    "account_payments",
    "account_transactions",
    "all_assets",
    "all_transactions",
    "transaction_details",
]
