"""Core types: descriptors, query refinements, enums and exceptions."""

from .endpoint import DEFAULT_LIMIT, Endpoint, RestEndpointSpec
from .enums import AssetType, Network, Order
from .exceptions import (
    CapabilityError,
    DecodeError,
    InvalidPathError,
    InvalidUriError,
    LedgerQueryError,
    ParamParseError,
    TransportError,
)
from .query import ALL_CAPABILITIES, QueryCapabilities, QueryCapability, QuerySpec

__all__ = [
    "ALL_CAPABILITIES",
    "AssetType",
    "CapabilityError",
    "DEFAULT_LIMIT",
    "DecodeError",
    "Endpoint",
    "InvalidPathError",
    "InvalidUriError",
    "LedgerQueryError",
    "Network",
    "Order",
    "ParamParseError",
    "QueryCapabilities",
    "QueryCapability",
    "QuerySpec",
    "RestEndpointSpec",
    "TransportError",
]
