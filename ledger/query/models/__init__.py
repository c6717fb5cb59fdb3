"""Resource models returned by the query service.

All models are pydantic v2 and immutable (frozen=True). Amounts are Decimal.
Records that inline an asset identifier (``asset_type``, ``asset_code``,
``asset_issuer`` next to their own fields) are normalized into a nested
``AssetIdentifier`` on load.
"""

from .account import Account, Balance, Datum
from .asset import (
    AnyAssetIdentifier,
    Asset,
    AssetIdentifier,
    CreditAlphanum4,
    CreditAlphanum12,
    CreditAsset,
    Flags,
    NativeAsset,
    lift_asset,
)
from .effect import Effect, TrustlineAuthorized
from .offer import Offer
from .operation import Operation, Payment
from .transaction import Transaction

__all__ = [
    "Account",
    "AnyAssetIdentifier",
    "Asset",
    "AssetIdentifier",
    "Balance",
    "CreditAlphanum12",
    "CreditAlphanum4",
    "CreditAsset",
    "Datum",
    "Effect",
    "Flags",
    "NativeAsset",
    "Offer",
    "Operation",
    "Payment",
    "Transaction",
    "TrustlineAuthorized",
    "lift_asset",
]
