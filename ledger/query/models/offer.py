"""Offer data model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .asset import AnyAssetIdentifier


class Offer(BaseModel):
    """An open order on the decentralized exchange."""

    id: str = Field(..., min_length=1)
    paging_token: str
    seller: str
    selling: AnyAssetIdentifier
    buying: AnyAssetIdentifier
    amount: Decimal = Field(..., ge=0)
    price: Decimal = Field(..., gt=0)

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)
