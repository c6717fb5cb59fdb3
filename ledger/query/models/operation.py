"""Operation and payment data models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .asset import AnyAssetIdentifier, lift_asset


class Operation(BaseModel):
    """A single operation within a transaction."""

    id: str = Field(..., min_length=1)
    paging_token: str
    type: str
    type_i: int | None = None
    source_account: str
    transaction_hash: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def details(self) -> dict[str, Any]:
        """Type-specific fields not covered by the common schema."""
        return dict(self.model_extra or {})


class Payment(Operation):
    """Payment-like operation (payment, path payment, account creation).

    Account creations carry ``starting_balance`` instead of an asset and
    amount, so those fields are optional.
    """

    from_account: str | None = Field(default=None, alias="from")
    to: str | None = None
    amount: Decimal | None = None
    asset: AnyAssetIdentifier | None = None
    starting_balance: Decimal | None = None

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def lift_identifier(cls, data: Any) -> Any:
        return lift_asset(data)
