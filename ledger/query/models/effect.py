"""Effect data models.

Effects are loosely typed on the wire: every effect shares a few common
fields and adds its own depending on ``type``. ``Effect`` keeps the extra
fields, and typed views such as ``TrustlineAuthorized`` are built from it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .asset import AnyAssetIdentifier, AssetIdentifier


class Effect(BaseModel):
    """A change to the ledger caused by an operation."""

    id: str = Field(..., min_length=1)
    paging_token: str
    account: str
    type: str
    type_i: int | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def details(self) -> dict[str, Any]:
        """Type-specific fields not covered by the common schema."""
        return dict(self.model_extra or {})


class TrustlineAuthorized(BaseModel):
    """An issuer now allows an account to hold its asset."""

    account: str
    asset: AnyAssetIdentifier

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_effect(cls, effect: Effect) -> TrustlineAuthorized:
        """Build the typed view of a ``trustline_authorized`` effect.

        The effect's ``account`` is the issuer and ``trustor`` the holder.

        Raises:
            ValueError: If the effect has another type
        """
        if effect.type != "trustline_authorized":
            raise ValueError(f"Expected a trustline_authorized effect, got {effect.type!r}")
        details = effect.details
        asset = AssetIdentifier.parse(
            {
                "asset_type": details.get("asset_type"),
                "asset_code": details.get("asset_code"),
                "asset_issuer": details.get("asset_issuer", effect.account),
            }
        )
        return cls(account=details.get("trustor", effect.account), asset=asset)
