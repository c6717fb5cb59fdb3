"""Account and account data models."""

import base64
import binascii
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .asset import AnyAssetIdentifier, lift_asset


class Balance(BaseModel):
    """One asset balance held by an account."""

    balance: Decimal
    asset: AnyAssetIdentifier
    limit: Decimal | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def lift_identifier(cls, data: Any) -> Any:
        return lift_asset(data)


class Account(BaseModel):
    """Account details."""

    id: str = Field(..., min_length=1)
    sequence: int
    subentry_count: int = 0
    balances: list[Balance] = Field(default_factory=list)
    paging_token: str | None = None

    model_config = ConfigDict(frozen=True)


class Datum(BaseModel):
    """Single value of an account's key/value data.

    The service returns the value base64 encoded; it is decoded on load.
    """

    value: str

    model_config = ConfigDict(frozen=True)

    @field_validator("value", mode="before")
    @classmethod
    def decode_value(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("value must be a base64 string")
        try:
            return base64.b64decode(v, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"value is not base64 encoded UTF-8: {e}") from e
