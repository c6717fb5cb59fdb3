"""Asset identifier and asset resource models.

An asset identifier is a closed set of variants discriminated by the
``asset_type`` tag. ``native`` carries nothing else; the two credit variants
carry both ``asset_code`` and ``asset_issuer``. Encoding omits absent fields
instead of emitting nulls.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from ..core.enums import AssetType

NATIVE_CODE = "XLM"
NATIVE_ISSUER = "Stellar Foundation"


class AssetIdentifier(BaseModel):
    """Base class of the asset identifier variants."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    asset_type: str

    @property
    def type(self) -> AssetType:
        return AssetType(self.asset_type)

    @property
    def is_native(self) -> bool:
        return False

    @property
    def code(self) -> str:
        raise NotImplementedError

    @property
    def issuer(self) -> str:
        raise NotImplementedError

    def encode(self) -> dict[str, str]:
        """Wire representation, absent fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def parse(cls, data: Any) -> AssetIdentifier:
        """Decode a tagged wire object into the matching variant.

        Raises:
            pydantic.ValidationError: On an unknown tag or missing code/issuer
        """
        return _IDENTIFIER_ADAPTER.validate_python(data)

    @staticmethod
    def native() -> NativeAsset:
        return NativeAsset()

    @staticmethod
    def alphanum4(code: str, issuer: str) -> CreditAlphanum4:
        return CreditAlphanum4(asset_code=code, asset_issuer=issuer)

    @staticmethod
    def alphanum12(code: str, issuer: str) -> CreditAlphanum12:
        return CreditAlphanum12(asset_code=code, asset_issuer=issuer)


class NativeAsset(AssetIdentifier):
    """The network's native lumen."""

    asset_type: Literal["native"] = "native"

    @model_validator(mode="before")
    @classmethod
    def reject_companions(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for key in ("asset_code", "asset_issuer"):
                if data.get(key) is not None:
                    raise ValueError(f"native asset must not carry {key}")
        return data

    @property
    def is_native(self) -> bool:
        return True

    @property
    def code(self) -> str:
        return NATIVE_CODE

    @property
    def issuer(self) -> str:
        return NATIVE_ISSUER

    @property
    def asset_code(self) -> None:
        return None

    @property
    def asset_issuer(self) -> None:
        return None


class CreditAsset(AssetIdentifier):
    """Issued asset identified by code and issuing account."""

    asset_code: str = Field(..., min_length=1)
    asset_issuer: str = Field(..., min_length=1)

    @property
    def code(self) -> str:
        return self.asset_code

    @property
    def issuer(self) -> str:
        return self.asset_issuer


class CreditAlphanum4(CreditAsset):
    """Credit asset with a code of up to 4 characters."""

    asset_type: Literal["credit_alphanum4"] = "credit_alphanum4"


class CreditAlphanum12(CreditAsset):
    """Credit asset with a code of up to 12 characters."""

    asset_type: Literal["credit_alphanum12"] = "credit_alphanum12"


AnyAssetIdentifier = Annotated[
    Union[NativeAsset, CreditAlphanum4, CreditAlphanum12],
    Field(discriminator="asset_type"),
]

_IDENTIFIER_ADAPTER: TypeAdapter[AssetIdentifier] = TypeAdapter(AnyAssetIdentifier)


def lift_asset(data: Any, field: str = "asset", prefix: str = "") -> Any:
    """Gather flattened ``{prefix}asset_*`` keys into a nested identifier.

    Many records inline the identifier next to their own fields. Used from
    ``mode="before"`` validators; non-dict input and input that already has
    ``field`` is returned untouched.
    """
    type_key = f"{prefix}asset_type"
    if not isinstance(data, dict) or field in data or type_key not in data:
        return data
    out = dict(data)
    asset: dict[str, Any] = {"asset_type": out.pop(type_key)}
    for key in ("asset_code", "asset_issuer"):
        value = out.pop(f"{prefix}{key}", None)
        if value is not None:
            asset[key] = value
    out[field] = asset
    return out


class Flags(BaseModel):
    """Issuer controls over who may hold an asset."""

    auth_required: bool = False
    auth_revocable: bool = False

    model_config = ConfigDict(frozen=True)


class Asset(BaseModel):
    """Asset statistics as returned by the assets collection."""

    identifier: AnyAssetIdentifier
    amount: Decimal = Field(..., ge=0)
    num_accounts: int = Field(..., ge=0)
    flags: Flags = Field(default_factory=Flags)
    paging_token: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def lift_identifier(cls, data: Any) -> Any:
        return lift_asset(data, field="identifier")

    @property
    def asset_type(self) -> str:
        return self.identifier.asset_type

    @property
    def code(self) -> str:
        return self.identifier.code

    @property
    def issuer(self) -> str:
        return self.identifier.issuer

    @property
    def is_auth_required(self) -> bool:
        return self.flags.auth_required

    @property
    def is_auth_revocable(self) -> bool:
        return self.flags.auth_revocable
