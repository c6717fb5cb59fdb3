"""Transaction data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A transaction applied to the ledger."""

    id: str = Field(..., min_length=1)
    paging_token: str
    hash: str
    ledger: int = Field(..., ge=0)
    created_at: datetime
    source_account: str
    fee_charged: int | None = None
    operation_count: int = Field(default=0, ge=0)
    memo_type: str | None = None
    memo: str | None = None
    successful: bool = True

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
