"""Tests for resource models decoded from service records."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledger.query.models import (
    Account,
    Asset,
    CreditAlphanum4,
    Datum,
    Effect,
    NativeAsset,
    Offer,
    Operation,
    Payment,
    Transaction,
    TrustlineAuthorized,
)

ISSUER = "GDUKMGUGDZQK6YHYA5Z6AY2G4XDSZPSZ3SW5UN3ARVMO6QSRDWP5YLEX"
ACCOUNT = "GBRPYHIL2CI3FNQ4BXLFMNDLFJUNPU2HY3ZMFSHONUCEOASW7QC7OX2H"


class TestAccount:
    """Test account details and data."""

    def test_account_with_balances(self):
        account = Account.model_validate(
            {
                "id": ACCOUNT,
                "sequence": "3298702387052545",
                "subentry_count": 1,
                "paging_token": ACCOUNT,
                "balances": [
                    {
                        "balance": "100.5000000",
                        "limit": "922337203685.4775807",
                        "asset_type": "credit_alphanum4",
                        "asset_code": "USD",
                        "asset_issuer": ISSUER,
                    },
                    {"balance": "9999.9999900", "asset_type": "native"},
                ],
            }
        )
        assert account.sequence == 3298702387052545
        usd, native = account.balances
        assert usd.asset == CreditAlphanum4(asset_code="USD", asset_issuer=ISSUER)
        assert usd.balance == Decimal("100.5000000")
        assert native.asset == NativeAsset()
        assert native.limit is None

    def test_datum_decodes_base64(self):
        assert Datum.model_validate({"value": "MTAw"}).value == "100"

    def test_datum_rejects_non_base64(self):
        with pytest.raises(ValidationError):
            Datum.model_validate({"value": "not base64!"})


class TestTransaction:
    def test_fields(self):
        txn = Transaction.model_validate(
            {
                "id": "5a7c",
                "paging_token": "12884905984",
                "hash": "5a7c",
                "ledger": 3,
                "created_at": "2015-09-30T17:15:54Z",
                "source_account": ACCOUNT,
                "fee_charged": "100",
                "operation_count": 1,
                "memo_type": "none",
                "successful": True,
            }
        )
        assert txn.created_at == datetime(2015, 9, 30, 17, 15, 54, tzinfo=timezone.utc)
        assert txn.fee_charged == 100
        assert txn.memo is None

    def test_negative_ledger_rejected(self):
        with pytest.raises(ValidationError):
            Transaction.model_validate(
                {
                    "id": "x",
                    "paging_token": "1",
                    "hash": "x",
                    "ledger": -1,
                    "created_at": "2015-09-30T17:15:54Z",
                    "source_account": ACCOUNT,
                }
            )


class TestEffects:
    """Test loosely typed effects and their typed views."""

    @pytest.fixture
    def trustline_effect(self):
        return Effect.model_validate(
            {
                "id": "0000000012884905986-0000000002",
                "paging_token": "12884905986-2",
                "account": ISSUER,
                "type": "trustline_authorized",
                "type_i": 23,
                "trustor": ACCOUNT,
                "asset_type": "credit_alphanum4",
                "asset_code": "USD",
            }
        )

    def test_extra_fields_kept(self, trustline_effect):
        assert trustline_effect.details["trustor"] == ACCOUNT
        assert "id" not in trustline_effect.details

    def test_trustline_authorized(self, trustline_effect):
        view = TrustlineAuthorized.from_effect(trustline_effect)
        assert view.account == ACCOUNT
        assert view.asset == CreditAlphanum4(asset_code="USD", asset_issuer=ISSUER)

    def test_trustline_wrong_type(self):
        effect = Effect(id="1", paging_token="1", account=ACCOUNT, type="account_created")
        with pytest.raises(ValueError, match="trustline_authorized"):
            TrustlineAuthorized.from_effect(effect)


class TestOperations:
    """Test operations and payments."""

    def test_payment(self):
        payment = Payment.model_validate(
            {
                "id": "12884905985",
                "paging_token": "12884905985",
                "type": "payment",
                "type_i": 1,
                "source_account": ISSUER,
                "from": ISSUER,
                "to": ACCOUNT,
                "amount": "50.0000000",
                "asset_type": "credit_alphanum4",
                "asset_code": "USD",
                "asset_issuer": ISSUER,
            }
        )
        assert payment.from_account == ISSUER
        assert payment.amount == Decimal("50")
        assert payment.asset == CreditAlphanum4(asset_code="USD", asset_issuer=ISSUER)

    def test_create_account_as_payment(self):
        payment = Payment.model_validate(
            {
                "id": "1",
                "paging_token": "1",
                "type": "create_account",
                "source_account": ISSUER,
                "starting_balance": "20.0000000",
                "funder": ISSUER,
                "account": ACCOUNT,
            }
        )
        assert payment.asset is None
        assert payment.starting_balance == Decimal("20")
        assert payment.details["funder"] == ISSUER

    def test_operation_details(self):
        op = Operation.model_validate(
            {
                "id": "1",
                "paging_token": "1",
                "type": "set_options",
                "source_account": ACCOUNT,
                "home_domain": "example.org",
            }
        )
        assert op.details == {"home_domain": "example.org"}


class TestOfferAndAsset:
    def test_offer(self):
        offer = Offer.model_validate(
            {
                "id": 104,
                "paging_token": "104",
                "seller": ACCOUNT,
                "selling": {"asset_type": "native"},
                "buying": {"asset_type": "credit_alphanum4", "asset_code": "USD", "asset_issuer": ISSUER},
                "amount": "10.0000000",
                "price": "0.5000000",
            }
        )
        assert offer.id == "104"
        assert offer.selling.is_native
        assert offer.buying.code == "USD"
        assert offer.price == Decimal("0.5")

    def test_asset_stats(self):
        asset = Asset.model_validate(
            {
                "asset_type": "credit_alphanum12",
                "asset_code": "LONGERCODE",
                "asset_issuer": ISSUER,
                "amount": "1000.0000000",
                "num_accounts": 3,
                "flags": {"auth_required": True, "auth_revocable": False},
                "paging_token": f"LONGERCODE_{ISSUER}_credit_alphanum12",
            }
        )
        assert asset.asset_type == "credit_alphanum12"
        assert asset.code == "LONGERCODE"
        assert asset.is_auth_required
        assert not asset.is_auth_revocable

    def test_asset_negative_amount(self):
        with pytest.raises(ValidationError):
            Asset.model_validate(
                {"asset_type": "native", "amount": "-1", "num_accounts": 0}
            )
