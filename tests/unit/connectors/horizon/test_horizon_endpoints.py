"""Tests for the Horizon endpoint registry and configuration."""

import pytest

from ledger.query.connectors.horizon import (
    BASE_URLS,
    ENDPOINT_SPECS,
    HORIZON_PAGE_LIMIT,
    account_data,
    account_details,
    account_effects,
    account_offers,
    account_operations,
    account_payments,
    account_transactions,
    all_assets,
    all_transactions,
    get_base_url,
    get_spec,
    transaction_details,
)
from ledger.query.core import CapabilityError, Network
from ledger.query.models import Account, Asset, Datum, Effect, Offer, Operation, Payment, Transaction
from ledger.query.runtime.rest import EndpointCodec, ModelAdapter, RecordsAdapter

HOST = "https://horizon.stellar.org"
GA = "GBRPYHIL2CI3FNQ4BXLFMNDLFJUNPU2HY3ZMFSHONUCEOASW7QC7OX2H"


class TestConfig:
    def test_base_urls(self):
        assert get_base_url(Network.PUBLIC) == "https://horizon.stellar.org"
        assert get_base_url("testnet") == BASE_URLS[Network.TESTNET]

    def test_unknown_network(self):
        with pytest.raises(ValueError):
            get_base_url("mainnet")

    def test_page_ceiling(self):
        assert HORIZON_PAGE_LIMIT == 200


class TestRegistry:
    """Test every registered collection."""

    def test_ids_unique(self):
        ids = [spec.id for spec in ENDPOINT_SPECS]
        assert len(ids) == len(set(ids))

    def test_get_spec(self):
        assert get_spec("account_transactions") is account_transactions(GA).spec

    def test_get_spec_unknown(self):
        with pytest.raises(KeyError, match="Unknown endpoint"):
            get_spec("ledgers")

    @pytest.mark.parametrize(
        "endpoint,path,model",
        [
            (account_transactions(GA), f"accounts/{GA}/transactions", Transaction),
            (account_effects(GA), f"accounts/{GA}/effects", Effect),
            (account_operations(GA), f"accounts/{GA}/operations", Operation),
            (account_payments(GA), f"accounts/{GA}/payments", Payment),
            (account_offers(GA), f"accounts/{GA}/offers", Offer),
            (all_transactions(), "transactions", Transaction),
            (all_assets(), "assets", Asset),
        ],
    )
    def test_collections(self, endpoint, path, model):
        """Test paginated collections: path, capabilities and record model."""
        assert endpoint.path() == path
        assert endpoint.spec.paginated
        assert endpoint.spec.default_limit == 10
        assert isinstance(endpoint.spec.adapter, RecordsAdapter)
        assert endpoint.spec.adapter.model is model

    @pytest.mark.parametrize(
        "endpoint,path,model",
        [
            (account_details(GA), f"accounts/{GA}", Account),
            (account_data(GA, "config"), f"accounts/{GA}/data/config", Datum),
            (transaction_details("5a7c"), "transactions/5a7c", Transaction),
        ],
    )
    def test_single_resources(self, endpoint, path, model):
        """Test single resources accept no refinements."""
        assert endpoint.path() == path
        assert not endpoint.spec.paginated
        assert isinstance(endpoint.spec.adapter, ModelAdapter)
        assert endpoint.spec.adapter.model is model
        with pytest.raises(CapabilityError):
            endpoint.with_limit(5)

    @pytest.mark.parametrize(
        "endpoint",
        [
            account_details(GA),
            account_data(GA, "config"),
            account_transactions(GA).with_cursor("now").with_order("desc").with_limit(200),
            account_effects(GA).with_limit(1),
            account_operations(GA),
            account_payments(GA).with_order("asc"),
            account_offers(GA),
            all_transactions().with_cursor("12884905984"),
            transaction_details("5a7c"),
            all_assets().with_limit(50),
        ],
    )
    def test_registry_round_trip(self, endpoint):
        """Test every registered descriptor decodes back to itself."""
        codec = EndpointCodec(ENDPOINT_SPECS)
        assert codec.decode(codec.build_uri(endpoint, HOST)) == endpoint
