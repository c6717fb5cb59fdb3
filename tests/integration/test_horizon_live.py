"""Integration tests against the public Horizon testnet."""

import pytest

from ledger.query.connectors.horizon import all_transactions
from ledger.query.core import Order
from ledger.query.models import Transaction
from ledger.query.runtime.paging import IteratorState, Pager

pytestmark = pytest.mark.integration


class TestHorizonLive:
    """Walk real collections."""

    @pytest.mark.asyncio
    async def test_latest_transactions(self, testnet_client):
        endpoint = all_transactions().with_order(Order.DESC).with_limit(5)
        page = await testnet_client.fetch_page(endpoint)
        assert len(page.records) == 5
        assert all(isinstance(t, Transaction) for t in page.records)
        assert page.next_cursor == page.records[-1].paging_token

    @pytest.mark.asyncio
    async def test_cursor_walk_crosses_pages(self, testnet_client):
        """Test three small pages come back in strictly descending order."""
        endpoint = all_transactions().with_order(Order.DESC).with_limit(3)
        iterator = testnet_client.iterate(endpoint)
        seen = []
        async for txn in iterator:
            seen.append(int(txn.paging_token))
            if len(seen) == 9:
                break
        assert iterator.pages_fetched == 3
        assert seen == sorted(seen, reverse=True)
        assert len(set(seen)) == 9

    @pytest.mark.asyncio
    async def test_pager_limit(self, testnet_client):
        seen = []
        count = await testnet_client.paginate(all_transactions(), seen.append, pager=Pager(limit=7))
        assert count == 7
        assert all(isinstance(t, Transaction) for t in seen)

    @pytest.mark.asyncio
    async def test_iterator_state_after_break(self, testnet_client):
        iterator = testnet_client.iterate(all_transactions().with_limit(2))
        await iterator.__anext__()
        assert iterator.state is IteratorState.BUFFERED
