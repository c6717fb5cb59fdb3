"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from ledger.query.connectors.horizon import HorizonClient

# Skip all integration tests unless RUN_LEDGER_NETWORK_TESTS=1
NETWORK_TESTS_ENABLED = os.environ.get("RUN_LEDGER_NETWORK_TESTS") == "1"


def pytest_collection_modifyitems(config, items):
    if NETWORK_TESTS_ENABLED:
        return
    skip = pytest.mark.skip(reason="Requires network access. Set RUN_LEDGER_NETWORK_TESTS=1 to run")
    for item in items:
        if "integration" in item.nodeid.split("/"):
            item.add_marker(skip)


@pytest_asyncio.fixture
async def testnet_client():
    async with HorizonClient.testnet() as client:
        yield client
