"""Shared Horizon connector constants.

This module centralizes the service URLs and page-size limits used by the
endpoint definitions, the client and the CLI.
"""

from __future__ import annotations

from ledger.query.core import Network

# Public query service hosts
BASE_URLS = {
    Network.PUBLIC: "https://horizon.stellar.org",
    Network.TESTNET: "https://horizon-testnet.stellar.org",
}

# Page size the service uses when no limit is sent
DEFAULT_PAGE_LIMIT = 10
# Largest page size the service accepts
MAX_PAGE_LIMIT = 200
# Ceiling the Pager applies to every request
HORIZON_PAGE_LIMIT = MAX_PAGE_LIMIT

DEFAULT_TIMEOUT = 30.0


def get_base_url(network: Network | str = Network.PUBLIC) -> str:
    """Get the query service base URL for a network.

    Args:
        network: Network enum or its string value

    Returns:
        Base URL string

    Examples:
        >>> get_base_url(Network.TESTNET)
        'https://horizon-testnet.stellar.org'
    """
    return BASE_URLS[Network(network)]
