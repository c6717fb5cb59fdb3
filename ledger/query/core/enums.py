"""Core enumerations shared by the codec, the resources and the connector.

Key Types:
    - Order: Result ordering accepted by every paginated collection
    - AssetType: Discriminant of the asset identifier variants
    - Network: Known ledger networks with a public query service
"""

from enum import Enum


class Order(str, Enum):
    """Direction a paginated collection is walked in.

    The enum value is the exact wire token used in the ``order`` query
    parameter.
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_str(cls, value: str) -> "Order | None":
        """Parse a wire token, returning None for anything unknown.

        Args:
            value: Raw query parameter value

        Returns:
            Matching Order or None
        """
        for member in cls:
            if member.value == value:
                return member
        return None

    def __str__(self) -> str:
        return self.value


class AssetType(str, Enum):
    """Asset identifier discriminant as it appears in ``asset_type``."""

    NATIVE = "native"
    CREDIT_ALPHANUM4 = "credit_alphanum4"
    CREDIT_ALPHANUM12 = "credit_alphanum12"


class Network(str, Enum):
    """Ledger network served by a query service host."""

    PUBLIC = "public"
    TESTNET = "testnet"
