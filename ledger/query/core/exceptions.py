"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .query import QueryCapability


class LedgerQueryError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidUriError(LedgerQueryError):
    """Request URI could not be constructed from an endpoint descriptor."""

    def __init__(self, message: str, uri: str | None = None) -> None:
        super().__init__(message)
        self.uri = uri


class InvalidPathError(LedgerQueryError):
    """URI path does not match any known collection template."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ParamParseError(LedgerQueryError):
    """Query parameter value failed type conversion.

    Raised by the parameter parsers. A lenient codec catches it and treats
    the parameter as absent; a strict codec lets it propagate from ``decode``.
    """

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Cannot parse query parameter {name}={value!r}")
        self.name = name
        self.value = value


class TransportError(LedgerQueryError):
    """Network or HTTP-layer failure reported by the transport."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(LedgerQueryError):
    """Response body did not match the expected schema."""

    pass


class CapabilityError(LedgerQueryError):
    """Endpoint does not support the requested query capability."""

    def __init__(
        self,
        message: str,
        endpoint_id: str | None = None,
        capability: QueryCapability | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint_id = endpoint_id
        self.capability = capability
