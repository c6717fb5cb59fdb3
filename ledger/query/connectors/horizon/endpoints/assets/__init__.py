"""Asset endpoints."""

from . import collection

__all__ = ["collection"]
