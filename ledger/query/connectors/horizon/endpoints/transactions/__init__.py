"""Transaction endpoints."""

from . import collection, details

__all__ = ["collection", "details"]
