"""Service connectors."""

from .horizon import HorizonClient

__all__ = ["HorizonClient"]
