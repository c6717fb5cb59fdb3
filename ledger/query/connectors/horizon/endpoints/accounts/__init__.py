"""Account endpoints."""

from . import data, details, effects, offers, operations, payments, transactions

__all__ = ["data", "details", "effects", "offers", "operations", "payments", "transactions"]
