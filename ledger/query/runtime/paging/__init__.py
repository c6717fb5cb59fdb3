"""Cursor pagination: lazy iterator, pager policy and telemetry."""

from .iterator import CursorIterator, IteratorState
from .pager import HORIZON_PAGE_LIMIT, Pager

__all__ = [
    "CursorIterator",
    "HORIZON_PAGE_LIMIT",
    "IteratorState",
    "Pager",
]
