"""Structured logging for pagination.

This module provides telemetry hooks for page fetches, emitting structured
logs with snake_case event names and ``extra`` payloads.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    records: int,
    next_cursor: str | None,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page within the walk
        records: Number of records on the page
        next_cursor: Cursor of the following page (None at end of data)
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "records": records,
            "next_cursor": next_cursor,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.warning(
        "page_fetch_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(*, endpoint_id: str, pages: int, records: int, state: str) -> None:
    """Log the end of a walk, whether exhausted or failed."""
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages": pages,
            "records": records,
            "state": state,
        },
    )
