"""Structured logging for pagination.

This module provides telemetry hooks for paginated fetches, emitting
structured logs with short event names and the details in ``extra``.
"""

from __future__ import annotations

import logging

from .definitions import PaginationStats

logger = logging.getLogger(__name__)


def log_pagination_plan(
    *,
    endpoint_id: str,
    total_pages: int,
    total_limit: int,
    items_per_page: int,
    concurrency: int,
) -> None:
    """Log page plan creation."""
    logger.debug(
        "pagination_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_pages": total_pages,
            "total_limit": total_limit,
            "items_per_page": items_per_page,
            "concurrency": concurrency,
        },
    )


def log_page_fetched(
    *,
    endpoint_id: str,
    page: int,
    items: int,
    total_count: int | None,
    latency_ms: float | None = None,
) -> None:
    """Log a page that was fetched and decoded.

    Args:
        endpoint_id: Endpoint identifier
        page: One-based page index
        items: Number of items decoded from the page
        total_count: Total reported by the server, if any
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "items": items,
            "total_count": total_count,
            "latency_ms": latency_ms,
        },
    )


def log_page_inconsistent(*, endpoint_id: str, page: int, details: dict[str, object]) -> None:
    """Log pagination metadata that violates count/offset/total invariants."""
    logger.warning(
        "page_metadata_inconsistent",
        extra={"endpoint_id": endpoint_id, "page": page, **details},
    )


def log_page_error(
    *,
    endpoint_id: str,
    page: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch that failed.

    Args:
        endpoint_id: Endpoint identifier
        page: One-based page index that failed
        error_type: Exception class name (e.g. "TransportError", "DecodeError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(*, endpoint_id: str, stats: PaginationStats) -> None:
    """Log the end of a paginated fetch."""
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_planned": stats.pages_planned,
            "pages_dispatched": stats.pages_dispatched,
            "pages_fetched": stats.pages_fetched,
            "items_emitted": stats.items_emitted,
            "termination": stats.termination.value if stats.termination else None,
            "failed_page": stats.failed_page,
        },
    )
