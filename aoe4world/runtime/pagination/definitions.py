"""Pagination policy, plan and result structures.

This module defines the data structures used to describe how a paginated
endpoint is walked, and the extractor that splits a decoded page into its
items and metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from ...config import DEFAULT_CONCURRENCY, DEFAULT_ITEMS_PER_PAGE
from ...core.exceptions import FetchError
from ...models.pagination import Pagination


@dataclass(frozen=True)
class PagePolicy:
    """Pagination policy for one paginated fetch.

    Attributes:
        items_per_page: Page size requested from the server (``limit`` parameter)
        concurrency: Maximum number of page fetches in flight or buffered
        max_pages: Hard cap on the number of pages planned (None = unlimited)
    """

    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    concurrency: int = DEFAULT_CONCURRENCY
    max_pages: int | None = None

    def __post_init__(self) -> None:
        """Validate pagination policy configuration."""
        if self.items_per_page <= 0:
            raise ValueError("items_per_page must be positive")
        if self.concurrency <= 0:
            raise ValueError("concurrency must be positive")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError("max_pages must be positive when set")


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single page request.

    Attributes:
        page: One-based page index sent as the ``page`` parameter
        limit: Page size sent as the ``limit`` parameter
    """

    page: int
    limit: int


@dataclass(frozen=True)
class FetchFailure:
    """Marker emitted in place of a page that failed to fetch or decode.

    It is the last element of the sequence it appears in.
    """

    page: int
    error: FetchError


class Termination(str, Enum):
    """Why a paginated fetch stopped."""

    EMPTY = "empty"
    LIMIT_REACHED = "limit_reached"
    TOTAL_COUNT = "total_count"
    SHORT_PAGE = "short_page"
    PLAN_EXHAUSTED = "plan_exhausted"
    FAILURE = "failure"
    ABANDONED = "abandoned"


@dataclass
class PaginationStats:
    """Bookkeeping for one paginated fetch.

    Attributes:
        pages_planned: Number of pages the planner produced
        pages_dispatched: Number of page fetches started
        pages_fetched: Number of pages decoded and consumed
        items_emitted: Number of items yielded to the caller
        termination: Why the fetch stopped (None while running)
        failed_page: Page index that failed, if any
    """

    pages_planned: int = 0
    pages_dispatched: int = 0
    pages_fetched: int = 0
    items_emitted: int = 0
    termination: Termination | None = None
    failed_page: int | None = None


class Paginated(Protocol):
    """A decoded page: pagination metadata plus an ordered item list."""

    @property
    def pagination(self) -> Pagination: ...

    def items(self) -> list[Any]: ...


def extract_page(page: Paginated) -> tuple[list[Any], Pagination]:
    """Split a decoded page into its items and pagination metadata.

    Args:
        page: Decoded page

    Returns:
        Tuple of (items in API order, pagination metadata)
    """
    return page.items(), page.pagination
