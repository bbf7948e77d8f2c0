"""Pagination engine for multi-page endpoints.

This module turns a requested item count into page requests, fetches them
with bounded concurrency and flattens them into one ordered item sequence.

Architecture:
    The pagination layer consists of:
    - definitions.py: Policy, plan and result structures plus the page extractor
    - planners.py: Page planning (how many pages a limit needs)
    - executors.py: Concurrent execution with in-order emission
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import (
    FetchFailure,
    PagePlan,
    PagePolicy,
    Paginated,
    PaginationStats,
    Termination,
    extract_page,
)
from .executors import FetchPage, PageExecutor
from .planners import PagePlanner

__all__ = [
    "FetchFailure",
    "FetchPage",
    "PageExecutor",
    "PagePlan",
    "PagePlanner",
    "PagePolicy",
    "Paginated",
    "PaginationStats",
    "Termination",
    "extract_page",
]
