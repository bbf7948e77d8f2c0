"""Page planning logic.

This module provides the PagePlanner class that determines which pages a
request for a number of items needs.
"""

from __future__ import annotations

from .definitions import PagePlan, PagePolicy
from .telemetry import log_pagination_plan


class PagePlanner:
    """Plans page requests for a paginated fetch.

    Pages are planned from the requested item count alone. The server's
    ``total_count`` is not known at planning time; the executor consults it
    to stop early.
    """

    def __init__(self, policy: PagePolicy, *, endpoint_id: str = "unknown") -> None:
        self._policy = policy
        self._endpoint_id = endpoint_id

    def pages_needed(self, total_limit: int) -> int:
        """Ceiling of total_limit / items_per_page, capped by max_pages."""
        if total_limit < 0:
            raise ValueError("total_limit must not be negative")
        pages = -(-total_limit // self._policy.items_per_page)
        if self._policy.max_pages is not None:
            pages = min(pages, self._policy.max_pages)
        return pages

    def plan(self, total_limit: int) -> list[PagePlan]:
        """Plan pages for a request.

        Args:
            total_limit: Total number of items requested

        Returns:
            One plan per page, in ascending page order; empty for a zero limit

        Raises:
            ValueError: If total_limit is negative
        """
        plans = [
            PagePlan(page=index, limit=self._policy.items_per_page)
            for index in range(1, self.pages_needed(total_limit) + 1)
        ]

        log_pagination_plan(
            endpoint_id=self._endpoint_id,
            total_pages=len(plans),
            total_limit=total_limit,
            items_per_page=self._policy.items_per_page,
            concurrency=self._policy.concurrency,
        )

        return plans
