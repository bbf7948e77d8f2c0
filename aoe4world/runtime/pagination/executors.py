"""Page execution logic for fetching pages concurrently and emitting them in order.

This module provides the PageExecutor class that runs a page plan with a
bounded number of concurrent fetches and flattens the pages into a single
ordered sequence of items.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from time import perf_counter
from typing import Any

from ...core.exceptions import FetchError
from .definitions import (
    FetchFailure,
    PagePlan,
    PagePolicy,
    Paginated,
    PaginationStats,
    Termination,
    extract_page,
)
from .planners import PagePlanner
from .telemetry import (
    log_page_error,
    log_page_fetched,
    log_page_inconsistent,
    log_pagination_complete,
)

FetchPage = Callable[[PagePlan], Awaitable[Paginated]]


class PageExecutor:
    """Executes page plans and emits items in ascending page order.

    Pages are dispatched in ascending order as ``asyncio`` tasks, with at most
    ``policy.concurrency`` tasks outstanding. Each dispatched page owns a slot
    keyed by its plan position; slots are drained from the lowest position
    forward, so a page that completes early waits in its slot until every
    earlier page has been emitted. A drained slot frees room for the next
    dispatch, which bounds buffering to the concurrency window.

    An executor serves a single paginated fetch; ``stats`` describes it.
    """

    def __init__(self, policy: PagePolicy, *, endpoint_id: str = "unknown") -> None:
        """Initialize page executor.

        Args:
            policy: Pagination policy for the fetch
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._policy = policy
        self._endpoint_id = endpoint_id
        self.stats = PaginationStats()

    def fetch_items(self, fetch_page: FetchPage, *, total_limit: int) -> AsyncIterator[Any]:
        """Plan and stream up to ``total_limit`` items.

        Args:
            fetch_page: Async function fetching and decoding one planned page
            total_limit: Maximum number of items to emit

        Returns:
            Async iterator of items, ending with a ``FetchFailure`` if a page failed
        """
        planner = PagePlanner(self._policy, endpoint_id=self._endpoint_id)
        plans = planner.plan(total_limit)
        return self.stream(plans=plans, fetch_page=fetch_page, total_limit=total_limit)

    async def stream(
        self,
        *,
        plans: list[PagePlan],
        fetch_page: FetchPage,
        total_limit: int,
    ) -> AsyncIterator[Any]:
        """Execute page plans and yield their items in order.

        Args:
            plans: Page plans in ascending page order
            fetch_page: Async function fetching and decoding one planned page
            total_limit: Maximum number of items to emit

        Yields:
            Items in (page, in-page index) order; a single ``FetchFailure`` in
            place of the first page that failed, after which the stream ends
        """
        stats = self.stats
        stats.pages_planned = len(plans)

        if not plans or total_limit <= 0:
            stats.termination = Termination.EMPTY
            log_pagination_complete(endpoint_id=self._endpoint_id, stats=stats)
            return

        slots: dict[int, asyncio.Task[tuple[Paginated, float]]] = {}
        next_dispatch = 0
        emitted = 0

        try:
            for position, plan in enumerate(plans):
                while next_dispatch < len(plans) and len(slots) < self._policy.concurrency:
                    slots[next_dispatch] = asyncio.create_task(
                        self._fetch(fetch_page, plans[next_dispatch]),
                        name=f"{self._endpoint_id}-page-{plans[next_dispatch].page}",
                    )
                    next_dispatch += 1
                    stats.pages_dispatched += 1

                task = slots.pop(position)
                try:
                    page, latency_ms = await task
                except FetchError as e:
                    if e.page is None:
                        e.page = plan.page
                    stats.termination = Termination.FAILURE
                    stats.failed_page = plan.page
                    log_page_error(
                        endpoint_id=self._endpoint_id,
                        page=plan.page,
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                    yield FetchFailure(page=plan.page, error=e)
                    return

                items, meta = extract_page(page)
                stats.pages_fetched += 1
                log_page_fetched(
                    endpoint_id=self._endpoint_id,
                    page=plan.page,
                    items=len(items),
                    total_count=meta.total_count,
                    latency_ms=latency_ms,
                )
                if not meta.is_consistent():
                    log_page_inconsistent(
                        endpoint_id=self._endpoint_id,
                        page=plan.page,
                        details=meta.model_dump(),
                    )

                # Trim the page that would overshoot the limit
                for item in items[: total_limit - emitted]:
                    emitted += 1
                    stats.items_emitted = emitted
                    yield item

                if emitted >= total_limit:
                    stats.termination = Termination.LIMIT_REACHED
                    return
                if meta.is_last_page(len(items), plan.limit):
                    stats.termination = (
                        Termination.TOTAL_COUNT
                        if meta.total_count is not None
                        else Termination.SHORT_PAGE
                    )
                    return

            stats.termination = Termination.PLAN_EXHAUSTED
        finally:
            if stats.termination is None:
                stats.termination = Termination.ABANDONED
            await self._cancel(slots)
            log_pagination_complete(endpoint_id=self._endpoint_id, stats=stats)

    @staticmethod
    async def _fetch(fetch_page: FetchPage, plan: PagePlan) -> tuple[Paginated, float]:
        start = perf_counter()
        page = await fetch_page(plan)
        return page, (perf_counter() - start) * 1000.0

    @staticmethod
    async def _cancel(slots: dict[int, asyncio.Task[Any]]) -> None:
        """Cancel pages dispatched past the termination point and wait for them."""
        if not slots:
            return
        for task in slots.values():
            task.cancel()
        # Results and errors of discarded pages are not reported
        await asyncio.gather(*slots.values(), return_exceptions=True)
        slots.clear()
