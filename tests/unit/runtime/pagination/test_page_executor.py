"""Unit tests for concurrent page execution and ordered emission."""

from __future__ import annotations

import asyncio
import logging

import pytest

from aoe4world.core.exceptions import DecodeError, TransportError
from aoe4world.runtime.pagination import (
    FetchFailure,
    PageExecutor,
    PagePlan,
    PagePlanner,
    PagePolicy,
    Termination,
)


async def drain(iterator):
    return [item async for item in iterator]


class TestPageExecutor:
    """Test PageExecutor functionality."""

    @pytest.mark.asyncio
    async def test_zero_limit_fetches_nothing(self, make_page):
        calls = []

        async def fetch_page(plan: PagePlan):
            calls.append(plan.page)
            return make_page(plan.page)

        executor = PageExecutor(PagePolicy())
        results = await drain(executor.fetch_items(fetch_page, total_limit=0))

        assert results == []
        assert calls == []
        assert executor.stats.termination == Termination.EMPTY

    @pytest.mark.asyncio
    async def test_limit_within_one_page_fetches_once(self, make_page):
        calls = []

        async def fetch_page(plan: PagePlan):
            calls.append(plan.page)
            return make_page(plan.page)

        executor = PageExecutor(PagePolicy(items_per_page=50))
        results = await drain(executor.fetch_items(fetch_page, total_limit=30))

        assert calls == [1]
        assert results == [(1, i) for i in range(30)]
        assert executor.stats.termination == Termination.LIMIT_REACHED

    @pytest.mark.asyncio
    async def test_exact_multiple_of_page_size(self, make_page):
        calls = []

        async def fetch_page(plan: PagePlan):
            calls.append(plan.page)
            return make_page(plan.page, available=100)

        executor = PageExecutor(PagePolicy(items_per_page=50))
        results = await drain(executor.fetch_items(fetch_page, total_limit=100))

        assert sorted(calls) == [1, 2]
        assert len(results) == 100
        assert not any(isinstance(r, FetchFailure) for r in results)
        assert executor.stats.items_emitted == 100

    @pytest.mark.asyncio
    async def test_last_page_trimmed_to_limit(self, make_page):
        async def fetch_page(plan: PagePlan):
            return make_page(plan.page)

        executor = PageExecutor(PagePolicy(items_per_page=50))
        results = await drain(executor.fetch_items(fetch_page, total_limit=120))

        assert len(results) == 120
        assert results[-1] == (3, 19)
        assert executor.stats.pages_planned == 3

    @pytest.mark.asyncio
    async def test_out_of_order_completion_emits_in_page_order(self, make_page):
        """Later pages finishing first must not change emission order."""
        delays = {1: 0.05, 2: 0.03, 3: 0.01, 4: 0.0}

        async def fetch_page(plan: PagePlan):
            await asyncio.sleep(delays[plan.page])
            return make_page(plan.page, per_page=10)

        executor = PageExecutor(PagePolicy(items_per_page=10, concurrency=4))
        results = await drain(executor.fetch_items(fetch_page, total_limit=40))

        assert results == [(page, i) for page in range(1, 5) for i in range(10)]

    @pytest.mark.asyncio
    async def test_failure_emits_earlier_items_then_marker(self, make_page):
        error = TransportError("connection reset")

        async def fetch_page(plan: PagePlan):
            if plan.page == 3:
                raise error
            return make_page(plan.page, per_page=10)

        executor = PageExecutor(PagePolicy(items_per_page=10, concurrency=8))
        results = await drain(executor.fetch_items(fetch_page, total_limit=50))

        assert results[:-1] == [(page, i) for page in (1, 2) for i in range(10)]
        marker = results[-1]
        assert isinstance(marker, FetchFailure)
        assert marker.page == 3
        assert marker.error is error
        assert error.page == 3
        assert sum(isinstance(r, FetchFailure) for r in results) == 1
        assert executor.stats.termination == Termination.FAILURE
        assert executor.stats.failed_page == 3

    @pytest.mark.asyncio
    async def test_error_page_is_kept_when_already_set(self, make_page):
        async def fetch_page(plan: PagePlan):
            raise DecodeError("bad body", page=7)

        executor = PageExecutor(PagePolicy(items_per_page=10))
        results = await drain(executor.fetch_items(fetch_page, total_limit=10))

        assert len(results) == 1
        assert results[0].page == 1
        assert results[0].error.page == 7

    @pytest.mark.asyncio
    async def test_first_page_failure_yields_only_marker(self, make_page):
        async def fetch_page(plan: PagePlan):
            raise TransportError("dns failure")

        executor = PageExecutor(PagePolicy())
        results = await drain(executor.fetch_items(fetch_page, total_limit=200))

        assert len(results) == 1
        assert isinstance(results[0], FetchFailure)

    @pytest.mark.asyncio
    async def test_stops_at_total_count(self, make_page):
        calls = []

        async def fetch_page(plan: PagePlan):
            calls.append(plan.page)
            return make_page(plan.page, available=120)

        executor = PageExecutor(PagePolicy(items_per_page=50, concurrency=1))
        results = await drain(executor.fetch_items(fetch_page, total_limit=500))

        assert calls == [1, 2, 3]
        assert len(results) == 120
        assert executor.stats.termination == Termination.TOTAL_COUNT

    @pytest.mark.asyncio
    async def test_stops_at_short_page_without_total(self, make_page):
        calls = []

        async def fetch_page(plan: PagePlan):
            calls.append(plan.page)
            return make_page(plan.page, available=60, report_total=False)

        executor = PageExecutor(PagePolicy(items_per_page=50, concurrency=1))
        results = await drain(executor.fetch_items(fetch_page, total_limit=500))

        assert calls == [1, 2]
        assert len(results) == 60
        assert executor.stats.termination == Termination.SHORT_PAGE

    @pytest.mark.asyncio
    async def test_empty_listing(self, make_page):
        async def fetch_page(plan: PagePlan):
            return make_page(plan.page, available=0)

        executor = PageExecutor(PagePolicy(concurrency=1))
        results = await drain(executor.fetch_items(fetch_page, total_limit=100))

        assert results == []
        assert executor.stats.termination == Termination.TOTAL_COUNT

    @pytest.mark.asyncio
    async def test_plan_exhausted_by_max_pages(self, make_page):
        async def fetch_page(plan: PagePlan):
            return make_page(plan.page, per_page=10)

        executor = PageExecutor(PagePolicy(items_per_page=10, max_pages=2))
        results = await drain(executor.fetch_items(fetch_page, total_limit=100))

        assert len(results) == 20
        assert executor.stats.termination == Termination.PLAN_EXHAUSTED

    @pytest.mark.asyncio
    async def test_concurrency_bound(self, make_page):
        in_flight = 0
        peak = 0

        async def fetch_page(plan: PagePlan):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return make_page(plan.page, per_page=5)

        executor = PageExecutor(PagePolicy(items_per_page=5, concurrency=3))
        results = await drain(executor.fetch_items(fetch_page, total_limit=50))

        assert len(results) == 50
        assert peak == 3

    @pytest.mark.asyncio
    async def test_abandoned_iteration_cancels_outstanding_pages(self, make_page):
        cancelled = []

        async def fetch_page(plan: PagePlan):
            if plan.page == 1:
                return make_page(1)
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(plan.page)
                raise
            return make_page(plan.page)

        executor = PageExecutor(PagePolicy(items_per_page=50, concurrency=4))
        stream = executor.fetch_items(fetch_page, total_limit=200)

        first = await stream.__anext__()
        await stream.aclose()

        assert first == (1, 0)
        assert sorted(cancelled) == [2, 3, 4]
        assert executor.stats.termination == Termination.ABANDONED

    @pytest.mark.asyncio
    async def test_unexpected_exception_propagates(self, make_page):
        async def fetch_page(plan: PagePlan):
            raise RuntimeError("bug in fetcher")

        executor = PageExecutor(PagePolicy())
        with pytest.raises(RuntimeError, match="bug in fetcher"):
            await drain(executor.fetch_items(fetch_page, total_limit=10))

    @pytest.mark.asyncio
    async def test_inconsistent_metadata_logged(self, make_page, caplog):
        page = make_page(1, per_page=10, available=5)
        bad = type(page)(
            pagination=page.pagination.model_copy(update={"count": 12}),
            values=page.values,
        )

        async def fetch_page(plan: PagePlan):
            return bad

        executor = PageExecutor(PagePolicy(items_per_page=10), endpoint_id="games")
        with caplog.at_level(logging.WARNING, logger="aoe4world.runtime.pagination"):
            results = await drain(executor.fetch_items(fetch_page, total_limit=10))

        assert len(results) == 5
        assert any(r.message == "page_metadata_inconsistent" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_stream_with_explicit_plans(self, make_page):
        async def fetch_page(plan: PagePlan):
            return make_page(plan.page, per_page=plan.limit)

        plans = PagePlanner(PagePolicy(items_per_page=20)).plan(40)
        executor = PageExecutor(PagePolicy(items_per_page=20))
        results = await drain(
            executor.stream(plans=plans, fetch_page=fetch_page, total_limit=40)
        )

        assert len(results) == 40
        assert executor.stats.pages_fetched == 2
