"""Lazy, restartable sequence of items from a paginated endpoint."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import aclosing
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from ..core.exceptions import FetchError
from ..runtime.pagination import (
    FetchFailure,
    PageExecutor,
    PagePlan,
    PagePolicy,
    Paginated,
    PaginationStats,
)
from ..runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner

T = TypeVar("T")


class PaginatedResults(Generic[T]):
    """Items of a paginated endpoint, fetched on iteration.

    Nothing is requested until iteration starts. Every iteration runs a fresh
    paginated fetch from page 1 with the parameters captured when the
    results were created.

    Example:
        >>> async for game in client.player_games(123).get(100):
        ...     print(game.game_id)
    """

    def __init__(
        self,
        *,
        runner: RestRunner,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: Mapping[str, Any],
        limit: int,
        policy: PagePolicy,
    ) -> None:
        self._runner = runner
        self._spec = spec
        self._adapter = adapter
        self._params = MappingProxyType(dict(params))
        self._limit = limit
        self._policy = policy
        self.last_stats: PaginationStats | None = None

    @property
    def params(self) -> Mapping[str, Any]:
        """Query parameters shared by every page request (read-only)."""
        return self._params

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def policy(self) -> PagePolicy:
        return self._policy

    async def _fetch_page(self, plan: PagePlan) -> Paginated:
        params = {**self._params, "page": plan.page, "limit": plan.limit}
        return await self._runner.run(spec=self._spec, adapter=self._adapter, params=params)

    async def results(self) -> AsyncIterator[T | FetchFailure]:
        """Iterate items, with a ``FetchFailure`` marker in place of a failed page.

        The marker is the last element; items of earlier pages precede it.
        """
        executor = PageExecutor(self._policy, endpoint_id=self._spec.id)
        self.last_stats = executor.stats
        async with aclosing(
            executor.fetch_items(self._fetch_page, total_limit=self._limit)
        ) as stream:
            async for result in stream:
                yield result

    async def __aiter__(self) -> AsyncIterator[T]:
        """Iterate items, raising the page's ``FetchError`` where a page failed."""
        async with aclosing(self.results()) as results:
            async for result in results:
                if isinstance(result, FetchFailure):
                    raise result.error
                yield result

    async def collect(self) -> tuple[list[T], FetchError | None]:
        """Fetch everything, keeping the items received before a failure.

        Returns:
            Tuple of (items, error of the failed page or None)
        """
        items: list[T] = []
        async with aclosing(self.results()) as results:
            async for result in results:
                if isinstance(result, FetchFailure):
                    return items, result.error
                items.append(result)
        return items, None

    async def to_list(self) -> list[T]:
        """Fetch everything into a list.

        Raises:
            FetchError: If any page failed
        """
        items, error = await self.collect()
        if error is not None:
            raise error
        return items

    def __repr__(self) -> str:
        return (
            f"PaginatedResults(endpoint={self._spec.id!r}, limit={self._limit}, "
            f"params={dict(self._params)!r})"
        )
