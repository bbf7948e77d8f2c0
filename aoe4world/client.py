"""aoe4world REST client.

This client owns the HTTP transport and is the entry point for building
queries. It resolves endpoint IDs to specs and adapters through the endpoint
registry and runs them with RestRunner.

Example:
    >>> async with AoE4WorldClient() as client:
    ...     profile = await client.profile(10433860).get()
    ...     async for game in client.player_games(10433860).get(100):
    ...         print(game.game_id, game.map)
"""

from __future__ import annotations

from time import perf_counter
from typing import Any

from .api import (
    GlobalGamesQuery,
    LeaderboardQuery,
    PaginatedResults,
    PlayerGamesQuery,
    ProfileQuery,
    SearchQuery,
)
from .config import BASE_URL, DEFAULT_CONCURRENCY, DEFAULT_ITEMS_PER_PAGE, DEFAULT_TIMEOUT
from .core.enums import Leaderboard
from .core.exceptions import ValidationError
from .endpoints import get_endpoint_adapter, get_endpoint_spec
from .runtime.pagination import PagePolicy
from .runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport


class AoE4WorldClient:
    """Async client for the aoe4world API.

    A client holds one HTTP session; close it (or use it as an async context
    manager) when done. Queries built from the same client share the session,
    including the concurrent page fetches of a paginated query.
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
        concurrency: int = DEFAULT_CONCURRENCY,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, without the version segment
            timeout: Total timeout per request in seconds
            items_per_page: Default page size for paginated queries
            concurrency: Default maximum of concurrent page fetches
            headers: Extra headers sent with every request
        """
        self._policy = PagePolicy(items_per_page=items_per_page, concurrency=concurrency)
        self._transport = RESTTransport(base_url=base_url, timeout=timeout, headers=headers)
        self._runner = RestRunner(self._transport)

    @property
    def policy(self) -> PagePolicy:
        """Default pagination policy of this client."""
        return self._policy

    def profile(self, profile_id: int | None = None) -> ProfileQuery:
        return ProfileQuery(self, profile_id)

    def player_games(self, profile_id: int | None = None) -> PlayerGamesQuery:
        return PlayerGamesQuery(self, profile_id)

    def search(self, query: str | None = None) -> SearchQuery:
        return SearchQuery(self, query)

    def leaderboard(self, leaderboard: Leaderboard | str | None = None) -> LeaderboardQuery:
        return LeaderboardQuery(self, leaderboard)

    def games(self) -> GlobalGamesQuery:
        return GlobalGamesQuery(self)

    def _resolve(self, endpoint_id: str) -> tuple[RestEndpointSpec, ResponseAdapter]:
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return spec, adapter_cls()

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch one response from an endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "profile")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
            FetchError: If the request or decoding failed
        """
        spec, adapter = self._resolve(endpoint_id)
        return await self._runner.run(spec=spec, adapter=adapter, params=dict(params))

    def paginate(
        self,
        endpoint_id: str,
        params: dict[str, Any],
        *,
        limit: int,
        items_per_page: int | None = None,
        concurrency: int | None = None,
        max_pages: int | None = None,
    ) -> PaginatedResults[Any]:
        """Create lazy results for a paginated endpoint.

        Overrides left as None fall back to this client's policy.

        Raises:
            ValueError: If endpoint_id is unknown or not paginated
            ValidationError: If a pagination override is invalid
        """
        spec, adapter = self._resolve(endpoint_id)
        if not spec.paginated:
            raise ValueError(f"Endpoint is not paginated: {endpoint_id}")

        try:
            policy = PagePolicy(
                items_per_page=(
                    self._policy.items_per_page if items_per_page is None else items_per_page
                ),
                concurrency=self._policy.concurrency if concurrency is None else concurrency,
                max_pages=max_pages,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        return PaginatedResults(
            runner=self._runner,
            spec=spec,
            adapter=adapter,
            params=params,
            limit=limit,
            policy=policy,
        )

    async def fetch_health(self) -> dict[str, object]:
        """Request the first page of the global games list to verify connectivity."""
        start = perf_counter()
        await self.fetch("games", {"page": 1, "limit": 1})
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "base_url": self._transport.base_url,
            "status": "ok",
            "latency_ms": latency_ms,
        }

    async def __aenter__(self) -> AoE4WorldClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._transport.close()
