"""aoe4world REST endpoint registry.

This module exports all endpoint specifications and adapters.
"""

from __future__ import annotations

from aoe4world.runtime.rest import ResponseAdapter, RestEndpointSpec

from .games import SPEC as GamesSpec  # noqa: N811
from .games import Adapter as GamesAdapter
from .leaderboard import SPEC as LeaderboardSpec  # noqa: N811
from .leaderboard import Adapter as LeaderboardAdapter
from .player_games import SPEC as PlayerGamesSpec  # noqa: N811
from .player_games import Adapter as PlayerGamesAdapter
from .profile import SPEC as ProfileSpec  # noqa: N811
from .profile import Adapter as ProfileAdapter
from .search import SPEC as SearchSpec  # noqa: N811
from .search import Adapter as SearchAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "profile": (ProfileSpec, ProfileAdapter),
    "player_games": (PlayerGamesSpec, PlayerGamesAdapter),
    "search": (SearchSpec, SearchAdapter),
    "leaderboard": (LeaderboardSpec, LeaderboardAdapter),
    "games": (GamesSpec, GamesAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "profile", "player_games")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "profile", "player_games")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """IDs of all registered endpoints."""
    return list(_ENDPOINT_REGISTRY)
