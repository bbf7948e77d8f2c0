"""Player games endpoint definition and adapter.

Games are returned most recent first.
"""

from __future__ import annotations

from typing import Any

from aoe4world.config import api_path
from aoe4world.models import GamesPage
from aoe4world.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the player games path."""
    return api_path(f"players/{params['profile_id']}/games")


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the player games endpoint."""
    return {
        "leaderboard": params.get("leaderboard"),
        "opponent_profile_id": params.get("opponent_profile_id"),
        "since": params.get("since"),
        "page": params.get("page"),
        "limit": params.get("limit"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="player_games",
    build_path=build_path,
    build_query=build_query,
    paginated=True,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a page of a player's games."""

    model = GamesPage
