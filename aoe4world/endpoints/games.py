"""Global games endpoint definition and adapter.

Lists recent games across all players, optionally narrowed to a set of
players or a leaderboard.
"""

from __future__ import annotations

from typing import Any

from aoe4world.config import api_path
from aoe4world.models import GamesPage
from aoe4world.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the global games path."""
    return api_path("games")


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the global games endpoint.

    Profile ID lists are sent comma separated.
    """
    return {
        "leaderboard": params.get("leaderboard"),
        "since": params.get("since"),
        "order": params.get("order"),
        "profile_ids": params.get("profile_ids") or None,
        "opponent_profile_ids": params.get("opponent_profile_ids") or None,
        "page": params.get("page"),
        "limit": params.get("limit"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="games",
    build_path=build_path,
    build_query=build_query,
    paginated=True,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a page of global games."""

    model = GamesPage
