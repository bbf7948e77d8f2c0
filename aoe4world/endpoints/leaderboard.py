"""Leaderboard endpoint definition and adapter.

Entries are returned by rank, best first.
"""

from __future__ import annotations

from typing import Any

from aoe4world.config import api_path
from aoe4world.core import Leaderboard
from aoe4world.models import LeaderboardPage
from aoe4world.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the leaderboard path."""
    leaderboard = params["leaderboard"]
    if isinstance(leaderboard, Leaderboard):
        leaderboard = leaderboard.value
    return api_path(f"leaderboards/{leaderboard}")


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the leaderboard endpoint."""
    country = params.get("country")
    return {
        "query": params.get("query"),
        "country": country.lower() if country else None,
        "profile_id": params.get("profile_id"),
        "page": params.get("page"),
        "limit": params.get("limit"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="leaderboard",
    build_path=build_path,
    build_query=build_query,
    paginated=True,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a page of a leaderboard."""

    model = LeaderboardPage
