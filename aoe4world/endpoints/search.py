"""Player search endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from aoe4world.config import api_path
from aoe4world.models import SearchPage
from aoe4world.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the search path."""
    return api_path("players/search")


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the search endpoint."""
    return {
        "query": params["query"],
        "exact": params.get("exact"),
        "page": params.get("page"),
        "limit": params.get("limit"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="search",
    build_path=build_path,
    build_query=build_query,
    paginated=True,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a page of search results."""

    model = SearchPage
