"""Shared aoe4world client constants.

This module centralizes the base URL and pagination defaults used by the
REST runtime and the query builders.
"""

from __future__ import annotations

# Public REST API, no authentication
BASE_URL = "https://aoe4world.com/api"
API_VERSION = "v0"

# Sent as the `limit` query parameter on every paginated request
DEFAULT_ITEMS_PER_PAGE = 50

# Maximum number of page fetches outstanding at once
DEFAULT_CONCURRENCY = 8

# Total request timeout in seconds
DEFAULT_TIMEOUT = 30.0

USER_AGENT = "aoe4world-client/0.1.0"


def api_path(path: str) -> str:
    """Prefix an endpoint path with the API version segment."""
    return f"/{API_VERSION}/{path.lstrip('/')}"
