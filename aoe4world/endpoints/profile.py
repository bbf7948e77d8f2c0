"""Player profile endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from aoe4world.config import api_path
from aoe4world.models import Profile
from aoe4world.runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the profile path."""
    return api_path(f"players/{params['profile_id']}")


# Endpoint specification
SPEC = RestEndpointSpec(
    id="profile",
    build_path=build_path,
)


class Adapter(ModelAdapter):
    """Adapter for parsing a profile response into a Profile."""

    model = Profile
