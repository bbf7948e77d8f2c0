"""Query builders and paginated results."""

from .queries import (
    BaseQuery,
    GlobalGamesQuery,
    LeaderboardQuery,
    PaginatedQuery,
    PlayerGamesQuery,
    ProfileQuery,
    SearchQuery,
)
from .results import PaginatedResults

__all__ = [
    "BaseQuery",
    "PaginatedQuery",
    "ProfileQuery",
    "PlayerGamesQuery",
    "SearchQuery",
    "LeaderboardQuery",
    "GlobalGamesQuery",
    "PaginatedResults",
]
