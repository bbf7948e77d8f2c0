"""aoe4world - Async client for the aoe4world Age of Empires IV statistics API."""

from .api import (
    GlobalGamesQuery,
    LeaderboardQuery,
    PaginatedResults,
    PlayerGamesQuery,
    ProfileQuery,
    SearchQuery,
)
from .client import AoE4WorldClient
from .core import (
    AoE4WorldError,
    Civilization,
    DecodeError,
    FetchError,
    GameKind,
    GameResult,
    GamesOrder,
    Leaderboard,
    League,
    RateLimitError,
    RemoteError,
    TransportError,
    UnknownValue,
    ValidationError,
)
from .models import (
    Game,
    GameModes,
    GameModeStats,
    LeaderboardEntry,
    Pagination,
    Player,
    Profile,
    RankLevel,
    TeamMember,
)
from .runtime.pagination import FetchFailure, PagePolicy, PaginationStats

__version__ = "0.1.0"

__all__ = [
    # Client
    "AoE4WorldClient",
    # Queries
    "ProfileQuery",
    "PlayerGamesQuery",
    "SearchQuery",
    "LeaderboardQuery",
    "GlobalGamesQuery",
    "PaginatedResults",
    # Pagination
    "FetchFailure",
    "PagePolicy",
    "PaginationStats",
    # Enums
    "Civilization",
    "GameKind",
    "GameResult",
    "GamesOrder",
    "Leaderboard",
    "League",
    "UnknownValue",
    # Models
    "Game",
    "GameModes",
    "GameModeStats",
    "LeaderboardEntry",
    "Pagination",
    "Player",
    "Profile",
    "RankLevel",
    "TeamMember",
    # Exceptions
    "AoE4WorldError",
    "ValidationError",
    "FetchError",
    "TransportError",
    "RemoteError",
    "RateLimitError",
    "DecodeError",
]
