"""Core components."""

from .enums import (
    Civilization,
    GameKind,
    GameResult,
    GamesOrder,
    Leaderboard,
    League,
    UnknownValue,
    lenient,
    parse_lenient,
)
from .exceptions import (
    AoE4WorldError,
    DecodeError,
    FetchError,
    RateLimitError,
    RemoteError,
    TransportError,
    ValidationError,
)

__all__ = [
    # Enums
    "Civilization",
    "GameKind",
    "GameResult",
    "GamesOrder",
    "Leaderboard",
    "League",
    "UnknownValue",
    "lenient",
    "parse_lenient",
    # Exceptions
    "AoE4WorldError",
    "ValidationError",
    "FetchError",
    "TransportError",
    "RemoteError",
    "RateLimitError",
    "DecodeError",
]
