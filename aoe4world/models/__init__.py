"""Data models for aoe4world records.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    All models are immutable (frozen=True) and ignore JSON keys they do not
    declare, so additions on the API side do not break decoding.

Model Categories:
    - Players: Profile, Avatars, Social, GameModes, GameModeStats
    - Games: Game, Player, TeamMember
    - Leaderboards: LeaderboardEntry, RankLevel
    - Pages: Pagination, GamesPage, LeaderboardPage, SearchPage
"""

from .games import Game, GamesPage, Player, TeamMember
from .leaderboard import LeaderboardEntry, LeaderboardPage, SearchPage
from .pagination import Page, Pagination
from .profile import (
    Avatars,
    GameModes,
    GameModeStats,
    Profile,
    RatingHistoryEntry,
    Social,
)
from .rank import RankLevel

__all__ = [
    "Avatars",
    "Game",
    "GameModeStats",
    "GameModes",
    "GamesPage",
    "LeaderboardEntry",
    "LeaderboardPage",
    "Page",
    "Pagination",
    "Player",
    "Profile",
    "RankLevel",
    "RatingHistoryEntry",
    "SearchPage",
    "Social",
    "TeamMember",
]
