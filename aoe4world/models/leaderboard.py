"""Leaderboard and player search data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Leaderboard, lenient
from .pagination import Page
from .profile import Avatars, Profile, Social
from .rank import RankLevel

LeaderboardField = lenient(Leaderboard)


class LeaderboardEntry(BaseModel):
    """An entry in a leaderboard.

    Carries a subset of ``Profile`` together with ranking information.
    """

    name: str
    profile_id: int
    steam_id: str | None = None
    site_url: str | None = None
    avatars: Avatars | None = None
    social: Social | None = None
    country: str | None = None
    twitch_url: str | None = None
    twitch_is_live: bool | None = None
    rating: int | None = None
    max_rating: int | None = None
    max_rating_7d: int | None = None
    max_rating_1m: int | None = None
    rank: int | None = None
    rank_level: RankLevel | None = None
    streak: int | None = None
    games_count: int | None = None
    wins_count: int | None = None
    losses_count: int | None = None
    drops_count: int | None = None
    last_game_at: datetime | None = None
    win_rate: float | None = Field(default=None, ge=0, le=100)
    last_rating_change: int | None = None

    model_config = ConfigDict(frozen=True)


class LeaderboardPage(Page):
    """A page of a ranked leaderboard."""

    items_field: ClassVar[str] = "players"

    key: LeaderboardField | None = None
    query: str | None = None
    name: str | None = None
    short_name: str | None = None
    site_url: str | None = None
    players: list[LeaderboardEntry] = Field(default_factory=list)
    filters: dict[str, Any] = Field(default_factory=dict)


class SearchPage(Page):
    """A page of player search results."""

    items_field: ClassVar[str] = "players"

    query: str | None = None
    players: list[Profile] = Field(default_factory=list)
