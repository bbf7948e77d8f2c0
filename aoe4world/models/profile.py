"""Player profile data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .rank import RankLevel


class Avatars(BaseModel):
    """Links to avatars used by the player."""

    small: str | None = None
    medium: str | None = None
    full: str | None = None

    model_config = ConfigDict(frozen=True)


class Social(BaseModel):
    """Social links of a player."""

    twitch: str | None = None
    youtube: str | None = None
    liquipedia: str | None = None
    twitter: str | None = None
    reddit: str | None = None
    instagram: str | None = None

    model_config = ConfigDict(frozen=True)


class RatingHistoryEntry(BaseModel):
    """Rating snapshot recorded after a game."""

    rating: int | None = None
    streak: int | None = None
    games_count: int | None = None
    wins_count: int | None = None
    drops_count: int | None = None
    disputes_count: int | None = None

    model_config = ConfigDict(frozen=True)


class GameModeStats(BaseModel):
    """Statistics of a player on one leaderboard.

    Rating is ranked points on ``rm_solo``/``rm_team`` and ELO elsewhere.
    """

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
    # Keyed by the timestamp or game ID the API reports
    rating_history: dict[str, RatingHistoryEntry] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class GameModes(BaseModel):
    """Statistics per leaderboard; absent when the player has no games there."""

    rm_solo: GameModeStats | None = None
    rm_team: GameModeStats | None = None
    rm_1v1: GameModeStats | None = None
    rm_2v2: GameModeStats | None = None
    rm_3v3: GameModeStats | None = None
    rm_4v4: GameModeStats | None = None
    qm_1v1: GameModeStats | None = None
    qm_2v2: GameModeStats | None = None
    qm_3v3: GameModeStats | None = None
    qm_4v4: GameModeStats | None = None

    model_config = ConfigDict(frozen=True)


class Profile(BaseModel):
    """Player profile and statistics.

    Returned by the profile endpoint and, without ``modes``, by player search.
    """

    name: str
    profile_id: int
    steam_id: str | None = None
    site_url: str | None = None
    avatars: Avatars | None = None
    social: Social | None = None
    country: str | None = None
    last_game_at: datetime | None = None
    modes: GameModes | None = None

    model_config = ConfigDict(frozen=True)
