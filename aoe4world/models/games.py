"""Game and game participant data models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Civilization, GameKind, GameResult, Leaderboard, lenient
from .pagination import Page

if TYPE_CHECKING:
    from ..client import AoE4WorldClient
    from .profile import Profile

CivilizationField = lenient(Civilization)
GameKindField = lenient(GameKind)
GameResultField = lenient(GameResult)
LeaderboardField = lenient(Leaderboard)


class Player(BaseModel):
    """A player taking part in a game."""

    name: str | None = None
    profile_id: int | None = None
    result: GameResultField | None = None
    civilization: CivilizationField | None = None
    civilization_randomized: bool | None = None
    rating: int | None = None
    rating_diff: int | None = None
    mmr: int | None = None
    mmr_diff: int | None = None
    input_type: str | None = None

    model_config = ConfigDict(frozen=True)

    async def profile(self, client: AoE4WorldClient) -> Profile | None:
        """Fetch the profile of this player, if the game reports one."""
        if self.profile_id is None:
            return None
        return await client.profile(self.profile_id).get()


class TeamMember(BaseModel):
    """Wrapper around a player who is a member of a team."""

    player: Player | None = None

    model_config = ConfigDict(frozen=True)


class Game(BaseModel):
    """Information on a single game."""

    game_id: int | None = None
    started_at: datetime | None = None
    updated_at: datetime | None = None
    duration: int | None = None
    map: str | None = None
    kind: GameKindField | None = None
    leaderboard: LeaderboardField | None = None
    mmr_leaderboard: LeaderboardField | None = None
    season: int | None = None
    server: str | None = None
    patch: int | None = None
    average_rating: float | None = None
    average_rating_deviation: float | None = None
    average_mmr: float | None = None
    average_mmr_deviation: float | None = None
    ongoing: bool | None = None
    just_finished: bool | None = None
    teams: list[list[TeamMember]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def players(self) -> list[Player]:
        """All players of the game, team by team."""
        return [member.player for team in self.teams for member in team if member.player]


class GamesPage(Page):
    """A page of games, from the player games or global games endpoints."""

    items_field: ClassVar[str] = "games"

    games: list[Game] = Field(default_factory=list)
    filters: dict[str, Any] = Field(default_factory=dict)
