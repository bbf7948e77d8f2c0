"""Rank league and division data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from ..core.enums import League


class RankLevel(BaseModel):
    """A player's rank league and division (e.g. Conqueror III).

    Decoded from the API's ``"<league>_<division>"`` strings such as
    ``"conqueror_3"``; ``"unranked"`` and the empty string have no division.
    """

    league: League
    division: int | None = Field(default=None, ge=1, le=3)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def parse_rank_string(cls, data: Any) -> Any:
        """Split wire strings into league and division."""
        if not isinstance(data, str):
            return data
        if data in ("", League.UNRANKED.value):
            return {"league": League.UNRANKED}

        league, sep, division = data.rpartition("_")
        if not sep:
            raise ValueError(f"invalid rank string: {data}")
        if not division.isdigit():
            raise ValueError(f"unable to parse division: {division}")
        return {"league": league, "division": int(division)}

    @model_validator(mode="after")
    def check_division(self) -> RankLevel:
        if self.league == League.UNRANKED and self.division is not None:
            raise ValueError("unranked has no division")
        if self.league != League.UNRANKED and self.division is None:
            raise ValueError(f"{self.league.value} requires a division")
        return self

    @model_serializer
    def to_rank_string(self) -> str:
        if self.league == League.UNRANKED:
            return League.UNRANKED.value
        return f"{self.league.value}_{self.division}"

    def __str__(self) -> str:
        return self.to_rank_string()
