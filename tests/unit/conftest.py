"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from aoe4world import AoE4WorldClient


def _page_meta(page: int, limit: int, total: int | None, available: int) -> dict[str, Any]:
    offset = (page - 1) * limit
    count = max(0, min(limit, available - offset))
    return {
        "page": page,
        "per_page": limit,
        "count": count,
        "total_count": total,
        "offset": offset,
    }


@pytest.fixture
def game_json() -> dict[str, Any]:
    """A single game as returned by the games endpoints."""
    return {
        "game_id": 123456789,
        "started_at": "2024-03-01T18:30:00.000Z",
        "updated_at": "2024-03-01T19:02:11.000Z",
        "duration": 1931,
        "map": "Dry Arabia",
        "kind": "rm_1v1",
        "leaderboard": "rm_solo",
        "mmr_leaderboard": "rm_1v1",
        "season": 7,
        "server": "Europe",
        "patch": 8422,
        "average_rating": 1712.5,
        "ongoing": False,
        "just_finished": False,
        "teams": [
            [
                {
                    "player": {
                        "name": "OnlyCams",
                        "profile_id": 10433860,
                        "result": "win",
                        "civilization": "english",
                        "civilization_randomized": False,
                        "rating": 1720,
                        "rating_diff": 14,
                        "mmr": 1801,
                        "mmr_diff": 9,
                        "input_type": "keyboard",
                    }
                }
            ],
            [
                {
                    "player": {
                        "name": "Martian",
                        "profile_id": 42,
                        "result": "loss",
                        "civilization": "martians",
                        "rating": 1705,
                        "rating_diff": -14,
                    }
                }
            ],
        ],
    }


@pytest.fixture
def profile_json() -> dict[str, Any]:
    """A player profile as returned by the profile endpoint."""
    return {
        "name": "OnlyCams",
        "profile_id": 10433860,
        "steam_id": "76561198000000000",
        "site_url": "https://aoe4world.com/players/10433860",
        "avatars": {
            "small": "https://example.com/s.jpg",
            "medium": "https://example.com/m.jpg",
            "full": "https://example.com/f.jpg",
        },
        "social": {"twitch": "https://twitch.tv/onlycams"},
        "country": "ca",
        "last_game_at": "2024-03-01T19:02:11.000Z",
        "modes": {
            "rm_solo": {
                "rating": 1720,
                "max_rating": 1800,
                "max_rating_7d": 1750,
                "max_rating_1m": 1780,
                "rank": 512,
                "rank_level": "conqueror_1",
                "streak": 2,
                "games_count": 300,
                "wins_count": 170,
                "losses_count": 130,
                "drops_count": 1,
                "last_game_at": "2024-03-01T19:02:11.000Z",
                "win_rate": 56.7,
                "rating_history": {
                    "1709315000": {
                        "rating": 1706,
                        "streak": 1,
                        "games_count": 299,
                        "wins_count": 169,
                        "drops_count": 1,
                    }
                },
            },
            "qm_1v1": None,
        },
        "unknown_future_key": {"ignored": True},
    }


@pytest.fixture
def leaderboard_entry_json() -> dict[str, Any]:
    """A single leaderboard entry."""
    return {
        "name": "Beasty",
        "profile_id": 1,
        "steam_id": "76561198000000001",
        "site_url": "https://aoe4world.com/players/1",
        "country": "de",
        "rating": 2300,
        "max_rating": 2400,
        "rank": 1,
        "rank_level": "conqueror_3",
        "streak": -1,
        "games_count": 400,
        "wins_count": 300,
        "losses_count": 100,
        "win_rate": 75.0,
        "last_game_at": "2024-03-01T19:02:11.000Z",
    }


@pytest.fixture
def games_body(game_json):
    """Factory for a games page body; game IDs count up from 1 across pages."""

    def make(page: int, limit: int, available: int, *, total: int | None = -1) -> dict[str, Any]:
        total_count = available if total == -1 else total
        meta = _page_meta(page, limit, total_count, available)
        games = [
            {**game_json, "game_id": meta["offset"] + i + 1} for i in range(meta["count"])
        ]
        return {**meta, "games": games, "filters": {}}

    return make


@pytest.fixture
def client():
    """Client whose transport is replaced by an AsyncMock ``get``."""
    client = AoE4WorldClient()
    client._transport.get = AsyncMock()
    return client


@pytest.fixture
def serve_games(client, games_body):
    """Make the mocked transport serve ``available`` games across pages."""

    def install(available: int, *, fail_on_page: int | None = None, error=None):
        async def fake_get(path, params=None, headers=None):
            if fail_on_page is not None and params["page"] == fail_on_page:
                raise error
            return games_body(params["page"], params["limit"], available)

        client._transport.get.side_effect = fake_get
        return client._transport.get

    return install
