"""Query builders for the aoe4world endpoints.

This module provides one fluent builder per endpoint. Setters record
optional filters and return the builder for chaining; ``get()`` validates
that the identifying fields are set and executes the query.

Architecture:
    Builders only collect parameters. Paginated builders hand them to the
    client, which returns a lazy ``PaginatedResults``; ``ProfileQuery`` issues
    a single request.

Design Decisions:
    - Validation on use: required fields are checked by ``get()`` so a builder
      can be filled in any order
    - Snapshot on get: results keep a copy of the parameters, so changing the
      builder afterwards does not affect a fetch in progress
    - Unset filters are never sent

Example:
    >>> games = (client.player_games(10433860)
    ...     .leaderboard(Leaderboard.RM_SOLO)
    ...     .since(datetime(2024, 1, 1, tzinfo=UTC))
    ...     .get(200))
    >>> async for game in games:
    ...     ...
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from ..core.enums import GamesOrder, Leaderboard
from ..core.exceptions import ValidationError
from ..models import Game, LeaderboardEntry, Profile
from .results import PaginatedResults

if TYPE_CHECKING:
    from ..client import AoE4WorldClient

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_cls: type[E], value: E | str, field: str) -> E:
    try:
        return enum_cls(value)
    except ValueError as e:
        raise ValidationError(f"invalid {field}: {value!r}", field=field) from e


def _coerce_id(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field} must be a positive integer, got {value!r}", field=field)
    return value


def _coerce_since(value: datetime) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"since must be a datetime, got {value!r}", field="since")
    # Naive datetimes are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class BaseQuery:
    """Parameter container shared by all query builders."""

    endpoint_id: ClassVar[str]
    required: ClassVar[tuple[str, ...]] = ()

    def __init__(self, client: AoE4WorldClient) -> None:
        self._client = client
        self._params: dict[str, Any] = {}

    def params(self) -> dict[str, Any]:
        """Parameters that are currently set."""
        return {key: value for key, value in self._params.items() if value is not None}

    def validate(self) -> dict[str, Any]:
        """Check required fields and return a copy of the parameters.

        Raises:
            ValidationError: Naming the first required field that is not set
        """
        params = self.params()
        for field in self.required:
            value = params.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(
                    f"{type(self).__name__} requires '{field}' to be set", field=field
                )
        return params

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params()!r})"


class PaginatedQuery(BaseQuery, Generic[T]):
    """Builder for an endpoint whose results span several pages."""

    def get(
        self,
        limit: int,
        *,
        items_per_page: int | None = None,
        concurrency: int | None = None,
        max_pages: int | None = None,
    ) -> PaginatedResults[T]:
        """Validate the query and return its first ``limit`` results, lazily.

        Args:
            limit: Maximum number of items to return
            items_per_page: Page size override for this call
            concurrency: Concurrent page fetches override for this call
            max_pages: Cap on the number of pages requested

        Returns:
            PaginatedResults; no request is made until it is iterated

        Raises:
            ValidationError: If a required field is missing or an argument is invalid
        """
        params = self.validate()
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValidationError(
                f"limit must be a non-negative integer, got {limit!r}", field="limit"
            )
        return self._client.paginate(
            self.endpoint_id,
            params,
            limit=limit,
            items_per_page=items_per_page,
            concurrency=concurrency,
            max_pages=max_pages,
        )


class ProfileQuery(BaseQuery):
    """Profile and per-leaderboard statistics of one player."""

    endpoint_id = "profile"
    required = ("profile_id",)

    def __init__(self, client: AoE4WorldClient, profile_id: int | None = None) -> None:
        super().__init__(client)
        if profile_id is not None:
            self.profile_id(profile_id)

    def profile_id(self, profile_id: int) -> ProfileQuery:
        self._params["profile_id"] = _coerce_id(profile_id, "profile_id")
        return self

    async def get(self) -> Profile:
        """Fetch the profile.

        Raises:
            ValidationError: If profile_id is not set
            FetchError: If the request or decoding failed
        """
        params = self.validate()
        profile: Profile = await self._client.fetch(self.endpoint_id, params)
        return profile


class PlayerGamesQuery(PaginatedQuery[Game]):
    """Games played by one player, most recent first."""

    endpoint_id = "player_games"
    required = ("profile_id",)

    def __init__(self, client: AoE4WorldClient, profile_id: int | None = None) -> None:
        super().__init__(client)
        if profile_id is not None:
            self.profile_id(profile_id)

    def profile_id(self, profile_id: int) -> PlayerGamesQuery:
        self._params["profile_id"] = _coerce_id(profile_id, "profile_id")
        return self

    def leaderboard(self, leaderboard: Leaderboard | str) -> PlayerGamesQuery:
        """Only games counting towards this leaderboard."""
        self._params["leaderboard"] = _coerce_enum(Leaderboard, leaderboard, "leaderboard")
        return self

    def opponent(self, profile_id: int) -> PlayerGamesQuery:
        """Only games against this opponent."""
        self._params["opponent_profile_id"] = _coerce_id(profile_id, "opponent_profile_id")
        return self

    def since(self, since: datetime) -> PlayerGamesQuery:
        """Only games played since this time."""
        self._params["since"] = _coerce_since(since)
        return self


class SearchQuery(PaginatedQuery[Profile]):
    """Players whose name matches a search string."""

    endpoint_id = "search"
    required = ("query",)

    def __init__(self, client: AoE4WorldClient, query: str | None = None) -> None:
        super().__init__(client)
        if query is not None:
            self.query(query)

    def query(self, query: str) -> SearchQuery:
        self._params["query"] = query
        return self

    def exact(self, exact: bool = True) -> SearchQuery:
        """Only return players whose name matches the query exactly."""
        self._params["exact"] = bool(exact)
        return self


class LeaderboardQuery(PaginatedQuery[LeaderboardEntry]):
    """Entries of one ranked leaderboard, best first."""

    endpoint_id = "leaderboard"
    required = ("leaderboard",)

    def __init__(
        self, client: AoE4WorldClient, leaderboard: Leaderboard | str | None = None
    ) -> None:
        super().__init__(client)
        if leaderboard is not None:
            self.leaderboard(leaderboard)

    def leaderboard(self, leaderboard: Leaderboard | str) -> LeaderboardQuery:
        self._params["leaderboard"] = _coerce_enum(Leaderboard, leaderboard, "leaderboard")
        return self

    def query(self, query: str) -> LeaderboardQuery:
        """Only players whose name matches this search string."""
        self._params["query"] = query
        return self

    def country(self, country: str) -> LeaderboardQuery:
        """Only players from this country (ISO 3166-1 alpha-2 code)."""
        if not isinstance(country, str) or len(country) != 2 or not country.isalpha():
            raise ValidationError(
                f"country must be a two-letter ISO code, got {country!r}", field="country"
            )
        self._params["country"] = country.lower()
        return self

    def profile_id(self, profile_id: int) -> LeaderboardQuery:
        """Start the leaderboard at the page containing this player."""
        self._params["profile_id"] = _coerce_id(profile_id, "profile_id")
        return self


class GlobalGamesQuery(PaginatedQuery[Game]):
    """Recent games across all players."""

    endpoint_id = "games"

    def leaderboard(self, leaderboard: Leaderboard | str) -> GlobalGamesQuery:
        self._params["leaderboard"] = _coerce_enum(Leaderboard, leaderboard, "leaderboard")
        return self

    def since(self, since: datetime) -> GlobalGamesQuery:
        self._params["since"] = _coerce_since(since)
        return self

    def order(self, order: GamesOrder | str) -> GlobalGamesQuery:
        self._params["order"] = _coerce_enum(GamesOrder, order, "order")
        return self

    def profile_ids(self, profile_ids: Iterable[int]) -> GlobalGamesQuery:
        """Only games involving any of these players."""
        self._params["profile_ids"] = tuple(_coerce_id(pid, "profile_ids") for pid in profile_ids)
        return self

    def opponent_profile_ids(self, profile_ids: Iterable[int]) -> GlobalGamesQuery:
        """Only games against any of these players."""
        self._params["opponent_profile_ids"] = tuple(
            _coerce_id(pid, "opponent_profile_ids") for pid in profile_ids
        )
        return self
