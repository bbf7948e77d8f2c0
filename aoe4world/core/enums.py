"""Core enumerations for values reported by the aoe4world API.

Architecture:
    String enums mirror the literal values used on the wire, so a member can
    be sent as a query parameter or compared to a decoded record directly.

Design Decisions:
    - String enums: members serialize to their wire value
    - Lenient fields: records use ``lenient(EnumCls)`` so values introduced by
      a new game patch decode to ``UnknownValue`` instead of failing the page
    - ``UnknownValue`` is not an enum member, so iterating an enum lists only
      the values this library knows about

Key Types:
    - Leaderboard: ranked and quick match ladders
    - GameKind: type of a single game
    - GameResult: outcome for one player
    - Civilization: playable civilizations
    - League: rank league names used by ``RankLevel``
    - GamesOrder: sort order for the global games endpoint
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, TypeVar

from pydantic import PlainSerializer, PlainValidator

E = TypeVar("E", bound=Enum)


class Leaderboard(str, Enum):
    """Which leaderboard a game counts towards.

    Equivalent to ``GameKind`` with the addition of ``RM_SOLO`` and ``RM_TEAM``.
    """

    RM_SOLO = "rm_solo"
    RM_TEAM = "rm_team"
    RM_1V1 = "rm_1v1"
    RM_2V2 = "rm_2v2"
    RM_3V3 = "rm_3v3"
    RM_4V4 = "rm_4v4"
    QM_1V1 = "qm_1v1"
    QM_2V2 = "qm_2v2"
    QM_3V3 = "qm_3v3"
    QM_4V4 = "qm_4v4"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class GameKind(str, Enum):
    """Type of game being played."""

    RM_1V1 = "rm_1v1"
    RM_2V2 = "rm_2v2"
    RM_3V3 = "rm_3v3"
    RM_4V4 = "rm_4v4"
    QM_1V1 = "qm_1v1"
    QM_2V2 = "qm_2v2"
    QM_3V3 = "qm_3v3"
    QM_4V4 = "qm_4v4"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class GameResult(str, Enum):
    """Outcome of a game for one player."""

    WIN = "win"
    LOSS = "loss"
    NO_RESULT = "noresult"
    UNKNOWN = "unknown"


class Civilization(str, Enum):
    """A civilization in Age of Empires IV."""

    ABBASID_DYNASTY = "abbasid_dynasty"
    AYYUBIDS = "ayyubids"
    BYZANTINES = "byzantines"
    CHINESE = "chinese"
    DELHI_SULTANATE = "delhi_sultanate"
    ENGLISH = "english"
    FRENCH = "french"
    GOLDEN_HORDE = "golden_horde"
    HOLY_ROMAN_EMPIRE = "holy_roman_empire"
    HOUSE_OF_LANCASTER = "house_of_lancaster"
    JAPANESE = "japanese"
    JEANNE_DARC = "jeanne_darc"
    KNIGHTS_TEMPLAR = "knights_templar"
    MACEDONIAN_DYNASTY = "macedonian_dynasty"
    MALIANS = "malians"
    MONGOLS = "mongols"
    ORDER_OF_THE_DRAGON = "order_of_the_dragon"
    OTTOMANS = "ottomans"
    RUS = "rus"
    SENGOKU_DAIMYO = "sengoku_daimyo"
    TUGHLAQ_DYNASTY = "tughlaq_dynasty"
    ZHU_XIS_LEGACY = "zhu_xis_legacy"


class League(str, Enum):
    """Rank league, lowest first."""

    UNRANKED = "unranked"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"
    CONQUEROR = "conqueror"


class GamesOrder(str, Enum):
    """Sort order accepted by the global games endpoint."""

    STARTED_AT = "started_at"
    UPDATED_AT = "updated_at"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnknownValue:
    """A value the API sent that this library does not recognize.

    Attributes:
        raw: The original string, preserved so it can be re-encoded unchanged
    """

    raw: str

    def __str__(self) -> str:
        return self.raw


def parse_lenient(enum_cls: type[E], value: Any) -> E | UnknownValue:
    """Map a wire value onto ``enum_cls``, keeping unrecognized strings.

    Raises:
        ValueError: If value is not a string, member or UnknownValue
    """
    if isinstance(value, (enum_cls, UnknownValue)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{enum_cls.__name__} value must be a string, got {type(value).__name__}")
    try:
        return enum_cls(value)
    except ValueError:
        return UnknownValue(value)


def _serialize_lenient(value: Enum | UnknownValue) -> str:
    if isinstance(value, UnknownValue):
        return value.raw
    return value.value


def lenient(enum_cls: type[E]) -> Any:
    """Build an annotated field type accepting ``enum_cls`` or ``UnknownValue``.

    Example:
        >>> class Player(BaseModel):
        ...     civilization: lenient(Civilization) | None = None
    """

    def validate(value: Any) -> E | UnknownValue:
        return parse_lenient(enum_cls, value)

    return Annotated[
        enum_cls | UnknownValue,
        PlainValidator(validate),
        PlainSerializer(_serialize_lenient, return_type=str),
    ]
