from __future__ import annotations

from enum import StrEnum
from enum import unique

__all__ = (
    "MatchEventType",
    "ScoringType",
    "TeamType",
    "MultiplayerScoresSort",
)


@unique
class MatchEventType(StrEnum):
    HOST_CHANGED = "host-changed"
    MATCH_CREATED = "match-created"
    MATCH_DISBANDED = "match-disbanded"
    OTHER = "other"
    PLAYER_JOINED = "player-joined"
    PLAYER_KICKED = "player-kicked"
    PLAYER_LEFT = "player-left"


@unique
class ScoringType(StrEnum):
    ACCURACY = "accuracy"
    COMBO = "combo"
    SCORE = "score"
    SCOREV2 = "scorev2"


@unique
class TeamType(StrEnum):
    HEAD_TO_HEAD = "head-to-head"
    TAG_COOP = "tag-coop"
    TAG_TEAM_VS = "tag-team-vs"
    TEAM_VS = "team-vs"


@unique
class MultiplayerScoresSort(StrEnum):
    SCORE_ASCENDING = "score_asc"
    SCORE_DESCENDING = "score_desc"
