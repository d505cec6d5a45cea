from __future__ import annotations

from enum import StrEnum
from enum import unique

__all__ = (
    "UserProfilePage",
    "UserAccountHistoryType",
)


@unique
class UserProfilePage(StrEnum):
    ME = "me"
    RECENT_ACTIVITY = "recent_activity"
    BEATMAPS = "beatmaps"
    HISTORICAL = "historical"
    KUDOSU = "kudosu"
    TOP_RANKS = "top_ranks"
    MEDALS = "medals"


@unique
class UserAccountHistoryType(StrEnum):
    NOTE = "note"
    RESTRICTION = "restriction"
    SILENCE = "silence"
