from __future__ import annotations

from enum import StrEnum
from enum import unique

__all__ = (
    "CommentSort",
    "RankingType",
    "ForumTopicType",
)


@unique
class CommentSort(StrEnum):
    NEW = "new"  # created_at desc, id desc
    OLD = "old"  # created_at asc, id asc
    TOP = "top"  # votes_count desc, created_at desc, id desc


@unique
class RankingType(StrEnum):
    SPOTLIGHT = "charts"
    COUNTRY = "country"
    PERFORMANCE = "performance"
    SCORE = "score"


@unique
class ForumTopicType(StrEnum):
    NORMAL = "normal"
    STICKY = "sticky"
    ANNOUNCEMENT = "announcement"
