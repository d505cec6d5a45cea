from __future__ import annotations

from enum import IntEnum
from enum import StrEnum
from enum import unique

from osu_types.constants import OrdinalStrEnum

__all__ = (
    "RankStatus",
    "BeatmapPackType",
    "MessageType",
    "BeatmapsetDiscussionPermissions",
)


@unique
class RankStatus(IntEnum):
    """\
    Ranked status of a beatmap or beatmapset.

    The api sends these as integers (`ranked`) or as lowercase names
    (`status`); both forms are accepted.
    """

    GRAVEYARD = -2
    WIP = -1
    PENDING = 0
    RANKED = 1
    APPROVED = 2
    QUALIFIED = 3
    LOVED = 4

    @classmethod
    def _missing_(cls, value: object) -> RankStatus | None:
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None

    @property
    def has_leaderboard(self) -> bool:
        return self in (
            RankStatus.RANKED,
            RankStatus.APPROVED,
            RankStatus.QUALIFIED,
            RankStatus.LOVED,
        )


@unique
class BeatmapPackType(StrEnum):
    # the tag of a pack starts with one of these characters
    STANDARD = "S"
    FEATURED = "F"
    TOURNAMENT = "P"
    LOVED = "L"
    CHART = "R"
    THEME = "T"
    ARTIST = "A"


@unique
class MessageType(OrdinalStrEnum):
    HYPE = "hype"
    MAPPER_NOTE = "mapper_note"
    PRAISE = "praise"
    PROBLEM = "problem"
    REVIEW = "review"
    SUGGESTION = "suggestion"


@unique
class BeatmapsetDiscussionPermissions(OrdinalStrEnum):
    CAN_DESTROY = "can_destroy"
    CAN_REOPEN = "can_reopen"
    CAN_MODERATE_KUDOSU = "can_moderate_kudosu"
    CAN_RESOLVE = "can_resolve"
    VOTE_SCORE = "vote_score"
