from __future__ import annotations

from osu_types.constants.gamemodes import Ruleset
from osu_types.constants.multiplayer import MatchEventType
from osu_types.constants.multiplayer import ScoringType
from osu_types.constants.multiplayer import TeamType
from osu_types.models import BaseModel
from osu_types.models.beatmaps import Beatmap
from osu_types.models.fields import Integer
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp
from osu_types.models.scores import Score

__all__ = (
    "MatchGame",
    "MatchEventDetail",
    "MatchEvent",
)


class MatchGame(BaseModel):
    id: Integer
    beatmap: Beatmap  # includes the beatmapset
    beatmap_id: Integer
    start_time: Timestamp
    end_time: Timestamp | None = None
    mode: OpenEnum[Ruleset]
    mode_int: Integer
    mods: list[String]  # acronyms
    scores: list[Score]
    scoring_type: OpenEnum[ScoringType]
    team_type: OpenEnum[TeamType]

    @property
    def in_progress(self) -> bool:
        return self.end_time is None


class MatchEventDetail(BaseModel):
    type: OpenEnum[MatchEventType]
    text: String


class MatchEvent(BaseModel):
    id: Integer
    detail: MatchEventDetail
    timestamp: Timestamp
    user_id: Integer | None = None
    game: MatchGame | None = None
