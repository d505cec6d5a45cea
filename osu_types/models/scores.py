from __future__ import annotations

from pydantic import Field

from osu_types.constants.gamemodes import Ruleset
from osu_types.models import BaseModel
from osu_types.models.beatmaps import Beatmap
from osu_types.models.beatmaps import Beatmapset
from osu_types.models.fields import Boolean
from osu_types.models.fields import CursorString
from osu_types.models.fields import Float
from osu_types.models.fields import Integer
from osu_types.models.fields import JsonValue
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp
from osu_types.models.fields import Unknown
from osu_types.models.users import User

__all__ = (
    "Match",
    "Score",
    "MultiplayerScores",
    "MultiplayerScoresAround",
    "MultiplayerScoresCursor",
    "BeatmapUserScore",
    "BeatmapScores",
)


class Match(BaseModel):
    id: Integer
    start_time: Timestamp
    end_time: Timestamp | None = None
    name: String


class Score(BaseModel):
    """\
    A play on a beatmap, in the format returned for api version 20220705
    and newer (legacy match scores excepted).

    `classic_total_score`, `preserve`, `processed` and `ranked` describe
    solo scores, `playlist_item_id` and `room_id` multiplayer ones. The
    api documents all of them as always sent, so all of them are required.
    """

    accuracy: Float
    beatmap_id: Integer
    best_id: Integer | None = None
    build_id: Integer | None = None
    classic_total_score: Integer
    ended_at: Timestamp
    has_replay: Boolean
    id: Integer
    is_perfect_combo: Boolean
    legacy_perfect: Boolean
    legacy_score_id: Integer | None = None
    legacy_total_score: Integer
    max_combo: Integer
    maximum_statistics: JsonValue
    mods: list[JsonValue]
    passed: Boolean
    playlist_item_id: Integer
    pp: Float | None = None
    preserve: Boolean
    processed: Boolean
    rank: String
    ranked: Boolean
    room_id: Integer
    ruleset_id: Integer
    started_at: Timestamp | None = None
    statistics: JsonValue
    total_score: Integer
    type: String
    user_id: Integer

    beatmap: Beatmap | None = None
    beatmapset: Beatmapset | None = None
    current_user_attributes: Integer | None = None
    match: Match | None = None  # legacy match scores only
    position: Integer | None = None
    rank_country: Integer | None = None
    rank_global: Integer | None = None
    scores_around: MultiplayerScoresAround | None = None
    user: User | None = None
    weight: Float | None = None

    @property
    def ruleset(self) -> Ruleset | Unknown:
        try:
            return Ruleset.from_id(self.ruleset_id)
        except KeyError:
            return Unknown(Ruleset, self.ruleset_id)


class MultiplayerScores(BaseModel):
    # null once there are no more results
    cursor_string: CursorString | None
    params: JsonValue  # parameters used for the listing
    scores: list[Score]
    total: Integer | None = None  # index only
    user_score: Score | None = None  # index only


class MultiplayerScoresAround(BaseModel):
    higher: MultiplayerScores
    lower: MultiplayerScores


class MultiplayerScoresCursor(BaseModel):
    score_id: Integer  # last score id of the current page
    total_score: Integer


class BeatmapUserScore(BaseModel):
    position: Integer  # within the requested ranking
    score: Score


class BeatmapScores(BaseModel):
    # top scores, descending
    scores: list[Score]
    # the current user's score, when they have one
    user_score: BeatmapUserScore | None = Field(default=None, alias="userScore")


Score.model_rebuild()
MultiplayerScores.model_rebuild()
MultiplayerScoresAround.model_rebuild()
BeatmapUserScore.model_rebuild()
BeatmapScores.model_rebuild()
