from __future__ import annotations

from pydantic import Field

from osu_types.constants.beatmaps import BeatmapPackType
from osu_types.constants.beatmaps import RankStatus
from osu_types.constants.gamemodes import Ruleset
from osu_types.models import BaseModel
from osu_types.models.fields import Boolean
from osu_types.models.fields import Float
from osu_types.models.fields import Integer
from osu_types.models.fields import JsonValue
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp
from osu_types.models.fields import Unknown

__all__ = (
    "Covers",
    "Failtimes",
    "Nomination",
    "Beatmap",
    "BeatmapExtended",
    "Beatmapset",
    "BeatmapsetExtended",
    "BeatmapsetAvailability",
    "BeatmapsetHype",
    "NominationsSummary",
    "BeatmapDifficultyAttributes",
    "BeatmapPack",
    "BeatmapPackCompletion",
    "BeatmapPlaycount",
)


def _rank_status(status: str) -> RankStatus | Unknown:
    try:
        return RankStatus(status)
    except ValueError:
        return Unknown(RankStatus, status)


class Covers(BaseModel):
    cover: String
    cover_2x: String = Field(alias="cover@2x")
    card: String
    card_2x: String = Field(alias="card@2x")
    list: String
    list_2x: String = Field(alias="list@2x")
    slimcover: String
    slimcover_2x: String = Field(alias="slimcover@2x")


class Failtimes(BaseModel):
    """Both arrays have 100 entries; the api always sends at least one."""

    exit: list[Integer] | None = None
    fail: list[Integer] | None = None


class Nomination(BaseModel):
    beatmapset_id: Integer
    rulesets: list[OpenEnum[Ruleset]]
    reset: Boolean
    user_id: Integer


class Beatmap(BaseModel):
    """A single playable chart within a beatmapset."""

    beatmapset_id: Integer
    difficulty_rating: Float
    id: Integer
    mode: OpenEnum[Ruleset]
    status: String
    total_length: Integer
    user_id: Integer
    version: String

    # null when the beatmapset is gone (e.g. deleted); an extended
    # beatmapset keeps its extra keys in `model_extra`
    beatmapset: Beatmapset | None = None
    checksum: String | None = None
    failtimes: Failtimes | None = None
    max_combo: Integer | None = None

    @property
    def rank_status(self) -> RankStatus | Unknown:
        return _rank_status(self.status)


class BeatmapExtended(Beatmap):
    accuracy: Float
    ar: Float
    bpm: Float | None = None
    convert: Boolean
    count_circles: Integer
    count_sliders: Integer
    count_spinners: Integer
    cs: Float
    deleted_at: Timestamp | None = None
    drain: Float
    hit_length: Integer
    is_scoreable: Boolean
    last_updated: Timestamp
    mode_int: Integer
    passcount: Integer
    playcount: Integer
    ranked: OpenEnum[RankStatus]
    url: String


class Beatmapset(BaseModel):
    """A bundle of beatmaps sharing artist and title metadata."""

    artist: String
    artist_unicode: String
    covers: Covers
    creator: String
    favourite_count: Integer
    id: Integer
    nsfw: Boolean
    offset: Integer
    play_count: Integer
    preview_url: String
    source: String
    status: String
    spotlight: Boolean
    title: String
    title_unicode: String
    user_id: Integer
    video: Boolean

    # either shape; keys of the extended one stay in `model_extra`
    # until `widen` is applied
    beatmaps: list[Beatmap] | None = None
    converts: JsonValue = None
    current_nominations: list[Nomination] | None = None
    current_user_attributes: JsonValue = None
    description: JsonValue = None
    discussions: JsonValue = None
    events: JsonValue = None
    genre: JsonValue = None
    has_favourited: Boolean | None = None
    language: JsonValue = None
    nominations: JsonValue = None
    pack_tags: list[String] | None = None
    ratings: JsonValue = None
    recent_favourites: JsonValue = None
    related_users: JsonValue = None
    user: JsonValue = None
    track_id: Integer | None = None

    @property
    def rank_status(self) -> RankStatus | Unknown:
        return _rank_status(self.status)


class BeatmapsetAvailability(BaseModel):
    download_disabled: Boolean
    more_information: String | None = None


class BeatmapsetHype(BaseModel):
    current: Integer
    required: Integer


class NominationsSummary(BaseModel):
    current: Integer
    required: Integer


class BeatmapsetExtended(Beatmapset):
    availability: BeatmapsetAvailability
    bpm: Float
    can_be_hyped: Boolean
    deleted_at: Timestamp | None = None
    discussion_enabled: Boolean  # deprecated, always true
    discussion_locked: Boolean
    hype: BeatmapsetHype | None
    is_scoreable: Boolean
    last_updated: Timestamp
    legacy_thread_url: String | None = None
    nominations_summary: NominationsSummary
    ranked: OpenEnum[RankStatus]
    ranked_date: Timestamp | None = None
    storyboard: Boolean
    submitted_date: Timestamp | None = None
    tags: String
    has_favourited: Boolean


class BeatmapDifficultyAttributes(BaseModel):
    """Difficulty attributes of a beatmap, for one ruleset and mod combination."""

    max_combo: Integer
    star_rating: Float

    # osu!
    aim_difficulty: Float
    approach_rate: Float
    flashlight_difficulty: Float
    overall_difficulty: Float
    slider_factor: Float
    speed_difficulty: Float

    # osu!taiko
    stamina_difficulty: Float
    rhythm_difficulty: Float
    colour_difficulty: Float

    # osu!taiko, osu!mania
    great_hit_window: Float

    # osu!mania
    score_multiplier: Float


class BeatmapPackCompletion(BaseModel):
    # ids of the beatmapsets the user has completed for this pack
    beatmapset_ids: list[Integer] | None = None
    completed: Boolean | None = None


class BeatmapPack(BaseModel):
    author: String
    date: Timestamp
    name: String
    no_diff_reduction: Boolean
    ruleset_id: Integer
    tag: String
    url: String
    beatmapsets: list[Beatmapset] | None = None
    user_completion_data: BeatmapPackCompletion

    @property
    def pack_type(self) -> BeatmapPackType | Unknown:
        # tags look like `S123`, `F45`
        prefix = self.tag[:1]
        try:
            return BeatmapPackType(prefix)
        except ValueError:
            return Unknown(BeatmapPackType, prefix)


class BeatmapPlaycount(BaseModel):
    beatmap_id: Integer
    beatmap: Beatmap | None = None
    beatmapset: Beatmapset | None = None
    count: Integer


Beatmap.model_rebuild()
BeatmapExtended.model_rebuild()
Beatmapset.model_rebuild()
BeatmapsetExtended.model_rebuild()
BeatmapPack.model_rebuild()
BeatmapPlaycount.model_rebuild()
