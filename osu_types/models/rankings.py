from __future__ import annotations

from osu_types.models import BaseModel
from osu_types.models.beatmaps import BeatmapsetExtended
from osu_types.models.fields import Boolean
from osu_types.models.fields import Cursor
from osu_types.models.fields import Integer
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp
from osu_types.models.users import UserStatistics

__all__ = (
    "Spotlight",
    "Spotlights",
    "Rankings",
)


class Spotlight(BaseModel):
    end_date: Timestamp
    id: Integer
    mode_specific: Boolean  # separate charts per ruleset
    # only sent when viewing a single spotlight
    participant_count: Integer | None = None
    name: String
    start_date: Timestamp
    type: String


class Spotlights(BaseModel):
    spotlights: list[Spotlight]


class Rankings(BaseModel):
    # charts rankings only
    beatmapsets: list[BeatmapsetExtended] | None = None
    cursor: Cursor | None
    # in descending rank order, each with `user` embedded
    ranking: list[UserStatistics]
    spotlight: Spotlight | None = None  # charts rankings only
    total: Integer  # approximate
