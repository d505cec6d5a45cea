from __future__ import annotations

from osu_types.constants.beatmaps import MessageType
from osu_types.models import BaseModel
from osu_types.models.beatmaps import Beatmap
from osu_types.models.beatmaps import Beatmapset
from osu_types.models.comments import CurrentUserAttributes
from osu_types.models.fields import Boolean
from osu_types.models.fields import Integer
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp

__all__ = (
    "BeatmapsetDiscussionPost",
    "BeatmapsetDiscussion",
    "BeatmapsetDiscussionVote",
)


class BeatmapsetDiscussionPost(BaseModel):
    beatmapset_discussion_id: Integer
    created_at: Timestamp
    deleted_at: Timestamp | None = None
    deleted_by_id: Integer | None = None
    id: Integer
    last_editor_id: Integer | None = None
    message: String
    system: Boolean
    updated_at: Timestamp
    user_id: Integer


class BeatmapsetDiscussion(BaseModel):
    """A modding discussion on a beatmapset."""

    beatmap: Beatmap | None = None
    beatmap_id: Integer | None = None
    beatmapset: Beatmapset | None = None
    beatmapset_id: Integer
    can_be_resolved: Boolean
    can_grant_kudosu: Boolean
    created_at: Timestamp
    current_user_attributes: CurrentUserAttributes
    deleted_at: Timestamp | None = None
    deleted_by_id: Integer | None = None
    id: Integer
    kudosu_denied: Boolean
    last_post_at: Timestamp
    message_type: OpenEnum[MessageType]
    parent_id: Integer | None = None
    posts: list[BeatmapsetDiscussionPost] | None = None
    resolved: Boolean
    starting_post: BeatmapsetDiscussionPost | None = None
    timestamp: Integer | None = None  # milliseconds into the beatmap
    updated_at: Timestamp
    user_id: Integer


class BeatmapsetDiscussionVote(BaseModel):
    beatmapset_discussion_id: Integer
    created_at: Timestamp
    id: Integer
    score: Integer
    updated_at: Timestamp
    user_id: Integer
