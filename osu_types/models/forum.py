from __future__ import annotations

from osu_types.constants.listings import ForumTopicType
from osu_types.models import BaseModel
from osu_types.models.fields import Boolean
from osu_types.models.fields import Integer
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp

__all__ = (
    "ForumPostBody",
    "ForumPost",
    "PollText",
    "PollOption",
    "Poll",
    "ForumTopic",
)


class ForumPostBody(BaseModel):
    html: String
    raw: String  # bbcode


class ForumPost(BaseModel):
    created_at: Timestamp
    deleted_at: Timestamp | None = None
    edited_at: Timestamp | None = None
    edited_by_id: Integer | None = None
    forum_id: Integer
    id: Integer
    topic_id: Integer
    user_id: Integer
    body: ForumPostBody


class PollText(BaseModel):
    bbcode: String
    html: String


class PollOption(BaseModel):
    id: Integer  # only unique within the topic
    text: PollText
    # left out while results of an incomplete poll are hidden
    vote_count: Integer | None = None


class Poll(BaseModel):
    allow_vote_change: Boolean
    ended_at: Timestamp | None = None
    hide_incomplete_results: Boolean
    last_vote_at: Timestamp | None = None
    max_votes: Integer
    options: list[PollOption]
    started_at: Timestamp
    title: PollText
    total_vote_count: Integer


class ForumTopic(BaseModel):
    created_at: Timestamp
    deleted_at: Timestamp | None = None
    first_post_id: Integer
    forum_id: Integer
    id: Integer
    is_locked: Boolean
    last_post_id: Integer
    poll: Poll | None = None
    post_count: Integer
    title: String
    type: OpenEnum[ForumTopicType]
    updated_at: Timestamp
    user_id: Integer
