from __future__ import annotations

from osu_types.constants.listings import CommentSort
from osu_types.models import BaseModel
from osu_types.models.fields import Boolean
from osu_types.models.fields import Cursor
from osu_types.models.fields import Integer
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp
from osu_types.models.users import User

__all__ = (
    "CurrentUserAttributes",
    "CommentableMeta",
    "Comment",
    "CommentBundle",
)


class CurrentUserAttributes(BaseModel):
    """\
    Permissions and state of the current user for the object it's
    attached to.

    `can_new_comment_reason` is null when the user may comment and a
    reason sentence otherwise; it is left out entirely on objects which
    can't be commented on. Use `presence()` to tell the two apart.
    """

    can_new_comment_reason: String | None = None


class CommentableMeta(BaseModel):
    current_user_attributes: CurrentUserAttributes | None = None
    id: Integer | None = None
    owner_id: Integer | None = None
    owner_title: String | None = None  # e.g. MAPPER for beatmapsets
    title: String | None = None
    type: String | None = None
    url: String | None = None


class Comment(BaseModel):
    commentable_id: Integer
    commentable_type: String
    created_at: Timestamp
    deleted_at: Timestamp | None = None
    edited_at: Timestamp | None = None
    edited_by_id: Integer | None = None
    id: Integer
    legacy_name: String | None = None
    message: String | None = None
    message_html: String | None = None
    parent_id: Integer | None = None
    pinned: Boolean
    replies_count: Integer
    updated_at: Timestamp
    user_id: Integer
    votes_count: Integer

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class CommentBundle(BaseModel):
    commentable_meta: list[CommentableMeta]
    comments: list[Comment]
    cursor: Cursor | None
    has_more: Boolean
    has_more_id: Integer | None = None
    included_comments: list[Comment]
    pinned_comments: list[Comment] | None = None
    sort: OpenEnum[CommentSort]
    top_level_count: Integer | None = None  # not sent for replies
    total: Integer | None = None  # not sent for replies
    user_follow: Boolean
    user_votes: list[Integer]
    users: list[User]

    def find_user(self, user_id: int) -> User | None:
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def replies_to(self, comment_id: int) -> list[Comment]:
        return [
            comment
            for comment in (*self.comments, *self.included_comments)
            if comment.parent_id == comment_id
        ]
