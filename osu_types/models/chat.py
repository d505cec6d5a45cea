from __future__ import annotations

from osu_types.constants.chat import ChannelType
from osu_types.models import BaseModel
from osu_types.models.fields import Boolean
from osu_types.models.fields import Integer
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp
from osu_types.models.users import User

__all__ = (
    "ChatChannelUserAttributes",
    "ChatMessage",
    "ChatChannel",
)


class ChatChannelUserAttributes(BaseModel):
    can_message: Boolean
    can_message_error: String | None = None
    last_read_id: Integer


class ChatMessage(BaseModel):
    channel_id: Integer
    content: String
    is_action: Boolean  # e.g. /me dances
    message_id: Integer
    sender_id: Integer
    timestamp: Timestamp
    type: String  # action, markdown or plain
    uuid: String | None = None  # identifier originally sent by the client
    sender: User | None = None


class ChatChannel(BaseModel):
    channel_id: Integer
    name: String
    description: String | None = None
    icon: String | None = None
    type: OpenEnum[ChannelType]
    message_length_limit: Integer
    moderated: Boolean  # messages can't be sent while true
    uuid: String | None = None
    # the channel shape (`can_message`, `last_read_id`), never the
    # comment one with `can_new_comment_reason`
    current_user_attributes: ChatChannelUserAttributes | None = None
    last_read_id: Integer | None = None  # deprecated
    # only sent in presence responses
    last_message_id: Integer | None = None
    recent_messages: list[ChatMessage] | None = None  # deprecated
    # not sent for public channels
    users: list[Integer] | None = None

    @property
    def read_up_to(self) -> int | None:
        if self.current_user_attributes is not None:
            return self.current_user_attributes.last_read_id
        return self.last_read_id

    @property
    def has_unread(self) -> bool:
        read_up_to = self.read_up_to
        if self.last_message_id is None or read_up_to is None:
            return False
        return self.last_message_id > read_up_to
