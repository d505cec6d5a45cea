from __future__ import annotations

from enum import unique

from osu_types.constants import OrdinalStrEnum

__all__ = ("ChannelType",)


@unique
class ChannelType(OrdinalStrEnum):
    """\
    Kind of chat channel.

    Public channels, group chats and private messages are all channels.
    """

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    MULTIPLAYER = "MULTIPLAYER"
    SPECTATOR = "SPECTATOR"
    TEMPORARY = "TEMPORARY"  # deprecated
    PM = "PM"
    GROUP = "GROUP"
    ANNOUNCE = "ANNOUNCE"
