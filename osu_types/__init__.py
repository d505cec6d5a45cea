"""Typed models and a validating decoder for the osu! api v2."""
from __future__ import annotations

from osu_types.constants.beatmaps import BeatmapPackType
from osu_types.constants.beatmaps import BeatmapsetDiscussionPermissions
from osu_types.constants.beatmaps import MessageType
from osu_types.constants.beatmaps import RankStatus
from osu_types.constants.chat import ChannelType
from osu_types.constants.gamemodes import Ruleset
from osu_types.constants.listings import CommentSort
from osu_types.constants.listings import ForumTopicType
from osu_types.constants.listings import RankingType
from osu_types.constants.multiplayer import MatchEventType
from osu_types.constants.multiplayer import MultiplayerScoresSort
from osu_types.constants.multiplayer import ScoringType
from osu_types.constants.multiplayer import TeamType
from osu_types.constants.users import UserAccountHistoryType
from osu_types.constants.users import UserProfilePage
from osu_types.decoder import DecodeOptions
from osu_types.decoder import decode
from osu_types.decoder import decode_many
from osu_types.decoder import encode
from osu_types.decoder import narrow
from osu_types.decoder import unknown_variants
from osu_types.decoder import widen
from osu_types.errors import ArrayElementFailure
from osu_types.errors import DecodeError
from osu_types.errors import DecodeIssue
from osu_types.errors import MalformedTimestamp
from osu_types.errors import MissingField
from osu_types.errors import TypeMismatch
from osu_types.errors import UnknownVariant
from osu_types.models import BaseModel
from osu_types.models import Presence
from osu_types.models.beatmaps import *
from osu_types.models.changelog import *
from osu_types.models.chat import *
from osu_types.models.comments import *
from osu_types.models.discussions import *
from osu_types.models.fields import Cursor
from osu_types.models.fields import CursorString
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import Unknown
from osu_types.models.forum import *
from osu_types.models.multiplayer import *
from osu_types.models.news import *
from osu_types.models.notifications import *
from osu_types.models.rankings import *
from osu_types.models.scores import *
from osu_types.models.users import *
from osu_types.models.wiki import *
