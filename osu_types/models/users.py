from __future__ import annotations

from pydantic import Field

from osu_types.constants.gamemodes import Ruleset
from osu_types.constants.users import UserAccountHistoryType
from osu_types.constants.users import UserProfilePage
from osu_types.models import BaseModel
from osu_types.models.beatmaps import Covers
from osu_types.models.fields import Boolean
from osu_types.models.fields import Float
from osu_types.models.fields import Integer
from osu_types.models.fields import JsonValue
from osu_types.models.fields import OpenEnum
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp

__all__ = (
    "Description",
    "Group",
    "UserGroup",
    "UserKudosu",
    "UserProfileBanner",
    "UserRankHighest",
    "UserAccountHistory",
    "UserBadge",
    "UserSilence",
    "UserGradeCounts",
    "UserLevel",
    "UserStatistics",
    "User",
    "UserExtended",
    "Giver",
    "Post",
    "KudosuHistory",
)


class Description(BaseModel):
    html: String
    markdown: String


class Group(BaseModel):
    """\
    A user group. Not returned by any endpoint on its own, only as the
    base of `UserGroup`.
    """

    colour: String | None = None
    has_listing: Boolean  # whether /groups/{id} lists the members
    has_playmodes: Boolean  # whether memberships carry rulesets
    id: Integer
    identifier: String
    is_probationary: Boolean
    name: String
    short_name: String
    description: Description | None = None


class UserGroup(Group):
    """A user's membership of a group."""

    # null unless the group has playmodes
    playmodes: list[String] | None = None


class UserKudosu(BaseModel):
    available: Integer
    total: Integer


class UserProfileBanner(BaseModel):
    id: Integer
    tournament_id: Integer
    image: String | None = None
    image_2x: String | None = Field(default=None, alias="image@2x")


class UserRankHighest(BaseModel):
    rank: Integer
    updated_at: Timestamp


class UserAccountHistory(BaseModel):
    description: String
    id: Integer
    length: Integer  # seconds
    permanent: Boolean
    timestamp: Timestamp
    type: OpenEnum[UserAccountHistoryType]


class UserBadge(BaseModel):
    awarded_at: Timestamp
    description: String
    image_2x_url: String = Field(alias="image@2x_url")
    image_url: String
    url: String


class UserSilence(BaseModel):
    id: Integer
    user_id: Integer  # the silenced user


class UserGradeCounts(BaseModel):
    a: Integer
    s: Integer
    sh: Integer
    ss: Integer
    ssh: Integer


class UserLevel(BaseModel):
    current: Integer
    progress: Float


class UserStatistics(BaseModel):
    """A user's gameplay statistics for a single ruleset."""

    count_100: Integer
    count_300: Integer
    count_50: Integer
    count_miss: Integer
    country_rank: Integer | None = None
    grade_counts: UserGradeCounts
    hit_accuracy: Float
    is_ranked: Boolean
    level: UserLevel
    maximum_combo: Integer
    play_count: Integer
    play_time: Integer
    pp: Float
    pp_exp: Float
    global_rank: Integer | None = None
    global_rank_exp: Integer | None = None
    ranked_score: Integer
    replays_watched_by_others: Integer
    total_hits: Integer
    total_score: Integer
    rank_change_since_30_days: Integer | None = None
    user: User | None = None


class User(BaseModel):
    avatar_url: String
    country_code: String  # ISO 3166-1 alpha-2
    default_group: String | None = None
    id: Integer
    is_active: Boolean
    is_bot: Boolean
    is_deleted: Boolean
    is_online: Boolean
    is_supporter: Boolean
    # null when the user hides their online presence
    last_visit: Timestamp | None = None
    pm_friends_only: Boolean
    profile_colour: String | None = None
    username: String

    account_history: list[UserAccountHistory] | None = None
    active_tournament_banner: UserProfileBanner | None = None  # deprecated
    active_tournament_banners: list[UserProfileBanner] | None = None
    badges: list[UserBadge] | None = None
    beatmap_playcounts_count: Integer | None = None
    blocks: JsonValue = None
    country: String | None = None
    cover: Covers | None = None
    favourite_beatmapset_count: Integer | None = None
    follow_user_mapping: list[Integer] | None = None
    follower_count: Integer | None = None
    friends: Integer | None = None
    graveyard_beatmapset_count: Integer | None = None
    groups: list[UserGroup] | None = None
    guest_beatmapset_count: Integer | None = None
    is_restricted: Boolean | None = None
    kudosu: UserKudosu | None = None
    loved_beatmapset_count: Integer | None = None
    mapping_follower_count: Integer | None = None
    monthly_playcounts: list[JsonValue] | None = None
    page: Integer | None = None
    pending_beatmapset_count: Integer | None = None
    previous_usernames: list[String] | None = None
    rank_highest: UserRankHighest | None = None
    rank_history: list[Integer] | None = None
    ranked_beatmapset_count: Integer
    replays_watched_counts: Integer
    scores_best_count: Integer | None = None
    scores_first_count: Integer | None = None
    scores_recent_count: Integer | None = None
    session_verified: Boolean | None = None
    statistics: UserStatistics | None = None
    statistics_rulesets: list[JsonValue] | None = None
    support_level: Integer | None = None
    unread_pm_count: Integer | None = None
    user_achievements: JsonValue = None
    user_preferences: JsonValue = None


class UserExtended(User):
    cover_url: String  # deprecated, use cover.url
    discord: String | None = None
    has_supported: Boolean
    interests: String | None = None
    join_date: Timestamp
    location: String | None = None
    max_blocks: Integer
    max_friends: Integer
    occupation: String | None = None
    playmode: OpenEnum[Ruleset]
    playstyle: list[String]
    post_count: Integer
    profile_hue: Integer | None = None
    profile_order: list[OpenEnum[UserProfilePage]]
    title: String | None = None
    title_url: String | None = None
    twitter: String | None = None
    website: String | None = None


class Giver(BaseModel):
    url: String
    username: String


class Post(BaseModel):
    url: String | None = None
    # "[deleted beatmap]" for deleted beatmaps
    title: String


class KudosuHistory(BaseModel):
    id: Integer
    # give, vote.give, reset, vote.reset, revoke or vote.revoke
    action: String
    amount: Integer
    model: String  # e.g. forum_post
    created_at: Timestamp
    giver: Giver | None = None
    post: Post


UserStatistics.model_rebuild()
User.model_rebuild()
UserExtended.model_rebuild()
