"""
Shared payload fixtures.

Every payload here is in canonical wire form (floats written as floats,
timestamps with an explicit +00:00 offset, rank statuses as integers) so
that encoding a decoded payload gives back the exact same json.
"""
from __future__ import annotations

from typing import Any

import pytest

TIMESTAMP = "2020-01-01T00:00:00+00:00"


def make_user() -> dict[str, Any]:
    return {
        "id": 1,
        "username": "alice",
        "avatar_url": "a",
        "country_code": "US",
        "is_active": True,
        "is_bot": False,
        "is_deleted": False,
        "is_online": False,
        "is_supporter": False,
        "pm_friends_only": False,
        "ranked_beatmapset_count": 0,
        "replays_watched_counts": 0,
    }


def make_user_extended() -> dict[str, Any]:
    return {
        **make_user(),
        "cover_url": "https://assets.ppy.sh/user-profile-covers/1/cover.jpg",
        "has_supported": True,
        "join_date": TIMESTAMP,
        "max_blocks": 50,
        "max_friends": 250,
        "playmode": "osu",
        "playstyle": ["mouse", "keyboard"],
        "post_count": 12,
        "profile_order": ["me", "top_ranks", "medals"],
    }


def make_covers() -> dict[str, Any]:
    return {
        "cover": "cover.jpg",
        "cover@2x": "cover@2x.jpg",
        "card": "card.jpg",
        "card@2x": "card@2x.jpg",
        "list": "list.jpg",
        "list@2x": "list@2x.jpg",
        "slimcover": "slimcover.jpg",
        "slimcover@2x": "slimcover@2x.jpg",
    }


def make_beatmap(beatmap_id: int = 75) -> dict[str, Any]:
    return {
        "beatmapset_id": 1,
        "difficulty_rating": 2.55,
        "id": beatmap_id,
        "mode": "osu",
        "status": "ranked",
        "total_length": 142,
        "user_id": 2,
        "version": "Normal",
    }


def make_beatmap_extended(beatmap_id: int = 75) -> dict[str, Any]:
    return {
        **make_beatmap(beatmap_id),
        "accuracy": 6.0,
        "ar": 6.0,
        "bpm": 160.0,
        "convert": False,
        "count_circles": 160,
        "count_sliders": 30,
        "count_spinners": 3,
        "cs": 4.0,
        "deleted_at": None,
        "drain": 6.0,
        "hit_length": 108,
        "is_scoreable": True,
        "last_updated": TIMESTAMP,
        "mode_int": 0,
        "passcount": 153031,
        "playcount": 587428,
        "ranked": 1,
        "url": "https://osu.ppy.sh/beatmaps/75",
    }


def make_beatmapset() -> dict[str, Any]:
    return {
        "artist": "Kenji Ninuma",
        "artist_unicode": "Kenji Ninuma",
        "covers": make_covers(),
        "creator": "peppy",
        "favourite_count": 1000,
        "id": 1,
        "nsfw": False,
        "offset": 0,
        "play_count": 600000,
        "preview_url": "//b.ppy.sh/preview/1.mp3",
        "source": "",
        "status": "ranked",
        "spotlight": False,
        "title": "DISCO PRINCE",
        "title_unicode": "DISCO PRINCE",
        "user_id": 2,
        "video": False,
    }


def make_beatmapset_extended() -> dict[str, Any]:
    return {
        **make_beatmapset(),
        "availability": {"download_disabled": False, "more_information": None},
        "bpm": 120.0,
        "can_be_hyped": False,
        "deleted_at": None,
        "discussion_enabled": True,
        "discussion_locked": False,
        "hype": None,
        "is_scoreable": True,
        "last_updated": TIMESTAMP,
        "legacy_thread_url": "https://osu.ppy.sh/community/forums/topics/1",
        "nominations_summary": {"current": 0, "required": 2},
        "ranked": 1,
        "ranked_date": TIMESTAMP,
        "storyboard": False,
        "submitted_date": TIMESTAMP,
        "tags": "katamari",
        "has_favourited": False,
    }


def make_score() -> dict[str, Any]:
    return {
        "accuracy": 0.9876,
        "beatmap_id": 75,
        "classic_total_score": 1234567,
        "ended_at": TIMESTAMP,
        "has_replay": True,
        "id": 4000,
        "is_perfect_combo": False,
        "legacy_perfect": False,
        "legacy_total_score": 1234567,
        "max_combo": 300,
        "maximum_statistics": {"great": 193},
        "mods": [{"acronym": "HD"}],
        "passed": True,
        "playlist_item_id": 0,
        "preserve": True,
        "processed": True,
        "rank": "S",
        "ranked": True,
        "room_id": 0,
        "ruleset_id": 0,
        "statistics": {"great": 190, "ok": 3},
        "total_score": 987654,
        "type": "solo_score",
        "user_id": 1,
    }


def make_user_statistics() -> dict[str, Any]:
    return {
        "count_100": 1000,
        "count_300": 20000,
        "count_50": 100,
        "count_miss": 500,
        "country_rank": 3,
        "global_rank": 120,
        "grade_counts": {"a": 10, "s": 20, "sh": 5, "ss": 2, "ssh": 1},
        "hit_accuracy": 98.5,
        "is_ranked": True,
        "level": {"current": 100, "progress": 42.0},
        "maximum_combo": 2000,
        "play_count": 5000,
        "play_time": 360000,
        "pp": 7000.5,
        "pp_exp": 0.0,
        "ranked_score": 10000000,
        "replays_watched_by_others": 30,
        "total_hits": 21100,
        "total_score": 30000000,
    }


def make_comment(comment_id: int, parent_id: int | None = None) -> dict[str, Any]:
    return {
        "commentable_id": 1,
        "commentable_type": "beatmapset",
        "created_at": TIMESTAMP,
        "id": comment_id,
        "parent_id": parent_id,
        "pinned": False,
        "replies_count": 0,
        "updated_at": TIMESTAMP,
        "user_id": 1,
        "votes_count": 3,
    }


def make_comment_bundle() -> dict[str, Any]:
    return {
        "commentable_meta": [
            {
                "id": 1,
                "title": "DISCO PRINCE",
                "type": "beatmapset",
                "url": "https://osu.ppy.sh/beatmapsets/1",
                "owner_id": 2,
                "owner_title": "MAPPER",
                "current_user_attributes": {"can_new_comment_reason": None},
            },
        ],
        "comments": [make_comment(10)],
        "cursor": {"created_at": TIMESTAMP, "id": 10},
        "has_more": False,
        "included_comments": [make_comment(11, parent_id=10)],
        "sort": "new",
        "user_follow": False,
        "user_votes": [10],
        "users": [make_user()],
    }


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return make_user()


@pytest.fixture
def user_extended_payload() -> dict[str, Any]:
    return make_user_extended()


@pytest.fixture
def beatmap_payload() -> dict[str, Any]:
    return make_beatmap()


@pytest.fixture
def beatmap_extended_payload() -> dict[str, Any]:
    return make_beatmap_extended()


@pytest.fixture
def beatmapset_payload() -> dict[str, Any]:
    return make_beatmapset()


@pytest.fixture
def beatmapset_extended_payload() -> dict[str, Any]:
    return make_beatmapset_extended()


@pytest.fixture
def score_payload() -> dict[str, Any]:
    return make_score()


@pytest.fixture
def comment_bundle_payload() -> dict[str, Any]:
    return make_comment_bundle()
