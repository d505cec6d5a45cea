"""\
Helpers for turning osu! api v2 response bodies into entities.

Requests, authentication and rate limiting belong to the http client;
these functions only see the json it got back.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from typing import TypeVar

from osu_types.decoder import decode
from osu_types.decoder import decode_many
from osu_types.errors import DecodeError
from osu_types.logging import Ansi
from osu_types.logging import log
from osu_types.models import BaseModel
from osu_types.models.beatmaps import BeatmapsetExtended
from osu_types.models.comments import CommentBundle
from osu_types.models.fields import Cursor
from osu_types.models.fields import CursorString
from osu_types.models.fields import Integer
from osu_types.models.rankings import Rankings
from osu_types.models.scores import BeatmapScores
from osu_types.models.scores import Score
from osu_types.models.users import UserExtended

__all__ = (
    "BeatmapsetSearch",
    "parse_beatmapset_search",
    "parse_beatmapset",
    "parse_user",
    "parse_user_scores",
    "parse_user_beatmapsets",
    "parse_rankings",
    "parse_score",
    "parse_beatmap_scores",
    "parse_comment_bundle",
    "cursor_params",
)

T = TypeVar("T", bound=BaseModel)


class BeatmapsetSearch(BaseModel):
    """Body of `GET /beatmapsets/search`."""

    beatmapsets: list[BeatmapsetExtended]
    cursor: Cursor | None = None
    # send it back as-is for the next page
    cursor_string: CursorString | None = None
    total: Integer | None = None


def _decode(endpoint: str, model: type[T], payload: Any, lenient: bool | None) -> T:
    try:
        return decode(model, payload, lenient=lenient)
    except DecodeError as exc:
        log(f"Failed to decode {endpoint} response: {exc.first}", Ansi.LRED)
        raise


def _decode_many(
    endpoint: str,
    model: type[T],
    payload: Any,
    lenient: bool | None,
) -> list[T]:
    try:
        return decode_many(model, payload, lenient=lenient)
    except DecodeError as exc:
        log(f"Failed to decode {endpoint} response: {exc.first}", Ansi.LRED)
        raise


# ==================== Beatmap Functions ====================


def parse_beatmapset_search(
    payload: Any,
    lenient: bool | None = None,
) -> BeatmapsetSearch:
    """
    Decode a beatmapset search listing.

    Args:
        payload: Body of /beatmapsets/search
        lenient: Drop optional fields which fail validation

    Returns:
        The beatmapsets on this page and the cursor for the next one
    """
    return _decode("beatmapsets/search", BeatmapsetSearch, payload, lenient)


def parse_beatmapset(payload: Any, lenient: bool | None = None) -> BeatmapsetExtended:
    """
    Decode a single beatmapset, including its beatmaps.

    Args:
        payload: Body of /beatmapsets/{beatmapset_id}
        lenient: Drop optional fields which fail validation
    """
    return _decode("beatmapsets/{id}", BeatmapsetExtended, payload, lenient)


def parse_beatmap_scores(payload: Any, lenient: bool | None = None) -> BeatmapScores:
    """
    Decode a beatmap leaderboard.

    Args:
        payload: Body of /beatmaps/{beatmap_id}/scores
        lenient: Drop optional fields which fail validation

    Returns:
        The top scores, plus the current user's score when they have one
    """
    return _decode("beatmaps/{id}/scores", BeatmapScores, payload, lenient)


# ==================== User Functions ====================


def parse_user(payload: Any, lenient: bool | None = None) -> UserExtended:
    """
    Decode a user profile.

    Args:
        payload: Body of /users/{user_id}/{mode} or /me
        lenient: Drop optional fields which fail validation
    """
    return _decode("users/{id}", UserExtended, payload, lenient)


def parse_user_scores(payload: Any, lenient: bool | None = None) -> list[Score]:
    """
    Decode a user's best, first place or recent scores.

    Args:
        payload: Body of /users/{user_id}/scores/{type}
        lenient: Drop optional fields which fail validation
    """
    return _decode_many("users/{id}/scores", Score, payload, lenient)


def parse_user_beatmapsets(
    payload: Any,
    lenient: bool | None = None,
) -> list[BeatmapsetExtended]:
    """
    Decode the beatmapsets of a user.

    Args:
        payload: Body of /users/{user_id}/beatmapsets/{type}
        lenient: Drop optional fields which fail validation
    """
    return _decode_many("users/{id}/beatmapsets", BeatmapsetExtended, payload, lenient)


def parse_rankings(payload: Any, lenient: bool | None = None) -> Rankings:
    """
    Decode a ranking listing.

    Args:
        payload: Body of /rankings/{mode}/{type}
        lenient: Drop optional fields which fail validation

    Returns:
        The ranking page, with `cursor` pointing at the next one
    """
    return _decode("rankings", Rankings, payload, lenient)


# ==================== Score Functions ====================


def parse_score(payload: Any, lenient: bool | None = None) -> Score:
    """
    Decode a single score.

    Args:
        payload: Body of /scores/{score_id}
        lenient: Drop optional fields which fail validation
    """
    return _decode("scores/{id}", Score, payload, lenient)


# ==================== Comment Functions ====================


def parse_comment_bundle(payload: Any, lenient: bool | None = None) -> CommentBundle:
    """
    Decode a comment listing.

    Args:
        payload: Body of /comments or /comments/{comment_id}
        lenient: Drop optional fields which fail validation
    """
    return _decode("comments", CommentBundle, payload, lenient)


# ==================== Pagination ====================


def cursor_params(
    cursor: Mapping[str, str | int] | str | None,
) -> dict[str, str | int] | None:
    """
    Build the query parameters which fetch the page after `cursor`.

    Args:
        cursor: A `cursor` object or `cursor_string` from the previous page

    Returns:
        Parameters to merge into the next request, or None when there
        are no more pages
    """
    if cursor is None:
        return None

    if isinstance(cursor, str):
        return {"cursor_string": cursor}

    return {f"cursor[{key}]": value for key, value in cursor.items()}
