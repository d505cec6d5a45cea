"""Unit tests for lenient decoding of drifted payloads."""
from __future__ import annotations

import logging

import pytest

from osu_types import Beatmap
from osu_types import DecodeError
from osu_types import MissingField
from osu_types import Presence
from osu_types import Score
from osu_types import TypeMismatch
from osu_types import User
from osu_types import decode
from osu_types import decode_many
from osu_types import encode
from tests.conftest import make_beatmapset
from tests.conftest import make_score

COUNTRY = {"code": "US", "name": "United States"}


class TestStrict:
    """Without leniency any invalid field fails the decode."""

    def test_drifted_optional_field(self, user_payload):
        user_payload["country"] = COUNTRY

        with pytest.raises(DecodeError) as exc_info:
            decode(User, user_payload)

        assert exc_info.value.first == TypeMismatch(
            path="country",
            expected="string",
            actual="object",
        )


class TestLenient:
    def test_drops_invalid_optional_field(self, user_payload):
        user_payload["country"] = COUNTRY

        user = decode(User, user_payload, lenient=True)

        assert user.country is None
        assert user.presence("country") is Presence.ABSENT
        assert "country" not in encode(user)

    def test_keeps_valid_fields(self, user_payload):
        user_payload["country"] = COUNTRY
        user_payload["follower_count"] = 10
        user_payload["brand_new"] = [1, 2, 3]

        user = decode(User, user_payload, lenient=True)

        assert user.follower_count == 10
        assert user.model_extra == {"brand_new": [1, 2, 3]}

    def test_drops_whole_list(self, user_payload):
        user_payload["follow_user_mapping"] = [1, "2", 3]

        user = decode(User, user_payload, lenient=True)

        assert user.follow_user_mapping is None

    def test_drops_invalid_embedded_entity(self, score_payload):
        # deleted users come back without most of their fields
        score_payload["user"] = {"id": 1, "username": "[deleted user]"}

        score = decode(Score, score_payload, lenient=True)

        assert score.user is None
        assert score.id == 4000

    def test_drops_deep_inside_embedded_entity(self, beatmap_payload):
        beatmapset = make_beatmapset()
        beatmapset["pack_tags"] = "S1"
        beatmap_payload["beatmapset"] = beatmapset

        beatmap = decode(Beatmap, beatmap_payload, lenient=True)

        assert beatmap.beatmapset is not None
        assert beatmap.beatmapset.pack_tags is None
        assert beatmap.beatmapset.title == "DISCO PRINCE"

    def test_required_field_still_fails(self, user_payload):
        user_payload["country"] = COUNTRY
        del user_payload["username"]

        with pytest.raises(DecodeError) as exc_info:
            decode(User, user_payload, lenient=True)

        assert exc_info.value.first == MissingField(path="username", field="username")

    def test_required_field_of_wrong_kind(self, score_payload):
        score_payload["id"] = "4000"

        with pytest.raises(DecodeError) as exc_info:
            decode(Score, score_payload, lenient=True)

        assert exc_info.value.first == TypeMismatch(
            path="id",
            expected="integer",
            actual="string",
        )

    def test_logs_dropped_fields(self, user_payload, caplog):
        user_payload["country"] = COUNTRY

        with caplog.at_level(logging.WARNING, logger="osu_types"):
            decode(User, user_payload, lenient=True)

        assert "Dropping invalid optional fields of User: country." in caplog.text

    def test_many(self):
        first = make_score()
        second = make_score()
        second["user"] = {"id": 2}

        scores = decode_many(Score, [first, second], lenient=True)

        assert [score.user for score in scores] == [None, None]
        assert "user" not in encode(scores[1])

    def test_setting_enables_leniency(self, user_payload, monkeypatch):
        monkeypatch.setattr("osu_types.settings.DECODE_LENIENT", True)
        user_payload["country"] = COUNTRY

        assert decode(User, user_payload).country is None

    def test_argument_overrides_setting(self, user_payload, monkeypatch):
        monkeypatch.setattr("osu_types.settings.DECODE_LENIENT", True)
        user_payload["country"] = COUNTRY

        with pytest.raises(DecodeError):
            decode(User, user_payload, lenient=False)
