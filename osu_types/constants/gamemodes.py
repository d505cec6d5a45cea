from __future__ import annotations

from enum import StrEnum
from enum import unique

__all__ = ("Ruleset",)


@unique
class Ruleset(StrEnum):
    CATCH = "fruits"
    MANIA = "mania"
    STANDARD = "osu"
    TAIKO = "taiko"

    @classmethod
    def from_id(cls, ruleset_id: int) -> Ruleset:
        return _RULESETS_BY_ID[ruleset_id]

    @property
    def id(self) -> int:
        return _RULESET_IDS[self]

    @property
    def display_name(self) -> str:
        return _RULESET_NAMES[self]


_RULESET_IDS = {
    Ruleset.STANDARD: 0,
    Ruleset.TAIKO: 1,
    Ruleset.CATCH: 2,
    Ruleset.MANIA: 3,
}

_RULESETS_BY_ID = {ruleset_id: ruleset for ruleset, ruleset_id in _RULESET_IDS.items()}

_RULESET_NAMES = {
    Ruleset.STANDARD: "osu!",
    Ruleset.TAIKO: "osu!taiko",
    Ruleset.CATCH: "osu!catch",
    Ruleset.MANIA: "osu!mania",
}
