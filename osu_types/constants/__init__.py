from __future__ import annotations

from enum import StrEnum


class OrdinalStrEnum(StrEnum):
    """A string enum that also resolves its declaration index."""

    @classmethod
    def _missing_(cls, value: object) -> OrdinalStrEnum | None:
        # older payloads carry the declaration index instead of the name
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        return None
