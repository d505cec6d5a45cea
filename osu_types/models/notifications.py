from __future__ import annotations

from osu_types.models import BaseModel
from osu_types.models.fields import Boolean
from osu_types.models.fields import Integer
from osu_types.models.fields import JsonValue
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp

__all__ = ("Notification",)


class Notification(BaseModel):
    id: Integer
    name: String  # name of the event
    created_at: Timestamp
    object_type: String
    object_id: Integer
    source_user_id: Integer | None = None
    is_read: Boolean
    # shape depends on `name`
    details: JsonValue
