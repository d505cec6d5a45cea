from __future__ import annotations

from osu_types.models import BaseModel
from osu_types.models.fields import String

__all__ = ("WikiPage",)


class WikiPage(BaseModel):
    available_locales: list[String]
    layout: String
    locale: String  # lowercase BCP 47 language tag
    markdown: String
    path: String
    subtitle: String | None = None
    tags: list[String]
    title: String
