from __future__ import annotations

from osu_types.models import BaseModel
from osu_types.models.fields import Integer
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp

__all__ = (
    "NewsPost",
    "Navigation",
)


class NewsPost(BaseModel):
    author: String
    edit_url: String
    first_image: String | None = None
    id: Integer
    published_at: Timestamp
    slug: String  # filename without the extension
    title: String
    updated_at: Timestamp
    content: String | None = None  # html
    navigation: Navigation | None = None
    # first paragraph of the content, html stripped
    preview: String | None = None


class Navigation(BaseModel):
    newer: NewsPost | None = None
    older: NewsPost | None = None


NewsPost.model_rebuild()
Navigation.model_rebuild()
