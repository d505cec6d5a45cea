from __future__ import annotations

from osu_types.models import BaseModel
from osu_types.models.fields import Boolean
from osu_types.models.fields import Integer
from osu_types.models.fields import String
from osu_types.models.fields import Timestamp

__all__ = (
    "GithubUser",
    "ChangelogEntry",
    "Versions",
    "Build",
    "UpdateStream",
)


class GithubUser(BaseModel):
    display_name: String
    github_url: String | None = None
    github_username: String | None = None
    id: Integer | None = None
    osu_username: String | None = None
    user_id: Integer | None = None
    user_url: String | None = None


class ChangelogEntry(BaseModel):
    category: String
    created_at: Timestamp | None = None
    github_pull_request_id: Integer | None = None
    github_url: String | None = None
    id: Integer | None = None
    major: Boolean
    repository: String | None = None
    title: String | None = None
    type: String
    url: String | None = None
    # a placeholder is generated when the entry has no github user
    github_user: GithubUser | None = None
    message: String | None = None  # markdown, embedded html allowed
    message_html: String | None = None


class Versions(BaseModel):
    next: Build | None = None
    previous: Build | None = None


class Build(BaseModel):
    created_at: Timestamp
    display_version: String
    id: Integer
    update_stream: UpdateStream | None = None
    users: Integer
    version: String | None = None
    youtube_id: String | None = None
    # a placeholder is generated when the build has no entries
    changelog_entries: list[ChangelogEntry] | None = None
    versions: Versions | None = None


class UpdateStream(BaseModel):
    display_name: String | None = None
    id: Integer
    is_featured: Boolean
    name: String
    latest_build: Build | None = None
    user_count: Integer | None = None


Versions.model_rebuild()
Build.model_rebuild()
UpdateStream.model_rebuild()
