"""Schemes of the Confluence REST API v2.

v2 endpoints paginate with opaque cursors. Every ``*ChunkScheme`` carries
the link to the next chunk in ``links["next"]``; ``next_cursor`` extracts
the cursor from it so callers can request the following chunk.
"""

from typing import Any
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, Field

from atlassian_rest.confluence.models import LinkedModel
from atlassian_rest.core.models import AtlassianModel


class ChunkScheme(LinkedModel):
    """Base for cursor-paginated results."""

    @property
    def next_cursor(self) -> str:
        """Cursor of the next chunk, or an empty string on the last one."""
        link = (self.links or {}).get("next")
        if not link:
            return ""
        values = parse_qs(urlparse(link).query).get("cursor")
        return values[0] if values else ""


class BodyRepresentationScheme(AtlassianModel):
    representation: str | None = None
    value: str | None = None


class BodyScheme(AtlassianModel):
    storage: BodyRepresentationScheme | None = None
    atlas_doc_format: BodyRepresentationScheme | None = Field(default=None, alias="atlas_doc_format")
    view: BodyRepresentationScheme | None = None


class VersionScheme(AtlassianModel):
    created_at: str | None = None
    message: str | None = None
    number: int | None = None
    minor_edit: bool | None = None
    author_id: str | None = None


class VersionPayloadScheme(AtlassianModel):
    number: int
    message: str | None = None


# Pages


class PageScheme(LinkedModel):
    id: str | None = None
    status: str | None = None
    title: str | None = None
    space_id: str | None = None
    parent_id: str | None = None
    parent_type: str | None = None
    position: int | None = None
    author_id: str | None = None
    owner_id: str | None = None
    created_at: str | None = None
    version: VersionScheme | None = None
    body: BodyScheme | None = None


class PageChunkScheme(ChunkScheme):
    results: list[PageScheme] = Field(default_factory=list)


class ChildPageScheme(AtlassianModel):
    id: str | None = None
    status: str | None = None
    title: str | None = None
    space_id: str | None = None
    child_position: int | None = None


class ChildPageChunkScheme(ChunkScheme):
    results: list[ChildPageScheme] = Field(default_factory=list)


class PageCreatePayloadScheme(AtlassianModel):
    space_id: str
    title: str | None = None
    status: str | None = None
    parent_id: str | None = None
    body: BodyRepresentationScheme | None = None


class PageUpdatePayloadScheme(AtlassianModel):
    id: str
    status: str
    title: str
    space_id: str | None = None
    parent_id: str | None = None
    owner_id: str | None = None
    body: BodyRepresentationScheme | None = None
    version: VersionPayloadScheme | None = None


# Spaces


class SpaceDescriptionScheme(AtlassianModel):
    plain: BodyRepresentationScheme | None = None
    view: BodyRepresentationScheme | None = None


class SpaceScheme(LinkedModel):
    id: str | None = None
    key: str | None = None
    name: str | None = None
    type: str | None = None
    status: str | None = None
    author_id: str | None = None
    created_at: str | None = None
    homepage_id: str | None = None
    description: SpaceDescriptionScheme | None = None
    icon: dict[str, Any] | None = None


class SpaceChunkScheme(ChunkScheme):
    results: list[SpaceScheme] = Field(default_factory=list)


class SpacePermissionPrincipalScheme(AtlassianModel):
    type: str | None = None
    id: str | None = None


class SpacePermissionOperationScheme(AtlassianModel):
    key: str | None = None
    target_type: str | None = None


class SpacePermissionScheme(AtlassianModel):
    id: str | None = None
    principal: SpacePermissionPrincipalScheme | None = None
    operation: SpacePermissionOperationScheme | None = None


class SpacePermissionPageScheme(ChunkScheme):
    results: list[SpacePermissionScheme] = Field(default_factory=list)


class GetSpacesOptionSchemeV2(BaseModel):
    """Filters of the v2 space listing."""

    ids: list[int] = Field(default_factory=list)
    keys: list[str] = Field(default_factory=list)
    type: str = ""
    status: str = ""
    labels: list[str] = Field(default_factory=list)
    sort: str = ""
    description_format: str = ""
    serialize_ids_as_strings: bool = False


# Attachments


class AttachmentScheme(LinkedModel):
    id: str | None = None
    status: str | None = None
    title: str | None = None
    created_at: str | None = None
    page_id: str | None = None
    blog_post_id: str | None = None
    custom_content_id: str | None = None
    media_type: str | None = None
    media_type_description: str | None = None
    comment: str | None = None
    file_id: str | None = None
    file_size: int | None = None
    webui_link: str | None = None
    download_link: str | None = None
    version: VersionScheme | None = None


class AttachmentPageScheme(ChunkScheme):
    results: list[AttachmentScheme] = Field(default_factory=list)


class AttachmentParamsScheme(BaseModel):
    """Filters of an attachment listing."""

    sort: str = ""
    media_type: str = ""
    file_name: str = ""
    serialize_ids_as_strings: bool = False


# Custom content


class CustomContentScheme(LinkedModel):
    id: str | None = None
    type: str | None = None
    status: str | None = None
    title: str | None = None
    space_id: str | None = None
    page_id: str | None = None
    blog_post_id: str | None = None
    custom_content_id: str | None = None
    author_id: str | None = None
    created_at: str | None = None
    version: VersionScheme | None = None
    body: BodyScheme | None = None


class CustomContentPageScheme(ChunkScheme):
    results: list[CustomContentScheme] = Field(default_factory=list)


class CustomContentPayloadScheme(AtlassianModel):
    type: str
    title: str
    status: str | None = None
    id: str | None = None
    space_id: str | None = None
    page_id: str | None = None
    blog_post_id: str | None = None
    custom_content_id: str | None = None
    body: BodyRepresentationScheme | None = None
    version: VersionPayloadScheme | None = None


class CustomContentOptionsScheme(BaseModel):
    """Filters of a custom content listing."""

    ids: list[int] = Field(default_factory=list)
    space_ids: list[int] = Field(default_factory=list)
    sort: str = ""
    body_format: str = ""


# Folders


class FolderScheme(LinkedModel):
    id: str | None = None
    type: str | None = None
    status: str | None = None
    title: str | None = None
    parent_id: str | None = None
    parent_type: str | None = None
    position: int | None = None
    author_id: str | None = None
    owner_id: str | None = None
    created_at: str | None = None
    version: VersionScheme | None = None


class FolderChunkScheme(ChunkScheme):
    results: list[FolderScheme] = Field(default_factory=list)


class FolderCreatePayloadScheme(AtlassianModel):
    space_id: str
    title: str | None = None
    parent_id: str | None = None


class FolderUpdatePayloadScheme(AtlassianModel):
    title: str | None = None
    parent_id: str | None = None
    version: VersionPayloadScheme | None = None


class FolderOptionsScheme(BaseModel):
    """Filters of a folder listing."""

    sort: str = ""
    parent_id: str = ""
    space_ids: list[int] = Field(default_factory=list)


# Descendants


class DescendantScheme(AtlassianModel):
    id: str | None = None
    status: str | None = None
    title: str | None = None
    type: str | None = None
    parent_id: str | None = None
    depth: int | None = None
    child_position: int | None = None


class DescendantChunkScheme(ChunkScheme):
    results: list[DescendantScheme] = Field(default_factory=list)
