"""Schemes of the Confluence REST API v1.

Only the commonly used fields are declared; anything else the API returns
is kept as an extra attribute on the model.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from atlassian_rest.core.models import AtlassianModel


class LinkedModel(AtlassianModel):
    """Scheme with the ``_links`` and ``_expandable`` envelopes of the v1 API."""

    links: dict[str, Any] | None = Field(default=None, alias="_links")
    expandable: dict[str, Any] | None = Field(default=None, alias="_expandable")


# Users and groups


class ContentUserScheme(LinkedModel):
    type: str | None = None
    username: str | None = None
    user_key: str | None = None
    account_id: str | None = None
    account_type: str | None = None
    email: str | None = None
    public_name: str | None = None
    display_name: str | None = None
    time_zone: str | None = None
    is_external_collaborator: bool | None = None
    profile_picture: dict[str, Any] | None = None


class SpaceGroupScheme(LinkedModel):
    type: str | None = None
    name: str | None = None
    id: str | None = None


# Content


class BodyNodeScheme(AtlassianModel):
    value: str | None = None
    representation: str | None = None


class BodyScheme(LinkedModel):
    view: BodyNodeScheme | None = None
    export_view: BodyNodeScheme | None = Field(default=None, alias="export_view")
    styled_view: BodyNodeScheme | None = Field(default=None, alias="styled_view")
    storage: BodyNodeScheme | None = None
    editor2: BodyNodeScheme | None = None
    anonymous_export_view: BodyNodeScheme | None = Field(default=None, alias="anonymous_export_view")
    atlas_doc_format: BodyNodeScheme | None = Field(default=None, alias="atlas_doc_format")


class ContentVersionScheme(LinkedModel):
    by: ContentUserScheme | None = None
    number: int | None = None
    when: str | None = None
    friendly_when: str | None = None
    message: str | None = None
    minor_edit: bool | None = None
    content: "ContentScheme | None" = None
    collaborators: dict[str, Any] | None = None


class ContentHistoryScheme(LinkedModel):
    latest: bool | None = None
    created_by: ContentUserScheme | None = None
    created_date: str | None = None
    last_updated: ContentVersionScheme | None = None
    previous_version: ContentVersionScheme | None = None
    contributors: dict[str, Any] | None = None
    next_version: ContentVersionScheme | None = None


class ContentScheme(LinkedModel):
    """A page, blog post, comment or attachment."""

    id: str | None = None
    type: str | None = None
    status: str | None = None
    title: str | None = None
    space: "SpaceScheme | None" = None
    history: ContentHistoryScheme | None = None
    version: ContentVersionScheme | None = None
    ancestors: list["ContentScheme"] | None = None
    children: "ContentChildrenScheme | None" = None
    descendants: "ContentChildrenScheme | None" = None
    container: dict[str, Any] | None = None
    body: BodyScheme | None = None
    metadata: dict[str, Any] | None = None
    extensions: dict[str, Any] | None = None
    restrictions: dict[str, Any] | None = None


class ContentPageScheme(LinkedModel):
    results: list[ContentScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class ContentChildrenScheme(LinkedModel):
    attachment: ContentPageScheme | None = None
    comment: ContentPageScheme | None = None
    page: ContentPageScheme | None = None
    blogpost: ContentPageScheme | None = None


class ContentArchiveIDPayloadScheme(AtlassianModel):
    id: int


class ContentArchivePayloadScheme(AtlassianModel):
    pages: list[ContentArchiveIDPayloadScheme] = Field(default_factory=list)


class ContentArchiveResultScheme(LinkedModel):
    id: str | None = None


class ContentMoveScheme(AtlassianModel):
    page_id: str | None = None


class CopyOptionsDestinationScheme(AtlassianModel):
    type: str
    value: str


class CopyOptionsScheme(AtlassianModel):
    """Payload for copying a single page."""

    copy_attachments: bool | None = None
    copy_permissions: bool | None = None
    copy_properties: bool | None = None
    copy_labels: bool | None = None
    copy_custom_contents: bool | None = None
    destination: CopyOptionsDestinationScheme | None = None
    page_title: str | None = None
    body: dict[str, Any] | None = None


class CopyTitleOptionsScheme(AtlassianModel):
    prefix: str | None = None
    replace: str | None = None
    search: str | None = None


class CopyPageHierarchyPayloadScheme(AtlassianModel):
    """Payload for copying a page together with its descendants."""

    copy_attachments: bool | None = None
    copy_permissions: bool | None = None
    copy_properties: bool | None = None
    copy_labels: bool | None = None
    copy_custom_contents: bool | None = None
    copy_descendants: bool | None = None
    destination_page_id: str | None = None
    title_options: CopyTitleOptionsScheme | None = None


class TaskScheme(LinkedModel):
    """Long running task started by the server."""

    id: str | None = None


class GetContentOptionsScheme(BaseModel):
    """Filters for listing content."""

    context_type: str = ""
    space_key: str = ""
    title: str = ""
    trigger: str = ""
    order_by: str = ""
    posting_day: date | datetime | None = None
    status: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)


class GetContentAttachmentsOptionsScheme(BaseModel):
    expand: list[str] = Field(default_factory=list)
    filename: str = ""
    media_type: str = ""


# Labels, properties, versions


class ContentLabelScheme(AtlassianModel):
    prefix: str | None = None
    name: str | None = None
    id: str | None = None
    label: str | None = None


class ContentLabelPageScheme(LinkedModel):
    results: list[ContentLabelScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class ContentLabelPayloadScheme(AtlassianModel):
    prefix: str
    name: str


class ContentPropertyVersionScheme(AtlassianModel):
    when: str | None = None
    message: str | None = None
    number: int | None = None
    minor_edit: bool | None = None


class ContentPropertyScheme(LinkedModel):
    id: str | None = None
    key: str | None = None
    value: Any = None
    version: ContentPropertyVersionScheme | None = None


class ContentPropertyPageScheme(LinkedModel):
    results: list[ContentPropertyScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class ContentPropertyPayloadScheme(AtlassianModel):
    key: str
    value: Any = None


class ContentVersionPageScheme(LinkedModel):
    results: list[ContentVersionScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class ContentRestoreParamsPayloadScheme(AtlassianModel):
    version_number: int
    message: str | None = None
    restore_title: bool | None = None


class ContentRestorePayloadScheme(AtlassianModel):
    operation_key: str = "restore"
    params: ContentRestoreParamsPayloadScheme


# Comments and permissions


class PermissionSubjectScheme(AtlassianModel):
    identifier: str
    type: str


class CheckPermissionScheme(AtlassianModel):
    subject: PermissionSubjectScheme
    operation: str


class PermissionCheckResponseScheme(AtlassianModel):
    has_permission: bool | None = None
    errors: list[dict[str, Any]] | None = None


# Restrictions


class RestrictionUserPageScheme(LinkedModel):
    results: list[ContentUserScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class RestrictionGroupPageScheme(LinkedModel):
    results: list[SpaceGroupScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class ContentRestrictionDetailScheme(LinkedModel):
    user: RestrictionUserPageScheme | None = None
    group: RestrictionGroupPageScheme | None = None


class ContentRestrictionScheme(LinkedModel):
    operation: str | None = None
    restrictions: ContentRestrictionDetailScheme | None = None
    content: ContentScheme | None = None


class ContentRestrictionPageScheme(LinkedModel):
    results: list[ContentRestrictionScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None
    restrictions_hash: str | None = None


class ContentRestrictionByOperationScheme(LinkedModel):
    read: ContentRestrictionScheme | None = None
    update: ContentRestrictionScheme | None = None


class ContentRestrictionUserPayloadScheme(AtlassianModel):
    type: str = "known"
    account_id: str


class ContentRestrictionGroupPayloadScheme(AtlassianModel):
    type: str = "group"
    name: str | None = None
    id: str | None = None


class ContentRestrictionRestrictionPayloadScheme(AtlassianModel):
    group: list[ContentRestrictionGroupPayloadScheme] | None = None
    user: list[ContentRestrictionUserPayloadScheme] | None = None


class ContentRestrictionUpdateScheme(AtlassianModel):
    operation: str
    restrictions: ContentRestrictionRestrictionPayloadScheme


class ContentRestrictionUpdatePayloadScheme(AtlassianModel):
    results: list[ContentRestrictionUpdateScheme] = Field(default_factory=list)


# Spaces


class SpaceDescriptionValueScheme(AtlassianModel):
    value: str | None = None
    representation: str | None = None


class SpaceDescriptionScheme(AtlassianModel):
    plain: SpaceDescriptionValueScheme | None = None
    view: SpaceDescriptionValueScheme | None = None


class SpaceScheme(LinkedModel):
    id: int | None = None
    key: str | None = None
    name: str | None = None
    icon: dict[str, Any] | None = None
    type: str | None = None
    status: str | None = None
    description: SpaceDescriptionScheme | None = None
    homepage: ContentScheme | None = None
    metadata: dict[str, Any] | None = None
    permissions: list[dict[str, Any]] | None = None


class SpacePageScheme(LinkedModel):
    results: list[SpaceScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None


class GetSpacesOptionScheme(BaseModel):
    """Filters for listing spaces."""

    space_keys: list[str] = Field(default_factory=list)
    space_ids: list[int] = Field(default_factory=list)
    space_type: str = ""
    status: str = ""
    labels: list[str] = Field(default_factory=list)
    favourite: bool = False
    favourite_user_key: str = ""
    expand: list[str] = Field(default_factory=list)


class CreateSpaceDescriptionPlainScheme(AtlassianModel):
    value: str
    representation: str = "plain"


class CreateSpaceDescriptionScheme(AtlassianModel):
    plain: CreateSpaceDescriptionPlainScheme


class CreateSpaceScheme(AtlassianModel):
    key: str = ""
    name: str = ""
    description: CreateSpaceDescriptionScheme | None = None
    anonymous_access: bool | None = None
    unlicensed_access: bool | None = None


class UpdateSpaceHomepageScheme(AtlassianModel):
    id: str


class UpdateSpaceScheme(AtlassianModel):
    name: str | None = None
    description: CreateSpaceDescriptionScheme | None = None
    homepage: UpdateSpaceHomepageScheme | None = None
    type: str | None = None
    status: str | None = None


class SpacePermissionSubjectScheme(AtlassianModel):
    type: str
    identifier: str


class SpacePermissionOperationScheme(AtlassianModel):
    operation: str
    target: str
    key: str | None = None


class SpacePermissionPayloadScheme(AtlassianModel):
    subject: SpacePermissionSubjectScheme
    operation: SpacePermissionOperationScheme


class SpacePermissionArrayPayloadScheme(AtlassianModel):
    subject: SpacePermissionSubjectScheme
    operations: list[SpacePermissionOperationScheme] = Field(default_factory=list)


class SpacePermissionV2Scheme(LinkedModel):
    id: int | None = None
    subject: dict[str, Any] | None = None
    operation: dict[str, Any] | None = None


# Search


class SearchResultScheme(AtlassianModel):
    content: ContentScheme | None = None
    user: ContentUserScheme | None = None
    space: SpaceScheme | None = None
    title: str | None = None
    excerpt: str | None = None
    url: str | None = None
    result_global_container: dict[str, Any] | None = None
    entity_type: str | None = None
    icon_css_class: str | None = None
    last_modified: str | None = None
    friendly_last_modified: str | None = None
    score: float | None = None


class SearchPageScheme(LinkedModel):
    results: list[SearchResultScheme] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None
    total_size: int | None = None
    cql_query: str | None = None
    search_duration: int | None = None


class SearchContentOptions(BaseModel):
    """Optional parameters of a CQL search."""

    context: str = ""
    cursor: str = ""
    next: bool = False
    prev: bool = False
    limit: int = 0
    start: int = 0
    include_archived_spaces: bool = False
    exclude_current_spaces: bool = False
    excerpt: str = ""
    site_permission_type_filter: str = ""
    expand: list[str] = Field(default_factory=list)


# Templates


class TemplateScheme(LinkedModel):
    template_id: str | None = None
    original_template: dict[str, Any] | None = None
    reference_template: dict[str, Any] | None = None
    name: str | None = None
    description: str | None = None
    space: dict[str, Any] | None = None
    labels: list[ContentLabelScheme] | None = None
    template_type: str | None = None
    editor_version: str | None = None
    body: BodyScheme | None = None


class CreateTemplateScheme(AtlassianModel):
    name: str
    template_type: str = "page"
    body: BodyScheme | None = None
    description: str | None = None
    labels: list[ContentLabelPayloadScheme] | None = None
    space: dict[str, Any] | None = None


class UpdateTemplateScheme(AtlassianModel):
    template_id: str
    name: str
    template_type: str = "page"
    body: BodyScheme | None = None
    description: str | None = None
    labels: list[ContentLabelPayloadScheme] | None = None
    space: dict[str, Any] | None = None


for _model in (
    ContentVersionScheme,
    ContentHistoryScheme,
    ContentScheme,
    ContentPageScheme,
    ContentChildrenScheme,
):
    _model.model_rebuild()
