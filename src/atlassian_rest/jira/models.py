"""Schemes of the Jira platform REST API (v2 and v3).

v2 and v3 share their resources. They differ in rich text: v3 exchanges
Atlassian Document Format objects where v2 uses wiki-markup strings, so
text fields such as ``body`` and ``description`` are typed ``Any``.
"""

from typing import Any

from pydantic import BaseModel, Field

from atlassian_rest.core.models import AtlassianModel


class JiraModel(AtlassianModel):
    """Scheme with the ``self`` link most Jira resources carry."""

    self_url: str | None = Field(default=None, alias="self")


class PageBeanScheme(JiraModel):
    """Offset pagination envelope (``startAt``, ``maxResults``, ``total``)."""

    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None


# Users and groups


class UserScheme(JiraModel):
    account_id: str | None = None
    account_type: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    locale: str | None = None
    avatar_urls: dict[str, str] | None = None
    groups: dict[str, Any] | None = None
    application_roles: dict[str, Any] | None = None
    expand: str | None = None


class UserPayloadScheme(AtlassianModel):
    email_address: str
    products: list[str] = Field(default_factory=list)
    display_name: str | None = None


class UserPageScheme(PageBeanScheme):
    values: list[UserScheme] = Field(default_factory=list)


class GroupScheme(JiraModel):
    name: str | None = None
    group_id: str | None = None
    users: dict[str, Any] | None = None
    expand: str | None = None


class GroupPageScheme(PageBeanScheme):
    values: list[GroupScheme] = Field(default_factory=list)


class GroupMemberPageScheme(PageBeanScheme):
    values: list[UserScheme] = Field(default_factory=list)


class GroupBulkOptionsScheme(BaseModel):
    """Group ID and name filters of a bulk group lookup."""

    group_ids: list[str] = Field(default_factory=list)
    group_names: list[str] = Field(default_factory=list)


# Issues


class IssueTransitionScheme(AtlassianModel):
    id: str | None = None
    name: str | None = None
    to: dict[str, Any] | None = None
    has_screen: bool | None = None
    is_global: bool | None = None
    is_initial: bool | None = None
    is_available: bool | None = None
    is_conditional: bool | None = None
    fields: dict[str, Any] | None = None


class IssueTransitionsScheme(AtlassianModel):
    expand: str | None = None
    transitions: list[IssueTransitionScheme] = Field(default_factory=list)


class IssueScheme(JiraModel):
    id: str | None = None
    key: str | None = None
    expand: str | None = None
    fields: dict[str, Any] | None = None
    rendered_fields: dict[str, Any] | None = None
    names: dict[str, str] | None = None
    transitions: list[IssueTransitionScheme] | None = None
    changelog: dict[str, Any] | None = None


class IssueResponseScheme(JiraModel):
    id: str | None = None
    key: str | None = None
    transition: dict[str, Any] | None = None


class IssuePayloadScheme(AtlassianModel):
    """Issue create or edit payload. ``fields`` is keyed by field ID."""

    fields: dict[str, Any] | None = None
    update: dict[str, Any] | None = None
    transition: dict[str, Any] | None = None
    properties: list[dict[str, Any]] | None = None
    history_metadata: dict[str, Any] | None = None


class IssueNotifyPayloadScheme(AtlassianModel):
    subject: str | None = None
    text_body: str | None = None
    html_body: str | None = None
    to: dict[str, Any] | None = None
    restrict: dict[str, Any] | None = None


class CommentScheme(JiraModel):
    id: str | None = None
    author: UserScheme | None = None
    update_author: UserScheme | None = None
    body: Any = None
    rendered_body: str | None = None
    created: str | None = None
    updated: str | None = None
    visibility: dict[str, Any] | None = None
    jsd_public: bool | None = None


class CommentPageScheme(AtlassianModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    comments: list[CommentScheme] = Field(default_factory=list)


class CommentPayloadScheme(AtlassianModel):
    body: Any
    visibility: dict[str, Any] | None = None


# Search


class IssueSearchScheme(AtlassianModel):
    expand: str | None = None
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    issues: list[IssueScheme] = Field(default_factory=list)
    warning_messages: list[str] | None = None
    names: dict[str, str] | None = None


class IssueSearchJQLScheme(AtlassianModel):
    issues: list[IssueScheme] = Field(default_factory=list)
    next_page_token: str | None = None
    is_last: bool | None = None


class IssueSearchApproximateCountScheme(AtlassianModel):
    count: int | None = None


class IssueBulkFetchPayloadScheme(AtlassianModel):
    issue_ids_or_keys: list[str] = Field(default_factory=list)
    fields: list[str] | None = None
    expand: list[str] | None = None
    properties: list[str] | None = None
    fields_by_keys: bool | None = None


class IssueBulkFetchScheme(AtlassianModel):
    expand: str | None = None
    issues: list[IssueScheme] = Field(default_factory=list)
    issue_errors: list[dict[str, Any]] | None = None


class IssueMatchesPayloadScheme(AtlassianModel):
    jqls: list[str] = Field(default_factory=list)
    issue_ids: list[int] = Field(default_factory=list)


class IssueMatchesPageScheme(AtlassianModel):
    matches: list[dict[str, Any]] = Field(default_factory=list)


# Projects


class ProjectCategoryScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class ComponentScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    lead: UserScheme | None = None
    lead_account_id: str | None = None
    assignee_type: str | None = None
    assignee: UserScheme | None = None
    real_assignee_type: str | None = None
    real_assignee: UserScheme | None = None
    is_assignee_type_valid: bool | None = None
    project: str | None = None
    project_id: int | None = None


class ComponentPayloadScheme(AtlassianModel):
    name: str | None = None
    description: str | None = None
    project: str | None = None
    assignee_type: str | None = None
    lead_account_id: str | None = None


class ComponentCountScheme(JiraModel):
    issue_count: int | None = None


class VersionScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    overdue: bool | None = None
    start_date: str | None = None
    release_date: str | None = None
    user_start_date: str | None = None
    user_release_date: str | None = None
    project_id: int | None = None
    expand: str | None = None


class VersionPayloadScheme(AtlassianModel):
    name: str | None = None
    description: str | None = None
    project: str | None = None
    project_id: int | None = None
    archived: bool | None = None
    released: bool | None = None
    start_date: str | None = None
    release_date: str | None = None
    move_unfixed_issues_to: str | None = None


class VersionPageScheme(PageBeanScheme):
    values: list[VersionScheme] = Field(default_factory=list)


class VersionGetsOptions(BaseModel):
    """Filters of a project version search."""

    order_by: str = ""
    query: str = ""
    status: str = ""
    expand: list[str] = Field(default_factory=list)


class VersionIssueCountsScheme(JiraModel):
    issues_fixed_count: int | None = None
    issues_affected_count: int | None = None
    issue_count_with_custom_fields_showing_version: int | None = None
    custom_field_usage: list[dict[str, Any]] | None = None


class VersionUnresolvedIssuesCountScheme(JiraModel):
    issues_unresolved_count: int | None = None
    issues_count: int | None = None


class ProjectScheme(JiraModel):
    id: str | None = None
    key: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    email: str | None = None
    assignee_type: str | None = None
    project_type_key: str | None = None
    simplified: bool | None = None
    style: str | None = None
    favourite: bool | None = None
    is_private: bool | None = None
    uuid: str | None = None
    lead: UserScheme | None = None
    components: list[ComponentScheme] | None = None
    issue_types: list[dict[str, Any]] | None = None
    versions: list[VersionScheme] | None = None
    roles: dict[str, str] | None = None
    avatar_urls: dict[str, str] | None = None
    project_category: ProjectCategoryScheme | None = None
    insight: dict[str, Any] | None = None
    archived: bool | None = None
    deleted: bool | None = None
    expand: str | None = None


class ProjectPayloadScheme(AtlassianModel):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    category_id: int | None = None
    project_type_key: str | None = None
    project_template_key: str | None = None
    notification_scheme: int | None = None
    permission_scheme: int | None = None
    issue_security_scheme: int | None = None
    field_configuration_scheme: int | None = None
    issue_type_scheme: int | None = None
    issue_type_screen_scheme: int | None = None
    workflow_scheme: int | None = None


class ProjectUpdateScheme(AtlassianModel):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    category_id: int | None = None
    issue_security_scheme: int | None = None
    notification_scheme: int | None = None
    permission_scheme: int | None = None


class NewProjectCreatedScheme(JiraModel):
    id: int | None = None
    key: str | None = None


class ProjectSearchScheme(PageBeanScheme):
    values: list[ProjectScheme] = Field(default_factory=list)


class ProjectSearchOptionsScheme(BaseModel):
    """Filters of a project search."""

    order_by: str = ""
    ids: list[int] = Field(default_factory=list)
    keys: list[str] = Field(default_factory=list)
    query: str = ""
    type_keys: list[str] = Field(default_factory=list)
    category_id: int = 0
    action: str = ""
    expand: list[str] = Field(default_factory=list)
    status: list[str] = Field(default_factory=list)
    properties: list[str] = Field(default_factory=list)


class ProjectStatusDetailsScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    status_category: dict[str, Any] | None = None


class ProjectStatusPageScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    subtask: bool | None = None
    statuses: list[ProjectStatusDetailsScheme] = Field(default_factory=list)


class NotificationSchemeScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    expand: str | None = None
    notification_scheme_events: list[dict[str, Any]] | None = None
    scope: dict[str, Any] | None = None
    projects: list[int] | None = None


class TaskScheme(JiraModel):
    """Long-running task started by an asynchronous operation."""

    id: str | None = None
    status: str | None = None
    description: str | None = None
    progress: int | None = None
    result: Any = None


# Dashboards


class SharePermissionScheme(AtlassianModel):
    id: int | None = None
    type: str | None = None
    project: dict[str, Any] | None = None
    role: dict[str, Any] | None = None
    group: dict[str, Any] | None = None
    user: dict[str, Any] | None = None


class DashboardScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    is_favourite: bool | None = None
    owner: UserScheme | None = None
    popularity: int | None = None
    rank: int | None = None
    view: str | None = None
    is_writable: bool | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None


class DashboardPageScheme(AtlassianModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    prev: str | None = None
    next: str | None = None
    dashboards: list[DashboardScheme] = Field(default_factory=list)


class DashboardSearchPageScheme(PageBeanScheme):
    values: list[DashboardScheme] = Field(default_factory=list)


class DashboardPayloadScheme(AtlassianModel):
    name: str
    description: str | None = None
    share_permissions: list[SharePermissionScheme] = Field(default_factory=list)
    edit_permissions: list[SharePermissionScheme] = Field(default_factory=list)


class DashboardSearchOptionsScheme(BaseModel):
    """Filters of a dashboard search."""

    dashboard_name: str = ""
    owner_account_id: str = ""
    group_permission_name: str = ""
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)


# Filters


class FilterScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    owner: UserScheme | None = None
    jql: str | None = None
    view_url: str | None = None
    search_url: str | None = None
    favourite: bool | None = None
    favourited_count: int | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None
    expand: str | None = None


class FilterPayloadScheme(AtlassianModel):
    name: str
    jql: str | None = None
    description: str | None = None
    favourite: bool | None = None
    share_permissions: list[SharePermissionScheme] | None = None
    edit_permissions: list[SharePermissionScheme] | None = None


class FilterSearchPageScheme(PageBeanScheme):
    values: list[FilterScheme] = Field(default_factory=list)


class FilterSearchOptionScheme(BaseModel):
    """Filters of a filter search."""

    name: str = ""
    account_id: str = ""
    group: str = ""
    project_id: int = 0
    ids: list[int] = Field(default_factory=list)
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)
