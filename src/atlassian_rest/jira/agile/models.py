"""Schemes of the Jira Software (Agile) REST API."""

from typing import Any

from pydantic import BaseModel, Field

from atlassian_rest.core.models import AtlassianModel
from atlassian_rest.jira.models import IssueScheme, JiraModel, PageBeanScheme


class IssueOptionScheme(BaseModel):
    """JQL filter and field selection of a board, epic or sprint issue listing."""

    jql: str = ""
    validate_query: bool = True
    fields: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)


class BoardIssuePageScheme(AtlassianModel):
    expand: str | None = None
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    issues: list[IssueScheme] = Field(default_factory=list)


class RankPayloadScheme(AtlassianModel):
    """Issues to move, optionally ranked relative to another issue."""

    issues: list[str] = Field(default_factory=list)
    rank_before_issue: str | None = None
    rank_after_issue: str | None = None
    rank_custom_field_id: int | None = None


# Boards


class BoardLocationScheme(AtlassianModel):
    project_id: int | None = None
    display_name: str | None = None
    project_name: str | None = None
    project_key: str | None = None
    project_type_key: str | None = None
    avatar_uri: str | None = Field(default=None, alias="avatarURI")
    name: str | None = None


class BoardScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    type: str | None = None
    location: BoardLocationScheme | None = None


class BoardPageScheme(PageBeanScheme):
    values: list[BoardScheme] = Field(default_factory=list)


class BoardPayloadLocationScheme(AtlassianModel):
    type: str
    project_key_or_id: str


class BoardPayloadScheme(AtlassianModel):
    name: str
    type: str
    filter_id: int
    location: BoardPayloadLocationScheme | None = None


class BoardColumnScheme(AtlassianModel):
    name: str | None = None
    statuses: list[dict[str, Any]] = Field(default_factory=list)


class BoardColumnConfigurationScheme(AtlassianModel):
    columns: list[BoardColumnScheme] = Field(default_factory=list)
    constraint_type: str | None = None


class BoardConfigurationScheme(JiraModel):
    id: int | None = None
    name: str | None = None
    type: str | None = None
    location: BoardLocationScheme | None = None
    filter: dict[str, Any] | None = None
    column_config: BoardColumnConfigurationScheme | None = None
    estimation: dict[str, Any] | None = None
    ranking: dict[str, Any] | None = None


class BoardProjectScheme(JiraModel):
    id: str | None = None
    key: str | None = None
    name: str | None = None
    project_category: dict[str, Any] | None = None
    simplified: bool | None = None
    style: str | None = None
    insight: dict[str, Any] | None = None


class BoardProjectPageScheme(PageBeanScheme):
    values: list[BoardProjectScheme] = Field(default_factory=list)


class BoardVersionScheme(JiraModel):
    id: int | None = None
    project_id: int | None = None
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    release_date: str | None = None


class BoardVersionPageScheme(PageBeanScheme):
    values: list[BoardVersionScheme] = Field(default_factory=list)


class GetBoardsOptions(BaseModel):
    """Filters of the board listing."""

    board_type: str = ""
    board_name: str = ""
    project_key_or_id: str = ""
    account_id_location: str = ""
    project_id_location: str = ""
    include_private: bool = False
    negate_location_filtering: bool = False
    order_by: str = ""
    expand: str = ""
    filter_id: int = 0


# Epics


class EpicScheme(JiraModel):
    id: int | None = None
    key: str | None = None
    name: str | None = None
    summary: str | None = None
    color: dict[str, Any] | None = None
    done: bool | None = None


class EpicPageScheme(PageBeanScheme):
    values: list[EpicScheme] = Field(default_factory=list)


# Sprints


class SprintScheme(JiraModel):
    id: int | None = None
    state: str | None = None
    name: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    complete_date: str | None = None
    created_date: str | None = None
    origin_board_id: int | None = None
    goal: str | None = None


class SprintPageScheme(PageBeanScheme):
    values: list[SprintScheme] = Field(default_factory=list)


class SprintPayloadScheme(AtlassianModel):
    name: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    origin_board_id: int | None = None
    goal: str | None = None
    state: str | None = None
