"""Jira Cloud platform client (REST API v2 or v3).

Example:
    from atlassian_rest.jira import JiraClient

    jira = JiraClient(site="https://example.atlassian.net", version="3")
    page, _ = jira.search.get("project = KP ORDER BY created", fields=["summary"])
    for issue in page.issues:
        print(issue.key, issue.fields["summary"])
"""

from typing import Any

from atlassian_rest.common.base import AtlassianClient
from atlassian_rest.core.tracing import Tracer
from atlassian_rest.jira.comment import CommentService
from atlassian_rest.jira.component import ComponentService
from atlassian_rest.jira.dashboard import DashboardService
from atlassian_rest.jira.filter import FilterService
from atlassian_rest.jira.group import GroupService
from atlassian_rest.jira.issue import IssueService
from atlassian_rest.jira.project import ProjectService
from atlassian_rest.jira.search import SearchService
from atlassian_rest.jira.service import DEFAULT_API_VERSION
from atlassian_rest.jira.user import UserService
from atlassian_rest.jira.version import VersionService


class JiraClient(AtlassianClient):
    """Jira Cloud client.

    Attributes:
        issue: Issues and their comments
        search: JQL search
        project: Projects, components and versions
        dashboard: Dashboards
        filter: Saved filters
        group: Groups and members
        user: Users
    """

    provider_name = "jira"

    def __init__(
        self,
        *args: Any,
        version: str = DEFAULT_API_VERSION,
        tracer: Tracer | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the client.

        Args:
            *args: Positional arguments of ``AtlassianClient``
            version: REST API version, ``"2"`` or ``"3"``
            tracer: Tracer shared by every service
            **kwargs: Keyword arguments of ``AtlassianClient``

        Raises:
            NoVersionError: If ``version`` is empty
        """
        super().__init__(*args, **kwargs)

        self.issue = IssueService(
            self, version, comment=CommentService(self, version, tracer), tracer=tracer
        )
        self.search = SearchService(self, version, tracer)
        self.project = ProjectService(
            self,
            version,
            component=ComponentService(self, version, tracer),
            version_service=VersionService(self, version, tracer),
            tracer=tracer,
        )
        self.dashboard = DashboardService(self, version, tracer)
        self.filter = FilterService(self, version, tracer)
        self.group = GroupService(self, version, tracer)
        self.user = UserService(self, version, tracer)
