"""Project versions (Jira REST v2/v3)."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.models import (
    VersionGetsOptions,
    VersionIssueCountsScheme,
    VersionPageScheme,
    VersionPayloadScheme,
    VersionScheme,
    VersionUnresolvedIssuesCountScheme,
)
from atlassian_rest.jira.service import JiraService


class VersionService(JiraService):
    """Endpoints under ``/rest/api/{version}/version``."""

    def gets(self, project_key: str) -> tuple[list[VersionScheme], ResponseScheme]:
        """Return every version of a project, unpaginated.

        GET /rest/api/{version}/project/{projectIdOrKey}/versions
        """
        return self._call(
            "get_project_versions",
            "GET",
            f"{self._api}/project/{project_key}/versions",
            required=[(project_key, MissingField.PROJECT_KEY)],
            result=list[VersionScheme],
        )

    def search(
        self,
        project_key: str,
        options: VersionGetsOptions | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[VersionPageScheme, ResponseScheme]:
        """Return a page of the versions of a project.

        GET /rest/api/{version}/project/{projectIdOrKey}/version

        Args:
            project_key: Project ID or key
            options: Ordering, name query, status and expand filters
            start: Index of the first item
            max_results: Maximum number of items
        """
        query = Query().add("startAt", start).add("maxResults", max_results)
        if options is not None:
            query.add_if("orderBy", options.order_by)
            query.add_if("query", options.query)
            query.add_if("status", options.status)
            query.add_joined("expand", options.expand)

        return self._call(
            "search_project_versions",
            "GET",
            f"{self._api}/project/{project_key}/version",
            required=[(project_key, MissingField.PROJECT_KEY)],
            query=query,
            result=VersionPageScheme,
        )

    def create(self, payload: VersionPayloadScheme | dict) -> tuple[VersionScheme, ResponseScheme]:
        """POST /rest/api/{version}/version"""
        return self._call(
            "create_version",
            "POST",
            f"{self._api}/version",
            body=payload,
            result=VersionScheme,
        )

    def get(self, version_id: str, expand: list[str] | None = None) -> tuple[VersionScheme, ResponseScheme]:
        """GET /rest/api/{version}/version/{id}"""
        return self._call(
            "get_version",
            "GET",
            f"{self._api}/version/{version_id}",
            required=[(version_id, MissingField.VERSION_ID)],
            query=Query().add_joined("expand", expand),
            result=VersionScheme,
        )

    def update(
        self, version_id: str, payload: VersionPayloadScheme | dict
    ) -> tuple[VersionScheme, ResponseScheme]:
        """PUT /rest/api/{version}/version/{id}"""
        return self._call(
            "update_version",
            "PUT",
            f"{self._api}/version/{version_id}",
            required=[(version_id, MissingField.VERSION_ID)],
            body=payload,
            result=VersionScheme,
        )

    def merge(self, version_id: str, version_move_issues_to: str) -> ResponseScheme:
        """Merge a version into another and delete it.

        PUT /rest/api/{version}/version/{id}/mergeto/{moveIssuesTo}
        """
        return self._send(
            "merge_versions",
            "PUT",
            f"{self._api}/version/{version_id}/mergeto/{version_move_issues_to}",
            required=[
                (version_id, MissingField.VERSION_ID),
                (version_move_issues_to, MissingField.VERSION_ID),
            ],
        )

    def related_issue_counts(self, version_id: str) -> tuple[VersionIssueCountsScheme, ResponseScheme]:
        """GET /rest/api/{version}/version/{id}/relatedIssueCounts"""
        return self._call(
            "get_version_related_issue_counts",
            "GET",
            f"{self._api}/version/{version_id}/relatedIssueCounts",
            required=[(version_id, MissingField.VERSION_ID)],
            result=VersionIssueCountsScheme,
        )

    def unresolved_issue_count(
        self, version_id: str
    ) -> tuple[VersionUnresolvedIssuesCountScheme, ResponseScheme]:
        """GET /rest/api/{version}/version/{id}/unresolvedIssueCount"""
        return self._call(
            "get_version_unresolved_issue_count",
            "GET",
            f"{self._api}/version/{version_id}/unresolvedIssueCount",
            required=[(version_id, MissingField.VERSION_ID)],
            result=VersionUnresolvedIssuesCountScheme,
        )
