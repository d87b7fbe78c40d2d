"""Jira projects (REST v2/v3)."""

import logging

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.core.tracing import Tracer
from atlassian_rest.jira.component import ComponentService
from atlassian_rest.jira.models import (
    NewProjectCreatedScheme,
    NotificationSchemeScheme,
    ProjectPayloadScheme,
    ProjectScheme,
    ProjectSearchOptionsScheme,
    ProjectSearchScheme,
    ProjectStatusPageScheme,
    ProjectUpdateScheme,
    TaskScheme,
)
from atlassian_rest.jira.service import JiraService
from atlassian_rest.jira.version import VersionService

logger = logging.getLogger(__name__)


class ProjectService(JiraService):
    """Endpoints under ``/rest/api/{version}/project``.

    Attributes:
        component: Project components
        version: Project versions
    """

    def __init__(
        self,
        connector: Connector,
        version: str,
        component: ComponentService | None = None,
        version_service: VersionService | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(connector, version, tracer)
        self.component = component
        self.version = version_service

    def create(self, payload: ProjectPayloadScheme | dict) -> tuple[NewProjectCreatedScheme, ResponseScheme]:
        """POST /rest/api/{version}/project"""
        return self._call(
            "create_project",
            "POST",
            f"{self._api}/project",
            body=payload,
            result=NewProjectCreatedScheme,
        )

    def search(
        self,
        options: ProjectSearchOptionsScheme | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[ProjectSearchScheme, ResponseScheme]:
        """Return a page of the projects visible to the user.

        GET /rest/api/{version}/project/search

        Args:
            options: ID, key, name, type, category, permission and status
                filters. IDs and keys are sent as repeated parameters.
            start: Index of the first item
            max_results: Maximum number of items
        """
        query = Query().add("startAt", start).add("maxResults", max_results)
        if options is not None:
            query.add_if("orderBy", options.order_by)
            query.add_each("id", options.ids)
            query.add_each("keys", options.keys)
            query.add_if("query", options.query)
            query.add_joined("typeKey", options.type_keys)
            query.add_if("categoryId", options.category_id)
            query.add_if("action", options.action)
            query.add_joined("expand", options.expand)
            query.add_joined("status", options.status)
            query.add_joined("properties", options.properties)

        return self._call(
            "search_projects",
            "GET",
            f"{self._api}/project/search",
            query=query,
            result=ProjectSearchScheme,
        )

    def get(self, project_key: str, expand: list[str] | None = None) -> tuple[ProjectScheme, ResponseScheme]:
        """GET /rest/api/{version}/project/{projectIdOrKey}"""
        return self._call(
            "get_project",
            "GET",
            f"{self._api}/project/{project_key}",
            required=[(project_key, MissingField.PROJECT_KEY)],
            query=Query().add_joined("expand", expand),
            result=ProjectScheme,
        )

    def update(
        self, project_key: str, payload: ProjectUpdateScheme | dict
    ) -> tuple[ProjectScheme, ResponseScheme]:
        """PUT /rest/api/{version}/project/{projectIdOrKey}"""
        return self._call(
            "update_project",
            "PUT",
            f"{self._api}/project/{project_key}",
            required=[(project_key, MissingField.PROJECT_KEY)],
            body=payload,
            result=ProjectScheme,
        )

    def delete(self, project_key: str, enable_undo: bool = False) -> ResponseScheme:
        """Delete a project.

        DELETE /rest/api/{version}/project/{projectIdOrKey}

        Args:
            project_key: Project ID or key
            enable_undo: Move the project to the recycle bin instead of
                deleting it permanently
        """
        logger.info("Deleting Jira project %s (undo=%s)", project_key, enable_undo)
        return self._send(
            "delete_project",
            "DELETE",
            f"{self._api}/project/{project_key}",
            required=[(project_key, MissingField.PROJECT_KEY)],
            query=Query().add_flag("enableUndo", enable_undo),
        )

    def delete_asynchronously(self, project_key: str) -> tuple[TaskScheme, ResponseScheme]:
        """Delete a project as a background task.

        POST /rest/api/{version}/project/{projectIdOrKey}/delete
        """
        return self._call(
            "delete_project_async",
            "POST",
            f"{self._api}/project/{project_key}/delete",
            required=[(project_key, MissingField.PROJECT_KEY)],
            result=TaskScheme,
        )

    def archive(self, project_key: str) -> ResponseScheme:
        """POST /rest/api/{version}/project/{projectIdOrKey}/archive"""
        return self._send(
            "archive_project",
            "POST",
            f"{self._api}/project/{project_key}/archive",
            required=[(project_key, MissingField.PROJECT_KEY)],
        )

    def restore(self, project_key: str) -> tuple[ProjectScheme, ResponseScheme]:
        """Restore a project from the recycle bin or the archive.

        POST /rest/api/{version}/project/{projectIdOrKey}/restore
        """
        return self._call(
            "restore_project",
            "POST",
            f"{self._api}/project/{project_key}/restore",
            required=[(project_key, MissingField.PROJECT_KEY)],
            result=ProjectScheme,
        )

    def statuses(self, project_key: str) -> tuple[list[ProjectStatusPageScheme], ResponseScheme]:
        """Return the valid statuses of a project, grouped by issue type.

        GET /rest/api/{version}/project/{projectIdOrKey}/statuses
        """
        return self._call(
            "get_project_statuses",
            "GET",
            f"{self._api}/project/{project_key}/statuses",
            required=[(project_key, MissingField.PROJECT_KEY)],
            result=list[ProjectStatusPageScheme],
        )

    def notification_scheme(
        self, project_key: str, expand: list[str] | None = None
    ) -> tuple[NotificationSchemeScheme, ResponseScheme]:
        """GET /rest/api/{version}/project/{projectKeyOrId}/notificationscheme"""
        return self._call(
            "get_project_notification_scheme",
            "GET",
            f"{self._api}/project/{project_key}/notificationscheme",
            required=[(project_key, MissingField.PROJECT_KEY)],
            query=Query().add_joined("expand", expand),
            result=NotificationSchemeScheme,
        )
