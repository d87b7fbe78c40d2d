"""Sprints (Jira Agile REST).

A sprint moves from ``future`` to ``active`` to ``closed``; ``start`` and
``close`` perform those transitions with a partial update.
"""

import logging

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.jira.agile.board import issue_query
from atlassian_rest.jira.agile.models import (
    BoardIssuePageScheme,
    IssueOptionScheme,
    RankPayloadScheme,
    SprintPayloadScheme,
    SprintScheme,
)
from atlassian_rest.jira.agile.service import AgileService

logger = logging.getLogger(__name__)


class SprintService(AgileService):
    """Endpoints under ``/rest/agile/{version}/sprint``."""

    def get(self, sprint_id: int) -> tuple[SprintScheme, ResponseScheme]:
        """GET /rest/agile/{version}/sprint/{sprintId}"""
        return self._call(
            "get_sprint",
            "GET",
            f"{self._api}/sprint/{sprint_id}",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            result=SprintScheme,
        )

    def create(self, payload: SprintPayloadScheme | dict) -> tuple[SprintScheme, ResponseScheme]:
        """Create a future sprint.

        POST /rest/agile/{version}/sprint
        """
        return self._call(
            "create_sprint",
            "POST",
            f"{self._api}/sprint",
            body=payload,
            result=SprintScheme,
        )

    def update(
        self, sprint_id: int, payload: SprintPayloadScheme | dict
    ) -> tuple[SprintScheme, ResponseScheme]:
        """Replace a sprint. Fields missing from the payload are cleared.

        PUT /rest/agile/{version}/sprint/{sprintId}
        """
        return self._call(
            "update_sprint",
            "PUT",
            f"{self._api}/sprint/{sprint_id}",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            body=payload,
            result=SprintScheme,
        )

    def path(
        self, sprint_id: int, payload: SprintPayloadScheme | dict
    ) -> tuple[SprintScheme, ResponseScheme]:
        """Partially update a sprint. Fields missing from the payload are kept.

        POST /rest/agile/{version}/sprint/{sprintId}
        """
        return self._call(
            "partial_update_sprint",
            "POST",
            f"{self._api}/sprint/{sprint_id}",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            body=payload,
            result=SprintScheme,
        )

    def delete(self, sprint_id: int) -> ResponseScheme:
        """DELETE /rest/agile/{version}/sprint/{sprintId}"""
        return self._send(
            "delete_sprint",
            "DELETE",
            f"{self._api}/sprint/{sprint_id}",
            required=[(sprint_id, MissingField.SPRINT_ID)],
        )

    def issues(
        self,
        sprint_id: int,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/sprint/{sprintId}/issue"""
        return self._call(
            "get_sprint_issues",
            "GET",
            f"{self._api}/sprint/{sprint_id}/issue",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            query=issue_query(start, max_results, options),
            result=BoardIssuePageScheme,
        )

    def start(self, sprint_id: int) -> ResponseScheme:
        """Move a future sprint to ``active``.

        POST /rest/agile/{version}/sprint/{sprintId}
        """
        logger.info("Starting sprint %s", sprint_id)
        return self._send(
            "start_sprint",
            "POST",
            f"{self._api}/sprint/{sprint_id}",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            body={"state": "active"},
        )

    def close(self, sprint_id: int) -> ResponseScheme:
        """Move an active sprint to ``closed``.

        POST /rest/agile/{version}/sprint/{sprintId}
        """
        logger.info("Closing sprint %s", sprint_id)
        return self._send(
            "close_sprint",
            "POST",
            f"{self._api}/sprint/{sprint_id}",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            body={"state": "closed"},
        )

    def move(self, sprint_id: int, payload: RankPayloadScheme | dict) -> ResponseScheme:
        """Move issues into a sprint, optionally ranking them.

        POST /rest/agile/{version}/sprint/{sprintId}/issue
        """
        return self._send(
            "move_issues_to_sprint",
            "POST",
            f"{self._api}/sprint/{sprint_id}/issue",
            required=[(sprint_id, MissingField.SPRINT_ID)],
            body=payload,
        )
