"""Jira issues (REST v2/v3).

Example:
    from atlassian_rest.jira import JiraClient

    jira = JiraClient(site="https://example.atlassian.net")
    issue, _ = jira.issue.get("KP-2", fields=["summary", "status"])
    jira.issue.move("KP-2", "31", {"fields": {"resolution": {"name": "Done"}}})
"""

import logging
from typing import Any

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import AtlassianModel, ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.core.tracing import Tracer
from atlassian_rest.jira.comment import CommentService
from atlassian_rest.jira.models import (
    IssueNotifyPayloadScheme,
    IssuePayloadScheme,
    IssueResponseScheme,
    IssueScheme,
    IssueTransitionsScheme,
)
from atlassian_rest.jira.service import JiraService

logger = logging.getLogger(__name__)


class IssueService(JiraService):
    """Endpoints under ``/rest/api/{version}/issue``.

    Attributes:
        comment: Issue comments
    """

    def __init__(
        self,
        connector: Connector,
        version: str,
        comment: CommentService | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(connector, version, tracer)
        self.comment = comment

    def create(self, payload: IssuePayloadScheme | dict) -> tuple[IssueResponseScheme, ResponseScheme]:
        """POST /rest/api/{version}/issue"""
        return self._call(
            "create_issue",
            "POST",
            f"{self._api}/issue",
            body=payload,
            result=IssueResponseScheme,
        )

    def get(
        self,
        issue_key: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
    ) -> tuple[IssueScheme, ResponseScheme]:
        """Return an issue.

        GET /rest/api/{version}/issue/{issueIdOrKey}

        Args:
            issue_key: Issue ID or key
            fields: Fields to return; ``*all`` or ``*navigable`` are accepted
            expand: Properties to expand, e.g. ``renderedFields``, ``changelog``
        """
        query = Query().add_joined("fields", fields).add_joined("expand", expand)
        return self._call(
            "get_issue",
            "GET",
            f"{self._api}/issue/{issue_key}",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            query=query,
            result=IssueScheme,
        )

    def update(
        self,
        issue_key: str,
        notify: bool,
        payload: IssuePayloadScheme | dict,
    ) -> ResponseScheme:
        """Edit an issue.

        PUT /rest/api/{version}/issue/{issueIdOrKey}

        Args:
            issue_key: Issue ID or key
            notify: Send a notification email to watchers
            payload: Fields to set and update operations
        """
        query = Query()
        if not notify:
            query.add("notifyUsers", False)
        return self._send(
            "update_issue",
            "PUT",
            f"{self._api}/issue/{issue_key}",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            query=query,
            body=payload,
        )

    def delete(self, issue_key: str, delete_subtasks: bool = False) -> ResponseScheme:
        """Delete an issue. Issues with subtasks need ``delete_subtasks``.

        DELETE /rest/api/{version}/issue/{issueIdOrKey}
        """
        return self._send(
            "delete_issue",
            "DELETE",
            f"{self._api}/issue/{issue_key}",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            query=Query().add_flag("deleteSubtasks", delete_subtasks),
        )

    def assign(self, issue_key: str, account_id: str) -> ResponseScheme:
        """PUT /rest/api/{version}/issue/{issueIdOrKey}/assignee"""
        return self._send(
            "assign_issue",
            "PUT",
            f"{self._api}/issue/{issue_key}/assignee",
            required=[
                (issue_key, MissingField.ISSUE_KEY),
                (account_id, MissingField.ACCOUNT_ID),
            ],
            body={"accountId": account_id},
        )

    def notify(self, issue_key: str, payload: IssueNotifyPayloadScheme | dict) -> ResponseScheme:
        """Queue an email notification about an issue.

        POST /rest/api/{version}/issue/{issueIdOrKey}/notify
        """
        return self._send(
            "notify_issue",
            "POST",
            f"{self._api}/issue/{issue_key}/notify",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            body=payload,
        )

    def transitions(self, issue_key: str) -> tuple[IssueTransitionsScheme, ResponseScheme]:
        """Return the transitions available from the current status of an issue.

        GET /rest/api/{version}/issue/{issueIdOrKey}/transitions
        """
        return self._call(
            "get_issue_transitions",
            "GET",
            f"{self._api}/issue/{issue_key}/transitions",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            result=IssueTransitionsScheme,
        )

    def move(
        self,
        issue_key: str,
        transition_id: str,
        payload: IssuePayloadScheme | dict | None = None,
    ) -> ResponseScheme:
        """Transition an issue to a new status.

        POST /rest/api/{version}/issue/{issueIdOrKey}/transitions

        Args:
            issue_key: Issue ID or key
            transition_id: ID of the transition to perform
            payload: Fields and update operations applied during the
                transition. Its ``transition`` entry is replaced.
        """
        body: dict[str, Any] = {}
        if isinstance(payload, AtlassianModel):
            body.update(payload.to_payload())
        elif payload:
            body.update(payload)
        body["transition"] = {"id": transition_id}

        logger.debug("Moving issue %s with transition %s", issue_key, transition_id)
        return self._send(
            "move_issue",
            "POST",
            f"{self._api}/issue/{issue_key}/transitions",
            required=[
                (issue_key, MissingField.ISSUE_KEY),
                (transition_id, MissingField.TRANSITION_ID),
            ],
            body=body,
        )
