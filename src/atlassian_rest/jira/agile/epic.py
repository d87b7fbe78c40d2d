"""Epics (Jira Agile REST)."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.jira.agile.board import issue_query
from atlassian_rest.jira.agile.models import BoardIssuePageScheme, EpicScheme, IssueOptionScheme
from atlassian_rest.jira.agile.service import AgileService


class EpicService(AgileService):
    """Endpoints under ``/rest/agile/{version}/epic``."""

    def get(self, epic_id_or_key: str) -> tuple[EpicScheme, ResponseScheme]:
        """GET /rest/agile/{version}/epic/{epicIdOrKey}"""
        return self._call(
            "get_epic",
            "GET",
            f"{self._api}/epic/{epic_id_or_key}",
            required=[(epic_id_or_key, MissingField.EPIC_ID)],
            result=EpicScheme,
        )

    def issues(
        self,
        epic_id_or_key: str,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/epic/{epicIdOrKey}/issue"""
        return self._call(
            "get_epic_issues",
            "GET",
            f"{self._api}/epic/{epic_id_or_key}/issue",
            required=[(epic_id_or_key, MissingField.EPIC_ID)],
            query=issue_query(start, max_results, options, always_validate=True),
            result=BoardIssuePageScheme,
        )

    def move(self, epic_id_or_key: str, issues: list[str]) -> ResponseScheme:
        """Move up to 50 issues into an epic.

        POST /rest/agile/{version}/epic/{epicIdOrKey}/issue
        """
        return self._send(
            "move_issues_to_epic",
            "POST",
            f"{self._api}/epic/{epic_id_or_key}/issue",
            required=[(epic_id_or_key, MissingField.EPIC_ID)],
            body={"issues": issues},
        )
