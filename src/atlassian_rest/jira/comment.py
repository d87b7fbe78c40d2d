"""Issue comments (Jira REST v2/v3)."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.models import CommentPageScheme, CommentPayloadScheme, CommentScheme
from atlassian_rest.jira.service import JiraService


class CommentService(JiraService):
    """Endpoints under ``/rest/api/{version}/issue/{key}/comment``."""

    def gets(
        self,
        issue_key: str,
        order_by: str = "",
        expand: list[str] | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[CommentPageScheme, ResponseScheme]:
        """Return the comments of an issue.

        GET /rest/api/{version}/issue/{issueIdOrKey}/comment

        Args:
            issue_key: Issue ID or key
            order_by: ``created`` or ``-created``
            expand: Properties to expand, e.g. ``renderedBody``
            start: Index of the first item
            max_results: Maximum number of items
        """
        query = (
            Query()
            .add("startAt", start)
            .add("maxResults", max_results)
            .add_joined("expand", expand)
            .add_if("orderBy", order_by)
        )
        return self._call(
            "get_issue_comments",
            "GET",
            f"{self._api}/issue/{issue_key}/comment",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            query=query,
            result=CommentPageScheme,
        )

    def get(self, issue_key: str, comment_id: str) -> tuple[CommentScheme, ResponseScheme]:
        """GET /rest/api/{version}/issue/{issueIdOrKey}/comment/{id}"""
        return self._call(
            "get_issue_comment",
            "GET",
            f"{self._api}/issue/{issue_key}/comment/{comment_id}",
            required=[
                (issue_key, MissingField.ISSUE_KEY),
                (comment_id, MissingField.COMMENT_ID),
            ],
            result=CommentScheme,
        )

    def delete(self, issue_key: str, comment_id: str) -> ResponseScheme:
        """DELETE /rest/api/{version}/issue/{issueIdOrKey}/comment/{id}"""
        return self._send(
            "delete_issue_comment",
            "DELETE",
            f"{self._api}/issue/{issue_key}/comment/{comment_id}",
            required=[
                (issue_key, MissingField.ISSUE_KEY),
                (comment_id, MissingField.COMMENT_ID),
            ],
        )

    def add(
        self,
        issue_key: str,
        payload: CommentPayloadScheme | dict,
        expand: list[str] | None = None,
    ) -> tuple[CommentScheme, ResponseScheme]:
        """Add a comment. On v3 the body is an ADF document, on v2 a wiki-markup string.

        POST /rest/api/{version}/issue/{issueIdOrKey}/comment
        """
        return self._call(
            "add_issue_comment",
            "POST",
            f"{self._api}/issue/{issue_key}/comment",
            required=[(issue_key, MissingField.ISSUE_KEY)],
            query=Query().add_joined("expand", expand),
            body=payload,
            result=CommentScheme,
        )
