"""JQL issue search (Jira REST v2/v3).

``get`` and ``post`` use the offset-paginated ``/search`` endpoint.
``search_jql`` uses ``/search/jql``, which pages with ``nextPageToken``
and does not return a total; ``approximate_count`` gives an estimate of it.
"""

from typing import Any

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query, require_choice
from atlassian_rest.jira.models import (
    IssueBulkFetchPayloadScheme,
    IssueBulkFetchScheme,
    IssueMatchesPageScheme,
    IssueMatchesPayloadScheme,
    IssueSearchApproximateCountScheme,
    IssueSearchJQLScheme,
    IssueSearchScheme,
)
from atlassian_rest.jira.service import JiraService

# An empty value leaves the server default (strict).
VALIDATE_QUERY_MODES = frozenset({"", "strict", "warn", "none"})


class SearchService(JiraService):
    """Endpoints under ``/rest/api/{version}/search``."""

    def get(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start: int = 0,
        max_results: int = 50,
        validate: str = "",
    ) -> tuple[IssueSearchScheme, ResponseScheme]:
        """Search issues with a GET request.

        GET /rest/api/{version}/search

        Args:
            jql: JQL query
            fields: Fields to return for each issue
            expand: Properties to expand for each issue
            start: Index of the first issue
            max_results: Maximum number of issues
            validate: ``strict``, ``warn`` or ``none``

        Raises:
            ValidationError: If ``jql`` is empty or ``validate`` is unknown
        """
        query = (
            Query()
            .add("jql", jql)
            .add("startAt", start)
            .add("maxResults", max_results)
            .add_joined("expand", expand)
            .add_joined("fields", fields)
            .add_if("validateQuery", validate)
        )
        return self._call(
            "search_issues",
            "GET",
            f"{self._api}/search",
            required=[(jql, MissingField.JQL)],
            validate=lambda: require_choice(
                self.provider_name, validate, VALIDATE_QUERY_MODES, MissingField.VALIDATE_QUERY
            ),
            query=query,
            result=IssueSearchScheme,
        )

    def post(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start: int = 0,
        max_results: int = 50,
        validate: str = "",
    ) -> tuple[IssueSearchScheme, ResponseScheme]:
        """Search issues with the JQL in the request body. Suited to long queries.

        POST /rest/api/{version}/search
        """
        body: dict[str, Any] = {
            "jql": jql,
            "startAt": start,
            "maxResults": max_results,
        }
        if fields:
            body["fields"] = fields
        if expand:
            body["expand"] = expand
        if validate:
            body["validateQuery"] = validate

        return self._call(
            "search_issues_post",
            "POST",
            f"{self._api}/search",
            required=[(jql, MissingField.JQL)],
            validate=lambda: require_choice(
                self.provider_name, validate, VALIDATE_QUERY_MODES, MissingField.VALIDATE_QUERY
            ),
            body=body,
            result=IssueSearchScheme,
        )

    def search_jql(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: str = "",
        max_results: int = 50,
        next_page_token: str = "",
    ) -> tuple[IssueSearchJQLScheme, ResponseScheme]:
        """Search issues with token pagination.

        POST /rest/api/{version}/search/jql

        Args:
            jql: JQL query. Must be bounded, e.g. by project.
            fields: Fields to return for each issue
            expand: Comma-separated properties to expand
            max_results: Maximum number of issues
            next_page_token: ``next_page_token`` of the previous page
        """
        body: dict[str, Any] = {"jql": jql, "maxResults": max_results}
        if fields:
            body["fields"] = fields
        if expand:
            body["expand"] = expand
        if next_page_token:
            body["nextPageToken"] = next_page_token

        return self._call(
            "search_issues_jql",
            "POST",
            f"{self._api}/search/jql",
            required=[(jql, MissingField.JQL)],
            body=body,
            result=IssueSearchJQLScheme,
        )

    def approximate_count(self, jql: str) -> tuple[IssueSearchApproximateCountScheme, ResponseScheme]:
        """POST /rest/api/{version}/search/approximate-count"""
        return self._call(
            "count_issues",
            "POST",
            f"{self._api}/search/approximate-count",
            required=[(jql, MissingField.JQL)],
            body={"jql": jql},
            result=IssueSearchApproximateCountScheme,
        )

    def bulk_fetch(
        self, payload: IssueBulkFetchPayloadScheme | dict
    ) -> tuple[IssueBulkFetchScheme, ResponseScheme]:
        """Return up to 100 issues by ID or key.

        POST /rest/api/{version}/issue/bulkfetch
        """
        return self._call(
            "bulk_fetch_issues",
            "POST",
            f"{self._api}/issue/bulkfetch",
            body=payload,
            result=IssueBulkFetchScheme,
        )

    def checks(self, payload: IssueMatchesPayloadScheme | dict) -> tuple[IssueMatchesPageScheme, ResponseScheme]:
        """Check which of the given issues match each JQL query.

        POST /rest/api/{version}/jql/match
        """
        return self._call(
            "match_issues",
            "POST",
            f"{self._api}/jql/match",
            body=payload,
            result=IssueMatchesPageScheme,
        )
