"""Tests for Jira issues, comments and JQL search."""

from unittest.mock import MagicMock

import pytest
import responses

from atlassian_rest.core.exceptions import BadRequestError, MissingField, NoVersionError, ValidationError
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.jira import JiraClient, JiraService
from atlassian_rest.jira.comment import CommentService
from atlassian_rest.jira.issue import IssueService
from atlassian_rest.jira.models import IssuePayloadScheme, IssueSearchScheme
from atlassian_rest.jira.search import SearchService

SITE = "https://test.atlassian.net"


def sent(connector: MagicMock) -> tuple:
    """Return the (method, path, content_type, body) of the last request."""
    return connector.new_request.call_args.args


class TestJiraService:
    """Tests for versioned service construction."""

    def test_empty_version_raises(self, connector: MagicMock) -> None:
        """Test that a service cannot be built without an API version."""
        with pytest.raises(NoVersionError) as exc_info:
            IssueService(connector, "")

        assert str(exc_info.value) == "[jira] no module version set"

    def test_version_in_path(self, connector: MagicMock) -> None:
        """Test that the version selects the API path."""
        IssueService(connector, "2").get("KP-2")
        assert sent(connector)[1] == "rest/api/2/issue/KP-2"

    def test_api_version_attribute(self, connector: MagicMock) -> None:
        """Test that the version is exposed on the service."""
        assert JiraService(connector, "3").api_version == "3"

    def test_client_rejects_empty_version(self, mock_credentials: MagicMock) -> None:
        """Test that the client refuses an empty version."""
        with pytest.raises(NoVersionError):
            JiraClient(version="")


class TestIssueService:
    """Tests for IssueService."""

    def test_create(self, connector: MagicMock) -> None:
        """Test creating an issue."""
        payload = IssuePayloadScheme(fields={"summary": "Disk full", "project": {"key": "KP"}})
        IssueService(connector, "3").create(payload)
        assert sent(connector) == ("POST", "rest/api/3/issue", "", payload)

    def test_get(self, connector: MagicMock) -> None:
        """Test getting an issue with fields and expansions."""
        IssueService(connector, "3").get("KP-2", fields=["summary", "status"], expand=["changelog"])
        assert sent(connector)[1] == "rest/api/3/issue/KP-2?expand=changelog&fields=summary%2Cstatus"

    def test_get_requires_key(self, connector: MagicMock) -> None:
        """Test that the issue key is required."""
        with pytest.raises(ValidationError) as exc_info:
            IssueService(connector, "3").get("")

        assert exc_info.value.field is MissingField.ISSUE_KEY
        connector.new_request.assert_not_called()

    def test_update_without_notification(self, connector: MagicMock) -> None:
        """Test that notifyUsers=false is sent when notifications are off."""
        IssueService(connector, "3").update("KP-2", False, {"fields": {"summary": "x"}})
        assert sent(connector) == (
            "PUT",
            "rest/api/3/issue/KP-2?notifyUsers=false",
            "",
            {"fields": {"summary": "x"}},
        )

    def test_update_with_notification(self, connector: MagicMock) -> None:
        """Test that notifyUsers is left out when notifications are on."""
        IssueService(connector, "3").update("KP-2", True, {})
        assert sent(connector)[:2] == ("PUT", "rest/api/3/issue/KP-2")

    def test_delete(self, connector: MagicMock) -> None:
        """Test that deleteSubtasks is left out by default."""
        IssueService(connector, "3").delete("KP-2")
        assert sent(connector)[:2] == ("DELETE", "rest/api/3/issue/KP-2")

    def test_delete_with_subtasks(self, connector: MagicMock) -> None:
        """Test that deleteSubtasks=true is sent when requested."""
        IssueService(connector, "3").delete("KP-2", delete_subtasks=True)
        assert sent(connector)[:2] == ("DELETE", "rest/api/3/issue/KP-2?deleteSubtasks=true")

    def test_assign(self, connector: MagicMock) -> None:
        """Test assigning an issue."""
        IssueService(connector, "3").assign("KP-2", "5b10ac8d82e05b22cc7d4ef5")
        assert sent(connector) == (
            "PUT",
            "rest/api/3/issue/KP-2/assignee",
            "",
            {"accountId": "5b10ac8d82e05b22cc7d4ef5"},
        )

    def test_assign_requires_account(self, connector: MagicMock) -> None:
        """Test that the account id is required."""
        with pytest.raises(ValidationError) as exc_info:
            IssueService(connector, "3").assign("KP-2", "")
        assert exc_info.value.field is MissingField.ACCOUNT_ID

    def test_notify(self, connector: MagicMock) -> None:
        """Test sending a notification."""
        IssueService(connector, "3").notify("KP-2", {"subject": "Heads up"})
        assert sent(connector)[:2] == ("POST", "rest/api/3/issue/KP-2/notify")

    def test_transitions(self, connector: MagicMock) -> None:
        """Test listing transitions."""
        IssueService(connector, "3").transitions("KP-2")
        assert sent(connector)[:2] == ("GET", "rest/api/3/issue/KP-2/transitions")

    def test_move_sets_transition(self, connector: MagicMock) -> None:
        """Test that the transition id is merged into the payload."""
        payload = IssuePayloadScheme(
            fields={"resolution": {"name": "Done"}}, transition={"id": "99"}
        )
        IssueService(connector, "3").move("KP-2", "31", payload)
        assert sent(connector) == (
            "POST",
            "rest/api/3/issue/KP-2/transitions",
            "",
            {"fields": {"resolution": {"name": "Done"}}, "transition": {"id": "31"}},
        )

    def test_move_without_payload(self, connector: MagicMock) -> None:
        """Test a bare transition."""
        IssueService(connector, "3").move("KP-2", "31")
        assert sent(connector)[3] == {"transition": {"id": "31"}}

    @pytest.mark.parametrize(
        "issue_key, transition_id, field",
        [("", "31", MissingField.ISSUE_KEY), ("KP-2", "", MissingField.TRANSITION_ID)],
    )
    def test_move_validation(
        self, connector: MagicMock, issue_key: str, transition_id: str, field: MissingField
    ) -> None:
        """Test that key and transition are required in that order."""
        with pytest.raises(ValidationError) as exc_info:
            IssueService(connector, "3").move(issue_key, transition_id)
        assert exc_info.value.field is field

    def test_bad_request_keeps_response(self, connector: MagicMock) -> None:
        """Test that a rejected payload surfaces the server response."""
        envelope = ResponseScheme(code=400, body=b'{"errors":{"summary":"required"}}')
        connector.call.side_effect = BadRequestError("atlassian invalid payload", response=envelope)

        with pytest.raises(BadRequestError) as exc_info:
            IssueService(connector, "3").create({"fields": {}})

        assert exc_info.value.response.json() == {"errors": {"summary": "required"}}


class TestCommentService:
    """Tests for CommentService."""

    def test_gets(self, connector: MagicMock) -> None:
        """Test listing comments."""
        CommentService(connector, "3").gets("KP-2", order_by="-created", expand=["renderedBody"])
        assert sent(connector)[1] == (
            "rest/api/3/issue/KP-2/comment?expand=renderedBody&maxResults=50&orderBy=-created&startAt=0"
        )

    def test_get_requires_comment(self, connector: MagicMock) -> None:
        """Test that the comment id is required after the issue key."""
        with pytest.raises(ValidationError) as exc_info:
            CommentService(connector, "3").get("KP-2", "")
        assert exc_info.value.field is MissingField.COMMENT_ID

    def test_add(self, connector: MagicMock) -> None:
        """Test adding a comment."""
        payload = {"body": "Restarted the service"}
        CommentService(connector, "2").add("KP-2", payload)
        assert sent(connector) == ("POST", "rest/api/2/issue/KP-2/comment", "", payload)

    def test_delete(self, connector: MagicMock) -> None:
        """Test deleting a comment."""
        CommentService(connector, "3").delete("KP-2", "10010")
        assert sent(connector)[:2] == ("DELETE", "rest/api/3/issue/KP-2/comment/10010")


class TestSearchService:
    """Tests for SearchService."""

    def test_get(self, connector: MagicMock) -> None:
        """Test searching with a GET request."""
        SearchService(connector, "3").get(
            "project = KP", fields=["summary", "status"], start=50, max_results=25, validate="warn"
        )
        assert sent(connector)[1] == (
            "rest/api/3/search?fields=summary%2Cstatus&jql=project+%3D+KP"
            "&maxResults=25&startAt=50&validateQuery=warn"
        )

    def test_get_requires_jql(self, connector: MagicMock) -> None:
        """Test that the JQL query is required."""
        with pytest.raises(ValidationError) as exc_info:
            SearchService(connector, "3").get("")
        assert exc_info.value.field is MissingField.JQL
        connector.new_request.assert_not_called()

    @pytest.mark.parametrize("method_name", ["get", "post"])
    def test_unknown_validate_mode(self, connector: MagicMock, method_name: str) -> None:
        """Test that only strict, warn and none are accepted."""
        with pytest.raises(ValidationError) as exc_info:
            getattr(SearchService(connector, "3"), method_name)("project = KP", validate="bogus")

        assert exc_info.value.field is MissingField.VALIDATE_QUERY
        assert "strict,warn,none" in str(exc_info.value)
        connector.new_request.assert_not_called()

    def test_post_validate_mode(self, connector: MagicMock) -> None:
        """Test that a known mode is sent in the body."""
        SearchService(connector, "3").post("project = KP", validate="none")
        assert sent(connector)[3]["validateQuery"] == "none"

    def test_post(self, connector: MagicMock) -> None:
        """Test searching with the query in the body."""
        SearchService(connector, "3").post("project = KP", expand=["names"])
        assert sent(connector) == (
            "POST",
            "rest/api/3/search",
            "",
            {"jql": "project = KP", "startAt": 0, "maxResults": 50, "expand": ["names"]},
        )

    def test_search_jql(self, connector: MagicMock) -> None:
        """Test token pagination."""
        SearchService(connector, "3").search_jql("project = KP", max_results=100, next_page_token="tok")
        assert sent(connector) == (
            "POST",
            "rest/api/3/search/jql",
            "",
            {"jql": "project = KP", "maxResults": 100, "nextPageToken": "tok"},
        )

    def test_approximate_count(self, connector: MagicMock) -> None:
        """Test counting issues."""
        SearchService(connector, "3").approximate_count("project = KP")
        assert sent(connector)[1:] == ("rest/api/3/search/approximate-count", "", {"jql": "project = KP"})

    def test_bulk_fetch(self, connector: MagicMock) -> None:
        """Test fetching issues by key."""
        payload = {"issueIdsOrKeys": ["KP-1", "KP-2"]}
        SearchService(connector, "3").bulk_fetch(payload)
        assert sent(connector) == ("POST", "rest/api/3/issue/bulkfetch", "", payload)

    def test_checks(self, connector: MagicMock) -> None:
        """Test matching issues against JQL queries."""
        payload = {"issueIds": [10001], "jqls": ["project = KP"]}
        SearchService(connector, "3").checks(payload)
        assert sent(connector) == ("POST", "rest/api/3/jql/match", "", payload)


class TestJiraClient:
    """Tests for JiraClient over HTTP."""

    @responses.activate
    def test_search(self, mock_credentials: MagicMock) -> None:
        """Test a search decoded end to end."""
        responses.add(
            responses.GET,
            f"{SITE}/rest/api/3/search",
            json={
                "startAt": 0,
                "maxResults": 50,
                "total": 1,
                "issues": [{"id": "10002", "key": "KP-2", "fields": {"summary": "Disk full"}}],
            },
        )

        client = JiraClient()
        page, response = client.search.get("project = KP", fields=["summary"])

        assert isinstance(page, IssueSearchScheme)
        assert page.total == 1
        assert page.issues[0].key == "KP-2"
        assert page.issues[0].fields["summary"] == "Disk full"
        assert response.code == 200

    def test_services_wired(self, mock_credentials: MagicMock) -> None:
        """Test that sub-services share the client and version."""
        client = JiraClient(version="2")

        assert client.issue.api_version == "2"
        assert client.issue.comment._connector is client
        assert client.project.component._connector is client
        assert client.project.version.api_version == "2"
        assert client.user._connector is client
