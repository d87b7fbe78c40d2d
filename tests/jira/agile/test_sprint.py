"""Tests for Jira Agile sprints and epics."""

from unittest.mock import MagicMock

import pytest

from atlassian_rest.core.exceptions import MissingField, ValidationError
from atlassian_rest.jira.agile.epic import EpicService
from atlassian_rest.jira.agile.models import IssueOptionScheme, SprintPayloadScheme
from atlassian_rest.jira.agile.sprint import SprintService


def sent(connector: MagicMock) -> tuple:
    """Return the (method, path, content_type, body) of the last request."""
    return connector.new_request.call_args.args


class TestSprintService:
    """Tests for SprintService."""

    def test_get(self, connector: MagicMock) -> None:
        """Test getting a sprint."""
        SprintService(connector, "1.0").get(37)
        assert sent(connector) == ("GET", "rest/agile/1.0/sprint/37", "", None)

    def test_get_requires_id(self, connector: MagicMock) -> None:
        """Test that sprint id 0 is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SprintService(connector, "1.0").get(0)
        assert exc_info.value.field is MissingField.SPRINT_ID
        connector.new_request.assert_not_called()

    def test_create(self, connector: MagicMock) -> None:
        """Test creating a sprint."""
        payload = SprintPayloadScheme(name="KP Sprint 2", origin_board_id=4)
        SprintService(connector, "1.0").create(payload)
        assert sent(connector) == ("POST", "rest/agile/1.0/sprint", "", payload)

    def test_update_replaces(self, connector: MagicMock) -> None:
        """Test that update replaces the sprint with PUT."""
        SprintService(connector, "1.0").update(37, {"name": "Renamed", "state": "future"})
        assert sent(connector)[:2] == ("PUT", "rest/agile/1.0/sprint/37")

    def test_path_partially_updates(self, connector: MagicMock) -> None:
        """Test that path sends a partial update with POST."""
        SprintService(connector, "1.0").path(37, {"goal": "Ship it"})
        assert sent(connector) == ("POST", "rest/agile/1.0/sprint/37", "", {"goal": "Ship it"})

    def test_delete(self, connector: MagicMock) -> None:
        """Test deleting a sprint."""
        SprintService(connector, "1.0").delete(37)
        assert sent(connector)[:2] == ("DELETE", "rest/agile/1.0/sprint/37")

    def test_issues(self, connector: MagicMock) -> None:
        """Test listing the issues of a sprint."""
        options = IssueOptionScheme(fields=["summary"])
        SprintService(connector, "1.0").issues(37, options=options)
        assert sent(connector)[1] == (
            "rest/agile/1.0/sprint/37/issue?fields=summary&maxResults=50&startAt=0"
        )

    def test_issues_validation_disabled(self, connector: MagicMock) -> None:
        """Test that disabled validation is sent as validateQuery=false."""
        SprintService(connector, "1.0").issues(37, options=IssueOptionScheme(validate_query=False))
        assert sent(connector)[1] == "rest/agile/1.0/sprint/37/issue?maxResults=50&startAt=0&validateQuery=false"

    @pytest.mark.parametrize("method_name, state", [("start", "active"), ("close", "closed")])
    def test_state_changes(self, connector: MagicMock, method_name: str, state: str) -> None:
        """Test starting and closing a sprint."""
        getattr(SprintService(connector, "1.0"), method_name)(37)
        assert sent(connector) == ("POST", "rest/agile/1.0/sprint/37", "", {"state": state})

    def test_move(self, connector: MagicMock) -> None:
        """Test moving issues into a sprint."""
        payload = {"issues": ["KP-1"]}
        SprintService(connector, "1.0").move(37, payload)
        assert sent(connector) == ("POST", "rest/agile/1.0/sprint/37/issue", "", payload)


class TestEpicService:
    """Tests for EpicService."""

    def test_get(self, connector: MagicMock) -> None:
        """Test getting an epic by key."""
        EpicService(connector, "1.0").get("KP-10")
        assert sent(connector)[1] == "rest/agile/1.0/epic/KP-10"

    def test_issues(self, connector: MagicMock) -> None:
        """Test listing the issues of an epic."""
        EpicService(connector, "1.0").issues("KP-10", max_results=5)
        assert sent(connector)[1] == "rest/agile/1.0/epic/KP-10/issue?maxResults=5&startAt=0"

    def test_issues_always_send_validation(self, connector: MagicMock) -> None:
        """Test that epic issue listings send validateQuery while validation is on."""
        options = IssueOptionScheme(jql="project = KP")
        EpicService(connector, "1.0").issues("KP-16", options=options)
        assert sent(connector)[1] == (
            "rest/agile/1.0/epic/KP-16/issue?jql=project+%3D+KP&maxResults=50&startAt=0&validateQuery=true"
        )

    def test_move(self, connector: MagicMock) -> None:
        """Test moving issues into an epic."""
        EpicService(connector, "1.0").move("KP-10", ["KP-1", "KP-2"])
        assert sent(connector) == (
            "POST",
            "rest/agile/1.0/epic/KP-10/issue",
            "",
            {"issues": ["KP-1", "KP-2"]},
        )

    def test_move_requires_epic(self, connector: MagicMock) -> None:
        """Test that the epic is required."""
        with pytest.raises(ValidationError) as exc_info:
            EpicService(connector, "1.0").move("", ["KP-1"])
        assert exc_info.value.field is MissingField.EPIC_ID
