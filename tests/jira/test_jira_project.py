"""Tests for Jira projects, components and versions."""

import logging
from unittest.mock import MagicMock

import pytest

from atlassian_rest.core.exceptions import MissingField, ValidationError
from atlassian_rest.jira.component import ComponentService
from atlassian_rest.jira.models import (
    ComponentScheme,
    ProjectSearchOptionsScheme,
    ProjectStatusPageScheme,
    TaskScheme,
    VersionGetsOptions,
    VersionScheme,
)
from atlassian_rest.jira.project import ProjectService
from atlassian_rest.jira.version import VersionService


def sent(connector: MagicMock) -> tuple:
    """Return the (method, path, content_type, body) of the last request."""
    return connector.new_request.call_args.args


class TestProjectService:
    """Tests for ProjectService."""

    def test_create(self, connector: MagicMock) -> None:
        """Test creating a project."""
        payload = {"key": "KP", "name": "Kitchen Plumbing", "projectTypeKey": "software"}
        ProjectService(connector, "3").create(payload)
        assert sent(connector) == ("POST", "rest/api/3/project", "", payload)

    def test_search(self, connector: MagicMock) -> None:
        """Test that IDs and keys repeat and lists are joined."""
        options = ProjectSearchOptionsScheme(
            order_by="name",
            ids=[10000, 10001],
            keys=["KP", "OPS"],
            query="plumb",
            type_keys=["software", "business"],
            category_id=10020,
            expand=["lead"],
            status=["live"],
        )
        ProjectService(connector, "3").search(options, start=0, max_results=25)

        assert sent(connector)[1] == (
            "rest/api/3/project/search?categoryId=10020&expand=lead&id=10000&id=10001"
            "&keys=KP&keys=OPS&maxResults=25&orderBy=name&query=plumb&startAt=0"
            "&status=live&typeKey=software%2Cbusiness"
        )

    def test_get_requires_key(self, connector: MagicMock) -> None:
        """Test that the project key is required."""
        with pytest.raises(ValidationError) as exc_info:
            ProjectService(connector, "3").get("")
        assert exc_info.value.field is MissingField.PROJECT_KEY
        connector.new_request.assert_not_called()

    def test_update(self, connector: MagicMock) -> None:
        """Test updating a project."""
        ProjectService(connector, "3").update("KP", {"name": "Kitchen"})
        assert sent(connector) == ("PUT", "rest/api/3/project/KP", "", {"name": "Kitchen"})

    def test_delete(self, connector: MagicMock, caplog: pytest.LogCaptureFixture) -> None:
        """Test that enableUndo is left out by default and the deletion is logged."""
        with caplog.at_level(logging.INFO, logger="atlassian_rest.jira.project"):
            ProjectService(connector, "3").delete("KP")

        assert sent(connector)[:2] == ("DELETE", "rest/api/3/project/KP")
        assert "KP" in caplog.text

    def test_delete_with_undo(self, connector: MagicMock) -> None:
        """Test that enableUndo=true is sent when requested."""
        ProjectService(connector, "3").delete("KP", enable_undo=True)
        assert sent(connector)[:2] == ("DELETE", "rest/api/3/project/KP?enableUndo=true")

    def test_delete_asynchronously(self, connector: MagicMock) -> None:
        """Test deleting a project as a task."""
        ProjectService(connector, "3").delete_asynchronously("KP")
        assert sent(connector)[:2] == ("POST", "rest/api/3/project/KP/delete")
        connector.call.assert_called_once_with(connector.new_request.return_value, TaskScheme)

    @pytest.mark.parametrize("method_name, suffix", [("archive", "archive"), ("restore", "restore")])
    def test_archive_and_restore(self, connector: MagicMock, method_name: str, suffix: str) -> None:
        """Test archiving and restoring a project."""
        getattr(ProjectService(connector, "3"), method_name)("KP")
        assert sent(connector) == ("POST", f"rest/api/3/project/KP/{suffix}", "", None)

    def test_statuses(self, connector: MagicMock) -> None:
        """Test that statuses decode into a list."""
        ProjectService(connector, "3").statuses("KP")
        assert sent(connector)[1] == "rest/api/3/project/KP/statuses"
        connector.call.assert_called_once_with(
            connector.new_request.return_value, list[ProjectStatusPageScheme]
        )

    def test_notification_scheme(self, connector: MagicMock) -> None:
        """Test getting the notification scheme of a project."""
        ProjectService(connector, "2").notification_scheme("KP", expand=["all"])
        assert sent(connector)[1] == "rest/api/2/project/KP/notificationscheme?expand=all"

    def test_sub_services(self, connector: MagicMock) -> None:
        """Test that components and versions hang off the project service."""
        component = ComponentService(connector, "3")
        versions = VersionService(connector, "3")
        project = ProjectService(connector, "3", component=component, version_service=versions)

        assert project.component is component
        assert project.version is versions
        assert project.api_version == "3"


class TestComponentService:
    """Tests for ComponentService."""

    def test_gets(self, connector: MagicMock) -> None:
        """Test listing the components of a project."""
        ComponentService(connector, "3").gets("KP")
        assert sent(connector)[1] == "rest/api/3/project/KP/components"
        connector.call.assert_called_once_with(connector.new_request.return_value, list[ComponentScheme])

    def test_count(self, connector: MagicMock) -> None:
        """Test counting the issues of a component."""
        ComponentService(connector, "3").count("10000")
        assert sent(connector)[1] == "rest/api/3/component/10000/relatedIssueCounts"

    def test_delete_requires_id(self, connector: MagicMock) -> None:
        """Test that the component id is required."""
        with pytest.raises(ValidationError) as exc_info:
            ComponentService(connector, "3").delete("")
        assert exc_info.value.field is MissingField.COMPONENT_ID

    def test_create(self, connector: MagicMock) -> None:
        """Test creating a component."""
        payload = {"name": "Backend", "project": "KP"}
        ComponentService(connector, "3").create(payload)
        assert sent(connector) == ("POST", "rest/api/3/component", "", payload)


class TestVersionService:
    """Tests for the Jira VersionService."""

    def test_gets(self, connector: MagicMock) -> None:
        """Test listing every version of a project."""
        VersionService(connector, "3").gets("KP")
        assert sent(connector)[1] == "rest/api/3/project/KP/versions"
        connector.call.assert_called_once_with(connector.new_request.return_value, list[VersionScheme])

    def test_search(self, connector: MagicMock) -> None:
        """Test searching versions."""
        options = VersionGetsOptions(order_by="-releaseDate", query="1.", status="released")
        VersionService(connector, "3").search("KP", options, max_results=10)
        assert sent(connector)[1] == (
            "rest/api/3/project/KP/version?maxResults=10&orderBy=-releaseDate&query=1."
            "&startAt=0&status=released"
        )

    def test_merge(self, connector: MagicMock) -> None:
        """Test merging versions."""
        VersionService(connector, "3").merge("10000", "10001")
        assert sent(connector)[:2] == ("PUT", "rest/api/3/version/10000/mergeto/10001")

    def test_merge_requires_target(self, connector: MagicMock) -> None:
        """Test that the target version is required."""
        with pytest.raises(ValidationError) as exc_info:
            VersionService(connector, "3").merge("10000", "")
        assert exc_info.value.field is MissingField.VERSION_ID

    def test_issue_counts(self, connector: MagicMock) -> None:
        """Test the issue count endpoints."""
        service = VersionService(connector, "3")
        service.related_issue_counts("10000")
        service.unresolved_issue_count("10000")

        paths = [call.args[1] for call in connector.new_request.call_args_list]
        assert paths == [
            "rest/api/3/version/10000/relatedIssueCounts",
            "rest/api/3/version/10000/unresolvedIssueCount",
        ]
