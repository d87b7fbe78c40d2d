"""Tests for Confluence v1 spaces, search, templates and the client."""

import logging
from unittest.mock import MagicMock

import pytest

from atlassian_rest.confluence import ConfluenceClient
from atlassian_rest.confluence.models import (
    CreateSpaceScheme,
    GetSpacesOptionScheme,
    SearchContentOptions,
    TaskScheme,
)
from atlassian_rest.confluence.search import SearchService
from atlassian_rest.confluence.space import SpacePermissionService, SpaceService
from atlassian_rest.confluence.template import TemplateService
from atlassian_rest.core.exceptions import MissingField, ValidationError


def sent(connector: MagicMock) -> tuple:
    """Return the (method, path, content_type, body) of the last request."""
    return connector.new_request.call_args.args


class TestSpaceService:
    """Tests for SpaceService."""

    def test_gets_with_options(self, connector: MagicMock) -> None:
        """Test that keys and IDs repeat and lists are joined."""
        options = GetSpacesOptionScheme(
            space_keys=["DUMMY", "DEV"],
            space_ids=[1, 2],
            space_type="global",
            status="current",
            labels=["ops", "team"],
            favourite=True,
            expand=["description.plain"],
        )
        SpaceService(connector).gets(options, start=10, limit=50)

        assert sent(connector)[1] == (
            "wiki/rest/api/space?expand=description.plain&favorite=true&label=ops%2Cteam"
            "&limit=50&spaceID=1&spaceID=2&spaceKey=DUMMY&spaceKey=DEV&start=10"
            "&status=current&type=global"
        )

    def test_create(self, connector: MagicMock) -> None:
        """Test creating a space."""
        payload = CreateSpaceScheme(key="DUMMY", name="Dummy Space")
        SpaceService(connector).create(payload)
        assert sent(connector) == ("POST", "wiki/rest/api/space", "", payload)

    def test_create_private(self, connector: MagicMock) -> None:
        """Test creating a private space."""
        SpaceService(connector).create({"key": "DUMMY", "name": "Dummy"}, private=True)
        assert sent(connector)[1] == "wiki/rest/api/space/_private"

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"key": "DUMMY", "name": ""}, MissingField.SPACE_NAME),
            ({"name": "Dummy"}, MissingField.SPACE_KEY),
        ],
    )
    def test_create_validation(self, connector: MagicMock, payload: dict, field: MissingField) -> None:
        """Test that name and key are checked in that order."""
        with pytest.raises(ValidationError) as exc_info:
            SpaceService(connector).create(payload)

        assert exc_info.value.field is field
        connector.new_request.assert_not_called()

    def test_get(self, connector: MagicMock) -> None:
        """Test getting a space by key."""
        SpaceService(connector).get("DUMMY", expand=["homepage"])
        assert sent(connector)[1] == "wiki/rest/api/space/DUMMY?expand=homepage"

    def test_get_requires_key(self, connector: MagicMock) -> None:
        """Test that the space key is required."""
        with pytest.raises(ValidationError, match="no space key set"):
            SpaceService(connector).get("")

    def test_delete_logs_and_returns_task(
        self, connector: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test deleting a space."""
        with caplog.at_level(logging.INFO, logger="atlassian_rest.confluence.space"):
            SpaceService(connector).delete("DUMMY")

        assert sent(connector)[:2] == ("DELETE", "wiki/rest/api/space/DUMMY")
        connector.call.assert_called_once_with(connector.new_request.return_value, TaskScheme)
        assert "DUMMY" in caplog.text

    def test_content(self, connector: MagicMock) -> None:
        """Test listing the content of a space."""
        SpaceService(connector).content("DUMMY", depth="root")
        assert sent(connector)[1] == "wiki/rest/api/space/DUMMY/content?depth=root&limit=25&start=0"

    def test_content_by_type_requires_type(self, connector: MagicMock) -> None:
        """Test that the content type is required."""
        with pytest.raises(ValidationError) as exc_info:
            SpaceService(connector).content_by_type("DUMMY", "")
        assert exc_info.value.field is MissingField.CONTENT_TYPE


class TestSpacePermissionService:
    """Tests for SpacePermissionService."""

    def test_add(self, connector: MagicMock) -> None:
        """Test granting a permission."""
        payload = {"subject": {"type": "user", "identifier": "abc"}, "operation": {"key": "read"}}
        SpacePermissionService(connector).add("DUMMY", payload)
        assert sent(connector) == ("POST", "wiki/rest/api/space/DUMMY/permission", "", payload)

    def test_bulk(self, connector: MagicMock) -> None:
        """Test granting custom content permissions."""
        SpacePermissionService(connector).bulk("DUMMY", {"operations": []})
        assert sent(connector)[1] == "wiki/rest/api/space/DUMMY/permission/custom-content"

    def test_remove(self, connector: MagicMock) -> None:
        """Test revoking a permission."""
        SpacePermissionService(connector).remove("DUMMY", 1024)
        assert sent(connector)[:2] == ("DELETE", "wiki/rest/api/space/DUMMY/permission/1024")


class TestSearchService:
    """Tests for SearchService."""

    def test_content(self, connector: MagicMock) -> None:
        """Test searching content with options."""
        options = SearchContentOptions(
            context="DUMMY",
            cursor="raNDoMsTRiNg",
            next=True,
            limit=20,
            include_archived_spaces=True,
            excerpt="highlight",
        )
        SearchService(connector).content("type=page", options)

        assert sent(connector)[1] == (
            "wiki/rest/api/search?cql=type%3Dpage&cqlcontext=DUMMY&cursor=raNDoMsTRiNg"
            "&excerpt=highlight&includeArchivedSpaces=true&limit=20&next=true"
        )

    def test_content_requires_cql(self, connector: MagicMock) -> None:
        """Test that the CQL query is required."""
        with pytest.raises(ValidationError) as exc_info:
            SearchService(connector).content("")
        assert exc_info.value.field is MissingField.CQL
        connector.new_request.assert_not_called()

    def test_users(self, connector: MagicMock) -> None:
        """Test searching users."""
        SearchService(connector).users("type=user", limit=10)
        assert sent(connector)[1] == "wiki/rest/api/search/user?cql=type%3Duser&limit=10&start=0"


class TestTemplateService:
    """Tests for TemplateService."""

    def test_get(self, connector: MagicMock) -> None:
        """Test getting a template."""
        TemplateService(connector).get("tpl-1")
        assert sent(connector) == ("GET", "wiki/rest/api/template/tpl-1", "", None)

    def test_get_requires_id(self, connector: MagicMock) -> None:
        """Test that the template id is required."""
        with pytest.raises(ValidationError) as exc_info:
            TemplateService(connector).get("")
        assert exc_info.value.field is MissingField.TEMPLATE_ID

    def test_update(self, connector: MagicMock) -> None:
        """Test updating a template."""
        TemplateService(connector).update({"templateId": "tpl-1", "name": "Runbook"})
        assert sent(connector)[:2] == ("PUT", "wiki/rest/api/template")


class TestConfluenceClient:
    """Tests for ConfluenceClient wiring."""

    def test_services_wired(self, mock_credentials: MagicMock) -> None:
        """Test that every service shares the client as connector."""
        client = ConfluenceClient()

        assert client.provider_name == "confluence"
        assert client.content._connector is client
        assert client.content.label._connector is client
        assert client.content.restriction.operation.group._connector is client
        assert client.content.restriction.operation.user._connector is client
        assert client.space.permission._connector is client
        assert client.search._connector is client
        assert client.template._connector is client

    def test_shared_tracer(self, mock_credentials: MagicMock, tracer) -> None:
        """Test that the tracer is handed to every service."""
        client = ConfluenceClient(tracer=tracer)
        assert client.content._tracer is tracer
        assert client.content.attachment._tracer is tracer
        assert client.space._tracer is tracer
