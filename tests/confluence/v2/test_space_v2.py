"""Tests for Confluence v2 spaces, attachments, custom content, folders and descendants."""

from unittest.mock import MagicMock

import pytest

from atlassian_rest.confluence.v2.attachment import AttachmentService
from atlassian_rest.confluence.v2.custom_content import CustomContentService
from atlassian_rest.confluence.v2.descendants import DescendantsService
from atlassian_rest.confluence.v2.folder import FolderService
from atlassian_rest.confluence.v2.models import (
    AttachmentParamsScheme,
    CustomContentOptionsScheme,
    FolderOptionsScheme,
    GetSpacesOptionSchemeV2,
)
from atlassian_rest.confluence.v2.space import SpaceService
from atlassian_rest.core.exceptions import MissingField, ValidationError


def sent(connector: MagicMock) -> tuple:
    """Return the (method, path, content_type, body) of the last request."""
    return connector.new_request.call_args.args


class TestSpaceServiceV2:
    """Tests for the v2 SpaceService."""

    def test_bulk(self, connector: MagicMock) -> None:
        """Test listing spaces with filters."""
        options = GetSpacesOptionSchemeV2(
            ids=[1, 2],
            keys=["DUMMY"],
            type="global",
            labels=["ops"],
            description_format="plain",
            serialize_ids_as_strings=True,
        )
        SpaceService(connector).bulk(options, cursor="abc", limit=10)
        assert sent(connector)[1] == (
            "wiki/api/v2/spaces?cursor=abc&description-format=plain&ids=1%2C2&keys=DUMMY"
            "&labels=ops&limit=10&serialize-ids-as-strings=true&type=global"
        )

    def test_get(self, connector: MagicMock) -> None:
        """Test getting a space by ID."""
        SpaceService(connector).get(196613, description_format="view")
        assert sent(connector)[1] == "wiki/api/v2/spaces/196613?description-format=view"

    def test_get_requires_id(self, connector: MagicMock) -> None:
        """Test that the space id is required."""
        with pytest.raises(ValidationError) as exc_info:
            SpaceService(connector).get(0)
        assert exc_info.value.field is MissingField.SPACE_ID

    def test_permissions(self, connector: MagicMock) -> None:
        """Test listing space permissions."""
        SpaceService(connector).permissions(196613, cursor="next")
        assert sent(connector)[1] == "wiki/api/v2/spaces/196613/permissions?cursor=next&limit=25"


class TestAttachmentServiceV2:
    """Tests for the v2 AttachmentService."""

    def test_get(self, connector: MagicMock) -> None:
        """Test getting an attachment version."""
        AttachmentService(connector).get("att10001", version=2, serialize_ids=True)
        assert sent(connector)[1] == (
            "wiki/api/v2/attachments/att10001?serialize-ids-as-strings=true&version=2"
        )

    def test_gets(self, connector: MagicMock) -> None:
        """Test listing the attachments of a page."""
        options = AttachmentParamsScheme(sort="-modified-date", media_type="image/png", file_name="a.png")
        AttachmentService(connector).gets(200001, "pages", options, limit=50)
        assert sent(connector)[1] == (
            "wiki/api/v2/pages/200001/attachments?filename=a.png&limit=50"
            "&mediaType=image%2Fpng&sort=-modified-date"
        )

    @pytest.mark.parametrize(
        "entity_id, entity_type, field",
        [
            (0, "pages", MissingField.ENTITY_ID),
            (200001, "", MissingField.ENTITY_TYPE),
            (200001, "whiteboards", MissingField.ENTITY_TYPE),
        ],
    )
    def test_gets_validation(
        self, connector: MagicMock, entity_id: int, entity_type: str, field: MissingField
    ) -> None:
        """Test that the entity id and a known entity type are required."""
        with pytest.raises(ValidationError) as exc_info:
            AttachmentService(connector).gets(entity_id, entity_type)

        assert exc_info.value.field is field
        connector.new_request.assert_not_called()

    def test_delete(self, connector: MagicMock) -> None:
        """Test deleting an attachment."""
        AttachmentService(connector).delete("att10001")
        assert sent(connector) == ("DELETE", "wiki/api/v2/attachments/att10001", "", None)


class TestCustomContentService:
    """Tests for CustomContentService."""

    def test_gets(self, connector: MagicMock) -> None:
        """Test that the type is always sent and space IDs are joined."""
        options = CustomContentOptionsScheme(ids=[101, 102], space_ids=[7], body_format="storage")
        CustomContentService(connector).gets("ac:app:forge-type", options)
        assert sent(connector)[1] == (
            "wiki/api/v2/custom-content?body-format=storage&id=101%2C102&limit=25"
            "&space-id=7&type=ac%3Aapp%3Aforge-type"
        )

    def test_gets_without_options_sends_type(self, connector: MagicMock) -> None:
        """Test that a bare listing still carries the type parameter."""
        CustomContentService(connector).gets("ac:app:forge-type")
        assert sent(connector)[1] == "wiki/api/v2/custom-content?limit=25&type=ac%3Aapp%3Aforge-type"

    def test_gets_requires_type(self, connector: MagicMock) -> None:
        """Test that the custom content type is required."""
        with pytest.raises(ValidationError) as exc_info:
            CustomContentService(connector).gets("")
        assert exc_info.value.field is MissingField.CUSTOM_CONTENT_TYPE

    def test_get(self, connector: MagicMock) -> None:
        """Test getting custom content in a body format."""
        CustomContentService(connector).get(101, format="storage", version=3)
        assert sent(connector)[1] == "wiki/api/v2/custom-content/101?body-format=storage&version=3"

    def test_update(self, connector: MagicMock) -> None:
        """Test updating custom content."""
        payload = {"id": "101", "type": "ac:app:forge-type", "title": "x"}
        CustomContentService(connector).update(101, payload)
        assert sent(connector) == ("PUT", "wiki/api/v2/custom-content/101", "", payload)

    def test_delete_requires_id(self, connector: MagicMock) -> None:
        """Test that the custom content id is required."""
        with pytest.raises(ValidationError) as exc_info:
            CustomContentService(connector).delete(0)
        assert exc_info.value.field is MissingField.CUSTOM_CONTENT_ID


class TestFolderService:
    """Tests for FolderService."""

    def test_gets(self, connector: MagicMock) -> None:
        """Test listing folders by parent and space."""
        options = FolderOptionsScheme(parent_id="300", space_ids=[7, 8])
        FolderService(connector).gets(options)
        assert sent(connector)[1] == "wiki/api/v2/folders?limit=25&parent-id=300&space-id=7%2C8"

    def test_gets_by_parent(self, connector: MagicMock) -> None:
        """Test listing the children of a folder."""
        FolderService(connector).gets_by_parent("300", cursor="c1")
        assert sent(connector)[1] == "wiki/api/v2/folders/300/children?cursor=c1&limit=25"

    def test_get_requires_id(self, connector: MagicMock) -> None:
        """Test that the folder id is required."""
        with pytest.raises(ValidationError) as exc_info:
            FolderService(connector).get("")
        assert exc_info.value.field is MissingField.FOLDER_ID

    def test_create(self, connector: MagicMock) -> None:
        """Test creating a folder."""
        FolderService(connector).create({"spaceId": "7", "title": "Archive"})
        assert sent(connector) == ("POST", "wiki/api/v2/folders", "", {"spaceId": "7", "title": "Archive"})


class TestDescendantsService:
    """Tests for DescendantsService."""

    @pytest.mark.parametrize(
        "method_name, container",
        [
            ("for_page", "pages"),
            ("for_whiteboard", "whiteboards"),
            ("for_database", "databases"),
            ("for_embed", "embeds"),
            ("for_folder", "folders"),
        ],
    )
    def test_descendants(self, connector: MagicMock, method_name: str, container: str) -> None:
        """Test that limit and depth are always sent."""
        getattr(DescendantsService(connector), method_name)(500)
        assert sent(connector)[1] == f"wiki/api/v2/{container}/500/descendants?depth=5&limit=25"

    @pytest.mark.parametrize(
        "method_name, field",
        [
            ("for_page", MissingField.PAGE_ID),
            ("for_whiteboard", MissingField.WHITEBOARD_ID),
            ("for_database", MissingField.DATABASE_ID),
            ("for_embed", MissingField.EMBED_ID),
            ("for_folder", MissingField.FOLDER_ID),
        ],
    )
    def test_descendants_require_id(self, connector: MagicMock, method_name: str, field: MissingField) -> None:
        """Test that each container reports its own missing id."""
        with pytest.raises(ValidationError) as exc_info:
            getattr(DescendantsService(connector), method_name)(0)
        assert exc_info.value.field is field

    def test_cursor(self, connector: MagicMock) -> None:
        """Test paging descendants with a cursor."""
        DescendantsService(connector).for_page(500, limit=10, depth=2, cursor="c2")
        assert sent(connector)[1] == "wiki/api/v2/pages/500/descendants?cursor=c2&depth=2&limit=10"
