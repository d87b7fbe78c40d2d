"""Navigation, copy and move of a Confluence content tree (REST v1)."""

from atlassian_rest.confluence.models import (
    ContentChildrenScheme,
    ContentMoveScheme,
    ContentPageScheme,
    ContentScheme,
    CopyOptionsScheme,
    CopyPageHierarchyPayloadScheme,
    TaskScheme,
)
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query, require_choice

MOVE_POSITIONS = frozenset({"before", "after", "append"})


class ChildrenDescendantService(ConfluenceService):
    """Children, descendants, copy and move of a content."""

    def children(
        self,
        content_id: str,
        expand: list[str] | None = None,
        parent_version: int = 0,
    ) -> tuple[ContentChildrenScheme, ResponseScheme]:
        """Return a map of the direct children of a content, grouped by type.

        GET /wiki/rest/api/content/{id}/child
        """
        query = Query().add_joined("expand", expand).add_if("parentVersion", parent_version)
        return self._call(
            "get_content_children",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/child",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentChildrenScheme,
        )

    def move(
        self, page_id: str, position: str, target_id: str
    ) -> tuple[ContentMoveScheme, ResponseScheme]:
        """Move a page relative to a target page.

        PUT /wiki/rest/api/content/{pageId}/move/{position}/{targetId}

        Args:
            page_id: Page to move
            position: ``before`` or ``after`` the target as a sibling, or
                ``append`` as its last child
            target_id: Page the position is relative to

        Raises:
            ValidationError: If an argument is missing or the position is unknown
        """
        return self._call(
            "move_content",
            "PUT",
            f"{CONFLUENCE_API_V1}/content/{page_id}/move/{position}/{target_id}",
            required=[
                (page_id, MissingField.PAGE_ID),
                (position, MissingField.POSITION),
                (target_id, MissingField.TARGET_ID),
            ],
            validate=lambda: require_choice(
                self.provider_name, position, MOVE_POSITIONS, MissingField.INVALID_POSITION
            ),
            result=ContentMoveScheme,
        )

    def children_by_type(
        self,
        content_id: str,
        content_type: str,
        parent_version: int = 0,
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Return the direct children of a content of one type (page, comment, attachment).

        GET /wiki/rest/api/content/{id}/child/{type}
        """
        query = (
            Query()
            .add("start", start)
            .add("limit", limit)
            .add_joined("expand", expand)
            .add_if("parentVersion", parent_version)
        )
        return self._call(
            "get_content_children_by_type",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/child/{content_type}",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (content_type, MissingField.CONTENT_TYPE),
            ],
            query=query,
            result=ContentPageScheme,
        )

    def descendants(
        self, content_id: str, expand: list[str] | None = None
    ) -> tuple[ContentChildrenScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/descendant"""
        return self._call(
            "get_content_descendants",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/descendant",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            result=ContentChildrenScheme,
        )

    def descendants_by_type(
        self,
        content_id: str,
        content_type: str,
        depth: str = "",
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Return the descendants of a content of one type.

        GET /wiki/rest/api/content/{id}/descendant/{type}

        Args:
            content_id: Content ID
            content_type: Descendant type (page, comment, attachment)
            depth: ``all`` for every level or ``root`` for direct children only
            expand: Properties to expand
            start: Index of the first item
            limit: Maximum number of items
        """
        query = (
            Query()
            .add("start", start)
            .add("limit", limit)
            .add_joined("expand", expand)
            .add_if("depth", depth)
        )
        return self._call(
            "get_content_descendants_by_type",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/descendant/{content_type}",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (content_type, MissingField.CONTENT_TYPE),
            ],
            query=query,
            result=ContentPageScheme,
        )

    def copy_hierarchy(
        self,
        content_id: str,
        options: CopyPageHierarchyPayloadScheme | dict | None = None,
    ) -> tuple[TaskScheme, ResponseScheme]:
        """Copy a page and its descendants. Runs as a long task on the server.

        POST /wiki/rest/api/content/{id}/pagehierarchy/copy
        """
        return self._call(
            "copy_content_hierarchy",
            "POST",
            f"{CONFLUENCE_API_V1}/content/{content_id}/pagehierarchy/copy",
            required=[(content_id, MissingField.CONTENT_ID)],
            body=options,
            result=TaskScheme,
        )

    def copy_page(
        self,
        content_id: str,
        expand: list[str] | None = None,
        options: CopyOptionsScheme | dict | None = None,
    ) -> tuple[ContentScheme, ResponseScheme]:
        """Copy a single page, optionally with its attachments, labels and permissions.

        POST /wiki/rest/api/content/{id}/copy
        """
        return self._call(
            "copy_content_page",
            "POST",
            f"{CONFLUENCE_API_V1}/content/{content_id}/copy",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            body=options,
            result=ContentScheme,
        )
