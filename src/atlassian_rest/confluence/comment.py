"""Comments of a Confluence content (REST v1)."""

from atlassian_rest.confluence.models import ContentPageScheme
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class CommentService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content/{id}/child/comment``."""

    def gets(
        self,
        content_id: str,
        expand: list[str] | None = None,
        location: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Return the comments of a content.

        GET /wiki/rest/api/content/{id}/child/comment

        Args:
            content_id: Content ID
            expand: Properties to expand
            location: Comment locations to include (inline, footer, resolved)
            start: Index of the first item
            limit: Maximum number of items
        """
        query = (
            Query()
            .add("start", start)
            .add("limit", limit)
            .add_joined("expand", expand)
            .add_joined("location", location)
        )
        return self._call(
            "get_content_comments",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/child/comment",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentPageScheme,
        )
