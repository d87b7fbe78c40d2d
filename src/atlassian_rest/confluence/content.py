"""Confluence content: pages, blog posts and the resources nested under them.

Example:
    from atlassian_rest.confluence import ConfluenceClient

    with ConfluenceClient() as confluence:
        page, response = confluence.content.get("11727271", expand=["body.storage"])
        labels, _ = confluence.content.label.gets("11727271", start=0, limit=50)
"""

import logging

from atlassian_rest.confluence.attachment import ContentAttachmentService
from atlassian_rest.confluence.children import ChildrenDescendantService
from atlassian_rest.confluence.comment import CommentService
from atlassian_rest.confluence.label import LabelService
from atlassian_rest.confluence.models import (
    ContentArchivePayloadScheme,
    ContentArchiveResultScheme,
    ContentHistoryScheme,
    ContentPageScheme,
    ContentScheme,
    GetContentOptionsScheme,
)
from atlassian_rest.confluence.permission import ContentPermissionService
from atlassian_rest.confluence.property import PropertyService
from atlassian_rest.confluence.restriction import RestrictionService
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.confluence.version import VersionService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.core.tracing import Tracer

logger = logging.getLogger(__name__)


class ContentService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content``.

    Attributes:
        attachment: Attachments of a content
        children_descendant: Child and descendant navigation, copy and move
        comment: Comments of a content
        permission: Permission checks
        label: Labels of a content
        property: Content properties
        restriction: Read and update restrictions
        version: Version history
    """

    def __init__(
        self,
        connector: Connector,
        attachment: ContentAttachmentService | None = None,
        children_descendant: ChildrenDescendantService | None = None,
        comment: CommentService | None = None,
        permission: ContentPermissionService | None = None,
        label: LabelService | None = None,
        property: PropertyService | None = None,
        restriction: RestrictionService | None = None,
        version: VersionService | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(connector, tracer)
        self.attachment = attachment
        self.children_descendant = children_descendant
        self.comment = comment
        self.permission = permission
        self.label = label
        self.property = property
        self.restriction = restriction
        self.version = version

    def gets(
        self,
        options: GetContentOptionsScheme | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Return all content in a Confluence instance.

        GET /wiki/rest/api/content

        Args:
            options: Type, space, title, trigger, ordering, posting day,
                status and expand filters
            start: Index of the first item
            limit: Maximum number of items

        Returns:
            Tuple of (content page, response)
        """
        query = Query().add("start", start).add("limit", limit)
        if options is not None:
            query.add_if("type", options.context_type)
            query.add_if("spaceKey", options.space_key)
            query.add_if("title", options.title)
            query.add_if("trigger", options.trigger)
            query.add_if("orderby", options.order_by)
            if options.posting_day is not None:
                query.add("postingDay", options.posting_day.strftime("%Y-%m-%d"))
            query.add_joined("status", options.status)
            query.add_joined("expand", options.expand)

        return self._call(
            "get_contents",
            "GET",
            f"{CONFLUENCE_API_V1}/content",
            query=query,
            result=ContentPageScheme,
        )

    def create(self, payload: ContentScheme | dict) -> tuple[ContentScheme, ResponseScheme]:
        """Create a page, blog post or comment.

        POST /wiki/rest/api/content
        """
        return self._call(
            "create_content",
            "POST",
            f"{CONFLUENCE_API_V1}/content",
            body=payload,
            result=ContentScheme,
        )

    def search(
        self,
        cql: str,
        cql_context: str = "",
        expand: list[str] | None = None,
        cursor: str = "",
        limit: int = 25,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Return the content that matches a CQL query.

        GET /wiki/rest/api/content/search

        Args:
            cql: CQL query
            cql_context: Context to execute the query in (space key, content id)
            expand: Properties to expand
            cursor: Cursor from a previous page
            limit: Maximum number of items

        Raises:
            ValidationError: If ``cql`` is empty
        """
        query = (
            Query()
            .add("limit", limit)
            .add("cql", cql)
            .add_if("cursor", cursor)
            .add_if("cqlcontext", cql_context)
            .add_joined("expand", expand)
        )
        return self._call(
            "search_contents",
            "GET",
            f"{CONFLUENCE_API_V1}/content/search",
            required=[(cql, MissingField.CQL)],
            query=query,
            result=ContentPageScheme,
        )

    def get(
        self,
        content_id: str,
        expand: list[str] | None = None,
        version: int = 0,
    ) -> tuple[ContentScheme, ResponseScheme]:
        """Return a single piece of content.

        GET /wiki/rest/api/content/{id}

        Args:
            content_id: Content ID
            expand: Properties to expand
            version: Version to return. 0 means the current version.
        """
        query = Query().add_if("version", version).add_joined("expand", expand)
        return self._call(
            "get_content",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentScheme,
        )

    def update(
        self, content_id: str, payload: ContentScheme | dict
    ) -> tuple[ContentScheme, ResponseScheme]:
        """Update a piece of content. The payload must carry the next version number.

        PUT /wiki/rest/api/content/{id}
        """
        return self._call(
            "update_content",
            "PUT",
            f"{CONFLUENCE_API_V1}/content/{content_id}",
            required=[(content_id, MissingField.CONTENT_ID)],
            body=payload,
            result=ContentScheme,
        )

    def delete(self, content_id: str, status: str = "") -> ResponseScheme:
        """Move a piece of content to the trash, or purge it.

        DELETE /wiki/rest/api/content/{id}

        Args:
            content_id: Content ID
            status: ``trashed`` to purge content that is already in the trash
        """
        return self._send(
            "delete_content",
            "DELETE",
            f"{CONFLUENCE_API_V1}/content/{content_id}",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_if("status", status),
        )

    def history(
        self, content_id: str, expand: list[str] | None = None
    ) -> tuple[ContentHistoryScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/history"""
        return self._call(
            "get_content_history",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/history",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            result=ContentHistoryScheme,
        )

    def archive(
        self, payload: ContentArchivePayloadScheme | dict
    ) -> tuple[ContentArchiveResultScheme, ResponseScheme]:
        """Archive a list of pages. Archiving runs as a long task on the server.

        POST /wiki/rest/api/content/archive
        """
        return self._call(
            "archive_content",
            "POST",
            f"{CONFLUENCE_API_V1}/content/archive",
            body=payload,
            result=ContentArchiveResultScheme,
        )
