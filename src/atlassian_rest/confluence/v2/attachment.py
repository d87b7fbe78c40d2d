"""Confluence attachments (REST v2)."""

from atlassian_rest.confluence.service import CONFLUENCE_API_V2, ConfluenceService
from atlassian_rest.confluence.v2.models import (
    AttachmentPageScheme,
    AttachmentParamsScheme,
    AttachmentScheme,
)
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query, require_choice

ATTACHMENT_ENTITY_TYPES = frozenset({"blogposts", "custom-content", "labels", "pages"})


class AttachmentService(ConfluenceService):
    """Endpoints under ``/wiki/api/v2/attachments`` and the entity listings."""

    def get(
        self,
        attachment_id: str,
        version: int = 0,
        serialize_ids: bool = False,
    ) -> tuple[AttachmentScheme, ResponseScheme]:
        """Return an attachment.

        GET /wiki/api/v2/attachments/{id}

        Args:
            attachment_id: Attachment ID, e.g. ``att123``
            version: Version to return. 0 means the current version.
            serialize_ids: Return numeric IDs as strings
        """
        query = Query().add_if("version", version).add_flag("serialize-ids-as-strings", serialize_ids)
        return self._call(
            "get_attachment",
            "GET",
            f"{CONFLUENCE_API_V2}/attachments/{attachment_id}",
            required=[(attachment_id, MissingField.ATTACHMENT_ID)],
            query=query,
            result=AttachmentScheme,
        )

    def gets(
        self,
        entity_id: int,
        entity_type: str,
        options: AttachmentParamsScheme | None = None,
        cursor: str = "",
        limit: int = 25,
    ) -> tuple[AttachmentPageScheme, ResponseScheme]:
        """Return the attachments of a page, blog post, custom content or label.

        GET /wiki/api/v2/{entityType}/{id}/attachments

        Args:
            entity_id: ID of the entity
            entity_type: One of ``blogposts``, ``custom-content``, ``labels``, ``pages``
            options: Sort, media type and file name filters
            cursor: Cursor from a previous chunk
            limit: Maximum number of items

        Raises:
            ValidationError: If the ID is missing or the entity type is unknown
        """
        query = Query().add("limit", limit).add_if("cursor", cursor)
        if options is not None:
            query.add_if("sort", options.sort)
            query.add_if("mediaType", options.media_type)
            query.add_if("filename", options.file_name)
            query.add_flag("serialize-ids-as-strings", options.serialize_ids_as_strings)

        return self._call(
            "get_entity_attachments",
            "GET",
            f"{CONFLUENCE_API_V2}/{entity_type}/{entity_id}/attachments",
            required=[
                (entity_id, MissingField.ENTITY_ID),
                (entity_type, MissingField.ENTITY_TYPE),
            ],
            validate=lambda: require_choice(
                self.provider_name, entity_type, ATTACHMENT_ENTITY_TYPES, MissingField.ENTITY_TYPE
            ),
            query=query,
            result=AttachmentPageScheme,
        )

    def delete(self, attachment_id: str) -> ResponseScheme:
        """Move an attachment to the trash.

        DELETE /wiki/api/v2/attachments/{id}
        """
        return self._send(
            "delete_attachment",
            "DELETE",
            f"{CONFLUENCE_API_V2}/attachments/{attachment_id}",
            required=[(attachment_id, MissingField.ATTACHMENT_ID)],
        )
