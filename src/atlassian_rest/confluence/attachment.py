"""Attachments of a Confluence content (REST v1)."""

import logging
from typing import IO, Any

from urllib3 import encode_multipart_formdata

from atlassian_rest.confluence.models import (
    ContentPageScheme,
    GetContentAttachmentsOptionsScheme,
)
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query

logger = logging.getLogger(__name__)


def _multipart(file_name: str, file: IO[bytes] | bytes) -> tuple[bytes, str]:
    """Encode a file as the ``file`` field of a multipart form."""
    data: Any = file.read() if hasattr(file, "read") else file
    return encode_multipart_formdata(
        [
            ("file", (file_name, data)),
            ("minorEdit", "true"),
        ]
    )


class ContentAttachmentService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content/{id}/child/attachment``."""

    def gets(
        self,
        content_id: str,
        start: int = 0,
        limit: int = 25,
        options: GetContentAttachmentsOptionsScheme | None = None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Return the attachments of a content.

        GET /wiki/rest/api/content/{id}/child/attachment

        Args:
            content_id: Content ID
            start: Index of the first item
            limit: Maximum number of items
            options: Expand, file name and media type filters
        """
        query = Query().add("start", start).add("limit", limit)
        if options is not None:
            query.add_joined("expand", options.expand)
            query.add_if("filename", options.filename)
            query.add_if("mediaType", options.media_type)

        return self._call(
            "get_content_attachments",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/child/attachment",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentPageScheme,
        )

    def create_or_update(
        self,
        attachment_id: str,
        status: str,
        file_name: str,
        file: IO[bytes] | bytes | None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Upload a file, replacing an attachment with the same name.

        PUT /wiki/rest/api/content/{id}/child/attachment

        Args:
            attachment_id: ID of the content the file is attached to
            status: Status of the content, usually ``current`` or ``draft``
            file_name: Name given to the attachment
            file: Binary file object or raw bytes
        """
        return self._upload("create_or_update_attachment", "PUT", attachment_id, status, file_name, file)

    def create(
        self,
        attachment_id: str,
        status: str,
        file_name: str,
        file: IO[bytes] | bytes | None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Upload a file as a new attachment.

        POST /wiki/rest/api/content/{id}/child/attachment

        The server rejects the upload when an attachment with the same name
        already exists; use ``create_or_update`` to replace it instead.
        """
        return self._upload("create_attachment", "POST", attachment_id, status, file_name, file)

    def download(self, content_id: str, attachment_id: str) -> ResponseScheme:
        """Download an attachment. The file content is in ``response.body``.

        GET /wiki/rest/api/content/{id}/child/attachment/{attachmentId}/download
        """
        return self._send(
            "download_attachment",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/child/attachment/{attachment_id}/download",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (attachment_id, MissingField.ATTACHMENT_ID),
            ],
        )

    def _upload(
        self,
        operation: str,
        method: str,
        attachment_id: str,
        status: str,
        file_name: str,
        file: IO[bytes] | bytes | None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        path = f"{CONFLUENCE_API_V1}/content/{attachment_id}/child/attachment"
        body, content_type = None, ""
        if file is not None:
            body, content_type = _multipart(file_name, file)
            logger.debug("Uploading %s (%d bytes) to %s", file_name, len(body), path)

        return self._call(
            operation,
            method,
            path,
            required=[
                (attachment_id, MissingField.ATTACHMENT_ID),
                (file_name, MissingField.ATTACHMENT_NAME),
                (file, MissingField.READER),
            ],
            query=Query().add_if("status", status),
            body=body,
            content_type=content_type,
            result=ContentPageScheme,
        )
