"""Custom content created by Connect and Forge apps (REST v2)."""

from atlassian_rest.confluence.service import CONFLUENCE_API_V2, ConfluenceService
from atlassian_rest.confluence.v2.models import (
    CustomContentOptionsScheme,
    CustomContentPageScheme,
    CustomContentPayloadScheme,
    CustomContentScheme,
)
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class CustomContentService(ConfluenceService):
    """Endpoints under ``/wiki/api/v2/custom-content``."""

    def gets(
        self,
        type: str,
        options: CustomContentOptionsScheme | None = None,
        cursor: str = "",
        limit: int = 25,
    ) -> tuple[CustomContentPageScheme, ResponseScheme]:
        """Return the custom content of one type.

        GET /wiki/api/v2/custom-content

        ``type`` is always sent as a query parameter; the endpoint rejects
        listings without it.

        Args:
            type: Custom content type, as declared by the app module
            options: ID, space, sort and body format filters
            cursor: Cursor from a previous chunk
            limit: Maximum number of items
        """
        query = Query().add("type", type).add("limit", limit).add_if("cursor", cursor)
        if options is not None:
            query.add_joined("id", options.ids)
            query.add_joined("space-id", options.space_ids)
            query.add_if("sort", options.sort)
            query.add_if("body-format", options.body_format)

        return self._call(
            "get_custom_contents",
            "GET",
            f"{CONFLUENCE_API_V2}/custom-content",
            required=[(type, MissingField.CUSTOM_CONTENT_TYPE)],
            query=query,
            result=CustomContentPageScheme,
        )

    def create(
        self, payload: CustomContentPayloadScheme | dict
    ) -> tuple[CustomContentScheme, ResponseScheme]:
        """POST /wiki/api/v2/custom-content"""
        return self._call(
            "create_custom_content",
            "POST",
            f"{CONFLUENCE_API_V2}/custom-content",
            body=payload,
            result=CustomContentScheme,
        )

    def get(
        self, custom_content_id: int, format: str = "", version: int = 0
    ) -> tuple[CustomContentScheme, ResponseScheme]:
        """GET /wiki/api/v2/custom-content/{id}"""
        query = Query().add_if("body-format", format).add_if("version", version)
        return self._call(
            "get_custom_content",
            "GET",
            f"{CONFLUENCE_API_V2}/custom-content/{custom_content_id}",
            required=[(custom_content_id, MissingField.CUSTOM_CONTENT_ID)],
            query=query,
            result=CustomContentScheme,
        )

    def update(
        self, custom_content_id: int, payload: CustomContentPayloadScheme | dict
    ) -> tuple[CustomContentScheme, ResponseScheme]:
        """PUT /wiki/api/v2/custom-content/{id}"""
        return self._call(
            "update_custom_content",
            "PUT",
            f"{CONFLUENCE_API_V2}/custom-content/{custom_content_id}",
            required=[(custom_content_id, MissingField.CUSTOM_CONTENT_ID)],
            body=payload,
            result=CustomContentScheme,
        )

    def delete(self, custom_content_id: int) -> ResponseScheme:
        """DELETE /wiki/api/v2/custom-content/{id}"""
        return self._send(
            "delete_custom_content",
            "DELETE",
            f"{CONFLUENCE_API_V2}/custom-content/{custom_content_id}",
            required=[(custom_content_id, MissingField.CUSTOM_CONTENT_ID)],
        )
