"""Properties of a Confluence content (REST v1).

Content properties are JSON values stored against a content under a key,
typically used by apps to keep their own metadata.
"""

from atlassian_rest.confluence.models import (
    ContentPropertyPageScheme,
    ContentPropertyPayloadScheme,
    ContentPropertyScheme,
)
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class PropertyService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content/{id}/property``."""

    def gets(
        self,
        content_id: str,
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentPropertyPageScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/property"""
        query = Query().add("start", start).add("limit", limit).add_joined("expand", expand)
        return self._call(
            "get_content_properties",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/property",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentPropertyPageScheme,
        )

    def create(
        self, content_id: str, payload: ContentPropertyPayloadScheme | dict
    ) -> tuple[ContentPropertyScheme, ResponseScheme]:
        """POST /wiki/rest/api/content/{id}/property"""
        return self._call(
            "create_content_property",
            "POST",
            f"{CONFLUENCE_API_V1}/content/{content_id}/property",
            required=[(content_id, MissingField.CONTENT_ID)],
            body=payload,
            result=ContentPropertyScheme,
        )

    def get(self, content_id: str, key: str) -> tuple[ContentPropertyScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/property/{key}"""
        return self._call(
            "get_content_property",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/property/{key}",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (key, MissingField.CONTENT_PROPERTY),
            ],
            result=ContentPropertyScheme,
        )

    def delete(self, content_id: str, key: str) -> ResponseScheme:
        """DELETE /wiki/rest/api/content/{id}/property/{key}"""
        return self._send(
            "delete_content_property",
            "DELETE",
            f"{CONFLUENCE_API_V1}/content/{content_id}/property/{key}",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (key, MissingField.CONTENT_PROPERTY),
            ],
        )
