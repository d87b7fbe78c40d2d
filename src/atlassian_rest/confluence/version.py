"""Version history of a Confluence content (REST v1)."""

from atlassian_rest.confluence.models import (
    ContentRestorePayloadScheme,
    ContentVersionPageScheme,
    ContentVersionScheme,
)
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class VersionService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content/{id}/version``.

    Version numbers are path segments here, so version ``0`` is a valid
    argument and is sent as-is.
    """

    def gets(
        self,
        content_id: str,
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentVersionPageScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/version"""
        query = Query().add("start", start).add("limit", limit).add_joined("expand", expand)
        return self._call(
            "get_content_versions",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/version",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentVersionPageScheme,
        )

    def get(
        self,
        content_id: str,
        version_number: int,
        expand: list[str] | None = None,
    ) -> tuple[ContentVersionScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/version/{versionNumber}"""
        return self._call(
            "get_content_version",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/version/{version_number}",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            result=ContentVersionScheme,
        )

    def restore(
        self,
        content_id: str,
        payload: ContentRestorePayloadScheme | dict,
        expand: list[str] | None = None,
    ) -> tuple[ContentVersionScheme, ResponseScheme]:
        """Restore a historical version as the new current version.

        POST /wiki/rest/api/content/{id}/version
        """
        return self._call(
            "restore_content_version",
            "POST",
            f"{CONFLUENCE_API_V1}/content/{content_id}/version",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            body=payload,
            result=ContentVersionScheme,
        )

    def delete(self, content_id: str, version_number: int) -> ResponseScheme:
        """DELETE /wiki/rest/api/content/{id}/version/{versionNumber}"""
        return self._send(
            "delete_content_version",
            "DELETE",
            f"{CONFLUENCE_API_V1}/content/{content_id}/version/{version_number}",
            required=[(content_id, MissingField.CONTENT_ID)],
        )
