"""Confluence spaces (REST v2)."""

from atlassian_rest.confluence.service import CONFLUENCE_API_V2, ConfluenceService
from atlassian_rest.confluence.v2.models import (
    GetSpacesOptionSchemeV2,
    SpaceChunkScheme,
    SpacePermissionPageScheme,
    SpaceScheme,
)
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class SpaceService(ConfluenceService):
    """Endpoints under ``/wiki/api/v2/spaces``."""

    def bulk(
        self,
        options: GetSpacesOptionSchemeV2 | None = None,
        cursor: str = "",
        limit: int = 25,
    ) -> tuple[SpaceChunkScheme, ResponseScheme]:
        """Return the spaces visible to the user.

        GET /wiki/api/v2/spaces

        Args:
            options: ID, key, type, status and label filters
            cursor: Cursor from a previous chunk
            limit: Maximum number of items
        """
        query = Query().add("limit", limit).add_if("cursor", cursor)
        if options is not None:
            query.add_joined("ids", options.ids)
            query.add_joined("keys", options.keys)
            query.add_if("type", options.type)
            query.add_if("status", options.status)
            query.add_joined("labels", options.labels)
            query.add_if("sort", options.sort)
            query.add_if("description-format", options.description_format)
            query.add_flag("serialize-ids-as-strings", options.serialize_ids_as_strings)

        return self._call(
            "get_spaces_v2",
            "GET",
            f"{CONFLUENCE_API_V2}/spaces",
            query=query,
            result=SpaceChunkScheme,
        )

    def get(self, space_id: int, description_format: str = "") -> tuple[SpaceScheme, ResponseScheme]:
        """GET /wiki/api/v2/spaces/{id}"""
        return self._call(
            "get_space_v2",
            "GET",
            f"{CONFLUENCE_API_V2}/spaces/{space_id}",
            required=[(space_id, MissingField.SPACE_ID)],
            query=Query().add_if("description-format", description_format),
            result=SpaceScheme,
        )

    def permissions(
        self, space_id: int, cursor: str = "", limit: int = 25
    ) -> tuple[SpacePermissionPageScheme, ResponseScheme]:
        """Return the permission assignments of a space.

        GET /wiki/api/v2/spaces/{id}/permissions
        """
        return self._call(
            "get_space_permissions_v2",
            "GET",
            f"{CONFLUENCE_API_V2}/spaces/{space_id}/permissions",
            required=[(space_id, MissingField.SPACE_ID)],
            query=Query().add("limit", limit).add_if("cursor", cursor),
            result=SpacePermissionPageScheme,
        )
