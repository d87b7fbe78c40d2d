"""Descendants of content trees (REST v2).

Pages, whiteboards, databases, smart-link embeds and folders can all hold
children. Each ``for_*`` method lists the descendants of one container
down to ``depth`` levels.
"""

from atlassian_rest.confluence.service import CONFLUENCE_API_V2, ConfluenceService
from atlassian_rest.confluence.v2.models import DescendantChunkScheme
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class DescendantsService(ConfluenceService):
    """Endpoints under ``/wiki/api/v2/{container}/{id}/descendants``."""

    def for_page(
        self, page_id: int, limit: int = 25, depth: int = 5, cursor: str = ""
    ) -> tuple[DescendantChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/pages/{id}/descendants"""
        return self._descendants("pages", page_id, MissingField.PAGE_ID, limit, depth, cursor)

    def for_whiteboard(
        self, whiteboard_id: int, limit: int = 25, depth: int = 5, cursor: str = ""
    ) -> tuple[DescendantChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/whiteboards/{id}/descendants"""
        return self._descendants(
            "whiteboards", whiteboard_id, MissingField.WHITEBOARD_ID, limit, depth, cursor
        )

    def for_database(
        self, database_id: int, limit: int = 25, depth: int = 5, cursor: str = ""
    ) -> tuple[DescendantChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/databases/{id}/descendants"""
        return self._descendants("databases", database_id, MissingField.DATABASE_ID, limit, depth, cursor)

    def for_embed(
        self, embed_id: int, limit: int = 25, depth: int = 5, cursor: str = ""
    ) -> tuple[DescendantChunkScheme, ResponseScheme]:
        """Descendants of a smart-link embed.

        GET /wiki/api/v2/embeds/{id}/descendants
        """
        return self._descendants("embeds", embed_id, MissingField.EMBED_ID, limit, depth, cursor)

    def for_folder(
        self, folder_id: int, limit: int = 25, depth: int = 5, cursor: str = ""
    ) -> tuple[DescendantChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/folders/{id}/descendants"""
        return self._descendants("folders", folder_id, MissingField.FOLDER_ID, limit, depth, cursor)

    def _descendants(
        self,
        container: str,
        container_id: int,
        missing: MissingField,
        limit: int,
        depth: int,
        cursor: str,
    ) -> tuple[DescendantChunkScheme, ResponseScheme]:
        query = Query().add("limit", limit).add("depth", depth).add_if("cursor", cursor)
        return self._call(
            f"get_{container}_descendants",
            "GET",
            f"{CONFLUENCE_API_V2}/{container}/{container_id}/descendants",
            required=[(container_id, missing)],
            query=query,
            result=DescendantChunkScheme,
        )
