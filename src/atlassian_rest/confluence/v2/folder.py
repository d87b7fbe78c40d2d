"""Confluence folders (REST v2)."""

from atlassian_rest.confluence.service import CONFLUENCE_API_V2, ConfluenceService
from atlassian_rest.confluence.v2.models import (
    FolderChunkScheme,
    FolderCreatePayloadScheme,
    FolderOptionsScheme,
    FolderScheme,
    FolderUpdatePayloadScheme,
)
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class FolderService(ConfluenceService):
    """Endpoints under ``/wiki/api/v2/folders``."""

    def gets(
        self,
        options: FolderOptionsScheme | None = None,
        cursor: str = "",
        limit: int = 25,
    ) -> tuple[FolderChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/folders"""
        query = Query().add("limit", limit).add_if("cursor", cursor)
        if options is not None:
            query.add_if("sort", options.sort)
            query.add_if("parent-id", options.parent_id)
            query.add_joined("space-id", options.space_ids)

        return self._call(
            "get_folders",
            "GET",
            f"{CONFLUENCE_API_V2}/folders",
            query=query,
            result=FolderChunkScheme,
        )

    def get(self, folder_id: str) -> tuple[FolderScheme, ResponseScheme]:
        """GET /wiki/api/v2/folders/{id}"""
        return self._call(
            "get_folder",
            "GET",
            f"{CONFLUENCE_API_V2}/folders/{folder_id}",
            required=[(folder_id, MissingField.FOLDER_ID)],
            result=FolderScheme,
        )

    def gets_by_space(
        self, space_id: int, cursor: str = "", limit: int = 25
    ) -> tuple[FolderChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/spaces/{id}/folders"""
        return self._call(
            "get_folders_by_space",
            "GET",
            f"{CONFLUENCE_API_V2}/spaces/{space_id}/folders",
            required=[(space_id, MissingField.SPACE_ID)],
            query=Query().add("limit", limit).add_if("cursor", cursor),
            result=FolderChunkScheme,
        )

    def gets_by_parent(
        self, parent_id: str, cursor: str = "", limit: int = 25
    ) -> tuple[FolderChunkScheme, ResponseScheme]:
        """Return the direct child folders of a folder.

        GET /wiki/api/v2/folders/{id}/children
        """
        return self._call(
            "get_child_folders",
            "GET",
            f"{CONFLUENCE_API_V2}/folders/{parent_id}/children",
            required=[(parent_id, MissingField.FOLDER_ID)],
            query=Query().add("limit", limit).add_if("cursor", cursor),
            result=FolderChunkScheme,
        )

    def create(self, payload: FolderCreatePayloadScheme | dict) -> tuple[FolderScheme, ResponseScheme]:
        """POST /wiki/api/v2/folders"""
        return self._call(
            "create_folder",
            "POST",
            f"{CONFLUENCE_API_V2}/folders",
            body=payload,
            result=FolderScheme,
        )

    def update(
        self, folder_id: str, payload: FolderUpdatePayloadScheme | dict
    ) -> tuple[FolderScheme, ResponseScheme]:
        """PUT /wiki/api/v2/folders/{id}"""
        return self._call(
            "update_folder",
            "PUT",
            f"{CONFLUENCE_API_V2}/folders/{folder_id}",
            required=[(folder_id, MissingField.FOLDER_ID)],
            body=payload,
            result=FolderScheme,
        )

    def delete(self, folder_id: str) -> ResponseScheme:
        """DELETE /wiki/api/v2/folders/{id}"""
        return self._send(
            "delete_folder",
            "DELETE",
            f"{CONFLUENCE_API_V2}/folders/{folder_id}",
            required=[(folder_id, MissingField.FOLDER_ID)],
        )
