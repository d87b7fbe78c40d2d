"""Confluence pages (REST v2)."""

from atlassian_rest.confluence.service import CONFLUENCE_API_V2, ConfluenceService
from atlassian_rest.confluence.v2.models import (
    ChildPageChunkScheme,
    PageChunkScheme,
    PageCreatePayloadScheme,
    PageScheme,
    PageUpdatePayloadScheme,
)
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class PageService(ConfluenceService):
    """Endpoints under ``/wiki/api/v2/pages``."""

    def get(
        self,
        page_id: int,
        format: str = "",
        draft: bool = False,
        version: int = 0,
    ) -> tuple[PageScheme, ResponseScheme]:
        """Return a page.

        GET /wiki/api/v2/pages/{id}

        Args:
            page_id: Page ID
            format: Body representation to include (storage, atlas_doc_format)
            draft: Return the current draft instead of the published page
            version: Version to return. 0 means the current version.

        Returns:
            Tuple of (page, response)

        Raises:
            ValidationError: If ``page_id`` is 0
        """
        query = (
            Query()
            .add_if("body-format", format)
            .add_flag("get-draft", draft)
            .add_if("version", version)
        )
        return self._call(
            "get_page",
            "GET",
            f"{CONFLUENCE_API_V2}/pages/{page_id}",
            required=[(page_id, MissingField.PAGE_ID)],
            query=query,
            result=PageScheme,
        )

    def bulk(self, cursor: str = "", limit: int = 25) -> tuple[PageChunkScheme, ResponseScheme]:
        """Return every page the user can see. Same as an unfiltered ``bulk_filtered``."""
        return self.bulk_filtered(cursor=cursor, limit=limit)

    def bulk_filtered(
        self,
        status: str = "",
        format: str = "",
        cursor: str = "",
        limit: int = 25,
        page_ids: list[int] | None = None,
    ) -> tuple[PageChunkScheme, ResponseScheme]:
        """Return pages filtered by status and ID.

        GET /wiki/api/v2/pages
        """
        query = (
            Query()
            .add("limit", limit)
            .add_if("status", status)
            .add_if("body-format", format)
            .add_if("cursor", cursor)
            .add_joined("id", page_ids)
        )
        return self._call(
            "get_pages",
            "GET",
            f"{CONFLUENCE_API_V2}/pages",
            query=query,
            result=PageChunkScheme,
        )

    def gets_by_label(
        self,
        label_id: int,
        sort: str = "",
        cursor: str = "",
        limit: int = 25,
    ) -> tuple[PageChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/labels/{id}/pages"""
        query = Query().add("limit", limit).add_if("cursor", cursor).add_if("sort", sort)
        return self._call(
            "get_pages_by_label",
            "GET",
            f"{CONFLUENCE_API_V2}/labels/{label_id}/pages",
            required=[(label_id, MissingField.LABEL_ID)],
            query=query,
            result=PageChunkScheme,
        )

    def gets_by_space(
        self, space_id: int, cursor: str = "", limit: int = 25
    ) -> tuple[PageChunkScheme, ResponseScheme]:
        """GET /wiki/api/v2/spaces/{id}/pages"""
        return self._call(
            "get_pages_by_space",
            "GET",
            f"{CONFLUENCE_API_V2}/spaces/{space_id}/pages",
            required=[(space_id, MissingField.SPACE_ID)],
            query=Query().add("limit", limit).add_if("cursor", cursor),
            result=PageChunkScheme,
        )

    def gets_by_parent(
        self, parent_id: int, cursor: str = "", limit: int = 25
    ) -> tuple[ChildPageChunkScheme, ResponseScheme]:
        """Return the direct children of a page.

        GET /wiki/api/v2/pages/{id}/children
        """
        return self._call(
            "get_child_pages",
            "GET",
            f"{CONFLUENCE_API_V2}/pages/{parent_id}/children",
            required=[(parent_id, MissingField.PAGE_ID)],
            query=Query().add("limit", limit).add_if("cursor", cursor),
            result=ChildPageChunkScheme,
        )

    def create(self, payload: PageCreatePayloadScheme | dict) -> tuple[PageScheme, ResponseScheme]:
        """POST /wiki/api/v2/pages"""
        return self._call(
            "create_page",
            "POST",
            f"{CONFLUENCE_API_V2}/pages",
            body=payload,
            result=PageScheme,
        )

    def update(
        self, page_id: int, payload: PageUpdatePayloadScheme | dict
    ) -> tuple[PageScheme, ResponseScheme]:
        """Update a page. The payload must carry the next version number.

        PUT /wiki/api/v2/pages/{id}
        """
        return self._call(
            "update_page",
            "PUT",
            f"{CONFLUENCE_API_V2}/pages/{page_id}",
            required=[(page_id, MissingField.PAGE_ID)],
            body=payload,
            result=PageScheme,
        )

    def delete(self, page_id: int) -> ResponseScheme:
        """DELETE /wiki/api/v2/pages/{id}"""
        return self._send(
            "delete_page",
            "DELETE",
            f"{CONFLUENCE_API_V2}/pages/{page_id}",
            required=[(page_id, MissingField.PAGE_ID)],
        )
