"""Confluence spaces (REST v1).

Spaces are addressed by key in this API version. The v2 API under
``atlassian_rest.confluence.v2`` addresses them by numeric ID.
"""

import logging

from atlassian_rest.confluence.models import (
    ContentChildrenScheme,
    ContentPageScheme,
    CreateSpaceScheme,
    GetSpacesOptionScheme,
    SpacePageScheme,
    SpacePermissionArrayPayloadScheme,
    SpacePermissionPayloadScheme,
    SpacePermissionV2Scheme,
    SpaceScheme,
    TaskScheme,
    UpdateSpaceScheme,
)
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query, require
from atlassian_rest.core.tracing import Tracer

logger = logging.getLogger(__name__)


class SpacePermissionService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/space/{key}/permission``."""

    def add(
        self, space_key: str, payload: SpacePermissionPayloadScheme | dict
    ) -> tuple[SpacePermissionV2Scheme, ResponseScheme]:
        """Grant one permission to a user or group.

        POST /wiki/rest/api/space/{spaceKey}/permission
        """
        return self._call(
            "add_space_permission",
            "POST",
            f"{CONFLUENCE_API_V1}/space/{space_key}/permission",
            required=[(space_key, MissingField.SPACE_KEY)],
            body=payload,
            result=SpacePermissionV2Scheme,
        )

    def bulk(self, space_key: str, payload: SpacePermissionArrayPayloadScheme | dict) -> ResponseScheme:
        """Grant several custom-content permissions to one subject.

        POST /wiki/rest/api/space/{spaceKey}/permission/custom-content
        """
        return self._send(
            "add_space_permissions",
            "POST",
            f"{CONFLUENCE_API_V1}/space/{space_key}/permission/custom-content",
            required=[(space_key, MissingField.SPACE_KEY)],
            body=payload,
        )

    def remove(self, space_key: str, permission_id: int) -> ResponseScheme:
        """DELETE /wiki/rest/api/space/{spaceKey}/permission/{id}"""
        return self._send(
            "remove_space_permission",
            "DELETE",
            f"{CONFLUENCE_API_V1}/space/{space_key}/permission/{permission_id}",
            required=[(space_key, MissingField.SPACE_KEY)],
        )


class SpaceService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/space``.

    Attributes:
        permission: Space permissions
    """

    def __init__(
        self,
        connector: Connector,
        permission: SpacePermissionService | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(connector, tracer)
        self.permission = permission

    def gets(
        self,
        options: GetSpacesOptionScheme | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[SpacePageScheme, ResponseScheme]:
        """Return the spaces visible to the user.

        GET /wiki/rest/api/space

        Args:
            options: Key, ID, type, status, label and favourite filters.
                Keys and IDs are sent as repeated parameters.
            start: Index of the first item
            limit: Maximum number of items
        """
        query = Query().add("start", start).add("limit", limit)
        if options is not None:
            query.add_each("spaceKey", options.space_keys)
            query.add_each("spaceID", options.space_ids)
            query.add_if("type", options.space_type)
            query.add_if("status", options.status)
            query.add_joined("label", options.labels)
            query.add_flag("favorite", options.favourite)
            query.add_if("favouriteUserKey", options.favourite_user_key)
            query.add_joined("expand", options.expand)

        return self._call(
            "get_spaces",
            "GET",
            f"{CONFLUENCE_API_V1}/space",
            query=query,
            result=SpacePageScheme,
        )

    def create(
        self, payload: CreateSpaceScheme | dict | None, private: bool = False
    ) -> tuple[SpaceScheme, ResponseScheme]:
        """Create a space.

        POST /wiki/rest/api/space
        POST /wiki/rest/api/space/_private

        Args:
            payload: Space name, key and description
            private: Create a space visible only to its creator

        Raises:
            ValidationError: If the payload has no name or no key
        """
        path = f"{CONFLUENCE_API_V1}/space"
        if private:
            path = f"{path}/_private"

        return self._call(
            "create_space",
            "POST",
            path,
            validate=lambda: self._check_payload(payload),
            body=payload,
            result=SpaceScheme,
        )

    def _check_payload(self, payload: CreateSpaceScheme | dict | None) -> None:
        if payload is None:
            return
        fields = payload if isinstance(payload, dict) else payload.model_dump()
        require(
            self.provider_name,
            (fields.get("name"), MissingField.SPACE_NAME),
            (fields.get("key"), MissingField.SPACE_KEY),
        )

    def get(self, space_key: str, expand: list[str] | None = None) -> tuple[SpaceScheme, ResponseScheme]:
        """GET /wiki/rest/api/space/{spaceKey}"""
        return self._call(
            "get_space",
            "GET",
            f"{CONFLUENCE_API_V1}/space/{space_key}",
            required=[(space_key, MissingField.SPACE_KEY)],
            query=Query().add_joined("expand", expand),
            result=SpaceScheme,
        )

    def update(
        self, space_key: str, payload: UpdateSpaceScheme | dict
    ) -> tuple[SpaceScheme, ResponseScheme]:
        """PUT /wiki/rest/api/space/{spaceKey}"""
        return self._call(
            "update_space",
            "PUT",
            f"{CONFLUENCE_API_V1}/space/{space_key}",
            required=[(space_key, MissingField.SPACE_KEY)],
            body=payload,
            result=SpaceScheme,
        )

    def delete(self, space_key: str) -> tuple[TaskScheme, ResponseScheme]:
        """Delete a space. The deletion runs as a long task on the server.

        DELETE /wiki/rest/api/space/{spaceKey}
        """
        logger.info("Deleting Confluence space %s", space_key)
        return self._call(
            "delete_space",
            "DELETE",
            f"{CONFLUENCE_API_V1}/space/{space_key}",
            required=[(space_key, MissingField.SPACE_KEY)],
            result=TaskScheme,
        )

    def content(
        self,
        space_key: str,
        depth: str = "",
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentChildrenScheme, ResponseScheme]:
        """Return the content of a space grouped by type.

        GET /wiki/rest/api/space/{spaceKey}/content

        Args:
            space_key: Space key
            depth: ``all`` for every page or ``root`` for top-level pages only
            expand: Properties to expand
            start: Index of the first item
            limit: Maximum number of items
        """
        return self._call(
            "get_space_content",
            "GET",
            f"{CONFLUENCE_API_V1}/space/{space_key}/content",
            required=[(space_key, MissingField.SPACE_KEY)],
            query=self._content_query(depth, expand, start, limit),
            result=ContentChildrenScheme,
        )

    def content_by_type(
        self,
        space_key: str,
        content_type: str,
        depth: str = "",
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """GET /wiki/rest/api/space/{spaceKey}/content/{type}"""
        return self._call(
            "get_space_content_by_type",
            "GET",
            f"{CONFLUENCE_API_V1}/space/{space_key}/content/{content_type}",
            required=[
                (space_key, MissingField.SPACE_KEY),
                (content_type, MissingField.CONTENT_TYPE),
            ],
            query=self._content_query(depth, expand, start, limit),
            result=ContentPageScheme,
        )

    @staticmethod
    def _content_query(depth: str, expand: list[str] | None, start: int, limit: int) -> Query:
        return (
            Query()
            .add("start", start)
            .add("limit", limit)
            .add_joined("expand", expand)
            .add_if("depth", depth)
        )
