"""Read and update restrictions of a Confluence content (REST v1).

Restrictions are grouped by operation (``read`` or ``update``). Each
operation holds a list of users and a list of groups allowed to perform it:

    content.restriction.gets(...)                         # every operation
    content.restriction.operation.get(id, "read")         # one operation
    content.restriction.operation.group.add(id, "read", group_id)
    content.restriction.operation.user.remove(id, "update", account_id)
"""

from atlassian_rest.confluence.models import (
    ContentRestrictionByOperationScheme,
    ContentRestrictionPageScheme,
    ContentRestrictionScheme,
    ContentRestrictionUpdatePayloadScheme,
)
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.core.tracing import Tracer


def _by_operation(content_id: str, operation_key: str = "") -> str:
    path = f"{CONFLUENCE_API_V1}/content/{content_id}/restriction/byOperation"
    if operation_key:
        path = f"{path}/{operation_key}"
    return path


class RestrictionOperationGroupService(ConfluenceService):
    """Group restrictions of one operation."""

    def get(self, content_id: str, operation_key: str, group_id: str) -> ResponseScheme:
        """Check whether a group holds the restriction.

        GET /wiki/rest/api/content/{id}/restriction/byOperation/{key}/byGroupId/{groupId}

        The server answers 200 when the group is restricted and 404 otherwise.
        """
        return self._send(
            "get_content_restriction_group",
            "GET",
            f"{_by_operation(content_id, operation_key)}/byGroupId/{group_id}",
            required=self._required(content_id, operation_key, group_id),
        )

    def add(self, content_id: str, operation_key: str, group_id: str) -> ResponseScheme:
        """PUT /wiki/rest/api/content/{id}/restriction/byOperation/{key}/byGroupId/{groupId}"""
        return self._send(
            "add_content_restriction_group",
            "PUT",
            f"{_by_operation(content_id, operation_key)}/byGroupId/{group_id}",
            required=self._required(content_id, operation_key, group_id),
        )

    def remove(self, content_id: str, operation_key: str, group_id: str) -> ResponseScheme:
        """DELETE /wiki/rest/api/content/{id}/restriction/byOperation/{key}/byGroupId/{groupId}"""
        return self._send(
            "remove_content_restriction_group",
            "DELETE",
            f"{_by_operation(content_id, operation_key)}/byGroupId/{group_id}",
            required=self._required(content_id, operation_key, group_id),
        )

    @staticmethod
    def _required(content_id: str, operation_key: str, group_id: str) -> list:
        return [
            (content_id, MissingField.CONTENT_ID),
            (operation_key, MissingField.RESTRICTION_KEY),
            (group_id, MissingField.CONFLUENCE_GROUP),
        ]


class RestrictionOperationUserService(ConfluenceService):
    """User restrictions of one operation. Users are identified by account ID."""

    def get(self, content_id: str, operation_key: str, account_id: str) -> ResponseScheme:
        """GET /wiki/rest/api/content/{id}/restriction/byOperation/{key}/user"""
        return self._user_call("get_content_restriction_user", "GET", content_id, operation_key, account_id)

    def add(self, content_id: str, operation_key: str, account_id: str) -> ResponseScheme:
        """PUT /wiki/rest/api/content/{id}/restriction/byOperation/{key}/user"""
        return self._user_call("add_content_restriction_user", "PUT", content_id, operation_key, account_id)

    def remove(self, content_id: str, operation_key: str, account_id: str) -> ResponseScheme:
        """DELETE /wiki/rest/api/content/{id}/restriction/byOperation/{key}/user"""
        return self._user_call(
            "remove_content_restriction_user", "DELETE", content_id, operation_key, account_id
        )

    def _user_call(
        self, operation: str, method: str, content_id: str, operation_key: str, account_id: str
    ) -> ResponseScheme:
        return self._send(
            operation,
            method,
            f"{_by_operation(content_id, operation_key)}/user",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (operation_key, MissingField.RESTRICTION_KEY),
                (account_id, MissingField.ACCOUNT_ID),
            ],
            query=Query().add("accountId", account_id),
        )


class RestrictionOperationService(ConfluenceService):
    """Restrictions grouped by operation.

    Attributes:
        group: Group restrictions of an operation
        user: User restrictions of an operation
    """

    def __init__(
        self,
        connector: Connector,
        group: RestrictionOperationGroupService | None = None,
        user: RestrictionOperationUserService | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(connector, tracer)
        self.group = group
        self.user = user

    def gets(
        self, content_id: str, expand: list[str] | None = None
    ) -> tuple[ContentRestrictionByOperationScheme, ResponseScheme]:
        """Return the restrictions of a content keyed by operation.

        GET /wiki/rest/api/content/{id}/restriction/byOperation
        """
        return self._call(
            "get_content_restrictions_by_operation",
            "GET",
            _by_operation(content_id),
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            result=ContentRestrictionByOperationScheme,
        )

    def get(
        self,
        content_id: str,
        operation_key: str,
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentRestrictionScheme, ResponseScheme]:
        """Return the restrictions of a content for one operation.

        GET /wiki/rest/api/content/{id}/restriction/byOperation/{operationKey}

        Args:
            content_id: Content ID
            operation_key: ``read`` or ``update``
            expand: Properties to expand
            start: Index of the first user or group
            limit: Maximum number of users and groups
        """
        query = Query().add("start", start).add("limit", limit).add_joined("expand", expand)
        return self._call(
            "get_content_restriction_by_operation",
            "GET",
            _by_operation(content_id, operation_key),
            required=[
                (content_id, MissingField.CONTENT_ID),
                (operation_key, MissingField.RESTRICTION_KEY),
            ],
            query=query,
            result=ContentRestrictionScheme,
        )


class RestrictionService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content/{id}/restriction``.

    Attributes:
        operation: Restrictions grouped by operation
    """

    def __init__(
        self,
        connector: Connector,
        operation: RestrictionOperationService | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(connector, tracer)
        self.operation = operation

    def gets(
        self,
        content_id: str,
        expand: list[str] | None = None,
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentRestrictionPageScheme, ResponseScheme]:
        """GET /wiki/rest/api/content/{id}/restriction"""
        query = Query().add("start", start).add("limit", limit).add_joined("expand", expand)
        return self._call(
            "get_content_restrictions",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/restriction",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentRestrictionPageScheme,
        )

    def add(
        self,
        content_id: str,
        payload: ContentRestrictionUpdatePayloadScheme | dict,
        expand: list[str] | None = None,
    ) -> tuple[ContentRestrictionPageScheme, ResponseScheme]:
        """Add restrictions, keeping the existing ones.

        POST /wiki/rest/api/content/{id}/restriction
        """
        return self._write("add_content_restrictions", "POST", content_id, payload, expand)

    def update(
        self,
        content_id: str,
        payload: ContentRestrictionUpdatePayloadScheme | dict,
        expand: list[str] | None = None,
    ) -> tuple[ContentRestrictionPageScheme, ResponseScheme]:
        """Replace every restriction of the content with the payload.

        PUT /wiki/rest/api/content/{id}/restriction
        """
        return self._write("update_content_restrictions", "PUT", content_id, payload, expand)

    def delete(
        self, content_id: str, expand: list[str] | None = None
    ) -> tuple[ContentRestrictionPageScheme, ResponseScheme]:
        """Remove every restriction of the content.

        DELETE /wiki/rest/api/content/{id}/restriction
        """
        return self._write("delete_content_restrictions", "DELETE", content_id, None, expand)

    def _write(
        self,
        operation: str,
        method: str,
        content_id: str,
        payload: ContentRestrictionUpdatePayloadScheme | dict | None,
        expand: list[str] | None,
    ) -> tuple[ContentRestrictionPageScheme, ResponseScheme]:
        return self._call(
            operation,
            method,
            f"{CONFLUENCE_API_V1}/content/{content_id}/restriction",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_joined("expand", expand),
            body=payload,
            result=ContentRestrictionPageScheme,
        )
