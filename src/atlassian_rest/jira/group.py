"""Jira groups and their members (REST v2/v3).

Groups are addressed by name through the ``groupname`` query parameter.
"""

import logging

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.models import (
    GroupBulkOptionsScheme,
    GroupMemberPageScheme,
    GroupPageScheme,
    GroupScheme,
)
from atlassian_rest.jira.service import JiraService

logger = logging.getLogger(__name__)


class GroupService(JiraService):
    """Endpoints under ``/rest/api/{version}/group``."""

    def create(self, group_name: str) -> tuple[GroupScheme, ResponseScheme]:
        """POST /rest/api/{version}/group"""
        return self._call(
            "create_group",
            "POST",
            f"{self._api}/group",
            required=[(group_name, MissingField.GROUP_NAME)],
            body={"name": group_name},
            result=GroupScheme,
        )

    def delete(self, group_name: str) -> ResponseScheme:
        """DELETE /rest/api/{version}/group"""
        logger.info("Deleting Jira group %s", group_name)
        return self._send(
            "delete_group",
            "DELETE",
            f"{self._api}/group",
            required=[(group_name, MissingField.GROUP_NAME)],
            query=Query().add("groupname", group_name),
        )

    def bulk(
        self,
        options: GroupBulkOptionsScheme | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[GroupPageScheme, ResponseScheme]:
        """Return a page of groups, filtered by ID or name.

        GET /rest/api/{version}/group/bulk
        """
        query = Query().add("startAt", start).add("maxResults", max_results)
        if options is not None:
            query.add_each("groupId", options.group_ids)
            query.add_each("groupName", options.group_names)

        return self._call(
            "get_groups",
            "GET",
            f"{self._api}/group/bulk",
            query=query,
            result=GroupPageScheme,
        )

    def members(
        self,
        group_name: str,
        inactive: bool = False,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[GroupMemberPageScheme, ResponseScheme]:
        """Return a page of the members of a group.

        GET /rest/api/{version}/group/member

        Args:
            group_name: Group name
            inactive: Include inactive users
            start: Index of the first item
            max_results: Maximum number of items
        """
        query = (
            Query()
            .add("groupname", group_name)
            .add_flag("includeInactiveUsers", inactive)
            .add("startAt", start)
            .add("maxResults", max_results)
        )
        return self._call(
            "get_group_members",
            "GET",
            f"{self._api}/group/member",
            required=[(group_name, MissingField.GROUP_NAME)],
            query=query,
            result=GroupMemberPageScheme,
        )

    def add(self, group_name: str, account_id: str) -> tuple[GroupScheme, ResponseScheme]:
        """POST /rest/api/{version}/group/user"""
        return self._call(
            "add_group_member",
            "POST",
            f"{self._api}/group/user",
            required=[
                (group_name, MissingField.GROUP_NAME),
                (account_id, MissingField.ACCOUNT_ID),
            ],
            query=Query().add("groupname", group_name),
            body={"accountId": account_id},
            result=GroupScheme,
        )

    def remove(self, group_name: str, account_id: str) -> ResponseScheme:
        """DELETE /rest/api/{version}/group/user"""
        return self._send(
            "remove_group_member",
            "DELETE",
            f"{self._api}/group/user",
            required=[
                (group_name, MissingField.GROUP_NAME),
                (account_id, MissingField.ACCOUNT_ID),
            ],
            query=Query().add("groupname", group_name).add("accountId", account_id),
        )
