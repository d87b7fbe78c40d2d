"""Jira users (REST v2/v3). Users are identified by Atlassian account ID."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.models import GroupScheme, UserPageScheme, UserPayloadScheme, UserScheme
from atlassian_rest.jira.service import JiraService


class UserService(JiraService):
    """Endpoints under ``/rest/api/{version}/user`` and ``/users``."""

    def get(self, account_id: str, expand: list[str] | None = None) -> tuple[UserScheme, ResponseScheme]:
        """GET /rest/api/{version}/user"""
        return self._call(
            "get_user",
            "GET",
            f"{self._api}/user",
            required=[(account_id, MissingField.ACCOUNT_ID)],
            query=Query().add("accountId", account_id).add_joined("expand", expand),
            result=UserScheme,
        )

    def create(self, payload: UserPayloadScheme | dict) -> tuple[UserScheme, ResponseScheme]:
        """POST /rest/api/{version}/user"""
        return self._call(
            "create_user",
            "POST",
            f"{self._api}/user",
            body=payload,
            result=UserScheme,
        )

    def delete(self, account_id: str) -> ResponseScheme:
        """DELETE /rest/api/{version}/user"""
        return self._send(
            "delete_user",
            "DELETE",
            f"{self._api}/user",
            required=[(account_id, MissingField.ACCOUNT_ID)],
            query=Query().add("accountId", account_id),
        )

    def find(
        self, account_ids: list[str], start: int = 0, max_results: int = 50
    ) -> tuple[UserPageScheme, ResponseScheme]:
        """Return a page of users by account ID.

        GET /rest/api/{version}/user/bulk
        """
        query = (
            Query()
            .add("startAt", start)
            .add("maxResults", max_results)
            .add_each("accountId", account_ids)
        )
        return self._call(
            "find_users",
            "GET",
            f"{self._api}/user/bulk",
            required=[(account_ids, MissingField.ACCOUNT_IDS)],
            query=query,
            result=UserPageScheme,
        )

    def groups(self, account_id: str) -> tuple[list[GroupScheme], ResponseScheme]:
        """GET /rest/api/{version}/user/groups"""
        return self._call(
            "get_user_groups",
            "GET",
            f"{self._api}/user/groups",
            required=[(account_id, MissingField.ACCOUNT_ID)],
            query=Query().add("accountId", account_id),
            result=list[GroupScheme],
        )

    def gets(self, start: int = 0, max_results: int = 50) -> tuple[list[UserScheme], ResponseScheme]:
        """Return every user, including app and inactive users.

        GET /rest/api/{version}/users/search
        """
        return self._call(
            "get_users",
            "GET",
            f"{self._api}/users/search",
            query=Query().add("startAt", start).add("maxResults", max_results),
            result=list[UserScheme],
        )
