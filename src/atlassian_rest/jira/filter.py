"""Saved JQL filters (Jira REST v2/v3)."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.models import (
    FilterPayloadScheme,
    FilterScheme,
    FilterSearchOptionScheme,
    FilterSearchPageScheme,
)
from atlassian_rest.jira.service import JiraService


class FilterService(JiraService):
    """Endpoints under ``/rest/api/{version}/filter``."""

    def create(self, payload: FilterPayloadScheme | dict) -> tuple[FilterScheme, ResponseScheme]:
        """POST /rest/api/{version}/filter"""
        return self._call(
            "create_filter",
            "POST",
            f"{self._api}/filter",
            body=payload,
            result=FilterScheme,
        )

    def favorite(self) -> tuple[list[FilterScheme], ResponseScheme]:
        """Return the favourite filters of the user.

        GET /rest/api/{version}/filter/favourite
        """
        return self._call(
            "get_favourite_filters",
            "GET",
            f"{self._api}/filter/favourite",
            result=list[FilterScheme],
        )

    def my(self, favorites: bool = False, expand: list[str] | None = None) -> tuple[list[FilterScheme], ResponseScheme]:
        """Return the filters owned by the user.

        GET /rest/api/{version}/filter/my

        Args:
            favorites: Also return the user's favourite filters
            expand: Properties to expand
        """
        query = Query().add_flag("includeFavourites", favorites).add_joined("expand", expand)
        return self._call(
            "get_my_filters",
            "GET",
            f"{self._api}/filter/my",
            query=query,
            result=list[FilterScheme],
        )

    def search(
        self,
        options: FilterSearchOptionScheme | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[FilterSearchPageScheme, ResponseScheme]:
        """GET /rest/api/{version}/filter/search"""
        query = Query().add("startAt", start).add("maxResults", max_results)
        if options is not None:
            query.add_if("filterName", options.name)
            query.add_if("accountId", options.account_id)
            query.add_if("groupname", options.group)
            query.add_if("projectId", options.project_id)
            query.add_each("id", options.ids)
            query.add_if("orderBy", options.order_by)
            query.add_joined("expand", options.expand)

        return self._call(
            "search_filters",
            "GET",
            f"{self._api}/filter/search",
            query=query,
            result=FilterSearchPageScheme,
        )

    def get(self, filter_id: int, expand: list[str] | None = None) -> tuple[FilterScheme, ResponseScheme]:
        """GET /rest/api/{version}/filter/{id}"""
        return self._call(
            "get_filter",
            "GET",
            f"{self._api}/filter/{filter_id}",
            required=[(filter_id, MissingField.FILTER_ID)],
            query=Query().add_joined("expand", expand),
            result=FilterScheme,
        )

    def update(
        self, filter_id: int, payload: FilterPayloadScheme | dict
    ) -> tuple[FilterScheme, ResponseScheme]:
        """PUT /rest/api/{version}/filter/{id}"""
        return self._call(
            "update_filter",
            "PUT",
            f"{self._api}/filter/{filter_id}",
            required=[(filter_id, MissingField.FILTER_ID)],
            body=payload,
            result=FilterScheme,
        )

    def delete(self, filter_id: int) -> ResponseScheme:
        """DELETE /rest/api/{version}/filter/{id}"""
        return self._send(
            "delete_filter",
            "DELETE",
            f"{self._api}/filter/{filter_id}",
            required=[(filter_id, MissingField.FILTER_ID)],
        )

    def change(self, filter_id: int, account_id: str) -> ResponseScheme:
        """Change the owner of a filter.

        PUT /rest/api/{version}/filter/{id}/owner
        """
        return self._send(
            "change_filter_owner",
            "PUT",
            f"{self._api}/filter/{filter_id}/owner",
            required=[
                (filter_id, MissingField.FILTER_ID),
                (account_id, MissingField.ACCOUNT_ID),
            ],
            body={"accountId": account_id},
        )
