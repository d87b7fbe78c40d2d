"""Jira dashboards (REST v2/v3)."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.models import (
    DashboardPageScheme,
    DashboardPayloadScheme,
    DashboardScheme,
    DashboardSearchOptionsScheme,
    DashboardSearchPageScheme,
)
from atlassian_rest.jira.service import JiraService


class DashboardService(JiraService):
    """Endpoints under ``/rest/api/{version}/dashboard``."""

    def gets(
        self, start: int = 0, max_results: int = 20, filter: str = ""
    ) -> tuple[DashboardPageScheme, ResponseScheme]:
        """Return the dashboards of the user.

        GET /rest/api/{version}/dashboard

        Args:
            start: Index of the first item
            max_results: Maximum number of items
            filter: ``favourite`` or ``my``; every dashboard when empty
        """
        query = Query().add("startAt", start).add("maxResults", max_results).add_if("filter", filter)
        return self._call(
            "get_dashboards",
            "GET",
            f"{self._api}/dashboard",
            query=query,
            result=DashboardPageScheme,
        )

    def create(self, payload: DashboardPayloadScheme | dict) -> tuple[DashboardScheme, ResponseScheme]:
        """POST /rest/api/{version}/dashboard"""
        return self._call(
            "create_dashboard",
            "POST",
            f"{self._api}/dashboard",
            body=payload,
            result=DashboardScheme,
        )

    def search(
        self,
        options: DashboardSearchOptionsScheme | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[DashboardSearchPageScheme, ResponseScheme]:
        """Search dashboards by name, owner and shared group.

        GET /rest/api/{version}/dashboard/search
        """
        query = Query().add("startAt", start).add("maxResults", max_results)
        if options is not None:
            query.add_if("dashboardName", options.dashboard_name)
            query.add_if("accountId", options.owner_account_id)
            query.add_if("groupname", options.group_permission_name)
            query.add_if("orderBy", options.order_by)
            query.add_joined("expand", options.expand)

        return self._call(
            "search_dashboards",
            "GET",
            f"{self._api}/dashboard/search",
            query=query,
            result=DashboardSearchPageScheme,
        )

    def get(self, dashboard_id: str) -> tuple[DashboardScheme, ResponseScheme]:
        """GET /rest/api/{version}/dashboard/{id}"""
        return self._call(
            "get_dashboard",
            "GET",
            f"{self._api}/dashboard/{dashboard_id}",
            required=[(dashboard_id, MissingField.DASHBOARD_ID)],
            result=DashboardScheme,
        )

    def delete(self, dashboard_id: str) -> ResponseScheme:
        """DELETE /rest/api/{version}/dashboard/{id}"""
        return self._send(
            "delete_dashboard",
            "DELETE",
            f"{self._api}/dashboard/{dashboard_id}",
            required=[(dashboard_id, MissingField.DASHBOARD_ID)],
        )

    def copy(
        self, dashboard_id: str, payload: DashboardPayloadScheme | dict
    ) -> tuple[DashboardScheme, ResponseScheme]:
        """POST /rest/api/{version}/dashboard/{id}/copy"""
        return self._call(
            "copy_dashboard",
            "POST",
            f"{self._api}/dashboard/{dashboard_id}/copy",
            required=[(dashboard_id, MissingField.DASHBOARD_ID)],
            body=payload,
            result=DashboardScheme,
        )

    def update(
        self, dashboard_id: str, payload: DashboardPayloadScheme | dict
    ) -> tuple[DashboardScheme, ResponseScheme]:
        """PUT /rest/api/{version}/dashboard/{id}"""
        return self._call(
            "update_dashboard",
            "PUT",
            f"{self._api}/dashboard/{dashboard_id}",
            required=[(dashboard_id, MissingField.DASHBOARD_ID)],
            body=payload,
            result=DashboardScheme,
        )
