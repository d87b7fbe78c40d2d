"""Project components (Jira REST v2/v3)."""

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.jira.models import ComponentCountScheme, ComponentPayloadScheme, ComponentScheme
from atlassian_rest.jira.service import JiraService


class ComponentService(JiraService):
    """Endpoints under ``/rest/api/{version}/component``."""

    def create(self, payload: ComponentPayloadScheme | dict) -> tuple[ComponentScheme, ResponseScheme]:
        """POST /rest/api/{version}/component"""
        return self._call(
            "create_component",
            "POST",
            f"{self._api}/component",
            body=payload,
            result=ComponentScheme,
        )

    def gets(self, project_key: str) -> tuple[list[ComponentScheme], ResponseScheme]:
        """Return every component of a project.

        GET /rest/api/{version}/project/{projectIdOrKey}/components
        """
        return self._call(
            "get_project_components",
            "GET",
            f"{self._api}/project/{project_key}/components",
            required=[(project_key, MissingField.PROJECT_KEY)],
            result=list[ComponentScheme],
        )

    def count(self, component_id: str) -> tuple[ComponentCountScheme, ResponseScheme]:
        """Return the number of issues assigned to a component.

        GET /rest/api/{version}/component/{id}/relatedIssueCounts
        """
        return self._call(
            "count_component_issues",
            "GET",
            f"{self._api}/component/{component_id}/relatedIssueCounts",
            required=[(component_id, MissingField.COMPONENT_ID)],
            result=ComponentCountScheme,
        )

    def get(self, component_id: str) -> tuple[ComponentScheme, ResponseScheme]:
        """GET /rest/api/{version}/component/{id}"""
        return self._call(
            "get_component",
            "GET",
            f"{self._api}/component/{component_id}",
            required=[(component_id, MissingField.COMPONENT_ID)],
            result=ComponentScheme,
        )

    def update(
        self, component_id: str, payload: ComponentPayloadScheme | dict
    ) -> tuple[ComponentScheme, ResponseScheme]:
        """PUT /rest/api/{version}/component/{id}"""
        return self._call(
            "update_component",
            "PUT",
            f"{self._api}/component/{component_id}",
            required=[(component_id, MissingField.COMPONENT_ID)],
            body=payload,
            result=ComponentScheme,
        )

    def delete(self, component_id: str) -> ResponseScheme:
        """DELETE /rest/api/{version}/component/{id}"""
        return self._send(
            "delete_component",
            "DELETE",
            f"{self._api}/component/{component_id}",
            required=[(component_id, MissingField.COMPONENT_ID)],
        )
