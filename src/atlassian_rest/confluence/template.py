"""Page and blueprint templates (REST v1)."""

from atlassian_rest.confluence.models import CreateTemplateScheme, TemplateScheme, UpdateTemplateScheme
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme


class TemplateService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/template``."""

    def create(self, payload: CreateTemplateScheme | dict) -> tuple[TemplateScheme, ResponseScheme]:
        """Create a template, global or scoped to the space in the payload.

        POST /wiki/rest/api/template
        """
        return self._call(
            "create_template",
            "POST",
            f"{CONFLUENCE_API_V1}/template",
            body=payload,
            result=TemplateScheme,
        )

    def update(self, payload: UpdateTemplateScheme | dict) -> tuple[TemplateScheme, ResponseScheme]:
        """PUT /wiki/rest/api/template"""
        return self._call(
            "update_template",
            "PUT",
            f"{CONFLUENCE_API_V1}/template",
            body=payload,
            result=TemplateScheme,
        )

    def get(self, template_id: str) -> tuple[TemplateScheme, ResponseScheme]:
        """GET /wiki/rest/api/template/{contentTemplateId}"""
        return self._call(
            "get_template",
            "GET",
            f"{CONFLUENCE_API_V1}/template/{template_id}",
            required=[(template_id, MissingField.TEMPLATE_ID)],
            result=TemplateScheme,
        )
