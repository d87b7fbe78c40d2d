"""Labels of a Confluence content (REST v1)."""

from atlassian_rest.confluence.models import ContentLabelPageScheme, ContentLabelPayloadScheme
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class LabelService(ConfluenceService):
    """Endpoints under ``/wiki/rest/api/content/{id}/label``."""

    def gets(
        self,
        content_id: str,
        prefix: str = "",
        start: int = 0,
        limit: int = 25,
    ) -> tuple[ContentLabelPageScheme, ResponseScheme]:
        """Return the labels of a content, optionally filtered by prefix (global, my, team).

        GET /wiki/rest/api/content/{id}/label
        """
        query = Query().add("start", start).add("limit", limit).add_if("prefix", prefix)
        return self._call(
            "get_content_labels",
            "GET",
            f"{CONFLUENCE_API_V1}/content/{content_id}/label",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=query,
            result=ContentLabelPageScheme,
        )

    def add(
        self,
        content_id: str,
        payload: list[ContentLabelPayloadScheme] | list[dict],
        want_400_response: bool = False,
    ) -> tuple[ContentLabelPageScheme, ResponseScheme]:
        """Add labels to a content.

        POST /wiki/rest/api/content/{id}/label

        Args:
            content_id: Content ID
            payload: Labels to add
            want_400_response: Ask the server to answer 400 instead of 403
                for invalid labels
        """
        return self._call(
            "add_content_labels",
            "POST",
            f"{CONFLUENCE_API_V1}/content/{content_id}/label",
            required=[(content_id, MissingField.CONTENT_ID)],
            query=Query().add_flag("use-400-error-response", want_400_response),
            body=payload,
            result=ContentLabelPageScheme,
        )

    def remove(self, content_id: str, label_name: str) -> ResponseScheme:
        """DELETE /wiki/rest/api/content/{id}/label/{label}"""
        return self._send(
            "remove_content_label",
            "DELETE",
            f"{CONFLUENCE_API_V1}/content/{content_id}/label/{label_name}",
            required=[
                (content_id, MissingField.CONTENT_ID),
                (label_name, MissingField.CONTENT_LABEL),
            ],
        )
