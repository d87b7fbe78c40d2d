"""Permission checks on a Confluence content (REST v1)."""

from atlassian_rest.confluence.models import CheckPermissionScheme, PermissionCheckResponseScheme
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme


class ContentPermissionService(ConfluenceService):
    """Checks whether a user or group may perform an operation on a content."""

    def check(
        self, content_id: str, payload: CheckPermissionScheme | dict
    ) -> tuple[PermissionCheckResponseScheme, ResponseScheme]:
        """POST /wiki/rest/api/content/{id}/permission/check"""
        return self._call(
            "check_content_permission",
            "POST",
            f"{CONFLUENCE_API_V1}/content/{content_id}/permission/check",
            required=[(content_id, MissingField.CONTENT_ID)],
            body=payload,
            result=PermissionCheckResponseScheme,
        )
