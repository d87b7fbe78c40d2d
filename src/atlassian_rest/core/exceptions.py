"""Exception hierarchy for atlassian-rest.

Every error may carry the ``ResponseScheme`` of the call that produced it, so
callers can inspect the endpoint, status code and raw body after a failure.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atlassian_rest.core.models import ResponseScheme


class MissingField(str, Enum):
    """Closed set of required-argument failures.

    The value of each member is the message surfaced to callers.
    """

    # Confluence
    CONTENT_ID = "no content id set"
    PAGE_ID = "no page id set"
    SPACE_ID = "no space id set"
    SPACE_KEY = "no space key set"
    SPACE_NAME = "no space name set"
    LABEL_ID = "no label id set"
    LABEL_NAME = "no label name set"
    CQL = "no CQL query set"
    CONTENT_TYPE = "no content type set"
    TARGET_ID = "no target id set"
    POSITION = "no position set"
    INVALID_POSITION = "invalid position: (before, after, append)"
    ATTACHMENT_ID = "no attachment id set"
    ATTACHMENT_NAME = "no attachment filename set"
    READER = "no reader set"
    CUSTOM_CONTENT_TYPE = "no custom content type set"
    CUSTOM_CONTENT_ID = "no custom content id set"
    ENTITY_ID = "no entity id set"
    ENTITY_TYPE = "no valid entity id set"
    CONTENT_LABEL = "no content label set"
    CONTENT_PROPERTY = "no content property set"
    RESTRICTION_KEY = "no content restriction operation key set"
    CONFLUENCE_GROUP = "no group id or name set"
    TEMPLATE_ID = "no template id set"
    FOLDER_ID = "no folder id set"
    WHITEBOARD_ID = "no whiteboard id set"
    DATABASE_ID = "no database id set"
    EMBED_ID = "no embed id set"

    # Jira
    ACCOUNT_ID = "no account id set"
    ACCOUNT_IDS = "no account id's set"
    ISSUE_KEY = "no issue key/id set"
    COMMENT_ID = "no comment id set"
    TRANSITION_ID = "no transition id set"
    PROJECT_KEY = "no project id or key set"
    COMPONENT_ID = "no component id set"
    VERSION_ID = "no version id set"
    FILTER_ID = "no filter id set"
    DASHBOARD_ID = "no dashboard id set"
    GROUP_NAME = "no group name set"
    JQL = "no sql set"
    VALIDATE_QUERY = "invalid validateQuery, please provide one of the following: strict,warn,none"

    # Agile
    BOARD_ID = "no board id set"
    EPIC_ID = "no epic id set"
    SPRINT_ID = "no sprint id set"


class AtlassianError(Exception):
    """Base exception for all atlassian-rest errors."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict | None = None,
        response: "ResponseScheme | None" = None,
    ):
        """Initialize AtlassianError.

        Args:
            message: Error message
            provider: Product that raised the error (e.g., 'confluence')
            details: Additional error details
            response: Response envelope of the failed call, when one exists
        """
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.details = details or {}
        self.response = response

    def __str__(self) -> str:
        """Return string representation."""
        if self.provider:
            return f"[{self.provider}] {self.message}"
        return self.message


class ValidationError(AtlassianError):
    """A required argument was empty or zero. No request was sent."""

    def __init__(self, missing: MissingField, provider: str | None = None):
        """Initialize ValidationError.

        Args:
            missing: Which required argument failed
            provider: Product that raised the error
        """
        super().__init__(missing.value, provider)
        self.field = missing


class NoVersionError(AtlassianError):
    """A versioned service was constructed without an API version."""

    def __init__(self, provider: str | None = None):
        super().__init__("no module version set", provider)


class RequestError(AtlassianError):
    """The HTTP request could not be built."""


class BadRequestError(AtlassianError):
    """The server rejected the payload (400)."""


class UnauthorizedError(AtlassianError):
    """Authentication failed (401)."""


class PermissionError(AtlassianError):
    """Insufficient permissions for operation (403)."""


class NotFoundError(AtlassianError):
    """Resource not found (404)."""


class RateLimitError(AtlassianError):
    """Rate limit exceeded (429)."""

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        provider: str | None = None,
        details: dict | None = None,
        response: "ResponseScheme | None" = None,
    ):
        """Initialize RateLimitError.

        Args:
            message: Error message
            retry_after: Seconds until retry is allowed, from the Retry-After header
            provider: Provider name
            details: Additional error details
            response: Response envelope of the failed call
        """
        super().__init__(message, provider, details, response)
        self.retry_after = retry_after


class InternalServerError(AtlassianError):
    """The server failed to process the request (500)."""


class ProviderError(AtlassianError):
    """Any other non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider: str | None = None,
        details: dict | None = None,
        response: "ResponseScheme | None" = None,
    ):
        """Initialize ProviderError.

        Args:
            message: Error message
            status_code: HTTP status code
            provider: Provider name
            details: Additional error details
            response: Response envelope of the failed call
        """
        super().__init__(message, provider, details, response)
        self.status_code = status_code


class AtlassianConnectionError(AtlassianError):
    """Connection to the Atlassian site failed or timed out."""


class DecodeError(AtlassianError):
    """The response body could not be decoded into the expected type."""
