"""
atlassian-rest: Python client for the Jira and Confluence Cloud REST APIs.

Every resource is exposed as a service method that validates its required
identifiers, builds the endpoint, sends the call through a shared connector
and decodes the JSON answer into a pydantic model. Methods return the
decoded result together with the raw ``ResponseScheme``; errors are raised
and carry the same envelope in ``exc.response``.

Example Usage:
    from atlassian_rest import ConfluenceV2Client, JiraClient

    confluence = ConfluenceV2Client(site="https://example.atlassian.net")
    page, response = confluence.page.get(200001, format="storage")

    jira = JiraClient(site="https://example.atlassian.net")
    issue, _ = jira.issue.get("KP-2", fields=["summary"])
"""

from atlassian_rest.common.base import AtlassianClient
from atlassian_rest.confluence.client import ConfluenceClient
from atlassian_rest.confluence.v2.client import ConfluenceV2Client
from atlassian_rest.core.exceptions import (
    AtlassianConnectionError,
    AtlassianError,
    BadRequestError,
    DecodeError,
    MissingField,
    NoVersionError,
    NotFoundError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.jira.agile.client import AgileClient
from atlassian_rest.jira.client import JiraClient

__version__ = "0.1.0"

__all__ = [
    # Clients
    "AtlassianClient",
    "ConfluenceClient",
    "ConfluenceV2Client",
    "JiraClient",
    "AgileClient",
    # Connector contract
    "Connector",
    "ResponseScheme",
    # Exceptions
    "AtlassianError",
    "ValidationError",
    "MissingField",
    "NoVersionError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "RateLimitError",
    "AtlassianConnectionError",
    "DecodeError",
]
