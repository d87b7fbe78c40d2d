"""Base class for Confluence services."""

from atlassian_rest.core.request import Service

# Confluence REST API paths
CONFLUENCE_API_V1 = "wiki/rest/api"
CONFLUENCE_API_V2 = "wiki/api/v2"


class ConfluenceService(Service):
    """Service whose errors are reported as coming from Confluence."""

    provider_name = "confluence"
