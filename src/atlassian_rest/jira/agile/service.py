"""Base class for Jira Software (Agile) services."""

from atlassian_rest.jira.service import JiraService

DEFAULT_AGILE_VERSION = "1.0"


class AgileService(JiraService):
    """Service bound to one version of the Jira Agile REST API."""

    provider_name = "agile"
    api_root = "rest/agile"
