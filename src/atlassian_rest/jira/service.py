"""Base class for Jira services."""

from atlassian_rest.core.exceptions import NoVersionError
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.request import Service
from atlassian_rest.core.tracing import Tracer

DEFAULT_API_VERSION = "3"


class JiraService(Service):
    """Service bound to one version of the Jira REST API.

    Attributes:
        api_root: Path prefix the version is appended to
        api_version: API version, e.g. ``"2"`` or ``"3"``
    """

    provider_name = "jira"
    api_root = "rest/api"

    def __init__(self, connector: Connector, version: str, tracer: Tracer | None = None) -> None:
        """Initialize the service.

        Raises:
            NoVersionError: If ``version`` is empty
        """
        if not version:
            raise NoVersionError(provider=self.provider_name)
        super().__init__(connector, tracer)
        self.api_version = version

    @property
    def _api(self) -> str:
        return f"{self.api_root}/{self.api_version}"
