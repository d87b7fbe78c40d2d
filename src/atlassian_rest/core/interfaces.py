"""Abstract interfaces shared by every service.

``Connector`` is the only piece of plumbing the services depend on. The
concrete implementation is ``atlassian_rest.common.base.AtlassianClient``;
tests substitute a mock.
"""

from abc import ABC, abstractmethod
from typing import Any

import requests

from atlassian_rest.core.models import ResponseScheme


class Connector(ABC):
    """Builds and executes HTTP requests against one Atlassian site."""

    @abstractmethod
    def new_request(
        self,
        method: str,
        path: str,
        content_type: str = "",
        body: Any = None,
    ) -> requests.PreparedRequest:
        """Build a request for an API path.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the site, including any query string
            content_type: Explicit Content-Type for non-JSON bodies
                (multipart uploads). Empty means JSON.
            body: Payload. Models and mappings are JSON-encoded, bytes are
                sent as-is.

        Returns:
            Prepared request ready for ``call``

        Raises:
            RequestError: If the request cannot be built
        """

    @abstractmethod
    def call(
        self,
        request: requests.PreparedRequest,
        result_type: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        """Execute a request and decode the body.

        Args:
            request: Request built by ``new_request``
            result_type: Type to decode the JSON body into. None skips decoding.

        Returns:
            Tuple of (decoded result or None, response envelope)

        Raises:
            AtlassianError: For transport failures, non-2xx statuses and
                undecodable bodies. The envelope is attached as ``response``
                whenever the server answered.
        """
