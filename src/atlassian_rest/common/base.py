"""HTTP connector shared by the Jira and Confluence clients.

``AtlassianClient`` implements ``Connector`` on top of a ``requests.Session``:
- Site and credential resolution from arguments, env vars, keyring or .env
- Basic auth with API tokens, or OAuth bearer tokens
- JSON encoding of payloads and pydantic decoding of responses
- Mapping of non-2xx statuses to exceptions carrying the response envelope
- Request/response logging

There are no retries: every error is raised to the caller as-is.

Example:
    from atlassian_rest.common.base import AtlassianClient

    with AtlassianClient(site="https://example.atlassian.net") as client:
        request = client.new_request("GET", "wiki/api/v2/spaces?limit=1")
        _, response = client.call(request)
        print(response.code, response.json())
"""

import json
import logging
from functools import lru_cache
from typing import Any

import requests
from pydantic import TypeAdapter
from requests.auth import HTTPBasicAuth
from requests.structures import CaseInsensitiveDict

from atlassian_rest.common.auth import Authentication
from atlassian_rest.common.credentials import DEFAULT_SERVICE, get_credentials
from atlassian_rest.core.exceptions import (
    AtlassianConnectionError,
    AtlassianError,
    BadRequestError,
    DecodeError,
    InternalServerError,
    NotFoundError,
    PermissionError,
    ProviderError,
    RateLimitError,
    RequestError,
    UnauthorizedError,
)
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds

_ANY = TypeAdapter(Any)


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class AtlassianClient(Connector):
    """Connector for one Atlassian Cloud site.

    Product clients (``ConfluenceClient``, ``JiraClient``, ...) subclass it
    and wire their services to ``self``.

    Attributes:
        site: Site base URL without trailing slash
        timeout: Per-request timeout in seconds
        auth: Authentication settings applied to every request
    """

    provider_name = "atlassian"

    def __init__(
        self,
        site: str | None = None,
        email: str | None = None,
        api_token: str | None = None,
        bearer_token: str | None = None,
        user_agent: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        service: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            site: Site URL (e.g., https://example.atlassian.net)
            email: Account email for basic auth
            api_token: API token for basic auth
            bearer_token: OAuth 2.0 access token, used when no basic auth is set
            user_agent: User-Agent header value
            timeout: Request timeout in seconds
            service: Keyring service name for credential lookup
            session: Pre-configured session (proxies, adapters, certificates)
        """
        creds = get_credentials(
            site=site,
            email=email,
            api_token=api_token,
            service=service or DEFAULT_SERVICE,
        )
        self.site = creds.site
        self.timeout = timeout

        self.auth = Authentication()
        if creds.email and creds.api_token:
            self.auth.set_basic_auth(creds.email, creds.api_token)
        if bearer_token:
            self.auth.set_bearer_token(bearer_token)
        if user_agent:
            self.auth.set_user_agent(user_agent)

        self._session = session or requests.Session()

        logger.debug(
            "Initialized %s client for %s (%r)",
            self.provider_name,
            self.site,
            self.auth,
        )

    def __enter__(self) -> "AtlassianClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - close session."""
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()
        logger.debug("Closed %s client session", self.provider_name)

    def new_request(
        self,
        method: str,
        path: str,
        content_type: str = "",
        body: Any = None,
    ) -> requests.PreparedRequest:
        """Build a request for an API path.

        Args:
            method: HTTP method
            path: API path relative to the site, with or without a leading slash
            content_type: Explicit Content-Type. Also adds the
                ``X-Atlassian-Token: no-check`` header that uploads need.
            body: Pydantic model, mapping or list for JSON; bytes or a file
                object for an explicit content type

        Returns:
            Prepared request

        Raises:
            RequestError: If the body cannot be serialized or the URL is invalid
        """
        url = f"{self.site}/{path.lstrip('/')}"
        headers = {"Accept": "application/json"}
        data: Any = None

        if content_type:
            headers["Content-Type"] = content_type
            headers["X-Atlassian-Token"] = "no-check"
            data = body
        elif body is not None:
            try:
                data = json.dumps(_ANY.dump_python(body, mode="json", by_alias=True, exclude_none=True))
            except (TypeError, ValueError) as e:
                raise RequestError(
                    f"Unable to encode request body: {e}",
                    provider=self.provider_name,
                    details={"url": url},
                ) from e
            headers["Content-Type"] = "application/json"

        if self.auth.has_user_agent():
            headers["User-Agent"] = self.auth.get_user_agent()

        auth = None
        if self.auth.has_basic_auth():
            auth = HTTPBasicAuth(*self.auth.get_basic_auth())
        elif self.auth.has_bearer_token():
            headers["Authorization"] = f"Bearer {self.auth.get_bearer_token()}"

        try:
            return self._session.prepare_request(
                requests.Request(method=method, url=url, headers=headers, data=data, auth=auth)
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestError(
                f"Unable to create the http request: {e}",
                provider=self.provider_name,
                details={"url": url},
            ) from e

    def call(
        self,
        request: requests.PreparedRequest,
        result_type: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        """Send a request and decode the response.

        Args:
            request: Request from ``new_request``
            result_type: Type the JSON body is decoded into (model, list, dict).
                None skips decoding.

        Returns:
            Tuple of (decoded result or None, response envelope). The result is
            None for an empty body.

        Raises:
            AtlassianConnectionError: On network failure or timeout
            BadRequestError: 400
            UnauthorizedError: 401
            PermissionError: 403
            NotFoundError: 404
            RateLimitError: 429
            InternalServerError: 500
            ProviderError: Any other non-2xx status
            DecodeError: If the body does not match ``result_type``
        """
        logger.debug("%s %s", request.method, request.url)

        try:
            response = self._session.send(request, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise AtlassianConnectionError(
                f"Request timed out after {self.timeout} seconds",
                provider=self.provider_name,
                details={"url": request.url, "timeout": self.timeout},
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise AtlassianConnectionError(
                "Unable to connect with the Atlassian instance",
                provider=self.provider_name,
                details={"url": request.url},
            ) from e

        envelope = ResponseScheme(
            code=response.status_code,
            endpoint=response.url or request.url or "",
            method=request.method or "",
            body=response.content,
            headers=dict(response.headers),
        )

        logger.debug(
            "%s %s -> %d (%d bytes)",
            envelope.method,
            envelope.endpoint,
            envelope.code,
            len(envelope.body),
        )

        if not envelope.ok:
            raise self._status_error(envelope)

        if result_type is None or not envelope.body:
            return None, envelope

        try:
            result = _adapter(result_type).validate_json(envelope.body)
        except ValueError as e:
            raise DecodeError(
                f"Unable to decode response body: {e}",
                provider=self.provider_name,
                details={"url": envelope.endpoint},
                response=envelope,
            ) from e

        return result, envelope

    def _status_error(self, envelope: ResponseScheme) -> AtlassianError:
        """Map a non-2xx envelope to its exception."""
        details = {
            "status_code": envelope.code,
            "url": envelope.endpoint,
            "response": self._safe_json(envelope),
        }
        kwargs: dict[str, Any] = {
            "provider": self.provider_name,
            "details": details,
            "response": envelope,
        }

        if envelope.code == 400:
            return BadRequestError("atlassian invalid payload", **kwargs)
        if envelope.code == 401:
            return UnauthorizedError("Authentication failed. Check your credentials.", **kwargs)
        if envelope.code == 403:
            return PermissionError("Access forbidden. Check your permissions.", **kwargs)
        if envelope.code == 404:
            return NotFoundError("no atlassian resource found", **kwargs)
        if envelope.code == 429:
            return RateLimitError(
                "Rate limit exceeded. Try again later.",
                retry_after=self._get_retry_after(envelope),
                **kwargs,
            )
        if envelope.code == 500:
            return InternalServerError("atlassian internal error", **kwargs)
        return ProviderError(
            "invalid http response status, please refer the response.body for more details",
            status_code=envelope.code,
            **kwargs,
        )

    @staticmethod
    def _get_retry_after(envelope: ResponseScheme) -> int | None:
        retry_after = CaseInsensitiveDict(envelope.headers).get("Retry-After")
        if retry_after and retry_after.isdigit():
            return int(retry_after)
        return None

    @staticmethod
    def _safe_json(envelope: ResponseScheme) -> Any:
        """Parse the body as JSON, returning raw text on failure."""
        try:
            return envelope.json()
        except ValueError:
            return envelope.body.decode("utf-8", errors="replace")
