"""Request building shared by every service.

A service method does four things: check its required identifiers, build
the path and query string, hand the payload to the connector and decode the
answer. ``Query``, ``endpoint`` and ``require`` cover the first two steps.
``Service._call`` runs the whole sequence inside a tracing span.

Query strings are encoded with sorted keys, so the same arguments always
produce the same URL:

    >>> Query().add("limit", 25).add_joined("expand", ["a", "b"]).encode()
    'expand=a%2Cb&limit=25'
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any
from urllib.parse import quote_plus, urlencode

from atlassian_rest.core.exceptions import MissingField, ValidationError
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.tracing import LoggingTracer, Tracer

logger = logging.getLogger(__name__)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Query:
    """Ordered, multi-valued query string builder.

    Each ``add*`` method encodes one convention of the Atlassian APIs and
    returns the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __repr__(self) -> str:
        return f"Query({self.encode()!r})"

    def add(self, key: str, value: Any) -> "Query":
        """Add a parameter unconditionally.

        Used for pagination (``start``, ``limit``, ``startAt``,
        ``maxResults``) and for booleans the API expects in both states.
        """
        self._pairs.append((key, _render(value)))
        return self

    def add_if(self, key: str, value: Any) -> "Query":
        """Add a parameter unless it is empty or zero.

        Zero is treated as unset, so ``0`` can never be requested through an
        optional numeric parameter.
        """
        if value is None or value == "" or (not isinstance(value, bool) and value == 0):
            return self
        self._pairs.append((key, _render(value)))
        return self

    def add_flag(self, key: str, enabled: bool) -> "Query":
        """Add ``key=true`` when enabled; omit the key otherwise."""
        if enabled:
            self._pairs.append((key, "true"))
        return self

    def add_joined(self, key: str, values: Iterable[Any] | None) -> "Query":
        """Add one parameter holding the values joined by commas."""
        items = [_render(v) for v in values or ()]
        if items:
            self._pairs.append((key, ",".join(items)))
        return self

    def add_each(self, key: str, values: Iterable[Any] | None) -> "Query":
        """Repeat the key once per value."""
        for value in values or ():
            self._pairs.append((key, _render(value)))
        return self

    def encode(self) -> str:
        """Encode as a query string with keys in sorted order.

        Repeated keys keep the order in which they were added.
        """
        ordered = sorted(self._pairs, key=lambda pair: pair[0])
        return urlencode(ordered, quote_via=quote_plus)


def endpoint(path: str, query: Query | None = None) -> str:
    """Join a path and its query string; no ``?`` for an empty query."""
    if query:
        return f"{path}?{query.encode()}"
    return path


def _is_unset(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple)):
        return len(value) == 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False


def require(provider: str | None, *checks: tuple[Any, MissingField]) -> None:
    """Check required arguments in order.

    Args:
        provider: Product name attached to the error
        *checks: ``(value, missing_field)`` pairs, outermost path segment first

    Raises:
        ValidationError: For the first value that is empty, zero or None
    """
    for value, missing in checks:
        if _is_unset(value):
            raise ValidationError(missing, provider=provider)


def require_choice(provider: str | None, value: Any, choices: Iterable[Any], invalid: MissingField) -> None:
    """Raise ``ValidationError(invalid)`` unless ``value`` is one of ``choices``."""
    if value not in choices:
        raise ValidationError(invalid, provider=provider)


class Service:
    """Base class for resource services.

    Holds the injected connector and tracer. Subclasses only describe their
    endpoints: the path, the required identifiers and the query parameters.

    Attributes:
        provider_name: Product name used in error messages
    """

    provider_name = "atlassian"

    def __init__(self, connector: Connector, tracer: Tracer | None = None) -> None:
        self._connector = connector
        self._tracer: Tracer = tracer or LoggingTracer()

    def _call(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        required: Sequence[tuple[Any, MissingField]] = (),
        validate: Callable[[], None] | None = None,
        query: Query | None = None,
        body: Any = None,
        content_type: str = "",
        result: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        """Validate, build, send and decode one API call.

        Every failure is recorded on the span before it propagates.

        Args:
            operation: Operation name recorded on the tracing span
            method: HTTP method
            path: API path with identifiers already substituted
            required: Ordered required-argument checks
            validate: Extra argument check run after ``required``; raises
                ``ValidationError`` on failure
            query: Optional query parameters
            body: Payload handed unchanged to the connector
            content_type: Explicit Content-Type for non-JSON bodies
            result: Type the response body is decoded into, None for no body

        Returns:
            Tuple of (decoded result or None, response envelope)

        Raises:
            ValidationError: If a required argument is missing or invalid. The
                connector is not used.
            AtlassianError: Connector errors, unchanged
        """
        with self._tracer.span(operation) as span:
            span.set_attribute("atlassian.product", self.provider_name)
            span.set_attribute("http.method", method)
            try:
                require(self.provider_name, *required)
                if validate is not None:
                    validate()
                url = endpoint(path, query)
                span.set_attribute("http.route", url)
                request = self._connector.new_request(method, url, content_type, body)
                return self._connector.call(request, result)
            except Exception as e:
                span.record_error(e)
                raise

    def _send(self, operation: str, method: str, path: str, **kwargs: Any) -> ResponseScheme:
        """Same as ``_call`` for operations without a response body."""
        _, response = self._call(operation, method, path, **kwargs)
        return response
