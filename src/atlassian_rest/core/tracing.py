"""Per-call tracing spans.

Services receive a tracer at construction time and open one span per
operation. The default tracer writes spans to the standard logging system;
``NoopTracer`` disables tracing entirely.

Example:
    from atlassian_rest.core.tracing import LoggingTracer

    tracer = LoggingTracer()
    with tracer.span("get_page") as span:
        span.set_attribute("confluence.page.id", 200001)
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Span(Protocol):
    """A single traced operation."""

    def set_attribute(self, key: str, value: Any) -> None:
        """Attach an attribute to the span."""

    def record_error(self, error: BaseException) -> None:
        """Mark the span as failed."""


class Tracer(Protocol):
    """Opens spans around service calls."""

    def span(self, operation: str) -> Any:
        """Return a context manager yielding a ``Span`` for ``operation``."""


class _LoggingSpan:
    def __init__(self, operation: str) -> None:
        self.attributes: dict[str, Any] = {"operation.name": operation}
        self.error: BaseException | None = None

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def record_error(self, error: BaseException) -> None:
        self.error = error


class LoggingTracer:
    """Tracer that reports each span through ``logging``.

    Span starts and successful ends are logged at debug level, failures at
    warning level, together with the span attributes and the elapsed time.
    """

    def __init__(self, name: str = __name__) -> None:
        self._logger = logging.getLogger(name)

    @contextmanager
    def span(self, operation: str) -> Iterator[_LoggingSpan]:
        current = _LoggingSpan(operation)
        started = time.perf_counter()
        self._logger.debug("span start %s", operation)
        try:
            yield current
        except BaseException as e:
            current.record_error(e)
            raise
        finally:
            elapsed = (time.perf_counter() - started) * 1000
            if current.error is not None:
                self._logger.warning(
                    "span failed %s after %.1f ms: %s %s",
                    operation,
                    elapsed,
                    current.error,
                    current.attributes,
                )
            else:
                self._logger.debug(
                    "span end %s after %.1f ms %s",
                    operation,
                    elapsed,
                    current.attributes,
                )


class _NoopSpan:
    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def record_error(self, error: BaseException) -> None:
        pass


class NoopTracer:
    """Tracer that records nothing."""

    @contextmanager
    def span(self, operation: str) -> Iterator[_NoopSpan]:
        yield _NoopSpan()
