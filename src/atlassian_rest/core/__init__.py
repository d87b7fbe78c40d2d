"""Connector contract, request building and shared models."""

from atlassian_rest.core.exceptions import AtlassianError, MissingField, ValidationError
from atlassian_rest.core.interfaces import Connector
from atlassian_rest.core.models import AtlassianModel, ResponseScheme
from atlassian_rest.core.request import Query, Service, endpoint, require
from atlassian_rest.core.tracing import LoggingTracer, NoopTracer, Tracer

__all__ = [
    "AtlassianError",
    "MissingField",
    "ValidationError",
    "Connector",
    "AtlassianModel",
    "ResponseScheme",
    "Query",
    "Service",
    "endpoint",
    "require",
    "LoggingTracer",
    "NoopTracer",
    "Tracer",
]
