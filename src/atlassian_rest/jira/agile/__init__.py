"""Jira Software (Agile) REST API client."""

from atlassian_rest.jira.agile.client import AgileClient

__all__ = ["AgileClient"]
