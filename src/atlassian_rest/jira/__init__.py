"""Jira Cloud platform REST API client."""

from atlassian_rest.jira.client import JiraClient
from atlassian_rest.jira.service import JiraService

__all__ = ["JiraClient", "JiraService"]
