"""Confluence Cloud REST API v1 client."""

from atlassian_rest.confluence.client import ConfluenceClient
from atlassian_rest.confluence.content import ContentService
from atlassian_rest.confluence.space import SpaceService

__all__ = ["ConfluenceClient", "ContentService", "SpaceService"]
