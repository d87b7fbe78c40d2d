"""Confluence Cloud REST API v2 client."""

from atlassian_rest.confluence.v2.client import ConfluenceV2Client
from atlassian_rest.confluence.v2.page import PageService

__all__ = ["ConfluenceV2Client", "PageService"]
