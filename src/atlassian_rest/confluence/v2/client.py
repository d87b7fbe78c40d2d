"""Confluence Cloud client (REST API v2).

Example:
    from atlassian_rest.confluence.v2 import ConfluenceV2Client

    confluence = ConfluenceV2Client(site="https://example.atlassian.net")
    chunk, _ = confluence.page.gets_by_space(196613, limit=50)
    while chunk.next_cursor:
        chunk, _ = confluence.page.gets_by_space(196613, cursor=chunk.next_cursor, limit=50)
"""

from typing import Any

from atlassian_rest.common.base import AtlassianClient
from atlassian_rest.confluence.v2.attachment import AttachmentService
from atlassian_rest.confluence.v2.custom_content import CustomContentService
from atlassian_rest.confluence.v2.descendants import DescendantsService
from atlassian_rest.confluence.v2.folder import FolderService
from atlassian_rest.confluence.v2.page import PageService
from atlassian_rest.confluence.v2.space import SpaceService
from atlassian_rest.core.tracing import Tracer


class ConfluenceV2Client(AtlassianClient):
    """Confluence Cloud client for the v2 REST API.

    Attributes:
        page: Pages
        space: Spaces and space permissions
        attachment: Attachments
        custom_content: App-defined custom content
        folder: Folders
        descendants: Descendants of pages, whiteboards, databases, embeds and folders
    """

    provider_name = "confluence"

    def __init__(self, *args: Any, tracer: Tracer | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.page = PageService(self, tracer)
        self.space = SpaceService(self, tracer)
        self.attachment = AttachmentService(self, tracer)
        self.custom_content = CustomContentService(self, tracer)
        self.folder = FolderService(self, tracer)
        self.descendants = DescendantsService(self, tracer)
