"""Confluence Cloud client (REST API v1).

Example:
    from atlassian_rest.confluence import ConfluenceClient

    confluence = ConfluenceClient(
        site="https://example.atlassian.net",
        email="user@example.com",
        api_token="...",
    )
    page, response = confluence.content.get("11727271", expand=["body.storage"])
    results, _ = confluence.search.content("type=page AND space=DEV")
"""

from typing import Any

from atlassian_rest.common.base import AtlassianClient
from atlassian_rest.confluence.attachment import ContentAttachmentService
from atlassian_rest.confluence.children import ChildrenDescendantService
from atlassian_rest.confluence.comment import CommentService
from atlassian_rest.confluence.content import ContentService
from atlassian_rest.confluence.label import LabelService
from atlassian_rest.confluence.permission import ContentPermissionService
from atlassian_rest.confluence.property import PropertyService
from atlassian_rest.confluence.restriction import (
    RestrictionOperationGroupService,
    RestrictionOperationService,
    RestrictionOperationUserService,
    RestrictionService,
)
from atlassian_rest.confluence.search import SearchService
from atlassian_rest.confluence.space import SpacePermissionService, SpaceService
from atlassian_rest.confluence.template import TemplateService
from atlassian_rest.confluence.version import VersionService
from atlassian_rest.core.tracing import Tracer


class ConfluenceClient(AtlassianClient):
    """Confluence Cloud client for the v1 REST API.

    Attributes:
        content: Pages, blog posts and everything nested under them
        space: Spaces and space permissions
        search: CQL search
        template: Page templates
    """

    provider_name = "confluence"

    def __init__(self, *args: Any, tracer: Tracer | None = None, **kwargs: Any) -> None:
        """Initialize the client.

        Accepts the arguments of ``AtlassianClient`` plus an optional tracer
        shared by every service.
        """
        super().__init__(*args, **kwargs)

        restriction_operation = RestrictionOperationService(
            self,
            group=RestrictionOperationGroupService(self, tracer),
            user=RestrictionOperationUserService(self, tracer),
            tracer=tracer,
        )
        self.content = ContentService(
            self,
            attachment=ContentAttachmentService(self, tracer),
            children_descendant=ChildrenDescendantService(self, tracer),
            comment=CommentService(self, tracer),
            permission=ContentPermissionService(self, tracer),
            label=LabelService(self, tracer),
            property=PropertyService(self, tracer),
            restriction=RestrictionService(self, operation=restriction_operation, tracer=tracer),
            version=VersionService(self, tracer),
            tracer=tracer,
        )
        self.space = SpaceService(self, permission=SpacePermissionService(self, tracer), tracer=tracer)
        self.search = SearchService(self, tracer)
        self.template = TemplateService(self, tracer)
