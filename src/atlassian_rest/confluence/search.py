"""CQL search (REST v1)."""

from atlassian_rest.confluence.models import SearchContentOptions, SearchPageScheme
from atlassian_rest.confluence.service import CONFLUENCE_API_V1, ConfluenceService
from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query


class SearchService(ConfluenceService):
    """Search content and users with the Confluence Query Language."""

    def content(
        self, cql: str, options: SearchContentOptions | None = None
    ) -> tuple[SearchPageScheme, ResponseScheme]:
        """Search content.

        GET /wiki/rest/api/search

        Args:
            cql: CQL query, e.g. ``type=page AND space=DEV``
            options: Context, pagination (offset or cursor), excerpt and
                archive filters

        Returns:
            Tuple of (search page, response)

        Raises:
            ValidationError: If ``cql`` is empty
        """
        query = Query().add("cql", cql)
        if options is not None:
            query.add_if("cqlcontext", options.context)
            query.add_if("cursor", options.cursor)
            query.add_flag("next", options.next)
            query.add_flag("prev", options.prev)
            query.add_if("limit", options.limit)
            query.add_if("start", options.start)
            query.add_flag("includeArchivedSpaces", options.include_archived_spaces)
            query.add_flag("excludeCurrentSpaces", options.exclude_current_spaces)
            query.add_if("excerpt", options.excerpt)
            query.add_if("sitePermissionTypeFilter", options.site_permission_type_filter)
            query.add_joined("expand", options.expand)

        return self._call(
            "search_content",
            "GET",
            f"{CONFLUENCE_API_V1}/search",
            required=[(cql, MissingField.CQL)],
            query=query,
            result=SearchPageScheme,
        )

    def users(
        self,
        cql: str,
        start: int = 0,
        limit: int = 25,
        expand: list[str] | None = None,
    ) -> tuple[SearchPageScheme, ResponseScheme]:
        """Search users, e.g. ``type=user AND user.fullname~jane``.

        GET /wiki/rest/api/search/user
        """
        query = (
            Query()
            .add("cql", cql)
            .add("start", start)
            .add("limit", limit)
            .add_joined("expand", expand)
        )
        return self._call(
            "search_users",
            "GET",
            f"{CONFLUENCE_API_V1}/search/user",
            required=[(cql, MissingField.CQL)],
            query=query,
            result=SearchPageScheme,
        )
