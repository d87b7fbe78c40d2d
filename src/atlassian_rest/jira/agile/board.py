"""Scrum and Kanban boards (Jira Agile REST)."""

import logging

from atlassian_rest.core.exceptions import MissingField
from atlassian_rest.core.models import ResponseScheme
from atlassian_rest.core.request import Query
from atlassian_rest.jira.agile.models import (
    BoardConfigurationScheme,
    BoardIssuePageScheme,
    BoardPageScheme,
    BoardPayloadScheme,
    BoardProjectPageScheme,
    BoardScheme,
    BoardVersionPageScheme,
    EpicPageScheme,
    GetBoardsOptions,
    IssueOptionScheme,
    RankPayloadScheme,
    SprintPageScheme,
)
from atlassian_rest.jira.agile.service import AgileService

logger = logging.getLogger(__name__)


def issue_query(
    start: int,
    max_results: int,
    options: IssueOptionScheme | None,
    always_validate: bool = False,
) -> Query:
    """Query of an issue listing: pagination plus the optional JQL filter.

    Most listings only send ``validateQuery=false``. The backlog and epic
    listings send ``validateQuery`` in both states (``always_validate``).
    """
    query = Query().add("startAt", start).add("maxResults", max_results)
    if options is not None:
        if always_validate:
            query.add("validateQuery", options.validate_query)
        elif not options.validate_query:
            query.add("validateQuery", False)
        query.add_if("jql", options.jql)
        query.add_joined("expand", options.expand)
        query.add_joined("fields", options.fields)
    return query


class BoardService(AgileService):
    """Endpoints under ``/rest/agile/{version}/board``."""

    def get(self, board_id: int) -> tuple[BoardScheme, ResponseScheme]:
        """GET /rest/agile/{version}/board/{boardId}"""
        return self._call(
            "get_board",
            "GET",
            f"{self._api}/board/{board_id}",
            required=[(board_id, MissingField.BOARD_ID)],
            result=BoardScheme,
        )

    def create(self, payload: BoardPayloadScheme | dict) -> tuple[BoardScheme, ResponseScheme]:
        """POST /rest/agile/{version}/board"""
        return self._call(
            "create_board",
            "POST",
            f"{self._api}/board",
            body=payload,
            result=BoardScheme,
        )

    def filter(
        self, filter_id: int, start: int = 0, max_results: int = 50
    ) -> tuple[BoardPageScheme, ResponseScheme]:
        """Return the boards built on a saved filter.

        GET /rest/agile/{version}/board/filter/{filterId}
        """
        return self._call(
            "get_boards_by_filter",
            "GET",
            f"{self._api}/board/filter/{filter_id}",
            required=[(filter_id, MissingField.FILTER_ID)],
            query=Query().add("startAt", start).add("maxResults", max_results),
            result=BoardPageScheme,
        )

    def backlog(
        self,
        board_id: int,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """Return the issues in the backlog of a board.

        GET /rest/agile/{version}/board/{boardId}/backlog
        """
        return self._call(
            "get_board_backlog",
            "GET",
            f"{self._api}/board/{board_id}/backlog",
            required=[(board_id, MissingField.BOARD_ID)],
            query=issue_query(start, max_results, options, always_validate=True),
            result=BoardIssuePageScheme,
        )

    def configuration(self, board_id: int) -> tuple[BoardConfigurationScheme, ResponseScheme]:
        """Return the columns, filter, estimation and ranking settings of a board.

        GET /rest/agile/{version}/board/{boardId}/configuration
        """
        return self._call(
            "get_board_configuration",
            "GET",
            f"{self._api}/board/{board_id}/configuration",
            required=[(board_id, MissingField.BOARD_ID)],
            result=BoardConfigurationScheme,
        )

    def epics(
        self,
        board_id: int,
        start: int = 0,
        max_results: int = 50,
        done: bool = False,
    ) -> tuple[EpicPageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/board/{boardId}/epic"""
        query = Query().add("startAt", start).add("maxResults", max_results).add("done", done)
        return self._call(
            "get_board_epics",
            "GET",
            f"{self._api}/board/{board_id}/epic",
            required=[(board_id, MissingField.BOARD_ID)],
            query=query,
            result=EpicPageScheme,
        )

    def issues_without_epic(
        self,
        board_id: int,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """Return the issues of a board that belong to no epic.

        GET /rest/agile/{version}/board/{boardId}/epic/none/issue
        """
        return self._call(
            "get_board_issues_without_epic",
            "GET",
            f"{self._api}/board/{board_id}/epic/none/issue",
            required=[(board_id, MissingField.BOARD_ID)],
            query=issue_query(start, max_results, options),
            result=BoardIssuePageScheme,
        )

    def issues_by_epic(
        self,
        board_id: int,
        epic_id: int,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/board/{boardId}/epic/{epicId}/issue"""
        return self._call(
            "get_board_issues_by_epic",
            "GET",
            f"{self._api}/board/{board_id}/epic/{epic_id}/issue",
            required=[
                (board_id, MissingField.BOARD_ID),
                (epic_id, MissingField.EPIC_ID),
            ],
            query=issue_query(start, max_results, options),
            result=BoardIssuePageScheme,
        )

    def issues(
        self,
        board_id: int,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """Return every issue of a board, backlog included.

        GET /rest/agile/{version}/board/{boardId}/issue
        """
        return self._call(
            "get_board_issues",
            "GET",
            f"{self._api}/board/{board_id}/issue",
            required=[(board_id, MissingField.BOARD_ID)],
            query=issue_query(start, max_results, options),
            result=BoardIssuePageScheme,
        )

    def issues_by_sprint(
        self,
        board_id: int,
        sprint_id: int,
        start: int = 0,
        max_results: int = 50,
        options: IssueOptionScheme | None = None,
    ) -> tuple[BoardIssuePageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/board/{boardId}/sprint/{sprintId}/issue"""
        return self._call(
            "get_board_issues_by_sprint",
            "GET",
            f"{self._api}/board/{board_id}/sprint/{sprint_id}/issue",
            required=[
                (board_id, MissingField.BOARD_ID),
                (sprint_id, MissingField.SPRINT_ID),
            ],
            query=issue_query(start, max_results, options),
            result=BoardIssuePageScheme,
        )

    def move(self, board_id: int, payload: RankPayloadScheme | dict) -> ResponseScheme:
        """Move issues from the backlog to a board, optionally ranking them.

        POST /rest/agile/{version}/board/{boardId}/issue
        """
        return self._send(
            "move_issues_to_board",
            "POST",
            f"{self._api}/board/{board_id}/issue",
            required=[(board_id, MissingField.BOARD_ID)],
            body=payload,
        )

    def projects(
        self, board_id: int, start: int = 0, max_results: int = 50
    ) -> tuple[BoardProjectPageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/board/{boardId}/project"""
        return self._call(
            "get_board_projects",
            "GET",
            f"{self._api}/board/{board_id}/project",
            required=[(board_id, MissingField.BOARD_ID)],
            query=Query().add("startAt", start).add("maxResults", max_results),
            result=BoardProjectPageScheme,
        )

    def sprints(
        self,
        board_id: int,
        start: int = 0,
        max_results: int = 50,
        states: list[str] | None = None,
    ) -> tuple[SprintPageScheme, ResponseScheme]:
        """Return the sprints of a board.

        GET /rest/agile/{version}/board/{boardId}/sprint

        Args:
            board_id: Board ID
            start: Index of the first item
            max_results: Maximum number of items
            states: Any of ``future``, ``active`` and ``closed``
        """
        query = Query().add("startAt", start).add("maxResults", max_results).add_joined("state", states)
        return self._call(
            "get_board_sprints",
            "GET",
            f"{self._api}/board/{board_id}/sprint",
            required=[(board_id, MissingField.BOARD_ID)],
            query=query,
            result=SprintPageScheme,
        )

    def versions(
        self,
        board_id: int,
        start: int = 0,
        max_results: int = 50,
        released: bool = False,
    ) -> tuple[BoardVersionPageScheme, ResponseScheme]:
        """GET /rest/agile/{version}/board/{boardId}/version"""
        query = Query().add("startAt", start).add("maxResults", max_results).add("released", released)
        return self._call(
            "get_board_versions",
            "GET",
            f"{self._api}/board/{board_id}/version",
            required=[(board_id, MissingField.BOARD_ID)],
            query=query,
            result=BoardVersionPageScheme,
        )

    def delete(self, board_id: int) -> ResponseScheme:
        """DELETE /rest/agile/{version}/board/{boardId}"""
        logger.info("Deleting board %s", board_id)
        return self._send(
            "delete_board",
            "DELETE",
            f"{self._api}/board/{board_id}",
            required=[(board_id, MissingField.BOARD_ID)],
        )

    def gets(
        self,
        options: GetBoardsOptions | None = None,
        start: int = 0,
        max_results: int = 50,
    ) -> tuple[BoardPageScheme, ResponseScheme]:
        """Return the boards visible to the user.

        GET /rest/agile/{version}/board

        Args:
            options: Type, name, location, privacy and filter criteria
            start: Index of the first item
            max_results: Maximum number of items
        """
        query = Query().add("startAt", start).add("maxResults", max_results)
        if options is not None:
            query.add_if("type", options.board_type)
            query.add_if("name", options.board_name)
            query.add_if("projectKeyOrId", options.project_key_or_id)
            query.add_if("accountIdLocation", options.account_id_location)
            query.add_if("projectLocation", options.project_id_location)
            query.add_flag("includePrivate", options.include_private)
            query.add_flag("negateLocationFiltering", options.negate_location_filtering)
            query.add_if("orderBy", options.order_by)
            query.add_if("expand", options.expand)
            query.add_if("filterId", options.filter_id)

        return self._call(
            "get_boards",
            "GET",
            f"{self._api}/board",
            query=query,
            result=BoardPageScheme,
        )
