"""Jira Software client for the Agile REST API.

Example:
    from atlassian_rest.jira.agile import AgileClient

    agile = AgileClient(site="https://example.atlassian.net")
    sprints, _ = agile.board.sprints(4, states=["active"])
    for sprint in sprints.values:
        agile.sprint.close(sprint.id)
"""

from typing import Any

from atlassian_rest.common.base import AtlassianClient
from atlassian_rest.core.tracing import Tracer
from atlassian_rest.jira.agile.board import BoardService
from atlassian_rest.jira.agile.epic import EpicService
from atlassian_rest.jira.agile.service import DEFAULT_AGILE_VERSION
from atlassian_rest.jira.agile.sprint import SprintService


class AgileClient(AtlassianClient):
    """Jira Software client.

    Attributes:
        board: Boards and their issues, epics, sprints and versions
        epic: Epics
        sprint: Sprints
    """

    provider_name = "agile"

    def __init__(
        self,
        *args: Any,
        version: str = DEFAULT_AGILE_VERSION,
        tracer: Tracer | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.board = BoardService(self, version, tracer)
        self.epic = EpicService(self, version, tracer)
        self.sprint = SprintService(self, version, tracer)
