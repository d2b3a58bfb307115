"""Mirror issue priority onto a GitHub Projects (v2) board.

The board is reached through a chain of GraphQL lookups: owner -> project ->
field schema, then issue -> project item -> field value. Each step needs ids
returned by the previous one, so the calls are issued sequentially.
"""

import logging
import re
from typing import Any

from ..exceptions import InvalidBoardLink, RemoteLookupFailure
from ..github_client.graphql import GraphQueryApi
from ..github_client.queries import (
    GET_ISSUE_PROJECT_ITEMS,
    GET_ORG_PROJECT_FIELDS,
    GET_USER_PROJECT_FIELDS,
    UPDATE_SINGLE_SELECT_FIELD,
)
from .models import (
    BoardItemLink,
    BoardSyncResult,
    BoardSyncStatus,
    PriorityField,
    PriorityTier,
    ProjectBoardInfo,
)

logger = logging.getLogger(__name__)

BOARD_LINK_PATTERN = re.compile(
    r"^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)"
    r"/projects/(?P<project_number>\d+)"
)

PRIORITY_FIELD_NAME = "Priority"


def parse_board_link(link: str) -> ProjectBoardInfo:
    """Parse a project board URL into owner and project number.

    Raises:
        InvalidBoardLink: If the URL is not a GitHub project URL
    """
    match = BOARD_LINK_PATTERN.match((link or "").strip())
    if not match:
        raise InvalidBoardLink(link)

    return ProjectBoardInfo(
        # The GraphQL API names owners 'organization' or 'user'
        owner_type="organization" if match.group("owner_type") == "orgs" else "user",
        owner_name=match.group("owner_name"),
        project_number=int(match.group("project_number")),
    )


class ProjectBoardClient:
    """Reads a board's Priority schema and sets Priority on issue items."""

    def __init__(self, api: GraphQueryApi, field_name: str = PRIORITY_FIELD_NAME):
        self.api = api
        self.field_name = field_name

    def resolve_board(self, link: str) -> ProjectBoardInfo:
        """Resolve a board URL into its node id and current Priority field.

        Raises:
            InvalidBoardLink: If the URL cannot be parsed
            RemoteLookupFailure: If the project cannot be read
        """
        info = parse_board_link(link)
        logger.debug(
            "Project info: owner type %s, owner %s, number %s",
            info.owner_type,
            info.owner_name,
            info.project_number,
        )

        query = (
            GET_USER_PROJECT_FIELDS
            if info.owner_type == "user"
            else GET_ORG_PROJECT_FIELDS
        )
        data = self.api.query(
            query, {"owner": info.owner_name, "number": info.project_number}
        )

        project = (data.get(info.owner_type) or {}).get("projectV2")
        if not project or not project.get("id"):
            raise RemoteLookupFailure(
                f"Project not found: {info.owner_name}/projects/{info.project_number}"
            )

        info.project_node_id = project["id"]
        info.priority_field = self._extract_priority_field(project)
        if info.priority_field is None:
            logger.info(
                "Project %s has no '%s' field", info.project_node_id, self.field_name
            )
        return info

    def _extract_priority_field(self, project: dict[str, Any]) -> PriorityField | None:
        for field in (project.get("fields") or {}).get("nodes") or []:
            if field and field.get("name") == self.field_name:
                return PriorityField(
                    field_id=field["id"],
                    options={
                        option["name"]: option["id"]
                        for option in field.get("options") or []
                    },
                )
        return None

    def find_board_item(
        self, issue_node_id: str, board: ProjectBoardInfo
    ) -> BoardItemLink | None:
        """Find the issue's item on the board, or None if it is not tracked there."""
        data = self.api.query(
            GET_ISSUE_PROJECT_ITEMS, {"id": issue_node_id, "fieldName": self.field_name}
        )
        node = data.get("node") or {}
        items = (node.get("projectItems") or {}).get("nodes") or []

        for item in items:
            project = (item or {}).get("project") or {}
            if project.get("id") == board.project_node_id:
                value = item.get("fieldValueByName") or {}
                return BoardItemLink(
                    item_id=item["id"],
                    project_id=project["id"],
                    issue_node_id=issue_node_id,
                    current_option_id=value.get("optionId"),
                )

        logger.debug(
            "Issue %s is not on project %s", issue_node_id, board.project_node_id
        )
        return None

    def resolve_item_node_id(self, issue_node_id: str, board: ProjectBoardInfo) -> str:
        """Get the project item node id needed to update fields of an issue.

        Raises:
            RemoteLookupFailure: If the issue is not on the board
        """
        link = self.find_board_item(issue_node_id, board)
        if link is None:
            raise RemoteLookupFailure(
                f"Issue {issue_node_id} is not an item of project "
                f"{board.project_node_id}"
            )
        return link.item_id

    def set_single_select_field(
        self, field_id: str, item_id: str, project_id: str, option_id: str
    ) -> bool:
        """Set a single-select field on a project item.

        Returns:
            True when GitHub confirms the update for the same item
        """
        data = self.api.query(
            UPDATE_SINGLE_SELECT_FIELD,
            {
                "input": {
                    "fieldId": field_id,
                    "itemId": item_id,
                    "projectId": project_id,
                    "value": {"singleSelectOptionId": option_id},
                }
            },
        )
        result = data.get("updateProjectV2ItemFieldValue") or {}
        updated_id = (result.get("projectV2Item") or {}).get("id")
        return updated_id == item_id

    def sync_priority(
        self, board: ProjectBoardInfo, issue_node_id: str, tier: PriorityTier
    ) -> BoardSyncResult:
        """Mirror a priority tier into the board's Priority field.

        Raises:
            RemoteLookupFailure: If a lookup or the write fails
        """
        if board.priority_field is None or board.project_node_id is None:
            return BoardSyncResult(status=BoardSyncStatus.NO_PRIORITY_FIELD, tier=tier)

        option_id = board.option_id_for(tier)
        if option_id is None:
            logger.info(
                "Priority %s does not exist as an option on the project board.",
                tier.value,
            )
            return BoardSyncResult(status=BoardSyncStatus.MISSING_OPTION, tier=tier)

        link = self.find_board_item(issue_node_id, board)
        if link is None:
            return BoardSyncResult(status=BoardSyncStatus.NOT_LINKED, tier=tier)

        if link.current_option_id == option_id:
            logger.debug("Item %s already has priority %s", link.item_id, tier.value)
            return BoardSyncResult(
                status=BoardSyncStatus.UNCHANGED, tier=tier, item_id=link.item_id
            )

        if not self.set_single_select_field(
            board.priority_field.field_id, link.item_id, link.project_id, option_id
        ):
            raise RemoteLookupFailure(
                f"Project did not confirm the priority update for item {link.item_id}"
            )

        logger.info("Set board priority of item %s to %s", link.item_id, tier.value)
        return BoardSyncResult(
            status=BoardSyncStatus.UPDATED, tier=tier, item_id=link.item_id
        )
