"""Shared fakes and sample data for the test suite."""

from typing import Any

from issue_triage.exceptions import LabelApiError, RemoteLookupFailure
from issue_triage.github_client.queries import (
    GET_ISSUE_PROJECT_ITEMS,
    GET_ORG_PROJECT_FIELDS,
    GET_USER_PROJECT_FIELDS,
    UPDATE_SINGLE_SELECT_FIELD,
)

PROJECT_ID = "PVT_project"
FIELD_ID = "PVTSSF_priority"
ITEM_ID = "PVTI_item"
ISSUE_NODE_ID = "I_issue"

PRIORITY_OPTIONS = {
    "BLOCKER": "opt-blocker",
    "High": "opt-high",
    "Normal": "opt-normal",
    "Low": "opt-low",
    "TBD": "opt-tbd",
}

BUG_REPORT_BODY = (
    "### Impacted plugin\n\n"
    "Jetpack, Boost\n\n"
    "### Platform (Simple and/or Atomic)\n\n"
    "Simple, Self-hosted\n\n"
    "### Impact\n\n"
    "All\n\n"
    "### Available workarounds?\n\n"
    "No and the platform is unusable\n"
)

class FakeLabelApi:
    """In-memory Label API recording every write."""

    def __init__(
        self,
        labels: list[str] | None = None,
        fail_list: bool = False,
        fail_add: bool = False,
    ):
        self.labels = list(labels or [])
        self.fail_list = fail_list
        self.fail_add = fail_add
        self.added: list[list[str]] = []

    def get_issue_labels(self, org: str, repo: str, issue_number: int) -> list[str]:
        if self.fail_list:
            raise LabelApiError(f"Error fetching labels for issue #{issue_number}")
        return list(self.labels)

    def add_issue_labels(
        self, org: str, repo: str, issue_number: int, labels: list[str]
    ) -> bool:
        if self.fail_add:
            raise LabelApiError(f"Error adding labels to issue #{issue_number}")
        self.added.append(list(labels))
        for label in labels:
            if label not in self.labels:
                self.labels.append(label)
        return True

class FakeBoardApi:
    """In-memory GitHub project board answering the board GraphQL documents."""

    def __init__(
        self,
        options: dict[str, str] | None = None,
        linked: bool = True,
        current_option_id: str | None = None,
        has_priority_field: bool = True,
        project_exists: bool = True,
        fail_on: str | None = None,
    ):
        self.options = dict(PRIORITY_OPTIONS if options is None else options)
        self.linked = linked
        self.current_option_id = current_option_id
        self.has_priority_field = has_priority_field
        self.project_exists = project_exists
        self.fail_on = fail_on
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.mutations = 0

    def query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((query, variables))
        if query in (GET_ORG_PROJECT_FIELDS, GET_USER_PROJECT_FIELDS):
            name = "schema"
        elif query == GET_ISSUE_PROJECT_ITEMS:
            name = "items"
        elif query == UPDATE_SINGLE_SELECT_FIELD:
            name = "mutation"
        else:
            raise AssertionError(f"Unexpected query: {query}")

        if self.fail_on == name:
            raise RemoteLookupFailure(f"{name} failed")
        return getattr(self, f"_{name}")(query, variables)

    def _schema(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        owner_key = "organization" if query == GET_ORG_PROJECT_FIELDS else "user"
        if not self.project_exists:
            return {owner_key: {"projectV2": None}}

        fields: list[dict[str, Any]] = [
            {"id": "PVTF_title", "name": "Title"},
            {
                "id": "PVTSSF_status",
                "name": "Status",
                "options": [{"id": "opt-todo", "name": "Todo"}],
            },
            {},
        ]
        if self.has_priority_field:
            fields.append(
                {
                    "id": FIELD_ID,
                    "name": "Priority",
                    "options": [
                        {"id": option_id, "name": name}
                        for name, option_id in self.options.items()
                    ],
                }
            )
        return {
            owner_key: {
                "projectV2": {
                    "id": PROJECT_ID,
                    "title": "Triage",
                    "fields": {"nodes": fields},
                }
            }
        }

    def _items(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        nodes: list[dict[str, Any]] = [
            {
                "id": "PVTI_other",
                "project": {"id": "PVT_other", "number": 3},
                "fieldValueByName": None,
            }
        ]
        if self.linked:
            value = (
                {"optionId": self.current_option_id, "name": "whatever"}
                if self.current_option_id
                else None
            )
            nodes.append(
                {
                    "id": ITEM_ID,
                    "project": {"id": PROJECT_ID, "number": 11},
                    "fieldValueByName": value,
                }
            )
        return {"node": {"id": variables["id"], "projectItems": {"nodes": nodes}}}

    def _mutation(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        self.mutations += 1
        payload = variables["input"]
        self.current_option_id = payload["value"]["singleSelectOptionId"]
        return {
            "updateProjectV2ItemFieldValue": {
                "projectV2Item": {"id": payload["itemId"]}
            }
        }
