"""Pydantic models for GitHub issue webhook events.

These models map to the `issues` webhook payload delivered to workflows.
API Reference: https://docs.github.com/en/webhooks/webhook-events-and-payloads#issues
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IssueAction(str, Enum):
    """Issue event actions the triage workflow is subscribed to."""

    OPENED = "opened"
    REOPENED = "reopened"
    LABELED = "labeled"
    EDITED = "edited"
    CLOSED = "closed"


class IssueEvent(BaseModel):
    """A single inbound issue event.

    Immutable once received; label state derived from it is always merged
    with a fresh label listing before decisions are made.
    """

    model_config = ConfigDict(frozen=True)

    action: IssueAction = Field(..., description="Action that triggered the event")
    issue_number: int = Field(..., description="Issue number within the repository")
    body: str = Field("", description="Issue body in markdown")
    current_labels: frozenset[str] = Field(
        default_factory=frozenset,
        description="Label names carried by the payload (may be stale)",
    )
    event_label: str | None = Field(
        None, description="Label involved in a 'labeled' action"
    )
    repository_owner: str = Field(..., description="Repository owner login")
    repository_name: str = Field(..., description="Repository name")
    issue_node_id: str = Field(..., description="GraphQL node id of the issue")

    @property
    def full_name(self) -> str:
        return f"{self.repository_owner}/{self.repository_name}"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "IssueEvent":
        """Build an event from a raw GitHub `issues` webhook payload."""
        issue = payload.get("issue") or {}
        repository = payload.get("repository") or {}
        label = payload.get("label") or {}

        return cls(
            action=payload.get("action"),
            issue_number=issue.get("number"),
            body=issue.get("body") or "",
            current_labels=frozenset(
                item["name"] for item in issue.get("labels") or [] if "name" in item
            ),
            event_label=label.get("name"),
            repository_owner=(repository.get("owner") or {}).get("login"),
            repository_name=repository.get("name"),
            issue_node_id=issue.get("node_id"),
        )
