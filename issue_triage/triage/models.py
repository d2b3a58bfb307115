"""Pydantic models for triage decisions, board state and run reports."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PriorityTier(str, Enum):
    """Priority tiers, named exactly as the labels and board options are."""

    BLOCKER = "BLOCKER"
    HIGH = "High"
    NORMAL = "Normal"
    LOW = "Low"
    TBD = "TBD"

    @property
    def severity(self) -> int:
        """Higher is more severe; TBD sorts below every decided tier."""
        return _SEVERITY[self]

    @property
    def label(self) -> str:
        return f"[Pri] {self.value}"


_SEVERITY = {
    PriorityTier.BLOCKER: 4,
    PriorityTier.HIGH: 3,
    PriorityTier.NORMAL: 2,
    PriorityTier.LOW: 1,
    PriorityTier.TBD: 0,
}


class WorkaroundAvailability(str, Enum):
    """Classified answer to the "Available workarounds?" template question."""

    NONE_UNUSABLE = "none-unusable"
    NONE_USABLE = "none-usable"
    YES_DIFFICULT = "yes-difficult"
    YES_EASY = "yes-easy"
    UNSPECIFIED = "unspecified"


class ImpactSignal(BaseModel):
    """Raw impact and workaround answers from an issue body."""

    model_config = ConfigDict(frozen=True)

    impact: str = Field("", description="Answer to 'Impact', e.g. 'Most (> 50%)'")
    workaround: str = Field("", description="Answer to 'Available workarounds?'")


class PriorityField(BaseModel):
    """The board's single-select Priority field."""

    field_id: str = Field(..., description="Node id of the field")
    options: dict[str, str] = Field(
        default_factory=dict, description="Option name -> option id"
    )


class ProjectBoardInfo(BaseModel):
    """Identity and Priority schema of a project board, as currently defined."""

    owner_type: str = Field(..., description="'organization' or 'user'")
    owner_name: str = Field(..., description="Login of the board owner")
    project_number: int = Field(..., description="Project number from the URL")
    project_node_id: str | None = Field(None, description="Node id of the project")
    priority_field: PriorityField | None = Field(
        None, description="Priority field, when the board defines one"
    )

    def option_id_for(self, tier: PriorityTier) -> str | None:
        if self.priority_field is None:
            return None
        return self.priority_field.options.get(tier.value)


class BoardItemLink(BaseModel):
    """An issue's item on a project board."""

    item_id: str = Field(..., description="Node id of the project item")
    project_id: str = Field(..., description="Node id of the project")
    issue_node_id: str = Field(..., description="Node id of the issue")
    current_option_id: str | None = Field(
        None, description="Priority option currently set on the item"
    )


class BoardSyncStatus(str, Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    NOT_LINKED = "not_linked"
    NO_PRIORITY_FIELD = "no_priority_field"
    MISSING_OPTION = "missing_option"


class BoardSyncResult(BaseModel):
    """What happened when mirroring a priority onto the board."""

    status: BoardSyncStatus
    tier: PriorityTier
    item_id: str | None = None


class TriageOutcome(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    PARTIAL_FAILURE = "partial_failure"
    FAILURE = "failure"


class TriageState(str, Enum):
    """Steps of a triage run, in order, plus the early exits."""

    START = "start"
    CONTENT_PARSED = "content_parsed"
    PRIORITY_DECIDED = "priority_decided"
    BOARD_SYNCED = "board_synced"
    LABELS_RECONCILED = "labels_reconciled"
    DONE = "done"
    SKIPPED = "skipped"
    PARTIAL_FAILURE = "partial_failure"


class TriageReport(BaseModel):
    """Result of triaging one issue event."""

    outcome: TriageOutcome = TriageOutcome.SUCCESS
    state: TriageState = TriageState.START
    issue_number: int
    priority: PriorityTier | None = None
    priority_labels: list[str] = Field(default_factory=list)
    escalated: bool = False
    bug: bool = False
    labels_added: list[str] = Field(default_factory=list)
    board_sync: BoardSyncResult | None = None
    errors: list[str] = Field(default_factory=list)
