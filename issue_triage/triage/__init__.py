"""Issue triage core: parsing, priority policy, label state and board sync."""

from .board import ProjectBoardClient, parse_board_link
from .labels import LabelState
from .models import (
    BoardItemLink,
    BoardSyncResult,
    ImpactSignal,
    PriorityTier,
    ProjectBoardInfo,
    TriageOutcome,
    TriageReport,
)
from .orchestrator import TriageOrchestrator
from .parser import parse_impact_signal, parse_platforms, parse_plugins
from .priority import decide, priority_from_body

__all__ = [
    "BoardItemLink",
    "BoardSyncResult",
    "ImpactSignal",
    "LabelState",
    "PriorityTier",
    "ProjectBoardClient",
    "ProjectBoardInfo",
    "TriageOrchestrator",
    "TriageOutcome",
    "TriageReport",
    "decide",
    "parse_board_link",
    "parse_impact_signal",
    "parse_platforms",
    "parse_plugins",
    "priority_from_body",
]
