"""Run triage for a single issue event."""

import logging

from ..config import TriageConfig
from ..exceptions import (
    ConfigurationError,
    InvalidBoardLink,
    LabelApiError,
    RemoteLookupFailure,
)
from ..github_client.client import LabelApi
from ..github_client.models import IssueAction, IssueEvent
from .board import ProjectBoardClient
from .labels import LabelState, is_relevant_event_label
from .models import PriorityTier, TriageOutcome, TriageReport, TriageState
from .parser import parse_platforms, parse_plugins, platform_labels, plugin_labels
from .priority import priority_from_body

logger = logging.getLogger(__name__)

NEW_ISSUE_ACTIONS = (IssueAction.OPENED, IssueAction.REOPENED)


def should_triage(event: IssueEvent) -> bool:
    """Whether the event calls for a triage run at all."""
    if event.action in NEW_ISSUE_ACTIONS:
        return True
    if event.action is IssueAction.LABELED:
        return is_relevant_event_label(event.event_label)
    return False


class TriageOrchestrator:
    """Sequence parsing, priority, board sync and labeling for one event.

    Board sync is best-effort: its failures are recorded on the report and
    never stop labels from being applied. Label API failures end the run.
    """

    def __init__(
        self,
        config: TriageConfig,
        labels: LabelApi,
        board: ProjectBoardClient,
    ):
        self.config = config
        self.labels = labels
        self.board = board

    def run(self, event: IssueEvent) -> TriageReport:
        report = TriageReport(issue_number=event.issue_number)

        if not should_triage(event):
            logger.info(
                "Nothing to triage for '%s' on issue #%s",
                event.action.value,
                event.issue_number,
            )
            report.state = TriageState.DONE
            return report

        try:
            self.config.validate_required()
        except ConfigurationError as e:
            logger.error("%s", e)
            report.outcome = TriageOutcome.SKIPPED
            report.state = TriageState.SKIPPED
            report.errors.append(str(e))
            return report

        try:
            current = self.labels.get_issue_labels(
                event.repository_owner, event.repository_name, event.issue_number
            )
        except LabelApiError as e:
            logger.error(
                "Could not list labels for issue #%s: %s", event.issue_number, e
            )
            report.outcome = TriageOutcome.FAILURE
            report.errors.append(str(e))
            return report

        label_state = LabelState(current, event.action, event.event_label)
        report.priority_labels = label_state.current_priority_labels()
        report.escalated = label_state.is_escalated()
        report.bug = label_state.is_bug_type()
        if report.priority_labels:
            logger.debug(
                "Issue #%s has the following priority labels: %s",
                event.issue_number,
                ", ".join(report.priority_labels),
            )
        else:
            logger.debug(
                "Issue #%s has no existing priority labels.", event.issue_number
            )

        plugins = parse_plugins(event.body)
        platforms = parse_platforms(event.body)
        report.state = TriageState.CONTENT_PARSED

        report.priority = priority_from_body(event.body)
        report.state = TriageState.PRIORITY_DECIDED
        logger.info(
            "Priority for issue #%s is %s", event.issue_number, report.priority.value
        )

        board_tier = label_state.existing_priority() or report.priority
        board_ok = self._sync_board(event, board_tier, report)

        if event.action in NEW_ISSUE_ACTIONS:
            wanted = plugin_labels(plugins) + platform_labels(platforms)
            if report.bug and not report.priority_labels:
                wanted.append(report.priority.label)

            to_add = label_state.missing(wanted)
            if to_add:
                try:
                    self.labels.add_issue_labels(
                        event.repository_owner,
                        event.repository_name,
                        event.issue_number,
                        to_add,
                    )
                except LabelApiError as e:
                    logger.error(
                        "Could not add labels to issue #%s: %s", event.issue_number, e
                    )
                    report.outcome = TriageOutcome.FAILURE
                    report.errors.append(str(e))
                    return report
                report.labels_added = to_add
            report.state = TriageState.LABELS_RECONCILED

        if board_ok:
            report.state = TriageState.DONE
        else:
            report.outcome = TriageOutcome.PARTIAL_FAILURE
            report.state = TriageState.PARTIAL_FAILURE
        return report

    def _sync_board(
        self, event: IssueEvent, tier: PriorityTier, report: TriageReport
    ) -> bool:
        """Mirror `tier` onto the board; return False if the sync failed."""
        try:
            board = self.board.resolve_board(self.config.project_board_url or "")
            report.board_sync = self.board.sync_priority(
                board, event.issue_node_id, tier
            )
        except (InvalidBoardLink, RemoteLookupFailure) as e:
            logger.warning("Board sync failed for issue #%s: %s", event.issue_number, e)
            report.errors.append(f"Board sync failed: {e}")
            return False

        logger.debug(
            "Board sync for issue #%s: %s",
            event.issue_number,
            report.board_sync.status.value,
        )
        report.state = TriageState.BOARD_SYNCED
        return True
