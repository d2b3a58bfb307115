"""Label state for an issue at the time of a triage event."""

import re

from ..github_client.models import IssueAction
from .models import PriorityTier
from .priority import tier_from_label

PRIORITY_PATTERN = re.compile(r"^\[Pri\].*$")
ESCALATED_PATTERN = re.compile(r"^\[Status\] Escalated.*$")

ESCALATED_LABELS = frozenset({"[Status] Escalated", "[Status] Escalated to Kitkat"})
BUG_LABEL = "[Type] Bug"


def is_relevant_event_label(label: str | None) -> bool:
    """Whether adding this label should re-run triage for the issue."""
    if not label:
        return False
    return bool(
        PRIORITY_PATTERN.match(label)
        or ESCALATED_PATTERN.match(label)
        or label == BUG_LABEL
    )


class LabelState:
    """Labels on an issue, merged with the label of an in-flight event.

    A `labeled` event can arrive before the label listing reflects the new
    label, so the event label is considered alongside the fetched snapshot.
    """

    def __init__(
        self,
        labels: list[str] | set[str] | frozenset[str],
        action: IssueAction | str,
        event_label: str | None = None,
    ):
        self.labels = list(dict.fromkeys(labels))
        self.action = IssueAction(action)
        self.event_label = event_label

    def _event_label(self) -> str | None:
        if self.action is IssueAction.LABELED and self.event_label:
            return self.event_label
        return None

    def current_priority_labels(self) -> list[str]:
        """Priority labels on the issue, including one being added right now."""
        labels = [label for label in self.labels if PRIORITY_PATTERN.match(label)]
        event_label = self._event_label()
        if (
            event_label
            and PRIORITY_PATTERN.match(event_label)
            and event_label not in labels
        ):
            labels.append(event_label)
        return labels

    def is_escalated(self) -> bool:
        if ESCALATED_LABELS.intersection(self.labels):
            return True
        # The legacy alias is only ever found on existing issues
        event_label = self._event_label()
        return bool(event_label and ESCALATED_PATTERN.match(event_label))

    def is_bug_type(self) -> bool:
        return BUG_LABEL in self.labels or self._event_label() == BUG_LABEL

    def existing_priority(self) -> PriorityTier | None:
        """Most severe tier among the current priority labels."""
        tiers = [
            tier
            for tier in map(tier_from_label, self.current_priority_labels())
            if tier is not None
        ]
        if not tiers:
            return None
        return max(tiers, key=lambda tier: tier.severity)

    def missing(self, labels: list[str]) -> list[str]:
        """Labels from `labels` not already on the issue, de-duplicated."""
        present = set(self.labels)
        event_label = self._event_label()
        if event_label:
            present.add(event_label)
        return [label for label in dict.fromkeys(labels) if label not in present]
