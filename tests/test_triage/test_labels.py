"""Tests for label state merging."""

import pytest

from issue_triage.github_client.models import IssueAction
from issue_triage.triage.labels import LabelState, is_relevant_event_label
from issue_triage.triage.models import PriorityTier


class TestPriorityLabels:
    """Test priority label detection."""

    def test_existing_labels(self) -> None:
        state = LabelState(["[Type] Bug", "[Pri] High"], IssueAction.OPENED)
        assert state.current_priority_labels() == ["[Pri] High"]

    def test_event_label_counts_when_labeled(self) -> None:
        state = LabelState(["[Type] Bug"], IssueAction.LABELED, "[Pri] Low")
        assert state.current_priority_labels() == ["[Pri] Low"]

    def test_event_label_not_duplicated(self) -> None:
        state = LabelState(["[Pri] Low"], "labeled", "[Pri] Low")
        assert state.current_priority_labels() == ["[Pri] Low"]

    def test_event_label_ignored_for_other_actions(self) -> None:
        state = LabelState([], IssueAction.OPENED, "[Pri] Low")
        assert state.current_priority_labels() == []

    def test_existing_priority_picks_most_severe(self) -> None:
        state = LabelState(["[Pri] Low"], IssueAction.LABELED, "[Pri] BLOCKER")
        assert state.existing_priority() is PriorityTier.BLOCKER

    def test_existing_priority_ignores_unknown_suffix(self) -> None:
        state = LabelState(["[Pri] Someday"], IssueAction.OPENED)
        assert state.current_priority_labels() == ["[Pri] Someday"]
        assert state.existing_priority() is None


class TestEscalation:
    """Test escalation detection."""

    @pytest.mark.parametrize(
        "labels", [["[Status] Escalated"], ["[Status] Escalated to Kitkat"]]
    )
    def test_existing_escalation_labels(self, labels: list[str]) -> None:
        assert LabelState(labels, IssueAction.OPENED).is_escalated()

    def test_event_label_escalation(self) -> None:
        state = LabelState([], IssueAction.LABELED, "[Status] Escalated")
        assert state.is_escalated()

    def test_not_escalated(self) -> None:
        state = LabelState(["[Status] Needs Triage"], IssueAction.LABELED, "[Pri] Low")
        assert not state.is_escalated()


class TestBugType:
    """Test bug type detection."""

    def test_existing_bug_label(self) -> None:
        assert LabelState(["[Type] Bug"], IssueAction.OPENED).is_bug_type()

    def test_bug_label_being_added(self) -> None:
        assert LabelState([], IssueAction.LABELED, "[Type] Bug").is_bug_type()

    def test_similar_label_is_not_bug(self) -> None:
        state = LabelState(["[Type] Bug Report"], IssueAction.OPENED)
        assert not state.is_bug_type()


def test_missing_skips_present_and_duplicate_labels() -> None:
    state = LabelState(["[Plugin] Jetpack"], IssueAction.LABELED, "[Type] Bug")
    wanted = ["[Plugin] Jetpack", "[Plugin] Boost", "[Plugin] Boost", "[Type] Bug"]
    assert state.missing(wanted) == ["[Plugin] Boost"]


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("[Pri] High", True),
        ("[Status] Escalated", True),
        ("[Status] Escalated to Kitkat", True),
        ("[Type] Bug", True),
        ("[Type] Enhancement", False),
        ("[Plugin] Jetpack", False),
        (None, False),
    ],
)
def test_relevant_event_labels(label: str | None, expected: bool) -> None:
    assert is_relevant_event_label(label) is expected
