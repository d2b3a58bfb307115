"""Priority decision matrix for bug reports."""

import re

from .models import ImpactSignal, PriorityTier, WorkaroundAvailability
from .parser import parse_impact_signal

NO_RESPONSE = "_No response_"

WORKAROUND_ANSWERS = {
    "No and the platform is unusable": WorkaroundAvailability.NONE_UNUSABLE,
    "No but the platform is still usable": WorkaroundAvailability.NONE_USABLE,
    "Yes, difficult to implement": WorkaroundAvailability.YES_DIFFICULT,
}

IMPACT_ALL = "All"
IMPACT_MOST = "Most (> 50%)"
IMPACT_ONE = "One"

PRIORITY_LABEL_PATTERN = re.compile(r"^\[Pri\]\s*(?P<tier>.*)$")


def classify_workaround(answer: str | None) -> WorkaroundAvailability:
    """Classify a free-text workaround answer.

    Any answer that is not one of the known "no"/"difficult" choices and is
    not blank counts as an easy workaround.
    """
    answer = (answer or "").strip()
    if not answer or answer == NO_RESPONSE:
        return WorkaroundAvailability.UNSPECIFIED
    return WORKAROUND_ANSWERS.get(answer, WorkaroundAvailability.YES_EASY)


def decide(impact: str | None, workaround: str | None) -> PriorityTier:
    """Map impact breadth and workaround availability to a priority tier.

    No workaround on an unusable platform is a BLOCKER unless only one
    site is impacted. Note the matrix rates "all impacted, no workaround"
    as BLOCKER and "one impacted, no workaround" as High.
    """
    impact = (impact or "").strip()
    availability = classify_workaround(workaround)

    if availability is WorkaroundAvailability.NONE_UNUSABLE:
        return PriorityTier.HIGH if impact == IMPACT_ONE else PriorityTier.BLOCKER
    if availability is WorkaroundAvailability.NONE_USABLE:
        return PriorityTier.HIGH
    if availability is WorkaroundAvailability.YES_DIFFICULT:
        return PriorityTier.HIGH if impact == IMPACT_ALL else PriorityTier.NORMAL
    if availability is WorkaroundAvailability.YES_EASY:
        if impact in (IMPACT_ALL, IMPACT_MOST):
            return PriorityTier.NORMAL
        return PriorityTier.LOW
    return PriorityTier.TBD


def decide_signal(signal: ImpactSignal | None) -> PriorityTier:
    if signal is None:
        return PriorityTier.TBD
    return decide(signal.impact, signal.workaround)


def priority_from_body(body: str | None) -> PriorityTier:
    """Parse an issue body and decide its priority (TBD when not templated)."""
    return decide_signal(parse_impact_signal(body))


def tier_from_label(label: str) -> PriorityTier | None:
    """Map a "[Pri] <tier>" label to its tier, or None if it is not one."""
    match = PRIORITY_LABEL_PATTERN.match(label)
    if not match:
        return None
    suffix = match.group("tier").strip()
    for tier in PriorityTier:
        if tier.value.lower() == suffix.lower():
            return tier
    return None
