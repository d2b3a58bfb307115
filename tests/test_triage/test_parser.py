"""Tests for issue body parsing."""

import pytest

from issue_triage.triage.parser import (
    parse_impact_signal,
    parse_platforms,
    parse_plugins,
    platform_labels,
    plugin_labels,
)


class TestParsePlugins:
    """Test impacted plugin extraction."""

    def test_plugins_in_listed_order(self) -> None:
        body = "### Impacted plugin\n\nAlpha, Beta\n\n"
        assert parse_plugins(body) == ["Alpha", "Beta"]

    def test_drops_empty_entries_and_whitespace(self) -> None:
        body = "### Impacted plugin\n\n Alpha ,, Beta ,\n\n### Next\n"
        assert parse_plugins(body) == ["Alpha", "Beta"]

    def test_single_plugin(self) -> None:
        body = "Intro\n\n### Impacted plugin\n\nJetpack\n\n### Steps\n\n1. Go"
        assert parse_plugins(body) == ["Jetpack"]

    def test_windows_line_endings(self) -> None:
        body = "### Impacted plugin\r\n\r\nAlpha, Beta\r\n\r\n"
        assert parse_plugins(body) == ["Alpha", "Beta"]

    def test_empty_answer(self) -> None:
        assert parse_plugins("### Impacted plugin\n\n\n\n") == []


class TestParsePlatforms:
    """Test platform extraction."""

    def test_self_hosted_is_dropped(self) -> None:
        body = "### Platform (Simple and/or Atomic)\n\nSimple, Self-hosted, Atomic\n\n"
        assert parse_platforms(body) == ["Simple", "Atomic"]

    def test_only_self_hosted(self) -> None:
        body = "### Platform (Simple and/or Atomic)\n\nSelf-hosted\n\n"
        assert parse_platforms(body) == []

    def test_hyphenated_platform(self) -> None:
        body = "### Platform (Simple and/or Atomic)\n\nWoA, Self-hosted, VIP-Go\n\n"
        assert parse_platforms(body) == ["WoA", "VIP-Go"]


class TestParseImpactSignal:
    """Test impact and workaround extraction."""

    def test_signal_found(self) -> None:
        body = (
            "### Impact\n\nMost (> 50%)\n\n"
            "### Available workarounds?\n\nYes, easy to implement\n"
        )
        signal = parse_impact_signal(body)

        assert signal is not None
        assert signal.impact == "Most (> 50%)"
        assert signal.workaround == "Yes, easy to implement"

    def test_no_response_is_captured_verbatim(self) -> None:
        body = "### Impact\n\nOne\n\n### Available workarounds?\n\n_No response_\n"
        signal = parse_impact_signal(body)

        assert signal is not None
        assert signal.workaround == "_No response_"

    def test_only_impact_section(self) -> None:
        assert parse_impact_signal("### Impact\n\nAll\n\n### Steps\n\nx\n") is None


@pytest.mark.parametrize(
    "body",
    [
        None,
        "",
        "Something is broken, please help.",
        "### Impacted plugin\nAlpha\n",
        "### Platform (Simple and/or Atomic)\n\nSimple",
        "### Impact\n\nAll\n",
    ],
)
def test_bodies_without_markers_yield_nothing(body: str | None) -> None:
    """Bodies that do not follow the template never raise."""
    assert parse_plugins(body) == []
    assert parse_platforms(body) == []
    assert parse_impact_signal(body) is None


def test_label_names() -> None:
    assert plugin_labels(["Jetpack", "Boost"]) == ["[Plugin] Jetpack", "[Plugin] Boost"]
    assert platform_labels(["Simple"]) == ["[Platform] Simple"]
