"""Main CLI entry point."""

import json
import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import TriageConfig
from ..exceptions import InvalidBoardLink, RemoteLookupFailure
from ..github_client.client import GitHubClient
from ..github_client.graphql import GraphQLClient
from ..github_client.models import IssueEvent
from ..triage.board import ProjectBoardClient
from ..triage.labels import BUG_LABEL
from ..triage.models import TriageOutcome, TriageReport
from ..triage.orchestrator import TriageOrchestrator, should_triage
from ..triage.parser import (
    parse_impact_signal,
    parse_platforms,
    parse_plugins,
    platform_labels,
    plugin_labels,
)
from ..triage.priority import classify_workaround, decide_signal
from .options import (
    BOARD_URL_OPTION,
    BODY_FILE_ARGUMENT,
    EVENT_PATH_OPTION,
    PROJECT_TOKEN_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

load_dotenv()

app = typer.Typer(
    name="issue-triage",
    help="Triage GitHub issues: priority, labels and project board sync",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

OUTCOME_STYLES = {
    TriageOutcome.SUCCESS: "green",
    TriageOutcome.PARTIAL_FAILURE: "yellow",
    TriageOutcome.SKIPPED: "red",
    TriageOutcome.FAILURE: "red",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _print_report(report: TriageReport) -> None:
    style = OUTCOME_STYLES[report.outcome]
    table = Table(title=f"Triage of issue #{report.issue_number}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Outcome", f"[{style}]{report.outcome.value}[/{style}]")
    table.add_row("State", report.state.value)
    table.add_row("Priority", report.priority.value if report.priority else "-")
    table.add_row("Priority labels", escape(", ".join(report.priority_labels)) or "-")
    table.add_row("Bug", "yes" if report.bug else "no")
    table.add_row("Escalated", "yes" if report.escalated else "no")
    table.add_row("Labels added", escape(", ".join(report.labels_added)) or "-")
    table.add_row(
        "Board", report.board_sync.status.value if report.board_sync else "-"
    )
    console.print(table)

    for error in report.errors:
        console.print(f"❌ [{style}]{escape(error)}[/{style}]")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    event_path: Path | None = EVENT_PATH_OPTION,
    token: str | None = TOKEN_OPTION,
    project_token: str | None = PROJECT_TOKEN_OPTION,
    board_url: str | None = BOARD_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Triage the issue described by a webhook event payload.

    Examples:
        # Inside a workflow triggered by `issues` events
        issue-triage run --board-url https://github.com/orgs/acme/projects/11
    """
    _configure_logging(verbose)

    if event_path is None:
        console.print(
            "❌ [red]Error: --event-path or GITHUB_EVENT_PATH is required[/red]"
        )
        raise typer.Exit(1)

    try:
        payload = json.loads(event_path.read_text())
        event = IssueEvent.from_payload(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        console.print(
            f"❌ [red]Error: could not read issue event: {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)

    if not should_triage(event):
        console.print(
            f"✅ [green]Nothing to triage for '{event.action.value}' on "
            f"{event.full_name}#{event.issue_number}[/green]"
        )
        return

    config = TriageConfig.from_env(
        github_token=token, project_token=project_token, project_board_url=board_url
    )
    if not config.is_configured():
        console.print(
            f"❌ [red]Skipping triage, missing configuration: "
            f"{', '.join(config.missing())}[/red]"
        )
        raise typer.Exit(1)

    with GraphQLClient(
        config.project_token or "",
        url=config.graphql_url,
        timeout=config.http_timeout,
    ) as graphql:
        orchestrator = TriageOrchestrator(
            config,
            labels=GitHubClient(config.github_token or ""),
            board=ProjectBoardClient(graphql),
        )
        report = orchestrator.run(event)

    _print_report(report)
    if report.outcome in (TriageOutcome.SKIPPED, TriageOutcome.FAILURE):
        raise typer.Exit(1)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def priority(body_file: str = BODY_FILE_ARGUMENT) -> None:
    """Preview what triage would infer from an issue body, without any API calls."""
    try:
        body = sys.stdin.read() if body_file == "-" else Path(body_file).read_text()
    except OSError as e:
        console.print(
            f"❌ [red]Error: could not read issue body: {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)

    signal = parse_impact_signal(body)
    plugins = parse_plugins(body)
    platforms = parse_platforms(body)
    tier = decide_signal(signal)

    table = Table(title="Triage preview")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Impact", signal.impact if signal else "-")
    table.add_row("Workaround", signal.workaround if signal else "-")
    table.add_row(
        "Workaround class",
        classify_workaround(signal.workaround if signal else None).value,
    )
    table.add_row("Priority", tier.value)
    labels = plugin_labels(plugins) + platform_labels(platforms)
    table.add_row("Labels", escape(", ".join(labels)) or "-")
    table.add_row(escape(f"Priority label (if {BUG_LABEL})"), escape(tier.label))
    console.print(table)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def board(
    board_url: str | None = BOARD_URL_OPTION,
    project_token: str | None = PROJECT_TOKEN_OPTION,
) -> None:
    """Show a project board's Priority field and its options."""
    config = TriageConfig.from_env(
        project_token=project_token, project_board_url=board_url
    )
    if not config.project_token or not config.project_board_url:
        console.print(
            "❌ [red]Error: a project token and board URL are required[/red]"
        )
        raise typer.Exit(1)

    try:
        with GraphQLClient(
            config.project_token, url=config.graphql_url, timeout=config.http_timeout
        ) as graphql:
            info = ProjectBoardClient(graphql).resolve_board(config.project_board_url)
    except (InvalidBoardLink, RemoteLookupFailure) as e:
        console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"📋 [blue]{info.owner_type} {info.owner_name}, project "
        f"#{info.project_number} ({info.project_node_id})[/blue]"
    )
    if info.priority_field is None:
        console.print("⚠️  [yellow]The board has no Priority field[/yellow]")
        return

    table = Table(title=f"Priority field {info.priority_field.field_id}")
    table.add_column("Option", style="cyan")
    table.add_column("Option id")
    for name, option_id in info.priority_field.options.items():
        table.add_row(name, option_id)
    console.print(table)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from issue_triage import __version__

    console.print(f"Issue Triage v{__version__}")


if __name__ == "__main__":
    app()
