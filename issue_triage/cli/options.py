"""Shared CLI option definitions."""

import typer

EVENT_PATH_OPTION = typer.Option(
    None,
    "--event-path",
    "-e",
    envvar="GITHUB_EVENT_PATH",
    help="Path to the issues webhook payload (defaults to $GITHUB_EVENT_PATH)",
)

TOKEN_OPTION = typer.Option(
    None, "--token", help="Automation token (defaults to $GITHUB_TOKEN)"
)

PROJECT_TOKEN_OPTION = typer.Option(
    None,
    "--project-token",
    help="Token with project board permissions "
    "(defaults to $PROJECT_AUTOMATION_TOKEN)",
)

BOARD_URL_OPTION = typer.Option(
    None,
    "--board-url",
    "-b",
    help="Project board URL (defaults to $PROJECT_BOARD_URL)",
)

BODY_FILE_ARGUMENT = typer.Argument(
    ..., help="Markdown file holding an issue body ('-' for stdin)"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Show debug logging"
)
