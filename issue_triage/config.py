"""Configuration for a triage run."""

import os

from pydantic import BaseModel, Field

from .exceptions import ConfigurationError

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


class TriageConfig(BaseModel):
    """Process-wide inputs read once when a run starts."""

    github_token: str | None = Field(
        None, description="Automation token used for label reads and writes"
    )
    project_token: str | None = Field(
        None, description="Token with permission to update the project board"
    )
    project_board_url: str | None = Field(
        None, description="URL of the GitHub project board to mirror priority into"
    )
    graphql_url: str = Field(
        DEFAULT_GRAPHQL_URL, description="GitHub GraphQL endpoint"
    )
    http_timeout: float = Field(
        30.0, description="Timeout in seconds for GraphQL requests"
    )

    @classmethod
    def from_env(cls, **overrides: str | float | None) -> "TriageConfig":
        """Build configuration from environment variables.

        Explicit overrides (e.g. CLI options) win over the environment when
        they are not None.
        """
        values: dict[str, str | float | None] = {
            "github_token": os.getenv("GITHUB_TOKEN"),
            "project_token": os.getenv("PROJECT_AUTOMATION_TOKEN"),
            "project_board_url": os.getenv("PROJECT_BOARD_URL"),
            "graphql_url": os.getenv("GITHUB_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
            "http_timeout": os.getenv("TRIAGE_HTTP_TIMEOUT", "30"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)

    def missing(self) -> list[str]:
        """Names of required inputs that are not set."""
        missing = []
        if not self.github_token:
            missing.append("GITHUB_TOKEN")
        if not self.project_token:
            missing.append("PROJECT_AUTOMATION_TOKEN")
        if not self.project_board_url:
            missing.append("PROJECT_BOARD_URL")
        return missing

    def is_configured(self) -> bool:
        """Check if every required input is present."""
        return not self.missing()

    def validate_required(self) -> None:
        """Raise ConfigurationError listing every missing required input."""
        missing = self.missing()
        if missing:
            raise ConfigurationError(
                f"Required configuration is missing: {', '.join(missing)}. Aborting."
            )
