"""Test configuration and fixtures."""

import pytest
from helpers import FakeBoardApi, FakeLabelApi

from issue_triage.config import TriageConfig


@pytest.fixture
def config() -> TriageConfig:
    """Fully populated triage configuration."""
    return TriageConfig(
        github_token="automation-token",
        project_token="project-token",
        project_board_url="https://github.com/orgs/acme/projects/11",
    )


@pytest.fixture
def board_api() -> FakeBoardApi:
    return FakeBoardApi()


@pytest.fixture
def label_api() -> FakeLabelApi:
    return FakeLabelApi(labels=["[Type] Bug"])
