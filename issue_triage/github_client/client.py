"""GitHub REST client for issue labels using PyGitHub."""

import logging
import time
from typing import Protocol

import requests
from github import Github
from github.GithubException import (
    GithubException,
    RateLimitExceededException,
    UnknownObjectException,
)
from github.Issue import Issue
from github.Repository import Repository

from ..exceptions import LabelApiError

logger = logging.getLogger(__name__)


class LabelApi(Protocol):
    """Label operations the triage core needs from the hosting platform."""

    def get_issue_labels(self, org: str, repo: str, issue_number: int) -> list[str]:
        ...

    def add_issue_labels(
        self, org: str, repo: str, issue_number: int, labels: list[str]
    ) -> bool:
        ...


class GitHubClient:
    """GitHub label client with rate limiting."""

    def __init__(self, token: str):
        """Initialize GitHub client with authentication.

        Args:
            token: Automation token with write access to issues.
        """
        if not token:
            raise ValueError("GitHub token is required for label operations.")

        self.github = Github(token)

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining
            logger.debug("GitHub API rate limit: %s requests remaining", remaining)

            if remaining < 10:
                reset_time = rate_limit.rate.reset.timestamp()
                sleep_time = reset_time - time.time() + 1
                logger.info("Rate limit low, sleeping for %.1f seconds...", sleep_time)
                time.sleep(sleep_time)

        except Exception as e:
            # Rate limit lookups are advisory only
            logger.debug("Could not check rate limit: %s", e)

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{org}/{repo}")
        except UnknownObjectException:
            raise LabelApiError(f"Repository {org}/{repo} not found")

    def _get_issue(self, org: str, repo: str, issue_number: int) -> Issue:
        repository = self.get_repository(org, repo)
        try:
            return repository.get_issue(issue_number)
        except UnknownObjectException:
            raise LabelApiError(f"Issue #{issue_number} not found in {org}/{repo}")

    def get_issue_labels(self, org: str, repo: str, issue_number: int) -> list[str]:
        """Get current labels for an issue.

        Args:
            org: Organization name
            repo: Repository name
            issue_number: Issue number

        Returns:
            List of current label names

        Raises:
            LabelApiError: If the issue cannot be read
        """
        self._check_rate_limit()

        try:
            github_issue = self._get_issue(org, repo, issue_number)
            return [label.name for label in github_issue.labels]

        except RateLimitExceededException:
            logger.warning("Rate limit exceeded during label fetch, waiting...")
            time.sleep(60)
            return self.get_issue_labels(org, repo, issue_number)
        except (GithubException, requests.RequestException) as e:
            raise LabelApiError(
                f"Error fetching labels for issue #{issue_number}: {e}"
            ) from e

    def add_issue_labels(
        self, org: str, repo: str, issue_number: int, labels: list[str]
    ) -> bool:
        """Add labels to an issue, keeping the ones already present.

        Adding a label the issue already carries is a no-op on GitHub's side.

        Raises:
            LabelApiError: If the labels cannot be added
        """
        if not labels:
            return True

        self._check_rate_limit()

        try:
            github_issue = self._get_issue(org, repo, issue_number)
            github_issue.add_to_labels(*labels)

            logger.info("Added labels to issue #%s: %s", issue_number, labels)
            return True

        except RateLimitExceededException:
            logger.warning("Rate limit exceeded during label update, waiting...")
            time.sleep(60)
            return self.add_issue_labels(org, repo, issue_number, labels)
        except (GithubException, requests.RequestException) as e:
            raise LabelApiError(
                f"Error adding labels to issue #{issue_number}: {e}"
            ) from e
