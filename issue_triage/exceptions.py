"""Error taxonomy for triage runs."""


class TriageError(Exception):
    """Base class for all triage errors."""


class ConfigurationError(TriageError):
    """A required configuration input (token, board link) is missing."""


class InvalidBoardLink(TriageError):
    """The project board URL does not look like a GitHub project URL."""

    def __init__(self, link: str):
        self.link = link
        super().__init__(
            f"Invalid project board link '{link}'. Expected "
            "https://github.com/{orgs|users}/<owner>/projects/<number>"
        )


class RemoteLookupFailure(TriageError):
    """A GraphQL call against the project board failed."""


class LabelApiError(TriageError):
    """Listing or adding issue labels failed."""
