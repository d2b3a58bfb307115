"""GitHub client package for label and project board APIs."""

from .client import GitHubClient, LabelApi
from .graphql import GraphQLClient, GraphQueryApi
from .models import IssueAction, IssueEvent

__all__ = [
    "GitHubClient",
    "GraphQLClient",
    "GraphQueryApi",
    "IssueAction",
    "IssueEvent",
    "LabelApi",
]
