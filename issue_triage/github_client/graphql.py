"""GitHub GraphQL client using httpx."""

import logging
from typing import Any, Protocol

import httpx

from .. import __version__
from ..config import DEFAULT_GRAPHQL_URL
from ..exceptions import RemoteLookupFailure

logger = logging.getLogger(__name__)


class GraphQueryApi(Protocol):
    """Generic request/response boundary for GraphQL queries and mutations."""

    def query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        ...


class GraphQLClient:
    """Minimal GraphQL client for the GitHub v4 API."""

    def __init__(
        self,
        token: str,
        url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            token: Token with permission to read and update project boards
            url: GraphQL endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        if not token:
            raise ValueError("A project automation token is required for GraphQL.")

        self.url = url
        self._client = httpx.Client(
            headers={
                "Authorization": f"Bearer {token}",
                "User-Agent": f"issue-triage/{__version__}",
                "Accept": "application/vnd.github+json",
            },
            timeout=timeout,
            transport=transport,
        )

    def query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a query or mutation and return its `data` object.

        Raises:
            RemoteLookupFailure: On transport errors, non-2xx responses, or
                GraphQL errors in the response body.
        """
        try:
            response = self._client.post(
                self.url, json={"query": query, "variables": variables}
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise RemoteLookupFailure(
                f"GraphQL request failed with HTTP {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RemoteLookupFailure(f"GraphQL request failed: {e}") from e

        if not isinstance(payload, dict):
            raise RemoteLookupFailure(
                f"GraphQL response is not an object: {type(payload).__name__}"
            )

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(error.get("message", str(error)) for error in errors)
            raise RemoteLookupFailure(f"GraphQL errors: {messages}")

        return payload.get("data") or {}

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GraphQLClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
