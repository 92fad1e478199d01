"""GitHub GraphQL API transport."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .config import Config
from .errors import TransportError
from .query import QueryRequest

logger = logging.getLogger(__name__)


class GitHubClient:
    """Sends a single authenticated GraphQL request to the GitHub API."""

    GRAPHQL_ENDPOINT = "https://api.github.com/graphql"
    _USER_AGENT = "github-repo-view"

    def __init__(self, config: Config, timeout_seconds: int = 30) -> None:
        """Initialize an authenticated GitHub GraphQL client.

        Args:
            config: Validated runtime configuration including the API token.
            timeout_seconds: Per-request timeout in seconds.
        """
        self._config = config
        self._timeout_seconds = timeout_seconds

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Authorization": f"Bearer {config.token}",
                "User-Agent": self._USER_AGENT,
            }
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def send(self, request: QueryRequest) -> bytes:
        """POST a GraphQL request and return the raw response body.

        The body is returned for every HTTP status: GitHub reports most
        failures inside the GraphQL envelope, which is the decoder's concern.
        The request is attempted exactly once.

        Raises:
            TransportError: If the server cannot be reached, the TLS handshake
                fails, or the request times out.
        """
        url = self.GRAPHQL_ENDPOINT
        try:
            response = self._session.post(
                url,
                json=request.to_payload(),
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TransportError(f"GitHub GraphQL request failed: POST {url}: {exc}") from exc

        status_code = response.status_code
        if status_code >= 400:
            logger.warning(
                "GitHub GraphQL endpoint returned an error status",
                extra={"status_code": status_code, "repository": f"{request.owner}/{request.name}"},
            )
        else:
            logger.debug("GitHub GraphQL request completed", extra={"status_code": status_code})

        return response.content
