"""Custom exception types for the GitHub repository viewer."""

from __future__ import annotations

from typing import List


class RepoViewError(Exception):
    """Base exception for all recoverable repository viewer errors."""


class ConfigurationError(RepoViewError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(RepoViewError):
    """Raised when the GitHub API token is unavailable."""


class ParseError(RepoViewError):
    """Raised when a repository identifier is not of the form ``<owner>/<name>``."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"Invalid repository '{raw}': wrong format for the repository name "
            "(expected `<owner>/<name>`, for example facebook/graphql)."
        )


class TransportError(RepoViewError):
    """Raised when the GraphQL request cannot reach the server."""


class DecodeError(RepoViewError):
    """Raised when a response body does not match the GraphQL envelope shape."""


class ProjectionError(RepoViewError):
    """Raised when a decoded envelope holds no usable repository data."""


class RemoteErrorsError(ProjectionError):
    """Raised when the GraphQL API reported one or more errors."""

    def __init__(self, messages: List[str]) -> None:
        self.messages = list(messages)
        self.joined = "".join(self.messages)
        super().__init__(f"GitHub API returned errors: {self.joined}")


class NoDataError(ProjectionError):
    """Raised when the response envelope carries neither data nor errors."""

    def __init__(self) -> None:
        super().__init__("GitHub API response is missing data.")


class RepositoryNotFoundError(ProjectionError):
    """Raised when the requested repository does not exist or is not accessible."""

    def __init__(self, owner: str, name: str) -> None:
        self.owner = owner
        self.name = name
        super().__init__(f"Repository '{owner}/{name}' was not found or is not accessible.")
