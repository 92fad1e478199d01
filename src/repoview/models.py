"""Domain models for the GitHub repository view.

These dataclasses model only the subset of the GraphQL response needed to
render the repository summary, plus the render-ready rows derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True, slots=True)
class RepositoryIdentifier:
    """Owner/name pair uniquely naming a GitHub repository."""

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class UserActor:
    """Pull request author that is a GitHub user."""

    display_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class OtherActor:
    """Any non-user pull request author (bot, organization, mannequin, ...)."""

    kind: Optional[str] = None


Actor = Union[UserActor, OtherActor]


@dataclass(slots=True)
class GraphQLError:
    """A single error reported in the ``errors`` list of a GraphQL response."""

    message: str
    type: Optional[str] = None
    path: List[Union[str, int]] = field(default_factory=list)


@dataclass(slots=True)
class IssueNode:
    """Represents an open issue returned for the repository."""

    title: str
    commentCount: int


@dataclass(slots=True)
class PullRequestNode:
    """Represents an open pull request returned for the repository."""

    title: str
    commentCount: int
    commitCount: int
    author: Optional[Actor] = None


@dataclass(slots=True)
class RepositoryData:
    """Repository fields requested by the query.

    Issue and pull request sequences keep ``None`` entries exactly as the
    server sent them.
    """

    stargazerCount: int = 0
    issues: List[Optional[IssueNode]] = field(default_factory=list)
    pullRequests: List[Optional[PullRequestNode]] = field(default_factory=list)


@dataclass(slots=True)
class ResponseData:
    """The ``data`` member of the response envelope."""

    repository: Optional[RepositoryData] = None


@dataclass(slots=True)
class ResponseEnvelope:
    """Top-level GraphQL response; ``data`` and ``errors`` are independently optional."""

    data: Optional[ResponseData] = None
    errors: Optional[List[GraphQLError]] = None


@dataclass(frozen=True, slots=True)
class IssueRow:
    """One row of the issues table."""

    title: str
    comments: int


@dataclass(frozen=True, slots=True)
class PullRequestRow:
    """One row of the pull requests table."""

    title: str
    comments: int
    commits: int
    author: str


@dataclass(frozen=True, slots=True)
class Projection:
    """Render-ready view of a repository."""

    owner: str
    name: str
    stars: int
    issue_rows: List[IssueRow]
    pull_request_rows: List[PullRequestRow]
