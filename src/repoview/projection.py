"""Projection of a decoded GraphQL envelope into render-ready rows.

Policy applied to the envelope, in order:
- Any reported GraphQL error aborts the projection, even with partial data.
- A missing ``data`` member or a missing repository aborts the projection.
- ``None`` issue and pull request nodes are skipped; server order is kept.
- Pull request authors resolve to the user's display name, or ``"unknown"``
  for users without a name, non-user actors and missing authors.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .errors import NoDataError, RemoteErrorsError, RepositoryNotFoundError
from .models import (
    Actor,
    IssueNode,
    IssueRow,
    Projection,
    PullRequestNode,
    PullRequestRow,
    RepositoryIdentifier,
    ResponseEnvelope,
    UserActor,
)

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "unknown"


def resolve_author_name(author: Optional[Actor]) -> str:
    """Return the display name of a pull request author, or ``"unknown"``."""
    if isinstance(author, UserActor) and author.display_name is not None:
        return author.display_name
    return UNKNOWN_AUTHOR


def project_issues(issues: Optional[List[Optional[IssueNode]]]) -> List[IssueRow]:
    """Build issue rows, skipping null nodes."""
    return [
        IssueRow(title=issue.title, comments=issue.commentCount)
        for issue in issues or []
        if issue is not None
    ]


def project_pull_requests(
    pull_requests: Optional[List[Optional[PullRequestNode]]],
) -> List[PullRequestRow]:
    """Build pull request rows, skipping null nodes."""
    return [
        PullRequestRow(
            title=pull_request.title,
            comments=pull_request.commentCount,
            commits=pull_request.commitCount,
            author=resolve_author_name(pull_request.author),
        )
        for pull_request in pull_requests or []
        if pull_request is not None
    ]


def project(envelope: ResponseEnvelope, identifier: RepositoryIdentifier) -> Projection:
    """Turn a decoded envelope into the repository projection.

    Raises:
        RemoteErrorsError: If the envelope carries a non-empty ``errors`` list.
        NoDataError: If the envelope has no ``data``.
        RepositoryNotFoundError: If ``data.repository`` is null.
    """
    if envelope.errors:
        raise RemoteErrorsError([error.message for error in envelope.errors])

    if envelope.data is None:
        raise NoDataError()

    repository = envelope.data.repository
    if repository is None:
        raise RepositoryNotFoundError(identifier.owner, identifier.name)

    issue_rows = project_issues(repository.issues)
    pull_request_rows = project_pull_requests(repository.pullRequests)

    logger.debug(
        "Projected repository data",
        extra={
            "repository": str(identifier),
            "issues_total": len(repository.issues or []),
            "issue_rows": len(issue_rows),
            "pull_requests_total": len(repository.pullRequests or []),
            "pull_request_rows": len(pull_request_rows),
        },
    )

    return Projection(
        owner=identifier.owner,
        name=identifier.name,
        stars=repository.stargazerCount or 0,
        issue_rows=issue_rows,
        pull_request_rows=pull_request_rows,
    )
