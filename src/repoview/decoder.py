"""Decoding of GitHub GraphQL response bodies into typed envelopes.

Decoding only certifies the shape of the payload. A response carrying
``errors`` or lacking ``data`` decodes successfully; deciding whether such an
envelope is usable is left to :mod:`repoview.projection`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .errors import DecodeError
from .models import (
    Actor,
    GraphQLError,
    IssueNode,
    OtherActor,
    PullRequestNode,
    RepositoryData,
    ResponseData,
    ResponseEnvelope,
    UserActor,
)

USER_TYPENAME = "User"


def _expect_object(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Malformed GraphQL response: expected an object at '{where}'.")
    return value


def _expect_list(value: Any, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise DecodeError(f"Malformed GraphQL response: expected a list at '{where}'.")
    return value


def _expect_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"Malformed GraphQL response: expected a string at '{where}'.")
    return value


def _expect_int(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Malformed GraphQL response: expected an integer at '{where}'.")
    return value


def _total_count(item: Dict[str, Any], key: str, where: str) -> int:
    connection = _expect_object(item.get(key), f"{where}.{key}")
    return _expect_int(connection.get("totalCount"), f"{where}.{key}.totalCount")


def _nodes(repository: Dict[str, Any], key: str) -> List[Any]:
    connection = repository.get(key)
    if connection is None:
        return []
    nodes = _expect_object(connection, f"repository.{key}").get("nodes")
    if nodes is None:
        return []
    return _expect_list(nodes, f"repository.{key}.nodes")


def _decode_error(item: Any, index: int) -> GraphQLError:
    where = f"errors[{index}]"
    error = _expect_object(item, where)
    error_type = error.get("type")
    path = error.get("path")
    return GraphQLError(
        message=_expect_str(error.get("message"), f"{where}.message"),
        type=error_type if isinstance(error_type, str) else None,
        path=list(path) if isinstance(path, list) else [],
    )


def decode_actor(value: Any, where: str) -> Optional[Actor]:
    """Map a pull request ``author`` object onto the closed actor variants.

    Any ``__typename`` other than ``User`` (including a missing one) yields
    :class:`OtherActor`.
    """
    if value is None:
        return None

    author = _expect_object(value, where)
    typename = author.get("__typename")
    if typename == USER_TYPENAME:
        name = author.get("name")
        if name is not None:
            name = _expect_str(name, f"{where}.name")
        return UserActor(display_name=name)

    return OtherActor(kind=typename if isinstance(typename, str) else None)


def _decode_issue(item: Any, index: int) -> Optional[IssueNode]:
    if item is None:
        return None
    where = f"repository.issues.nodes[{index}]"
    issue = _expect_object(item, where)
    return IssueNode(
        title=_expect_str(issue.get("title"), f"{where}.title"),
        commentCount=_total_count(issue, "comments", where),
    )


def _decode_pull_request(item: Any, index: int) -> Optional[PullRequestNode]:
    if item is None:
        return None
    where = f"repository.pullRequests.nodes[{index}]"
    pull_request = _expect_object(item, where)
    return PullRequestNode(
        title=_expect_str(pull_request.get("title"), f"{where}.title"),
        commentCount=_total_count(pull_request, "comments", where),
        commitCount=_total_count(pull_request, "commits", where),
        author=decode_actor(pull_request.get("author"), f"{where}.author"),
    )


def _decode_repository(value: Any) -> Optional[RepositoryData]:
    if value is None:
        return None

    repository = _expect_object(value, "repository")

    stargazer_count = 0
    stargazers = repository.get("stargazers")
    if stargazers is not None:
        total = _expect_object(stargazers, "repository.stargazers").get("totalCount")
        if total is not None:
            stargazer_count = _expect_int(total, "repository.stargazers.totalCount")

    return RepositoryData(
        stargazerCount=stargazer_count,
        issues=[_decode_issue(item, i) for i, item in enumerate(_nodes(repository, "issues"))],
        pullRequests=[
            _decode_pull_request(item, i)
            for i, item in enumerate(_nodes(repository, "pullRequests"))
        ],
    )


def decode_response(body: bytes) -> ResponseEnvelope:
    """Deserialize a raw GraphQL response body.

    Args:
        body: Raw HTTP response body.

    Returns:
        The decoded envelope. ``data`` and ``errors`` are ``None`` when the
        corresponding member is absent or null.

    Raises:
        DecodeError: If the body is not JSON or does not match the envelope shape.
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Malformed GraphQL response: invalid JSON ({exc}).") from exc

    envelope = _expect_object(payload, "<root>")

    errors: Optional[List[GraphQLError]] = None
    raw_errors = envelope.get("errors")
    if raw_errors is not None:
        errors = [_decode_error(item, i) for i, item in enumerate(_expect_list(raw_errors, "errors"))]

    data: Optional[ResponseData] = None
    raw_data = envelope.get("data")
    if raw_data is not None:
        data = ResponseData(
            repository=_decode_repository(_expect_object(raw_data, "data").get("repository"))
        )

    return ResponseEnvelope(data=data, errors=errors)
