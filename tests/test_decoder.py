"""Tests for GraphQL response envelope decoding."""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from repoview.decoder import decode_response
from repoview.errors import DecodeError
from repoview.models import IssueNode, OtherActor, PullRequestNode, UserActor


def _body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


def _pr_node(title: str = "Fix bug", author=None) -> dict:
    return {
        "title": title,
        "comments": {"totalCount": 3},
        "commits": {"totalCount": 2},
        "author": author,
    }


def _repository(**overrides) -> dict:
    repository = {
        "stargazers": {"totalCount": 42},
        "issues": {"nodes": [{"title": "A", "comments": {"totalCount": 2}}, None]},
        "pullRequests": {"nodes": [_pr_node(author={"__typename": "User", "name": "alice"})]},
    }
    repository.update(overrides)
    return repository


def test_decode_full_response():
    """Verify a complete response decodes into typed nodes, preserving null entries."""
    envelope = decode_response(_body({"data": {"repository": _repository()}}))

    assert envelope.errors is None
    repository = envelope.data.repository
    assert repository.stargazerCount == 42
    assert repository.issues == [IssueNode(title="A", commentCount=2), None]
    assert repository.pullRequests == [
        PullRequestNode(
            title="Fix bug",
            commentCount=3,
            commitCount=2,
            author=UserActor(display_name="alice"),
        )
    ]


def test_decode_errors_with_partial_data():
    """Verify errors and data are decoded side by side without failing."""
    payload = {
        "data": {"repository": None},
        "errors": [
            {"type": "NOT_FOUND", "path": ["repository"], "message": "Could not resolve"},
            {"message": " to a Repository"},
        ],
    }

    envelope = decode_response(_body(payload))

    assert [error.message for error in envelope.errors] == ["Could not resolve", " to a Repository"]
    assert envelope.errors[0].type == "NOT_FOUND"
    assert envelope.errors[0].path == ["repository"]
    assert envelope.data.repository is None


def test_decode_body_without_data_or_errors():
    """Verify an envelope with neither member decodes to empty optionals."""
    envelope = decode_response(b'{"message": "Bad credentials"}')

    assert envelope.data is None
    assert envelope.errors is None


@pytest.mark.parametrize(
    "author, expected",
    [
        ({"__typename": "User", "name": None}, UserActor(display_name=None)),
        ({"__typename": "User"}, UserActor(display_name=None)),
        ({"__typename": "Bot"}, OtherActor(kind="Bot")),
        ({"__typename": "Organization"}, OtherActor(kind="Organization")),
        ({"__typename": "SomeFutureActor", "login": "x"}, OtherActor(kind="SomeFutureActor")),
        ({}, OtherActor(kind=None)),
        (None, None),
    ],
)
def test_decode_pull_request_author_variants(author, expected):
    """Verify author objects map onto the User/Other variants, unknown kinds included."""
    repository = _repository(pullRequests={"nodes": [_pr_node(author=author)]})

    envelope = decode_response(_body({"data": {"repository": repository}}))

    assert envelope.data.repository.pullRequests[0].author == expected


def test_decode_missing_connections_and_stars_default_to_empty():
    """Verify absent stargazers, issues and pull requests decode to 0 and empty lists."""
    envelope = decode_response(_body({"data": {"repository": {"issues": {"nodes": None}}}}))

    repository = envelope.data.repository
    assert repository.stargazerCount == 0
    assert repository.issues == []
    assert repository.pullRequests == []


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"[]",
        b'{"errors": {"message": "x"}}',
        b'{"errors": [{"code": 1}]}',
        b'{"data": []}',
        b'{"data": {"repository": "octo/repo"}}',
    ],
)
def test_decode_malformed_envelopes_raise_decode_error(body):
    """Verify bodies that are not a GraphQL envelope raise DecodeError."""
    with pytest.raises(DecodeError):
        decode_response(body)


def test_decode_node_with_wrong_field_type_raises_decode_error():
    """Verify a node with a non-integer comment count is rejected."""
    repository = _repository(
        issues={"nodes": [{"title": "A", "comments": {"totalCount": "two"}}]},
    )

    with pytest.raises(DecodeError) as exc_info:
        decode_response(_body({"data": {"repository": repository}}))

    assert "repository.issues.nodes[0].comments.totalCount" in str(exc_info.value)


def test_decode_deeply_nested_body_raises_decode_error():
    """Verify a body nested beyond the parser's recursion limit raises DecodeError."""
    body = b'{"data": ' + b"[" * 200000 + b"]" * 200000 + b"}"

    with pytest.raises(DecodeError) as exc_info:
        decode_response(body)

    assert isinstance(exc_info.value.__cause__, RecursionError)
