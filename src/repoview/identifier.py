"""Repository identifier parsing."""

from __future__ import annotations

from .errors import ParseError
from .models import RepositoryIdentifier


def parse_repo_name(raw: str) -> RepositoryIdentifier:
    """Split ``<owner>/<name>`` into a repository identifier.

    Only the first two ``/``-separated segments are considered; anything after
    a second ``/`` is dropped, so ``"a/b/c"`` parses as ``a/b``.

    Raises:
        ParseError: If fewer than two segments are present or either is empty.
    """
    segments = raw.split("/")[:2]
    if len(segments) != 2:
        raise ParseError(raw)

    owner, name = segments
    if not owner or not name:
        raise ParseError(raw)

    return RepositoryIdentifier(owner=owner, name=name)
