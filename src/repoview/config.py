"""Configuration parsing and validation for the GitHub repository viewer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import AuthenticationError, ConfigurationError, ParseError
from .identifier import parse_repo_name
from .models import RepositoryIdentifier

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "GITHUB_API_TOKEN"
DEFAULT_REPOSITORY = RepositoryIdentifier(owner="tomhoule", name="graphql-client")


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used by the repository viewer."""

    repository: RepositoryIdentifier
    token: str


def resolve_repository(raw: str, strict: bool = False) -> RepositoryIdentifier:
    """Parse ``raw`` into an identifier, falling back to the default repository.

    Raises:
        ConfigurationError: If ``raw`` is malformed and ``strict`` is set.
    """
    try:
        return parse_repo_name(raw)
    except ParseError as exc:
        if strict:
            raise ConfigurationError(str(exc)) from exc
        logger.warning(
            "Invalid repository identifier, falling back to default",
            extra={"repository": raw, "default": str(DEFAULT_REPOSITORY)},
        )
        return DEFAULT_REPOSITORY


def load_config(repository: str, strict: bool = False) -> Config:
    """Build and validate application configuration.

    Args:
        repository: Raw ``<owner>/<name>`` identifier from the command line.
        strict: Reject a malformed identifier instead of using the default.

    Returns:
        A validated ``Config`` instance.

    Raises:
        AuthenticationError: If ``GITHUB_API_TOKEN`` is not configured.
        ConfigurationError: If ``strict`` is set and the identifier is malformed.
    """
    token: str = os.getenv(TOKEN_ENV_VAR, "").strip()
    if not token:
        raise AuthenticationError(
            "Missing required GitHub API token. "
            f"Set the '{TOKEN_ENV_VAR}' environment variable (or add it to a .env file)."
        )

    return Config(repository=resolve_repository(repository, strict=strict), token=token)
