"""Command-line argument parsing for the GitHub repository viewer."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def _positive_int(value: str) -> int:
    """Parse and validate a positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the repository view.

    Returns:
        Parsed CLI arguments containing the repository identifier, strict mode,
        request timeout and verbosity.
    """
    parser = argparse.ArgumentParser(
        prog="github-repo-view",
        description=(
            "Show the star count, open issues and open pull requests of a "
            "GitHub repository using the GitHub GraphQL API."
        ),
    )

    parser.add_argument(
        "repository",
        help="Repository to inspect, as <owner>/<name> (for example facebook/graphql).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on a malformed repository name instead of falling back to the default.",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_int,
        default=30,
        help="HTTP request timeout in seconds (default: 30).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)
