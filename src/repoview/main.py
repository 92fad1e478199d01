"""Entry point wiring the GitHub repository view pipeline together."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from .cli import parse_args
from .config import load_config
from .decoder import decode_response
from .errors import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    ProjectionError,
    TransportError,
)
from .github_client import GitHubClient
from .presenter import render
from .projection import project
from .query import build_query

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_AUTHENTICATION = 3
EXIT_TRANSPORT = 4
EXIT_DECODE = 5
EXIT_PROJECTION = 6


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def orchestrate_repo_view(argv: Optional[Sequence[str]] = None) -> int:
    """Run the full fetch, decode, project and render cycle.

    Nothing is rendered unless the projection succeeds.

    Returns:
        Process exit code.
    """
    try:
        args = parse_args(argv)
        configure_logging(args.verbose)
        load_dotenv(find_dotenv(usecwd=True))

        config = load_config(repository=args.repository, strict=args.strict)
        request = build_query(config.repository)

        with GitHubClient(config=config, timeout_seconds=args.timeout) as client:
            body = client.send(request)

        envelope = decode_response(body)
        logger.debug("Decoded response data: %r", envelope.data)

        projection = project(envelope, config.repository)
        render(projection)
        return EXIT_OK
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION
    except AuthenticationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_AUTHENTICATION
    except TransportError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_TRANSPORT
    except DecodeError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_DECODE
    except ProjectionError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_PROJECTION
    except Exception as exc:
        logger.exception("Unexpected failure")
        print(f"ERROR: Unexpected failure: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED


def main() -> int:
    return orchestrate_repo_view()


if __name__ == "__main__":
    raise SystemExit(main())
