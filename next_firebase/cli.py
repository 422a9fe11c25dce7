"""Command-line entry point.

Usage::

    next-firebase "My Project" my-firebase-id
    next-firebase my-project my-firebase-id --static
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from .config import Config
from .errors import ConfigError, InvalidRequestError, UsageError
from .scaffolder import GenerationRequest, generate
from .utils import print_end, print_error, print_start, print_usage

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="next-firebase",
        description="Scaffold a Next.js app deployed on Firebase Hosting and Cloud Functions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  next-firebase "My Project" my-firebase-id\n'
            "  next-firebase my-project my-firebase-id --static\n"
        ),
    )
    # Both positionals are optional at the parser level so a missing one
    # prints the usage hint instead of an argparse error.
    parser.add_argument("project_name", nargs="?", help="Project directory name")
    parser.add_argument("project_id", nargs="?", help="Firebase project ID")
    parser.add_argument(
        "--static", "-s",
        action="store_true",
        help="Statically export the frontend instead of rendering on Cloud Functions",
    )
    return parser


def run(argv: Optional[Sequence[str]] = None, config: Optional[Config] = None) -> int:
    """Parse *argv*, scaffold the project and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        request = GenerationRequest.from_args(args.project_name, args.project_id, args.static)
    except UsageError as exc:
        print_usage(str(exc))
        return EXIT_OK
    except InvalidRequestError as exc:
        print_error(str(exc))
        return EXIT_FAILURE

    if config is None:
        try:
            config = Config.from_env()
        except ConfigError as exc:
            print_error(str(exc))
            return EXIT_FAILURE

    print_start((config.output_dir / request.project_name).resolve())

    result = asyncio.run(generate(request, config))
    if not result.success:
        print_error(result.error)
        return EXIT_FAILURE

    print_end(request.project_name)
    return EXIT_OK


def main() -> None:
    """CLI entry point for ``next-firebase`` and ``python -m next_firebase``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
