"""
Command-line interface for pair-commit.

This module is responsible for argument parsing and delegating to the
workflows in the commands module.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .commands import run_command
from .config import Config
from .errors import PairCommitError
from .logging_utils import configure_logging


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pair-commit",
        description=(
            "Keep a list of co-authors and print Co-authored-by trailers "
            "for the active ones."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        help="Read and write authors at this path instead of $PAIR_COMMIT_HOME/data.yml.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("list", help="Lists all co-authors with their metadata.")

    add = subparsers.add_parser("add", help="Add a new co-author.")
    add.add_argument(
        "-n",
        "--name",
        required=True,
        metavar="NAME",
        help="Set new co-author name.",
    )
    add.add_argument(
        "-e",
        "--email",
        required=True,
        metavar="EMAIL",
        help="Set new co-author email.",
    )
    add.add_argument(
        "-a",
        "--active",
        action="store_true",
        help="Set new co-author as active.",
    )

    subparsers.add_parser(
        "configure", help="Configure which co-authors are active."
    )
    subparsers.add_parser(
        "message", help="Get a co-authors message to append to a git commit."
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = Config(
        command=args.command,
        name=getattr(args, "name", None),
        email=getattr(args, "email", None),
        active=getattr(args, "active", False),
        verbosity=args.verbose,
        data_file=args.data_file,
    )

    configure_logging(verbosity=config.verbosity)

    try:
        run_command(config)
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except PairCommitError as exc:
        print(f"pair-commit: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
