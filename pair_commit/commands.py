"""
The pair-commit workflows.

Each command loads the author list from the configured data file,
optionally changes it and saves it back, and writes whatever it has to
show to the given output stream. Errors from persistence propagate
unchanged to the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Optional, Set, TextIO

from .config import Config
from .domain import Author
from .errors import PairCommitError
from .persistence import dump_collection, load, save
from .user_input import prompt_for_indexes

LOG = logging.getLogger(__name__)

IndexPrompt = Callable[[], Set[int]]


def list_authors(config: Config, out: TextIO) -> None:
    """
    Print every stored author with its email and active flag.
    """

    authors = load(config.save_file_path)
    if len(authors):
        out.write(dump_collection(authors))


def add_author(config: Config, out: TextIO) -> None:
    if config.name is None or config.email is None:
        raise PairCommitError("add requires both a name and an email")

    authors = load(config.save_file_path)
    author = Author.with_active_state(config.name, config.email, config.active)
    authors.add_author(author)
    save(config.save_file_path, authors)
    LOG.info("Added %s at index %d", author.display_form(), len(authors) - 1)


def compose_message(config: Config, out: TextIO) -> None:
    """
    Print the Co-authored-by trailers for the active authors.

    Nothing is printed when no author is active, so the output can be
    appended to a commit message unconditionally.
    """

    authors = load(config.save_file_path)
    message = authors.join_active_coauthor_lines()
    if message:
        out.write(message + "\n")


def configure_authors(
    config: Config,
    out: TextIO,
    ask: Optional[IndexPrompt] = None,
) -> None:
    """
    Show the indexed author list, ask which ones should be active and
    save the new selection.

    The selection replaces the previous one entirely.
    """

    authors = load(config.save_file_path)
    listing = authors.list_with_indexes()
    if listing:
        out.write(listing + "\n")
    out.flush()

    indexes = (ask or prompt_for_indexes)()
    ignored = sorted(i for i in indexes if not 0 <= i < len(authors))
    if ignored:
        LOG.info("Ignoring indexes outside the author list: %s", ignored)

    authors.set_active_by_indexes(indexes)
    save(config.save_file_path, authors)
    LOG.info("%d of %d authors active", len(authors.active_authors()), len(authors))


COMMANDS: Dict[str, Callable[[Config, TextIO], None]] = {
    "list": list_authors,
    "add": add_author,
    "message": compose_message,
    "configure": configure_authors,
}


def run_command(config: Config, out: Optional[TextIO] = None) -> None:
    """
    Dispatch to the command named in the configuration.
    """

    if config.command not in COMMANDS:
        raise PairCommitError(f"unknown command: {config.command}")

    LOG.debug("Running %s with data file %s", config.command, config.save_file_path)
    COMMANDS[config.command](config, sys.stdout if out is None else out)
