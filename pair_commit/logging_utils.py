"""
Logging setup for pair-commit.

Only the root logger's level is configured here. basicConfig's default
handler writes to stderr, which leaves stdout to the command output
that `pair-commit message` users capture.
"""

from __future__ import annotations

import logging

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int) -> None:
    """
    Map the -v count to a root log level: none shows warnings, -v adds
    info and -vv or more adds debug.
    """

    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
