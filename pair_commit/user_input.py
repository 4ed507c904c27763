"""
Interactive index selection for the configure command.

The prompt is a single request/response: the user types the positions
of the authors that should be active, separated by spaces or commas.
Tokens that are not integers are dropped rather than failing the whole
command, and there is no retry loop.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Set

LOG = logging.getLogger(__name__)

INDEX_PROMPT = "Enter the indexes of the authors to be active"

_SEPARATORS = re.compile(r"[\s,]+")
_INDEX_TOKEN = re.compile(r"-?[0-9]+")


def parse_indexes(text: str) -> Set[int]:
    """
    Parse whitespace or comma separated integers into a set.

    An empty string yields an empty set.
    """

    indexes: Set[int] = set()
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        if _INDEX_TOKEN.fullmatch(token) is None:
            LOG.warning("Ignoring invalid index %r", token)
            continue
        indexes.add(int(token))
    return indexes


def prompt_for_indexes(
    prompt: str = INDEX_PROMPT,
    *,
    input_fn: Optional[Callable[[str], str]] = None,
) -> Set[int]:
    """
    Ask the user for a set of indexes and return what could be parsed.

    input_fn defaults to the builtin input(). End of input is treated
    the same as an empty answer.
    """

    try:
        answer = (input_fn or input)(f"{prompt}: ")
    except EOFError:
        LOG.debug("No input available; treating as an empty selection")
        answer = ""
    return parse_indexes(answer)
