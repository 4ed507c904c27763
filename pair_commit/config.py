"""
Configuration model for pair-commit.

The CLI constructs a Config instance and passes it down into the
commands so the data file location can be adjusted without relying on
global state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

HOME_ENV_VAR = "PAIR_COMMIT_HOME"
DEFAULT_APP_HOME = "~/.pair_commit_tool"
SAVE_FILE_NAME = "data.yml"


def resolve_app_home(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Return the application home directory.

    PAIR_COMMIT_HOME wins when set and non-empty; otherwise the per-user
    default is used. User and environment references are expanded.
    """

    env = os.environ if environ is None else environ
    raw = env.get(HOME_ENV_VAR) or DEFAULT_APP_HOME
    return Path(os.path.expanduser(os.path.expandvars(raw)))


@dataclass
class Config:
    """
    Top-level configuration for a pair-commit run.
    """

    command: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    active: bool = False
    verbosity: int = 0
    app_home: Path = field(default_factory=resolve_app_home)
    data_file: Optional[Path] = None

    @property
    def save_file_path(self) -> Path:
        if self.data_file is not None:
            return self.data_file
        return self.app_home / SAVE_FILE_NAME
