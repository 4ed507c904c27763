"""
Custom exception types used across pair-commit.

The CLI catches PairCommitError and reports it to the user; anything
else escaping a command is treated as a bug.
"""

from __future__ import annotations


class PairCommitError(Exception):
    """Base class for all pair-commit specific errors."""


class StorageError(PairCommitError):
    """Raised when the data file cannot be read or written."""


class MalformedStorageError(StorageError):
    """Raised when the data file exists but is not a valid author list."""
