"""
YAML persistence for the author list.

The data file is a YAML sequence of mappings with exactly the keys
`name`, `email` and `active`, written in that order. A missing file is
the same as an empty list. Anything else that does not match this shape
is rejected outright: silently dropping records would lose the user's
author list on the next save.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from .domain import Author, AuthorCollection
from .errors import MalformedStorageError, StorageError

LOG = logging.getLogger(__name__)

PathLike = Union[str, Path]

_AUTHOR_FIELDS = ("name", "email", "active")


def load(path: PathLike) -> AuthorCollection:
    """
    Read the author list stored at path.

    Returns an empty collection when no file exists at path.
    """

    path = Path(path)
    if not path.exists():
        LOG.debug("No data file at %s; starting with an empty author list", path)
        return AuthorCollection.empty()

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedStorageError(f"{path}: not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise StorageError(f"failed to read {path}: {exc}") from exc

    try:
        collection = parse_collection(text)
    except MalformedStorageError as exc:
        raise MalformedStorageError(f"{path}: {exc}") from exc

    LOG.debug("Loaded %d authors from %s", len(collection), path)
    return collection


def save(path: PathLike, collection: AuthorCollection) -> None:
    """
    Write the collection to path, creating the parent directory first.

    The YAML is written to a temporary file next to path and then moved
    into place, so path either keeps its old content or holds the whole
    new document. An existing file keeps its permission bits; a new one
    gets the usual umask-derived mode.
    """

    path = Path(path)
    text = dump_collection(collection)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"failed to create directory {path.parent}: {exc}") from exc

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            _discard(tmp_name)
        raise StorageError(f"failed to write {path}: {exc}") from exc

    LOG.debug("Saved %d authors to %s", len(collection), path)


def dump_collection(collection: AuthorCollection) -> str:
    """
    Serialize the collection to the data file's YAML form.
    """

    return yaml.safe_dump(
        collection.to_records(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def parse_collection(text: str) -> AuthorCollection:
    """
    Parse YAML text into a collection.

    Raises MalformedStorageError if the text is not valid YAML or does
    not describe a list of authors.
    """

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedStorageError(f"invalid YAML: {exc}") from exc

    # An empty document loads as None.
    if data is None:
        return AuthorCollection.empty()

    if not isinstance(data, list):
        raise MalformedStorageError(
            f"expected a list of authors, found {type(data).__name__}"
        )

    return AuthorCollection.from_records(
        _author_from_mapping(item, index) for index, item in enumerate(data)
    )


def _author_from_mapping(item: Any, index: int) -> Author:
    if not isinstance(item, Mapping):
        raise MalformedStorageError(
            f"entry {index}: expected a mapping, found {type(item).__name__}"
        )

    keys = set(item)
    missing = [key for key in _AUTHOR_FIELDS if key not in keys]
    extra = sorted(str(key) for key in keys - set(_AUTHOR_FIELDS))
    if missing or extra:
        details = []
        if missing:
            details.append(f"missing keys: {', '.join(missing)}")
        if extra:
            details.append(f"unexpected keys: {', '.join(extra)}")
        raise MalformedStorageError(f"entry {index}: {'; '.join(details)}")

    name, email, active = item["name"], item["email"], item["active"]
    for key, value in (("name", name), ("email", email)):
        if not isinstance(value, str):
            raise MalformedStorageError(
                f"entry {index}: {key} must be a string, found {type(value).__name__}"
            )
    if not isinstance(active, bool):
        raise MalformedStorageError(
            f"entry {index}: active must be true or false, found {active!r}"
        )

    return Author.with_active_state(name, email, active)


def _target_mode(path: Path) -> int:
    try:
        return path.stat().st_mode & 0o7777
    except FileNotFoundError:
        pass
    # mkstemp always creates 0600; give new files what open() would.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except OSError as exc:
        LOG.warning("Failed to remove temporary file %s: %s", tmp_name, exc)
