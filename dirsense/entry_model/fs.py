"""Filesystem scanning and ordering for one directory level."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from enum import Enum

from .types import EntryInfo, EntryKind

logger = logging.getLogger(__name__)


class EntryStatError(RuntimeError):
    """Raised when a file opened for sizing cannot be stat-ed afterwards."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"could not stat opened file {path!r}: {cause}")
        self.path = path
        self.cause = cause


class PathProblem(Enum):
    """Reportable reasons a requested path could not be scanned."""

    NOT_A_DIRECTORY = "not a directory"
    MISSING = "doesn't exist"
    ACCESS_DENIED = "access denied"

    def describe(self, path: str) -> str:
        return f"* {self.value}: '{path}'"


def classify_open_error(exc: BaseException) -> PathProblem | None:
    """Map a directory-open failure to a reportable problem.

    Returns ``None`` for anything outside the three expected conditions; the
    caller treats those as fatal.
    """
    if isinstance(exc, NotADirectoryError):
        return PathProblem.NOT_A_DIRECTORY
    if isinstance(exc, FileNotFoundError):
        return PathProblem.MISSING
    if isinstance(exc, PermissionError):
        return PathProblem.ACCESS_DENIED
    return None


def _file_size(path: str) -> int | None:
    """Open ``path`` and return its size, or ``None`` when it cannot be opened."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        logger.debug("could not open %r for sizing: %s", path, exc)
        return None
    with handle:
        try:
            return int(os.fstat(handle.fileno()).st_size)
        except OSError as exc:
            raise EntryStatError(path, exc) from exc


def _entry_from_dir_entry(child: os.DirEntry[str]) -> EntryInfo:
    """Build an ``EntryInfo`` from one scandir row without following links."""
    name = child.name
    try:
        if child.is_symlink():
            return EntryInfo(name=name, kind=EntryKind.SYMLINK)
        if child.is_dir(follow_symlinks=False):
            return EntryInfo(name=name, kind=EntryKind.DIRECTORY)
        is_file = child.is_file(follow_symlinks=False)
    except OSError:
        return EntryInfo(name=name, kind=EntryKind.UNKNOWN)

    if not is_file:
        return EntryInfo(name=name, kind=EntryKind.UNKNOWN)

    size = _file_size(child.path)
    if size is None:
        return EntryInfo(name=name, kind=EntryKind.ERROR)
    return EntryInfo.for_file_size(name, size)


def scan_directory(directory: str | os.PathLike[str]) -> tuple[EntryInfo, ...]:
    """Return entries for the immediate children of ``directory``.

    Entries keep filesystem iteration order. Directory-open failures propagate
    unchanged so callers can separate reportable problems from fatal ones with
    ``classify_open_error``.
    """
    logger.debug("scanning %s", os.fspath(directory))
    entries: list[EntryInfo] = []
    with os.scandir(directory) as iterator:
        for child in iterator:
            entries.append(_entry_from_dir_entry(child))
    logger.debug("scanned %d entries in %s", len(entries), os.fspath(directory))
    return tuple(entries)


def _name_sort_key(entry: EntryInfo) -> bytes:
    return os.fsencode(entry.name)


def sort_entries(entries: Iterable[EntryInfo]) -> list[EntryInfo]:
    """Return entries ordered byte-wise by name; stable for equal names."""
    return sorted(entries, key=_name_sort_key)


__all__ = [
    "EntryStatError",
    "PathProblem",
    "classify_open_error",
    "scan_directory",
    "sort_entries",
]
