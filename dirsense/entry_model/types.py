"""Domain datatypes for one scanned directory member."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Coarse entry kind observed while scanning a directory.

    ``EMPTY_FILE`` and ``FILE`` are disjoint: a regular file of size zero is
    always ``EMPTY_FILE``. ``ERROR`` marks a regular file that could not be
    opened to read its size.
    """

    ERROR = "!"
    EMPTY_FILE = "e"
    FILE = "f"
    DIRECTORY = "d"
    SYMLINK = "l"
    UNKNOWN = "?"

    @property
    def symbol(self) -> str:
        """One-character marker used in listings."""
        return self.value

    @property
    def has_size(self) -> bool:
        return self in SIZED_KINDS


SIZED_KINDS = frozenset({EntryKind.FILE, EntryKind.EMPTY_FILE})


@dataclass(frozen=True)
class EntryInfo:
    """One immediate child of a scanned directory.

    ``name`` is kept exactly as the filesystem reported it. ``size`` is set
    if and only if ``kind`` is ``FILE`` or ``EMPTY_FILE``.
    """

    name: str
    kind: EntryKind
    size: int | None = None

    def __post_init__(self) -> None:
        if self.kind.has_size:
            if self.size is None or self.size < 0:
                raise ValueError(f"{self.kind.name} entry {self.name!r} needs a non-negative size")
            if (self.size == 0) != (self.kind is EntryKind.EMPTY_FILE):
                raise ValueError(f"size {self.size} does not fit kind {self.kind.name} for {self.name!r}")
        elif self.size is not None:
            raise ValueError(f"{self.kind.name} entry {self.name!r} cannot carry a size")

    @classmethod
    def for_file_size(cls, name: str, size: int) -> EntryInfo:
        """Build a regular-file entry, choosing ``EMPTY_FILE`` for zero bytes."""
        kind = EntryKind.EMPTY_FILE if size == 0 else EntryKind.FILE
        return cls(name=name, kind=kind, size=size)


__all__ = [
    "EntryKind",
    "EntryInfo",
    "SIZED_KINDS",
]
