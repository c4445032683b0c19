"""Domain model for one level of directory entries.

This package contains non-UI primitives:
- typed entry records with kind and size
- directory scanning with per-entry error capture
- byte-wise name ordering for listings
"""

from __future__ import annotations

from .types import SIZED_KINDS, EntryInfo, EntryKind
from .fs import EntryStatError, PathProblem, classify_open_error, scan_directory, sort_entries

__all__ = [
    "EntryInfo",
    "EntryKind",
    "SIZED_KINDS",
    "EntryStatError",
    "PathProblem",
    "classify_open_error",
    "scan_directory",
    "sort_entries",
]
