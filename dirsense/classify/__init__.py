"""Project-type classification from directory marker entries."""

from __future__ import annotations

from .markers import MARKER_RULES, MarkerRule, Signal, entry_signals, evaluate_signals, matching_entries
from .resolver import CATEGORY_PRIORITY, Category, ProjectType, classify_entries, resolve_project_type

__all__ = [
    "Signal",
    "MarkerRule",
    "MARKER_RULES",
    "entry_signals",
    "evaluate_signals",
    "matching_entries",
    "ProjectType",
    "Category",
    "CATEGORY_PRIORITY",
    "resolve_project_type",
    "classify_entries",
]
