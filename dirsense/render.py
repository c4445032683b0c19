"""Render classification reports and sorted entry listings as text lines.

A report always starts with the classification label. The full listing
follows when verbose output is requested or when the directory could not be
classified. Listing order comes from ``sort_entries`` and never influences
the classification itself.
"""

from __future__ import annotations

from collections.abc import Iterable

from .classify import ProjectType
from .entry_model import EntryInfo, sort_entries
from .ui_theme import PLAIN_THEME, UITheme

SIZE_COLUMN_WIDTH = 12


def should_show_listing(result: ProjectType, verbose: bool) -> bool:
    """Return whether the full listing accompanies the label."""
    return verbose or not result.is_determined


def format_label(result: ProjectType, theme: UITheme = PLAIN_THEME) -> str:
    color = theme.label_known if result.is_determined else theme.label_unknown
    return f"{color}{result.label}{theme.reset}"


def format_entry(entry: EntryInfo, theme: UITheme = PLAIN_THEME) -> str:
    """Format one listing row as ``<symbol> <size> <name>``.

    The size column is blank for anything other than regular files.
    """
    size_text = str(entry.size) if entry.size is not None else ""
    padded_size = size_text.rjust(SIZE_COLUMN_WIDTH)
    name_color = theme.entry_color(entry.kind)
    return (
        f"{theme.symbol}{entry.kind.symbol}{theme.reset} "
        f"{theme.size}{padded_size}{theme.reset}  "
        f"{name_color}{entry.name}{theme.reset}"
    )


def format_listing(entries: Iterable[EntryInfo], theme: UITheme = PLAIN_THEME) -> list[str]:
    return [format_entry(entry, theme) for entry in sort_entries(entries)]


def format_header(path: str, theme: UITheme = PLAIN_THEME) -> str:
    return f"{theme.header}'{path}':{theme.reset}"


def render_report(
    result: ProjectType,
    entries: Iterable[EntryInfo],
    *,
    verbose: bool = False,
    theme: UITheme = PLAIN_THEME,
) -> list[str]:
    """Return report lines for one classified directory."""
    lines = [format_label(result, theme)]
    if should_show_listing(result, verbose):
        lines.extend(format_listing(entries, theme))
    return lines


__all__ = [
    "SIZE_COLUMN_WIDTH",
    "should_show_listing",
    "format_label",
    "format_entry",
    "format_listing",
    "format_header",
    "render_report",
]
