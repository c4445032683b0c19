"""UI theme definitions and selection helpers.

Themes are ANSI palettes for report labels and listing rows.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entry_model import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    header: str
    label_known: str
    label_unknown: str
    symbol: str
    size: str
    entry_dir: str
    entry_file: str
    entry_empty: str
    entry_symlink: str
    entry_error: str
    entry_unknown: str

    def entry_color(self, kind: EntryKind) -> str:
        """Return the name color for ``kind``."""
        return {
            EntryKind.DIRECTORY: self.entry_dir,
            EntryKind.FILE: self.entry_file,
            EntryKind.EMPTY_FILE: self.entry_empty,
            EntryKind.SYMLINK: self.entry_symlink,
            EntryKind.ERROR: self.entry_error,
            EntryKind.UNKNOWN: self.entry_unknown,
        }[kind]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;5;81m",
    label_known="\033[1;38;5;42m",
    label_unknown="\033[1;38;5;214m",
    symbol="\033[2;38;5;245m",
    size="\033[38;5;109m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_empty="\033[2;38;5;250m",
    entry_symlink="\033[38;5;44m",
    entry_error="\033[38;5;203m",
    entry_unknown="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    label_known="\033[1;38;5;117m",
    label_unknown="\033[1;38;5;215m",
    symbol="\033[2;38;5;110m",
    size="\033[38;5;73m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_empty="\033[2;38;5;110m",
    entry_symlink="\033[38;5;39m",
    entry_error="\033[38;5;209m",
    entry_unknown="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    label_known="",
    label_unknown="",
    symbol="",
    size="",
    entry_dir="",
    entry_file="",
    entry_empty="",
    entry_symlink="",
    entry_error="",
    entry_unknown="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
