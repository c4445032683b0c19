"""Fixed-priority reduction of marker signals to one project-type label."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from ..entry_model import EntryInfo
from .markers import Signal, evaluate_signals


class ProjectType(Enum):
    """Resolved classification for one directory."""

    ANDROID_STUDIO = "Android Studio / IntelliJ"
    C = "C"
    CPP = "C++"
    C_CPP = "C/C++"
    DART = "Dart"
    GO = "Go"
    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"
    LUA = "Lua"
    ODIN = "Odin"
    PYTHON = "Python"
    RUST = "Rust"
    VISUAL_STUDIO = "Visual Studio"
    XCODE = "Xcode"
    ZIG = "Zig"
    GENERIC_PROJECT = "coding"
    UNDETERMINED = "undetermined"

    @property
    def is_determined(self) -> bool:
        return self is not ProjectType.UNDETERMINED

    @property
    def label(self) -> str:
        """Upper-case headline printed for this result."""
        if self is ProjectType.UNDETERMINED:
            return "COULDN'T DETERMINE WHAT KIND OF DIRECTORY THIS IS"
        name = self.value.upper()
        article = "AN" if name[0] in "AEIOU" else "A"
        return f"LOOKS LIKE {article} {name} PROJECT DIRECTORY"


@dataclass(frozen=True)
class Category:
    """One priority slot: triggering signals plus how to pick the final type."""

    signals: frozenset[Signal]
    pick: Callable[[frozenset[Signal]], ProjectType]

    def applies(self, signals: frozenset[Signal]) -> bool:
        return not self.signals.isdisjoint(signals)


def _single(project_type: ProjectType) -> Callable[[frozenset[Signal]], ProjectType]:
    return lambda _signals: project_type


def _pick_c_family(signals: frozenset[Signal]) -> ProjectType:
    has_c = Signal.C_SOURCE in signals
    has_cpp = Signal.CPP_SOURCE in signals
    if has_c and has_cpp:
        return ProjectType.C_CPP
    if has_c:
        return ProjectType.C
    if has_cpp:
        return ProjectType.CPP
    # Only the makefile signal is left; its language is unknown.
    return ProjectType.C_CPP


def _category(signal: Signal, project_type: ProjectType) -> Category:
    return Category(signals=frozenset({signal}), pick=_single(project_type))


CATEGORY_PRIORITY: tuple[Category, ...] = (
    _category(Signal.ANDROID_STUDIO, ProjectType.ANDROID_STUDIO),
    Category(
        signals=frozenset({Signal.C_SOURCE, Signal.CPP_SOURCE, Signal.MAKEFILE}),
        pick=_pick_c_family,
    ),
    _category(Signal.DART, ProjectType.DART),
    _category(Signal.GO, ProjectType.GO),
    _category(Signal.TYPESCRIPT, ProjectType.TYPESCRIPT),
    _category(Signal.JAVASCRIPT, ProjectType.JAVASCRIPT),
    _category(Signal.LUA, ProjectType.LUA),
    _category(Signal.ODIN, ProjectType.ODIN),
    _category(Signal.PYTHON, ProjectType.PYTHON),
    _category(Signal.RUST, ProjectType.RUST),
    _category(Signal.VISUAL_STUDIO, ProjectType.VISUAL_STUDIO),
    _category(Signal.XCODE, ProjectType.XCODE),
    _category(Signal.ZIG, ProjectType.ZIG),
)


def resolve_project_type(signals: Iterable[Signal]) -> ProjectType:
    """Return exactly one ``ProjectType`` for a set of true signals.

    Categories are tried in ``CATEGORY_PRIORITY`` order and the first one with
    a true signal wins. The generic coding-project marker is only consulted
    when no category matched.
    """
    active = frozenset(signals)
    for category in CATEGORY_PRIORITY:
        if category.applies(active):
            return category.pick(active)
    if Signal.GENERIC_PROJECT in active:
        return ProjectType.GENERIC_PROJECT
    return ProjectType.UNDETERMINED


def classify_entries(entries: Iterable[EntryInfo]) -> ProjectType:
    return resolve_project_type(evaluate_signals(entries))


__all__ = [
    "ProjectType",
    "Category",
    "CATEGORY_PRIORITY",
    "resolve_project_type",
    "classify_entries",
]
