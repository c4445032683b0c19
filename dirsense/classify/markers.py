"""Marker rules and signal evaluation over one directory's entries.

Each signal is a pure function of the entry sequence: a rule matches an
entry by kind plus an exact name or a name suffix. Signals never depend on
each other or on entry order, so all of them are computed in one pass.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..entry_model import SIZED_KINDS, EntryInfo, EntryKind

_DIRECTORY_KINDS = frozenset({EntryKind.DIRECTORY})


class Signal(Enum):
    GENERIC_PROJECT = "generic coding project"
    ANDROID_STUDIO = "Android Studio / IntelliJ"
    C_SOURCE = "C"
    CPP_SOURCE = "C++"
    MAKEFILE = "C/C++ (makefile)"
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


@dataclass(frozen=True)
class MarkerRule:
    """Match entries of ``kinds`` whose name is in ``names`` or ends with a suffix."""

    kinds: frozenset[EntryKind]
    names: frozenset[str] = frozenset()
    suffixes: tuple[str, ...] = ()

    def matches(self, entry: EntryInfo) -> bool:
        if entry.kind not in self.kinds:
            return False
        if entry.name in self.names:
            return True
        return entry.name.endswith(self.suffixes)


def files(*names: str) -> MarkerRule:
    return MarkerRule(kinds=SIZED_KINDS, names=frozenset(names))


def file_suffixes(*suffixes: str) -> MarkerRule:
    return MarkerRule(kinds=SIZED_KINDS, suffixes=suffixes)


def dirs(*names: str) -> MarkerRule:
    return MarkerRule(kinds=_DIRECTORY_KINDS, names=frozenset(names))


def dir_suffixes(*suffixes: str) -> MarkerRule:
    return MarkerRule(kinds=_DIRECTORY_KINDS, suffixes=suffixes)


MARKER_RULES: dict[Signal, tuple[MarkerRule, ...]] = {
    Signal.GENERIC_PROJECT: (
        files(".gitignore"),
        dirs(".git", ".vscode"),
    ),
    Signal.ANDROID_STUDIO: (
        dirs(".gradle", ".idea", "gradle"),
        files("build.gradle.kts", "gradle.properties", "gradlew", "gradlew.bat", "settings.gradle.kts"),
    ),
    Signal.C_SOURCE: (file_suffixes(".c", ".h"),),
    Signal.CPP_SOURCE: (file_suffixes(".cpp"),),
    Signal.MAKEFILE: (files("makefile", "Makefile"),),
    Signal.DART: (
        dirs(".dart_tool"),
        files("pubspec.yaml", "pubspec.lock", "analysis_options.yaml"),
    ),
    Signal.GO: (
        files("go.mod"),
        file_suffixes(".go"),
    ),
    Signal.TYPESCRIPT: (
        files("tsconfig.json"),
        file_suffixes(".ts", ".js.map"),
    ),
    Signal.JAVASCRIPT: (
        files("package.json", "package-lock.json"),
        dirs("node_modules"),
        file_suffixes(".js"),
    ),
    Signal.LUA: (file_suffixes(".lua"),),
    Signal.ODIN: (
        files("ols.json"),
        file_suffixes(".odin"),
    ),
    Signal.PYTHON: (file_suffixes(".py"),),
    Signal.RUST: (files("Cargo.toml", "Cargo.lock"),),
    Signal.VISUAL_STUDIO: (
        dirs(".vs"),
        file_suffixes(".sln"),
    ),
    Signal.XCODE: (dir_suffixes(".xcodeproj"),),
    Signal.ZIG: (
        files("build.zig"),
        file_suffixes(".zon"),
        dirs("zig-cache", "zig-out"),
    ),
}


def entry_signals(entry: EntryInfo) -> frozenset[Signal]:
    """Return every signal a single entry triggers."""
    return frozenset(
        signal
        for signal, rules in MARKER_RULES.items()
        if any(rule.matches(entry) for rule in rules)
    )


def evaluate_signals(entries: Iterable[EntryInfo]) -> frozenset[Signal]:
    """Return the set of signals that are true for ``entries``."""
    found: set[Signal] = set()
    for entry in entries:
        found |= entry_signals(entry)
    return frozenset(found)


def matching_entries(entries: Iterable[EntryInfo], signal: Signal) -> list[EntryInfo]:
    """Return the entries that set ``signal``, in input order."""
    rules = MARKER_RULES[signal]
    return [entry for entry in entries if any(rule.matches(entry) for rule in rules)]


__all__ = [
    "Signal",
    "MarkerRule",
    "MARKER_RULES",
    "entry_signals",
    "evaluate_signals",
    "matching_entries",
]
