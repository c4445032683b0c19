"""Command-line front door for dirsense.

Splits arguments into switches and paths, then scans and classifies each
path in order. Problems with one switch or one path are reported and the
run moves on; only unexpected filesystem failures stop it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TextIO

from . import config
from .classify import evaluate_signals, matching_entries, resolve_project_type
from .entry_model import EntryStatError, PathProblem, classify_open_error, scan_directory
from .render import format_header, render_report
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

INT8_MIN = -128
INT8_MAX = 127
MAX_DEPTH_ERROR = -1


@dataclass(frozen=True)
class ScanOptions:
    """Validated switches shared by every scanned path."""

    follow_dot: bool = False
    verbose: bool = False
    ignore_non_dirs: bool = False
    max_depth: int | None = None
    no_color: bool = False
    theme: str | None = None
    debug: bool = False


@dataclass(frozen=True)
class CommandLine:
    options: ScanOptions
    paths: tuple[str, ...]


def _int8(value: str) -> int:
    """argparse type for signed 8-bit integer values."""
    if "=" in value:
        raise argparse.ArgumentTypeError("broken use of '='")
    try:
        parsed = int(value, 10)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc
    if not INT8_MIN <= parsed <= INT8_MAX:
        raise argparse.ArgumentTypeError(f"{parsed} is outside [{INT8_MIN}, {INT8_MAX}]")
    return parsed


def build_switch_parser() -> argparse.ArgumentParser:
    """Return the parser applied to one switch token at a time."""
    parser = argparse.ArgumentParser(
        prog="dirsense",
        description="Guess the project type of directories from their marker files.",
        usage="%(prog)s [-d] [-v] [-i] [-m=DEPTH] [--no-color] [--theme=NAME] [--debug] [path ...]",
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-d", dest="follow_dot", action="store_true", help="Follow dot directories.")
    parser.add_argument("-v", dest="verbose", action="store_true", help="Always list directory entries.")
    parser.add_argument(
        "-i",
        dest="ignore_non_dirs",
        action="store_true",
        help="Silently skip paths that are not directories.",
    )
    parser.add_argument("-m", dest="max_depth", type=_int8, default=None, help="Maximum recursion depth (-128..127).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--debug", action="store_true", help="Log scanning and marker details to stderr.")
    return parser


def _is_switch(token: str) -> bool:
    return len(token) > 1 and token.startswith("-")


def parse_command_line(argv: Sequence[str]) -> CommandLine:
    """Split ``argv`` into validated options and ordered paths.

    Every switch token is parsed on its own so a bad switch is reported and
    skipped without affecting the others. An invalid ``-m`` value leaves
    ``max_depth`` at ``MAX_DEPTH_ERROR``.
    """
    parser = build_switch_parser()
    namespace = parser.parse_args([])
    paths: list[str] = []

    for token in argv:
        if not _is_switch(token):
            paths.append(token)
            continue
        try:
            _namespace, extras = parser.parse_known_args([token], namespace)
        except argparse.ArgumentError as exc:
            if exc.argument_name == "-m":
                logger.warning("* invalid -m value in '%s': %s", token, exc.message)
                namespace.max_depth = MAX_DEPTH_ERROR
            else:
                logger.warning("* bad switch '%s': %s", token, exc.message)
            continue
        for extra in extras:
            logger.warning("* unknown switch: '%s'", extra)

    options = ScanOptions(
        follow_dot=namespace.follow_dot,
        verbose=namespace.verbose,
        ignore_non_dirs=namespace.ignore_non_dirs,
        max_depth=namespace.max_depth,
        no_color=namespace.no_color,
        theme=namespace.theme,
        debug=namespace.debug,
    )
    return CommandLine(options=options, paths=tuple(paths))


def apply_config_defaults(options: ScanOptions) -> ScanOptions:
    """Fill display options the command line left unset from persisted config."""
    return replace(
        options,
        verbose=options.verbose or config.load_default_verbose(),
        no_color=options.no_color or config.load_no_color(),
        theme=options.theme if options.theme is not None else config.load_theme_name(),
    )


def configure_logging(debug: bool) -> None:
    """Send package diagnostics to stderr as bare messages."""
    package_logger = logging.getLogger("dirsense")
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def build_report(path: str, options: ScanOptions, *, color: bool = False, show_header: bool = False) -> list[str] | None:
    """Scan and classify one path and return its report lines.

    Returns ``None`` when the path was reported or skipped instead.
    Unexpected directory-open failures and ``EntryStatError`` propagate.
    """
    try:
        entries = scan_directory(path)
    except OSError as exc:
        problem = classify_open_error(exc)
        if problem is None:
            raise
        if problem is PathProblem.NOT_A_DIRECTORY and options.ignore_non_dirs:
            logger.debug("skipping non-directory %s", path)
            return None
        logger.warning("%s", problem.describe(path))
        return None

    signals = evaluate_signals(entries)
    result = resolve_project_type(signals)
    if logger.isEnabledFor(logging.DEBUG):
        for signal in sorted(signals, key=lambda item: item.name):
            names = ", ".join(entry.name for entry in matching_entries(entries, signal))
            logger.debug("%s: %s marker(s): %s", path, signal.value, names)
        logger.debug("%s: resolved %s", path, result.name)

    theme = resolve_theme(options.theme, no_color=options.no_color or not color)
    lines = render_report(result, entries, verbose=options.verbose, theme=theme)
    if show_header:
        lines.insert(0, format_header(path, theme))
    return lines


def write_report(out: TextIO, lines: list[str]) -> None:
    """Write report lines, passing undecodable name bytes through unchanged.

    Entry names that are not valid UTF-8 arrive surrogate-escaped; they are
    written as their original bytes when ``out`` exposes a binary buffer.
    """
    text = "".join(f"{line}\n" for line in lines)
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        return
    out.flush()
    buffer.write(text.encode("utf-8", errors="surrogateescape"))
    buffer.flush()


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and report on every requested directory.

    ``argv`` is primarily for tests; when omitted ``sys.argv[1:]`` is used.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging("--debug" in args)
    command_line = parse_command_line(args)
    options = apply_config_defaults(command_line.options)
    logger.debug("options: %s", options)

    out = sys.stdout
    color = out.isatty()
    show_header = len(command_line.paths) > 1
    for path in command_line.paths:
        try:
            lines = build_report(path, options, color=color, show_header=show_header)
        except (OSError, EntryStatError) as exc:
            raise SystemExit(f"** unexpected error scanning '{path}': {exc}") from exc
        if lines is not None:
            write_report(out, lines)


if __name__ == "__main__":
    main()
