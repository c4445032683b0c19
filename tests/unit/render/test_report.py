"""Tests for report labels, listing rows, and listing visibility."""

from __future__ import annotations

import unittest

from dirsense.classify import ProjectType
from dirsense.entry_model import EntryInfo, EntryKind
from dirsense.render import (
    SIZE_COLUMN_WIDTH,
    format_entry,
    format_header,
    render_report,
    should_show_listing,
)
from dirsense.ui_theme import DEFAULT_THEME


ENTRIES = (
    EntryInfo.for_file_size("main.go", 120),
    EntryInfo("cmd", EntryKind.DIRECTORY),
    EntryInfo.for_file_size("go.mod", 0),
    EntryInfo("locked", EntryKind.ERROR),
)


class ShouldShowListingTests(unittest.TestCase):
    def test_listing_only_when_verbose_or_undetermined(self) -> None:
        self.assertFalse(should_show_listing(ProjectType.GO, verbose=False))
        self.assertTrue(should_show_listing(ProjectType.GO, verbose=True))
        self.assertTrue(should_show_listing(ProjectType.UNDETERMINED, verbose=False))
        self.assertFalse(should_show_listing(ProjectType.GENERIC_PROJECT, verbose=False))


class FormatEntryTests(unittest.TestCase):
    def test_file_row_has_symbol_size_and_name(self) -> None:
        row = format_entry(EntryInfo.for_file_size("main.go", 120))

        self.assertEqual(row, "f " + "120".rjust(SIZE_COLUMN_WIDTH) + "  main.go")

    def test_directory_and_error_rows_leave_size_blank(self) -> None:
        self.assertEqual(format_entry(EntryInfo("cmd", EntryKind.DIRECTORY)), "d " + " " * SIZE_COLUMN_WIDTH + "  cmd")
        self.assertEqual(format_entry(EntryInfo("locked", EntryKind.ERROR)), "! " + " " * SIZE_COLUMN_WIDTH + "  locked")

    def test_empty_file_shows_zero_size(self) -> None:
        self.assertEqual(format_entry(EntryInfo.for_file_size("go.mod", 0)), "e " + "0".rjust(SIZE_COLUMN_WIDTH) + "  go.mod")

    def test_colored_row_wraps_name_in_kind_color(self) -> None:
        row = format_entry(EntryInfo("cmd", EntryKind.DIRECTORY), DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.entry_dir}cmd{DEFAULT_THEME.reset}", row)


class RenderReportTests(unittest.TestCase):
    def test_confident_result_prints_only_label(self) -> None:
        self.assertEqual(render_report(ProjectType.GO, ENTRIES), ["LOOKS LIKE A GO PROJECT DIRECTORY"])

    def test_verbose_appends_sorted_listing(self) -> None:
        lines = render_report(ProjectType.GO, ENTRIES, verbose=True)

        self.assertEqual(lines[0], "LOOKS LIKE A GO PROJECT DIRECTORY")
        self.assertEqual([line.split()[-1] for line in lines[1:]], ["cmd", "go.mod", "locked", "main.go"])

    def test_undetermined_result_includes_listing(self) -> None:
        lines = render_report(ProjectType.UNDETERMINED, ENTRIES)

        self.assertEqual(lines[0], ProjectType.UNDETERMINED.label)
        self.assertEqual(len(lines), 1 + len(ENTRIES))

    def test_header_quotes_path(self) -> None:
        self.assertEqual(format_header("some/dir"), "'some/dir':")


if __name__ == "__main__":
    unittest.main()
