"""Tests for theme selection and per-kind palette lookups."""

from __future__ import annotations

import unittest

from dirsense.entry_model import EntryKind
from dirsense.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_normalize_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertEqual(normalize_theme_name("neon"), "default")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)

    def test_every_kind_has_a_color(self) -> None:
        for kind in EntryKind:
            with self.subTest(kind=kind):
                self.assertTrue(DEFAULT_THEME.entry_color(kind))
                self.assertEqual(PLAIN_THEME.entry_color(kind), "")


if __name__ == "__main__":
    unittest.main()
