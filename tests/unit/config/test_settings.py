"""Tests for persisted display defaults and input sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirsense import config


def _write_config(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirsense.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_no_color())
                self.assertFalse(config.load_default_verbose())
                self.assertIsNone(config.load_theme_name())

    def test_stored_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirsense.config.CONFIG_PATH", config_path):
                _write_config(config.CONFIG_PATH, {"theme": " ocean ", "no_color": True, "verbose": True})

                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertTrue(config.load_no_color())
                self.assertTrue(config.load_default_verbose())

    def test_non_boolean_flags_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirsense.config.CONFIG_PATH", Path(tmp) / "config.json"):
                _write_config(config.CONFIG_PATH, {"no_color": "yes", "verbose": 1, "theme": 42})

                self.assertFalse(config.load_no_color())
                self.assertFalse(config.load_default_verbose())
                self.assertIsNone(config.load_theme_name())

    def test_malformed_or_non_object_json_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirsense.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_blank_theme_counts_as_unset(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("dirsense.config.CONFIG_PATH", Path(tmp) / "config.json"):
                _write_config(config.CONFIG_PATH, {"theme": "   "})
                self.assertIsNone(config.load_theme_name())


if __name__ == "__main__":
    unittest.main()
