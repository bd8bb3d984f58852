"""Tests for user preference loading and input sanitization.

Ensures malformed or missing config data falls back to defaults.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pathdiff import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("pathdiff.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertFalse(config.load_no_color())

    def test_valid_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"theme": " soft ", "no_color": true}', encoding="utf-8")
            with mock.patch("pathdiff.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_theme_name(), "soft")
                self.assertTrue(config.load_no_color())

    def test_malformed_or_mistyped_values_fall_back(self) -> None:
        cases = [
            "not json",
            "[1, 2, 3]",
            '{"theme": 7, "no_color": "yes"}',
            '{"theme": "   ", "no_color": 1}',
        ]
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            for raw in cases:
                with self.subTest(raw=raw):
                    config_path.write_text(raw, encoding="utf-8")
                    with mock.patch("pathdiff.config.CONFIG_PATH", config_path):
                        self.assertIsNone(config.load_theme_name())
                        self.assertFalse(config.load_no_color())


if __name__ == "__main__":
    unittest.main()
