"""Tests for config persistence and value sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyedit import config
from lazyedit.config import EditorSettings


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazyedit.config.CONFIG_PATH", Path(tmp) / "none.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_settings(), EditorSettings())

    def test_malformed_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("lazyedit.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_settings(), EditorSettings())
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("lazyedit.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_settings_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            expected = EditorSettings(tab_stop=4, quit_times=2, message_timeout_seconds=1.5)
            with mock.patch("lazyedit.config.CONFIG_PATH", config_path):
                config.save_settings(expected)
                self.assertEqual(config.load_settings(), expected)

    def test_save_settings_keeps_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazyedit.config.CONFIG_PATH", config_path):
                config.save_config({"other": "kept"})
                config.save_settings(EditorSettings())
                self.assertEqual(config.load_config().get("other"), "kept")

    def test_invalid_values_are_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazyedit.config.CONFIG_PATH", config_path):
                config.save_config({"tab_stop": 0, "quit_times": True, "message_timeout_seconds": -2})
                self.assertEqual(config.load_settings(), EditorSettings())
                config.save_config({"tab_stop": 99, "quit_times": "3", "message_timeout_seconds": "x"})
                self.assertEqual(config.load_settings(), EditorSettings())
                config.save_config({"tab_stop": 2, "message_timeout_seconds": 3})
                self.assertEqual(
                    config.load_settings(),
                    EditorSettings(tab_stop=2, message_timeout_seconds=3.0),
                )

    def test_save_config_ignores_write_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("x", encoding="utf-8")
            with mock.patch("lazyedit.config.CONFIG_PATH", blocker / "config.json"):
                config.save_config({"tab_stop": 4})


if __name__ == "__main__":
    unittest.main()
