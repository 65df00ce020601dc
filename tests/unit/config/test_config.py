"""Tests for persisted listing defaults and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from minils import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "absent" / "config.json"
            with mock.patch("minils.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_extended_default())
                self.assertEqual(config.load_file_output_width(), config.DEFAULT_FILE_OUTPUT_WIDTH)

    def test_malformed_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            for payload in ("{not json", "[1, 2]", '"text"'):
                config_path.write_text(payload, encoding="utf-8")
                with mock.patch("minils.config.CONFIG_PATH", config_path):
                    self.assertEqual(config.load_config(), {})

    def test_extended_default_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("minils.config.CONFIG_PATH", config_path):
                config.save_extended_default(True)
                self.assertTrue(config.load_extended_default())
                config.save_extended_default(False)
                self.assertFalse(config.load_extended_default())

    def test_extended_default_accepts_only_booleans(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("minils.config.CONFIG_PATH", config_path):
                config.save_config({"extended": "yes"})
                self.assertFalse(config.load_extended_default())

    def test_file_width_rejects_invalid_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("minils.config.CONFIG_PATH", config_path):
                for value in (0, -10, True, 12.5, "300"):
                    config.save_config({"file_width": value})
                    self.assertEqual(config.load_file_output_width(), config.DEFAULT_FILE_OUTPUT_WIDTH)
                config.save_config({"file_width": 320})
                self.assertEqual(config.load_file_output_width(), 320)

    def test_save_preserves_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("minils.config.CONFIG_PATH", config_path):
                config.save_config({"file_width": 150})
                config.save_extended_default(True)
                self.assertEqual(config.load_config(), {"file_width": 150, "extended": True})


if __name__ == "__main__":
    unittest.main()
