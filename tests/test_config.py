from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from goat import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if payload is not None:
            text = payload if isinstance(payload, str) else json.dumps(payload)
            config_path.write_text(text, encoding="utf-8")
        patcher = mock.patch("goat.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        return config_path

    def test_missing_file_loads_as_empty(self) -> None:
        self._with_config(None)

        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_title())
        self.assertEqual(config.load_mappings(), [])

    def test_malformed_or_non_object_json_loads_as_empty(self) -> None:
        for payload in ("{not json", "[1, 2]", '"text"'):
            with self.subTest(payload=payload):
                self._with_config(payload)
                self.assertEqual(config.load_config(), {})

    def test_string_settings_are_stripped_and_blank_values_ignored(self) -> None:
        self._with_config({"title": "  deploy  ", "theme": "ocean", "log_level": "   "})

        self.assertEqual(config.load_title(), "deploy")
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertIsNone(config.load_log_level())

    def test_non_string_settings_are_ignored(self) -> None:
        self._with_config({"title": 12, "theme": ["ocean"]})

        self.assertIsNone(config.load_title())
        self.assertIsNone(config.load_theme_name())

    def test_mappings_keep_only_string_entries(self) -> None:
        self._with_config({"mappings": ["65:a:alpha", 7, None, "66:b:beta"]})

        self.assertEqual(config.load_mappings(), ["65:a:alpha", "66:b:beta"])

    def test_non_list_mappings_are_ignored(self) -> None:
        self._with_config({"mappings": "65:a:alpha"})

        self.assertEqual(config.load_mappings(), [])


if __name__ == "__main__":
    unittest.main()
