"""Tests for persisted JSON settings."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazydisk.runtime import config
from lazydisk.treemap import DEFAULT_MIN_TILE_AREA


class ConfigBehaviorTests(unittest.TestCase):
    def _load_with(self, content: str | None) -> config.Settings:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            if content is not None:
                config_path.write_text(content, encoding="utf-8")
            with mock.patch("lazydisk.runtime.config.CONFIG_PATH", config_path):
                return config.load_settings()

    def test_missing_file_uses_defaults(self) -> None:
        self.assertEqual(self._load_with(None), config.Settings())

    def test_reads_all_known_keys(self) -> None:
        settings = self._load_with(
            json.dumps({"theme": " ocean ", "use_trash": True, "apparent_size": True, "min_tile_area": 9})
        )

        self.assertEqual(settings.theme, "ocean")
        self.assertTrue(settings.use_trash)
        self.assertTrue(settings.apparent_size)
        self.assertEqual(settings.min_tile_area, 9.0)

    def test_malformed_json_falls_back_to_defaults(self) -> None:
        self.assertEqual(self._load_with("{not json"), config.Settings())

    def test_non_object_json_falls_back_to_defaults(self) -> None:
        self.assertEqual(self._load_with("[1, 2]"), config.Settings())

    def test_invalid_values_are_ignored(self) -> None:
        settings = self._load_with(
            json.dumps({"theme": 3, "use_trash": "yes", "apparent_size": 1, "min_tile_area": True})
        )

        self.assertIsNone(settings.theme)
        self.assertFalse(settings.use_trash)
        self.assertFalse(settings.apparent_size)
        self.assertEqual(settings.min_tile_area, DEFAULT_MIN_TILE_AREA)

    def test_non_positive_tile_area_is_rejected(self) -> None:
        settings = self._load_with(json.dumps({"min_tile_area": -1}))

        self.assertEqual(settings.min_tile_area, DEFAULT_MIN_TILE_AREA)


if __name__ == "__main__":
    unittest.main()
