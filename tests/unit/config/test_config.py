from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config
from dirtree.render import DEFAULT_ICONS, Icons


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_default_depth(), config.DEFAULT_MAX_DEPTH)
                self.assertEqual(config.load_icons(), DEFAULT_ICONS)

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_valid_values_are_loaded_from_explicit_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "custom.json"
            config_path.write_text(
                '{"default_depth": 5, "directory_icon": "+", "file_icon": "-"}',
                encoding="utf-8",
            )

            data = config.load_config(config_path)

            self.assertEqual(config.load_default_depth(data), 5)
            self.assertEqual(config.load_icons(data), Icons(directory="+", other="-"))

    def test_invalid_values_are_replaced_by_defaults(self) -> None:
        for bad_depth in (-1, True, "3", 2.5, config.MAX_DEPTH_LIMIT + 1):
            with self.subTest(depth=bad_depth):
                self.assertEqual(config.load_default_depth({"default_depth": bad_depth}), config.DEFAULT_MAX_DEPTH)

        icons = config.load_icons({"directory_icon": "", "file_icon": "a\nb"})
        self.assertEqual(icons, DEFAULT_ICONS)

    def test_identical_icons_fall_back_to_defaults(self) -> None:
        self.assertEqual(config.load_icons({"directory_icon": "*", "file_icon": "*"}), DEFAULT_ICONS)
        self.assertEqual(config.load_icons({"file_icon": DEFAULT_ICONS.directory}), DEFAULT_ICONS)


if __name__ == "__main__":
    unittest.main()
