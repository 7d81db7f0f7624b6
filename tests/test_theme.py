from __future__ import annotations

import unittest

from pygments.console import codes

from readdir.classify import Category
from readdir.theme import (
    DEFAULT_THEME,
    PLAIN_THEME,
    ColorSpec,
    available_theme_names,
    color_for,
    normalize_theme_name,
    resolve_theme,
)


class ThemeTests(unittest.TestCase):
    def test_default_category_colors(self) -> None:
        self.assertEqual(color_for(Category.DIRECTORY), ColorSpec("blue", bold=True))
        self.assertEqual(color_for(Category.SYMLINK), ColorSpec("cyan"))
        self.assertEqual(color_for(Category.EXECUTABLE), ColorSpec("green"))
        self.assertEqual(color_for(Category.REGULAR), ColorSpec("gray"))
        self.assertEqual(color_for(Category.MISSING), ColorSpec("red", bold=True))

    def test_sequence_starts_from_clean_state(self) -> None:
        self.assertEqual(ColorSpec("cyan").sequence(), codes["reset"] + codes["cyan"])
        self.assertEqual(ColorSpec().sequence(), "")

    def test_unknown_color_name_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ColorSpec("chartreuse")

    def test_theme_resolution(self) -> None:
        self.assertIn("bright", available_theme_names())
        self.assertEqual(normalize_theme_name("  BRIGHT "), "bright")
        self.assertEqual(normalize_theme_name("nope"), "default")
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertEqual(normalize_theme_name(""), "default")
        self.assertIs(resolve_theme("bright", no_color=True), PLAIN_THEME)
        self.assertEqual(PLAIN_THEME.reset_sequence(), "")


if __name__ == "__main__":
    unittest.main()
