"""Formatter and stdout sink rendering tests."""

from __future__ import annotations

import io
import unittest
from pathlib import Path

from dirtree.formatter import Formatter
from dirtree.fs import MemoryFS
from dirtree.rule import PriorityRule
from dirtree.tree import Tree
from dirtree.types import Entry
from dirtree.ui import StdoutUI
from dirtree.ui_theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, resolve_theme


def _render(tree: dict, formatter: Formatter | None = None) -> str:
    stream = io.StringIO()
    ui = StdoutUI(formatter or Formatter(), stream)
    Tree(PriorityRule(), MemoryFS("root", tree), ui).walk(Path("root"))
    return stream.getvalue()


class FormatterLineTests(unittest.TestCase):
    def test_root_line_is_bare_name(self) -> None:
        self.assertEqual(Formatter().file(Entry("project", 0, False, True)), "project")

    def test_connector_depends_on_last_flag(self) -> None:
        formatter = Formatter()
        self.assertEqual(formatter.file(Entry("a", 1, False)), "├── a")
        self.assertEqual(formatter.file(Entry("b", 1, True)), "└── b")

    def test_ancestor_columns_follow_indent_state(self) -> None:
        formatter = Formatter()
        formatter.add_indent(0)
        self.assertEqual(formatter.file(Entry("x", 2, True)), "│   └── x")
        formatter.remove_indent(0)
        self.assertEqual(formatter.file(Entry("x", 2, True)), "    └── x")

    def test_remove_indent_for_unknown_level_is_noop(self) -> None:
        formatter = Formatter()
        formatter.remove_indent(5)
        formatter.remove_indent(-1)
        self.assertEqual(formatter.levels, [])

    def test_ascii_glyphs(self) -> None:
        formatter = Formatter(ascii_glyphs=True)
        formatter.add_indent(0)
        self.assertEqual(formatter.file(Entry("x", 2, False)), "|   |-- x")
        self.assertEqual(formatter.file(Entry("y", 2, True)), "|   `-- y")

    def test_summary_pluralizes(self) -> None:
        formatter = Formatter()
        self.assertEqual(formatter.summary(2, 3), "2 directories, 3 files")
        self.assertEqual(formatter.summary(1, 1), "1 directory, 1 file")
        self.assertEqual(formatter.summary(0, 0), "0 directories, 0 files")

    def test_theme_colors_directory_names_only_when_enabled(self) -> None:
        colored = Formatter(theme=DEFAULT_THEME).file(Entry("src", 1, True, True))
        self.assertIn(DEFAULT_THEME.tree_dir + "src" + DEFAULT_THEME.reset, colored)
        plain = Formatter(theme=resolve_theme("default", no_color=True)).file(Entry("src", 1, True, True))
        self.assertEqual(plain, "└── src")


class RenderedTreeTests(unittest.TestCase):
    def test_renders_nested_tree(self) -> None:
        output = _render({"src": {"main.py": None, "util": {}}, "README": None})
        self.assertEqual(
            output,
            "root\n"
            "├── src\n"
            "│   ├── main.py\n"
            "│   └── util\n"
            "└── README\n"
            "\n"
            "2 directories, 2 files\n",
        )

    def test_last_directory_subtree_uses_blank_column(self) -> None:
        output = _render({"a": None, "b": {"c": {"d": None}, "e": None}})
        self.assertEqual(
            output.splitlines()[:6],
            [
                "root",
                "├── a",
                "└── b",
                "    ├── c",
                "    │   └── d",
                "    └── e",
            ],
        )

    def test_inner_last_directory_keeps_outer_bar(self) -> None:
        output = _render({"a": {"b": {"c": None}}, "z": None})
        self.assertEqual(
            output.splitlines()[:5],
            [
                "root",
                "├── a",
                "│   └── b",
                "│       └── c",
                "└── z",
            ],
        )


class ThemeTests(unittest.TestCase):
    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)

    def test_no_color_returns_plain_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_plain_is_not_selectable_by_name(self) -> None:
        self.assertNotIn("plain", available_theme_names())
        self.assertIn("ocean", available_theme_names())


if __name__ == "__main__":
    unittest.main()
