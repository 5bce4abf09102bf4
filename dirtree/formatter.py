"""Box-drawing line formatter and per-depth indentation state.

``levels[d]`` records whether entries at depth ``d + 1`` still have pending
siblings; a descendant draws a continuation bar in that ancestor's column
while the flag is set and blank space once it is cleared.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from .types import Entry
from .ui_theme import PLAIN_THEME, UITheme


@dataclass(frozen=True)
class Glyphs:
    """Connector and column strings, each four cells wide."""

    tee: str
    last: str
    vert: str
    space: str


UNICODE_GLYPHS = Glyphs(tee="├── ", last="└── ", vert="│   ", space="    ")
ASCII_GLYPHS = Glyphs(tee="|-- ", last="`-- ", vert="|   ", space="    ")

PYTHON_SUFFIXES = frozenset({".py", ".pyi", ".pyw"})


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


class Formatter:
    """Turn walker entries into display lines."""

    def __init__(self, ascii_glyphs: bool = False, theme: UITheme | None = None) -> None:
        self.glyphs = ASCII_GLYPHS if ascii_glyphs else UNICODE_GLYPHS
        self.theme = theme or PLAIN_THEME
        self.levels: list[bool] = []

    def add_indent(self, depth: int) -> None:
        if depth < 0:
            return
        if depth >= len(self.levels):
            self.levels.extend([False] * (depth + 1 - len(self.levels)))
        self.levels[depth] = True

    def remove_indent(self, depth: int) -> None:
        if 0 <= depth < len(self.levels):
            self.levels[depth] = False

    def is_indented(self, depth: int) -> bool:
        """Return whether the column for ancestors at ``depth + 1`` is active."""
        return 0 <= depth < len(self.levels) and self.levels[depth]

    def _paint(self, color: str, text: str) -> str:
        if not color:
            return text
        return f"{color}{text}{self.theme.reset}"

    def _name_color(self, entry: Entry) -> str:
        if entry.depth == 0:
            return self.theme.tree_root
        if entry.is_dir:
            return self.theme.tree_dir
        if PurePath(entry.name).suffix.lower() in PYTHON_SUFFIXES:
            return self.theme.tree_file_python
        return self.theme.tree_file_default

    def prefix(self, entry: Entry) -> str:
        """Return ancestor columns plus the connector for ``entry``."""
        if entry.depth <= 0:
            return ""
        columns = [
            self.glyphs.vert if self.is_indented(column - 1) else self.glyphs.space
            for column in range(1, entry.depth)
        ]
        columns.append(self.glyphs.last if entry.is_last else self.glyphs.tee)
        return "".join(columns)

    def file(self, entry: Entry) -> str:
        """Return the display line for one entry (no trailing newline)."""
        guide = self._paint(self.theme.tree_guide, self.prefix(entry))
        return guide + self._paint(self._name_color(entry), entry.name)

    def summary(self, n_dirs: int, n_files: int) -> str:
        text = f"{_plural(n_dirs, 'directory', 'directories')}, {_plural(n_files, 'file', 'files')}"
        return self._paint(self.theme.summary, text)


__all__ = ["Glyphs", "UNICODE_GLYPHS", "ASCII_GLYPHS", "Formatter"]
