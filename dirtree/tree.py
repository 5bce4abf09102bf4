"""Depth-first tree walker driving a UI sink.

The walker filters each directory listing through one composed rule, emits
an ``Entry`` per kept child and maintains the sink's per-depth indentation
state through ``add_indent``/``remove_indent``. Listing errors propagate and
abort the walk; entries already emitted stay emitted.
"""

from __future__ import annotations

from pathlib import Path

from .fs import FS
from .rule import Rule
from .types import Entry, Summary
from .ui import UI


class Tree:
    """Walk a directory tree once per ``walk`` call."""

    def __init__(self, rule: Rule, fs: FS, ui: UI) -> None:
        self.rule = rule
        self.fs = fs
        self.ui = ui

    def walk(self, root: Path) -> Summary:
        """Emit ``root`` and its filtered descendants, then the summary."""
        root = Path(root)
        is_dir = self.fs.is_dir(root, follow_symlinks=True)
        self.ui.file(Entry(name=str(root), depth=0, is_last=False, is_dir=is_dir))
        n_dirs, n_files = self.walk_nested(root, 1)
        self.ui.summary(n_dirs, n_files)
        return Summary(n_dirs=n_dirs, n_files=n_files)

    def walk_nested(self, directory: Path, depth: int) -> tuple[int, int]:
        """Emit children of ``directory`` at ``depth`` and return their counts.

        The walk root (depth 1) is entered even when it is a symlink; nested
        symlinks follow the filesystem's own policy.
        """
        if not self.fs.is_dir(directory, follow_symlinks=depth == 1):
            return 0, 0

        self.ui.add_indent(depth - 1)

        n_dirs = 0
        n_files = 0
        children = self.list_dir_matches(directory)
        last_index = len(children) - 1
        for index, path in enumerate(children):
            is_last = index == last_index
            is_dir = self.fs.is_dir(path)
            if is_dir:
                if is_last:
                    self.ui.remove_indent(depth - 1)
                n_dirs += 1
            else:
                n_files += 1
            self.ui.file(Entry(name=path.name, depth=depth, is_last=is_last, is_dir=is_dir))
            if is_dir:
                nested_dirs, nested_files = self.walk_nested(path, depth + 1)
                n_dirs += nested_dirs
                n_files += nested_files
        self.ui.remove_indent(depth)

        return n_dirs, n_files

    def list_dir_matches(self, directory: Path) -> list[Path]:
        """List ``directory`` keeping only paths the rule does not ignore."""
        return [path for path in self.fs.list_dir(directory) if not self.rule.is_ignored(path)]


__all__ = ["Entry", "Summary", "Tree"]
