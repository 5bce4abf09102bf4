"""Filesystem capabilities consumed by the tree walker.

``OSFS`` lists real directories via ``os.scandir``; ``MemoryFS`` serves a
nested-dict tree for tests and programmatic callers. Both raise
``FileSystemError`` when a directory cannot be listed.
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Protocol

from .errors import FileSystemError

logger = logging.getLogger(__name__)


class FS(Protocol):
    """Directory listing plus a directory test for listed children.

    ``is_dir(path, follow_symlinks=True)`` asks whether ``path`` reaches a
    directory even through a symlink; the walker uses it for the walk root.
    """

    def list_dir(self, path: Path) -> list[Path]: ...

    def is_dir(self, path: Path, follow_symlinks: bool = False) -> bool: ...


class OSFS:
    """Operating-system filesystem.

    Children come back as ``directory / name`` sorted case-insensitively by
    name, so output does not depend on platform enumeration order. Symlinked
    children are listed but not descended into unless ``follow_symlinks``.
    """

    def __init__(self, follow_symlinks: bool = False) -> None:
        self.follow_symlinks = follow_symlinks

    def list_dir(self, path: Path) -> list[Path]:
        path = Path(path)
        try:
            with os.scandir(path) as entries:
                names = [entry.name for entry in entries]
        except OSError as exc:
            raise FileSystemError(path, exc) from exc
        names.sort(key=lambda name: (name.lower(), name))
        logger.debug("listed %d children of %s", len(names), path)
        return [path / name for name in names]

    def is_dir(self, path: Path, follow_symlinks: bool = False) -> bool:
        path = Path(path)
        if not (follow_symlinks or self.follow_symlinks) and path.is_symlink():
            return False
        try:
            return path.is_dir()
        except OSError:
            return False


MemoryTree = Mapping[str, "MemoryTree | None"]


class MemoryFS:
    """In-memory tree: mappings are directories, ``None`` values are files.

    Listing order is the mapping's insertion order.
    """

    def __init__(self, root: str | PurePath, tree: MemoryTree) -> None:
        self.root = PurePath(root)
        self.tree = tree

    def _node(self, path: Path) -> MemoryTree | None | bool:
        """Return the mapping/``None`` stored at ``path``, ``False`` when absent."""
        try:
            parts = PurePath(path).relative_to(self.root).parts
        except ValueError:
            return False
        node: MemoryTree | None = self.tree
        for part in parts:
            if not isinstance(node, Mapping) or part not in node:
                return False
            node = node[part]
        return node

    def list_dir(self, path: Path) -> list[Path]:
        node = self._node(path)
        if not isinstance(node, Mapping):
            raise FileSystemError(Path(path), NotADirectoryError(errno.ENOTDIR, "Not a directory", str(path)))
        return [Path(path) / name for name in node]

    def is_dir(self, path: Path, follow_symlinks: bool = False) -> bool:
        return isinstance(self._node(path), Mapping)


__all__ = ["FS", "OSFS", "MemoryFS", "MemoryTree"]
