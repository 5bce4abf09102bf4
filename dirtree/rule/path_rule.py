"""Exact-path ignore rule."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from .base import Rule


def normalize_path(path: str | PurePath) -> str:
    """Return the lexical absolute form used for path equality.

    ``./a``, ``a`` and ``<cwd>/a`` all normalize to the same string; ``..``
    segments collapse lexically, so ``a/../b`` equals ``b``. No symlinks are
    resolved and nothing touches the filesystem.
    """
    return os.path.abspath(os.fspath(path))


@dataclass(frozen=True, init=False)
class PathRule(Rule):
    """Ignore exactly one path.

    Equality is on the normalized full path, never by prefix or glob: ``a``
    matches ``./a`` and ``x/../a`` but not ``a/b`` or ``b/a``.
    """

    path: PurePath

    def __init__(self, path: str | PurePath) -> None:
        object.__setattr__(self, "path", PurePath(path))

    def is_ignored(self, path: Path) -> bool:
        return normalize_path(path) == normalize_path(self.path)
