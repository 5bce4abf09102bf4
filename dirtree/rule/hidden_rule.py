"""Rule hiding dot-files and dot-directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath

from .base import Rule


@dataclass(frozen=True)
class HideHiddenRule(Rule):
    """Ignore paths whose final segment starts with ``.``."""

    def is_ignored(self, path: Path) -> bool:
        return PurePath(path).name.startswith(".")
