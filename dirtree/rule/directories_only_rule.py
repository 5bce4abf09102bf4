"""Rule that keeps directories and drops everything else."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .base import Rule


@dataclass(frozen=True)
class DirectoriesOnlyRule(Rule):
    """Ignore every path that is not a directory.

    ``is_dir`` defaults to ``Path.is_dir``; walkers over a non-OS filesystem
    pass their own directory test.
    """

    is_dir: Callable[[Path], bool] = field(default=Path.is_dir, compare=False)

    def is_ignored(self, path: Path) -> bool:
        return not self.is_dir(Path(path))
