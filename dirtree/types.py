"""Value types exchanged between the walker and UI sinks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One rendered row: display name, depth (root is 0), last-sibling flag."""

    name: str
    depth: int
    is_last: bool
    is_dir: bool = False


@dataclass(frozen=True)
class Summary:
    """Directory/file totals for one walk, root excluded."""

    n_dirs: int = 0
    n_files: int = 0


__all__ = ["Entry", "Summary"]
