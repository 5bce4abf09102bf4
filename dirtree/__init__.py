"""Public package surface for dirtree.

Exports the rule types, the ignore-file parser, and the tree walker.
``main`` imports the CLI lazily to keep package imports lightweight.
"""

from __future__ import annotations

from .errors import DirtreeError, FileSystemError
from .formatter import Formatter
from .fs import FS, OSFS, MemoryFS
from .ignore_config import IgnoreConfig
from .ignore_files import open_gitignores, open_treeignore
from .options import Options, build_rule
from .rule import DirectoriesOnlyRule, HideHiddenRule, OverrideRule, PathRule, PriorityRule, Rule
from .tree import Tree
from .types import Entry, Summary
from .ui import UI, RecordingUI, StdoutUI


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "DirtreeError",
    "FileSystemError",
    "Formatter",
    "FS",
    "OSFS",
    "MemoryFS",
    "IgnoreConfig",
    "open_gitignores",
    "open_treeignore",
    "Options",
    "build_rule",
    "Rule",
    "PathRule",
    "OverrideRule",
    "HideHiddenRule",
    "DirectoriesOnlyRule",
    "PriorityRule",
    "Tree",
    "Entry",
    "Summary",
    "UI",
    "StdoutUI",
    "RecordingUI",
]
