"""Walk options and the top-level rule they select.

``build_rule`` layers the active rules highest priority first: hidden-file
suppression, directories-only mode, the global treeignore, then gitignores
from the deepest directory upwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .fs import FS, OSFS
from .ignore_files import open_gitignores, open_treeignore
from .rule import DirectoriesOnlyRule, HideHiddenRule, PriorityRule, Rule


@dataclass(frozen=True)
class Options:
    """Settings for one tree walk."""

    directory: Path = Path(".")
    show_hidden: bool = False
    directories_only: bool = False
    treeignore: bool = True
    gitignore: bool = True
    ascii_glyphs: bool = False
    follow_symlinks: bool = False
    theme: str | None = None
    no_color: bool = False


def build_rule(options: Options, fs: FS | None = None) -> PriorityRule:
    """Compose the rule for ``options``; ``fs`` supplies the directory test."""
    fs = fs or OSFS()
    rules: list[Rule] = []
    if not options.show_hidden:
        rules.append(HideHiddenRule())
    if options.directories_only:
        rules.append(DirectoriesOnlyRule(is_dir=fs.is_dir))
    if options.treeignore:
        treeignore = open_treeignore()
        if treeignore is not None:
            rules.append(treeignore.rule())
    if options.gitignore:
        # Deeper gitignores come first and win over their parents.
        for gitignore in open_gitignores(options.directory):
            rules.append(gitignore.rule())
    return PriorityRule(rules)


__all__ = ["Options", "build_rule"]
