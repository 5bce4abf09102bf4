"""Locate and read ignore files for a tree walk.

Two sources exist: a global ``treeignore`` in the user config directory
(legacy ``~/.treeignore`` as fallback) and the ``.gitignore`` files found
from the walk root up to its enclosing repository.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import CONFIG_DIR
from .ignore_config import IgnoreConfig

logger = logging.getLogger(__name__)

GITIGNORE_FILENAME = ".gitignore"
TREEIGNORE_FILENAME = "treeignore"
TREEIGNORE_PATH = CONFIG_DIR / TREEIGNORE_FILENAME
LEGACY_TREEIGNORE_PATH = Path.home() / ".treeignore"
GITIGNORE_MAX_PARENTS = 128


def _read_ignore_file(path: Path) -> str | None:
    """Return file text, or ``None`` when missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.debug("skipping unreadable ignore file %s: %s", path, exc)
        return None


def _treeignore_path() -> Path:
    """Return preferred treeignore path, falling back to the legacy location."""
    if TREEIGNORE_PATH.exists():
        return TREEIGNORE_PATH
    if LEGACY_TREEIGNORE_PATH.exists():
        return LEGACY_TREEIGNORE_PATH
    return TREEIGNORE_PATH


def open_treeignore() -> IgnoreConfig | None:
    """Load the global treeignore; absolute patterns anchor at the home directory."""
    path = _treeignore_path()
    content = _read_ignore_file(path)
    if content is None:
        return None
    logger.debug("loaded treeignore %s", path)
    return IgnoreConfig(content, Path.home())


def open_gitignores(directory: Path) -> list[IgnoreConfig]:
    """Collect ``.gitignore`` configs from ``directory`` upwards, deepest first.

    Each config is rooted at the absolute, unresolved directory holding its
    file, so anchored patterns line up with the paths the walker lists even
    below a symlinked ancestor. The search stops after the first directory
    containing ``.git`` (the repository root) or at the filesystem root.
    """
    configs: list[IgnoreConfig] = []
    current = Path(os.path.abspath(directory))
    for _ in range(GITIGNORE_MAX_PARENTS):
        content = _read_ignore_file(current / GITIGNORE_FILENAME)
        if content is not None:
            logger.debug("loaded gitignore %s", current / GITIGNORE_FILENAME)
            configs.append(IgnoreConfig(content, current))
        if (current / ".git").exists():
            break
        parent = current.parent
        if parent == current:
            break
        current = parent
    return configs


__all__ = ["open_treeignore", "open_gitignores"]
