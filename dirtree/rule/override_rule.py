"""Negation wrapper turning an ignore verdict into a force-include."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .base import Rule


@dataclass(frozen=True)
class OverrideRule(Rule):
    """Force-include whatever ``inner`` would ignore (a ``!pattern`` line)."""

    inner: Rule

    def is_override(self, path: Path) -> bool:
        return self.inner.is_ignored(path)
