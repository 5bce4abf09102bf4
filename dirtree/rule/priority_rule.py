"""Ordered rule composition with override precedence."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .base import Rule


@dataclass(frozen=True, init=False)
class PriorityRule(Rule):
    """Evaluate child rules highest-priority first.

    The first child with an opinion decides: an override verdict keeps the
    path, an ignore verdict drops it. Within one child, override wins over
    ignore. With no opinion anywhere the path is kept.

    ``is_override`` is always ``False``; an enclosing ``PriorityRule`` only
    sees a nested one through ``is_ignored``.
    """

    rules: tuple[Rule, ...]

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        object.__setattr__(self, "rules", tuple(rules))

    def is_ignored(self, path: Path) -> bool:
        for rule in self.rules:
            if rule.is_override(path):
                return False
            if rule.is_ignored(path):
                return True
        return False
