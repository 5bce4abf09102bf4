"""Parse ignore-file text into a composed priority rule.

Lines later in a file take precedence over earlier ones, so the parsed rules
are reversed before composition (the priority engine wants highest first).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath

from .rule import OverrideRule, PathRule, PriorityRule, Rule

COMMENT_PREFIX = "#"
NEGATION_PREFIX = "!"


@dataclass(frozen=True)
class IgnoreConfig:
    """Raw ignore-file content plus the directory it applies to."""

    content: str
    root: Path = field(default_factory=lambda: Path(""))

    def _resolve_pattern(self, pattern: str) -> PurePath:
        """Anchor ``/pattern`` under ``root``; leave relative patterns as-is."""
        if pattern.startswith("/"):
            return PurePath(self.root) / pattern[1:]
        return PurePath(pattern)

    def rules(self) -> list[Rule]:
        """Return parsed rules in file order (lowest precedence first)."""
        rules: list[Rule] = []
        for raw in self.content.splitlines():
            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            if line.startswith(NEGATION_PREFIX):
                rules.append(OverrideRule(PathRule(line[len(NEGATION_PREFIX) :])))
                continue
            rules.append(PathRule(self._resolve_pattern(line)))
        return rules

    def rule(self) -> PriorityRule:
        """Return the composed rule; never fails, empty content ignores nothing."""
        rules = self.rules()
        rules.reverse()
        return PriorityRule(rules)


__all__ = ["IgnoreConfig"]
