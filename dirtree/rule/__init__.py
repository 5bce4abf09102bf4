"""Ignore/override rules and their priority composition.

Every rule is a pure predicate pair over a path. Callers assemble a single
``PriorityRule`` and hand it to the tree walker.
"""

from __future__ import annotations

from .base import Rule
from .directories_only_rule import DirectoriesOnlyRule
from .hidden_rule import HideHiddenRule
from .override_rule import OverrideRule
from .path_rule import PathRule
from .priority_rule import PriorityRule

__all__ = [
    "Rule",
    "PathRule",
    "OverrideRule",
    "HideHiddenRule",
    "DirectoriesOnlyRule",
    "PriorityRule",
]
