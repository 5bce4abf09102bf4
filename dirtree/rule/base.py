"""Base rule type shared by every ignore/override predicate."""

from __future__ import annotations

from pathlib import Path


class Rule:
    """Two-predicate filter over a path.

    ``is_ignored`` says the path should be excluded; ``is_override`` says it
    must be kept even if a lower-priority rule ignores it. Both default to
    ``False`` so subclasses only implement the verdict they can produce.
    """

    def is_ignored(self, path: Path) -> bool:
        return False

    def is_override(self, path: Path) -> bool:
        return False
