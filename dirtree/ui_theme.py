"""ANSI palettes for tree output.

Only colours live here; glyph choice (unicode or ascii) is a formatter
setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the formatter."""

    name: str
    reset: str
    tree_guide: str
    tree_root: str
    tree_dir: str
    tree_file_python: str
    tree_file_default: str
    summary: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_guide="\033[2m",
    tree_root="\033[1m",
    tree_dir="\033[1;34m",
    tree_file_python="\033[38;5;110m",
    tree_file_default="",
    summary="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_guide="\033[2;38;5;31m",
    tree_root="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;45m",
    tree_file_python="\033[38;5;117m",
    tree_file_default="\033[38;5;252m",
    summary="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_guide="",
    tree_root="",
    tree_dir="",
    tree_file_python="",
    tree_file_default="",
    summary="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names; ``plain`` is reached via ``no_color``."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Return a known theme name, falling back to ``default``."""
    candidate = str(name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
