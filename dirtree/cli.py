"""Command-line front door for dirtree.

Parses CLI options, composes the ignore rule, and walks the target
directory, printing one line per visible entry plus a summary.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .config import load_show_hidden, load_theme_name, save_show_hidden, save_theme_name
from .errors import DirtreeError
from .formatter import Formatter
from .fs import OSFS
from .logging_config import setup_logging
from .options import Options, build_rule
from .tree import Tree
from .types import Summary
from .ui import StdoutUI
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="List directory contents as a tree, honoring ignore files.",
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to list (default: current directory).")
    parser.add_argument(
        "-a",
        "--all",
        dest="show_hidden",
        action="store_true",
        default=None,
        help="Show hidden files and directories.",
    )
    parser.add_argument("-d", "--dirs-only", dest="directories_only", action="store_true", help="List directories only.")
    parser.add_argument("--no-gitignore", dest="gitignore", action="store_false", help="Do not consult .gitignore files.")
    parser.add_argument("--no-treeignore", dest="treeignore", action="store_false", help="Do not consult the global treeignore file.")
    parser.add_argument("--ascii", dest="ascii_glyphs", action="store_true", help="Draw the tree with ASCII characters.")
    parser.add_argument(
        "-l",
        "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        help="Descend into symlinked directories.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the hidden-file setting and theme as defaults for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    return parser


def parse_options(argv: Sequence[str] | None = None) -> tuple[Options, argparse.Namespace]:
    """Parse ``argv`` into walk options plus the raw parsed arguments.

    Flags left unset fall back to the persisted config (hidden-file
    preference and theme).
    """
    args = build_parser().parse_args(argv)
    show_hidden = args.show_hidden if args.show_hidden is not None else load_show_hidden()
    options = Options(
        directory=Path(args.directory),
        show_hidden=show_hidden,
        directories_only=args.directories_only,
        treeignore=args.treeignore,
        gitignore=args.gitignore,
        ascii_glyphs=args.ascii_glyphs,
        follow_symlinks=args.follow_symlinks,
        theme=args.theme or load_theme_name(),
        no_color=args.no_color,
    )
    return options, args


def save_defaults(options: Options) -> None:
    """Persist ``options``' hidden-file preference and theme for later runs."""
    save_show_hidden(options.show_hidden)
    if options.theme:
        save_theme_name(options.theme)


def run(options: Options, stream: TextIO | None = None) -> Summary:
    """Walk ``options.directory`` and write the tree to ``stream``."""
    out = stream or sys.stdout
    no_color = options.no_color or not out.isatty()
    formatter = Formatter(
        ascii_glyphs=options.ascii_glyphs,
        theme=resolve_theme(options.theme, no_color=no_color),
    )
    fs = OSFS(follow_symlinks=options.follow_symlinks)
    tree = Tree(build_rule(options, fs), fs, StdoutUI(formatter, out))
    return tree.walk(options.directory)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested directory."""
    options, args = parse_options(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if not options.directory.exists():
        raise SystemExit(f"Path not found: {options.directory}")

    if args.save_defaults:
        save_defaults(options)
        logger.debug("saved defaults show_hidden=%s theme=%s", options.show_hidden, options.theme)

    logger.debug("walking %s with %s", options.directory, options)
    try:
        run(options)
    except DirtreeError as exc:
        sys.stdout.flush()
        raise SystemExit(f"dirtree: {exc}") from exc


if __name__ == "__main__":
    main()
