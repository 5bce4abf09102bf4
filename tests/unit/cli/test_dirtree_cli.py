"""CLI argument handling and entrypoint behavior tests.

Verifies option parsing, config fallbacks, and how ``dirtree.cli.main``
reports missing paths and filesystem failures.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import cli
from dirtree.errors import FileSystemError
from dirtree.options import Options


class ParseOptionsTests(unittest.TestCase):
    def setUp(self) -> None:
        for name, value in (("load_show_hidden", False), ("load_theme_name", None)):
            patcher = mock.patch(f"dirtree.cli.{name}", return_value=value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_defaults(self) -> None:
        options, args = cli.parse_options([])

        self.assertEqual(options, Options(directory=Path(".")))
        self.assertFalse(args.verbose)
        self.assertFalse(args.save_defaults)

    def test_flags_map_to_options(self) -> None:
        options, args = cli.parse_options(
            ["src", "-a", "-d", "--no-gitignore", "--no-treeignore", "--ascii", "-l", "--theme", "ocean", "--no-color", "-v"]
        )

        self.assertEqual(
            options,
            Options(
                directory=Path("src"),
                show_hidden=True,
                directories_only=True,
                treeignore=False,
                gitignore=False,
                ascii_glyphs=True,
                follow_symlinks=True,
                theme="ocean",
                no_color=True,
            ),
        )
        self.assertTrue(args.verbose)

    def test_unset_flags_fall_back_to_persisted_config(self) -> None:
        with (
            mock.patch("dirtree.cli.load_show_hidden", return_value=True),
            mock.patch("dirtree.cli.load_theme_name", return_value="ocean"),
        ):
            options, _args = cli.parse_options([])

        self.assertTrue(options.show_hidden)
        self.assertEqual(options.theme, "ocean")


class MainTests(unittest.TestCase):
    def setUp(self) -> None:
        for name, value in (("load_show_hidden", False), ("load_theme_name", None)):
            patcher = mock.patch(f"dirtree.cli.{name}", return_value=value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_main_prints_tree_and_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            (root / "docs" / "guide.md").write_text("# guide\n", encoding="utf-8")
            (root / "setup.py").write_text("\n", encoding="utf-8")
            (root / ".hidden").write_text("\n", encoding="utf-8")

            stdout = io.StringIO()
            with mock.patch("sys.stdout", stdout):
                cli.main([str(root), "--no-treeignore", "--no-gitignore"])

        self.assertEqual(
            stdout.getvalue(),
            f"{root}\n"
            "├── docs\n"
            "│   └── guide.md\n"
            "└── setup.py\n"
            "\n"
            "1 directory, 2 files\n",
        )

    def test_main_save_defaults_persists_hidden_and_theme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch("dirtree.cli.save_show_hidden") as save_show_hidden,
                mock.patch("dirtree.cli.save_theme_name") as save_theme_name,
                mock.patch("dirtree.cli.run") as run,
            ):
                cli.main([tmp, "-a", "--theme", "ocean", "--save-defaults"])

        save_show_hidden.assert_called_once_with(True)
        save_theme_name.assert_called_once_with("ocean")
        run.assert_called_once()

    def test_main_without_save_defaults_leaves_config_alone(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch("dirtree.cli.save_show_hidden") as save_show_hidden,
                mock.patch("dirtree.cli.save_theme_name") as save_theme_name,
                mock.patch("dirtree.cli.run"),
            ):
                cli.main([tmp, "-a"])

        save_show_hidden.assert_not_called()
        save_theme_name.assert_not_called()

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_main_walks_symlinked_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            real = Path(tmp) / "real"
            (real / "src").mkdir(parents=True)
            link = Path(tmp) / "link"
            try:
                link.symlink_to(real, target_is_directory=True)
            except OSError:
                self.skipTest("cannot create symlink")

            stdout = io.StringIO()
            with mock.patch("sys.stdout", stdout):
                cli.main([str(link), "--no-treeignore", "--no-gitignore"])

        self.assertEqual(stdout.getvalue(), f"{link}\n└── src\n\n1 directory, 0 files\n")

    def test_main_rejects_missing_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(missing)])

        self.assertEqual(str(ctx.exception.code), f"Path not found: {missing}")

    def test_main_reports_filesystem_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            error = FileSystemError(Path(tmp), PermissionError(13, "Permission denied"))
            with mock.patch("dirtree.cli.run", side_effect=error), self.assertRaises(SystemExit) as ctx:
                cli.main([tmp])

        self.assertEqual(ctx.exception.code, f"dirtree: cannot list directory {tmp}: Permission denied")


if __name__ == "__main__":
    unittest.main()
