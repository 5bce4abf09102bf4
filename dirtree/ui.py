"""UI sinks receiving walker callbacks."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from .formatter import Formatter
from .types import Entry


class UI(Protocol):
    """Rendering sink driven by ``Tree``; never expected to fail."""

    def file(self, entry: Entry) -> None: ...

    def add_indent(self, depth: int) -> None: ...

    def remove_indent(self, depth: int) -> None: ...

    def summary(self, n_dirs: int, n_files: int) -> None: ...


class StdoutUI:
    """Write formatted lines to ``stream`` (stdout unless given)."""

    def __init__(self, formatter: Formatter, stream: TextIO | None = None) -> None:
        self.formatter = formatter
        self.stream = stream

    def _write(self, text: str) -> None:
        (self.stream or sys.stdout).write(text)

    def file(self, entry: Entry) -> None:
        self._write(self.formatter.file(entry) + "\n")

    def add_indent(self, depth: int) -> None:
        self.formatter.add_indent(depth)

    def remove_indent(self, depth: int) -> None:
        self.formatter.remove_indent(depth)

    def summary(self, n_dirs: int, n_files: int) -> None:
        self._write("\n" + self.formatter.summary(n_dirs, n_files) + "\n")


class RecordingUI:
    """Record every callback as a tuple, in call order.

    Entries are stored as ``("file", entry)``, indentation changes as
    ``("add_indent", depth)``/``("remove_indent", depth)`` and the final
    totals as ``("summary", n_dirs, n_files)``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def file(self, entry: Entry) -> None:
        self.calls.append(("file", entry))

    def add_indent(self, depth: int) -> None:
        self.calls.append(("add_indent", depth))

    def remove_indent(self, depth: int) -> None:
        self.calls.append(("remove_indent", depth))

    def summary(self, n_dirs: int, n_files: int) -> None:
        self.calls.append(("summary", n_dirs, n_files))

    @property
    def entries(self) -> list[Entry]:
        return [call[1] for call in self.calls if call[0] == "file"]


__all__ = ["UI", "StdoutUI", "RecordingUI"]
