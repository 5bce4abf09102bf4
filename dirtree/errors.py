"""Error types raised by dirtree.

Rule construction and ignore-file parsing never fail; the only fatal
condition is a directory that cannot be listed during a walk.
"""

from __future__ import annotations

from pathlib import Path


class DirtreeError(Exception):
    """Base class for dirtree errors."""


class FileSystemError(DirtreeError):
    """A directory could not be enumerated.

    ``cause`` keeps the original ``OSError`` (also chained as ``__cause__``
    when raised via ``raise ... from``).
    """

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"cannot list directory {self.path}"
        if isinstance(cause, OSError) and cause.strerror:
            message += f": {cause.strerror}"
        elif cause is not None:
            message += f": {cause}"
        super().__init__(message)


__all__ = ["DirtreeError", "FileSystemError"]
