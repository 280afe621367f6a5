"""Error taxonomy for dirtree runs.

Every error aborts the whole run; the CLI turns any ``DirTreeError`` into a
one-line message on stderr and a nonzero exit status.
"""

from __future__ import annotations


class DirTreeError(Exception):
    """Base class for all fatal dirtree failures."""


class ArgumentParseError(DirTreeError):
    """Command-line tokens could not be interpreted as directory/depth."""


class _PathError(DirTreeError):
    """Failure tied to one filesystem path, chaining the underlying cause."""

    action = "access"

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        message = f"cannot {self.action} {path!r}"
        if cause is not None:
            message += f": {getattr(cause, 'strerror', None) or cause}"
        super().__init__(message)


class PathResolutionError(_PathError):
    action = "resolve"


class DirectoryOpenError(_PathError):
    action = "open directory"


class EnumerationError(_PathError):
    action = "list directory"


class OutputWriteError(DirTreeError):
    """Writing to the output stream failed."""


__all__ = [
    "DirTreeError",
    "ArgumentParseError",
    "PathResolutionError",
    "DirectoryOpenError",
    "EnumerationError",
    "OutputWriteError",
]
