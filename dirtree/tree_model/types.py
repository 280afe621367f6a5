"""Domain datatypes for directory listings and traversal counters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Closed classification of one directory member."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One child discovered by a single directory listing."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class Counts:
    """Running totals shared by every level of one traversal.

    Fields only ever grow; one instance is threaded through the whole
    recursion so nested listings contribute to the same totals.
    """

    dirs: int = 0
    files: int = 0
    sym_links: int = 0
    other: int = 0

    def record(self, kind: EntryKind) -> None:
        """Increment the counter matching ``kind``."""
        if kind is EntryKind.DIRECTORY:
            self.dirs += 1
        elif kind is EntryKind.FILE:
            self.files += 1
        elif kind is EntryKind.SYMLINK:
            self.sym_links += 1
        else:
            self.other += 1

    @property
    def total(self) -> int:
        return self.dirs + self.files + self.sym_links + self.other


__all__ = [
    "EntryKind",
    "Entry",
    "Counts",
]
