"""Filesystem listing, entry classification, and listing sort order."""

from __future__ import annotations

import logging
import os
import string

from ..errors import DirectoryOpenError, EnumerationError
from .types import Entry, EntryKind

logger = logging.getLogger(__name__)

_ASCII_LOWER = bytes.maketrans(string.ascii_uppercase.encode(), string.ascii_lowercase.encode())


def classify_entry(child: os.DirEntry) -> EntryKind:
    """Map a scandir entry to its kind without following symlinks.

    Anything that is not a symlink, directory or regular file (devices,
    pipes, sockets, unknown kinds) is ``OTHER``.
    """
    if child.is_symlink():
        return EntryKind.SYMLINK
    if child.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if child.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


def entry_sort_key(name: str) -> bytes:
    """Comparison key: filename bytes minus one leading dot, ASCII A-Z lowered."""
    if name.startswith("."):
        name = name[1:]
    return os.fsencode(name).translate(_ASCII_LOWER)


def compare_entry_names(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, level with, or after ``b``."""
    key_a = entry_sort_key(a)
    key_b = entry_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Return ``entries`` in listing order.

    Names equal after dot-stripping fall back to the raw name so the order
    never depends on the order the OS enumerated them in.
    """
    return sorted(entries, key=lambda entry: (entry_sort_key(entry.name), entry.name))


def list_directory_entries(path: str) -> list[Entry]:
    """List and sort the direct children of ``path``.

    Raises ``DirectoryOpenError`` when the directory cannot be opened and
    ``EnumerationError`` when reading or classifying a member fails.
    """
    try:
        scanner = os.scandir(path)
    except OSError as exc:
        raise DirectoryOpenError(path, exc) from exc

    entries: list[Entry] = []
    with scanner:
        try:
            for child in scanner:
                entries.append(Entry(name=child.name, kind=classify_entry(child)))
        except OSError as exc:
            raise EnumerationError(path, exc) from exc

    logger.debug("listed %d entries in %s", len(entries), path)
    return sort_entries(entries)


__all__ = [
    "classify_entry",
    "entry_sort_key",
    "compare_entry_names",
    "sort_entries",
    "list_directory_entries",
]
