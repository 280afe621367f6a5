"""Text formatting for tree rows and the closing summary line."""

from __future__ import annotations

from dataclasses import dataclass

from .tree_model import Counts, Entry

INDENT_UNIT = "    "
DIRECTORY_ICON = "📁"
FILE_ICON = "📄"


@dataclass(frozen=True)
class Icons:
    """Glyph shown before a directory row and before every other row."""

    directory: str = DIRECTORY_ICON
    other: str = FILE_ICON

    def for_entry(self, entry: Entry) -> str:
        return self.directory if entry.is_dir else self.other


DEFAULT_ICONS = Icons()


def indentation(level: int) -> str:
    return INDENT_UNIT * level


def format_entry_line(entry: Entry, depth: int, icons: Icons = DEFAULT_ICONS) -> str:
    """Return one newline-terminated tree row for ``entry`` at ``depth``."""
    return f"{indentation(depth)}{icons.for_entry(entry)} {entry.name}\n"


def format_summary(counts: Counts) -> str:
    return f"{counts.dirs} directories, {counts.files} files, {counts.sym_links} sym-links, {counts.other} other"


__all__ = [
    "INDENT_UNIT",
    "DIRECTORY_ICON",
    "FILE_ICON",
    "Icons",
    "DEFAULT_ICONS",
    "indentation",
    "format_entry_line",
    "format_summary",
]
