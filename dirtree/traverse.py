"""Depth-limited recursive directory listing.

``traverse`` prints one directory's children in listing order and descends
into subdirectories pre-order until the depth bound is hit, updating a
shared ``Counts``. ``render_tree`` wraps it with the root header and the
closing summary line.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol

from .errors import OutputWriteError
from .render import DEFAULT_ICONS, Icons, format_entry_line, format_summary
from .tree_model import Counts, list_directory_entries

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def _emit(sink: TextSink, text: str) -> None:
    try:
        sink.write(text)
    except (OSError, ValueError) as exc:
        raise OutputWriteError(f"cannot write output: {exc}") from exc


def traverse(
    path: str,
    max_depth: int,
    current_depth: int,
    sink: TextSink,
    counts: Counts,
    icons: Icons = DEFAULT_ICONS,
) -> None:
    """List ``path`` at ``current_depth`` and recurse into its directories.

    Nothing is opened, printed or counted once ``current_depth`` reaches
    ``max_depth``. A directory's row is written before its children's rows.
    Open, listing and write failures propagate and abort the whole walk.
    """
    if current_depth >= max_depth:
        return

    logger.debug("opening %s at depth %d", path, current_depth)
    entries = list_directory_entries(path)
    for entry in entries:
        _emit(sink, format_entry_line(entry, current_depth, icons))
        counts.record(entry.kind)
        if entry.is_dir and current_depth + 1 < max_depth:
            traverse(
                os.path.join(path, entry.name),
                max_depth,
                current_depth + 1,
                sink,
                counts,
                icons,
            )


def render_tree(
    root: str,
    max_depth: int,
    sink: TextSink,
    icons: Icons = DEFAULT_ICONS,
) -> Counts:
    """Write the full report for ``root`` to ``sink`` and return the totals."""
    counts = Counts()
    _emit(sink, f"{root}\n")
    traverse(root, max_depth, 0, sink, counts, icons)
    _emit(sink, f"\n{format_summary(counts)}\n")
    logger.debug("finished %s: %d entries", root, counts.total)
    return counts


__all__ = ["TextSink", "traverse", "render_tree"]
