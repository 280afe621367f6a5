"""Domain model for directory listings.

This package contains the non-formatting tree primitives:
- entry kinds, entries and traversal counters
- filesystem listing with per-entry classification
- the dot-insensitive, case-insensitive listing order
"""

from __future__ import annotations

from .types import Counts, Entry, EntryKind
from .fs import (
    classify_entry,
    compare_entry_names,
    entry_sort_key,
    list_directory_entries,
    sort_entries,
)

__all__ = [
    "EntryKind",
    "Entry",
    "Counts",
    "classify_entry",
    "entry_sort_key",
    "compare_entry_names",
    "sort_entries",
    "list_directory_entries",
]
