"""Row and summary formatting tests."""

from __future__ import annotations

import unittest

from dirtree.render import Icons, format_entry_line, format_summary, indentation
from dirtree.tree_model import Counts, Entry, EntryKind


class RenderFormattingTests(unittest.TestCase):
    def test_indentation_is_four_spaces_per_level(self) -> None:
        self.assertEqual(indentation(0), "")
        self.assertEqual(indentation(1), "    ")
        self.assertEqual(indentation(3), "            ")

    def test_directory_rows_use_folder_icon_and_everything_else_page_icon(self) -> None:
        self.assertEqual(format_entry_line(Entry("src", EntryKind.DIRECTORY), 0), "📁 src\n")
        for kind in (EntryKind.FILE, EntryKind.SYMLINK, EntryKind.OTHER):
            with self.subTest(kind=kind):
                self.assertEqual(format_entry_line(Entry(".env", kind), 2), "        📄 .env\n")

    def test_custom_icons(self) -> None:
        icons = Icons(directory="d", other="f")
        self.assertEqual(format_entry_line(Entry("x", EntryKind.DIRECTORY), 1, icons), "    d x\n")

    def test_summary_line(self) -> None:
        counts = Counts(dirs=3, files=2, sym_links=1, other=1)
        self.assertEqual(format_summary(counts), "3 directories, 2 files, 1 sym-links, 1 other")


if __name__ == "__main__":
    unittest.main()
