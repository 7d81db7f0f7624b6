"""Category selection tests against a real temporary directory."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from readdir.classify import Category, classify
from readdir.entries import Entry, EntryKind
from readdir.errors import MetadataError


class ClassifyFilesystemTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_regular_file(self) -> None:
        path = self.root / "notes.txt"
        path.write_text("hello\n", encoding="utf-8")
        path.chmod(0o644)
        self.assertIs(classify(Entry.from_path(path)), Category.REGULAR)

    def test_any_execute_bit_marks_executable(self) -> None:
        for mode in (0o744, 0o654, 0o645):
            path = self.root / f"tool-{mode:o}"
            path.write_text("#!/bin/sh\n", encoding="utf-8")
            path.chmod(mode)
            self.assertIs(classify(Entry.from_path(path)), Category.EXECUTABLE, oct(mode))

    def test_directory_is_not_executable_despite_search_bits(self) -> None:
        path = self.root / "pkg"
        path.mkdir()
        path.chmod(0o755)
        self.assertIs(classify(Entry.from_path(path)), Category.DIRECTORY)

    def test_symlink_to_directory_is_symlink(self) -> None:
        target = self.root / "real"
        target.mkdir()
        link = self.root / "alias"
        os.symlink(target, link)
        self.assertIs(classify(Entry.from_path(link)), Category.SYMLINK)

    def test_symlink_to_executable_is_symlink(self) -> None:
        target = self.root / "run.sh"
        target.write_text("#!/bin/sh\n", encoding="utf-8")
        target.chmod(0o755)
        link = self.root / "run"
        os.symlink(target, link)
        self.assertIs(classify(Entry.from_path(link)), Category.SYMLINK)

    def test_dangling_symlink_is_missing_without_error(self) -> None:
        link = self.root / "broken"
        os.symlink(self.root / "nowhere", link)
        entry = Entry.from_path(link)
        self.assertFalse(entry.exists)
        self.assertIs(entry.kind, EntryKind.SYMLINK)
        self.assertIs(classify(entry), Category.MISSING)

    def test_vanished_path_is_missing(self) -> None:
        entry = Entry.from_path(self.root / "gone.txt")
        self.assertFalse(entry.exists)
        self.assertIs(classify(entry), Category.MISSING)


class ClassifyMetadataTests(unittest.TestCase):
    def test_unreadable_metadata_is_propagated(self) -> None:
        entry = Entry(
            path=Path("/locked/secret"),
            name="secret",
            exists=True,
            stat_error="Permission denied",
        )
        with self.assertRaises(MetadataError) as ctx:
            classify(entry)
        self.assertEqual(ctx.exception.path, Path("/locked/secret"))
        self.assertEqual(ctx.exception.reason, "Permission denied")

    def test_missing_takes_priority_over_metadata_error(self) -> None:
        entry = Entry(path=Path("/x/y"), name="y", exists=False, stat_error="boom")
        self.assertIs(classify(entry), Category.MISSING)


if __name__ == "__main__":
    unittest.main()
