"""Display categories for directory entries."""

from __future__ import annotations

from enum import Enum

from .entries import Entry, EntryKind
from .errors import MetadataError

EXECUTE_BITS = 0o111


class Category(Enum):
    MISSING = "missing"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    EXECUTABLE = "executable"
    REGULAR = "regular"


def classify(entry: Entry) -> Category:
    """Pick the display category for ``entry``.

    Missing entries win over everything and never raise. A symlink stays
    ``SYMLINK`` even when it points at a directory or an executable.
    Raises :class:`MetadataError` when the entry exists but its metadata
    could not be read.
    """
    if not entry.exists:
        return Category.MISSING
    if entry.stat_error is not None:
        raise MetadataError(entry.path, entry.stat_error)
    if entry.kind is EntryKind.SYMLINK:
        return Category.SYMLINK
    if entry.kind is EntryKind.DIRECTORY:
        return Category.DIRECTORY
    if entry.mode & EXECUTE_BITS:
        return Category.EXECUTABLE
    return Category.REGULAR


__all__ = ["Category", "EXECUTE_BITS", "classify"]
