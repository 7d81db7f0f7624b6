"""Filesystem entry snapshots for one directory listing.

An :class:`Entry` captures everything the classifier and size column need,
so layout code never touches the filesystem again. Dangling symlinks and
entries that vanish mid-listing become non-existent entries rather than errors.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import DirectoryReadError, InvalidEntryName

logger = logging.getLogger(__name__)

# Target lookups failing with these mean "nothing there" rather than "unreadable".
_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ELOOP})


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    UNKNOWN = "unknown"


def entry_name(path: Path) -> str:
    """Return the display name of ``path``.

    Raises :class:`InvalidEntryName` when the path has no final component or
    the name holds undecodable bytes (surrogate-escaped by ``os.fsdecode``).
    """
    name = path.name
    if not name:
        raise InvalidEntryName(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidEntryName(path) from exc
    return name


@dataclass(frozen=True)
class Entry:
    """Immutable metadata snapshot of one directory child."""

    path: Path
    name: str
    exists: bool
    kind: EntryKind = EntryKind.UNKNOWN
    mode: int = 0
    size: int | None = None
    stat_error: str | None = None

    @classmethod
    def from_path(cls, path: Path) -> "Entry":
        """Stat ``path`` and build an entry.

        The existence check never raises: a missing path or a dangling link
        yields ``exists=False``. Other lookup failures, on the link itself or
        its target, keep the entry as existing and record ``stat_error`` for
        callers that need metadata.
        """
        name = entry_name(path)
        try:
            link_stat = path.lstat()
        except OSError as exc:
            if exc.errno in _MISSING_ERRNOS:
                return cls(path=path, name=name, exists=False)
            return cls(path=path, name=name, exists=True, stat_error=exc.strerror or str(exc))

        is_link = stat.S_ISLNK(link_stat.st_mode)
        try:
            target_stat = path.stat()
        except OSError as exc:
            kind = EntryKind.SYMLINK if is_link else EntryKind.UNKNOWN
            if exc.errno in _MISSING_ERRNOS:
                return cls(path=path, name=name, exists=False, kind=kind)
            return cls(
                path=path,
                name=name,
                exists=True,
                kind=kind,
                stat_error=exc.strerror or str(exc),
            )

        if is_link:
            kind = EntryKind.SYMLINK
        elif stat.S_ISDIR(target_stat.st_mode):
            kind = EntryKind.DIRECTORY
        elif stat.S_ISREG(target_stat.st_mode):
            kind = EntryKind.FILE
        else:
            kind = EntryKind.UNKNOWN
        return cls(
            path=path,
            name=name,
            exists=True,
            kind=kind,
            mode=stat.S_IMODE(target_stat.st_mode),
            size=int(target_stat.st_size),
        )


def read_directory(root: Path) -> list[Entry]:
    """Return entries of ``root`` with absolute paths in enumeration order.

    Raises :class:`DirectoryReadError` when ``root`` cannot be scanned.
    Children whose names are not valid text are skipped with a warning.
    """
    root = Path(root).absolute()
    try:
        with os.scandir(root) as scanned:
            paths = [Path(child.path) for child in scanned]
    except OSError as exc:
        raise DirectoryReadError(root, exc.strerror or str(exc)) from exc

    entries: list[Entry] = []
    for path in paths:
        try:
            entries.append(Entry.from_path(path))
        except InvalidEntryName as exc:
            logger.warning("skipping %s", exc)
    return entries


__all__ = [
    "EntryKind",
    "Entry",
    "entry_name",
    "read_directory",
]
