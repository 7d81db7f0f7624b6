"""Exception taxonomy for directory listing failures.

Each error carries the path it concerns so the listing driver can report it
once and move on to the next requested directory.
"""

from __future__ import annotations

from pathlib import Path


class ReaddirError(Exception):
    """Base class for errors that abandon one directory listing."""


class DirectoryReadError(ReaddirError):
    """Raised when a directory cannot be enumerated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read directory {path}: {reason}")


class MetadataError(ReaddirError):
    """Raised when size or permission metadata for one entry is unavailable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read metadata for {path}: {reason}")


class FormatError(ReaddirError):
    """Raised for byte counts that cannot be formatted as a size."""


class InvalidEntryName(ReaddirError):
    """Raised when a path has no usable text name."""

    def __init__(self, path: Path | str) -> None:
        self.path = path
        super().__init__(f"entry name is not valid text: {path!r}")


__all__ = [
    "ReaddirError",
    "DirectoryReadError",
    "MetadataError",
    "FormatError",
    "InvalidEntryName",
]
