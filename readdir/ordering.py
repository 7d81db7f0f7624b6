"""Hidden-file filtering and listing order."""

from __future__ import annotations

from collections.abc import Sequence

from .entries import Entry
from .flags import DisplayFlags

HIDDEN_PREFIX = "."


def filter_hidden(entries: Sequence[Entry], show_hidden: bool) -> list[Entry]:
    """Drop dot-prefixed entries unless ``show_hidden`` is set."""
    if show_hidden:
        return list(entries)
    return [entry for entry in entries if not entry.name.startswith(HIDDEN_PREFIX)]


def sort_entries(entries: Sequence[Entry], case_sensitive: bool) -> list[Entry]:
    """Sort by full path text; ties keep their enumeration order."""
    if case_sensitive:
        return sorted(entries, key=lambda entry: str(entry.path))
    return sorted(entries, key=lambda entry: str(entry.path).lower())


def process(entries: Sequence[Entry], flags: DisplayFlags) -> list[Entry]:
    """Apply filtering, ordering, and reversal in that order."""
    ordered = filter_hidden(entries, flags.all)
    if not flags.unsorted:
        ordered = sort_entries(ordered, flags.case_sensitive)
    if flags.reverse:
        ordered.reverse()
    return ordered


__all__ = ["HIDDEN_PREFIX", "filter_hidden", "sort_entries", "process"]
