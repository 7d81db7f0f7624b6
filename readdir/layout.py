"""Column layout and emission of classified entry names.

Grid mode packs names into equal-width columns sized from the longest name
and the terminal width. Size mode prints one entry per line behind a fixed
size column and ignores the grid.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from .classify import Category, classify
from .entries import Entry
from .errors import MetadataError
from .flags import DisplayFlags
from .output import ColorWriter
from .sizes import size_label
from .theme import color_for

logger = logging.getLogger(__name__)

COLUMN_GAP = 2
SIZE_COLUMN_WIDTH = 10


class Token(NamedTuple):
    text: str
    category: Category


@dataclass(frozen=True)
class LayoutPlan:
    """Grid geometry for one listing."""

    column_width: int
    entries_per_row: int
    count: int
    dense: bool

    def cell_width(self, text: str) -> int:
        """Return padded width for ``text``: its own width when dense."""
        if self.dense:
            return display_width(text) + COLUMN_GAP
        return self.column_width

    def breaks_after(self, index: int) -> bool:
        """Return whether a newline follows the token at ``index``."""
        per_row = self.entries_per_row
        return index % per_row == per_row - 1 and index != self.count - 1


def display_width(text: str) -> int:
    """Return terminal columns used by ``text``.

    Combining marks take no columns; East Asian wide/fullwidth characters
    take two.
    """
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1
    return width


def right_pad(text: str, width: int) -> str:
    """Pad ``text`` with spaces up to ``width`` columns; never truncates."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


def plan_layout(names: Sequence[str], terminal_width: int) -> LayoutPlan:
    """Compute column width and entries per row for ``names``.

    The column is never wider than the terminal and a row always holds at
    least one entry, however narrow the terminal is.
    """
    width = max(1, terminal_width)
    longest = max((display_width(name) for name in names), default=0)
    column_width = min(longest + COLUMN_GAP, width)
    entries_per_row = max(width // column_width, 1)
    dense = column_width * len(names) <= width
    return LayoutPlan(
        column_width=column_width,
        entries_per_row=entries_per_row,
        count=len(names),
        dense=dense,
    )


def grid_token(entry: Entry) -> Token:
    """Classify ``entry`` for grid output.

    Unreadable metadata does not stop the grid: the entry is shown as missing.
    """
    try:
        category = classify(entry)
    except MetadataError as exc:
        logger.debug("showing %s as missing: %s", entry.path, exc.reason)
        category = Category.MISSING
    return Token(entry.name, category)


def sized_token(entry: Entry, flags: DisplayFlags) -> tuple[str, Token]:
    """Return ``(size_text, token)`` for size mode.

    Raises :class:`MetadataError` for missing entries or unreadable metadata.
    """
    category = classify(entry)
    if category is Category.MISSING or entry.size is None:
        raise MetadataError(entry.path, entry.stat_error or "no such file or directory")
    return size_label(entry.size, flags), Token(entry.name, category)


def emit(
    entries: Sequence[Entry],
    flags: DisplayFlags,
    terminal_width: int,
    writer: ColorWriter,
) -> LayoutPlan:
    """Write ``entries`` to ``writer`` as a colored grid or size list.

    No newline follows the final entry; the caller terminates the listing.
    Once any entry has been colored, color state is reset when emission
    stops, including on errors. An empty listing writes nothing.
    """
    plan = plan_layout([entry.name for entry in entries], terminal_width)
    logger.debug(
        "layout: %d entries, column width %d, %d per row%s",
        plan.count,
        plan.column_width,
        plan.entries_per_row,
        " (dense)" if plan.dense else "",
    )
    try:
        for index, entry in enumerate(entries):
            if flags.show_size:
                size_text, token = sized_token(entry, flags)
                writer.set_color(color_for(token.category, writer.theme))
                writer.write(right_pad(size_text, SIZE_COLUMN_WIDTH - 1) + " ")
                writer.write(right_pad(token.text, plan.cell_width(token.text)))
                if index != plan.count - 1:
                    writer.newline()
                continue

            token = grid_token(entry)
            writer.set_color(color_for(token.category, writer.theme))
            writer.write(right_pad(token.text, plan.cell_width(token.text)))
            if plan.breaks_after(index):
                writer.newline()
    finally:
        if entries:
            writer.reset()
    return plan


__all__ = [
    "COLUMN_GAP",
    "SIZE_COLUMN_WIDTH",
    "Token",
    "LayoutPlan",
    "display_width",
    "right_pad",
    "plan_layout",
    "grid_token",
    "sized_token",
    "emit",
]
