"""Terminal width detection."""

from __future__ import annotations

import logging
import shutil

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_WIDTH = 50


def terminal_width() -> int:
    """Return the terminal column count.

    ``shutil.get_terminal_size`` honors ``COLUMNS`` before asking the
    terminal. When neither yields a size, for example with output redirected
    to a file, :data:`DEFAULT_TERMINAL_WIDTH` is used with a warning.
    """
    columns = shutil.get_terminal_size((0, 0)).columns
    if columns <= 0:
        logger.warning("couldn't determine terminal width, using %d columns", DEFAULT_TERMINAL_WIDTH)
        return DEFAULT_TERMINAL_WIDTH
    return columns


__all__ = ["DEFAULT_TERMINAL_WIDTH", "terminal_width"]
