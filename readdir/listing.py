"""Drive listings for one or more requested directories.

Each directory is rendered into its own buffer first so a failure part-way
through (size mode hitting a vanished file) never leaves half a grid on the
terminal. Failed directories are reported and the rest are still listed.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path

from .entries import read_directory
from .errors import ReaddirError
from .flags import DisplayFlags
from .layout import emit
from .ordering import process
from .output import ColorWriter
from .theme import ListingTheme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def render_directory(root: Path, flags: DisplayFlags, terminal_width: int, theme: ListingTheme) -> str:
    """Return the full listing text for ``root``, ending in a newline.

    Raises :class:`ReaddirError` subclasses when the directory or, in size
    mode, an entry's metadata cannot be read.
    """
    buffer = io.StringIO()
    writer = ColorWriter(buffer, theme)
    entries = process(read_directory(root), flags)
    emit(entries, flags, terminal_width, writer)
    writer.newline()
    return buffer.getvalue()


def format_header(path: Path) -> str:
    return f" ==> {path} <== "


def list_directories(
    directories: Iterable[Path],
    flags: DisplayFlags,
    writer: ColorWriter,
    terminal_width: int,
    *,
    show_headers: bool = True,
) -> int:
    """List ``directories`` in order and return a process exit code.

    With ``show_headers`` each listing is preceded by a `` ==> path <== ``
    line. Errors are shown once as a note and turn the exit code to
    :data:`EXIT_FAILURE` without stopping later directories.
    """
    exit_code = EXIT_OK
    for directory in directories:
        root = Path(directory).resolve()
        if show_headers:
            writer.set_color(writer.theme.regular)
            writer.write(format_header(root))
            writer.newline()
            writer.reset()
        try:
            text = render_directory(root, flags, terminal_width, writer.theme)
        except ReaddirError as exc:
            logger.debug("listing %s failed", root, exc_info=True)
            writer.note(str(exc))
            exit_code = EXIT_FAILURE
            continue
        writer.write(text)
    writer.flush()
    return exit_code


__all__ = [
    "EXIT_OK",
    "EXIT_FAILURE",
    "render_directory",
    "format_header",
    "list_directories",
]
