"""Command-line front door for readdir.

Parses switches, merges them over configured defaults, and lists each
requested directory (or the current one) to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .config import load_default_flags, load_theme_name
from .flags import DisplayFlags
from .listing import list_directories
from .output import ColorWriter
from .terminal import terminal_width
from .theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(levelname)s: %(message)s"

# (short, long, dest, help)
_FLAG_SWITCHES = (
    ("-a", "--all", "all", "Show hidden files."),
    ("-r", "--reverse", "reverse", "Reverse output order."),
    ("-u", "--unsorted", "unsorted", "Keep directory order instead of sorting."),
    ("-c", "--case-sensitive", "case_sensitive", "Sort case-sensitively."),
    ("-s", "--size", "show_size", "Print file sizes, one entry per line."),
    ("-h", "--human-readable", "human_readable", "Print sizes like 4.14 kB (with -s)."),
    ("-b", "--base-1000", "base_1000", "Scale human-readable sizes by 1000 instead of 1024."),
)


def _column_count(value: str) -> int:
    """argparse type for ``--width``: a column count of at least one."""
    if not value.isdigit() or int(value) == 0:
        raise argparse.ArgumentTypeError(f"width must be a positive integer, got {value!r}")
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readdir",
        description="Reads items in a given directory.",
        add_help=False,
    )
    parser.add_argument("directories", nargs="*", metavar="DIRECTORY", help="One or more directories to read.")
    for short, long, dest, help_text in _FLAG_SWITCHES:
        # None marks "not given" so configured defaults survive.
        parser.add_argument(short, long, dest=dest, action="store_true", default=None, help=help_text)
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--width",
        type=_column_count,
        default=None,
        help="Layout width in columns (default: terminal width).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_flags(args: argparse.Namespace) -> DisplayFlags:
    """Merge CLI switches over configured defaults."""
    values = load_default_flags()
    for _short, _long, dest, _help in _FLAG_SWITCHES:
        given = getattr(args, dest)
        if given is not None:
            values[dest] = given
    return DisplayFlags.from_mapping(values)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and list directories; return the process exit code.

    Without directory arguments the current working directory is listed with
    no header line.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    flags = resolve_flags(args)
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    writer = ColorWriter(sys.stdout, theme)
    width = args.width if args.width is not None else terminal_width()

    if args.directories:
        directories = [Path(directory) for directory in args.directories]
        show_headers = True
    else:
        directories = [Path.cwd()]
        show_headers = False
    return list_directories(directories, flags, writer, width, show_headers=show_headers)


if __name__ == "__main__":
    raise SystemExit(main())
