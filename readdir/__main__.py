"""Module entrypoint for ``python -m readdir``.

All argument parsing and listing happen in ``readdir.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
