"""Color themes mapping entry categories to terminal color specs.

Themes are immutable tables; escape sequences come from ``pygments.console``
so color names match the ones Pygments uses for console output.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

from .classify import Category


@dataclass(frozen=True)
class ColorSpec:
    """Foreground color name (a ``pygments.console.codes`` key) plus bold."""

    fg: str = ""
    bold: bool = False

    def __post_init__(self) -> None:
        if self.fg not in codes:
            raise ValueError(f"unknown console color: {self.fg!r}")

    def sequence(self) -> str:
        """Return the escape sequence selecting this color from a clean state."""
        if not self.fg and not self.bold:
            return ""
        prefix = codes["reset"]
        if self.bold:
            prefix += codes["bold"]
        return prefix + codes[self.fg]


PLAIN_SPEC = ColorSpec()


@dataclass(frozen=True)
class ListingTheme:
    """Semantic palette for one listing."""

    name: str
    directory: ColorSpec
    symlink: ColorSpec
    executable: ColorSpec
    regular: ColorSpec
    missing: ColorSpec
    note: ColorSpec
    colors_enabled: bool = True

    def reset_sequence(self) -> str:
        return codes["reset"] if self.colors_enabled else ""


DEFAULT_THEME = ListingTheme(
    name="default",
    directory=ColorSpec("blue", bold=True),
    symlink=ColorSpec("cyan"),
    executable=ColorSpec("green"),
    regular=ColorSpec("gray"),
    missing=ColorSpec("red", bold=True),
    note=ColorSpec("yellow"),
)

BRIGHT_THEME = ListingTheme(
    name="bright",
    directory=ColorSpec("brightblue", bold=True),
    symlink=ColorSpec("brightcyan"),
    executable=ColorSpec("brightgreen"),
    regular=ColorSpec("gray"),
    missing=ColorSpec("brightred", bold=True),
    note=ColorSpec("brightyellow"),
)

PLAIN_THEME = ListingTheme(
    name="plain",
    directory=PLAIN_SPEC,
    symlink=PLAIN_SPEC,
    executable=PLAIN_SPEC,
    regular=PLAIN_SPEC,
    missing=PLAIN_SPEC,
    note=PLAIN_SPEC,
    colors_enabled=False,
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    BRIGHT_THEME.name: BRIGHT_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Map ``name`` to a known color theme; unknown or empty names mean default."""
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return the theme for ``name``, or the escape-free theme with ``no_color``."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


def color_for(category: Category, theme: ListingTheme = DEFAULT_THEME) -> ColorSpec:
    """Return the color spec ``theme`` assigns to ``category``."""
    if category is Category.DIRECTORY:
        return theme.directory
    if category is Category.SYMLINK:
        return theme.symlink
    if category is Category.EXECUTABLE:
        return theme.executable
    if category is Category.MISSING:
        return theme.missing
    return theme.regular


__all__ = [
    "ColorSpec",
    "ListingTheme",
    "DEFAULT_THEME",
    "BRIGHT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "color_for",
]
