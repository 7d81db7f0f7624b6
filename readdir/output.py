"""Colored text sink wrapping a text stream."""

from __future__ import annotations

from typing import TextIO

from .theme import DEFAULT_THEME, ColorSpec, ListingTheme

NOTE_MARKER = "➥"


class ColorWriter:
    """Write text with set/reset color calls, like a color-capable terminal.

    Escapes are emitted whenever the theme has colors enabled, whether or not
    ``stream`` is a TTY; pass the plain theme for uncolored output.
    """

    def __init__(self, stream: TextIO, theme: ListingTheme = DEFAULT_THEME) -> None:
        self.stream = stream
        self.theme = theme

    def set_color(self, spec: ColorSpec) -> None:
        if self.theme.colors_enabled:
            self.stream.write(spec.sequence())

    def write(self, text: str) -> None:
        self.stream.write(text)

    def newline(self) -> None:
        self.stream.write("\n")

    def reset(self) -> None:
        self.stream.write(self.theme.reset_sequence())

    def note(self, text: str) -> None:
        """Write a one-line notice in the theme's note color."""
        self.set_color(self.theme.note)
        self.write(f"{NOTE_MARKER} {text}")
        self.newline()
        self.reset()

    def flush(self) -> None:
        self.stream.flush()


__all__ = ["ColorWriter", "NOTE_MARKER"]
