"""Terminal styling primitives: colours, modifiers, styles and styled text."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named palette entry or an RGB value."""

    name: str
    rgb: Optional[Tuple[int, int, int]] = None

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """An RGB colour; each component must be in 0..255."""
        for component in (red, green, blue):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls("rgb", (red, green, blue))

    def __str__(self) -> str:
        if self.rgb is not None:
            return "#{:02X}{:02X}{:02X}".format(*self.rgb)
        return self.name


for _attr, _name in (
    ("RESET", "reset"),
    ("BLACK", "black"),
    ("RED", "red"),
    ("GREEN", "green"),
    ("YELLOW", "yellow"),
    ("BLUE", "blue"),
    ("MAGENTA", "magenta"),
    ("CYAN", "cyan"),
    ("GRAY", "gray"),
    ("DARK_GRAY", "dark_gray"),
    ("LIGHT_RED", "light_red"),
    ("LIGHT_GREEN", "light_green"),
    ("LIGHT_YELLOW", "light_yellow"),
    ("LIGHT_BLUE", "light_blue"),
    ("LIGHT_MAGENTA", "light_magenta"),
    ("LIGHT_CYAN", "light_cyan"),
    ("WHITE", "white"),
):
    setattr(Color, _attr, Color(_name))


class Modifier(enum.Flag):
    """Text attributes that can be combined."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers; unset colours inherit."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None
    modifiers: Modifier = Modifier.NONE

    def with_fg(self, color: Color) -> Style:
        """A copy with the foreground colour set."""
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        """A copy with the background colour set."""
        return replace(self, bg=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        """A copy with the given modifiers added."""
        return replace(self, modifiers=self.modifiers | modifier)


@dataclass(frozen=True)
class Span:
    """A piece of text in one style."""

    content: str
    style: Style = field(default_factory=Style)


@dataclass
class Line:
    """A line of styled spans."""

    spans: list[Span] = field(default_factory=list)

    def text(self) -> str:
        """The plain text of the line."""
        return "".join(span.content for span in self.spans)