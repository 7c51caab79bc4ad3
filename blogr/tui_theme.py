"""Colours and styles used by the terminal editor."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Optional

from blogr.style import Color, Modifier, Style


class AppMode(enum.Enum):
    """Editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    PREVIEW = "preview"
    HELP = "help"


_MODE_COLORS = {
    AppMode.NORMAL: Color.BLUE,
    AppMode.INSERT: Color.GREEN,
    AppMode.PREVIEW: Color.MAGENTA,
    AppMode.HELP: Color.YELLOW,
}


def parse_color(color_str: str) -> Optional[Color]:
    """Parse ``#RRGGBB``; return None for anything else."""
    if not color_str.startswith("#"):
        return None
    digits = color_str[1:]
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        return None
    return Color.from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class TuiTheme:
    """Palette for the editor, derived from the blog theme."""

    primary_color: Color
    secondary_color: Color
    background_color: Color
    text_color: Color
    border_color: Color
    focused_border_color: Color
    cursor_color: Color

    @classmethod
    def from_blog_theme(
        cls, primary_color: str, secondary_color: str, background_color: str
    ) -> TuiTheme:
        """Build a theme from the blog's hex colours, with fallbacks."""
        primary = parse_color(primary_color) or Color.BLUE
        return cls(
            primary_color=primary,
            secondary_color=parse_color(secondary_color) or Color.CYAN,
            background_color=parse_color(background_color) or Color.BLACK,
            text_color=Color.WHITE,
            border_color=Color.GRAY,
            focused_border_color=primary,
            cursor_color=Color.WHITE,
        )

    @classmethod
    def minimal_retro(cls) -> TuiTheme:
        """The default retro orange palette."""
        orange = Color.from_rgb(255, 107, 53)
        amber = Color.from_rgb(247, 147, 30)
        return cls(
            primary_color=orange,
            secondary_color=amber,
            background_color=Color.from_rgb(45, 27, 15),
            text_color=Color.WHITE,
            border_color=Color.DARK_GRAY,
            focused_border_color=orange,
            cursor_color=amber,
        )

    def mode_color(self, mode: AppMode) -> Color:
        """Colour of the mode indicator."""
        return _MODE_COLORS[mode]

    def text_style(self) -> Style:
        return Style(fg=self.text_color)

    def title_style(self) -> Style:
        return Style(fg=self.primary_color, modifiers=Modifier.BOLD)

    def border_style(self) -> Style:
        return Style(fg=self.border_color)

    def focused_border_style(self) -> Style:
        return Style(fg=self.focused_border_color)

    def markdown_header_style(self) -> Style:
        return Style(fg=self.primary_color, modifiers=Modifier.BOLD)

    def markdown_h1_style(self) -> Style:
        return Style(fg=self.primary_color, modifiers=Modifier.BOLD | Modifier.UNDERLINED)

    def markdown_h2_style(self) -> Style:
        return Style(fg=self.primary_color, modifiers=Modifier.BOLD)

    def markdown_h3_style(self) -> Style:
        return Style(fg=self.secondary_color, modifiers=Modifier.BOLD)

    def markdown_bold_style(self) -> Style:
        return Style(fg=self.text_color, modifiers=Modifier.BOLD)

    def markdown_italic_style(self) -> Style:
        return Style(fg=self.text_color, modifiers=Modifier.ITALIC)

    def markdown_code_style(self) -> Style:
        return Style(fg=Color.GREEN, bg=Color.DARK_GRAY)

    def markdown_code_block_style(self) -> Style:
        return Style(fg=Color.GREEN, bg=Color.DARK_GRAY)

    def markdown_link_style(self) -> Style:
        return Style(fg=self.secondary_color, modifiers=Modifier.UNDERLINED)

    def markdown_list_style(self) -> Style:
        return Style(fg=self.primary_color)

    def markdown_blockquote_style(self) -> Style:
        return Style(fg=Color.GRAY, modifiers=Modifier.ITALIC)

    def markdown_rule_style(self) -> Style:
        return Style(fg=self.border_color)

    def markdown_html_style(self) -> Style:
        return Style(fg=Color.YELLOW)