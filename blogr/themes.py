"""Built-in blog themes and the registry that looks them up by name."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Optional

from blogr.style import Color, Style


@dataclass(frozen=True)
class ConfigOption:
    """One configurable setting of a theme."""

    option_type: str
    default: str
    description: str


@dataclass
class ThemeInfo:
    """Descriptive metadata of a theme and the settings it accepts."""

    name: str
    version: str
    author: str
    description: str
    config_schema: dict[str, ConfigOption] = field(default_factory=dict)


class Theme(abc.ABC):
    """A blog theme."""

    @abc.abstractmethod
    def info(self) -> ThemeInfo:
        """Metadata and configuration schema of the theme."""

    @abc.abstractmethod
    def preview_tui_style(self) -> Style:
        """Style used to preview the theme in the terminal."""


class MinimalRetroTheme(Theme):
    """An artistic, minimal theme in retro orange and brown."""

    def info(self) -> ThemeInfo:
        schema = {
            "primary_color": ConfigOption(
                "string", "#FF6B35", "Primary accent color (retro orange)"
            ),
            "secondary_color": ConfigOption(
                "string", "#F7931E", "Secondary accent color (warm amber)"
            ),
            "background_color": ConfigOption(
                "string", "#2D1B0F", "Background color (dark brown)"
            ),
            "font_family": ConfigOption(
                "string",
                "'Crimson Text', 'Playfair Display', Georgia, serif",
                "Artistic serif font family",
            ),
            "accent_font": ConfigOption(
                "string",
                "'Space Mono', 'Courier Prime', monospace",
                "Monospace accent font for tags and metadata",
            ),
            "show_reading_time": ConfigOption(
                "boolean", "true", "Display estimated reading time"
            ),
            "show_author": ConfigOption("boolean", "true", "Display post author"),
            "expandable_posts": ConfigOption(
                "boolean", "true", "Enable expandable post previews on homepage"
            ),
        }
        return ThemeInfo(
            name="Minimal Retro",
            version="2.0.0",
            author="Blogr Team",
            description=(
                "An artistic, minimal theme focused on content with expandable "
                "posts and beautiful typography"
            ),
            config_schema=schema,
        )

    def preview_tui_style(self) -> Style:
        return Style(fg=Color.from_rgb(255, 107, 53), bg=Color.from_rgb(45, 27, 15))


class ObsidianTheme(Theme):
    """A theme that adopts Obsidian community stylesheets."""

    def info(self) -> ThemeInfo:
        schema = {
            "obsidian_css": ConfigOption(
                "string",
                "static/obsidian.css",
                "Path to Obsidian CSS (served from /static/)",
            ),
            "color_mode": ConfigOption(
                "string", "auto", "Dark/light mode handling (auto | dark | light)"
            ),
        }
        return ThemeInfo(
            name="Obsidian",
            version="1.0.0",
            author="Blogr Team",
            description="Adopts Obsidian community themes to style Blogr content",
            config_schema=schema,
        )

    def preview_tui_style(self) -> Style:
        return Style(fg=Color.from_rgb(167, 139, 250), bg=Color.from_rgb(32, 32, 32))


_THEMES: dict[str, type[Theme]] = {
    "minimal-retro": MinimalRetroTheme,
    "obsidian": ObsidianTheme,
}


def get_all_themes() -> dict[str, Theme]:
    """Every built-in theme, keyed by its registry name."""
    return {name: theme_cls() for name, theme_cls in _THEMES.items()}


def get_theme(name: str) -> Optional[Theme]:
    """The theme registered under ``name``, or None."""
    theme_cls = _THEMES.get(name)
    return theme_cls() if theme_cls is not None else None


def get_theme_by_name(name: str) -> Optional[Theme]:
    """Alias of :func:`get_theme`."""
    return get_theme(name)