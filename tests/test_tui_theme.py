import pytest

from blogr.style import Color, Modifier
from blogr.tui_theme import AppMode, TuiTheme, parse_color


def test_parse_color_hex():
    assert parse_color("#FF6B35") == Color.from_rgb(255, 107, 53)
    assert parse_color("#2D1B0F") == Color.from_rgb(45, 27, 15)


def test_parse_color_is_case_insensitive():
    assert parse_color("#ff6b35") == parse_color("#FF6B35")


@pytest.mark.parametrize("text", ["FF6B35", "#FFF", "#GGGGGG", "# F6B35", "", "#FF6B3500"])
def test_parse_color_rejects(text):
    assert parse_color(text) is None


def test_from_blog_theme_uses_given_colours():
    theme = TuiTheme.from_blog_theme("#FF6B35", "#F7931E", "#2D1B0F")
    assert theme.primary_color == Color.from_rgb(255, 107, 53)
    assert theme.secondary_color == Color.from_rgb(247, 147, 30)
    assert theme.background_color == Color.from_rgb(45, 27, 15)
    assert theme.focused_border_color == theme.primary_color
    assert theme.text_color == Color.WHITE
    assert theme.border_color == Color.GRAY
    assert theme.cursor_color == Color.WHITE


def test_from_blog_theme_falls_back_on_bad_colours():
    theme = TuiTheme.from_blog_theme("red", "nope", "#12")
    assert theme.primary_color == Color.BLUE
    assert theme.secondary_color == Color.CYAN
    assert theme.background_color == Color.BLACK
    assert theme.focused_border_color == Color.BLUE


def test_minimal_retro():
    theme = TuiTheme.minimal_retro()
    assert theme.primary_color == Color.from_rgb(255, 107, 53)
    assert theme.cursor_color == Color.from_rgb(247, 147, 30)
    assert theme.border_color == Color.DARK_GRAY


@pytest.mark.parametrize(
    "mode, color",
    [
        (AppMode.NORMAL, Color.BLUE),
        (AppMode.INSERT, Color.GREEN),
        (AppMode.PREVIEW, Color.MAGENTA),
        (AppMode.HELP, Color.YELLOW),
    ],
)
def test_mode_color(mode, color):
    assert TuiTheme.minimal_retro().mode_color(mode) == color


def test_heading_styles():
    theme = TuiTheme.minimal_retro()
    h1 = theme.markdown_h1_style()
    assert h1.fg == theme.primary_color
    assert h1.modifiers == Modifier.BOLD | Modifier.UNDERLINED
    assert theme.markdown_h2_style() == theme.markdown_header_style()
    assert theme.markdown_h3_style().fg == theme.secondary_color
    assert theme.title_style() == theme.markdown_header_style()


def test_code_styles_match():
    theme = TuiTheme.minimal_retro()
    assert theme.markdown_code_style() == theme.markdown_code_block_style()
    assert theme.markdown_code_style().fg == Color.GREEN
    assert theme.markdown_code_style().bg == Color.DARK_GRAY


def test_text_styles_follow_palette():
    theme = TuiTheme.from_blog_theme("#FF6B35", "#F7931E", "#2D1B0F")
    assert theme.text_style().fg == theme.text_color
    assert theme.border_style().fg == theme.border_color
    assert theme.markdown_rule_style() == theme.border_style()
    assert theme.focused_border_style().fg == theme.primary_color
    assert theme.markdown_bold_style().modifiers == Modifier.BOLD
    assert theme.markdown_italic_style().modifiers == Modifier.ITALIC
    assert theme.markdown_link_style().fg == theme.secondary_color
    assert theme.markdown_list_style().fg == theme.primary_color
    assert theme.markdown_blockquote_style().fg == Color.GRAY
    assert theme.markdown_html_style().fg == Color.YELLOW