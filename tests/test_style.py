import pytest

from blogr.style import Color, Line, Modifier, Span, Style


def test_from_rgb_equality():
    assert Color.from_rgb(255, 107, 53) == Color.from_rgb(255, 107, 53)
    assert Color.from_rgb(255, 107, 53) != Color.from_rgb(247, 147, 30)


@pytest.mark.parametrize("components", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_from_rgb_rejects_out_of_range(components):
    with pytest.raises(ValueError):
        Color.from_rgb(*components)


def test_rgb_colour_prints_as_hex():
    assert str(Color.from_rgb(255, 107, 53)) == "#FF6B35"


def test_named_colours_are_distinct():
    blue = Style().with_fg(Color.BLUE)
    cyan = Style().with_fg(Color.CYAN)
    assert blue.fg == Color.BLUE
    assert cyan.fg == Color.CYAN
    assert blue != cyan
    assert blue.fg.rgb is None


def test_with_fg_returns_new_style():
    base = Style()
    styled = base.with_fg(Color.WHITE)
    assert styled.fg == Color.WHITE
    assert base.fg is None


def test_with_bg_keeps_foreground():
    style = Style().with_fg(Color.GREEN).with_bg(Color.DARK_GRAY)
    assert (style.fg, style.bg) == (Color.GREEN, Color.DARK_GRAY)


def test_add_modifier_accumulates():
    style = Style().add_modifier(Modifier.BOLD).add_modifier(Modifier.UNDERLINED)
    assert Modifier.BOLD in style.modifiers
    assert Modifier.UNDERLINED in style.modifiers
    assert Modifier.ITALIC not in style.modifiers


def test_default_span_style_is_plain():
    assert Span("x").style == Style()


def test_line_text_joins_spans():
    line = Line([Span("# "), Span("Title", Style().add_modifier(Modifier.BOLD))])
    assert line.text() == "# Title"
    assert Line().text() == ""