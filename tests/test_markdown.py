import pytest

from blogr.markdown import MarkdownRenderer
from blogr.style import Modifier, Span, Style
from blogr.tui_theme import TuiTheme


@pytest.fixture
def theme():
    return TuiTheme.minimal_retro()


@pytest.fixture
def renderer():
    return MarkdownRenderer()


def texts(lines):
    return [line.text() for line in lines]


def test_empty_input_gives_no_lines(renderer, theme):
    assert renderer.render_markdown("", theme) == []


def test_paragraph_followed_by_spacing(renderer, theme):
    lines = renderer.render_markdown("Hello world", theme)
    assert texts(lines) == ["Hello world", ""]
    assert lines[0].spans[0].style == theme.text_style()


def test_heading_levels_use_their_styles(renderer, theme):
    lines = renderer.render_markdown("# One\n\n## Two\n\n### Three\n\n#### Four", theme)
    assert texts(lines) == ["One", "", "Two", "", "Three", "", "Four", ""]
    assert lines[0].spans[0].style == theme.markdown_h1_style()
    assert lines[2].spans[0].style == theme.markdown_h2_style()
    assert lines[4].spans[0].style == theme.markdown_h3_style()
    assert lines[6].spans[0].style == theme.markdown_header_style()


def test_emphasis_and_strong(renderer, theme):
    lines = renderer.render_markdown("*it* and **bold**", theme)
    spans = lines[0].spans
    assert spans[0] == Span("it", theme.markdown_italic_style())
    assert spans[-1] == Span("bold", theme.markdown_bold_style())
    assert Modifier.BOLD in spans[-1].style.modifiers


def test_inline_code(renderer, theme):
    lines = renderer.render_markdown("use `x` here", theme)
    assert Span("x", theme.markdown_code_style()) in lines[0].spans
    assert lines[0].text() == "use x here"


def test_tight_list_has_bullets(renderer, theme):
    lines = renderer.render_markdown("- a\n- b", theme)
    assert texts(lines) == ["• a", "• b", ""]
    assert lines[0].spans[0].style == theme.markdown_list_style()


def test_nested_list_is_indented(renderer, theme):
    lines = renderer.render_markdown("- a\n  - b", theme)
    rendered = texts(lines)
    assert "  • b" in rendered
    assert rendered[0] == "• a"


def test_code_block_lines_are_indented(renderer, theme):
    lines = renderer.render_markdown("```\nfirst\nsecond\n```", theme)
    assert texts(lines) == ["  first", "  second", ""]
    assert lines[0].spans[0].style == theme.markdown_code_block_style()


def test_blockquote(renderer, theme):
    lines = renderer.render_markdown("> quoted", theme)
    assert texts(lines)[0] == "  quoted"
    assert lines[0].spans[0].style == theme.markdown_blockquote_style()
    assert all(text == "" for text in texts(lines)[1:])


def test_rule(renderer, theme):
    lines = renderer.render_markdown("---", theme)
    assert texts(lines) == ["─" * 80, ""]
    assert lines[0].spans[0].style == theme.markdown_rule_style()


def test_link_is_bracketed(renderer, theme):
    lines = renderer.render_markdown("[site](https://example.com)", theme)
    assert lines[0].text() == "[site]"
    assert lines[0].spans[0] == Span("[", theme.markdown_link_style())
    assert lines[0].spans[-1] == Span("]", theme.markdown_link_style())


def test_soft_break_becomes_space(renderer, theme):
    lines = renderer.render_markdown("a\nb", theme)
    assert texts(lines) == ["a b", ""]
    assert Span(" ", Style()) in lines[0].spans


def test_hard_break_splits_line(renderer, theme):
    lines = renderer.render_markdown("a  \nb", theme)
    assert texts(lines) == ["a", "b", ""]


def test_inline_html_is_styled(renderer, theme):
    lines = renderer.render_markdown("x <b>y</b>", theme)
    html_spans = [s for s in lines[0].spans if s.style == theme.markdown_html_style()]
    assert [s.content for s in html_spans] == ["<b>", "</b>"]