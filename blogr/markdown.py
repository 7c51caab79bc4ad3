"""Render markdown into styled terminal lines for the preview pane."""

from __future__ import annotations

from typing import Iterable

from markdown_it import MarkdownIt
from markdown_it.token import Token

from blogr.style import Line, Span, Style
from blogr.tui_theme import TuiTheme

_RULE_WIDTH = 80


class _Renderer:
    """Walks a markdown token stream and collects styled lines."""

    def __init__(self, theme: TuiTheme) -> None:
        self.theme = theme
        self.lines: list[Line] = []
        self.current: list[Span] = []
        self.in_code_block = False
        self.in_header = False
        self.header_level = 0
        self.in_emphasis = False
        self.in_strong = False
        self.in_blockquote = False
        self.list_level = 0

    def run(self, tokens: Iterable[Token]) -> list[Line]:
        for token in tokens:
            self._block(token)
        self._flush()
        return self.lines

    # Line management

    def _flush(self) -> None:
        if self.current:
            self._break_line()

    def _break_line(self) -> None:
        self.lines.append(Line(self.current))
        self.current = []

    def _blank(self) -> None:
        self.lines.append(Line([Span("")]))

    # Block tokens

    def _block(self, token: Token) -> None:
        kind = token.type
        if kind == "heading_open":
            self._flush()
            self.in_header = True
            self.header_level = int(token.tag[1:])
        elif kind == "heading_close":
            self._flush()
            self._blank()
            self.in_header = False
            self.header_level = 0
        elif kind == "paragraph_open":
            if not token.hidden:
                self._flush()
        elif kind == "paragraph_close":
            if not token.hidden:
                self._flush()
                self._blank()
        elif kind == "blockquote_open":
            self._flush()
            self.in_blockquote = True
        elif kind == "blockquote_close":
            self._flush()
            self._blank()
            self.in_blockquote = False
        elif kind in ("bullet_list_open", "ordered_list_open"):
            self._flush()
            self.list_level += 1
        elif kind in ("bullet_list_close", "ordered_list_close"):
            self._flush()
            self._blank()
            self.list_level = max(self.list_level - 1, 0)
        elif kind == "list_item_open":
            self._flush()
            indent = "  " * max(self.list_level - 1, 0)
            self.current.append(Span(f"{indent}• ", self.theme.markdown_list_style()))
        elif kind == "list_item_close":
            self._flush()
        elif kind in ("fence", "code_block"):
            self._flush()
            self.in_code_block = True
            for text in token.content.splitlines(keepends=True):
                self._text(text)
            self._flush()
            self._blank()
            self.in_code_block = False
        elif kind == "hr":
            self._flush()
            self.lines.append(
                Line([Span("─" * _RULE_WIDTH, self.theme.markdown_rule_style())])
            )
            self._blank()
        elif kind == "html_block":
            for text in token.content.splitlines(keepends=True):
                self._html(text)
        elif kind == "inline":
            for child in token.children or ():
                self._inline(child)

    # Inline tokens

    def _inline(self, token: Token) -> None:
        kind = token.type
        if kind == "text":
            self._text(token.content)
        elif kind == "code_inline":
            self.current.append(Span(token.content, self.theme.markdown_code_style()))
        elif kind == "html_inline":
            self._html(token.content)
        elif kind == "softbreak":
            self.current.append(Span(" "))
        elif kind == "hardbreak":
            self._break_line()
        elif kind == "em_open":
            self.in_emphasis = True
        elif kind == "em_close":
            self.in_emphasis = False
        elif kind == "strong_open":
            self.in_strong = True
        elif kind == "strong_close":
            self.in_strong = False
        elif kind == "link_open":
            self.current.append(Span("[", self.theme.markdown_link_style()))
        elif kind == "link_close":
            self.current.append(Span("]", self.theme.markdown_link_style()))
        elif kind == "image":
            for child in token.children or ():
                self._inline(child)

    def _html(self, html: str) -> None:
        self.current.append(Span(html, self.theme.markdown_html_style()))

    def _text_style(self) -> Style:
        theme = self.theme
        if self.in_code_block:
            return theme.markdown_code_block_style()
        if self.in_header:
            return {
                1: theme.markdown_h1_style,
                2: theme.markdown_h2_style,
                3: theme.markdown_h3_style,
            }.get(self.header_level, theme.markdown_header_style)()
        if self.in_strong:
            return theme.markdown_bold_style()
        if self.in_emphasis:
            return theme.markdown_italic_style()
        if self.in_blockquote:
            return theme.markdown_blockquote_style()
        return theme.text_style()

    def _text(self, text: str) -> None:
        style = self._text_style()
        if (self.in_blockquote or self.in_code_block) and not text.startswith("  "):
            text = f"  {text}"
        for i, piece in enumerate(text.split("\n")):
            if i > 0:
                self._break_line()
            if piece or i == 0:
                self.current.append(Span(piece, style))


class MarkdownRenderer:
    """Turns markdown text into styled lines using a theme's palette."""

    def __init__(self) -> None:
        self._parser = MarkdownIt("commonmark").enable(["table", "strikethrough"])

    def render_markdown(self, markdown: str, theme: TuiTheme) -> list[Line]:
        """Render the markdown into a list of styled lines."""
        return _Renderer(theme).run(self._parser.parse(markdown))