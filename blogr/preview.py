"""Scrollable rendered-markdown preview pane."""

from __future__ import annotations

from typing import Optional

from blogr.keys import Key, KeyEvent
from blogr.markdown import MarkdownRenderer
from blogr.style import Line
from blogr.tui_theme import TuiTheme

_DEFAULT_PAGE = 10


def _page_size(height: Optional[int]) -> int:
    if height is None:
        return _DEFAULT_PAGE
    return max(height - 3, 1)


class Preview:
    """Rendered markdown lines with a scroll position."""

    def __init__(self) -> None:
        self._content: list[Line] = []
        self._scroll = 0
        self._renderer = MarkdownRenderer()

    def update_content(self, markdown: str, theme: TuiTheme) -> None:
        """Render new markdown and scroll back to the top."""
        self._content = self._renderer.render_markdown(markdown, theme)
        self._scroll = 0

    def handle_key_event(self, key: KeyEvent, height: Optional[int] = None) -> None:
        """Scroll in response to navigation keys."""
        last = max(len(self._content) - 1, 0)
        code = key.key
        if code is Key.UP:
            if self._scroll > 0:
                self._scroll -= 1
        elif code is Key.DOWN:
            if self._scroll + 1 < len(self._content):
                self._scroll += 1
        elif code is Key.PAGE_UP:
            self._scroll = max(self._scroll - _page_size(height), 0)
        elif code is Key.PAGE_DOWN:
            page = _page_size(height)
            if self._scroll + page < len(self._content):
                self._scroll += page
            else:
                self._scroll = last
        elif code is Key.HOME:
            self._scroll = 0
        elif code is Key.END:
            self._scroll = last

    def visible_lines(self, height: int) -> list[Line]:
        """The lines shown in a view of ``height`` rows."""
        return self._content[self._scroll : self._scroll + max(height, 0)]

    def scroll_indicator_row(self, height: int) -> Optional[int]:
        """Row of the scroll indicator, or None when everything fits."""
        total = len(self._content)
        if total <= height:
            return None
        ratio = self._scroll / (total - height)
        return max(int(ratio * (height - 1.0)), 0)

    def scroll_position(self) -> int:
        """Current scroll offset."""
        return self._scroll

    def total_lines(self) -> int:
        """Number of rendered lines."""
        return len(self._content)