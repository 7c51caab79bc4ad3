"""A small line-based text editor for markdown content."""

from __future__ import annotations

from collections import deque
from typing import Optional

from blogr.keys import Key, KeyEvent
from blogr.style import Color, Line, Modifier, Span, Style
from blogr.tui_theme import TuiTheme

_VISIBLE_LINES = 20
_DEFAULT_PAGE = 10
_TAB_WIDTH = 4


def _page_size(height: Optional[int]) -> int:
    if height is None:
        return _DEFAULT_PAGE
    return max(max(height - 3, 0), 1)


class Editor:
    """Editable lines of text with a cursor and a vertical scroll offset."""

    def __init__(self, content: str) -> None:
        lines = content.split("\n")
        if content.endswith("\n"):
            lines.pop()
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        self._lines: list[str] = lines or [""]
        self._row = 0
        self._col = 0
        self._scroll_row = 0
        self._scroll_col = 0

    def get_content(self) -> str:
        """The edited text, lines joined by newlines."""
        return "\n".join(self._lines)

    @property
    def cursor(self) -> tuple[int, int]:
        """Cursor position as (line, column)."""
        return (self._row, self._col)

    @property
    def scroll(self) -> tuple[int, int]:
        """Scroll offset as (line, column)."""
        return (self._scroll_row, self._scroll_col)

    def handle_key_event(self, key: KeyEvent, height: Optional[int] = None) -> bool:
        """Apply a key press; return True if the content changed."""
        if key.has_control():
            if key.character == "k":
                self._delete_current_line()
                return True
            if key.character == "d":
                self._delete_word()
                return True
            if key.character == "u":
                self._delete_to_line_start()
                return True
            if key.character == "a":
                self._col = 0
                return False
            if key.character == "e":
                self._move_to_line_end()
                return False

        code = key.key
        if code is Key.CHAR:
            self._insert_text(key.character)
            return True
        if code is Key.ENTER:
            self._insert_newline()
            return True
        if code is Key.BACKSPACE:
            self._delete_before_cursor()
            return True
        if code is Key.DELETE:
            self._delete_at_cursor()
            return True
        if code is Key.TAB:
            self._insert_text(" " * _TAB_WIDTH)
            return True

        movements = {
            Key.LEFT: self._move_left,
            Key.RIGHT: self._move_right,
            Key.UP: self._move_up,
            Key.DOWN: self._move_down,
            Key.HOME: self._move_to_line_start,
            Key.END: self._move_to_line_end,
            Key.PAGE_UP: lambda: self._page_up(height),
            Key.PAGE_DOWN: lambda: self._page_down(height),
        }
        movement = movements.get(code)
        if movement is not None:
            movement()
            self._update_scroll()
        return False

    # Editing

    def _insert_text(self, text: str) -> None:
        line = self._lines[self._row]
        self._lines[self._row] = line[: self._col] + text + line[self._col :]
        self._col += len(text)

    def _insert_newline(self) -> None:
        line = self._lines[self._row]
        self._lines[self._row : self._row + 1] = [line[: self._col], line[self._col :]]
        self._row += 1
        self._col = 0

    def _delete_before_cursor(self) -> None:
        if self._col > 0:
            line = self._lines[self._row]
            self._lines[self._row] = line[: self._col - 1] + line[self._col :]
            self._col -= 1
        elif self._row > 0:
            current = self._lines.pop(self._row)
            self._row -= 1
            self._col = len(self._lines[self._row])
            self._lines[self._row] += current

    def _delete_at_cursor(self) -> None:
        line = self._lines[self._row]
        if self._col < len(line):
            self._lines[self._row] = line[: self._col] + line[self._col + 1 :]
        elif self._row + 1 < len(self._lines):
            self._lines[self._row] += self._lines.pop(self._row + 1)

    def _delete_current_line(self) -> None:
        if len(self._lines) > 1:
            del self._lines[self._row]
            if self._row >= len(self._lines):
                self._row = len(self._lines) - 1
            self._col = 0
        else:
            self._lines[0] = ""
            self._row, self._col = 0, 0

    def _delete_word(self) -> None:
        line = self._lines[self._row]
        if self._col >= len(line):
            return
        rest = line[self._col :]
        stripped = rest.lstrip()
        skipped = len(rest) - len(stripped)
        word_len = next(
            (i for i, c in enumerate(stripped) if c.isspace()), len(stripped)
        )
        end = self._col + skipped + word_len
        self._lines[self._row] = line[: self._col] + line[end:]

    def _delete_to_line_start(self) -> None:
        if self._col > 0:
            self._lines[self._row] = self._lines[self._row][self._col :]
            self._col = 0

    # Movement

    def _move_left(self) -> None:
        if self._col > 0:
            self._col -= 1
        elif self._row > 0:
            self._row -= 1
            self._col = len(self._lines[self._row])

    def _move_right(self) -> None:
        if self._col < len(self._lines[self._row]):
            self._col += 1
        elif self._row + 1 < len(self._lines):
            self._row += 1
            self._col = 0

    def _move_up(self) -> None:
        if self._row > 0:
            self._row -= 1
            self._col = min(self._col, len(self._lines[self._row]))

    def _move_down(self) -> None:
        if self._row + 1 < len(self._lines):
            self._row += 1
            self._col = min(self._col, len(self._lines[self._row]))

    def _move_to_line_start(self) -> None:
        self._col = 0

    def _move_to_line_end(self) -> None:
        self._col = len(self._lines[self._row])

    def _page_up(self, height: Optional[int]) -> None:
        self._row = max(self._row - _page_size(height), 0)
        self._move_to_line_end()

    def _page_down(self, height: Optional[int]) -> None:
        page = _page_size(height)
        if self._row + page < len(self._lines):
            self._row += page
        else:
            self._row = len(self._lines) - 1
        self._move_to_line_end()

    def _update_scroll(self) -> None:
        if self._row >= self._scroll_row + _VISIBLE_LINES:
            self._scroll_row = max(self._row - (_VISIBLE_LINES - 1), 0)
        if self._row < self._scroll_row:
            self._scroll_row = self._row

    # Rendering

    def render_lines(self, height: int, theme: TuiTheme) -> list[Line]:
        """Numbered, highlighted lines filling a view of ``height`` rows."""
        visible = self._lines[self._scroll_row : self._scroll_row + max(height, 0)]
        lines = []
        for index, text in enumerate(visible, start=self._scroll_row):
            on_cursor = index == self._row
            number_style = (
                Style(fg=theme.primary_color, modifiers=Modifier.BOLD)
                if on_cursor
                else Style(fg=Color.DARK_GRAY)
            )
            spans = [Span(f"{index + 1:4} ", number_style)]
            if on_cursor:
                spans.extend(self._cursor_line_spans(text, theme))
            elif text:
                spans.extend(self.highlight_line(text, theme))
            else:
                spans.append(Span(" ", theme.text_style()))
            lines.append(Line(spans))
        filler = Style(fg=Color.DARK_GRAY)
        while len(lines) < height:
            lines.append(Line([Span("   ~ ", filler)]))
        return lines

    def _cursor_line_spans(self, text: str, theme: TuiTheme) -> list[Span]:
        cursor_style = Style(fg=Color.BLACK, bg=theme.cursor_color, modifiers=Modifier.BOLD)
        text_style = theme.text_style()
        spans = [
            Span(c, cursor_style if i == self._col else text_style)
            for i, c in enumerate(text)
        ]
        if self._col >= len(text):
            spans.append(Span(" ", cursor_style))
        return spans

    def highlight_line(self, line: str, theme: TuiTheme) -> list[Span]:
        """Lightweight markdown highlighting of one line."""
        spans: list[Span] = []
        chars = deque(line)
        current = ""
        in_code = in_bold = in_italic = False

        def flush() -> None:
            nonlocal current
            if current:
                spans.append(Span(current, theme.text_style()))
                current = ""

        while chars:
            c = chars.popleft()
            if c == "#" and not current:
                level = 1
                while chars and chars[0] == "#":
                    chars.popleft()
                    level += 1
                spans.append(
                    Span("#" * level + "".join(chars), theme.markdown_header_style())
                )
                chars.clear()
                break
            if c == "`":
                flush()
                in_code = not in_code
                current = c
                if not in_code:
                    spans.append(Span(current, theme.markdown_code_style()))
                    current = ""
            elif c == "*" and chars and chars[0] == "*":
                flush()
                chars.popleft()
                in_bold = not in_bold
                current = "**"
            elif c == "*":
                flush()
                in_italic = not in_italic
                current = c
            else:
                current += c

        if current:
            if in_code:
                style = theme.markdown_code_style()
            elif in_bold:
                style = theme.markdown_bold_style()
            elif in_italic:
                style = theme.markdown_italic_style()
            else:
                style = theme.text_style()
            spans.append(Span(current, style))

        if not spans:
            spans.append(Span("", theme.text_style()))
        return spans