# blogr

Building blocks for a blog tool that runs in the terminal.

## Modules

- `blogr.utils`: `slugify`, `calculate_reading_time` (200 words a minute, at
  least one minute), `extract_excerpt`, `parse_tags`, `format_file_size`,
  `format_timestamp`, `get_file_extension`, `is_valid_url`,
  `is_valid_github_username`, `is_valid_github_repo_name` and
  `unique_filename`. File helpers `ensure_dir_exists`, `copy_file`,
  `write_file` and `read_file` create any missing parent directories and raise
  `OSError` with a message when they fail. `open_browser` runs the platform's
  opener. The git helpers call the `git` executable: `is_git_available`,
  `init_git_repo`, `git_add_all`, `git_initial_commit`, `git_set_remote` and
  `git_push`.
- `blogr.console`: short status messages `success`, `error` (printed to
  standard error), `warn`, `info` and `step`.
- `blogr.style`: `Color`, `Modifier`, `Style`, `Span` and `Line`, which are
  plain values that describe styled terminal text.
- `blogr.tui_theme`: `AppMode`, `parse_color` for `#RRGGBB` strings, and
  `TuiTheme`. A `TuiTheme` is built with `TuiTheme.from_blog_theme(primary,
  secondary, background)` or `TuiTheme.minimal_retro()`, and it provides the
  styles for text, borders and markdown elements.
- `blogr.keys`: `Key`, `KeyModifiers` and `KeyEvent`. Use `KeyEvent.char(c)`
  for a character key.
- `blogr.editor`: `Editor`, a model of a line-based text editor. It keeps the
  cursor and the scroll offset, and handles typing, Enter, Backspace, Delete,
  Tab (four spaces), the arrow keys, Home, End, PageUp and PageDown. Ctrl+K
  deletes the line, Ctrl+D deletes a word, Ctrl+U deletes to the start of the
  line, and Ctrl+A and Ctrl+E move to the start and end of the line.
  `render_lines(height, theme)` returns numbered, highlighted `Line`s.
- `blogr.markdown`: `MarkdownRenderer.render_markdown(text, theme)` turns
  markdown into a list of styled `Line`s.
- `blogr.preview`: `Preview` holds rendered lines and a scroll position. It
  provides `visible_lines(height)` and `scroll_indicator_row(height)`.
- `blogr.themes`: `Theme`, `MinimalRetroTheme` and `ObsidianTheme`, each with
  `info()` (name, version, author, description, configuration schema) and
  `preview_tui_style()`. Use `get_theme(name)` or `get_all_themes()` with the
  names `minimal-retro` and `obsidian`.

## Installation

```
pip install .
```

## Examples

```python
from blogr.utils import slugify, calculate_reading_time, extract_excerpt

slugify("My Awesome Blog Post!")          # "my-awesome-blog-post"
calculate_reading_time("Hello world")     # 1
extract_excerpt("This is a long text with many words", 5)  # "This is a long text..."
```

```python
from blogr.editor import Editor
from blogr.keys import KeyEvent

editor = Editor("# Title\nbody")
editor.handle_key_event(KeyEvent.char("x"))
print(editor.get_content())               # "x# Title\nbody"
```

```python
from blogr.themes import get_theme

theme = get_theme("minimal-retro")
print(theme.info().name)                  # "Minimal Retro"
```

## What it does not do

There is no command-line program, and nothing draws to a real terminal or reads
the keyboard. `Editor` and `Preview` are models whose output is `Line` values.
The package does not build a site, serve pages or store posts. The themes
describe their metadata and preview style only; they carry no HTML templates
or stylesheets.

## Running the tests

```
pip install .[test]
pytest
```