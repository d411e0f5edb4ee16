# notepad-editor

The editing model of a Markdown note editor, with no user interface
attached. It can drive any front end: a terminal, a GUI toolkit or a test
harness.

## What it provides

- **Text positions** (`notepad_editor.textpos`). `split_lines`,
  `split_at_char_col`, `char_idx_to_byte`, `byte_to_utf16` and
  `utf16_to_byte` convert between character columns, UTF-8 byte offsets and
  UTF-16 offsets. `pixel_to_col` maps a horizontal pixel position to a
  column, counting characters above U+2FFF as double width.
  `parse_tags_from_input` collects `#tag` tokens and `resolve_image_path`
  resolves an image reference against the note that holds it (absolute
  paths kept, `~/` expanded from `HOME`, relative paths taken from the
  note's directory).
- **Styles** (`notepad_editor.styles`). `Color`, `LineStyle`,
  `HighlightStyle` and `ResolvedColors`, plus `rgba()` for a packed
  `0xRRGGBBAA` value and `parse_hex()` for `#RRGGBB` / `#RRGGBBAA` strings
  (anything unparsable gives white).
- **Line highlighting** (`notepad_editor.highlight`). `detect_line_context`
  classifies a line as a heading, list item, block quote, table row, table
  separator, code line or normal text. `highlight_line` returns a
  `HighlightedLine` of byte-ranged `Span`s for that line, including inline
  bold, italic, strikethrough, code spans, links, images (whose URLs are
  collected) and `$math$`. `highlight_fence_line` styles a ```` ``` ````
  fence line and its language label.
- **Spans** (`notepad_editor.spans`). `overlay_selection()` lays a
  selection background over existing spans, splitting them at the
  selection's edges. `adjust_highlight_offsets()` clips spans to a slice of
  a line and shifts them to start at zero.
- **Editor state** (`notepad_editor.editor_state`, `notepad_editor.editor`).
  `EditorState` holds the body text, cursor, selection, `Frontmatter`
  (title, tags, timestamps) and tag input, across three `EditZone`s: title,
  tag input and content. `Editor` adds the editing actions `move_left`,
  `move_right`, `move_up`, `move_down`, `select_left`, `select_right`,
  `select_up`, `select_down`, `select_all`, `copy`, `paste`, `cut`,
  `backspace` and `insert_newline`. `copy` and `cut` return the text for
  the clipboard; `paste` takes the text to insert.
- **IME input** (`notepad_editor.ime`, `notepad_editor.input`). `ImeState`
  tracks the composing range; `InputHandler` answers text-input queries and
  applies committed and composing text in UTF-16 ranges, as platform input
  methods expect.
- **Key bindings and commands** (`notepad_editor.keymap`). `Action`,
  `default_bindings()`, `action_for_name()` for configuration names,
  `build_bindings()` for user bindings, and `all_command_specs()` for the
  command palette's commands and their arguments.

## Installing

```
pip install .
```

There are no runtime dependencies. The tests need the `test` extra:

```
pip install .[test]
pytest
```

## Example

```python
from notepad_editor.highlight import detect_line_context, highlight_line
from notepad_editor.styles import ResolvedColors
from notepad_editor.textpos import split_lines, parse_tags_from_input

colors = ResolvedColors()
for line in split_lines("# Title\n- item with **bold**\n"):
    context = detect_line_context(line, False)
    result = highlight_line(line, context, colors)
    print(repr(line), [span.range for span in result.highlights])

print(sorted(parse_tags_from_input("#work garbage #meeting")))  # ['meeting', 'work']
```

Editing:

```python
from notepad_editor.editor import Editor

editor = Editor("hello\nworld")
editor.select_all()
print(editor.copy())          # 'hello\nworld'
editor.paste("replaced")
print(editor.text(), editor.is_dirty())  # replaced True
```

Binding user-configured keys:

```python
from notepad_editor.keymap import UserBinding, build_bindings

bindings = build_bindings([UserBinding(key="ctrl-p", action="open_command_palette")])
```

Action names in user bindings that are not recognised are skipped and
reported as a warning through the `logging` module.

## What it does not do

- It highlights one line at a time. There is no whole-document pass that
  tracks fenced code blocks or `$$` math blocks across lines, and no syntax
  highlighting of code inside fences.
- It does not load or save note files, parse frontmatter from text, or
  draw anything on screen.
- `Action.UNDO` and `Action.REDO` exist as bindings, but the editor keeps
  no edit history.