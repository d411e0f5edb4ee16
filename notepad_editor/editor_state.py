"""Editable note state: text, cursor, selection, title and tag input."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from .ime import ImeState
from .textpos import char_idx_to_byte, parse_tags_from_input, split_lines

_FULL_WIDTH_SPACE = "\u3000"


class EditZone(enum.Enum):
    """The part of the note that receives keyboard input."""

    TITLE = "title"
    TAG_INPUT = "tag_input"
    CONTENT = "content"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Frontmatter:
    """Note metadata shown above the body."""

    title: str = ""
    tags: set[str] = field(default_factory=set)
    created: datetime = field(default_factory=_utc_now)
    updated: datetime = field(default_factory=_utc_now)


def _text_lines(text: str) -> list[str]:
    """Lines without terminators; no final empty line after a trailing newline."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class EditorState:
    """The text and cursor state behind the editor.

    Positions in the body (``cursor_pos``, ``selection``) are UTF-8 byte
    offsets; ``title_cursor`` and ``tag_input_cursor`` count characters.
    """

    def __init__(
        self,
        text: str = "",
        frontmatter: Frontmatter | None = None,
        file_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self._text = text
        self.cached_lines: list[str] = split_lines(text)
        self.cursor_pos = 0
        self.selection: range | None = None
        self.ime_state = ImeState()
        self.file_path: Path | None = Path(file_path) if file_path is not None else None
        self.dirty = False
        self.frontmatter = frontmatter
        self.tag_input = ""
        self.tag_input_cursor = 0
        self.title_cursor = 0
        self.highlights_dirty = False
        if frontmatter is not None and not frontmatter.title:
            self.edit_zone = EditZone.TITLE
        else:
            self.edit_zone = EditZone.CONTENT

    def text(self) -> str:
        """The body text."""
        return self._text

    def is_dirty(self) -> bool:
        """Whether there are unsaved changes."""
        return self.dirty

    def title(self) -> str:
        """The note's title, or "Untitled" when it has no frontmatter."""
        return self.frontmatter.title if self.frontmatter is not None else "Untitled"

    def tags(self) -> list[str]:
        """The note's tags in sorted order."""
        return sorted(self.frontmatter.tags) if self.frontmatter is not None else []

    def add_tag(self, tag: str) -> None:
        """Add a tag; does nothing for a note without frontmatter."""
        if self.frontmatter is not None:
            self.frontmatter.tags.add(tag)
            self.dirty = True

    def remove_tag(self, tag: str) -> None:
        """Remove a tag if present; does nothing for a note without frontmatter."""
        if self.frontmatter is not None:
            self.frontmatter.tags.discard(tag)
            self.dirty = True

    def populate_tag_input(self) -> None:
        """Fill the tag input with the current tags as ``#a #b `` and put the cursor at its end."""
        if self.frontmatter is None:
            return
        self.tag_input = "".join(f"#{tag} " for tag in sorted(self.frontmatter.tags))
        self.tag_input_cursor = len(self.tag_input)

    def commit_tag_input(self) -> int:
        """Replace the tags with the ``#tag`` tokens typed in the input and clear it.

        Full-width spaces count as separators. Returns the input cursor as it
        was before clearing.
        """
        saved_cursor = self.tag_input_cursor
        if self.tag_input:
            parsed = parse_tags_from_input(self.tag_input.replace(_FULL_WIDTH_SPACE, " "))
            if self.frontmatter is not None:
                self.frontmatter.tags = parsed
                self.dirty = True
        self.tag_input = ""
        self.tag_input_cursor = 0
        return saved_cursor

    def line_count(self) -> int:
        """Number of display lines, counting a final empty line after a trailing newline."""
        return len(self.cached_lines)

    def line_text(self, idx: int) -> str:
        """The text of a display line, or "" when there is no such line."""
        if 0 <= idx < len(self.cached_lines):
            return self.cached_lines[idx]
        return ""

    def byte_to_line_col(self, byte_pos: int) -> tuple[int, int]:
        """Map a byte offset to (line index, character column)."""
        data = self._text.encode("utf-8")
        current = 0
        for line_idx, line in enumerate(_text_lines(self._text)):
            line_end = current + _byte_len(line)
            if byte_pos <= line_end:
                col = len(data[current:byte_pos].decode("utf-8", errors="strict"))
                return line_idx, col
            current = line_end + 1
        return max(len(self.cached_lines) - 1, 0), 0

    def line_col_to_byte(self, line: int, col: int) -> int:
        """Map (line index, character column) to a byte offset.

        The column is clamped to the line's length; a line past the end maps
        to the end of the text.
        """
        current = 0
        for line_idx, line_text in enumerate(_text_lines(self._text)):
            if line_idx == line:
                return current + char_idx_to_byte(line_text, col)
            current += _byte_len(line_text) + 1
        return _byte_len(self._text)

    def replace_range(self, start: int, end: int, new_text: str) -> None:
        """Replace the bytes ``start`` up to ``end`` of the body with ``new_text``.

        Only the text and line cache change; callers decide whether the edit
        makes the note dirty and where the cursor goes.
        """
        data = self._text.encode("utf-8")
        if not 0 <= start <= end <= len(data):
            raise ValueError(f"byte range {start}..{end} out of bounds")
        try:
            before = data[:start].decode("utf-8")
            after = data[end:].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"byte range {start}..{end} is not on character boundaries") from exc
        self._text = before + new_text + after
        self.cached_lines = split_lines(self._text)
        self.highlights_dirty = True

    def extend_selection(self, new_pos: int) -> None:
        """Move the cursor to ``new_pos``, extending the selection from its anchor.

        The anchor is the end of the selection opposite the cursor, or the
        cursor itself when nothing is selected.
        """
        if self.selection is None:
            anchor = self.cursor_pos
        elif self.cursor_pos == self.selection.start:
            anchor = self.selection.stop
        else:
            anchor = self.selection.start
        self.cursor_pos = new_pos
        self.selection = range(min(anchor, new_pos), max(anchor, new_pos))