"""Keyboard-driven editing of a note: cursor motion, selection, clipboard and deletion."""

from __future__ import annotations

from .editor_state import EditorState, EditZone


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _delete_char_before(text: str, cursor: int) -> tuple[str, bool]:
    """Delete the character before a character cursor (clamped to the text).

    Returns the new text and whether anything was deleted.
    """
    prefix = text[:cursor]
    if not prefix:
        return text, False
    return prefix[:-1] + text[len(prefix):], True


def _insert_at(text: str, cursor: int, new_text: str) -> str:
    prefix = text[:cursor]
    return prefix + new_text + text[len(prefix):]


class Editor(EditorState):
    """An editor for a note's title, tags and body, driven by editing actions.

    Clipboard actions exchange plain strings: ``copy`` and ``cut`` return
    the text they would place on the clipboard, ``paste`` takes the text
    to insert.
    """

    def _prev_char_len(self) -> int:
        prefix = self._text.encode("utf-8")[: self.cursor_pos].decode("utf-8")
        return _byte_len(prefix[-1]) if prefix else 1

    def _next_char_len(self) -> int:
        suffix = self._text.encode("utf-8")[self.cursor_pos :].decode("utf-8")
        return _byte_len(suffix[0]) if suffix else 1

    def _text_len(self) -> int:
        return _byte_len(self._text)

    def _title_len(self) -> int:
        return len(self.frontmatter.title) if self.frontmatter is not None else 0

    def _delete_selection(self) -> bool:
        """Delete the selected body text, putting the cursor at its start."""
        sel, self.selection = self.selection, None
        if sel is None:
            return False
        self.replace_range(sel.start, sel.stop, "")
        self.cursor_pos = sel.start
        return True

    def _delete_prev_in_zone(self) -> None:
        """Delete the character before the cursor in the title or tag input."""
        if self.edit_zone is EditZone.TITLE:
            if self.title_cursor > 0 and self.frontmatter is not None:
                title, deleted = _delete_char_before(self.frontmatter.title, self.title_cursor)
                if deleted:
                    self.frontmatter.title = title
                    self.title_cursor -= 1
                    self.dirty = True
        elif self.edit_zone is EditZone.TAG_INPUT:
            if self.tag_input_cursor > 0:
                text, deleted = _delete_char_before(self.tag_input, self.tag_input_cursor)
                if deleted:
                    self.tag_input = text
                    self.tag_input_cursor -= 1

    def _delete_prev_char(self) -> None:
        if self.cursor_pos > 0:
            start = self.cursor_pos - self._prev_char_len()
            self.replace_range(start, self.cursor_pos, "")
            self.cursor_pos = start
            self.dirty = True

    def move_left(self) -> None:
        """Move the cursor one character left, or to the selection's start."""
        if self.selection is not None:
            self.cursor_pos = self.selection.start
            self.selection = None
            return
        if self.edit_zone is EditZone.TITLE:
            if self.title_cursor > 0:
                self.title_cursor -= 1
        elif self.edit_zone is EditZone.TAG_INPUT:
            if self.tag_input_cursor > 0:
                self.tag_input_cursor -= 1
        elif self.cursor_pos > 0:
            self.cursor_pos -= self._prev_char_len()

    def move_right(self) -> None:
        """Move the cursor one character right, or to the selection's end."""
        if self.selection is not None:
            self.cursor_pos = self.selection.stop
            self.selection = None
            return
        if self.edit_zone is EditZone.TITLE:
            if self.title_cursor < self._title_len():
                self.title_cursor += 1
        elif self.edit_zone is EditZone.TAG_INPUT:
            if self.tag_input_cursor < len(self.tag_input):
                self.tag_input_cursor += 1
        elif self.cursor_pos < self._text_len():
            self.cursor_pos += self._next_char_len()

    def move_up(self) -> None:
        """Move up a line; from the first body line move into the tag input."""
        self.selection = None
        if self.edit_zone is EditZone.TAG_INPUT:
            saved_cursor = self.commit_tag_input()
            self.edit_zone = EditZone.TITLE
            self.title_cursor = min(saved_cursor, self._title_len())
        elif self.edit_zone is EditZone.CONTENT:
            line, col = self.byte_to_line_col(self.cursor_pos)
            if line == 0 and self.frontmatter is not None:
                self.edit_zone = EditZone.TAG_INPUT
                self.populate_tag_input()
                self.tag_input_cursor = min(col, len(self.tag_input))
            elif line > 0:
                self.cursor_pos = self.line_col_to_byte(line - 1, col)

    def move_down(self) -> None:
        """Move down a line, passing from title to tag input to body."""
        self.selection = None
        if self.edit_zone is EditZone.TITLE:
            self.edit_zone = EditZone.TAG_INPUT
            self.populate_tag_input()
            self.tag_input_cursor = min(self.title_cursor, len(self.tag_input))
        elif self.edit_zone is EditZone.TAG_INPUT:
            saved_cursor = self.commit_tag_input()
            self.edit_zone = EditZone.CONTENT
            self.cursor_pos = self.line_col_to_byte(0, saved_cursor)
        else:
            line, col = self.byte_to_line_col(self.cursor_pos)
            if line + 1 < self.line_count():
                self.cursor_pos = self.line_col_to_byte(line + 1, col)

    def select_left(self) -> None:
        """Extend the selection one character left."""
        if self.edit_zone is EditZone.CONTENT and self.cursor_pos > 0:
            self.extend_selection(self.cursor_pos - self._prev_char_len())

    def select_right(self) -> None:
        """Extend the selection one character right."""
        if self.edit_zone is EditZone.CONTENT and self.cursor_pos < self._text_len():
            self.extend_selection(self.cursor_pos + self._next_char_len())

    def select_up(self) -> None:
        """Extend the selection one line up."""
        if self.edit_zone is not EditZone.CONTENT:
            return
        line, col = self.byte_to_line_col(self.cursor_pos)
        if line > 0:
            self.extend_selection(self.line_col_to_byte(line - 1, col))

    def select_down(self) -> None:
        """Extend the selection one line down."""
        if self.edit_zone is not EditZone.CONTENT:
            return
        line, col = self.byte_to_line_col(self.cursor_pos)
        if line + 1 < self.line_count():
            self.extend_selection(self.line_col_to_byte(line + 1, col))

    def select_all(self) -> None:
        """Select the whole body, leaving the cursor at its end."""
        if self.edit_zone is not EditZone.CONTENT:
            return
        length = self._text_len()
        if length > 0:
            self.cursor_pos = length
            self.selection = range(0, length)

    def copy(self) -> str | None:
        """Return the text to copy: the title, the tag input or the body selection.

        Returns None when there is nothing to copy.
        """
        if self.edit_zone is EditZone.TITLE:
            text = self.frontmatter.title if self.frontmatter is not None else ""
        elif self.edit_zone is EditZone.TAG_INPUT:
            text = self.tag_input
        else:
            if self.selection is None:
                return None
            data = self._text.encode("utf-8")
            start = min(self.selection.start, len(data))
            end = min(self.selection.stop, len(data))
            text = data[start:end].decode("utf-8")
        return text or None

    def paste(self, text: str) -> None:
        """Insert text at the cursor, replacing any body selection."""
        if not text:
            return
        if self.edit_zone is EditZone.TITLE:
            if self.frontmatter is not None:
                self.frontmatter.title = _insert_at(
                    self.frontmatter.title, self.title_cursor, text
                )
                self.title_cursor += len(text)
                self.dirty = True
        elif self.edit_zone is EditZone.TAG_INPUT:
            self.tag_input = _insert_at(self.tag_input, self.tag_input_cursor, text)
            self.tag_input_cursor += len(text)
        else:
            self._delete_selection()
            self.replace_range(self.cursor_pos, self.cursor_pos, text)
            self.cursor_pos += _byte_len(text)
            self.dirty = True

    def cut(self) -> str | None:
        """Copy, then delete the selection or the character before the cursor.

        Returns what ``copy`` returned.
        """
        copied = self.copy()
        if self.edit_zone is EditZone.CONTENT:
            if self._delete_selection():
                self.dirty = True
            else:
                self._delete_prev_char()
        else:
            self._delete_prev_in_zone()
        return copied

    def backspace(self) -> None:
        """Delete the selection, or the character before the cursor."""
        if self.edit_zone is EditZone.CONTENT:
            if self._delete_selection():
                self.dirty = True
            else:
                self._delete_prev_char()
        else:
            self._delete_prev_in_zone()

    def insert_newline(self) -> None:
        """Break the line in the body; from the title or tags, move into the body."""
        if self.edit_zone is EditZone.TITLE:
            self.edit_zone = EditZone.CONTENT
            self.cursor_pos = 0
        elif self.edit_zone is EditZone.TAG_INPUT:
            saved_cursor = self.commit_tag_input()
            self.edit_zone = EditZone.CONTENT
            self.cursor_pos = self.line_col_to_byte(0, saved_cursor)
        else:
            self._delete_selection()
            self.replace_range(self.cursor_pos, self.cursor_pos, "\n")
            self.cursor_pos += 1
            self.dirty = True