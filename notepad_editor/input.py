"""Platform text-input (IME) protocol for the editor, in UTF-16 offsets."""

from __future__ import annotations

from .editor import Editor
from .editor_state import EditZone
from .textpos import byte_to_utf16, char_idx_to_byte, utf16_to_byte


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class InputHandler:
    """Answers text-input queries and applies input edits for an editor.

    Ranges passed in and returned are in UTF-16 code units of the text of
    the zone being edited; composition ranges always refer to the body.
    """

    def __init__(self, editor: Editor) -> None:
        self.editor = editor

    def _zone_text(self) -> str:
        editor = self.editor
        if editor.edit_zone is EditZone.TITLE:
            return editor.frontmatter.title if editor.frontmatter is not None else ""
        if editor.edit_zone is EditZone.TAG_INPUT:
            return editor.tag_input
        return editor.text()

    def _insert_in_field(self, new_text: str) -> bool:
        """Insert into the title or tag input at its cursor; False in the body."""
        editor = self.editor
        if editor.edit_zone is EditZone.TITLE:
            if editor.frontmatter is not None:
                title = editor.frontmatter.title
                cursor = editor.title_cursor
                editor.frontmatter.title = title[:cursor] + new_text + title[cursor:]
                editor.title_cursor += len(new_text)
                editor.dirty = True
            return True
        if editor.edit_zone is EditZone.TAG_INPUT:
            cursor = editor.tag_input_cursor
            editor.tag_input = editor.tag_input[:cursor] + new_text + editor.tag_input[cursor:]
            editor.tag_input_cursor += len(new_text)
            return True
        return False

    def _target_bytes(self, utf16_range: range | None) -> range:
        """The body byte range an edit applies to: the given range, the selection or the cursor."""
        editor = self.editor
        if utf16_range is not None:
            editor.selection = None
            text = editor.text()
            return range(
                utf16_to_byte(text, utf16_range.start), utf16_to_byte(text, utf16_range.stop)
            )
        selection, editor.selection = editor.selection, None
        if selection is not None:
            return selection
        return range(editor.cursor_pos, editor.cursor_pos)

    def text_for_range(self, utf16_range: range) -> str | None:
        """The text of the active zone within a UTF-16 range, or None if it is inverted."""
        text = self._zone_text()
        data = text.encode("utf-8")
        byte_start = utf16_to_byte(text, utf16_range.start)
        byte_end = utf16_to_byte(text, utf16_range.stop)
        if byte_start <= byte_end <= len(data):
            return data[byte_start:byte_end].decode("utf-8")
        return None

    def selected_text_range(self) -> range:
        """The selection, or an empty range at the cursor, in UTF-16 units."""
        editor = self.editor
        if editor.edit_zone is EditZone.TITLE or editor.edit_zone is EditZone.TAG_INPUT:
            text = self._zone_text()
            cursor = (
                editor.title_cursor
                if editor.edit_zone is EditZone.TITLE
                else editor.tag_input_cursor
            )
            pos = byte_to_utf16(text, char_idx_to_byte(text, cursor))
            return range(pos, pos)
        text = editor.text()
        selection = editor.selection
        if selection is None:
            selection = range(editor.cursor_pos, editor.cursor_pos)
        return range(byte_to_utf16(text, selection.start), byte_to_utf16(text, selection.stop))

    def marked_text_range(self) -> range | None:
        """The composition range in the body, in UTF-16 units, if composing."""
        marked = self.editor.ime_state.marked_range
        if marked is None:
            return None
        text = self.editor.text()
        return range(byte_to_utf16(text, marked.start), byte_to_utf16(text, marked.stop))

    def unmark_text(self) -> None:
        """End the composition, keeping the composed text."""
        self.editor.ime_state.clear()

    def replace_text_in_range(self, utf16_range: range | None, new_text: str) -> None:
        """Commit text, replacing the range, the selection or nothing at the cursor.

        In the title or tag input the text is inserted at that field's cursor.
        """
        if self._insert_in_field(new_text):
            return
        editor = self.editor
        target = self._target_bytes(utf16_range)
        editor.replace_range(target.start, target.stop, new_text)
        editor.cursor_pos = target.start + _byte_len(new_text)
        editor.ime_state.clear()
        editor.dirty = True

    def replace_and_mark_text_in_range(self, utf16_range: range | None, new_text: str) -> None:
        """Replace the current composition with ``new_text`` and mark it as composing.

        The new text goes at the start of the given range (or of the
        selection, or at the cursor).
        """
        if self._insert_in_field(new_text):
            return
        editor = self.editor
        target = self._target_bytes(utf16_range)

        marked = editor.ime_state.marked_range
        if marked is not None:
            editor.replace_range(marked.start, marked.stop, "")
            if editor.cursor_pos > marked.stop:
                editor.cursor_pos -= marked.stop - marked.start
            elif editor.cursor_pos > marked.start:
                editor.cursor_pos = marked.start

        editor.replace_range(target.start, target.start, new_text)
        end = target.start + _byte_len(new_text)
        editor.ime_state.set_marked(range(target.start, end))
        editor.cursor_pos = end