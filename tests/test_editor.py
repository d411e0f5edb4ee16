from notepad_editor.editor import Editor
from notepad_editor.editor_state import EditZone, Frontmatter


def _blen(s):
    return len(s.encode("utf-8"))


def test_move_right_steps_over_multibyte_characters():
    ed = Editor("aあb")
    ed.move_right()
    ed.move_right()
    assert ed.cursor_pos == _blen("aあ")


def test_move_left_steps_back_over_multibyte_character():
    ed = Editor("aあb")
    ed.cursor_pos = _blen("aあ")
    ed.move_left()
    assert ed.cursor_pos == _blen("a")


def test_move_right_at_end_stays():
    ed = Editor("hi")
    ed.cursor_pos = _blen("hi")
    ed.move_right()
    assert ed.cursor_pos == _blen("hi")


def test_move_left_collapses_selection_to_start():
    ed = Editor("hello")
    ed.selection = range(1, 4)
    ed.cursor_pos = 4
    ed.move_left()
    assert ed.cursor_pos == 1
    assert ed.selection is None


def test_move_right_collapses_selection_to_end():
    ed = Editor("hello")
    ed.selection = range(1, 4)
    ed.cursor_pos = 1
    ed.move_right()
    assert ed.cursor_pos == 4
    assert ed.selection is None


def test_select_right_then_left_shrinks_back():
    ed = Editor("abc")
    ed.select_right()
    assert ed.selection == range(0, 1)
    ed.select_left()
    assert ed.selection == range(0, 0)
    assert ed.cursor_pos == 0


def test_select_down_and_up_use_anchor():
    ed = Editor("abc\ndef")
    ed.cursor_pos = 1
    ed.select_down()
    assert ed.selection == range(1, ed.line_col_to_byte(1, 1))
    ed.select_up()
    assert ed.selection == range(1, 1)


def test_select_all_selects_whole_body():
    text = "one\ntwo"
    ed = Editor(text)
    ed.select_all()
    assert ed.selection == range(0, _blen(text))
    assert ed.cursor_pos == _blen(text)


def test_select_all_on_empty_text_does_nothing():
    ed = Editor("")
    ed.select_all()
    assert ed.selection is None


def test_selection_ignored_outside_content():
    ed = Editor("abc", frontmatter=Frontmatter(title=""))
    assert ed.edit_zone is EditZone.TITLE
    ed.select_right()
    ed.select_all()
    assert ed.selection is None


def test_copy_returns_selected_text():
    ed = Editor("hello world")
    ed.selection = range(6, 11)
    assert ed.copy() == "world"
    assert ed.text() == "hello world"


def test_copy_without_selection_returns_none():
    ed = Editor("hello")
    assert ed.copy() is None


def test_cut_removes_selection_and_returns_it():
    ed = Editor("hello world")
    ed.selection = range(5, 11)
    assert ed.cut() == " world"
    assert ed.text() == "hello"
    assert ed.cursor_pos == 5
    assert ed.is_dirty()


def test_cut_without_selection_deletes_previous_char():
    ed = Editor("abc")
    ed.cursor_pos = 3
    assert ed.cut() is None
    assert ed.text() == "ab"


def test_paste_replaces_selection():
    ed = Editor("hello world")
    ed.selection = range(6, 11)
    ed.paste("there")
    assert ed.text() == "hello there"
    assert ed.cursor_pos == _blen("hello there")
    assert ed.selection is None


def test_paste_then_backspace_round_trip():
    ed = Editor("ab")
    ed.cursor_pos = 1
    ed.paste("あ")
    assert ed.text() == "aあb"
    ed.backspace()
    assert ed.text() == "ab"
    assert ed.cursor_pos == 1


def test_paste_empty_text_changes_nothing():
    ed = Editor("ab")
    ed.paste("")
    assert ed.text() == "ab"
    assert not ed.is_dirty()


def test_backspace_deletes_selection():
    ed = Editor("abcdef")
    ed.selection = range(2, 4)
    ed.cursor_pos = 4
    ed.backspace()
    assert ed.text() == "abef"
    assert ed.cursor_pos == 2


def test_backspace_at_start_does_nothing():
    ed = Editor("abc")
    ed.backspace()
    assert ed.text() == "abc"
    assert not ed.is_dirty()


def test_insert_newline_splits_line():
    ed = Editor("abcd")
    ed.cursor_pos = 2
    ed.insert_newline()
    assert ed.text() == "ab\ncd"
    assert ed.line_count() == 2
    assert ed.byte_to_line_col(ed.cursor_pos) == (1, 0)


def test_move_down_then_up_keeps_column():
    ed = Editor("abc\ndef")
    ed.cursor_pos = 2
    ed.move_down()
    assert ed.byte_to_line_col(ed.cursor_pos) == (1, 2)
    ed.move_up()
    assert ed.cursor_pos == 2


def test_move_up_from_first_line_enters_tag_input():
    fm = Frontmatter(title="Note", tags={"work"})
    ed = Editor("body", frontmatter=fm)
    ed.move_up()
    assert ed.edit_zone is EditZone.TAG_INPUT
    assert ed.tag_input == "#work "
    assert ed.tag_input_cursor == 0


def test_tag_input_committed_on_move_down():
    fm = Frontmatter(title="Note")
    ed = Editor("body", frontmatter=fm)
    ed.edit_zone = EditZone.TAG_INPUT
    ed.tag_input = "#work\u3000#meeting\u3000garbage"
    ed.move_down()
    assert ed.edit_zone is EditZone.CONTENT
    assert ed.tags() == ["meeting", "work"]
    assert ed.tag_input == ""


def test_title_editing_and_enter_moves_to_body():
    ed = Editor("body", frontmatter=Frontmatter(title=""))
    ed.paste("Hi")
    assert ed.title() == "Hi"
    assert ed.title_cursor == len("Hi")
    ed.backspace()
    assert ed.title() == "H"
    ed.insert_newline()
    assert ed.edit_zone is EditZone.CONTENT
    assert ed.cursor_pos == 0


def test_move_up_from_tag_input_goes_to_title():
    ed = Editor("body", frontmatter=Frontmatter(title="Note"))
    ed.edit_zone = EditZone.TAG_INPUT
    ed.tag_input = "#x"
    ed.tag_input_cursor = len("#x")
    ed.move_up()
    assert ed.edit_zone is EditZone.TITLE
    assert ed.title_cursor == len("#x")
    assert ed.tags() == ["x"]