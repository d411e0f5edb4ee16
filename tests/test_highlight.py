import pytest

from notepad_editor.highlight import (
    BlockContext,
    BlockKind,
    detect_line_context,
    highlight_fence_line,
    highlight_line,
)
from notepad_editor.styles import FONT_STYLE_ITALIC, FONT_WEIGHT_BOLD, ResolvedColors, rgba

KEYWORD = rgba(0x112233FF)
COLORS = ResolvedColors(
    heading_marker=rgba(0x101010FF),
    heading_fg=rgba(0x202020FF),
    list_marker=rgba(0x303030FF),
    quote_fg=rgba(0x404040FF),
    text_dim=rgba(0x505050FF),
    bold_fg=rgba(0x606060FF),
    italic_fg=rgba(0x707070FF),
    code_bg=rgba(0x808080FF),
    math_bg=rgba(0x909090FF),
    code_syntax=(rgba(0xFFFFFFFF),) * 4 + (KEYWORD,) + (rgba(0xFFFFFFFF),) * 7,
)


def test_detect_heading():
    assert detect_line_context("# Hello", False) == BlockContext(BlockKind.HEADING, level=1)
    assert detect_line_context("### World", False) == BlockContext(BlockKind.HEADING, level=3)


@pytest.mark.parametrize("line", ["#tag", "####### seven"])
def test_detect_not_heading(line):
    assert detect_line_context(line, False).kind is BlockKind.NORMAL


def test_detect_list_item():
    assert detect_line_context("- item", False) == BlockContext(BlockKind.LIST_ITEM, marker_len=2)
    assert detect_line_context("1. first", False) == BlockContext(
        BlockKind.LIST_ITEM, marker_len=3
    )
    assert detect_line_context("12. x", False).marker_len == 4


def test_detect_blockquote():
    assert detect_line_context("> quote", False).kind is BlockKind.BLOCK_QUOTE


def test_detect_code_block():
    assert detect_line_context("code here", True).kind is BlockKind.CODE_BLOCK


def test_detect_normal():
    assert detect_line_context("just text", False).kind is BlockKind.NORMAL


def test_detect_tables():
    assert detect_line_context("|---|:-:|", False).kind is BlockKind.TABLE_SEPARATOR
    assert detect_line_context("| a | b |", False).kind is BlockKind.TABLE_ROW


def test_highlight_heading_line():
    hl = highlight_line("# Hello", BlockContext(BlockKind.HEADING, level=1), COLORS)
    assert len(hl.highlights) >= 2
    assert (hl.highlights[0].start, hl.highlights[0].end) == (0, 1)
    assert hl.highlights[1].range == range(2, 7)
    assert hl.highlights[1].style.font_weight == FONT_WEIGHT_BOLD
    assert hl.heading_level == 1
    assert hl.line_height == 34.0


def test_highlight_heading_uses_byte_offsets():
    hl = highlight_line("# あ", BlockContext(BlockKind.HEADING, level=1), COLORS)
    assert hl.highlights[1].range == range(2, 5)


def test_highlight_list_item():
    hl = highlight_line("- task item", BlockContext(BlockKind.LIST_ITEM, marker_len=2), COLORS)
    assert hl.highlights[0].start == 0
    assert hl.highlights[0].end == 2
    assert hl.highlights[0].style.color == COLORS.list_marker


def test_highlight_blockquote():
    hl = highlight_line("> quote", BlockContext(BlockKind.BLOCK_QUOTE), COLORS)
    assert [s.range for s in hl.highlights] == [range(0, 2), range(2, 7)]
    assert hl.highlights[1].style.font_style == FONT_STYLE_ITALIC


def test_highlight_inline_bold():
    hl = highlight_line("hello **world** end", BlockContext(BlockKind.NORMAL), COLORS)
    assert [s.range for s in hl.highlights] == [range(6, 8), range(8, 13), range(13, 15)]
    assert hl.highlights[1].style.color == COLORS.bold_fg


def test_highlight_inline_italic():
    hl = highlight_line("*a*", BlockContext(BlockKind.NORMAL), COLORS)
    assert [s.range for s in hl.highlights] == [range(0, 1), range(1, 2), range(2, 3)]
    assert hl.highlights[1].style.color == COLORS.italic_fg


def test_highlight_inline_code():
    hl = highlight_line("use `code` here", BlockContext(BlockKind.NORMAL), COLORS)
    assert [s.range for s in hl.highlights] == [range(4, 5), range(5, 9), range(9, 10)]
    assert all(s.style.background_color == COLORS.code_bg for s in hl.highlights)


def test_highlight_inline_link():
    line = "click [here](http://example.com)"
    hl = highlight_line(line, BlockContext(BlockKind.NORMAL), COLORS)
    underlined = [s for s in hl.highlights if s.style.underline is not None]
    assert len(underlined) == 1
    assert underlined[0].range == range(6, len(line))


def test_highlight_inline_image():
    hl = highlight_line("![alt](image.png)", BlockContext(BlockKind.NORMAL), COLORS)
    assert hl.image_urls == ["image.png"]
    assert hl.highlights[0].range == range(0, 17)


def test_highlight_strikethrough_and_math():
    hl = highlight_line("~~x~~ $y$", BlockContext(BlockKind.NORMAL), COLORS)
    assert hl.highlights[1].style.strikethrough is not None
    assert hl.highlights[1].range == range(2, 3)
    assert [s.range for s in hl.highlights[3:]] == [range(6, 7), range(7, 8), range(8, 9)]
    assert hl.highlights[4].style.background_color == COLORS.math_bg


def test_highlight_code_block_no_inline():
    hl = highlight_line("**bold**", BlockContext(BlockKind.CODE_BLOCK), COLORS)
    assert all(s.style.font_weight is None and s.style.font_style is None for s in hl.highlights)
    assert hl.highlights[0].range == range(0, 8)
    assert hl.line_bg == COLORS.code_bg


def test_highlight_table_row_pipes():
    hl = highlight_line("| **b** |", BlockContext(BlockKind.TABLE_ROW), COLORS)
    pipes = [s.start for s in hl.highlights if s.style.color == COLORS.quote_fg]
    assert pipes == [0, 8]
    assert any(s.style.color == COLORS.bold_fg and s.range == range(4, 5) for s in hl.highlights)


def test_highlight_table_separator():
    hl = highlight_line("|---|", BlockContext(BlockKind.TABLE_SEPARATOR), COLORS)
    assert len(hl.highlights) == 1
    assert hl.highlights[0].style.fade_out == 0.5


def test_fence_line_with_language():
    hl = highlight_fence_line("```rust", COLORS)
    assert [s.range for s in hl.highlights] == [range(0, 3), range(3, 7)]
    assert hl.highlights[0].style.fade_out == 0.3
    assert hl.highlights[1].style.color == KEYWORD
    assert hl.line_bg == COLORS.code_bg


def test_fence_line_trailing_space():
    hl = highlight_fence_line("``` py ", COLORS)
    assert [s.range for s in hl.highlights] == [range(0, 3), range(4, 6), range(6, 7)]


def test_fence_line_without_language():
    hl = highlight_fence_line("```", COLORS)
    assert [s.range for s in hl.highlights] == [range(0, 3)]