"""Per-line markdown highlighting with byte-offset spans."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .spans import Span
from .styles import (
    FONT_STYLE_ITALIC,
    FONT_WEIGHT_BOLD,
    Color,
    HighlightStyle,
    LineStyle,
    ResolvedColors,
)

DEFAULT_LINE_HEIGHT = 22.0

_KEYWORD_SYNTAX_INDEX = 4
_STAR, _UNDERSCORE, _TILDE = ord("*"), ord("_"), ord("~")
_BACKTICK, _BANG, _BRACKET, _DOLLAR = ord("`"), ord("!"), ord("["), ord("$")
_PIPE, _SPACE, _GT = ord("|"), ord(" "), ord(">")
_TABLE_SEPARATOR_CHARS = frozenset("|-: \t")


class BlockKind(enum.Enum):
    """The kind of markdown block a line belongs to."""

    NORMAL = "normal"
    HEADING = "heading"
    LIST_ITEM = "list_item"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    TABLE_SEPARATOR = "table_separator"
    TABLE_ROW = "table_row"


@dataclass(frozen=True)
class BlockContext:
    """A line's block kind with its details: heading level or list marker length."""

    kind: BlockKind
    level: int = 0
    marker_len: int = 0
    language: str | None = None


@dataclass
class HighlightedLine:
    """The styling computed for one line."""

    highlights: list[Span] = field(default_factory=list)
    image_urls: list[str] = field(default_factory=list)
    line_height: float = DEFAULT_LINE_HEIGHT
    heading_level: int | None = None
    line_bg: Color | None = None


def detect_line_context(line: str, in_code_block: bool) -> BlockContext:
    """Work out the block context of a single line."""
    if in_code_block:
        return BlockContext(BlockKind.CODE_BLOCK)

    if line.startswith("#"):
        rest = line[1:]
        level = 1
        while rest.startswith("#") and level < 6:
            level += 1
            rest = rest[1:]
        if rest.startswith(" ") or not rest:
            return BlockContext(BlockKind.HEADING, level=level)

    if line.startswith("|"):
        is_separator = set(line) <= _TABLE_SEPARATOR_CHARS
        if is_separator and "-" in line:
            return BlockContext(BlockKind.TABLE_SEPARATOR)
        return BlockContext(BlockKind.TABLE_ROW)

    if line.startswith(("- ", "* ", "+ ")):
        return BlockContext(BlockKind.LIST_ITEM, marker_len=2)

    dot_pos = line.find(". ")
    if dot_pos > 0 and all(c in "0123456789" for c in line[:dot_pos]):
        return BlockContext(BlockKind.LIST_ITEM, marker_len=dot_pos + 2)

    if line.startswith(">"):
        return BlockContext(BlockKind.BLOCK_QUOTE)

    return BlockContext(BlockKind.NORMAL)


def _heading_font_size(level: int) -> float:
    return {1: 34.0, 2: 30.0, 3: 26.0, 4: 24.0}.get(level, 22.0)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def highlight_fence_line(line: str, colors: ResolvedColors) -> HighlightedLine:
    """Highlight a fenced code block boundary such as ```` ```lang ````."""
    line_len = _byte_len(line)
    backtick_count = len(line) - len(line.lstrip("`"))
    rest = line[backtick_count:]
    rest_trimmed = rest.strip()
    highlights: list[Span] = []

    if backtick_count > 0:
        highlights.append(
            Span(
                0,
                backtick_count,
                HighlightStyle(
                    color=colors.code_fg, background_color=colors.code_bg, fade_out=0.3
                ),
            )
        )

    code_bg_only = HighlightStyle(background_color=colors.code_bg)
    if rest_trimmed:
        label_start = backtick_count + _byte_len(rest) - _byte_len(rest.lstrip())
        label_end = label_start + _byte_len(rest_trimmed)
        label_color = colors.syntax_color(_KEYWORD_SYNTAX_INDEX) or colors.text
        highlights.append(
            Span(
                label_start,
                label_end,
                HighlightStyle(color=label_color, background_color=colors.code_bg),
            )
        )
        if label_end < line_len:
            highlights.append(Span(label_end, line_len, code_bg_only))
    elif backtick_count < line_len:
        highlights.append(Span(backtick_count, line_len, code_bg_only))

    return HighlightedLine(highlights=highlights, line_bg=colors.code_bg)


def highlight_line(line: str, context: BlockContext, colors: ResolvedColors) -> HighlightedLine:
    """Highlight one line in its block context, returning byte-ranged spans."""
    data = line.encode("utf-8")
    n = len(data)
    highlights: list[Span] = []
    image_urls: list[str] = []
    line_height = DEFAULT_LINE_HEIGHT
    kind = context.kind

    if kind is BlockKind.HEADING:
        line_height = _heading_font_size(context.level)
        hash_end = context.level
        if n >= hash_end and data[:hash_end] == b"#" * hash_end:
            highlights.append(Span(0, hash_end, HighlightStyle(color=colors.heading_marker)))
            rest_start = hash_end + 1 if n > hash_end and data[hash_end] == _SPACE else hash_end
            if rest_start < n:
                highlights.append(
                    Span(
                        rest_start,
                        n,
                        HighlightStyle(color=colors.heading_fg, font_weight=FONT_WEIGHT_BOLD),
                    )
                )
                inline, image_urls = _scan_inline(data[rest_start:], rest_start, colors)
                highlights.extend(inline)
            return HighlightedLine(
                highlights=highlights,
                image_urls=image_urls,
                line_height=line_height,
                heading_level=context.level,
            )
    elif kind is BlockKind.LIST_ITEM:
        marker_end = min(context.marker_len, n)
        if marker_end > 0:
            highlights.append(Span(0, marker_end, HighlightStyle(color=colors.list_marker)))
    elif kind is BlockKind.BLOCK_QUOTE:
        if data.startswith(b">"):
            end = 2 if n > 1 and data[1] == _SPACE else 1
            highlights.append(Span(0, end, HighlightStyle(color=colors.quote_fg)))
            if end < n:
                highlights.append(
                    Span(
                        end,
                        n,
                        HighlightStyle(color=colors.quote_fg, font_style=FONT_STYLE_ITALIC),
                    )
                )
    elif kind is BlockKind.CODE_BLOCK:
        return HighlightedLine(
            highlights=[Span(0, max(n, 1), HighlightStyle(color=colors.code_fg))],
            line_bg=colors.code_bg,
        )
    elif kind is BlockKind.TABLE_SEPARATOR:
        return HighlightedLine(highlights=[Span(0, max(n, 1), HighlightStyle(fade_out=0.5))])
    elif kind is BlockKind.TABLE_ROW:
        highlights.extend(_table_row_spans(data, colors))
        inline, image_urls = _scan_inline(data, 0, colors)
        highlights.extend(inline)
        return HighlightedLine(highlights=highlights, image_urls=image_urls)

    if kind is BlockKind.LIST_ITEM:
        skip = min(context.marker_len, n)
    elif kind is BlockKind.BLOCK_QUOTE:
        skip = 2 if data.startswith(b"> ") else 1 if data.startswith(b">") else 0
    else:
        skip = 0

    if skip < n:
        inline, image_urls = _scan_inline(data[skip:], skip, colors)
        highlights.extend(inline)

    return HighlightedLine(highlights=highlights, image_urls=image_urls, line_height=line_height)


def _table_row_spans(data: bytes, colors: ResolvedColors) -> list[Span]:
    pipe_style = HighlightStyle(color=colors.quote_fg)
    cell_style = HighlightStyle(color=colors.text_dim)
    spans: list[Span] = []
    n = len(data)
    i = 0
    while i < n:
        if data[i] == _PIPE:
            spans.append(Span(i, i + 1, pipe_style))
            i += 1
            continue
        start = i
        next_pipe = data.find(b"|", i)
        i = n if next_pipe < 0 else next_pipe
        cell_bytes = data[start:i]
        cell = cell_bytes.decode("utf-8")
        if cell.strip():
            trim_start = start + len(cell_bytes) - _byte_len(cell.lstrip())
            trim_end = i - _byte_len(cell.rstrip())
            spans.append(Span(trim_start, trim_end, cell_style))
    return spans


def _marker_style(color: Color) -> HighlightStyle:
    return HighlightStyle(color=color, fade_out=0.4)


def _find_closing_double(data: bytes, start: int, marker: int) -> int | None:
    pos = data.find(bytes((marker, marker)), start)
    return None if pos < 0 else pos


def _find_closing_single(data: bytes, start: int, marker: int) -> int | None:
    pos = data.find(bytes((marker,)), start)
    return None if pos < 0 else pos


def _count_backticks(data: bytes, start: int) -> int:
    rest = data[start:]
    return len(rest) - len(rest.lstrip(b"`"))


def _find_closing_backticks(data: bytes, start: int, count: int) -> int | None:
    pos = data.find(b"`" * count, start)
    return None if pos < 0 else pos


def _bracket_target(data: bytes, start: int) -> tuple[int, int] | None:
    """Find ``](...)`` after ``start``; return the target's start and the closing paren."""
    close = data.find(b"]", start)
    if close < 0:
        return None
    paren = close + 1
    if paren >= len(data) or data[paren] != ord("("):
        return None
    end = data.find(b")", paren + 1)
    if end < 0:
        return None
    return paren + 1, end


def _scan_inline(
    data: bytes, offset: int, colors: ResolvedColors
) -> tuple[list[Span], list[str]]:
    spans: list[Span] = []
    image_urls: list[str] = []
    n = len(data)
    i = 0

    def add_delimited(open_len: int, end: int, close_len: int, marker, body) -> None:
        spans.append(Span(offset + i, offset + i + open_len, marker))
        spans.append(Span(offset + i + open_len, offset + end, body))
        spans.append(Span(offset + end, offset + end + close_len, marker))

    while i < n:
        byte = data[i]

        if byte in (_STAR, _UNDERSCORE) and i + 1 < n and data[i + 1] == byte:
            end = _find_closing_double(data, i + 2, byte)
            if end is not None:
                add_delimited(
                    2,
                    end,
                    2,
                    _marker_style(colors.bold_marker),
                    HighlightStyle(color=colors.bold_fg),
                )
                i = end + 2
                continue

        if byte == _TILDE and i + 1 < n and data[i + 1] == _TILDE:
            end = _find_closing_double(data, i + 2, _TILDE)
            if end is not None:
                strike = LineStyle(thickness=1.0, color=colors.strikethrough_fg)
                add_delimited(
                    2,
                    end,
                    2,
                    _marker_style(colors.strikethrough_fg),
                    HighlightStyle(color=colors.strikethrough_fg, strikethrough=strike),
                )
                i = end + 2
                continue

        if byte in (_STAR, _UNDERSCORE):
            if i + 1 < n and data[i + 1] == byte:
                i += 1
                continue
            end = _find_closing_single(data, i + 1, byte)
            if end is not None:
                add_delimited(
                    1,
                    end,
                    1,
                    _marker_style(colors.italic_marker),
                    HighlightStyle(color=colors.italic_fg),
                )
                i = end + 1
                continue

        if byte == _BACKTICK:
            count = _count_backticks(data, i)
            end = _find_closing_backticks(data, i + count, count)
            if end is not None:
                add_delimited(
                    count,
                    end,
                    count,
                    HighlightStyle(
                        color=colors.code_marker,
                        background_color=colors.code_bg,
                        fade_out=0.4,
                    ),
                    HighlightStyle(color=colors.code_fg, background_color=colors.code_bg),
                )
                i = end + count
                continue

        if byte == _BANG and i + 1 < n and data[i + 1] == _BRACKET:
            target = _bracket_target(data, i + 2)
            if target is not None:
                url_start, paren = target
                end = paren + 1
                spans.append(
                    Span(offset + i, offset + end, HighlightStyle(color=colors.image_marker))
                )
                image_urls.append(data[url_start:paren].decode("utf-8", errors="replace"))
                i = end
                continue

        if byte == _BRACKET:
            target = _bracket_target(data, i + 1)
            if target is not None:
                end = target[1] + 1
                underline = LineStyle(thickness=1.0, color=colors.link_fg, wavy=False)
                spans.append(
                    Span(
                        offset + i,
                        offset + end,
                        HighlightStyle(color=colors.link_fg, underline=underline),
                    )
                )
                i = end
                continue

        if byte == _DOLLAR:
            end = _find_closing_single(data, i + 1, _DOLLAR)
            if end is not None:
                add_delimited(
                    1,
                    end,
                    1,
                    HighlightStyle(
                        color=colors.math_marker,
                        background_color=colors.math_bg,
                        fade_out=0.4,
                    ),
                    HighlightStyle(color=colors.math_fg, background_color=colors.math_bg),
                )
                i = end + 1
                continue

        i += 1

    return spans, image_urls