"""Styled byte ranges and the operations that reshape them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from .styles import Color, HighlightStyle


@dataclass(frozen=True)
class Span:
    """A style applied to the byte range ``start`` up to ``end`` of a line."""

    start: int
    end: int
    style: HighlightStyle

    @property
    def range(self) -> range:
        """The covered byte offsets as a range."""
        return range(self.start, self.end)


def adjust_highlight_offsets(
    highlights: Iterable[Span], offset_start: int, offset_end: int
) -> list[Span]:
    """Clip spans to ``[offset_start, offset_end)`` and shift them to start at zero.

    Spans entirely outside the window are dropped.
    """
    return [
        Span(
            max(span.start, offset_start) - offset_start,
            min(span.end, offset_end) - offset_start,
            span.style,
        )
        for span in highlights
        if span.start < offset_end and span.end > offset_start
    ]


def overlay_selection(highlights: Iterable[Span], sel: range, sel_bg: Color) -> list[Span]:
    """Lay a selection background over the spans; the selection always wins.

    Spans crossing a selection edge are split, overlapping parts get the
    selection background, and uncovered parts of the selection are filled.
    """
    spans = list(highlights)
    sel_start, sel_end = sel.start, sel.stop
    if sel_start >= sel_end:
        return spans

    selection_only = HighlightStyle(background_color=sel_bg)
    result: list[Span] = []
    pos = sel_start

    for span in spans:
        if span.end <= sel_start or span.start >= sel_end:
            result.append(span)
            continue

        gap_end = min(span.start, sel_end)
        if pos < span.start and pos < gap_end:
            result.append(Span(pos, gap_end, selection_only))

        if span.start < sel_start:
            result.append(Span(span.start, sel_start, span.style))

        overlap_start = max(span.start, sel_start)
        overlap_end = min(span.end, sel_end)
        result.append(
            Span(overlap_start, overlap_end, replace(span.style, background_color=sel_bg))
        )
        pos = overlap_end

        if span.end > sel_end:
            result.append(Span(sel_end, span.end, span.style))

    if pos < sel_end:
        result.append(Span(pos, sel_end, selection_only))

    result.sort(key=lambda span: span.start)
    return result