"""Colours and text styles used when highlighting markdown lines."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass

FONT_WEIGHT_BOLD = 700
FONT_STYLE_ITALIC = "italic"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Color:
    """A colour in hue, saturation, lightness and alpha, each in [0, 1]."""

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build a colour from red, green and blue components in [0, 1]."""
        hue, lightness, saturation = colorsys.rgb_to_hls(red, green, blue)
        return cls(hue, saturation, lightness, alpha)

    def to_rgba(self) -> int:
        """Return the colour packed as 0xRRGGBBAA."""
        red, green, blue = colorsys.hls_to_rgb(self.hue, self.lightness, self.saturation)
        packed = 0
        for component in (red, green, blue, self.alpha):
            packed = (packed << 8) | max(0, min(255, round(component * 255)))
        return packed


def rgba(value: int) -> Color:
    """Build a colour from a 32-bit 0xRRGGBBAA value."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"colour value out of range: {value:#x}")
    red = ((value >> 24) & 0xFF) / 255
    green = ((value >> 16) & 0xFF) / 255
    blue = ((value >> 8) & 0xFF) / 255
    alpha = (value & 0xFF) / 255
    return Color.from_rgb(red, green, blue, alpha)


_WHITE = rgba(0xFFFFFFFF)
_GRAY = rgba(0xFF333333)


def _try_parse_hex(hex_str: str) -> Color | None:
    digits = hex_str.strip().removeprefix("#")
    if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
        return None
    if len(digits) == 6:
        digits += "ff"
    return rgba(int(digits, 16))


def parse_hex(hex_str: str) -> Color:
    """Parse "#RRGGBB" (or "#RRGGBBAA"); anything unparsable gives white."""
    parsed = _try_parse_hex(hex_str)
    return parsed if parsed is not None else _WHITE


@dataclass(frozen=True)
class LineStyle:
    """An underline or strike-through line."""

    thickness: float = 1.0
    color: Color | None = None
    wavy: bool = False


@dataclass(frozen=True)
class HighlightStyle:
    """Styling applied to a byte range of a line; unset fields inherit."""

    color: Color | None = None
    background_color: Color | None = None
    font_weight: int | None = None
    font_style: str | None = None
    underline: LineStyle | None = None
    strikethrough: LineStyle | None = None
    fade_out: float | None = None


@dataclass(frozen=True)
class ResolvedColors:
    """All colours the highlighter needs, resolved once per theme change.

    ``code_syntax`` holds twelve colours in this order: attribute, comment,
    constant, function, keyword, number, operator, property, punctuation,
    string, tag, type.
    """

    text: Color = _WHITE
    bg: Color = _GRAY
    border: Color = _GRAY
    selection_bg: Color = _GRAY
    text_muted: Color = _WHITE
    heading_marker: Color = _WHITE
    heading_fg: Color = _WHITE
    list_marker: Color = _WHITE
    quote_fg: Color = _WHITE
    text_dim: Color = _WHITE
    bold_fg: Color = _WHITE
    bold_marker: Color = _WHITE
    italic_fg: Color = _WHITE
    italic_marker: Color = _WHITE
    strikethrough_fg: Color = _WHITE
    image_marker: Color = _WHITE
    link_fg: Color = _WHITE
    math_fg: Color = _WHITE
    math_marker: Color = _WHITE
    math_bg: Color = _GRAY
    code_bg: Color = _GRAY
    code_fg: Color = _WHITE
    code_marker: Color = _WHITE
    tag_fg: Color = _WHITE
    code_syntax: tuple[Color, ...] = (_WHITE,) * 12

    def syntax_color(self, index: int) -> Color | None:
        """Return the syntax colour at ``index``, or None if there is none."""
        if 0 <= index < len(self.code_syntax):
            return self.code_syntax[index]
        return None