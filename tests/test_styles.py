import pytest

from notepad_editor.styles import (
    Color,
    HighlightStyle,
    LineStyle,
    ResolvedColors,
    parse_hex,
    rgba,
)


def test_parse_hex_color_has_alpha():
    c = parse_hex("#89b4fa")
    assert c.alpha > 0.0


def test_parse_hex_matches_rgba_with_opaque_alpha():
    assert parse_hex("#89b4fa").to_rgba() == rgba(0x89B4FAFF).to_rgba()


def test_parse_hex_invalid_gives_white():
    assert parse_hex("not a colour") == rgba(0xFFFFFFFF)
    assert parse_hex("#12") == rgba(0xFFFFFFFF)
    assert parse_hex("#gggggg") == rgba(0xFFFFFFFF)


@pytest.mark.parametrize("value", [0xFFFFFFFF, 0xFF333333, 0x89B4FAFF, 0x00000000, 0x12345678])
def test_rgba_round_trip(value):
    assert rgba(value).to_rgba() == value


@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_rgba_out_of_range(value):
    with pytest.raises(ValueError):
        rgba(value)


def test_color_components_in_unit_range():
    c = rgba(0x89B4FAFF)
    for component in (c.hue, c.saturation, c.lightness, c.alpha):
        assert 0.0 <= component <= 1.0


def test_from_rgb_round_trip():
    c = Color.from_rgb(1.0, 1.0, 1.0, 1.0)
    assert c.to_rgba() == 0xFFFFFFFF


def test_highlight_style_defaults_are_unset():
    style = HighlightStyle()
    assert style == HighlightStyle(
        color=None,
        background_color=None,
        font_weight=None,
        font_style=None,
        underline=None,
        strikethrough=None,
        fade_out=None,
    )


def test_line_style_defaults():
    line = LineStyle()
    assert line.thickness == 1.0
    assert line.color is None
    assert line.wavy is False


def test_resolved_colors_defaults():
    colors = ResolvedColors()
    assert colors.text == rgba(0xFFFFFFFF)
    assert colors.bg == rgba(0xFF333333)
    assert colors.code_bg == rgba(0xFF333333)
    assert len(colors.code_syntax) == 12


def test_syntax_color_lookup():
    colors = ResolvedColors()
    assert colors.syntax_color(0) == rgba(0xFFFFFFFF)
    assert colors.syntax_color(11) == rgba(0xFFFFFFFF)
    assert colors.syntax_color(12) is None
    assert colors.syntax_color(-1) is None


def test_syntax_color_custom_palette():
    palette = tuple(rgba(0x10101000 | i) for i in range(12))
    colors = ResolvedColors(code_syntax=palette)
    assert colors.syntax_color(4) == palette[4]