"""Tests for building Qt text-drawing attributes."""

import pytest
from PySide6.QtCore import Qt

from mememaker.models.text_style import RGBColor, TextAlignment, TextStyle
from mememaker.services.render_attributes import build_render_attributes, to_qcolor


@pytest.fixture(autouse=True)
def _app(qapp):
    yield


def test_font_and_line_height():
    attrs = build_render_attributes(TextStyle(font_name="Helvetica", font_size=30))
    assert attrs.font.family() == "Helvetica"
    assert attrs.font.pointSizeF() == pytest.approx(30)
    assert attrs.paragraph.maximum_line_height == 30


def test_stroke_width_is_negated():
    attrs = build_render_attributes(TextStyle(stroke_width=3.5))
    assert attrs.stroke_width == -3.5
    assert attrs.outline_pen_width == 3.5


def test_foreground_uses_opacity():
    style = TextStyle(text_color=RGBColor(1.0, 0.0, 0.0), opacity=0.5)
    attrs = build_render_attributes(style)
    color = attrs.foreground_color
    assert color.redF() == pytest.approx(1.0, abs=1e-3)
    assert color.greenF() == pytest.approx(0.0, abs=1e-3)
    assert color.alphaF() == pytest.approx(0.5, abs=1e-3)


def test_stroke_color_is_outline_color():
    style = TextStyle(outline_color=RGBColor(0.0, 0.0, 1.0), opacity=0.2)
    attrs = build_render_attributes(style)
    assert attrs.stroke_color == to_qcolor(RGBColor(0.0, 0.0, 1.0))
    assert attrs.stroke_color.alphaF() == pytest.approx(1.0)


@pytest.mark.parametrize("alignment, flag", [
    (TextAlignment.LEFT, Qt.AlignmentFlag.AlignLeft),
    (TextAlignment.CENTER, Qt.AlignmentFlag.AlignHCenter),
    (TextAlignment.RIGHT, Qt.AlignmentFlag.AlignRight),
    (TextAlignment.JUSTIFIED, Qt.AlignmentFlag.AlignJustify),
])
def test_paragraph_alignment(alignment, flag):
    attrs = build_render_attributes(TextStyle(alignment=alignment))
    assert attrs.paragraph.alignment == flag


def test_no_shadow_when_disabled():
    attrs = build_render_attributes(TextStyle(shadow_enabled=False, shadow_3d=True))
    assert attrs.shadow is None


def test_flat_shadow():
    style = TextStyle(outline_color=RGBColor(0.0, 1.0, 0.0))
    shadow = build_render_attributes(style).shadow
    assert shadow is not None
    assert shadow.offset.x() == pytest.approx(0.1)
    assert shadow.offset.y() == pytest.approx(0.1)
    assert shadow.blur_radius == 0.8
    assert shadow.color == to_qcolor(RGBColor(0.0, 1.0, 0.0))


def test_3d_shadow():
    shadow = build_render_attributes(TextStyle(shadow_3d=True)).shadow
    assert shadow.offset.x() == pytest.approx(0.0)
    assert shadow.offset.y() == pytest.approx(-1.0)
    assert shadow.blur_radius == 1.5
    assert shadow.color == to_qcolor(RGBColor.black())
