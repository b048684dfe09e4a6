"""Qt text-drawing attributes derived from a caption style."""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QFont

from mememaker.models.text_style import RGBColor, TextAlignment, TextStyle
from mememaker.utils.config import (
    SHADOW_3D_BLUR,
    SHADOW_3D_OFFSET,
    SHADOW_FLAT_BLUR,
    SHADOW_FLAT_OFFSET,
)

_QT_ALIGNMENT = {
    TextAlignment.LEFT: Qt.AlignmentFlag.AlignLeft,
    TextAlignment.CENTER: Qt.AlignmentFlag.AlignHCenter,
    TextAlignment.RIGHT: Qt.AlignmentFlag.AlignRight,
    TextAlignment.JUSTIFIED: Qt.AlignmentFlag.AlignJustify,
}


def to_qcolor(color: RGBColor, alpha: float = 1.0) -> QColor:
    """Convert a stored colour to a QColor with the given alpha."""
    return QColor.fromRgbF(color.red, color.green, color.blue, alpha)


@dataclass(slots=True)
class ParagraphStyle:
    alignment: Qt.AlignmentFlag
    maximum_line_height: float


@dataclass(slots=True)
class ShadowStyle:
    color: QColor
    offset: QPointF
    blur_radius: float


@dataclass(slots=True)
class RenderAttributes:
    """Everything the caption painter needs to draw one text block.

    ``stroke_width`` is negative when the glyphs are both stroked and filled,
    which is always the case for captions.
    """

    font: QFont
    foreground_color: QColor
    paragraph: ParagraphStyle
    stroke_width: float
    stroke_color: QColor
    shadow: ShadowStyle | None = None

    @property
    def outline_pen_width(self) -> float:
        """Absolute stroke width for a QPen."""
        return abs(self.stroke_width)


def build_render_attributes(style: TextStyle) -> RenderAttributes:
    """Build the drawing attributes for *style* at its current opacity."""
    font = QFont(style.font_name)
    font.setPointSizeF(style.font_size)

    shadow = None
    if style.shadow_enabled:
        if style.shadow_3d:
            offset, blur = SHADOW_3D_OFFSET, SHADOW_3D_BLUR
        else:
            offset, blur = SHADOW_FLAT_OFFSET, SHADOW_FLAT_BLUR
        shadow = ShadowStyle(
            color=to_qcolor(style.outline_color),
            offset=QPointF(*offset),
            blur_radius=blur,
        )

    return RenderAttributes(
        font=font,
        foreground_color=to_qcolor(style.text_color, style.opacity),
        paragraph=ParagraphStyle(
            alignment=_QT_ALIGNMENT[style.alignment],
            maximum_line_height=style.font_size,
        ),
        stroke_width=-style.stroke_width,
        stroke_color=to_qcolor(style.outline_color),
        shadow=shadow,
    )
