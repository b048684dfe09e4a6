"""Caption text style model (pure Python, no Qt dependency)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from enum import Enum

from mememaker.utils.config import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_OPACITY,
    DEFAULT_OUTLINE_RGB,
    DEFAULT_SHADOW_3D,
    DEFAULT_SHADOW_ENABLED,
    DEFAULT_STROKE_WIDTH,
    DEFAULT_TEXT_RGB,
    DEFAULT_UPPERCASE,
)


class StyleParseError(ValueError):
    """A stored style document is malformed or has a missing/wrong-typed key."""

    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class TextAlignment(Enum):
    """Horizontal paragraph alignment of a caption."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"


# User-facing scale, the order of the alignment picker.
USER_ALIGNMENT_CODES: dict[int, TextAlignment] = {
    0: TextAlignment.LEFT,
    1: TextAlignment.CENTER,
    2: TextAlignment.RIGHT,
    3: TextAlignment.JUSTIFIED,
}

# Persisted document scale. Differs from the user scale; do not mix them.
STORAGE_ALIGNMENT_CODES: dict[int, TextAlignment] = {
    0: TextAlignment.CENTER,
    1: TextAlignment.JUSTIFIED,
    2: TextAlignment.LEFT,
    3: TextAlignment.RIGHT,
}

_USER_CODE_BY_ALIGNMENT = {a: c for c, a in USER_ALIGNMENT_CODES.items()}
_STORAGE_CODE_BY_ALIGNMENT = {a: c for c, a in STORAGE_ALIGNMENT_CODES.items()}


def alignment_from_user_code(code: int) -> TextAlignment:
    """Map a user-scale code to an alignment. Unknown codes give CENTER."""
    return USER_ALIGNMENT_CODES.get(code, TextAlignment.CENTER)


def alignment_to_user_code(alignment: TextAlignment) -> int:
    return _USER_CODE_BY_ALIGNMENT[alignment]


def alignment_from_storage_code(code: int) -> TextAlignment:
    """Map a storage-scale code to an alignment. Unknown codes give CENTER."""
    return STORAGE_ALIGNMENT_CODES.get(code, TextAlignment.CENTER)


def alignment_to_storage_code(alignment: TextAlignment) -> int:
    return _STORAGE_CODE_BY_ALIGNMENT[alignment]


# ------------------------------------------------------------------ Geometry

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _format_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _parse_numbers(text: str, count: int) -> list[float]:
    numbers = [_finite(n) for n in _NUMBER_RE.findall(text)]
    if len(numbers) != count:
        raise ValueError(f"expected {count} numbers in {text!r}, found {len(numbers)}")
    return numbers


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point, stored as ``"{x, y}"``."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        for name in ("x", "y"):
            object.__setattr__(self, name, _finite(getattr(self, name)))

    def to_string(self) -> str:
        return f"{{{_format_number(self.x)}, {_format_number(self.y)}}}"

    @classmethod
    def from_string(cls, text: str) -> Point:
        x, y = _parse_numbers(text, 2)
        return cls(x, y)


@dataclass(frozen=True, slots=True)
class Rect:
    """A bounding rectangle, stored as ``"{{x, y}, {w, h}}"``."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, _finite(getattr(self, name)))

    def to_string(self) -> str:
        return "{{{}, {}}}, {{{}, {}}}}}".format(
            _format_number(self.x),
            _format_number(self.y),
            _format_number(self.width),
            _format_number(self.height),
        )

    @classmethod
    def from_string(cls, text: str) -> Rect:
        x, y, w, h = _parse_numbers(text, 4)
        return cls(x, y, w, h)


# ------------------------------------------------------------------ Colour

def _clamp_unit(value: float) -> float:
    return min(max(_finite(value), 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class RGBColor:
    """An opaque colour with normalized 0..1 components."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            object.__setattr__(self, name, _clamp_unit(getattr(self, name)))

    @classmethod
    def white(cls) -> RGBColor:
        return cls(*DEFAULT_TEXT_RGB)

    @classmethod
    def black(cls) -> RGBColor:
        return cls(*DEFAULT_OUTLINE_RGB)

    def to_hex(self) -> str:
        """Return ``#RRGGBB`` for colour pickers."""
        return "#{:02X}{:02X}{:02X}".format(
            round(self.red * 255), round(self.green * 255), round(self.blue * 255)
        )

    @classmethod
    def from_hex(cls, value: str) -> RGBColor:
        value = value.lstrip("#")
        if len(value) != 6:
            raise ValueError(f"Expected #RRGGBB, got {value!r}")
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
        return cls(r / 255, g / 255, b / 255)

    def to_dict(self) -> dict:
        return {"red": self.red, "green": self.green, "blue": self.blue}

    @classmethod
    def from_dict(cls, data: object, key: str) -> RGBColor:
        if not isinstance(data, dict):
            raise StyleParseError(key, f"expected an object, got {type(data).__name__}")
        return cls(
            red=_require(data, "red", float, parent=key),
            green=_require(data, "green", float, parent=key),
            blue=_require(data, "blue", float, parent=key),
        )


# ------------------------------------------------------------------ Decoding helpers

def _require(data: dict, key: str, kind: type, parent: str = ""):
    """Return ``data[key]`` if present and of JSON type *kind*."""
    label = f"{parent}.{key}" if parent else key
    if key not in data:
        raise StyleParseError(label, "missing")
    value = data[key]
    # bool is an int subclass; JSON true/false must not pass as numbers
    if kind is bool:
        ok = isinstance(value, bool)
    elif kind in (float, int):
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise StyleParseError(label, f"expected {kind.__name__}, got {type(value).__name__}")

    if kind is float:
        return _decode(label, _finite, value)
    if kind is int and isinstance(value, float):
        # Whole-number floats such as 1.0 are accepted as integer codes
        if not (math.isfinite(value) and value.is_integer()):
            raise StyleParseError(label, f"expected int, got {value!r}")
        return int(value)
    return value


def _decode(key: str, parse, raw):
    try:
        return parse(raw)
    except (ValueError, OverflowError) as e:
        raise StyleParseError(key, str(e)) from e


def _finite(value) -> float:
    """Convert to float, rejecting NaN, infinities and out-of-range integers."""
    try:
        value = float(value)
    except OverflowError as e:
        raise ValueError(f"number out of range: {e}") from e
    if not math.isfinite(value):
        raise ValueError(f"must be a finite number, got {value}")
    return value


def _positive(value) -> float:
    value = _finite(value)
    if value <= 0:
        raise ValueError(f"must be positive, got {value}")
    return value


# ------------------------------------------------------------------ TextStyle

@dataclass
class TextStyle:
    """Visual style of one meme caption (top or bottom text).

    ``font_size`` must stay positive and ``opacity`` is clamped into [0, 1]
    on every assignment. Colours carry no alpha; opacity is applied when the
    render attributes are built.
    """

    text: str = ""
    uppercase: bool = DEFAULT_UPPERCASE
    rect: Rect = field(default_factory=Rect)
    offset: Point = field(default_factory=Point)
    font_size: float = DEFAULT_FONT_SIZE
    font_name: str = DEFAULT_FONT_NAME
    text_color: RGBColor = field(default_factory=RGBColor.white)
    outline_color: RGBColor = field(default_factory=RGBColor.black)
    alignment: TextAlignment = TextAlignment.CENTER
    stroke_width: float = DEFAULT_STROKE_WIDTH
    opacity: float = DEFAULT_OPACITY
    shadow_enabled: bool = DEFAULT_SHADOW_ENABLED
    shadow_3d: bool = DEFAULT_SHADOW_3D

    def __setattr__(self, name, value):
        if name == "font_size":
            value = _positive(value)
        elif name == "opacity":
            value = _clamp_unit(_finite(value))
        elif name == "stroke_width":
            value = _finite(value)
        elif name == "alignment" and not isinstance(value, TextAlignment):
            value = TextAlignment(value)
        object.__setattr__(self, name, value)

    @property
    def abs_alignment(self) -> int:
        """Alignment on the user-facing scale (0 left, 1 center, 2 right, 3 justified)."""
        return alignment_to_user_code(self.alignment)

    @abs_alignment.setter
    def abs_alignment(self, code: int) -> None:
        self.alignment = alignment_from_user_code(code)

    @property
    def display_text(self) -> str:
        """Text as drawn on the image."""
        return self.text.upper() if self.uppercase else self.text

    def copy(self) -> TextStyle:
        """Return an independent copy."""
        return replace(self)

    def reset_offset(self) -> None:
        """Move the caption back to its anchor and restore the default size."""
        self.offset = Point()
        self.font_size = DEFAULT_FONT_SIZE

    def set_default(self) -> None:
        """Restore default styling. Text, rect and shadow flags are kept."""
        self.uppercase = DEFAULT_UPPERCASE
        self.offset = Point()
        self.font_size = DEFAULT_FONT_SIZE
        self.font_name = DEFAULT_FONT_NAME
        self.text_color = RGBColor.white()
        self.outline_color = RGBColor.black()
        self.alignment = TextAlignment.CENTER
        self.stroke_width = DEFAULT_STROKE_WIDTH
        self.opacity = DEFAULT_OPACITY

    # -------------------------------------------------------------- Document codec

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "uppercase": self.uppercase,
            "rect": self.rect.to_string(),
            "offset": self.offset.to_string(),
            "fontSize": self.font_size,
            "fontName": self.font_name,
            "textColorRGB": self.text_color.to_dict(),
            "outColorRGB": self.outline_color.to_dict(),
            "alignment": alignment_to_storage_code(self.alignment),
            "strokeWidth": self.stroke_width,
            "opacity": self.opacity,
            "shadowEnabled": self.shadow_enabled,
            "shadow3D": self.shadow_3d,
        }

    @classmethod
    def from_dict(cls, data: object) -> TextStyle:
        """Decode a stored document.

        Raises:
            StyleParseError: if *data* is not an object or a required key
                is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise StyleParseError("<document>", f"expected an object, got {type(data).__name__}")

        style = cls()
        style.text = _require(data, "text", str)
        style.uppercase = _require(data, "uppercase", bool)

        style.rect = _decode("rect", Rect.from_string, _require(data, "rect", str))
        style.offset = _decode("offset", Point.from_string, _require(data, "offset", str))
        style.font_size = _decode("fontSize", _positive, _require(data, "fontSize", float))
        style.font_name = _require(data, "fontName", str)

        # Colours are optional; absent or null keeps the default.
        if data.get("textColorRGB") is not None:
            style.text_color = RGBColor.from_dict(data["textColorRGB"], "textColorRGB")
        if data.get("outColorRGB") is not None:
            style.outline_color = RGBColor.from_dict(data["outColorRGB"], "outColorRGB")

        style.alignment = alignment_from_storage_code(_require(data, "alignment", int))
        style.stroke_width = _require(data, "strokeWidth", float)
        style.opacity = _decode("opacity", _finite, _require(data, "opacity", float))
        style.shadow_enabled = _require(data, "shadowEnabled", bool)
        style.shadow_3d = _require(data, "shadow3D", bool)
        return style
