"""Application configuration constants."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "MemeMaker"
APP_VERSION = "1.2.0"
ORG_NAME = "MemeMaker"

# Storage
APP_DATA_DIR = Path.home() / ".mememaker"
DEFAULT_ATTRIBUTES_DIR = APP_DATA_DIR / "attributes"
ATTRIBUTES_EXTENSION = ".json"

# Well-known caption keys
TOP_ATTR_KEY = "topAttr"
BOTTOM_ATTR_KEY = "bottomAttr"

# Text style defaults
DEFAULT_UPPERCASE = True
DEFAULT_FONT_NAME = "Impact"
DEFAULT_FONT_SIZE = 44.0
DEFAULT_TEXT_RGB = (1.0, 1.0, 1.0)     # white
DEFAULT_OUTLINE_RGB = (0.0, 0.0, 0.0)  # black
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_OPACITY = 1.0
DEFAULT_SHADOW_ENABLED = True
DEFAULT_SHADOW_3D = False

# Shadow geometry (x, y offset, blur radius)
SHADOW_3D_OFFSET = (0.0, -1.0)
SHADOW_3D_BLUR = 1.5
SHADOW_FLAT_OFFSET = (0.1, 0.1)
SHADOW_FLAT_BLUR = 0.8
