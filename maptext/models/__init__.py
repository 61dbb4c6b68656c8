"""Data models for styled text rendering."""

from .bounding_box import BoundingBox
from .geometry import AnchorRatio, CanvasDimension, TextDimension, TextGeometry, Translation
from .marker import TextMarker
from .text_style import TextAnchor, TextJustify, TextStyle

__all__ = [
    "BoundingBox",
    "AnchorRatio",
    "CanvasDimension",
    "TextDimension",
    "TextGeometry",
    "Translation",
    "TextMarker",
    "TextAnchor",
    "TextJustify",
    "TextStyle",
]
