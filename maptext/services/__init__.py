"""Text rendering services."""

from .layout_service import (
    PillowLayoutEngine,
    TextLayout,
    TextLayoutEngine,
    TextPaint,
    UnsupportedJustificationError,
    measure,
)
from .marker_service import MarkerService
from .placement_service import anchor_ratio, offset_signs, place, size_canvas
from .text_drawer_service import TextDrawerService, render_styled_text

__all__ = [
    "PillowLayoutEngine",
    "TextLayout",
    "TextLayoutEngine",
    "TextPaint",
    "UnsupportedJustificationError",
    "measure",
    "MarkerService",
    "anchor_ratio",
    "offset_signs",
    "place",
    "size_canvas",
    "TextDrawerService",
    "render_styled_text",
]
