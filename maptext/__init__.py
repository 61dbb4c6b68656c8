"""Styled text bitmaps for map overlays."""

from .models import TextAnchor, TextJustify, TextStyle
from .services import TextDrawerService, render_styled_text

__version__ = "0.1.0"

__all__ = [
    "TextAnchor",
    "TextJustify",
    "TextStyle",
    "TextDrawerService",
    "render_styled_text",
]
