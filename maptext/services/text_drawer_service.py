"""Renders styled text into a standalone RGBA bitmap.

A request runs measure -> size canvas -> place -> draw:

1. The layout engine wraps the text to the style's max width and reports
   the block size.
2. ``size_canvas`` adds room for the halo and the offset.
3. ``place`` computes where the block goes so its anchor lines up with the
   canvas anchor.
4. The engine draws the block at that translation onto a cleared canvas.
"""

import logging
from typing import Optional

from PIL import Image

from ..config import DEBUG_BACKGROUND_COLOR, AppConfig, get_config
from ..models.geometry import TextGeometry
from ..models.text_style import TextStyle
from .layout_service import PillowLayoutEngine, TextLayout, TextLayoutEngine, TextPaint
from .placement_service import anchor_ratio, place, size_canvas

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


class TextDrawerService:
    """Draws a bitmap containing a styled text.

    The service keeps only its layout engine and configuration; every call
    builds its own paint from the style, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        engine: Optional[TextLayoutEngine] = None,
        config: Optional[AppConfig] = None,
    ):
        """Initialize the drawer.

        Args:
            engine: Text layout backend. Defaults to a ``PillowLayoutEngine``
                using the configured default font.
            config: Application config; the global one if omitted.
        """
        self.config = config or get_config()
        self.engine = engine or PillowLayoutEngine(default_font_path=self.config.default_font_path)

    def compute_geometry(self, text: str, style: TextStyle) -> tuple[TextGeometry, TextLayout]:
        """Lay out ``text`` and work out the canvas size and placement.

        Returns:
            The computed geometry and the layout to draw.

        Raises:
            UnsupportedJustificationError: If the style's justification is
                not recognised.
        """
        paint = TextPaint.from_style(style)
        layout = self.engine.layout(text, paint, style.max_width)
        text_dim = layout.dimension
        logger.debug("Text dimensions = %s", text_dim)

        canvas_dim = size_canvas(text_dim, style.halo_width, style.offset)
        logger.debug("Bitmap dimensions = %s", canvas_dim)

        translation = place(canvas_dim, text_dim, style.offset, style.anchor)
        logger.debug("Translation = %s", translation)

        geometry = TextGeometry(
            text=text_dim,
            canvas=canvas_dim,
            ratio=anchor_ratio(style.anchor),
            translation=translation,
        )
        return geometry, layout

    def draw_text(self, text: str, style: TextStyle) -> Image.Image:
        """Draw ``text`` with ``style`` into a new RGBA image.

        Args:
            text: The text for drawing.
            style: The style for the text.

        Returns:
            An image sized to the computed canvas, transparent apart from the
            text and its halo (opaque red when ``debug_background`` is set).
        """
        geometry, layout = self.compute_geometry(text, style)
        canvas = geometry.canvas

        background = DEBUG_BACKGROUND_COLOR if self.config.debug_background else TRANSPARENT
        image = Image.new("RGBA", (canvas.width, canvas.height), background)

        self.engine.draw(layout, image, geometry.translation)
        return image


def render_styled_text(text: str, style: TextStyle) -> Image.Image:
    """Render ``text`` with ``style`` into a standalone RGBA image."""
    return TextDrawerService().draw_text(text, style)
