"""Text measurement and drawing on top of Pillow.

The placement code only needs the pixel size of a laid-out block and a way
to draw it at a translation. ``TextLayoutEngine`` is that narrow interface;
``PillowLayoutEngine`` implements it with ``PIL.ImageFont`` for metrics and
line breaking and ``PIL.ImageDraw`` / ``PIL.ImageFilter`` for drawing.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Union

from PIL import Image, ImageDraw, ImageFilter, ImageFont

from ..config import get_config
from ..models.geometry import TextDimension, Translation
from ..models.text_style import TextJustify, TextStyle
from ..utils.color_utils import RGBA, alpha_color
from ..utils.math_utils import round_half_up

logger = logging.getLogger(__name__)

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

# Candidate system font paths to try, in preference order
_SYSTEM_FONT_CANDIDATES = [
    # Linux
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    # macOS
    "/System/Library/Fonts/Helvetica.ttc",
    "/Library/Fonts/Arial.ttf",
    # Windows
    "C:/Windows/Fonts/arial.ttf",
    "C:/Windows/Fonts/segoeui.ttf",
]

_ALIGNMENTS = {
    TextJustify.LEFT: "left",
    TextJustify.CENTER: "center",
    TextJustify.RIGHT: "right",
}


class UnsupportedJustificationError(ValueError):
    """Raised when a style carries a justification the renderer cannot map."""

    def __init__(self, justification):
        super().__init__(f"Unsupported justification: {justification!r}")
        self.justification = justification


@dataclass(frozen=True)
class TextPaint:
    """Per-call drawing configuration derived from a ``TextStyle``."""

    color: RGBA
    align: str
    size: int
    halo_color: RGBA
    halo_width: float
    fonts: tuple[str, ...] = ()
    line_height: int = 0

    @classmethod
    def from_style(cls, style: TextStyle) -> "TextPaint":
        """Build the paint for ``style``.

        The style's opacity is pre-multiplied into the alpha channel of both
        the text and the halo colour.

        Raises:
            UnsupportedJustificationError: If the justification is not one
                of LEFT, CENTER or RIGHT.
        """
        try:
            align = _ALIGNMENTS[style.justification]
        except KeyError:
            raise UnsupportedJustificationError(style.justification) from None

        return cls(
            color=alpha_color(style.color, style.opacity),
            align=align,
            size=style.size,
            halo_color=alpha_color(style.halo_color, style.opacity),
            halo_width=style.halo_width,
            fonts=tuple(style.fonts),
            line_height=style.line_height,
        )


@dataclass(frozen=True)
class TextLayout:
    """A text block broken into lines, ready to be drawn."""

    text: str
    lines: tuple[str, ...]
    width: int
    height: int
    line_height: int
    paint: TextPaint
    font: FontType = field(compare=False, repr=False)

    @property
    def dimension(self) -> TextDimension:
        return TextDimension(self.width, self.height)


class TextLayoutEngine(Protocol):
    """What the renderer needs from a text backend."""

    def layout(self, text: str, paint: TextPaint, max_width: int) -> TextLayout:
        ...

    def draw(self, layout: TextLayout, image: Image.Image, translation: Translation) -> None:
        ...


class PillowLayoutEngine:
    """Lays out and draws text with Pillow.

    Fonts are resolved in order: the style's preferred fonts, the
    configured default font path, a list of common system fonts, and
    finally Pillow's bundled default font. Loaded fonts are cached per
    engine; the engine holds no other state and may be shared.
    """

    def __init__(self, default_font_path: Optional[str] = None):
        self.default_font_path = default_font_path
        self._font_cache: dict[tuple[tuple[str, ...], int], FontType] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def layout(self, text: str, paint: TextPaint, max_width: int) -> TextLayout:
        """Break ``text`` into lines no wider than ``max_width``.

        The block width is the measured width of the widest line prefix that
        fits ``max_width``, rounded to whole pixels. Lines are word-wrapped to
        the unrounded measurement. Empty text gives a zero-width block one
        line tall.
        """
        font = self.get_font(paint.fonts, paint.size)
        measured = max(
            (self.break_text(paragraph, font, max_width) for paragraph in text.split("\n")),
            default=0.0,
        )
        width = round_half_up(measured)
        lines = self._wrap(text, font, measured)
        line_height = paint.line_height or self._natural_line_height(font)

        return TextLayout(
            text=text,
            lines=tuple(lines),
            width=width,
            height=line_height * len(lines),
            line_height=line_height,
            paint=paint,
            font=font,
        )

    def draw(self, layout: TextLayout, image: Image.Image, translation: Translation) -> None:
        """Draw ``layout`` onto ``image`` with its top-left at ``translation``.

        When the paint has a halo, the glyphs are first drawn in the halo
        colour, Gaussian-blurred by ``halo_width`` and composited underneath
        the text.
        """
        if not layout.text.strip():
            return

        if layout.paint.halo_width > 0:
            halo = self._render_lines(layout, image.size, translation, layout.paint.halo_color)
            halo = halo.filter(ImageFilter.GaussianBlur(radius=layout.paint.halo_width))
            image.alpha_composite(halo)

        text_layer = self._render_lines(layout, image.size, translation, layout.paint.color)
        image.alpha_composite(text_layer)

    def break_text(self, text: str, font: FontType, max_width: float) -> float:
        """Measure the longest prefix of ``text`` that fits in ``max_width``.

        Returns:
            Width in pixels of that prefix (0.0 for empty text).
        """
        best = 0.0
        for end in range(1, len(text) + 1):
            width = font.getlength(text[:end])
            if width > max_width:
                break
            best = width
        return best

    def get_font(self, fonts: tuple[str, ...], size: int) -> FontType:
        """Return a cached font for the preference list at ``size``."""
        cache_key = (tuple(fonts), size)
        font = self._font_cache.get(cache_key)
        if font is None:
            font = self._load_font(fonts, size)
            self._font_cache[cache_key] = font
        return font

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load_font(self, fonts: tuple[str, ...], size: int) -> FontType:
        candidates = list(fonts)
        if self.default_font_path:
            candidates.append(self.default_font_path)
        candidates.extend(_SYSTEM_FONT_CANDIDATES)

        for path in candidates:
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                continue

        logger.warning("No TrueType font found; using Pillow default font")
        return ImageFont.load_default(size=size)

    @staticmethod
    def _natural_line_height(font: FontType) -> int:
        try:
            ascent, descent = font.getmetrics()
            return ascent + descent
        except AttributeError:
            # Bitmap fonts have no metrics
            left, top, right, bottom = font.getbbox("Ay")
            return bottom - top

    def _wrap(self, text: str, font: FontType, width: float) -> list[str]:
        lines: list[str] = []
        for paragraph in text.split("\n"):
            lines.extend(self._wrap_paragraph(paragraph, font, width))
        return lines

    def _wrap_paragraph(self, paragraph: str, font: FontType, width: float) -> list[str]:
        words = paragraph.split()
        if not words:
            return [""]

        lines: list[str] = []
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if font.getlength(candidate) <= width:
                current = candidate
                continue

            if current:
                lines.append(current)
                current = ""

            # A word wider than the block is split between characters
            while font.getlength(word) > width and len(word) > 1:
                cut = self._fitting_prefix_length(word, font, width)
                lines.append(word[:cut])
                word = word[cut:]
            current = word

        lines.append(current)
        return lines

    @staticmethod
    def _fitting_prefix_length(word: str, font: FontType, width: float) -> int:
        cut = 1
        while cut < len(word) and font.getlength(word[: cut + 1]) <= width:
            cut += 1
        return cut

    @staticmethod
    def _render_lines(
        layout: TextLayout,
        size: tuple[int, int],
        translation: Translation,
        fill: RGBA,
    ) -> Image.Image:
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        origin_x, origin_y = translation.as_tuple()
        for i, line in enumerate(layout.lines):
            if not line:
                continue
            line_width = layout.font.getlength(line)
            if layout.paint.align == "center":
                x = (layout.width - line_width) / 2
            elif layout.paint.align == "right":
                x = layout.width - line_width
            else:
                x = 0.0
            y = i * layout.line_height
            draw.text((origin_x + x, origin_y + y), line, font=layout.font, fill=fill)
        return layer


def measure(text: str, style: TextStyle, engine: Optional[TextLayoutEngine] = None) -> TextDimension:
    """Measure the pixel size of ``text`` laid out with ``style``.

    Args:
        text: Text to measure; may be empty.
        style: Style providing size, fonts, justification and max width.
        engine: Layout backend. Defaults to a ``PillowLayoutEngine`` using
            the configured default font, as ``TextDrawerService`` does.

    Returns:
        Width and height of the wrapped text block.
    """
    engine = engine or PillowLayoutEngine(default_font_path=get_config().default_font_path)
    paint = TextPaint.from_style(style)
    return engine.layout(text, paint, style.max_width).dimension
