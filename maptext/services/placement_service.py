"""Canvas sizing and anchor placement for a text bitmap.

Given the size of a laid-out text block, these functions decide how large
the output bitmap must be and where inside it the block is drawn:

1. ``size_canvas`` pads the text by the halo width and the absolute offset
   on each axis, so the canvas is large enough whichever side the offset
   pushes towards.
2. ``place`` aligns the anchor point of the text with the same anchor point
   of the canvas, then applies the offset. Anchors pinned to the right or
   bottom edge flip the sign of that offset component, so a positive offset
   always moves the text away from the pinned edge.

Everything here is pure and stateless.
"""

from dataclasses import dataclass
from typing import Union

from ..models.geometry import AnchorRatio, CanvasDimension, TextDimension, Translation
from ..models.text_style import TextAnchor
from ..utils.math_utils import round_half_up

_CENTER = 0.5


@dataclass(frozen=True)
class AnchorPlacement:
    """Ratio and offset signs for one anchor value."""

    ratio: AnchorRatio
    sign_x: int
    sign_y: int


ANCHOR_PLACEMENTS: dict[TextAnchor, AnchorPlacement] = {
    TextAnchor.CENTER: AnchorPlacement(AnchorRatio(_CENTER, _CENTER), 1, 1),
    TextAnchor.LEFT: AnchorPlacement(AnchorRatio(0.0, _CENTER), 1, 1),
    TextAnchor.TOP: AnchorPlacement(AnchorRatio(_CENTER, 0.0), 1, 1),
    TextAnchor.TOP_LEFT: AnchorPlacement(AnchorRatio(0.0, 0.0), 1, 1),
    TextAnchor.RIGHT: AnchorPlacement(AnchorRatio(1.0, _CENTER), -1, 1),
    TextAnchor.TOP_RIGHT: AnchorPlacement(AnchorRatio(1.0, 0.0), -1, 1),
    TextAnchor.BOTTOM: AnchorPlacement(AnchorRatio(_CENTER, 1.0), 1, -1),
    TextAnchor.BOTTOM_LEFT: AnchorPlacement(AnchorRatio(0.0, 1.0), 1, -1),
    TextAnchor.BOTTOM_RIGHT: AnchorPlacement(AnchorRatio(1.0, 1.0), -1, -1),
}

# Unknown anchors behave like CENTER
DEFAULT_PLACEMENT = ANCHOR_PLACEMENTS[TextAnchor.CENTER]


def _placement(anchor: Union[TextAnchor, str, None]) -> AnchorPlacement:
    return ANCHOR_PLACEMENTS.get(TextAnchor.parse(anchor), DEFAULT_PLACEMENT)


def anchor_ratio(anchor: Union[TextAnchor, str, None]) -> AnchorRatio:
    """Fractional position the anchor designates inside any rectangle.

    ``TOP_RIGHT`` is ``(1.0, 0.0)``; ``CENTER`` and unrecognized values are
    ``(0.5, 0.5)``.
    """
    return _placement(anchor).ratio


def offset_signs(anchor: Union[TextAnchor, str, None]) -> tuple[int, int]:
    """Sign applied to each offset component for the given anchor."""
    placement = _placement(anchor)
    return (placement.sign_x, placement.sign_y)


def size_canvas(
    text_dim: TextDimension,
    halo_width: float,
    offset: tuple[int, int],
) -> CanvasDimension:
    """Compute the bitmap size that fits the text, its halo and the offset.

    Args:
        text_dim: Size of the laid-out text block.
        halo_width: Halo blur radius in pixels (must be non-negative).
        offset: ``(x, y)`` pixel offset; only its magnitude matters here.

    Returns:
        The canvas size, never smaller than ``text_dim``.
    """
    width = text_dim.width + halo_width + abs(offset[0])
    height = text_dim.height + halo_width + abs(offset[1])
    return CanvasDimension(round_half_up(width), round_half_up(height))


def place(
    canvas_dim: CanvasDimension,
    text_dim: TextDimension,
    offset: tuple[int, int],
    anchor: Union[TextAnchor, str, None],
) -> Translation:
    """Compute where to draw the text block inside the canvas.

    The text's anchor point is aligned with the canvas' anchor point, then
    the offset is added with the per-side sign from ``ANCHOR_PLACEMENTS``.

    Args:
        canvas_dim: Size of the output bitmap.
        text_dim: Size of the laid-out text block.
        offset: ``(x, y)`` pixel offset from the style.
        anchor: Anchor of the style; unknown values are treated as CENTER.

    Returns:
        Translation of the text block's top-left drawing origin.
    """
    placement = _placement(anchor)
    ratio = placement.ratio

    x = canvas_dim.width * ratio.x - text_dim.width * ratio.x
    y = canvas_dim.height * ratio.y - text_dim.height * ratio.y

    x += placement.sign_x * offset[0]
    y += placement.sign_y * offset[1]

    return Translation(float(x), float(y))
