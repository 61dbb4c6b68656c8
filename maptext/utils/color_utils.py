"""Colour parsing and opacity helpers."""

from typing import Union

from PIL import ImageColor

from .math_utils import round_half_up

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]


def parse_rgb(value: Union[str, RGB, list[int]]) -> RGB:
    """Parse a colour into an ``(r, g, b)`` tuple.

    Accepts anything ``PIL.ImageColor`` understands (``"#1A5276"``,
    ``"navy"``, ``"rgb(10, 20, 30)"``) or a 3/4-item sequence of ints. An
    alpha component, if given, is dropped: opacity is a separate setting.
    """
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value)
    else:
        rgb = tuple(value)

    if len(rgb) not in (3, 4):
        raise ValueError(f"Expected an RGB colour, got {value!r}")

    r, g, b = (int(c) for c in rgb[:3])
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"Colour channel out of range in {value!r}")
    return (r, g, b)


def alpha_color(rgb: RGB, opacity: float) -> RGBA:
    """Pre-multiply an opacity (0.0-1.0) into the alpha channel of ``rgb``."""
    return (rgb[0], rgb[1], rgb[2], round_half_up(opacity * 255))
