"""Utility functions for text rendering."""

from .color_utils import alpha_color, parse_rgb
from .geo_utils import gps_to_pixel, pixel_to_gps
from .image_utils import blend_images, load_image, save_image
from .math_utils import round_half_up

__all__ = [
    "alpha_color",
    "parse_rgb",
    "gps_to_pixel",
    "pixel_to_gps",
    "blend_images",
    "load_image",
    "save_image",
    "round_half_up",
]
