"""Text markers: rendered text bitmaps pinned to points on a map image."""

import logging
from typing import Iterable, Optional

from PIL import Image

from ..models.bounding_box import BoundingBox
from ..models.marker import TextMarker
from ..models.text_style import TextStyle
from ..utils.geo_utils import gps_to_pixel
from ..utils.image_utils import blend_images
from ..utils.math_utils import round_half_up
from .text_drawer_service import TextDrawerService

logger = logging.getLogger(__name__)

DEFAULT_Z_INDEX = 4.258


class MarkerService:
    """Builds text markers and composites them onto map images."""

    def __init__(self, drawer: Optional[TextDrawerService] = None):
        self.drawer = drawer or TextDrawerService()

    def build_marker(
        self,
        text: str,
        style: TextStyle,
        latitude: float,
        longitude: float,
        z_index: float = DEFAULT_Z_INDEX,
    ) -> TextMarker:
        """Render ``text`` and wrap it in a marker at ``(latitude, longitude)``.

        The marker is anchored on the centre of its icon and rotated by the
        style's rotation.
        """
        icon = self.drawer.draw_text(text, style)
        return TextMarker(
            text=text,
            latitude=latitude,
            longitude=longitude,
            style=style,
            z_index=z_index,
            icon=icon,
        )

    def composite_markers(
        self,
        image: Image.Image,
        markers: Iterable[TextMarker],
        bbox: BoundingBox,
    ) -> Image.Image:
        """Draw markers onto a copy of ``image``.

        Markers are drawn in ascending ``z_index`` order, so higher values end
        up on top. Markers outside ``bbox`` are skipped. Markers built
        without an icon are rendered on the fly.

        Args:
            image: Map image covering ``bbox``.
            markers: Markers to draw.
            bbox: Geographic extent of ``image``.

        Returns:
            New RGBA image with the markers composited.
        """
        result = image.convert("RGBA")

        for marker in sorted(markers, key=lambda m: m.z_index):
            if not bbox.contains(marker.latitude, marker.longitude):
                logger.debug("Skipped marker '%s' outside the map bounds", marker.text)
                continue

            icon = marker.icon
            if icon is None:
                icon = self.drawer.draw_text(marker.text, marker.style)
            icon = self._rotate_icon(icon, marker.rotation)

            px, py = gps_to_pixel(marker.latitude, marker.longitude, bbox, result.size)
            position = (
                round_half_up(px - marker.anchor_u * icon.width),
                round_half_up(py - marker.anchor_v * icon.height),
            )
            result = blend_images(result, icon, position=position)

        return result

    @staticmethod
    def _rotate_icon(icon: Image.Image, rotation: float) -> Image.Image:
        # Marker rotation is clockwise, PIL rotates counter-clockwise
        if rotation % 360 == 0:
            return icon
        return icon.rotate(-rotation, resample=Image.Resampling.BICUBIC, expand=True)
