"""Geographic and coordinate utilities."""

from ..models.bounding_box import BoundingBox


def gps_to_pixel(
    lat: float,
    lon: float,
    bbox: BoundingBox,
    image_size: tuple[int, int],
) -> tuple[int, int]:
    """
    Convert GPS coordinates to pixel position on map.

    Args:
        lat: Latitude
        lon: Longitude
        bbox: Map bounding box
        image_size: (width, height) in pixels

    Returns:
        (x, y) pixel coordinates
    """
    width, height = image_size

    # Normalize to 0-1 within bbox
    x_norm = (lon - bbox.west) / (bbox.east - bbox.west)
    y_norm = (lat - bbox.south) / (bbox.north - bbox.south)

    pixel_x = int(x_norm * width)
    pixel_y = int((1 - y_norm) * height)  # Flip Y axis (image origin is top-left)

    return (pixel_x, pixel_y)


def pixel_to_gps(
    x: int,
    y: int,
    bbox: BoundingBox,
    image_size: tuple[int, int],
) -> tuple[float, float]:
    """
    Convert pixel position to GPS coordinates.

    Args:
        x: X pixel coordinate
        y: Y pixel coordinate
        bbox: Map bounding box
        image_size: (width, height) in pixels

    Returns:
        (latitude, longitude)
    """
    width, height = image_size

    x_norm = x / width
    y_norm = 1 - (y / height)

    lon = bbox.west + x_norm * (bbox.east - bbox.west)
    lat = bbox.south + y_norm * (bbox.north - bbox.south)

    return (lat, lon)
