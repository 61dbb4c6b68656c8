"""Geographic bounding box of a map image."""

from pydantic import BaseModel, Field


class BoundingBox(BaseModel):
    """Geographic bounding box for the map region."""

    north: float = Field(..., ge=-90, le=90, description="Northern latitude boundary")
    south: float = Field(..., ge=-90, le=90, description="Southern latitude boundary")
    east: float = Field(..., ge=-180, le=180, description="Eastern longitude boundary")
    west: float = Field(..., ge=-180, le=180, description="Western longitude boundary")

    @property
    def center(self) -> tuple[float, float]:
        """Return center point (lat, lon)."""
        return ((self.north + self.south) / 2, (self.east + self.west) / 2)

    @property
    def width_degrees(self) -> float:
        """Width in degrees longitude."""
        return abs(self.east - self.west)

    @property
    def height_degrees(self) -> float:
        """Height in degrees latitude."""
        return abs(self.north - self.south)

    def contains(self, lat: float, lon: float) -> bool:
        """Check whether a point lies inside the box (edges included)."""
        return self.south <= lat <= self.north and self.west <= lon <= self.east

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return (north, south, east, west)."""
        return (self.north, self.south, self.east, self.west)
