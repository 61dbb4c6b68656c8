"""Map marker model: a rendered text bitmap pinned to a geographic point."""

from typing import Optional

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field

from .text_style import TextStyle


class TextMarker(BaseModel):
    """A text label placed on the map as an image marker."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    text: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    style: TextStyle = Field(default_factory=TextStyle)
    # Fraction of the icon that sits on the marker position
    anchor_u: float = Field(default=0.5, ge=0.0, le=1.0)
    anchor_v: float = Field(default=0.5, ge=0.0, le=1.0)
    z_index: float = 4.258
    icon: Optional[Image.Image] = Field(default=None, exclude=True)

    @property
    def rotation(self) -> float:
        """Clockwise rotation of the icon in degrees."""
        return self.style.rotation
