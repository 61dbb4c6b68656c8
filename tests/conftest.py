"""Shared test fixtures."""

import pytest
from PIL import Image

from maptext.config import AppConfig
from maptext.models.bounding_box import BoundingBox
from maptext.models.geometry import Translation
from maptext.models.text_style import TextStyle
from maptext.services.layout_service import PillowLayoutEngine, TextLayout, TextPaint


class FakeLayoutEngine:
    """Layout engine returning a fixed block size and recording draw calls."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.draw_calls: list[tuple[TextLayout, tuple[int, int], Translation]] = []

    def layout(self, text: str, paint: TextPaint, max_width: int) -> TextLayout:
        return TextLayout(
            text=text,
            lines=(text,),
            width=self.width,
            height=self.height,
            line_height=self.height,
            paint=paint,
            font=None,
        )

    def draw(self, layout: TextLayout, image: Image.Image, translation: Translation) -> None:
        self.draw_calls.append((layout, image.size, translation))


@pytest.fixture
def fake_engine():
    """Engine that always measures a 12 x 20 block."""
    return FakeLayoutEngine(12, 20)


@pytest.fixture
def make_fake_engine():
    """Factory for engines with an arbitrary block size."""
    return FakeLayoutEngine


@pytest.fixture
def pillow_engine():
    return PillowLayoutEngine()


@pytest.fixture
def app_config(tmp_path):
    """Config writing into a temporary directory."""
    return AppConfig(output_dir=tmp_path / "output")


@pytest.fixture
def default_style():
    return TextStyle()


@pytest.fixture
def halo_style():
    """Readable label style with a halo."""
    return TextStyle(
        color="#1A5276",
        size=24,
        max_width=300,
        halo_color="#FFFFFF",
        halo_width=3,
    )


@pytest.fixture
def sample_bbox():
    """Small bounding box around Central Park, NYC."""
    return BoundingBox(north=40.775, south=40.768, east=-73.968, west=-73.978)


@pytest.fixture
def solid_white_image():
    """128x128 solid white RGBA image."""
    return Image.new("RGBA", (128, 128), (255, 255, 255, 255))


@pytest.fixture
def transparent_image():
    """64x64 fully transparent image."""
    return Image.new("RGBA", (64, 64), (0, 0, 0, 0))


@pytest.fixture
def solid_red_image():
    """64x64 solid red RGBA image."""
    return Image.new("RGBA", (64, 64), (255, 0, 0, 255))


@pytest.fixture
def solid_blue_image():
    """64x64 solid blue RGBA image."""
    return Image.new("RGBA", (64, 64), (0, 0, 255, 255))
