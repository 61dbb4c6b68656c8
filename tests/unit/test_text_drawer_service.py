"""Tests for maptext.services.text_drawer_service."""

import logging

import numpy as np
import pytest

from maptext.config import AppConfig
from maptext.models.geometry import AnchorRatio, CanvasDimension, TextDimension, Translation
from maptext.models.text_style import TextAnchor, TextStyle
from maptext.services.layout_service import UnsupportedJustificationError
from maptext.services.text_drawer_service import TextDrawerService, render_styled_text


@pytest.fixture
def fake_drawer(fake_engine, app_config):
    return TextDrawerService(engine=fake_engine, config=app_config)


@pytest.fixture
def drawer(app_config):
    return TextDrawerService(config=app_config)


# ---------------------------------------------------------------------------
# Geometry with a fixed-size layout
# ---------------------------------------------------------------------------

class TestComputeGeometry:
    def test_bottom_left_example(self, fake_drawer):
        style = TextStyle(size=20, max_width=100, halo_width=4, offset=(2, 2), anchor=TextAnchor.BOTTOM_LEFT)
        geometry, layout = fake_drawer.compute_geometry("A", style)

        assert geometry.text == TextDimension(12, 20)
        assert geometry.canvas == CanvasDimension(18, 26)
        assert geometry.ratio == AnchorRatio(0.0, 1.0)
        assert geometry.translation == Translation(2.0, 4.0)
        assert layout.text == "A"

    def test_center_without_padding(self, fake_drawer):
        geometry, _ = fake_drawer.compute_geometry("A", TextStyle())
        assert geometry.canvas == CanvasDimension(12, 20)
        assert geometry.translation == Translation(0.0, 0.0)

    def test_top_left_translation_is_offset(self, fake_drawer):
        style = TextStyle(offset=(7, -3), anchor=TextAnchor.TOP_LEFT, halo_width=1)
        geometry, _ = fake_drawer.compute_geometry("A", style)
        assert geometry.translation == Translation(7.0, -3.0)

    def test_bottom_right_translation(self, fake_drawer):
        style = TextStyle(offset=(3, 5), anchor=TextAnchor.BOTTOM_RIGHT, halo_width=2)
        geometry, _ = fake_drawer.compute_geometry("A", style)
        canvas = geometry.canvas
        assert geometry.translation == Translation(
            canvas.width - 12 - 3,
            canvas.height - 20 - 5,
        )

    def test_logs_each_step(self, fake_drawer, caplog):
        with caplog.at_level(logging.DEBUG, logger="maptext.services.text_drawer_service"):
            fake_drawer.compute_geometry("A", TextStyle())
        assert "Text dimensions" in caplog.text
        assert "Bitmap dimensions" in caplog.text
        assert "Translation" in caplog.text

    def test_unsupported_justification(self, fake_drawer):
        style = TextStyle.model_construct(justification="diagonal")
        with pytest.raises(UnsupportedJustificationError):
            fake_drawer.compute_geometry("A", style)


# ---------------------------------------------------------------------------
# draw_text
# ---------------------------------------------------------------------------

class TestDrawText:
    def test_image_matches_canvas(self, fake_drawer, fake_engine):
        style = TextStyle(halo_width=4, offset=(2, 2), anchor=TextAnchor.BOTTOM_LEFT)
        image = fake_drawer.draw_text("A", style)
        assert image.size == (18, 26)
        assert image.mode == "RGBA"

        layout, size, translation = fake_engine.draw_calls[0]
        assert size == (18, 26)
        assert translation == Translation(2.0, 4.0)

    def test_background_is_transparent(self, fake_drawer):
        image = fake_drawer.draw_text("A", TextStyle(halo_width=3))
        assert np.array(image)[:, :, 3].max() == 0

    def test_debug_background_is_opaque_red(self, fake_engine, tmp_path):
        config = AppConfig(output_dir=tmp_path, debug_background=True)
        drawer = TextDrawerService(engine=fake_engine, config=config)
        image = drawer.draw_text("A", TextStyle())
        assert image.getpixel((0, 0)) == (255, 0, 0, 255)

    def test_repeated_calls_do_not_share_state(self, fake_drawer):
        first = fake_drawer.draw_text("A", TextStyle(halo_width=6))
        second = fake_drawer.draw_text("A", TextStyle())
        assert first.size == (18, 26)
        assert second.size == (12, 20)

    def test_renders_real_text(self, drawer, halo_style):
        image = drawer.draw_text("My Awesome Marker", halo_style)
        alpha = np.array(image)[:, :, 3]
        assert alpha.max() > 0
        assert image.width <= halo_style.max_width + halo_style.halo_width + 1

    def test_real_canvas_contains_text_dimensions(self, drawer):
        style = TextStyle(size=30, max_width=200, halo_width=3, offset=(10, -6), anchor=TextAnchor.RIGHT)
        geometry, _ = drawer.compute_geometry("Sydney", style)
        image = drawer.draw_text("Sydney", style)
        assert image.size == (geometry.canvas.width, geometry.canvas.height)
        assert geometry.canvas.width == geometry.text.width + 3 + 10
        assert geometry.canvas.height == geometry.text.height + 3 + 6

    def test_text_sits_at_anchor(self, drawer):
        style = TextStyle(size=24, offset=(30, 0), anchor=TextAnchor.LEFT)
        image = drawer.draw_text("Hi", style)
        alpha = np.array(image)[:, :, 3]
        # Left anchor with a positive offset leaves the left strip empty
        assert alpha[:, :28].max() == 0
        assert alpha[:, 30:].max() > 0

    def test_empty_text_renders_blank_canvas(self, drawer):
        image = drawer.draw_text("", TextStyle(halo_width=2))
        assert image.width == 2
        assert image.height > 2
        assert np.array(image)[:, :, 3].max() == 0


class TestRenderStyledText:
    def test_entry_point(self, monkeypatch, tmp_path):
        monkeypatch.setattr("maptext.services.text_drawer_service.get_config",
                            lambda: AppConfig(output_dir=tmp_path))
        image = render_styled_text("Marker", TextStyle(size=18, anchor="bottom_right", offset=(4, 4)))
        assert image.mode == "RGBA"
        assert np.array(image)[:, :, 3].max() > 0
