"""Tests for the Pillow raster canvas."""

from __future__ import annotations

import math

from turtle_world.renderer import RasterCanvas
from turtle_world.types import Font


class TestRasterSurface:
    """Tests for painting a surface into pixels."""

    def test_background_fill(self, raster_surface, drain):
        """Test the background covers the frame."""
        raster_surface.redraw()
        image = raster_surface.canvas.image
        assert image.getpixel((5, 5)) == (255, 255, 255, 255)

        raster_surface.bgcolor("red")
        drain(raster_surface)
        assert image.getpixel((5, 5)) == (255, 0, 0, 255)

    def test_stroke_pixels(self, raster_surface, drain):
        """Test a forward move leaves ink along the path."""
        t = raster_surface.create_turtle()
        t.forward(40)
        drain(raster_surface)
        image = raster_surface.canvas.image
        assert image.getpixel((75, 45)) == (0, 0, 0, 255)
        assert image.getpixel((75, 20)) == (255, 255, 255, 255)

    def test_dot_pixels(self, raster_surface, drain):
        """Test dots are filled discs."""
        t = raster_surface.create_turtle()
        t.dot(20, "blue").hideturtle()
        drain(raster_surface)
        assert raster_surface.canvas.image.getpixel((60, 45)) == (0, 0, 255, 255)

    def test_snapshot_shape(self, raster_surface):
        """Test snapshots are height x width x RGBA arrays."""
        raster_surface.redraw()
        assert raster_surface.canvas.snapshot().shape == (90, 120, 4)


class TestRasterCanvas:
    """Tests for RasterCanvas primitives."""

    def test_transformed_rect(self):
        """Test translate and rotate apply to later drawing."""
        canvas = RasterCanvas(100, 100)
        canvas.save()
        canvas.translate(50, 50)
        canvas.rotate(math.pi / 2)
        canvas.fill_rect(0, 0, 10, 5)
        canvas.restore()
        assert canvas.image.getpixel((47, 55)) == (0, 0, 0, 255)
        assert canvas.image.getpixel((55, 47)) == (0, 0, 0, 0)

    def test_restore_without_save_is_harmless(self):
        """Test restore on an empty stack keeps the current state."""
        canvas = RasterCanvas(10, 10)
        canvas.fill_style = (1, 2, 3)
        canvas.restore()
        assert canvas.fill_style == (1, 2, 3)

    def test_restore_brings_back_styles(self):
        """Test save/restore covers styles as well as the transform."""
        canvas = RasterCanvas(10, 10)
        canvas.save()
        canvas.fill_style = (9, 9, 9)
        canvas.translate(3, 3)
        canvas.restore()
        assert canvas.fill_style == (0, 0, 0)
        canvas.fill_rect(0, 0, 1, 1)
        assert canvas.image.getpixel((0, 0)) == (0, 0, 0, 255)

    def test_none_styles_paint_nothing(self):
        """Test unparseable colors are skipped."""
        canvas = RasterCanvas(10, 10)
        canvas.fill_style = None
        canvas.fill_rect(0, 0, 10, 10)
        assert canvas.image.getpixel((5, 5)) == (0, 0, 0, 0)

    def test_measure_text(self):
        """Test text width grows with the string."""
        canvas = RasterCanvas(10, 10)
        canvas.font = Font("Arial", 12)
        short = canvas.measure_text("hi")
        long = canvas.measure_text("hello world")
        assert 0 < short < long

    def test_save_image(self, tmp_path):
        """Test saving writes a file."""
        canvas = RasterCanvas(10, 10)
        path = canvas.save_image(tmp_path / "out.png")
        assert path.exists()
