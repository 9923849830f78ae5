"""Tests for the surface controller and the unified redraw."""

from __future__ import annotations

import math

import pytest

from turtle_world.config import SurfaceConfig
from turtle_world.engine import Surface
from turtle_world.renderer import RasterCanvas, RecordingCanvas
from turtle_world.types import CommandKind

PAINT_OPS = {"fill_rect", "fill", "stroke", "fill_text", "save", "restore"}


def paint_ops(canvas: RecordingCanvas) -> list[str]:
    """Names of the painting calls of the last frame."""
    return [name for name in canvas.names() if name in PAINT_OPS]


class TestSurfaceSetup:
    """Tests for surface construction."""

    def test_default_canvas_is_raster(self):
        """Test a surface without a canvas creates a RasterCanvas."""
        surface = Surface(config=SurfaceConfig(width=64, height=48))
        assert isinstance(surface.canvas, RasterCanvas)
        assert (surface.width, surface.height) == (64, 48)

    def test_turtles_start_at_centre(self, surface):
        """Test new turtles are placed at the surface centre."""
        t = surface.create_turtle()
        assert (t.state.x, t.state.y) == (200, 150)
        assert t.position() == (0, 0)

    def test_turtles_in_registration_order(self, surface):
        """Test turtles() preserves paint order."""
        a = surface.create_turtle("a")
        b = surface.create_turtle("b")
        assert surface.turtles() == [a, b]
        assert [agent.name for agent in surface.agents] == ["a", "b"]

    def test_frame_loop_started_on_creation(self, surface):
        """Test the frame loop is running as soon as the surface exists."""
        assert surface.frame_loop.is_running

    def test_invalid_config_rejected(self):
        """Test non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            SurfaceConfig(width=0)


class TestBackground:
    """Tests for bgcolor."""

    def test_default_background_is_white(self, surface):
        """Test the initial background."""
        assert surface.bgcolor() == (255, 255, 255)

    def test_bgcolor_is_queued(self, surface, drain):
        """Test bgcolor goes through the queue as a surface command."""
        surface.bgcolor("navy")
        command = surface.queue.peek()
        assert command.agent is None
        assert command.kind is CommandKind.BGCOLOR
        assert surface.bgcolor() == (255, 255, 255)
        drain(surface)
        assert surface.bgcolor() == (0, 0, 128)

    def test_background_painted_first(self, surface, canvas):
        """Test every frame starts with clear then the background fill."""
        surface.redraw()
        frame = canvas.last_frame()
        assert frame[0][0] == "clear_rect"
        assert frame[1] == ("fill_rect", 0, 0, 400, 300, (255, 255, 255))

    def test_unparseable_background_skips_fill(self, surface, canvas, drain):
        """Test an invalid background degrades to no fill."""
        surface.bgcolor("nonsense")
        drain(surface)
        assert surface.bgcolor() is None
        surface.redraw()
        assert "fill_rect" not in canvas.names()


class TestRedrawOrder:
    """Tests for the fixed paint order."""

    def test_single_turtle_layers(self, surface, turtle, canvas, drain):
        """Test fills, strokes, text, dots, then the marker."""
        turtle.speed(0)
        turtle.begin_fill()
        turtle.forward(50).left(90).forward(50)
        turtle.end_fill()
        turtle.write("x")
        turtle.dot(5)
        drain(surface)

        surface.redraw()
        assert paint_ops(canvas) == [
            "fill_rect",
            "fill",  # fill region
            "stroke",  # path
            "fill_text",
            "fill",  # dot
            "save", "fill", "stroke", "restore",  # marker
        ]

    def test_later_turtle_paints_over_earlier_marker(self, surface, canvas, drain):
        """Test an earlier turtle's marker sits under a later turtle's drawing."""
        a = surface.create_turtle("a")
        b = surface.create_turtle("b")
        a.speed(0)
        b.speed(0)
        a.forward(10)
        b.forward(-10)
        drain(surface)

        surface.redraw()
        assert paint_ops(canvas) == [
            "fill_rect",
            "stroke", "save", "fill", "stroke", "restore",
            "stroke", "save", "fill", "stroke", "restore",
        ]

    def test_hidden_turtle_has_no_marker(self, surface, turtle, canvas, drain):
        """Test hideturtle removes only the marker."""
        turtle.speed(0)
        turtle.forward(10).hideturtle()
        drain(surface)
        surface.redraw()
        assert paint_ops(canvas) == ["fill_rect", "stroke"]

    def test_pen_up_segments_are_not_stroked(self, surface, turtle, canvas, drain):
        """Test moves with the pen up leave no ink."""
        turtle.speed(0)
        turtle.penup().forward(50)
        drain(surface)
        surface.redraw()
        assert "stroke" not in paint_ops(canvas)[:-2]

    def test_segment_uses_captured_pen(self, surface, turtle, canvas, drain):
        """Test each segment strokes with its own snapshot."""
        turtle.speed(0)
        turtle.pencolor("red").pensize(3).forward(10)
        turtle.pencolor("blue").forward(10)
        drain(surface)
        surface.redraw()
        strokes = [call for call in canvas.last_frame() if call[0] == "stroke"]
        # two path segments then the marker outline
        assert strokes[0][1:3] == ((255, 0, 0), 3)
        assert strokes[1][1:3] == ((0, 0, 255), 3)

    def test_none_color_items_are_skipped(self, surface, turtle, canvas, drain):
        """Test ink with an unparseable color is not painted."""
        turtle.speed(0)
        turtle.pencolor("nope").forward(20).hideturtle()
        drain(surface)
        assert turtle.pencolor() is None
        surface.redraw()
        assert paint_ops(canvas) == ["fill_rect"]

    def test_marker_oriented_by_heading(self, surface, turtle, canvas, drain):
        """Test the marker is translated to the pose and rotated by -heading."""
        turtle.speed(0)
        turtle.left(90)
        drain(surface)
        surface.redraw()
        frame = canvas.last_frame()
        assert ("translate", 200, 150) in frame
        rotation = next(call for call in frame if call[0] == "rotate")
        assert rotation[1] == pytest.approx(-math.pi / 2)

    def test_circle_marker_uses_arc(self, surface, turtle, canvas, drain):
        """Test the circle shape is drawn with an arc."""
        turtle.shape("circle")
        drain(surface)
        surface.redraw()
        arcs = [call for call in canvas.last_frame() if call[0] == "arc"]
        assert arcs and arcs[0][3] == 7


class TestRedrawIdempotence:
    """Tests that redraw has no side effects beyond painting."""

    def test_recorded_frames_identical(self, surface, turtle, canvas, drain):
        """Test two redraws issue identical calls."""
        turtle.speed(0)
        turtle.begin_fill().circle(30).end_fill()
        turtle.write("hello", align="center").dot()
        drain(surface)

        canvas.reset_log()
        surface.redraw()
        first = list(canvas.calls)
        canvas.reset_log()
        surface.redraw()
        assert canvas.calls == first

    def test_raster_frames_pixel_identical(self, raster_surface, drain):
        """Test two redraws produce identical pixels."""
        import numpy as np

        t = raster_surface.create_turtle()
        t.speed(0)
        t.color("red", "yellow").begin_fill()
        for _ in range(4):
            t.forward(30).left(90)
        t.end_fill()
        t.write("hi").dot(8, "blue")
        drain(raster_surface)

        raster_surface.redraw()
        first = raster_surface.canvas.snapshot()
        raster_surface.redraw()
        second = raster_surface.canvas.snapshot()
        assert np.array_equal(first, second)


class TestShapes:
    """Tests for the shape registry."""

    def test_builtin_shapes_listed(self, surface):
        """Test shapes() lists the defaults."""
        assert surface.shapes() == ["arrow", "circle", "classic", "square", "triangle", "turtle"]

    def test_register_polygon_shape(self, surface, turtle, drain):
        """Test a registered outline becomes selectable."""
        surface.register_shape("kite", [(0, 0), (-5, 3), (-12, 0), (-5, -3)])
        turtle.shape("kite")
        drain(surface)
        assert turtle.shape() == "kite"
        assert surface.get_shape("kite").outline[1] == (-5.0, 3.0)

    def test_register_circle_shape(self, surface):
        """Test registering a circle marker."""
        surface.register_shape("blob", "circle")
        assert surface.get_shape("blob").is_circle

    def test_register_rejects_bad_outline(self, surface):
        """Test degenerate outlines are rejected."""
        with pytest.raises(ValueError):
            surface.register_shape("line", [(0, 0), (1, 1)])
        with pytest.raises(ValueError):
            surface.register_shape("odd", "star")


class TestSave:
    """Tests for saving frames."""

    def test_save_delegates_to_canvas(self, surface, canvas, tmp_path):
        """Test save() hands the path to the canvas."""
        path = surface.save(tmp_path / "frame.png")
        assert canvas.saved_paths == [path]

    def test_raster_save_writes_png(self, raster_surface, drain, tmp_path):
        """Test a raster surface writes a real image."""
        from PIL import Image

        t = raster_surface.create_turtle()
        t.speed(0)
        t.forward(20)
        drain(raster_surface)
        path = raster_surface.save(tmp_path / "frame.png")
        with Image.open(path) as image:
            assert image.size == (120, 90)
