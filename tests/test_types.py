"""Tests for drawing types and per-turtle state."""

from __future__ import annotations

from turtle_world.engine import TurtleState
from turtle_world.types import (
    DEFAULT_SHAPES,
    CommandKind,
    PathSegment,
    PenState,
    Point,
)


class TestPenState:
    """Tests for PenState."""

    def test_defaults(self):
        """Test the initial pen configuration."""
        pen = PenState()
        assert pen.is_down is True
        assert pen.color == (0, 0, 0)
        assert pen.fill_color == (0, 0, 0)
        assert pen.width == 1
        assert pen.is_filling is False

    def test_copy_is_independent(self):
        """Test copies do not alias the original."""
        pen = PenState()
        copy = pen.copy()
        pen.color = (255, 0, 0)
        assert copy.color == (0, 0, 0)


class TestPathSegment:
    """Tests for PathSegment strokability."""

    def test_single_point_is_not_strokable(self):
        """Test segments need two points."""
        assert not PathSegment(PenState(), [Point(0, 0)]).is_strokable

    def test_pen_up_is_not_strokable(self):
        """Test pen-up segments never produce ink."""
        segment = PathSegment(PenState(is_down=False), [Point(0, 0), Point(1, 1)])
        assert not segment.is_strokable

    def test_two_points_pen_down_is_strokable(self):
        """Test the minimal strokable segment."""
        assert PathSegment(PenState(), [Point(0, 0), Point(1, 1)]).is_strokable


class TestTurtleState:
    """Tests for TurtleState."""

    def test_initial_state(self):
        """Test a fresh turtle sits at home facing east."""
        state = TurtleState(200, 150)
        assert (state.x, state.y, state.heading) == (200, 150, 0.0)
        assert state.speed == 6.0
        assert state.visible is True
        assert state.shape_name == "classic"
        assert len(state.history.segments) == 1
        assert state.history.segments[0].points == [Point(200, 150)]

    def test_segment_snapshots_pen(self):
        """Test later pen changes do not alter recorded segments."""
        state = TurtleState(0, 0)
        segment = state.current_segment
        state.pen.color = (1, 2, 3)
        state.pen.width = 9
        assert segment.pen.color == (0, 0, 0)
        assert segment.pen.width == 1

    def test_record_point_feeds_fill_path_when_filling(self):
        """Test points go to the fill path only while filling."""
        state = TurtleState(0, 0)
        state.x = 5
        state.record_point()
        assert state.fill_path == []

        state.pen.is_filling = True
        state.x = 10
        state.record_point()
        assert state.fill_path == [Point(10, 0)]
        assert state.current_segment.points[-1] == Point(10, 0)

    def test_clear_drawings_keeps_pose_and_pen(self):
        """Test clear only empties history."""
        state = TurtleState(0, 0)
        state.x, state.heading = 30, 45
        state.pen.color = (9, 9, 9)
        state.record_point()
        state.clear_drawings()
        assert (state.x, state.heading) == (30, 45)
        assert state.pen.color == (9, 9, 9)
        assert len(state.history.segments) == 1
        assert state.history.segments[0].points == [Point(30, 0)]

    def test_reset_restores_everything(self):
        """Test reset returns to the initial state."""
        state = TurtleState(100, 100)
        state.x, state.y, state.heading, state.speed = 1, 2, 3, 0
        state.visible = False
        state.shape_name = "turtle"
        state.pen.is_down = False
        state.reset()
        assert (state.x, state.y, state.heading, state.speed) == (100, 100, 0.0, 6.0)
        assert state.visible is True
        assert state.shape_name == "classic"
        assert state.pen == PenState()

    def test_normalize_heading(self):
        """Test headings wrap into [0, 360)."""
        state = TurtleState(0, 0)
        state.heading = -90
        state.normalize_heading()
        assert state.heading == 270
        state.heading = 720
        state.normalize_heading()
        assert state.heading == 0
        state.heading = -1e-20
        state.normalize_heading()
        assert 0 <= state.heading < 360


class TestShapesAndCommands:
    """Tests for the shape registry and command kinds."""

    def test_default_shapes(self):
        """Test every built-in shape is registered."""
        assert set(DEFAULT_SHAPES) == {"arrow", "turtle", "circle", "square", "triangle", "classic"}
        assert DEFAULT_SHAPES["circle"].is_circle
        assert not DEFAULT_SHAPES["classic"].is_circle

    def test_only_bgcolor_is_surface_scoped(self):
        """Test surface-scoped command kinds."""
        scoped = [kind for kind in CommandKind if kind.is_surface_scoped]
        assert scoped == [CommandKind.BGCOLOR]
