"""Per-turtle pose, pen state and drawing history."""

from __future__ import annotations

from itertools import count
from typing import Optional

from turtle_world.types import DrawingHistory, PathSegment, PenState, Point

_ids = count(1)


class TurtleState:
    """Mutable state of a single turtle.

    Pose is kept in surface pixel coordinates (origin top-left, y down) with
    heading in degrees, counter-clockwise from +x. Only the scheduler's drivers
    mutate the pose and pen; the facade reads it synchronously.
    """

    def __init__(
        self,
        home_x: float,
        home_y: float,
        default_speed: float = 6.0,
        name: Optional[str] = None,
    ):
        """Initialize a turtle at its home position.

        Args:
            home_x: Initial x in surface pixels.
            home_y: Initial y in surface pixels.
            default_speed: Speed restored on reset.
            name: Optional label used in logs.
        """
        self.name = name or f"turtle-{next(_ids)}"
        self.home_x = home_x
        self.home_y = home_y
        self.default_speed = default_speed
        self.history = DrawingHistory()
        self.fill_path: list[Point] = []
        self.reset()

    def reset(self) -> None:
        """Restore pose, pen, visibility, shape and speed; drop all drawings."""
        self.x = self.home_x
        self.y = self.home_y
        self.heading = 0.0
        self.speed = self.default_speed
        self.pen = PenState()
        self.visible = True
        self.shape_name = "classic"
        self.clear_drawings()

    def clear_drawings(self) -> None:
        """Drop all drawings, keeping pose and pen."""
        self.history.clear()
        self.fill_path = []
        self.start_new_segment()

    def start_new_segment(self) -> PathSegment:
        """Begin a new path segment at the current position with a pen snapshot."""
        segment = PathSegment(pen=self.pen.copy(), points=[Point(self.x, self.y)])
        self.history.segments.append(segment)
        return segment

    @property
    def current_segment(self) -> PathSegment:
        """The segment new points are appended to."""
        if not self.history.segments:
            return self.start_new_segment()
        return self.history.segments[-1]

    def record_point(self, segment: Optional[PathSegment] = None) -> None:
        """Append the current position to a segment and, when filling, the fill path."""
        target = segment if segment is not None else self.current_segment
        target.points.append(Point(self.x, self.y))
        if self.pen.is_filling:
            self.fill_path.append(Point(self.x, self.y))

    def normalize_heading(self) -> None:
        heading = self.heading % 360.0
        # float modulo can round a tiny negative up to exactly 360
        self.heading = 0.0 if heading >= 360.0 else heading

    def __repr__(self) -> str:
        return f"TurtleState({self.name}, x={self.x:.2f}, y={self.y:.2f}, heading={self.heading:.2f})"
