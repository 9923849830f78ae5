"""Type definitions for Turtle World."""

from .drawing import (
    RGB,
    Font,
    Point,
    PenState,
    PathSegment,
    Fill,
    Writing,
    Dot,
    DrawingHistory,
)
from .commands import (
    Command,
    CommandKind,
)
from .shapes import (
    Shape,
    DEFAULT_SHAPES,
    CIRCLE_MARKER_RADIUS,
)

__all__ = [
    # Drawing
    "RGB",
    "Font",
    "Point",
    "PenState",
    "PathSegment",
    "Fill",
    "Writing",
    "Dot",
    "DrawingHistory",
    # Commands
    "Command",
    "CommandKind",
    # Shapes
    "Shape",
    "DEFAULT_SHAPES",
    "CIRCLE_MARKER_RADIUS",
]
