"""Public turtle API.

Every mutating call queues a command on the surface and returns the turtle
for chaining; the effect happens when the surface's scheduler reaches it.
Queries read the turtle's current state synchronously.
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any, Optional, Sequence, Union

from turtle_world.config import SPEED_PRESETS, AnimationConfig, SurfaceConfig
from turtle_world.engine.surface import Surface
from turtle_world.renderer.base import TEXT_ALIGNMENTS, Canvas
from turtle_world.types import RGB, Command, CommandKind, Font

logger = logging.getLogger(__name__)


class Turtle:
    """A pen-bearing agent on a shared surface."""

    def __init__(self, surface: Surface, name: Optional[str] = None):
        """Create a turtle and register it on a surface.

        Args:
            surface: The surface to draw on.
            name: Optional label used in logs.
        """
        self.name = name
        self.screen = surface
        self.state = surface.register(self)
        self.name = self.state.name

    def _queue(self, kind: CommandKind, *args: Any) -> "Turtle":
        self.screen.enqueue(Command(self.state, kind, args))
        return self

    def __repr__(self) -> str:
        x, y = self.position()
        return f"Turtle({self.name}, pos=({x:.2f}, {y:.2f}), heading={self.heading():.2f})"

    # --- motion -----------------------------------------------------------

    def forward(self, distance: float) -> "Turtle":
        """Move forward by ``distance`` pixels along the heading."""
        return self._queue(CommandKind.FORWARD, distance)

    def backward(self, distance: float) -> "Turtle":
        """Move backward by ``distance`` pixels without turning."""
        return self._queue(CommandKind.BACKWARD, distance)

    def left(self, angle: float) -> "Turtle":
        """Turn counter-clockwise by ``angle`` degrees."""
        return self._queue(CommandKind.LEFT, angle)

    def right(self, angle: float) -> "Turtle":
        """Turn clockwise by ``angle`` degrees."""
        return self._queue(CommandKind.RIGHT, angle)

    def goto(self, x: Union[float, Sequence[float]], y: Optional[float] = None) -> "Turtle":
        """Move to ``(x, y)``; (0, 0) is the surface centre and y points up.

        Accepts either two numbers or a single ``(x, y)`` pair.
        """
        if y is None:
            x, y = x
        surface_x = x + self.screen.width / 2
        surface_y = -y + self.screen.height / 2
        return self._queue(CommandKind.GOTO, surface_x, surface_y)

    def setheading(self, angle: float) -> "Turtle":
        """Point the turtle at ``angle`` degrees (0 east, 90 north)."""
        return self._queue(CommandKind.SETHEADING, angle)

    def home(self) -> "Turtle":
        """Go to the origin, then face east. Queued as two commands."""
        self.goto(0, 0)
        self.setheading(0)
        return self

    def circle(self, radius: float, extent: Optional[float] = None, steps: Optional[int] = None) -> "Turtle":
        """Draw an arc; positive radius turns left (counter-clockwise)."""
        return self._queue(CommandKind.CIRCLE, radius, extent, steps)

    # --- pen --------------------------------------------------------------

    def penup(self) -> "Turtle":
        return self._queue(CommandKind.PENUP)

    def pendown(self) -> "Turtle":
        return self._queue(CommandKind.PENDOWN)

    def pensize(self, width: Optional[float] = None) -> Union[float, "Turtle"]:
        """Get the pen width, or queue a change to it."""
        if width is None:
            return self.state.pen.width
        return self._queue(CommandKind.PENSIZE, width)

    def pencolor(self, *color: Any) -> Union[Optional[RGB], "Turtle"]:
        """Get the pen color, or queue a change to it."""
        if not color:
            return self.state.pen.color
        return self._queue(CommandKind.PENCOLOR, *color)

    def fillcolor(self, *color: Any) -> Union[Optional[RGB], "Turtle"]:
        """Get the fill color, or queue a change to it."""
        if not color:
            return self.state.pen.fill_color
        return self._queue(CommandKind.FILLCOLOR, *color)

    def color(self, *colors: Any) -> Union[tuple[Optional[RGB], Optional[RGB]], "Turtle"]:
        """Get ``(pencolor, fillcolor)``, or queue a change to both.

        One argument (or an r, g, b triple) sets both colors; two arguments
        set the pen and fill colors respectively.
        """
        if not colors:
            return (self.state.pen.color, self.state.pen.fill_color)
        return self._queue(CommandKind.COLOR, *colors)

    def begin_fill(self) -> "Turtle":
        return self._queue(CommandKind.BEGIN_FILL)

    def end_fill(self) -> "Turtle":
        """Close the current fill; fills with fewer than 3 points are dropped."""
        return self._queue(CommandKind.END_FILL)

    # --- stamps -----------------------------------------------------------

    def write(
        self,
        arg: Any,
        move: bool = False,
        align: str = "left",
        font: Sequence[Any] = ("Arial", 8, "normal"),
    ) -> "Turtle":
        """Write text at the current position.

        Args:
            arg: Object to write; converted with str().
            move: Advance the turtle by the text width.
            align: "left", "center" or "right".
            font: (name, size in points, style).
        """
        if align not in TEXT_ALIGNMENTS:
            logger.warning("Unknown text alignment: %s", align)
            return self
        return self._queue(CommandKind.WRITE, str(arg), bool(move), align, Font(*font))

    def dot(self, size: Optional[float] = None, *color: Any) -> "Turtle":
        """Stamp a filled circle; size defaults to pensize + 4, color to the pen color."""
        return self._queue(CommandKind.DOT, size, *color)

    # --- appearance -------------------------------------------------------

    def shape(self, name: Optional[str] = None) -> Union[str, "Turtle"]:
        """Get the shape name, or queue a change to a registered shape."""
        if name is None:
            return self.state.shape_name
        if not self.screen.has_shape(name):
            logger.warning("Unknown shape: %s", name)
            return self
        return self._queue(CommandKind.SHAPE, name)

    def hideturtle(self) -> "Turtle":
        return self._queue(CommandKind.HIDETURTLE)

    def showturtle(self) -> "Turtle":
        return self._queue(CommandKind.SHOWTURTLE)

    def speed(self, speed: Union[str, float, None] = None) -> Union[float, "Turtle"]:
        """Get or immediately set the animation speed.

        Named presets are "fastest" (0), "fast" (10), "normal" (6), "slow" (3)
        and "slowest" (1). Numbers outside 0.5..10 mean fastest (0).
        """
        if speed is None:
            return self.state.speed

        limits: AnimationConfig = self.screen.animation
        if isinstance(speed, str):
            if speed in SPEED_PRESETS:
                self.state.speed = SPEED_PRESETS[speed]
        elif isinstance(speed, Real) and not isinstance(speed, bool):
            if speed > limits.max_speed or speed < limits.min_speed:
                self.state.speed = 0
            else:
                self.state.speed = speed
        return self

    # --- history ----------------------------------------------------------

    def clear(self) -> "Turtle":
        """Delete this turtle's drawings; position and pen stay."""
        return self._queue(CommandKind.CLEAR)

    def reset(self) -> "Turtle":
        """Delete drawings and restore the initial pose, pen and appearance."""
        return self._queue(CommandKind.RESET)

    # --- queries ----------------------------------------------------------

    def position(self) -> tuple[float, float]:
        """Current position, origin at the surface centre, y up."""
        return (
            self.state.x - self.screen.width / 2,
            -(self.state.y - self.screen.height / 2),
        )

    def xcor(self) -> float:
        return self.position()[0]

    def ycor(self) -> float:
        return self.position()[1]

    def heading(self) -> float:
        return self.state.heading

    def isdown(self) -> bool:
        return self.state.pen.is_down

    def isvisible(self) -> bool:
        return self.state.visible

    def filling(self) -> bool:
        return self.state.pen.is_filling

    def getscreen(self) -> Surface:
        return self.screen

    def expose(self, target: Any) -> "Turtle":
        """Bind this turtle's drawing methods onto ``target``."""
        from .expose import expose

        expose(self, target)
        return self

    # Aliases
    fd = forward
    bk = backward
    back = backward
    lt = left
    rt = right
    setpos = goto
    setposition = goto
    seth = setheading
    pu = penup
    up = penup
    pd = pendown
    down = pendown
    width = pensize
    ht = hideturtle
    st = showturtle
    pos = position


def turtle_on_new_surface(
    canvas: Optional[Canvas] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    background: Optional[str] = None,
    animation: Optional[AnimationConfig] = None,
    name: Optional[str] = None,
) -> Turtle:
    """Create a new surface and attach a fresh turtle to it.

    Args:
        canvas: Existing canvas to draw on; a RasterCanvas is created otherwise.
        width: Width of a created canvas.
        height: Height of a created canvas.
        background: Initial background color string.
        animation: Animation timing constants.
        name: Optional turtle label.

    Returns:
        The new turtle; its surface is available as ``turtle.screen``.
    """
    defaults = SurfaceConfig()
    config = SurfaceConfig(
        width=width or defaults.width,
        height=height or defaults.height,
        background=background or defaults.background,
        target_fps=defaults.target_fps,
    )
    surface = Surface(canvas, config=config, animation=animation)
    return surface.create_turtle(name=name)
