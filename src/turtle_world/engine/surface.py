"""The shared drawing surface and its unified redraw."""

from __future__ import annotations

import logging
import math
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, Union

from turtle_world.color import normalize_color
from turtle_world.config import AnimationConfig, SurfaceConfig
from turtle_world.renderer.base import Canvas
from turtle_world.renderer.raster import RasterCanvas
from turtle_world.types import DEFAULT_SHAPES, Command, CommandKind, Font, Shape
from .agent_state import TurtleState
from .frame_loop import FrameLoop
from .scheduler import CommandQueue, Scheduler

if TYPE_CHECKING:
    from turtle_world.app.turtle import Turtle

logger = logging.getLogger(__name__)


class Surface:
    """Owns the canvas, background, registered turtles and the command queue.

    ``redraw`` is the only code path that paints. It rebuilds the whole frame
    from the turtles' recorded state: per turtle in registration order it
    paints fills, strokes, writings, dots and finally the marker.
    """

    def __init__(
        self,
        canvas: Optional[Canvas] = None,
        config: Optional[SurfaceConfig] = None,
        animation: Optional[AnimationConfig] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize the surface.

        Args:
            canvas: A ready-to-draw canvas. Defaults to a new RasterCanvas
                sized from the config.
            config: Surface defaults (size, background, frame rate).
            animation: Animation timing constants.
            clock: Time source for the frame loop.
        """
        self.config = config or SurfaceConfig()
        self.animation = animation or AnimationConfig()
        self.canvas = canvas if canvas is not None else RasterCanvas(self.config.width, self.config.height)

        self.background = normalize_color(self.config.background)
        self.agents: list[TurtleState] = []
        self._handles: list[Turtle] = []
        self._shapes: dict[str, Shape] = dict(DEFAULT_SHAPES)

        self.queue = CommandQueue()
        self.scheduler = Scheduler(self, self.queue)
        self.frame_loop = FrameLoop(self.scheduler, self.config.target_fps, clock=clock)
        self.frame_loop.start()

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    # --- turtles ----------------------------------------------------------

    def create_turtle(self, name: Optional[str] = None) -> Turtle:
        """Create a turtle attached to this surface."""
        from turtle_world.app.turtle import Turtle

        return Turtle(self, name=name)

    def register(self, handle: Turtle) -> TurtleState:
        """Register a turtle facade and create its state at the surface centre."""
        state = TurtleState(
            self.width / 2,
            self.height / 2,
            default_speed=self.animation.default_speed,
            name=handle.name,
        )
        self.agents.append(state)
        self._handles.append(handle)
        return state

    def turtles(self) -> list[Turtle]:
        """Registered turtles in paint order (back to front)."""
        return list(self._handles)

    # --- queue ------------------------------------------------------------

    def enqueue(self, command: Command) -> None:
        self.queue.enqueue(command)

    def bgcolor(self, *color: Any) -> Any:
        """Get the background color, or queue a change to it.

        Returns:
            The current RGB background when called without arguments,
            otherwise the surface for chaining.
        """
        if not color:
            return self.background
        self.enqueue(Command(None, CommandKind.BGCOLOR, color))
        return self

    # --- shapes -----------------------------------------------------------

    def register_shape(self, name: str, outline: Union[str, Sequence[Sequence[float]]]) -> None:
        """Add a marker shape.

        Args:
            name: Shape name usable with Turtle.shape().
            outline: Polygon vertices in marker coordinates, or "circle".
        """
        if isinstance(outline, str):
            if outline != "circle":
                raise ValueError(f"Unknown outline keyword: {outline}")
            self._shapes[name] = Shape(name)
            return
        vertices = tuple((float(x), float(y)) for x, y in outline)
        if len(vertices) < 3:
            raise ValueError("A shape outline needs at least 3 vertices")
        self._shapes[name] = Shape(name, vertices)

    addshape = register_shape

    def has_shape(self, name: str) -> bool:
        return name in self._shapes

    def get_shape(self, name: str) -> Optional[Shape]:
        return self._shapes.get(name)

    def shapes(self) -> list[str]:
        return sorted(self._shapes)

    # --- rendering --------------------------------------------------------

    def measure_text(self, text: str, font: Font) -> float:
        """Measure text width with the canvas's metrics."""
        ctx = self.canvas
        ctx.font = font
        return ctx.measure_text(text)

    def redraw(self) -> None:
        """Repaint the entire surface from the turtles' state."""
        ctx = self.canvas

        # 1. Clear and flood with the background
        ctx.clear_rect(0, 0, self.width, self.height)
        if self.background is not None:
            ctx.fill_style = self.background
            ctx.fill_rect(0, 0, self.width, self.height)

        # 2. Every turtle, back to front
        for agent in self.agents:
            history = agent.history

            for fill in history.fills:
                if fill.color is None:
                    continue
                ctx.begin_path()
                ctx.move_to(fill.path[0].x, fill.path[0].y)
                for point in fill.path[1:]:
                    ctx.line_to(point.x, point.y)
                ctx.close_path()
                ctx.fill_style = fill.color
                ctx.fill()

            for segment in history.segments:
                if not segment.is_strokable or segment.pen.color is None:
                    continue
                ctx.begin_path()
                ctx.stroke_style = segment.pen.color
                ctx.line_width = segment.pen.width
                ctx.move_to(segment.points[0].x, segment.points[0].y)
                for point in segment.points[1:]:
                    ctx.line_to(point.x, point.y)
                ctx.stroke()

            for writing in history.writings:
                if writing.color is None:
                    continue
                ctx.fill_style = writing.color
                ctx.font = writing.font
                ctx.text_align = writing.align
                ctx.text_baseline = "middle"
                ctx.fill_text(writing.text, writing.x, writing.y)

            for dot in history.dots:
                if dot.color is None:
                    continue
                ctx.begin_path()
                ctx.arc(dot.x, dot.y, dot.size / 2, 0, 2 * math.pi)
                ctx.fill_style = dot.color
                ctx.fill()

            # 3. Marker on top of this turtle's own drawing
            if agent.visible:
                self._paint_marker(agent)

    def _paint_marker(self, agent: TurtleState) -> None:
        shape = self._shapes.get(agent.shape_name)
        if shape is None:
            return

        ctx = self.canvas
        ctx.save()
        ctx.translate(agent.x, agent.y)
        ctx.rotate(-math.radians(agent.heading))

        ctx.begin_path()
        if shape.is_circle:
            ctx.arc(0, 0, shape.radius, 0, 2 * math.pi)
        else:
            first = shape.outline[0]
            ctx.move_to(first[0], first[1])
            for x, y in shape.outline[1:]:
                ctx.line_to(x, y)
            ctx.close_path()

        ctx.fill_style = agent.pen.fill_color
        ctx.stroke_style = agent.pen.color
        ctx.line_width = agent.pen.width
        ctx.fill()
        ctx.stroke()
        ctx.restore()

    # --- running ----------------------------------------------------------

    def mainloop(self, max_frames: Optional[int] = None) -> int:
        """Run the frame loop until every queued command has finished."""
        return self.frame_loop.run_until_idle(max_frames)

    done = mainloop

    def save(self, path: Union[str, Path]) -> Path:
        """Write the current frame to an image file."""
        return self.canvas.save_image(path)
