"""Animation drivers: one state machine per in-flight command.

Each driver is started once with the current time and then stepped once per
frame until it reports ``DriverState.COMPLETE``. Drivers with a zero duration
complete inside ``start()``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from turtle_world.color import normalize_color
from turtle_world.types import Command, CommandKind, Dot, Fill, Point, Writing

if TYPE_CHECKING:
    from turtle_world.engine.agent_state import TurtleState
    from turtle_world.engine.surface import Surface


class DriverState(Enum):
    """Lifecycle of a driver."""

    NOT_STARTED = "not_started"
    INTERPOLATING = "interpolating"
    COMPLETE = "complete"


def animation_duration(amount: float, speed: float, factor: float) -> float:
    """Seconds needed to cover ``amount`` units at ``speed``; 0 when speed is 0."""
    if speed == 0:
        return 0.0
    return abs(amount) / (speed * factor)


def default_arc_steps(radius: float, extent: float) -> int:
    """Number of chords used for an arc when the caller gives none."""
    arc_length = abs(2 * math.pi * radius * (extent / 360))
    return max(12, min(360, math.floor(arc_length / 4) + 6))


class AnimationDriver:
    """Base class for command drivers."""

    def __init__(self, surface: Surface, agent: Optional[TurtleState]):
        self.surface = surface
        self.agent = agent
        self.state = DriverState.NOT_STARTED

    @property
    def done(self) -> bool:
        return self.state is DriverState.COMPLETE

    def start(self, now: float) -> DriverState:
        raise NotImplementedError

    def step(self, now: float) -> DriverState:
        return self.state

    def _complete(self) -> DriverState:
        self.state = DriverState.COMPLETE
        return self.state


class InterpolatingDriver(AnimationDriver):
    """Shared progress bookkeeping for time-based interpolation."""

    def __init__(self, surface: Surface, agent: TurtleState):
        super().__init__(surface, agent)
        self.start_time = 0.0
        self.duration = 0.0

    def start(self, now: float) -> DriverState:
        if not self._prepare():
            return self._complete()

        self.start_time = now
        if self.duration == 0:
            self._apply(1.0)
            self.surface.redraw()
            return self._complete()

        self.state = DriverState.INTERPOLATING
        return self.state

    def step(self, now: float) -> DriverState:
        if self.state is not DriverState.INTERPOLATING:
            return self.state

        progress = (now - self.start_time) / self.duration
        progress = max(0.0, min(1.0, progress))
        self._apply(progress)
        self.surface.redraw()

        if progress >= 1.0:
            return self._complete()
        return self.state

    def _prepare(self) -> bool:
        """Compute start and target values; return False for a no-op."""
        raise NotImplementedError

    def _apply(self, progress: float) -> None:
        raise NotImplementedError


class LinearMoveDriver(InterpolatingDriver):
    """Moves a turtle along a straight line, recording a point per frame."""

    def __init__(
        self,
        surface: Surface,
        agent: TurtleState,
        distance: Optional[float] = None,
        target: Optional[tuple[float, float]] = None,
    ):
        """Create a move by signed distance along the heading, or to a target.

        Args:
            surface: The owning surface.
            agent: The turtle to move.
            distance: Signed distance in pixels (forward/backward).
            target: Absolute target in surface pixels (goto).
        """
        super().__init__(surface, agent)
        self.distance = distance
        self.target = target
        self._segment = None

    def _prepare(self) -> bool:
        agent = self.agent
        self.start_x, self.start_y = agent.x, agent.y

        if self.target is None:
            distance = float(self.distance or 0)
            if distance == 0:
                return False
            rad = math.radians(agent.heading)
            self.target_x = self.start_x + math.cos(rad) * distance
            self.target_y = self.start_y - math.sin(rad) * distance
        else:
            self.target_x, self.target_y = float(self.target[0]), float(self.target[1])
            distance = math.hypot(self.target_x - self.start_x, self.target_y - self.start_y)
            if distance < self.surface.animation.goto_epsilon:
                return False

        self.duration = animation_duration(
            distance, agent.speed, self.surface.animation.linear_speed_factor
        )
        self._segment = agent.current_segment
        return True

    def _apply(self, progress: float) -> None:
        agent = self.agent
        if progress >= 1.0:
            agent.x, agent.y = self.target_x, self.target_y
        else:
            agent.x = self.start_x + (self.target_x - self.start_x) * progress
            agent.y = self.start_y + (self.target_y - self.start_y) * progress
        agent.record_point(self._segment)


class RotateDriver(InterpolatingDriver):
    """Turns a turtle; positive angles turn counter-clockwise."""

    def __init__(self, surface: Surface, agent: TurtleState, angle: float):
        super().__init__(surface, agent)
        self.angle = float(angle or 0)

    def _prepare(self) -> bool:
        if self.angle == 0:
            return False
        self.start_heading = self.agent.heading
        self.duration = animation_duration(
            self.angle, self.agent.speed, self.surface.animation.rotational_speed_factor
        )
        return True

    def _apply(self, progress: float) -> None:
        self.agent.heading = self.start_heading + self.angle * progress
        if progress >= 1.0:
            self.agent.heading = self.start_heading + self.angle
            self.agent.normalize_heading()


class ArcDriver(AnimationDriver):
    """Draws an arc as a chain of (half turn, chord, half turn) steps.

    The turtle's speed is raised to the arc speed while drawing and restored
    when the arc finishes or a step fails.
    """

    def __init__(
        self,
        surface: Surface,
        agent: TurtleState,
        radius: float,
        extent: Optional[float] = None,
        steps: Optional[int] = None,
    ):
        super().__init__(surface, agent)
        self.radius = float(radius)
        self.extent = 360.0 if extent is None else float(extent)
        self.steps = int(steps) if steps else default_arc_steps(self.radius, self.extent)

        half_turn = self.extent / self.steps / 2
        chord = 2 * self.radius * math.sin(math.radians(half_turn))
        # negative radius turns right; the chord keeps its sign and runs backward
        if self.radius < 0:
            half_turn = -half_turn
        self.half_turn = half_turn
        self.chord = chord

        self._pending: list[Callable[[], AnimationDriver]] = []
        self._current: Optional[AnimationDriver] = None
        self._original_speed = agent.speed

    def start(self, now: float) -> DriverState:
        agent = self.agent
        self._original_speed = agent.speed
        if agent.speed > 0:
            agent.speed = self.surface.animation.arc_speed

        for _ in range(self.steps):
            self._pending.append(lambda: RotateDriver(self.surface, self.agent, self.half_turn))
            self._pending.append(lambda: LinearMoveDriver(self.surface, self.agent, distance=self.chord))
            self._pending.append(lambda: RotateDriver(self.surface, self.agent, self.half_turn))

        self.state = DriverState.INTERPOLATING
        return self._guarded(self._advance, now)

    def step(self, now: float) -> DriverState:
        if self.state is not DriverState.INTERPOLATING:
            return self.state
        return self._guarded(self._advance, now)

    def _guarded(self, advance: Callable[[float], DriverState], now: float) -> DriverState:
        try:
            return advance(now)
        except Exception:
            self.agent.speed = self._original_speed
            raise

    def _advance(self, now: float) -> DriverState:
        while True:
            if self._current is None:
                if not self._pending:
                    self.agent.speed = self._original_speed
                    return self._complete()
                self._current = self._pending.pop(0)()
                state = self._current.start(now)
            else:
                state = self._current.step(now)

            if state is not DriverState.COMPLETE:
                return self.state
            self._current = None


class InstantDriver(AnimationDriver):
    """Applies a state change in a single tick followed by one redraw."""

    def __init__(self, surface: Surface, command: Command):
        super().__init__(surface, command.agent)
        self.command = command

    def start(self, now: float) -> DriverState:
        handler = getattr(self, f"_do_{self.command.kind.value}")
        handler(*self.command.args)
        self.surface.redraw()
        return self._complete()

    # --- surface ----------------------------------------------------------

    def _do_bgcolor(self, *color) -> None:
        self.surface.background = normalize_color(*color)

    # --- pen --------------------------------------------------------------

    def _do_pencolor(self, *color) -> None:
        self.agent.pen.color = normalize_color(*color)
        self.agent.start_new_segment()

    def _do_fillcolor(self, *color) -> None:
        self.agent.pen.fill_color = normalize_color(*color)

    def _do_color(self, *args) -> None:
        pen = self.agent.pen
        if len(args) == 1 or (len(args) == 3 and normalize_color(*args) is not None):
            pen.color = pen.fill_color = normalize_color(*args)
        elif len(args) >= 2:
            pen.color = normalize_color(args[0])
            pen.fill_color = normalize_color(args[1])
        self.agent.start_new_segment()

    def _do_pensize(self, width) -> None:
        self.agent.pen.width = width
        self.agent.start_new_segment()

    def _do_penup(self) -> None:
        self.agent.pen.is_down = False
        self.agent.start_new_segment()

    def _do_pendown(self) -> None:
        self.agent.pen.is_down = True
        self.agent.start_new_segment()

    # --- fills ------------------------------------------------------------

    def _do_begin_fill(self) -> None:
        agent = self.agent
        agent.pen.is_filling = True
        agent.fill_path = [Point(agent.x, agent.y)]

    def _do_end_fill(self) -> None:
        agent = self.agent
        agent.pen.is_filling = False
        if len(agent.fill_path) > 2:
            agent.history.fills.append(Fill(path=list(agent.fill_path), color=agent.pen.fill_color))
        agent.fill_path = []

    # --- turtle -----------------------------------------------------------

    def _do_setheading(self, angle) -> None:
        self.agent.heading = float(angle)
        self.agent.normalize_heading()

    def _do_hideturtle(self) -> None:
        self.agent.visible = False

    def _do_showturtle(self) -> None:
        self.agent.visible = True

    def _do_shape(self, name) -> None:
        self.agent.shape_name = name

    def _do_clear(self) -> None:
        self.agent.clear_drawings()

    def _do_reset(self) -> None:
        self.agent.reset()

    # --- stamps -----------------------------------------------------------

    def _do_write(self, text, move, align, font) -> None:
        agent = self.agent
        agent.history.writings.append(
            Writing(text=text, x=agent.x, y=agent.y, align=align, font=font, color=agent.pen.color)
        )
        if move:
            width = self.surface.measure_text(text, font)
            rad = math.radians(agent.heading)
            agent.x += math.cos(rad) * width
            agent.y -= math.sin(rad) * width
            agent.start_new_segment()

    def _do_dot(self, size=None, *color) -> None:
        agent = self.agent
        size = size or agent.pen.width + 4
        dot_color = normalize_color(*color) or agent.pen.color
        agent.history.dots.append(Dot(x=agent.x, y=agent.y, size=size, color=dot_color))


_LINEAR = {CommandKind.FORWARD: 1, CommandKind.BACKWARD: -1}
_ROTATIONAL = {CommandKind.LEFT: 1, CommandKind.RIGHT: -1}


def make_driver(surface: Surface, command: Command) -> AnimationDriver:
    """Build the driver for a dequeued command.

    Args:
        surface: The owning surface.
        command: The command to execute.

    Returns:
        A driver in the NOT_STARTED state.
    """
    kind = command.kind
    if kind in _LINEAR:
        return LinearMoveDriver(surface, command.agent, distance=_LINEAR[kind] * float(command.args[0]))
    if kind in _ROTATIONAL:
        return RotateDriver(surface, command.agent, _ROTATIONAL[kind] * float(command.args[0]))
    if kind is CommandKind.GOTO:
        return LinearMoveDriver(surface, command.agent, target=(command.args[0], command.args[1]))
    if kind is CommandKind.CIRCLE:
        return ArcDriver(surface, command.agent, *command.args)
    return InstantDriver(surface, command)
